import sys

from .encode import run


def main() -> int:
    run(getattr(sys.stdin, "buffer", sys.stdin), sys.stdout)
    return 0
