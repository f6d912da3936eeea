"""
Core encode-and-print logic.

Responsibilities:
- decoding of raw input bytes (pipes, redirected files)
- ASCII encoding with a fixed placeholder
- byte/char entries and their printed form
- substitution reporting
"""

from __future__ import annotations

import logging
import re
import sys
from typing import Any, Dict, List, Optional, TextIO

from charset_normalizer import from_bytes

from .models import ByteEntry, EncodingReport, ReportItem
from .rules import LINE_FORMAT, PLACEHOLDER, PROMPT, TARGET_ENCODING

logger = logging.getLogger(__name__)

_NON_ASCII_TEXT = re.compile(r"[^\x00-\x7f]+")
_NON_ASCII_BYTES = re.compile(rb"[\x80-\xff]+")


def _keeps_ascii(raw: bytes, text: str) -> bool:
    """True when every ASCII byte of raw decoded to itself, in place."""
    return _NON_ASCII_TEXT.split(text) == [
        part.decode("ascii") for part in _NON_ASCII_BYTES.split(raw)
    ]


def decode_input(raw: bytes) -> str:
    """
    Decode one raw input line to text.

    Rules:
    - Strict UTF-8 first; terminals and pipes almost always carry it.
    - Otherwise detect best-effort via charset-normalizer and decode with the best guess,
      as long as that guess leaves the ASCII bytes untouched.
    - If that fails too, fall back to UTF-8 with replacement characters.
    """
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        pass

    match = from_bytes(raw).best()
    if match is not None:
        try:
            text = raw.decode(match.encoding)
        except (LookupError, UnicodeDecodeError):
            logger.debug("detected encoding %s could not decode input", match.encoding)
        else:
            if _keeps_ascii(raw, text):
                return text
            logger.debug("detected encoding %s does not preserve ASCII", match.encoding)

    # Last resort: replacement characters still encode to the placeholder
    return raw.decode("utf-8", errors="replace")


def read_line(stream: Any) -> str:
    r"""Read one line from a text or binary stream, without its terminator.

    "\r", "\n" and "\r\n" all end the line. End of input yields "".
    Read failures are not caught.
    """
    line = stream.readline()
    if isinstance(line, bytes):
        line = decode_input(line)
    return re.split(r"\r|\n", line, maxsplit=1)[0]


def encode_ascii(text: str) -> bytes:
    # errors="replace" writes one "?" per unencodable code point
    return text.encode(TARGET_ENCODING, errors="replace")


def byte_entries(text: str) -> List[ByteEntry]:
    return [ByteEntry(value=b, char=chr(b)) for b in encode_ascii(text)]


def format_entry(entry: ByteEntry) -> str:
    return LINE_FORMAT.format(value=entry.value, char=entry.char)


def build_report(text: str, data: bytes) -> EncodingReport:
    """Record every character that was substituted with the placeholder."""
    warnings: list[ReportItem] = []

    for i, ch in enumerate(text):
        if ord(ch) > 127:
            warnings.append(ReportItem(
                position=i,
                issue="non_ascii_replaced",
                value=ch,
                action=f"replaced_with_{ord(PLACEHOLDER)}",
            ))

    return EncodingReport(
        input_chars=len(text),
        output_bytes=len(data),
        replaced=len(warnings),
        warnings=warnings,
    )


def encode_text(text: str) -> Dict[str, Any]:
    """
    Encode one line and return a dict matching the API's response envelope.
    """
    data = encode_ascii(text)
    entries = [ByteEntry(value=b, char=chr(b)) for b in data]
    report = build_report(text, data)

    return {
        "text": text,
        "encoding": TARGET_ENCODING,
        "entries": [e.model_dump() for e in entries],
        "lines": [format_entry(e) for e in entries],
        "report": report.model_dump(),
    }


def run(stdin: Optional[Any] = None, stdout: Optional[TextIO] = None) -> None:
    """Prompt, read one line, encode it and print every byte with its character."""
    if stdin is None:
        stdin = getattr(sys.stdin, "buffer", sys.stdin)
    if stdout is None:
        stdout = sys.stdout

    stdout.write(PROMPT)
    stdout.flush()

    text = read_line(stdin)
    data = encode_ascii(text)

    report = build_report(text, data)
    for item in report.warnings:
        logger.debug("position %s: %r %s", item.position, item.value, item.action)

    for b in data:
        stdout.write(format_entry(ByteEntry(value=b, char=chr(b))) + "\n")
