"""
Fixed encoding rules.

This file exists to make non-goals explicit and enforceable.
"""

TARGET_ENCODING = "ascii"
PLACEHOLDER = "?"  # 63, substituted for every non-ASCII character
PROMPT = "Please enter your string: "
LINE_FORMAT = "{value} = {char}"
