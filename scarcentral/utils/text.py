"""Small string helpers for curated catalogue text."""

import re

_NEWLINE_PATTERN = re.compile(r"[\r\n]")


def strip_newlines(text: str) -> str:
    """Remove every line feed and carriage return from ``text``.

    >>> strip_newlines("Hello\\nWorld\\r!")
    'HelloWorld!'
    """
    return _NEWLINE_PATTERN.sub("", text)
