"""
Line-safe escaping of encoded setting values.

Encoded bytes are mapped one-to-one onto code points U+0000..U+00FF and the
characters that would break the line structure of a settings file are
replaced by two-character escape sequences.
"""

import re

# Order matters: the backslash has to be escaped before the others.
ESCAPES = (
    ("\\", "\\\\"),
    ("\n", "\\n"),
    ("\r", "\\r"),
)

_UNESCAPES = {escaped[1]: raw for raw, escaped in ESCAPES}
_ESCAPE_SEQUENCE = re.compile(r"\\([\\nr])")


def bytes_to_text(data: bytes) -> str:
    """Map each byte onto the code point with the same number."""
    return bytes(data).decode("latin-1")


def text_to_bytes(text: str) -> bytes:
    """Inverse of bytes_to_text. Raises UnicodeEncodeError above U+00FF."""
    return text.encode("latin-1")


def escape(data: bytes) -> str:
    """Escape encoded bytes so they fit on a single line of text."""
    text = bytes_to_text(data)
    for raw, escaped in ESCAPES:
        text = text.replace(raw, escaped)
    return text


def unescape(text: str) -> bytes:
    """Restore the bytes hidden by escape().

    Sequences are resolved in one left-to-right pass, so an escaped
    backslash followed by ``n`` never turns into a newline.
    """
    raw = _ESCAPE_SEQUENCE.sub(lambda match: _UNESCAPES[match.group(1)], text)
    return text_to_bytes(raw)
