"""
=============================================================================
BYTE ENCODING
=============================================================================

Converts between protocol text and the raw bytes a socket carries.

The request head of an HTTP/1.1 message is ASCII. This module uses the
simplest model that covers it: ONE CHARACTER = ONE BYTE.

    text  "GET"         ──string_to_buffer──►   b"\\x47\\x45\\x54"
    bytes b"\\x47\\x45\\x54"  ──buffer_to_string──►   "GET"

    ┌────────────┬────────────┐
    │ Character  │   Byte     │
    ├────────────┼────────────┤
    │ "G" (71)   │   0x47     │
    │ "é" (233)  │   0xE9     │   Latin-1 still fits in one byte
    │ "€" (8364) │   0xAC     │   truncated to the low byte!
    └────────────┴────────────┘

No multi-byte encoding (UTF-8) is performed. Content-Length values computed
elsewhere in this package count characters, which equals the byte count
only under this model.

=============================================================================
"""

from typing import Iterable, Union


BufferLike = Union[bytes, bytearray, memoryview, Iterable[int]]


def string_to_buffer(text: str) -> bytes:
    """
    Convert a string to a buffer, one byte per character.

    Each character's code point becomes one byte. Code points above 255
    keep only their low byte.

    Args:
        text: The string to convert.

    Returns:
        Bytes of the same length as ``text``.

    Example:
        >>> string_to_buffer("HTTP/1.1 200 OK")
        b'HTTP/1.1 200 OK'
    """
    return bytes(ord(char) & 0xFF for char in text)


def buffer_to_string(buffer: BufferLike) -> str:
    """
    Convert a buffer back to a string, one character per byte.

    Latin-1 maps bytes 0-255 to the code points 0-255, which is exactly
    the inverse of string_to_buffer() for single-byte text.

    Raises:
        ValueError: If an iterable holds a value outside 0-255.
        RequestParser.parse() reports this as HTTPParseError.
    """
    if not isinstance(buffer, (bytes, bytearray, memoryview)):
        buffer = bytes(buffer)
    return bytes(buffer).decode("latin-1")
