"""Code point to packed UTF-8 encoding.

The inverse of the decoder for minimal encodings: always picks the
shortest form, so the result is never overlong.
"""

from __future__ import annotations

import re

from .decoder import MAX_CODE_POINT
from .packed import pack_bytes

HEX_RE = re.compile(r"[0-9A-Fa-f]+")

# (largest code point, lead byte marker) per sequence length
_FORMS = (
    (0x7F, 0x00),
    (0x7FF, 0xC0),
    (0xFFFF, 0xE0),
    (MAX_CODE_POINT, 0xF0),
)


def strip_prefix(text: str) -> str:
    """Drop surrounding whitespace and a U+ or 0x prefix."""
    cleaned = text.strip()
    if cleaned[:2].upper() in ("U+", "0X"):
        cleaned = cleaned[2:]
    return cleaned


def parse_code_point(text: str) -> int | None:
    """Parse a hex code point string; None if it is not hex.

    Accepts an optional U+ or 0x prefix, any case and leading zeros.
    """
    cleaned = strip_prefix(text)
    if not HEX_RE.fullmatch(cleaned):
        return None
    return int(cleaned, 16)


def utf8_bytes(value: int) -> tuple[int, ...] | None:
    """The minimal UTF-8 byte sequence for a code point, or None."""
    if not 0 <= value <= MAX_CODE_POINT:
        return None
    for length, (limit, marker) in enumerate(_FORMS, start=1):
        if value <= limit:
            break
    if length == 1:
        return (value,)
    continuation = []
    for _ in range(length - 1):
        continuation.append(0x80 | (value & 0x3F))
        value >>= 6
    return (marker | value,) + tuple(reversed(continuation))


def encode_int(value: int) -> int | None:
    """Encode an integer code point into a packed value, or None."""
    encoded = utf8_bytes(value)
    if encoded is None:
        return None
    return pack_bytes(*encoded)


def encode_code_point(text: str) -> int | None:
    """Encode a hex code point string into a packed value, or None.

    None when the text is not hex, is negative, or exceeds U+10FFFF.
    """
    value = parse_code_point(text)
    if value is None:
        return None
    return encode_int(value)
