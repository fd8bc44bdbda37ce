"""UTF-8 decoding of a packed 4-byte slot.

Decoding runs in two phases. Shapes that can never be valid are
rejected first, each with its own message; only a structurally sound
sequence is then decoded. Overlong forms are decoded and flagged with
the number of bytes they waste rather than rejected.

Results are tagged: a Decoded carries byte/code point/character fields,
a DecodeFailure carries only the error.
"""

from __future__ import annotations

from dataclasses import dataclass

from .byte_codes import (
    BYTE_TABLE,
    LEADING_PATTERNS,
    ByteCategory,
    is_continuation_byte,
)
from .packed import split_bytes

MAX_CODE_POINT = 0x10FFFF
REPLACEMENT_CHARACTER = "�"

CONVERSION_ERROR = "Error converting code point to string."

ERROR_LEADING_CONTINUATION = (
    "First byte cannot start with `10xxxxxx`. A leading byte must match one of "
    + ", ".join(f"`{p}`" for p in LEADING_PATTERNS) + "."
)
ERROR_LEADING_TOO_LONG = (
    "First byte cannot start with `11111xxx`. Sequences of 5 or more bytes "
    "are not valid UTF-8."
)
ERROR_CONTINUATION = {
    2: "For a 2-byte sequence, the second byte must start with `10xxxxxx`.",
    3: "For a 3-byte sequence, the second and third bytes must start with `10xxxxxx`.",
    4: "For a 4-byte sequence, the second, third, and fourth bytes must start with `10xxxxxx`.",
}

# Smallest code point that needs 1, 2, 3, 4 bytes
_MIN_FOR_LENGTH = (0x0, 0x80, 0x800, 0x10000)


@dataclass(frozen=True)
class Decoded:
    """A structurally valid sequence and what it decodes to.

    error is only set when the code point lies beyond U+10FFFF; the
    character is then the replacement character.
    """
    value: int
    length: int
    utf: str
    codepoint: str
    character: str
    overlong_by: int = 0
    error: str | None = None

    ok = True

    @property
    def overlong(self) -> bool:
        return self.overlong_by > 0


@dataclass(frozen=True)
class DecodeFailure:
    """A sequence rejected before decoding."""
    error: str

    ok = False


def code_point_to_str(value: int) -> tuple[str, str | None]:
    """Convert a code point to (character, error)."""
    if 0 <= value <= MAX_CODE_POINT:
        return chr(value), None
    return REPLACEMENT_CHARACTER, CONVERSION_ERROR


def format_code_point(value: int) -> str:
    """Format as U+XXXX, zero-padded to at least 4 hex digits."""
    return f"U+{value:04X}"


def overlong_by(value: int, length: int) -> int:
    """How many bytes longer than minimal a length-byte form of value is."""
    minimal = 1
    while minimal < 4 and value >= _MIN_FOR_LENGTH[minimal]:
        minimal += 1
    return max(length - minimal, 0)


def _assemble(parts: tuple[int, ...]) -> int:
    """Reconstruct the code point from a structurally valid sequence."""
    length = len(parts)
    if length == 1:
        return parts[0] & 0x7F
    # Lead byte keeps 7 - length payload bits
    value = parts[0] & (0x7F >> length)
    for byte in parts[1:]:
        value = (value << 6) | (byte & 0x3F)
    return value


def decode(packed: int) -> Decoded | DecodeFailure:
    """Decode the UTF-8 sequence held in a packed 32-bit value."""
    parts = split_bytes(packed)
    lead = BYTE_TABLE[parts[0]]

    if lead.category is ByteCategory.CONTINUATION:
        return DecodeFailure(ERROR_LEADING_CONTINUATION)
    if lead.category is ByteCategory.INVALID:
        return DecodeFailure(ERROR_LEADING_TOO_LONG)

    length = lead.sequence_length
    consumed = parts[:length]
    if not all(is_continuation_byte(b) for b in consumed[1:]):
        return DecodeFailure(ERROR_CONTINUATION[length])

    value = _assemble(consumed)
    character, error = code_point_to_str(value)

    return Decoded(
        value=value,
        length=length,
        utf="0x" + "".join(f"{b:02X}" for b in consumed),
        codepoint=format_code_point(value),
        character=character,
        overlong_by=overlong_by(value, length),
        error=error,
    )
