"""Byte code definitions and classification for all 256 values.

Every byte that can appear in a packed UTF-8 slot gets a classification
from its leading bits. Classification determines how many bytes a
sequence declares and which of its bits are fixed markers.
"""

from dataclasses import dataclass
from enum import Enum


class ByteCategory(Enum):
    ASCII = "ascii"
    CONTINUATION = "continuation"
    LEAD2 = "lead2"
    LEAD3 = "lead3"
    LEAD4 = "lead4"
    INVALID = "invalid"


@dataclass(frozen=True)
class ByteCode:
    value: int
    hex: str
    category: ByteCategory
    sequence_length: int
    control_mask: int
    pattern: str

    @property
    def can_lead(self) -> bool:
        return self.sequence_length > 0


# Fixed leading-bit masks for each leading form
CONTROL_MASK_LEAD2 = 0b1110_0000
CONTROL_MASK_LEAD3 = 0b1111_0000
CONTROL_MASK_LEAD4 = 0b1111_1000
CONTROL_MASK_CONTINUATION = 0b1100_0000

# The four legal leading patterns, in sequence-length order
LEADING_PATTERNS = ("0xxxxxxx", "110xxxxx", "1110xxxx", "11110xxx")


def is_continuation_byte(value: int) -> bool:
    """True iff the byte has the 10xxxxxx bit pattern."""
    return (value >> 6) == 0b10


def classify_byte(value: int) -> ByteCode:
    """Classify a single byte value."""
    if not 0 <= value <= 0xFF:
        raise ValueError(f"Byte value must be 0-255, got {value}")
    h = f"0x{value:02X}"

    # 1-byte form has no marked control bits; the single leading 0 is data
    if value >> 7 == 0:
        return ByteCode(value, h, ByteCategory.ASCII, 1, 0, "0xxxxxxx")
    if is_continuation_byte(value):
        return ByteCode(value, h, ByteCategory.CONTINUATION, 0,
                        CONTROL_MASK_CONTINUATION, "10xxxxxx")
    if value >> 5 == 0b110:
        return ByteCode(value, h, ByteCategory.LEAD2, 2,
                        CONTROL_MASK_LEAD2, "110xxxxx")
    if value >> 4 == 0b1110:
        return ByteCode(value, h, ByteCategory.LEAD3, 3,
                        CONTROL_MASK_LEAD3, "1110xxxx")
    if value >> 3 == 0b11110:
        return ByteCode(value, h, ByteCategory.LEAD4, 4,
                        CONTROL_MASK_LEAD4, "11110xxx")

    return ByteCode(value, h, ByteCategory.INVALID, 0, 0, "11111xxx")


# Build the complete table
BYTE_TABLE = tuple(classify_byte(v) for v in range(256))
