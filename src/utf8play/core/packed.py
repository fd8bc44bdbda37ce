"""Packed 32-bit value model.

A packed value holds one UTF-8 sequence in four byte slots, most
significant first:

    B1 (bits 31-24)  B2 (23-16)  B3 (15-8)  B4 (7-0)

Shorter sequences are zero-padded on the right.
"""

MAX_PACKED = 0xFFFF_FFFF

# Bytes 2-4 carry their continuation control bits, byte 1 is NUL
DEFAULT_VALUE = 0x0080_8080

SHIFTS = (24, 16, 8, 0)


def check_packed(value: int) -> int:
    """Return value unchanged if it fits in 32 unsigned bits."""
    if not 0 <= value <= MAX_PACKED:
        raise ValueError(f"Packed value must be 0-0x{MAX_PACKED:08X}, got {value}")
    return value


def split_bytes(value: int) -> tuple[int, int, int, int]:
    """Split a packed value into its four bytes, MSB first."""
    check_packed(value)
    return tuple((value >> shift) & 0xFF for shift in SHIFTS)


def pack_bytes(*values: int) -> int:
    """Pack 1-4 bytes MSB first, zero-padding on the right."""
    if not 1 <= len(values) <= 4:
        raise ValueError(f"Packed value holds 1-4 bytes, got {len(values)}")
    combined = 0
    for shift, byte in zip(SHIFTS, values):
        if not 0 <= byte <= 0xFF:
            raise ValueError(f"Byte value must be 0-255, got {byte}")
        combined |= byte << shift
    return combined


def set_byte(value: int, index: int, byte: int) -> int:
    """Replace byte slot index (0-3) and return the new packed value."""
    if not 0 <= index <= 3:
        raise ValueError(f"Byte index must be 0-3, got {index}")
    parts = list(split_bytes(value))
    parts[index] = byte & 0xFF
    return pack_bytes(*parts)


def toggle_bit(value: int, index: int, bit: int) -> int:
    """Flip bit (0 = LSB, 7 = MSB) of byte slot index."""
    if not 0 <= index <= 3:
        raise ValueError(f"Byte index must be 0-3, got {index}")
    if not 0 <= bit <= 7:
        raise ValueError(f"Bit must be 0-7, got {bit}")
    check_packed(value)
    return value ^ (1 << (SHIFTS[index] + bit))


def format_bytes(value: int) -> str:
    """Render the byte summary line, e.g. 'B1: E2 _ B2: 82 _ B3: AC _ B4: 00'."""
    return " _ ".join(
        f"B{i + 1}: {byte:02X}" for i, byte in enumerate(split_bytes(value))
    )


def parse_packed(text: str) -> int:
    """Parse a packed value from user input.

    Accepts a single hex number ('0xE282AC00', 'e282ac00') or up to four
    byte values separated by spaces or hyphens ('E2 82 AC', 'F0-9F-98-80').
    Separated bytes are zero-padded on the right like any short sequence.
    """
    cleaned = text.strip()
    parts = cleaned.replace("-", " ").split()
    if len(parts) > 1:
        if len(parts) > 4:
            raise ValueError(f"At most 4 bytes, got {len(parts)}")
        return pack_bytes(*(int(p, 16) for p in parts))
    if not parts:
        raise ValueError("Empty packed value")
    return check_packed(int(parts[0], 16))
