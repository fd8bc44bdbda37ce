"""Which byte slots and bits of a packed value are in play.

Everything here depends on byte 1 only: the declared sequence length
never depends on bytes 2-4.
"""

from enum import Enum

from .byte_codes import BYTE_TABLE, CONTROL_MASK_CONTINUATION
from .packed import split_bytes


class BitRole(Enum):
    CONTROL = "control"
    DATA = "data"
    DISABLED = "disabled"


def declared_length(packed: int) -> int:
    """Sequence length declared by byte 1 (0 if byte 1 cannot lead)."""
    return BYTE_TABLE[split_bytes(packed)[0]].sequence_length


def enabled_bytes(packed: int) -> tuple[bool, bool, bool, bool]:
    """Which of the 4 byte slots belong to the declared sequence."""
    length = max(declared_length(packed), 1)
    return tuple(i < length for i in range(4))


def control_bits(packed: int) -> tuple[int, int, int, int]:
    """Fixed-bit mask for each byte slot.

    Byte 1 gets its leading marker, enabled continuation bytes get
    11000000, disabled slots get 0.
    """
    lead = BYTE_TABLE[split_bytes(packed)[0]]
    enabled = enabled_bytes(packed)
    masks = [lead.control_mask if lead.can_lead else 0]
    masks.extend(CONTROL_MASK_CONTINUATION if on else 0 for on in enabled[1:])
    return tuple(masks)


def bit_roles(packed: int) -> tuple[tuple[BitRole, ...], ...]:
    """Role of every bit, per byte slot, MSB first."""
    roles = []
    for on, mask in zip(enabled_bytes(packed), control_bits(packed)):
        if not on:
            roles.append((BitRole.DISABLED,) * 8)
            continue
        roles.append(tuple(
            BitRole.CONTROL if mask & (1 << bit) else BitRole.DATA
            for bit in range(7, -1, -1)
        ))
    return tuple(roles)
