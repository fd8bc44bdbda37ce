"""Inspection report: everything a front end shows for one packed value."""

from __future__ import annotations

from dataclasses import dataclass

from ..core.decoder import Decoded, DecodeFailure, decode
from ..core.layout import BitRole, bit_roles, control_bits, enabled_bytes
from ..core.packed import check_packed, format_bytes, split_bytes
from .names import NameEntry, NameTable


def json_safe(character: str) -> str:
    """Character as UTF-8-encodable text; lone surrogates become \\uXXXX."""
    return character.encode("utf-8", "backslashreplace").decode("utf-8")


@dataclass(frozen=True)
class Inspection:
    packed: int
    result: Decoded | DecodeFailure
    name: NameEntry | None
    enabled: tuple[bool, ...]
    control: tuple[int, ...]
    roles: tuple[tuple[BitRole, ...], ...]

    @property
    def hex(self) -> str:
        return f"0x{self.packed:08X}"

    @property
    def summary(self) -> str:
        return format_bytes(self.packed)

    def as_dict(self) -> dict:
        """JSON-friendly form of the report."""
        r = self.result
        out = {
            "packed": self.hex,
            "bytes": [f"{b:02X}" for b in split_bytes(self.packed)],
            "ok": r.ok,
            "error": r.error,
            "enabled": list(self.enabled),
            "control": [f"{m:08b}" for m in self.control],
            "roles": [[role.value for role in byte] for byte in self.roles],
        }
        if r.ok:
            out.update({
                "utf": r.utf,
                "codepoint": r.codepoint,
                "character": json_safe(r.character),
                "length": r.length,
                "overlong_by": r.overlong_by,
                "name": self.name.name if self.name else None,
            })
        return out


def inspect(packed: int, table: NameTable | None = None) -> Inspection:
    """Decode packed and gather its name and bit layout."""
    check_packed(packed)
    result = decode(packed)
    name = None
    if result.ok and table is not None:
        name = table.lookup(f"{result.value:04X}")
    return Inspection(
        packed=packed,
        result=result,
        name=name,
        enabled=enabled_bytes(packed),
        control=control_bits(packed),
        roles=bit_roles(packed),
    )
