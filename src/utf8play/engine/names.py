"""Unicode name table: code point to official character name.

The table is a static asset generated offline from UnicodeData.txt by
utf8play.ingest.unicode_data. It is loaded once per process and never
mutated afterwards, so concurrent lookups need no locking.

Codes are stored exactly as UnicodeData.txt writes them: 4-6 uppercase
hex digits, no U+ prefix, no leading zeros beyond four digits.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Mapping

DEFAULT_TABLE_PATH = Path(__file__).resolve().parent.parent / "data" / "unicode_names.json"
TABLE_PATH_ENV = "UTF8PLAY_NAMES_PATH"


@dataclass(frozen=True)
class NameEntry:
    code: str
    name: str


def normalize_code(code: str) -> str:
    """Normalize a hex code to table form.

    Codes longer than 4 characters lose their leading zeros ("" becomes
    "0"), then anything shorter than 4 is left-padded with zeros.
    """
    if len(code) > 4:
        code = code.lstrip("0") or "0"
    return code.rjust(4, "0")


class NameTable:
    """Read-only code → NameEntry mapping."""

    def __init__(self, entries: Iterable[NameEntry]):
        self._entries: Mapping[str, NameEntry] = MappingProxyType(
            {e.code: e for e in entries}
        )

    @classmethod
    def from_rows(cls, rows: Iterable[tuple[str, str]]) -> NameTable:
        return cls(NameEntry(code, name) for code, name in rows)

    @classmethod
    def from_json(cls, path: Path | str) -> NameTable:
        """Load a table written by write_name_table."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(
                f"Unicode name table not found at {path}; "
                f"run 'utf8play build-names' to generate it"
            )
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        return cls(NameEntry(item["code"], item["name"]) for item in data)

    @classmethod
    def from_db(cls, conn) -> NameTable:
        """Load the table from the PostgreSQL name shard."""
        from ..db.postgres import load_names

        return cls.from_rows(load_names(conn))

    @property
    def entries(self) -> Mapping[str, NameEntry]:
        return self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, code: str) -> bool:
        return self.lookup(code) is not None

    def lookup(self, code: str) -> NameEntry | None:
        """Find the entry for a hex code, or None if it has no name."""
        return self._entries.get(normalize_code(code))

    def name(self, code: str) -> str | None:
        entry = self.lookup(code)
        return entry.name if entry else None


def table_path() -> Path:
    """Path of the name table asset, honouring UTF8PLAY_NAMES_PATH."""
    override = os.environ.get(TABLE_PATH_ENV)
    return Path(override) if override else DEFAULT_TABLE_PATH


@lru_cache(maxsize=None)
def default_table() -> NameTable:
    """The process-wide name table, loaded on first use."""
    return NameTable.from_json(table_path())


def lookup_unicode(code: str) -> NameEntry | None:
    """Look up a code in the default table."""
    return default_table().lookup(code)
