"""Build the Unicode name table from UnicodeData.txt.

Each data row is semicolon-delimited; field 0 is the code point in hex
and field 1 its name. Rows that only mark the ends of a code point range
(<CJK Ideograph, First> / <CJK Ideograph, Last>) name no single
character and are dropped. Other bracketed names such as <control> are
kept.

Source: https://www.unicode.org/Public/UCD/latest/ucd/UnicodeData.txt
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable, Iterator

import requests

from ..engine.names import DEFAULT_TABLE_PATH, NameEntry

UNICODE_DATA_URL = "https://www.unicode.org/Public/UCD/latest/ucd/UnicodeData.txt"


def is_range_marker(name: str) -> bool:
    """True for <..., First> and <..., Last> range rows."""
    return name.startswith("<") and (name.endswith("First>") or name.endswith("Last>"))


def parse_unicode_data(lines: Iterable[str]) -> Iterator[NameEntry]:
    """Yield a NameEntry per named row of UnicodeData.txt."""
    for line in lines:
        line = line.strip()
        if not line:
            continue
        fields = line.split(";")
        if len(fields) < 2:
            continue
        code, name = fields[0], fields[1]
        if is_range_marker(name):
            continue
        yield NameEntry(code, name)


def fetch_unicode_data(url: str = UNICODE_DATA_URL, timeout: float = 60.0) -> str:
    """Download UnicodeData.txt and return its text."""
    print(f"Fetching {url}...")
    response = requests.get(url, timeout=timeout)
    response.raise_for_status()
    return response.text


def write_name_table(entries: Iterable[NameEntry], path: Path | str) -> int:
    """Write entries as a JSON list of {code, name}; returns the count."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = [{"code": e.code, "name": e.name} for e in entries]
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
    return len(data)


def store_name_table(conn, entries: Iterable[NameEntry]) -> int:
    """Upsert entries into the PostgreSQL name shard; returns the count."""
    from ..db.postgres import init_schema, insert_name

    init_schema(conn)
    count = 0
    with conn.cursor() as cur:
        for entry in entries:
            insert_name(cur, entry.code, entry.name)
            count += 1
    conn.commit()
    return count


def run(output: Path | str = DEFAULT_TABLE_PATH, source: Path | str | None = None,
        store_db: bool = False, dump_path: str | None = None) -> list[NameEntry]:
    """Build the name table, optionally loading it into PostgreSQL too."""
    if source is not None:
        print(f"Reading {source}...")
        text = Path(source).read_text(encoding="utf-8")
    else:
        text = fetch_unicode_data()

    entries = list(parse_unicode_data(text.splitlines()))
    print(f"Parsed {len(entries)} character entries.")

    count = write_name_table(entries, output)
    print(f"  Saved {count} entries to {output}")

    if store_db:
        from ..db.postgres import connect, dump_sql

        conn = connect()
        try:
            stored = store_name_table(conn, entries)
            print(f"  Stored {stored} entries in PostgreSQL")
            if dump_path:
                print(f"Dumping database to {dump_path}...")
                dump_sql(dump_path)
        finally:
            conn.close()

    return entries


if __name__ == "__main__":
    run()
