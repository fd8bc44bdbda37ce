"""
Command-line interface for utf8play.

Decode packed UTF-8 slots, encode code points, look up names and show
which bits of a sequence are markers and which carry data.
"""
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from ..core.byte_codes import BYTE_TABLE
from ..core.encoder import strip_prefix
from ..core.layout import BitRole
from ..core.packed import parse_packed, split_bytes

_ROLE_MARKS = {BitRole.CONTROL: "C", BitRole.DATA: "d", BitRole.DISABLED: "-"}


def _packed_arg(text: str) -> int:
    try:
        return parse_packed(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid packed value {text!r}: {e}")


def _error(message: str) -> int:
    print(f"ERROR: {message}", file=sys.stderr)
    return 1


def _load_table(args: argparse.Namespace, required: bool = False):
    """Name table from --names or the default asset.

    Returns None when the asset is missing and a table is optional.
    """
    from ..engine.names import NameTable, default_table

    try:
        if args.names:
            return NameTable.from_json(args.names)
        return default_table()
    except FileNotFoundError:
        if required:
            raise
        return None


def _display_char(character: str) -> str:
    return character if character.isprintable() else repr(character)


def print_inspection(report, as_json: bool = False) -> None:
    """Print an Inspection as text or JSON."""
    if as_json:
        print(json.dumps(report.as_dict(), ensure_ascii=False, indent=2))
        return

    r = report.result
    print(f"Packed:     {report.hex}")
    print(f"Bytes:      {report.summary}")
    if not r.ok:
        print(f"Error:      {r.error}")
        return
    print(f"UTF-8:      {r.utf}")
    print(f"Code point: {r.codepoint}")
    print(f"Character:  {_display_char(r.character)}")
    print(f"Name:       {report.name.name if report.name else '(unknown)'}")
    if r.overlong:
        print(f"Overlong:   by {r.overlong_by} byte(s)")
    if r.error:
        print(f"Error:      {r.error}")


def cmd_decode(args: argparse.Namespace) -> int:
    """Decode a packed value."""
    from ..engine.inspect import inspect

    print_inspection(inspect(args.packed, _load_table(args)), args.json)
    return 0


def cmd_encode(args: argparse.Namespace) -> int:
    """Encode a code point."""
    from ..core.encoder import encode_code_point

    packed = encode_code_point(args.codepoint)
    if packed is None:
        return _error(f"not a valid code point: {args.codepoint!r} (expected hex 0-10FFFF)")
    if args.json:
        print(json.dumps({"codepoint": args.codepoint, "packed": f"0x{packed:08X}"}))
    else:
        print(f"0x{packed:08X}")
    return 0


def cmd_name(args: argparse.Namespace) -> int:
    """Look up a Unicode name."""
    try:
        table = _load_table(args, required=True)
    except FileNotFoundError as e:
        return _error(str(e))
    entry = table.lookup(strip_prefix(args.codepoint).upper())
    if args.json:
        print(json.dumps({"code": entry.code if entry else None,
                          "name": entry.name if entry else None}))
    else:
        print(entry.name if entry else "(unknown)")
    return 0


def cmd_bits(args: argparse.Namespace) -> int:
    """Show control and data bits per byte."""
    from ..engine.inspect import inspect

    report = inspect(args.packed)
    if args.json:
        print_inspection(report, as_json=True)
        return 0
    for i, (byte, on, roles) in enumerate(zip(split_bytes(args.packed),
                                               report.enabled, report.roles)):
        marks = "".join(_ROLE_MARKS[role] for role in roles)
        suffix = "" if on else "  (disabled)"
        bc = BYTE_TABLE[byte]
        print(f"Byte {i + 1}  {bc.hex}  {byte:08b}  {marks}  {bc.pattern}{suffix}")
    print("C = control bit, d = data bit")
    return 0


def cmd_random(args: argparse.Namespace) -> int:
    """Inspect a random sample character."""
    from ..engine.inspect import inspect
    from ..engine.samples import random_packed

    print_inspection(inspect(random_packed(), _load_table(args)), args.json)
    return 0


def cmd_link(args: argparse.Namespace) -> int:
    """Resolve a deep link and inspect it."""
    from ..engine.deeplink import resolve_fragment
    from ..engine.inspect import inspect

    print_inspection(inspect(resolve_fragment(args.url), _load_table(args)), args.json)
    return 0


def cmd_build_names(args: argparse.Namespace) -> int:
    """Build the Unicode name table."""
    import requests

    from ..engine.names import table_path
    from ..ingest.unicode_data import run

    output = args.output or args.names or table_path()
    try:
        run(output=output, source=args.source, store_db=args.db, dump_path=args.dump)
    except (OSError, requests.RequestException, RuntimeError) as e:
        return _error(str(e))
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="utf8play",
        description="UTF-8 Playground - explore how code points become UTF-8 bytes",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print results as JSON",
    )
    parser.add_argument(
        "--names",
        type=Path,
        help="Unicode name table JSON (default: packaged table or $UTF8PLAY_NAMES_PATH)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    decode_parser = subparsers.add_parser("decode", help="Decode a packed value")
    decode_parser.add_argument("packed", type=_packed_arg,
                               help="Hex value (0xE282AC00) or bytes (E2 82 AC)")
    decode_parser.set_defaults(func=cmd_decode)

    encode_parser = subparsers.add_parser("encode", help="Encode a code point")
    encode_parser.add_argument("codepoint", help="Hex code point, e.g. 20AC or U+1F600")
    encode_parser.set_defaults(func=cmd_encode)

    name_parser = subparsers.add_parser("name", help="Look up a Unicode name")
    name_parser.add_argument("codepoint", help="Hex code point, e.g. 0041")
    name_parser.set_defaults(func=cmd_name)

    bits_parser = subparsers.add_parser("bits", help="Show control and data bits")
    bits_parser.add_argument("packed", type=_packed_arg, help="Packed value")
    bits_parser.set_defaults(func=cmd_bits)

    random_parser = subparsers.add_parser("random", help="Inspect a random sample")
    random_parser.set_defaults(func=cmd_random)

    link_parser = subparsers.add_parser("link", help="Resolve a deep link")
    link_parser.add_argument("url", help="URL whose path names a code point, e.g. /1F600")
    link_parser.set_defaults(func=cmd_link)

    build_parser = subparsers.add_parser("build-names", help="Build the Unicode name table")
    build_parser.add_argument("--source", type=Path,
                              help="Local UnicodeData.txt (default: download)")
    build_parser.add_argument("--output", type=Path, help="Output JSON path")
    build_parser.add_argument("--db", action="store_true",
                              help="Also load the names into PostgreSQL")
    build_parser.add_argument("--dump", help="With --db, pg_dump the shard to this file")
    build_parser.set_defaults(func=cmd_build_names)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
