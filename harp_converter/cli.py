"""Command line interface for harp-converter.

Usage:
    harpconv convert song.txt --from diatonic
    harpconv convert - --from tremolo --json --pretty < song.txt
    harpconv find Bb4 --type diatonic --key F
    harpconv layout tremolo
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from harp_converter import __version__
from harp_converter.converter import HARMONICA_TYPES, convert_tab
from harp_converter.layouts import HARMONICA_KEYS, find_tab_for_note, format_tab_token, get_layout
from harp_converter.models import DiatonicHole
from harp_converter.pitch import parse_pitch

logger = logging.getLogger("harp_converter")


def _other_type(harmonica_type: str) -> str:
    return "tremolo" if harmonica_type == "diatonic" else "diatonic"


def _read_input(source: str) -> str:
    """Read tab text from a path, or from stdin when ``source`` is ``-``."""
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def cmd_convert(args: argparse.Namespace) -> int:
    """Convert a tab file between notations."""
    try:
        text = _read_input(args.input)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: cannot read {args.input}: {e}", file=sys.stderr)
        return 1

    target = args.target or _other_type(args.source)
    logger.info("Converting %s tab to %s", args.source, target)
    result = convert_tab(text, args.source, target)

    if args.json:
        indent = 2 if args.pretty else None
        output = json.dumps(result.to_dict(), indent=indent, ensure_ascii=False)
    else:
        output = result.converted_tab
        for error in result.errors:
            print(f"error: {error}", file=sys.stderr)
        for warning in result.warnings:
            print(f"warning: {warning}", file=sys.stderr)

    if args.output:
        args.output.write_text(output + "\n", encoding="utf-8")
        logger.info("Wrote output to %s", args.output)
    else:
        print(output)

    return 0 if result.success else 1


def cmd_find(args: argparse.Namespace) -> int:
    """Print where a note is played."""
    try:
        pitch = parse_pitch(args.note)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    found = find_tab_for_note(pitch, args.type, args.key)
    if found is None:
        print(f"{pitch} is not available on a {args.key} {args.type} harmonica", file=sys.stderr)
        return 1

    hole, action = found
    print(f"{pitch}: {format_tab_token(args.type, hole, action)} (hole {hole} {action})")
    return 0


def cmd_layout(args: argparse.Namespace) -> int:
    """Print the pitch table of a harmonica."""
    layout = get_layout(args.type, args.key)
    for hole in sorted(layout):
        record = layout[hole]
        if isinstance(record, DiatonicHole):
            print(f"{hole:>2}  blow {record.blow!s:<4} draw {record.draw}")
        else:
            print(f"{hole:>2}  {record.action:<4} {record.pitch}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the ``harpconv`` argument parser."""
    parser = argparse.ArgumentParser(
        prog="harpconv",
        description="Convert harmonica tabs between diatonic and tremolo notation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s convert song.txt --from diatonic
  %(prog)s convert - --from tremolo --json --pretty
  %(prog)s find C5 --type tremolo
  %(prog)s layout diatonic --key G
        """,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    convert = subparsers.add_parser("convert", help="Convert a tab between notations")
    convert.add_argument("input", help="Input tab file, or - for stdin")
    convert.add_argument(
        "--from",
        dest="source",
        choices=HARMONICA_TYPES,
        required=True,
        help="Notation of the input tab",
    )
    convert.add_argument(
        "--to",
        dest="target",
        choices=HARMONICA_TYPES,
        default=None,
        help="Target notation (default: the other one)",
    )
    convert.add_argument(
        "-o", "--output",
        type=Path,
        default=None,
        help="Output file (default: stdout)",
    )
    convert.add_argument("--json", action="store_true", help="Emit the full result as JSON")
    convert.add_argument("--pretty", action="store_true", help="Pretty-print JSON output")
    convert.set_defaults(func=cmd_convert)

    find = subparsers.add_parser("find", help="Find the hole that plays a note")
    find.add_argument("note", help="Note with octave, e.g. C5 or Bb4")
    find.add_argument("--type", choices=HARMONICA_TYPES, default="diatonic")
    find.add_argument("--key", choices=HARMONICA_KEYS, default="C")
    find.set_defaults(func=cmd_find)

    layout = subparsers.add_parser("layout", help="Print a harmonica's pitch table")
    layout.add_argument("type", choices=HARMONICA_TYPES)
    layout.add_argument("--key", choices=HARMONICA_KEYS, default="C")
    layout.set_defaults(func=cmd_layout)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
