from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from .errors import DotIniError
from .loader import DEFAULT_ENCODING
from .parser import INIParser, IniMapping, into_mapping
from .reducer import DEFAULT_SECTION

logger = logging.getLogger(__name__)

RULE_WIDTH = 60


def _print_text(mapping: IniMapping) -> None:
    for section in sorted(mapping):
        print(section)
        for key, value in sorted(mapping[section].items()):
            print(f"{key} = {value}")
        print("=" * RULE_WIDTH)


def _print_json(payload: object) -> None:
    print(json.dumps(payload, indent=2, sort_keys=True))


def show(args: argparse.Namespace) -> int:
    try:
        parsed = INIParser.from_file(
            args.path, encoding=args.encoding, default_section=args.default_section
        )
    except DotIniError as exc:
        print(f"dotini: {exc}", file=sys.stderr)
        return 1

    mapping = into_mapping(parsed)
    if args.section is not None:
        if args.section not in mapping:
            print(f"dotini: no section {args.section!r} in {args.path}", file=sys.stderr)
            return 2
        mapping = {args.section: mapping[args.section]}

    if args.format == "json":
        _print_json(mapping)
    else:
        _print_text(mapping)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dotini", description="Print the sections and properties of an INI file."
    )
    parser.add_argument("path", type=Path, help="INI file to read")
    parser.add_argument("--section", help="Only print this section")
    parser.add_argument("--format", choices=["text", "json"], default="text")
    parser.add_argument(
        "--default-section",
        default=DEFAULT_SECTION,
        help="Section for properties that precede any header (default: %(default)s)",
    )
    parser.add_argument("--encoding", default=DEFAULT_ENCODING)
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.set_defaults(func=show)
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as exc:  # pragma: no cover - argparse may raise
        return int(exc.code or 0)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    logger.debug("Arguments: %s", args)
    return int(args.func(args))


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
