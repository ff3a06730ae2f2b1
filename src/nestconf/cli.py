"""Command line front end: dump a config file or query one field."""

from __future__ import annotations

import argparse
import json
import sys

from pydantic import ValidationError

from .config import NestconfSettings
from .errors import ConfigError, FileAccessError
from .logging_utils import configure_logging
from .values import NAMED_DECODERS, decode

EXIT_MISSING = 1
EXIT_INVALID = 2
EXIT_UNREADABLE = 3


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="nestconf", description="Parse a nestconf file")
    parser.add_argument("path", help="Path to the configuration file")
    parser.add_argument(
        "--get",
        nargs=3,
        metavar=("GROUP", "SUBSECTION", "KEY"),
        help="Print a single field (use '' for the default group or subsection)",
    )
    parser.add_argument(
        "--as",
        dest="as_type",
        default="str",
        choices=["str", *NAMED_DECODERS],
        help="Decode the field printed by --get",
    )
    parser.add_argument("--settings", help="Load tool settings from a nestconf file")
    parser.add_argument("--log-level", help="Override the logging level")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = NestconfSettings.from_config_file(args.settings) if args.settings else NestconfSettings()
        if args.log_level:
            settings.logging.level = args.log_level
        configure_logging(settings.logging)

        table = settings.load(args.path)
        if args.get is None:
            print(json.dumps(table.to_dict(), indent=2, sort_keys=True))
            return 0

        group, subsection, key = args.get
        value = table.get_field(group, subsection, key)
        if value is None:
            print(f"error: no field '{key}' in [{group} {subsection}]", file=sys.stderr)
            return EXIT_MISSING
        if args.as_type != "str":
            value = decode(value, NAMED_DECODERS[args.as_type])
        print(json.dumps(value))
        return 0
    except FileAccessError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_UNREADABLE
    except (ConfigError, ValidationError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_INVALID


if __name__ == "__main__":
    sys.exit(main())
