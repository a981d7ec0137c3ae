import argparse
import json
import logging
import sys

from datepath import (
    DateComponents,
    InvalidDateError,
    extract_date_from_path,
    format_date_path,
    generate_note_path,
    load_persian,
)
from datepath.calendars.locale import DIALECTS

logger = logging.getLogger("datepath")


def _add_component_arguments(parser):
    parser.add_argument("--year", type=int, required=True)
    parser.add_argument("--month", type=int, default=1)
    granularity = parser.add_mutually_exclusive_group()
    granularity.add_argument("--day", type=int)
    granularity.add_argument("--week", type=int)
    granularity.add_argument("--quarter", type=int)
    parser.add_argument(
        "--calendar",
        choices=["solar", "gregorian"],
        default="solar",
        help="Calendar the components and pattern refer to (default: solar)",
    )


def _components(args):
    return DateComponents.from_dict(vars(args))


def build_parser():
    datepath_argparse = argparse.ArgumentParser(
        prog="datepath",
        description="Render and read date-based note paths.",
    )
    datepath_argparse.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    datepath_argparse.add_argument(
        "--persian-digits",
        action="store_true",
        help="Render solar numbers with Persian digits",
    )
    datepath_argparse.add_argument(
        "--dialect",
        choices=DIALECTS,
        default="persian-modern",
        help="Language of solar month names",
    )
    commands = datepath_argparse.add_subparsers(dest="command")

    format_parser = commands.add_parser("format", help="Format a pattern for a date")
    format_parser.add_argument("pattern", help='Pattern such as "YYYY/MM/YYYY-MM-DD"')
    _add_component_arguments(format_parser)

    path_parser = commands.add_parser("path", help="Generate a full note path")
    path_parser.add_argument("base", help="Base folder of the notes")
    path_parser.add_argument("pattern", help='Pattern such as "YYYY-MM-DD"')
    _add_component_arguments(path_parser)

    extract_parser = commands.add_parser("extract", help="Read the date from a note path")
    extract_parser.add_argument("file_path")
    extract_parser.add_argument("--base", default="", help="Base folder of the notes")
    extract_parser.add_argument("--pattern", default="")

    return datepath_argparse


def entrance(argv=None):
    datepath_argparse = build_parser()
    args = datepath_argparse.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.command:
        datepath_argparse.error(
            "datepath: You need to specify the command (i.e.: format, path or extract)"
        )

    load_persian(use_persian_digits=args.persian_digits, dialect=args.dialect)

    try:
        if args.command == "format":
            print(format_date_path(args.pattern, _components(args), args.calendar))
        elif args.command == "path":
            print(generate_note_path(args.base, args.pattern, _components(args), args.calendar))
        else:
            components = extract_date_from_path(args.file_path, args.base, args.pattern)
            if components is None:
                logger.warning(f"datepath: no date found in {args.file_path}")
                return 1
            print(json.dumps(components.as_dict()))
    except InvalidDateError as e:
        datepath_argparse.error(str(e))
    return 0


def main():
    sys.exit(entrance())
