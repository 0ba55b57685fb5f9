"""
Command line entry point

    color-time PALETTE [DATE ...] [--format FMT] [--age YEARS] [--debug]

Prints one "DATE<TAB>#RRGGBB" line per date (today when no date is given).
"""

import argparse
import sys
from typing import List, Optional

from color_time.errors import ColorTimeError
from color_time.models.enums import LogCategory, LogLevel
from color_time.services import ColorTime
from color_time.utils.logger import get_logger, configure_logger

log = get_logger().for_category(LogCategory.SYSTEM)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="color-time",
        description="Print the color of a date from a day-of-year palette file.",
    )
    parser.add_argument("palette", help="Palette YAML file")
    parser.add_argument("dates", nargs="*", default=["now"],
                        help="Dates to color (default: now)")
    parser.add_argument("-f", "--format", dest="fmt", default=None,
                        help="strptime format for DATES (default: free-form parsing)")
    parser.add_argument("-a", "--age", type=float, default=None,
                        help="Elapsed aging years (default: years since each date)")
    parser.add_argument("--debug", action="store_true", help="Verbose logging on stderr")
    parser.add_argument("--no-color", action="store_true", help="Disable ANSI colors in log output")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    configure_logger(
        min_level=LogLevel.DEBUG if args.debug else LogLevel.WARN,
        use_colors=not args.no_color,
    )

    try:
        ct = ColorTime.from_file(args.palette)
        for value in args.dates:
            color = ct.color_for_date(value, args.fmt, args.age)
            print(f"{value}\t{color}")
    except ColorTimeError as ex:
        log.error("color-time failed", error=str(ex), error_type=type(ex).__name__)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
