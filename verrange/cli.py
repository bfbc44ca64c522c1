#!/usr/bin/env python
"""
Command-line interface for verrange.

Examples:
    verrange parse 1.0-rc1
    verrange compare 1.0 1.0.0
    verrange check 1.4.2 "[1.0,2.0)"
    verrange range "1.*"
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from . import version
from .constants import ASCII_ONLY_ENV
from .errors import VersionError
from .parser import parse_range, parse_version

# Configure logging
logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")
logger = logging.getLogger(__name__)

# Exit status for malformed input
EXIT_MALFORMED = 2

COMPARISON_SYMBOLS = {-1: "<", 0: "=", 1: ">"}


def cmd_parse(args) -> int:
    """Print each component of a version on its own line."""
    parsed = parse_version(args.version)
    for component in parsed:
        print(f"{component.kind} {component}")
    return 0


def cmd_compare(args) -> int:
    """Print '<', '=' or '>' for two versions."""
    left = parse_version(args.left)
    right = parse_version(args.right)
    result = left.compare_to(right)
    logger.debug(f"{left!r} compared to {right!r}: {result}")
    print(COMPARISON_SYMBOLS[result])
    return 0


def cmd_check(args) -> int:
    """Print whether a version lies in a range; the exit code says the same."""
    parsed = parse_version(args.version)
    constraint = parse_range(args.range)
    contained = constraint.contains(parsed)
    logger.debug(f"{constraint} contains {parsed}: {contained}")
    print("yes" if contained else "no")
    return 0 if contained else 1


def cmd_range(args) -> int:
    """Print a range expression in interval notation."""
    print(parse_range(args.range))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="verrange",
        description="Parse and compare versions and version ranges",
    )

    parser.add_argument(
        "--wrapper-version",
        action="store_true",
        help="Print the version of verrange",
    )
    parser.add_argument(
        "--ascii-only",
        action="store_true",
        help="Only accept ASCII letters and digits in versions",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Show verbose output",
    )

    subparsers = parser.add_subparsers(dest="command")

    parse_cmd = subparsers.add_parser("parse", help="Show the components of a version")
    parse_cmd.add_argument("version")
    parse_cmd.set_defaults(func=cmd_parse)

    compare_cmd = subparsers.add_parser("compare", help="Compare two versions")
    compare_cmd.add_argument("left")
    compare_cmd.add_argument("right")
    compare_cmd.set_defaults(func=cmd_compare)

    check_cmd = subparsers.add_parser(
        "check", help="Check whether a version satisfies a range"
    )
    check_cmd.add_argument("version")
    check_cmd.add_argument("range")
    check_cmd.set_defaults(func=cmd_check)

    range_cmd = subparsers.add_parser("range", help="Normalize a range expression")
    range_cmd.add_argument("range")
    range_cmd.set_defaults(func=cmd_range)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the verrange CLI.

    Returns:
        0 on success (or when the version is in the range for 'check'),
        1 when 'check' finds the version outside the range,
        2 on malformed input or usage errors.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    # Setup logging level
    if args.verbose:
        logging.root.setLevel(logging.DEBUG)
        logging.getLogger("verrange").setLevel(logging.DEBUG)
    else:
        logging.root.setLevel(logging.WARNING)
        logging.getLogger("verrange").setLevel(logging.WARNING)

    if args.wrapper_version:
        print(f"verrange v{version.__version__}")
        return 0

    if args.command is None:
        parser.print_usage(sys.stderr)
        return EXIT_MALFORMED

    # The parsers read this when no explicit ascii_only is passed
    if args.ascii_only:
        os.environ[ASCII_ONLY_ENV] = "1"
        logger.debug("Restricting versions to ASCII letters and digits")

    try:
        return args.func(args)
    except VersionError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_MALFORMED


if __name__ == "__main__":
    sys.exit(main())
