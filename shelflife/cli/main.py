#!/usr/bin/env python3
"""Unified command-line interface for shelflife.

Usage:
    shelflife parse <file|->
    shelflife parse <file> --json
    shelflife parse <file> --rules my_rules.toml
    shelflife categorize <line>
    shelflife normalize <text>
"""

import argparse
import logging
from collections.abc import Callable, Sequence


def _coerce_exit_code(code: object) -> int:
    if code is None:
        return 0
    if isinstance(code, int):
        return code
    return 1


def _run_command(command: Callable[[argparse.Namespace], None], args: argparse.Namespace) -> int:
    """
    Normalize command handlers that call sys.exit().

    This keeps process termination centralized in this module's entrypoint.
    """
    try:
        command(args)
    except SystemExit as exc:
        return _coerce_exit_code(exc.code)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        prog="shelflife",
        description="Japanese receipt OCR text -> purchase date, items, categories, expiry",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands:
  parse <file|->             Parse OCR text from a file ("-" reads stdin)
  categorize <line>          Show the category and shelf-life days for one line
  normalize <text>           Show the normalized form used for keyword matching
""",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # parse command
    parse_parser = subparsers.add_parser("parse", help="Parse receipt OCR text")
    parse_parser.add_argument("text_file", help='Path to UTF-8 OCR text ("-" for stdin)')
    parse_parser.add_argument("--json", action="store_true", help="Print JSON instead of text")
    parse_parser.add_argument(
        "--rules",
        action="append",
        default=None,
        help="TOML rule file layered ahead of built-in rules (repeatable)",
    )

    # categorize command
    categorize_parser = subparsers.add_parser("categorize", help="Categorize a single item line")
    categorize_parser.add_argument("line", help="Item line, e.g. 'とり もも肉 498'")
    categorize_parser.add_argument("--rules", action="append", default=None, help="TOML rule file (repeatable)")
    categorize_parser.add_argument("--debug", action="store_true", help="Show every matching rule")

    # normalize command
    normalize_parser = subparsers.add_parser("normalize", help="Normalize text for keyword matching")
    normalize_parser.add_argument("text", help="Text to normalize")

    args = parser.parse_args(argv)

    if args.verbose:
        from shelflife.runtime import set_log_level

        set_log_level(logging.DEBUG)

    if args.command is None:
        parser.print_help()
        return 1

    if args.command == "parse":
        from shelflife.cli.receipt import cmd_parse

        return _run_command(cmd_parse, args)
    elif args.command == "categorize":
        from shelflife.cli.receipt import cmd_categorize

        return _run_command(cmd_categorize, args)
    elif args.command == "normalize":
        from shelflife.cli.receipt import cmd_normalize

        return _run_command(cmd_normalize, args)

    return 1


if __name__ == "__main__":
    raise SystemExit(main())
