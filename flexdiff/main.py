#!/usr/bin/env python3
"""
flexdiff

A CLI for parsing loosely-formatted JSON and comparing JSON documents.
Input may use single quotes, unquoted keys, Python literals (True, False,
None) and trailing commas.

Usage:
    flexdiff format <file>              Pretty-print a JSON-like document
    flexdiff minify <file>              Print a document as compact JSON
    flexdiff validate <file>            Check a document and explain errors
    flexdiff diff <old> <new>           Show structural differences
    flexdiff search <file> <term>       Find keys and values containing text

Use '-' as the file name to read from standard input.

Exit codes:
    0   Success (for diff: documents are identical)
    1   Invalid input (for diff: documents differ)
    2   Usage or file errors
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any

from rich.console import Console

from flexdiff.diff import (
    DEFAULT_KEY_ORDER,
    KEY_ORDERS,
    SUPPORTED_RENDERERS,
    RichDiffRenderer,
    compare,
    get_renderer,
)
from flexdiff.formatting import DEFAULT_INDENT, format_json, minify_json
from flexdiff.parsing import ParseError, get_parse_error_message, parse_flexible
from flexdiff.search import search_values


_LOG = logging.getLogger("flexdiff")

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_USAGE = 2


class InputError(Exception):
    """Raised when an input source cannot be read."""


def read_input(source: str) -> str:
    """Read raw text from a file path, or from stdin when source is '-'.

    Raises:
        InputError: If the file does not exist or cannot be read.
    """
    if source == "-":
        return sys.stdin.read()

    path = Path(source)
    if not path.is_file():
        raise InputError(f"File not found: {source}")

    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise InputError(f"Cannot read {source}: {exc}") from exc


def load_value(source: str, python_literals: bool) -> Any:
    """Read and flexibly parse one input.

    Raises:
        InputError: If the input cannot be read.
        ParseError: If the input cannot be parsed. The error message is
                    replaced by the full diagnostic for the original text.
    """
    text = read_input(source)
    _LOG.debug("Read %d characters from %s", len(text), source)

    try:
        return parse_flexible(text, python_literals=python_literals)
    except ParseError as exc:
        raise ParseError(
            get_parse_error_message(text, exc),
            lineno=exc.lineno,
            colno=exc.colno,
            pos=exc.pos,
            normalized=exc.normalized,
        ) from exc


# ============== Commands ==============

def cmd_format(args) -> int:
    """Pretty-print a document."""
    value = load_value(args.file, args.python_literals)
    print(format_json(value, indent=args.indent))
    return EXIT_OK


def cmd_minify(args) -> int:
    """Print a document as compact JSON."""
    value = load_value(args.file, args.python_literals)
    print(minify_json(value))
    return EXIT_OK


def cmd_validate(args) -> int:
    """Check that a document parses."""
    load_value(args.file, args.python_literals)
    print("Valid JSON")
    return EXIT_OK


def cmd_diff(args) -> int:
    """Compare two documents."""
    # Both sides must parse before anything is compared
    old_value = load_value(args.old, args.python_literals)
    new_value = load_value(args.new, args.python_literals)

    changes = compare(old_value, new_value, key_order=args.key_order)
    renderer = get_renderer(args.output)

    if isinstance(renderer, RichDiffRenderer):
        Console().print(renderer.render_text(changes))
    else:
        print(renderer.render(changes))

    return EXIT_OK if not changes else EXIT_INVALID


def cmd_search(args) -> int:
    """Search keys and values of a document."""
    value = load_value(args.file, args.python_literals)
    matches = search_values(value, args.term, case_sensitive=args.case_sensitive)

    for match in matches:
        print(f"{match.path_text}: {match.field}")

    print(f"Found {len(matches)} matches", file=sys.stderr)
    return EXIT_OK


def _add_common_arguments(subparser: argparse.ArgumentParser) -> None:
    subparser.add_argument(
        '--no-python-literals',
        dest='python_literals',
        action='store_false',
        help='Do not translate True/False/None to JSON literals'
    )
    subparser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='flexdiff',
        description='Parse JSON-like text and compare JSON documents',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Format command
    format_parser = subparsers.add_parser('format', help='Pretty-print a document')
    format_parser.add_argument('file', help="Input file path ('-' for stdin)")
    format_parser.add_argument(
        '--indent',
        type=int,
        default=DEFAULT_INDENT,
        help=f'Indentation width (default: {DEFAULT_INDENT})'
    )
    _add_common_arguments(format_parser)
    format_parser.set_defaults(func=cmd_format)

    # Minify command
    minify_parser = subparsers.add_parser('minify', help='Print a document as compact JSON')
    minify_parser.add_argument('file', help="Input file path ('-' for stdin)")
    _add_common_arguments(minify_parser)
    minify_parser.set_defaults(func=cmd_minify)

    # Validate command
    validate_parser = subparsers.add_parser('validate', help='Check that a document parses')
    validate_parser.add_argument('file', help="Input file path ('-' for stdin)")
    _add_common_arguments(validate_parser)
    validate_parser.set_defaults(func=cmd_validate)

    # Diff command
    diff_parser = subparsers.add_parser('diff', help='Show structural differences')
    diff_parser.add_argument('old', help="Old document path ('-' for stdin)")
    diff_parser.add_argument('new', help="New document path ('-' for stdin)")
    diff_parser.add_argument(
        '-o', '--output',
        choices=sorted(SUPPORTED_RENDERERS),
        default='text',
        help='Output format (default: text)'
    )
    diff_parser.add_argument(
        '--key-order',
        choices=sorted(KEY_ORDERS),
        default=DEFAULT_KEY_ORDER,
        help=f'Object key order in the output (default: {DEFAULT_KEY_ORDER})'
    )
    _add_common_arguments(diff_parser)
    diff_parser.set_defaults(func=cmd_diff)

    # Search command
    search_parser = subparsers.add_parser('search', help='Find keys and values containing text')
    search_parser.add_argument('file', help="Input file path ('-' for stdin)")
    search_parser.add_argument('term', help='Search term')
    search_parser.add_argument('--case-sensitive', action='store_true', help='Case-sensitive search')
    _add_common_arguments(search_parser)
    search_parser.set_defaults(func=cmd_search)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return EXIT_USAGE

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == 'diff' and args.old == '-' and args.new == '-':
        print("Error: Only one input can be read from stdin", file=sys.stderr)
        return EXIT_USAGE

    try:
        return args.func(args)
    except InputError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_USAGE
    except ParseError as exc:
        print(exc.message, file=sys.stderr)
        return EXIT_INVALID


if __name__ == "__main__":
    sys.exit(main())
