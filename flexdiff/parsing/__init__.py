"""
Lenient parsing of JSON-like text.

Usage:
    from flexdiff.parsing import ParseError, get_parse_error_message, parse_flexible

    try:
        value = parse_flexible(text)
    except ParseError as error:
        print(get_parse_error_message(text, error))
"""

from flexdiff.parsing.diagnostics import get_parse_error_message
from flexdiff.parsing.errors import ParseError
from flexdiff.parsing.flexible_parser import MAX_NESTING_DEPTH, parse_flexible
from flexdiff.parsing.normalizer import (
    convert_python_literals,
    convert_single_quotes,
    normalize_json_string,
    quote_property_names,
    remove_trailing_commas,
)

__all__ = [
    # Parsing
    "parse_flexible",
    "MAX_NESTING_DEPTH",
    "ParseError",
    # Diagnostics
    "get_parse_error_message",
    # Normalization passes
    "normalize_json_string",
    "convert_single_quotes",
    "quote_property_names",
    "convert_python_literals",
    "remove_trailing_commas",
]
