"""
flexdiff - lenient JSON parsing and structural JSON diffing.

Usage:
    from flexdiff import compare, parse_flexible

    old = parse_flexible("{'name': 'Bob', tags: ['a',],}")
    new = parse_flexible('{"name": "Bob", "tags": ["a", "b"]}')
    for change in compare(old, new):
        print(change.change_type.value, change.path_text)
"""

from flexdiff.diff import (
    Added,
    ChangeRecord,
    ChangeType,
    Modified,
    Removed,
    compare,
    get_diff_summary,
    get_renderer,
    is_identical,
)
from flexdiff.formatting import format_json, minify_json
from flexdiff.parsing import ParseError, get_parse_error_message, parse_flexible
from flexdiff.search import SearchMatch, search_values
from flexdiff.values import (
    ValueKind,
    copy_value,
    format_path,
    get_value_at_path,
    is_container,
    kind_of,
    nesting_depth,
    values_equal,
)

__version__ = "0.1.0"

__all__ = [
    # Parsing
    "parse_flexible",
    "get_parse_error_message",
    "ParseError",
    # Diff
    "compare",
    "is_identical",
    "get_diff_summary",
    "get_renderer",
    "ChangeRecord",
    "ChangeType",
    "Added",
    "Removed",
    "Modified",
    # Values
    "ValueKind",
    "kind_of",
    "is_container",
    "values_equal",
    "copy_value",
    "nesting_depth",
    "format_path",
    "get_value_at_path",
    # Formatting and search
    "format_json",
    "minify_json",
    "search_values",
    "SearchMatch",
]
