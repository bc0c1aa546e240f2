"""
Structural diff of canonical values.

Usage:
    from flexdiff.diff import compare, get_renderer

    changes = compare(old_value, new_value)
    if not changes:
        print("identical")
    print(get_renderer("text").render(changes))
"""

from flexdiff.diff.engine import (
    DEFAULT_KEY_ORDER,
    KEY_ORDER_INSERTION,
    KEY_ORDER_SORTED,
    KEY_ORDERS,
    compare,
    get_diff_summary,
    is_identical,
)
from flexdiff.diff.records import Added, ChangeRecord, ChangeType, Modified, Removed
from flexdiff.diff.render import (
    SUPPORTED_RENDERERS,
    DiffRenderer,
    JsonReportRenderer,
    RichDiffRenderer,
    TextDiffRenderer,
    format_value,
    get_renderer,
)

__all__ = [
    # Engine
    "compare",
    "is_identical",
    "get_diff_summary",
    "KEY_ORDERS",
    "KEY_ORDER_SORTED",
    "KEY_ORDER_INSERTION",
    "DEFAULT_KEY_ORDER",
    # Records
    "ChangeRecord",
    "ChangeType",
    "Added",
    "Removed",
    "Modified",
    # Rendering
    "DiffRenderer",
    "TextDiffRenderer",
    "RichDiffRenderer",
    "JsonReportRenderer",
    "SUPPORTED_RENDERERS",
    "format_value",
    "get_renderer",
]
