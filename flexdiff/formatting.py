"""
Serialization helpers for canonical values.

Both helpers emit strict JSON and raise ValueError for NaN or infinite
numbers instead of writing ``NaN``/``Infinity``.
"""

from __future__ import annotations

import json
from typing import Any


DEFAULT_INDENT = 2


def format_json(value: Any, indent: int = DEFAULT_INDENT) -> str:
    """Format a value as indented JSON."""
    return json.dumps(value, indent=indent, ensure_ascii=False, allow_nan=False)


def minify_json(value: Any) -> str:
    """Format a value as compact JSON with no whitespace."""
    return json.dumps(value, ensure_ascii=False, allow_nan=False, separators=(",", ":"))
