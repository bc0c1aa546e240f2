"""
Canonical value model for parsed JSON-like documents.

Canonical values are exactly what the standard ``json`` decoder produces:

    - None            -> NULL
    - bool            -> BOOLEAN
    - int / float     -> NUMBER
    - str             -> STRING
    - list            -> ARRAY
    - dict[str, ...]  -> OBJECT

This module gives those plain Python values a tagged-union view so the parser
and the diff engine can dispatch on kind exhaustively, without confusing
``True`` with ``1`` the way Python's own equality does.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Sequence


class ValueKind(Enum):
    """Kinds of canonical values."""

    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


CONTAINER_KINDS = frozenset([ValueKind.ARRAY, ValueKind.OBJECT])


def kind_of(value: Any) -> ValueKind:
    """Return the kind of a canonical value.

    Args:
        value: A value produced by the JSON decoder (or built by the caller
               from the same types).

    Returns:
        The ValueKind of the value.

    Raises:
        TypeError: If the value is not a canonical value type.

    Examples:
        >>> kind_of(True)
        <ValueKind.BOOLEAN: 'boolean'>
        >>> kind_of(1)
        <ValueKind.NUMBER: 'number'>
    """
    if value is None:
        return ValueKind.NULL
    # bool is a subclass of int, so it has to be checked first
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, list):
        return ValueKind.ARRAY
    if isinstance(value, dict):
        return ValueKind.OBJECT
    raise TypeError(f"Not a canonical value: {type(value).__name__}")


def is_container(value: Any) -> bool:
    """Return True if the value is an array or an object."""
    return kind_of(value) in CONTAINER_KINDS


def values_equal(a: Any, b: Any) -> bool:
    """Kind-aware deep equality of two canonical values.

    Values of different kinds are never equal, so ``values_equal(True, 1)``
    is False even though ``True == 1`` in Python. Numbers compare as float64
    values, so ``values_equal(1, 1.0)`` is True and integers that round to
    the same double are equal.

    The walk is iterative, so deeply nested values are safe to compare.
    """
    stack: list[tuple[Any, Any]] = [(a, b)]

    while stack:
        left, right = stack.pop()
        left_kind = kind_of(left)
        if left_kind is not kind_of(right):
            return False

        if left_kind is ValueKind.ARRAY:
            if len(left) != len(right):
                return False
            stack.extend(zip(left, right))
        elif left_kind is ValueKind.OBJECT:
            if left.keys() != right.keys():
                return False
            stack.extend((left[key], right[key]) for key in left)
        elif left_kind is ValueKind.NUMBER:
            if not _numbers_equal(left, right):
                return False
        elif left != right:
            return False

    return True


def _numbers_equal(a: int | float, b: int | float) -> bool:
    try:
        return float(a) == float(b)
    except OverflowError:
        # Integers outside the double range only come from callers
        return a == b


def nesting_depth(value: Any) -> int:
    """Return the container nesting depth of a value.

    Scalars have depth 0, ``[]`` and ``{}`` have depth 1, ``[[1]]`` has
    depth 2, and so on.
    """
    max_depth = 0
    stack: list[tuple[Any, int]] = [(value, 0)]

    while stack:
        current, depth = stack.pop()
        if isinstance(current, list):
            depth += 1
            stack.extend((item, depth) for item in current)
        elif isinstance(current, dict):
            depth += 1
            stack.extend((item, depth) for item in current.values())
        max_depth = max(max_depth, depth)

    return max_depth


def copy_value(value: Any) -> Any:
    """Return a deep copy of a canonical value.

    Scalars are immutable and returned as-is. The copy is built without
    recursion, like the other walks in this module.
    """
    if not isinstance(value, (list, dict)):
        return value

    root: list[Any] | dict[str, Any] = [] if isinstance(value, list) else {}
    stack: list[tuple[Any, Any]] = [(value, root)]

    while stack:
        source, target = stack.pop()
        items = enumerate(source) if isinstance(source, list) else source.items()
        for key, item in items:
            if isinstance(item, (list, dict)):
                child: Any = [] if isinstance(item, list) else {}
                stack.append((item, child))
            else:
                child = item
            if isinstance(target, list):
                target.append(child)
            else:
                target[key] = child

    return root


def format_path(path: Sequence[str]) -> str:
    """Render a path as dotted text.

    Examples:
        >>> format_path(["messages", "0", "content"])
        'messages.0.content'
        >>> format_path([])
        'root'
    """
    if not path:
        return "root"
    return ".".join(path)


def get_value_at_path(value: Any, path: Sequence[str]) -> Any:
    """Look up the value addressed by a path.

    Array segments are stringified indices, matching the paths produced by
    the diff engine and the search helper.

    Args:
        value: The root canonical value.
        path: Sequence of object keys / array indices.

    Returns:
        The value at the path (the root itself for an empty path).

    Raises:
        KeyError: If any segment does not exist.

    Examples:
        >>> get_value_at_path({"a": [10, 20]}, ["a", "1"])
        20
    """
    current = value
    for depth, segment in enumerate(path):
        if isinstance(current, dict) and segment in current:
            current = current[segment]
        elif isinstance(current, list) and segment.isdecimal() and int(segment) < len(current):
            current = current[int(segment)]
        else:
            raise KeyError(f"Path not found: {format_path(path[: depth + 1])}")
    return current
