"""
Structural diff of two canonical values.

The comparison walks both trees together and reports every divergence as a
path-addressed change record. Arrays are compared positionally (index by
index, no move detection), objects by the union of their keys.

The walk uses an explicit stack instead of recursion so that deeply nested
documents cannot exhaust the interpreter's call stack. Records come out in
the same order a depth-first recursive walk would produce them.
"""

from __future__ import annotations

import logging
from typing import Any, Iterator, Sequence

from flexdiff.diff.records import Added, ChangeRecord, ChangeType, Modified, Removed
from flexdiff.values import ValueKind, copy_value, kind_of, values_equal


_LOG = logging.getLogger(__name__)

# Object key iteration orders
KEY_ORDER_SORTED = "sorted"
KEY_ORDER_INSERTION = "insertion"
KEY_ORDERS = frozenset([KEY_ORDER_SORTED, KEY_ORDER_INSERTION])
DEFAULT_KEY_ORDER = KEY_ORDER_SORTED


class _Missing:
    """Marker for an array slot or object key that does not exist."""

    def __repr__(self) -> str:
        return "<missing>"


_MISSING = _Missing()

_Step = tuple[Any, Any, tuple[str, ...]]


def _ordered_keys(old: dict[str, Any], new: dict[str, Any], key_order: str) -> list[str]:
    if key_order == KEY_ORDER_SORTED:
        return sorted(old.keys() | new.keys())
    return list(old) + [key for key in new if key not in old]


def _array_steps(old: list[Any], new: list[Any], path: tuple[str, ...]) -> Iterator[_Step]:
    for idx in range(max(len(old), len(new))):
        old_item = old[idx] if idx < len(old) else _MISSING
        new_item = new[idx] if idx < len(new) else _MISSING
        yield old_item, new_item, path + (str(idx),)


def _object_steps(
    old: dict[str, Any], new: dict[str, Any], path: tuple[str, ...], key_order: str
) -> Iterator[_Step]:
    for key in _ordered_keys(old, new, key_order):
        yield old.get(key, _MISSING), new.get(key, _MISSING), path + (key,)


def compare(
    old: Any,
    new: Any,
    path: Sequence[str] = (),
    key_order: str = DEFAULT_KEY_ORDER,
) -> list[ChangeRecord]:
    """Compare two canonical values and list their differences.

    Classification rules, applied at every path:
        - old is null, new is not       -> Added
        - new is null, old is not       -> Removed
        - both null                     -> nothing
        - array vs array                -> positional comparison per index
        - object vs object              -> comparison per key in the union
        - anything else                 -> Modified if the values differ
          (this covers scalars, scalar vs container and array vs object;
          containers of different kinds are never descended into)

    Missing array slots and object keys are reported as Added/Removed with
    the value on the side where they exist, even when that value is null.

    Values stored in the records are deep copies, so later changes to
    ``old`` or ``new`` do not show up in the result.

    Args:
        old: The old canonical value.
        new: The new canonical value.
        path: Prefix prepended to every reported path, as a sequence of
              segments (a bare string is rejected).
        key_order: "sorted" (lexicographic) or "insertion" (keys of ``old``
                   in order, followed by keys only found in ``new``).

    Returns:
        The change records, in deterministic traversal order. An empty list
        means the two values are structurally identical.

    Raises:
        ValueError: If ``key_order`` is not a supported order.
        TypeError: If ``path`` is a string instead of a sequence of segments.

    Examples:
        >>> compare({"a": {"b": 1}}, {"a": {"b": 2}})
        [Modified(path=('a', 'b'), old_value=1, new_value=2)]
        >>> compare([1, 2, 3], [1, 2, 3, 4])
        [Added(path=('3',), new_value=4)]
    """
    if key_order not in KEY_ORDERS:
        raise ValueError(
            f"Unsupported key order '{key_order}'. "
            f"Supported orders: {', '.join(sorted(KEY_ORDERS))}"
        )
    if isinstance(path, str):
        raise TypeError(f"Path prefix must be a sequence of segments, not a string: {path!r}")

    changes: list[ChangeRecord] = []
    stack: list[_Step] = [(old, new, tuple(path))]

    while stack:
        old_value, new_value, current = stack.pop()

        if old_value is _MISSING:
            changes.append(Added(current, copy_value(new_value)))
            continue
        if new_value is _MISSING:
            changes.append(Removed(current, copy_value(old_value)))
            continue

        old_kind = kind_of(old_value)
        new_kind = kind_of(new_value)

        if old_kind is ValueKind.NULL:
            if new_kind is not ValueKind.NULL:
                changes.append(Added(current, copy_value(new_value)))
        elif new_kind is ValueKind.NULL:
            changes.append(Removed(current, copy_value(old_value)))
        elif old_kind is ValueKind.ARRAY and new_kind is ValueKind.ARRAY:
            # Reversed so the first child is popped first
            stack.extend(reversed(list(_array_steps(old_value, new_value, current))))
        elif old_kind is ValueKind.OBJECT and new_kind is ValueKind.OBJECT:
            stack.extend(
                reversed(list(_object_steps(old_value, new_value, current, key_order)))
            )
        elif not values_equal(old_value, new_value):
            changes.append(Modified(current, copy_value(old_value), copy_value(new_value)))

    _LOG.debug("Structural diff produced %d change(s)", len(changes))
    return changes


def is_identical(old: Any, new: Any) -> bool:
    """Return True if comparing the two values yields no changes."""
    return not compare(old, new)


def get_diff_summary(changes: Sequence[ChangeRecord]) -> dict[str, int]:
    """
    Get a summary of change counts by type.

    Args:
        changes: The change records from compare().

    Returns:
        A dictionary with counts for each change type.

    Examples:
        >>> summary = get_diff_summary(compare({"a": 1}, {"a": 2, "b": 3}))
        >>> print(summary)  # {"added": 1, "removed": 0, "modified": 1}
    """
    summary = {change_type.value: 0 for change_type in ChangeType}

    for change in changes:
        summary[change.change_type.value] += 1

    return summary
