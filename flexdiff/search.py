"""
Text search over canonical values.

Matches are reported by path rather than by position in rendered output, so
any renderer can highlight them.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from flexdiff.values import format_path


# What part of a node matched
FIELD_KEY = "key"
FIELD_VALUE = "value"


@dataclass(frozen=True)
class SearchMatch:
    """A single search hit.

    Attributes:
        path: Path of the node whose key or value matched.
        field: "key" when the object key matched, "value" when the scalar
               value matched.
    """

    path: tuple[str, ...]
    field: str

    @property
    def path_text(self) -> str:
        return format_path(self.path)


def _scalar_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    # null, booleans and numbers are matched by their JSON spelling
    return json.dumps(value)


def search_values(value: Any, term: str, case_sensitive: bool = False) -> list[SearchMatch]:
    """Find object keys and scalar values containing a search term.

    Args:
        value: The canonical value to search.
        term: Text to look for. Blank terms match nothing.
        case_sensitive: Whether the match is case-sensitive.

    Returns:
        Matches in depth-first document order. For an object entry, a key
        match is listed before any matches inside its value.

    Examples:
        >>> search_values({"name": "Bob", "tags": ["bobcat"]}, "bob")
        [SearchMatch(path=('name',), field='value'), SearchMatch(path=('tags', '0'), field='value')]
    """
    if not term.strip():
        return []

    needle = term if case_sensitive else term.lower()

    def contains(text: str) -> bool:
        return needle in (text if case_sensitive else text.lower())

    matches: list[SearchMatch] = []
    # Entries are (value, path, key that led here or None)
    stack: list[tuple[Any, tuple[str, ...], str | None]] = [(value, (), None)]

    while stack:
        current, path, key = stack.pop()

        if key is not None and contains(key):
            matches.append(SearchMatch(path, FIELD_KEY))

        if isinstance(current, dict):
            children = [(item, path + (k,), k) for k, item in current.items()]
            stack.extend(reversed(children))
        elif isinstance(current, list):
            children = [(item, path + (str(idx),), None) for idx, item in enumerate(current)]
            stack.extend(reversed(children))
        elif contains(_scalar_text(current)):
            matches.append(SearchMatch(path, FIELD_VALUE))

    return matches
