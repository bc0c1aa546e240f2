"""
Renderers for change records.

Rendering is kept apart from the diff engine: every renderer consumes the
same list of change records and turns it into one output format.

Usage:
    from flexdiff.diff import compare, get_renderer

    renderer = get_renderer("text")
    print(renderer.render(compare(old, new)))
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from typing import Any, Sequence

from rich.text import Text

from flexdiff.diff.engine import get_diff_summary
from flexdiff.diff.records import Added, ChangeRecord, ChangeType, Modified, Removed


# Strings longer than this are truncated in text output
MAX_STRING_DISPLAY = 60

# Containers whose compact JSON is longer than this are summarised
MAX_INLINE_JSON = 80

NO_CHANGES_MESSAGE = "No differences found - JSON objects are identical"

# Prefix markers per change type
CHANGE_MARKERS: dict[ChangeType, str] = {
    ChangeType.ADDED: "+",
    ChangeType.REMOVED: "-",
    ChangeType.MODIFIED: "~",
}

# Rich styles per change type
CHANGE_STYLES: dict[ChangeType, str] = {
    ChangeType.ADDED: "green",
    ChangeType.REMOVED: "red",
    ChangeType.MODIFIED: "yellow",
}


def format_value(value: Any) -> str:
    """Format a value compactly for a single diff line.

    Examples:
        >>> format_value(None)
        'null'
        >>> format_value(list(range(100)))
        '[Array with 100 items]'
    """
    if isinstance(value, str):
        if len(value) > MAX_STRING_DISPLAY:
            truncated = json.dumps(value[: MAX_STRING_DISPLAY - 3], ensure_ascii=False)
            return truncated[:-1] + '..."'
        return json.dumps(value, ensure_ascii=False)

    compact = json.dumps(value, ensure_ascii=False, separators=(",", ":"))
    if len(compact) <= MAX_INLINE_JSON:
        return compact
    if isinstance(value, list):
        return f"[Array with {len(value)} items]"
    if isinstance(value, dict):
        return f"{{Object with {len(value)} properties}}"
    return compact


def _change_line(change: ChangeRecord) -> tuple[str, str]:
    """Return the (path part, value part) of a change's text line."""
    marker = CHANGE_MARKERS[change.change_type]

    if isinstance(change, Added):
        return f"{marker} {change.path_text}", f" = {format_value(change.new_value)}"
    if isinstance(change, Removed):
        return f"{marker} {change.path_text}", f" = {format_value(change.old_value)}"
    if isinstance(change, Modified):
        old_text = format_value(change.old_value)
        new_text = format_value(change.new_value)
        return f"{marker} {change.path_text}", f": {old_text} → {new_text}"
    raise TypeError(f"Unknown change record: {type(change).__name__}")


class DiffRenderer(ABC):
    """Abstract base class for change-record renderers."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the renderer name (e.g., 'text', 'json')."""
        pass

    @abstractmethod
    def render(self, changes: Sequence[ChangeRecord]) -> str:
        """Render change records as a string.

        Args:
            changes: Records from compare(). An empty sequence means the
                     compared values were identical.

        Returns:
            The rendered output.
        """
        pass


class TextDiffRenderer(DiffRenderer):
    """Plain text, one line per change.

    Example output:
        + tags.2 = "new"
        - legacy = true
        ~ version: 1 → 2
    """

    @property
    def name(self) -> str:
        return "text"

    def render(self, changes: Sequence[ChangeRecord]) -> str:
        if not changes:
            return NO_CHANGES_MESSAGE
        return "\n".join("".join(_change_line(change)) for change in changes)


class RichDiffRenderer(DiffRenderer):
    """Text output styled with rich: green additions, red removals and
    yellow modifications."""

    @property
    def name(self) -> str:
        return "rich"

    def render_text(self, changes: Sequence[ChangeRecord]) -> Text:
        """Build the styled rich Text for the changes."""
        text = Text()

        if not changes:
            text.append(NO_CHANGES_MESSAGE, style="bold green")
            return text

        for idx, change in enumerate(changes):
            if idx:
                text.append("\n")
            path_part, value_part = _change_line(change)
            style = CHANGE_STYLES[change.change_type]
            text.append(path_part, style=f"bold {style}")
            text.append(value_part, style=style)

        return text

    def render(self, changes: Sequence[ChangeRecord]) -> str:
        return self.render_text(changes).plain


class JsonReportRenderer(DiffRenderer):
    """Machine-readable JSON report with a summary and every change."""

    @property
    def name(self) -> str:
        return "json"

    def render(self, changes: Sequence[ChangeRecord]) -> str:
        report = {
            "identical": not changes,
            "summary": get_diff_summary(changes),
            "changes": [change.to_dict() for change in changes],
        }
        return json.dumps(report, indent=2, ensure_ascii=False, allow_nan=False)


# Supported renderer names
SUPPORTED_RENDERERS = frozenset(["text", "rich", "json"])


def get_renderer(name: str) -> DiffRenderer:
    """Get a renderer by name.

    Args:
        name: The renderer name ("text", "rich" or "json").

    Returns:
        A DiffRenderer instance.

    Raises:
        ValueError: If the renderer name is not supported.

    Examples:
        >>> get_renderer("json").name
        'json'
    """
    if name not in SUPPORTED_RENDERERS:
        raise ValueError(
            f"Unsupported renderer '{name}'. "
            f"Supported renderers: {', '.join(sorted(SUPPORTED_RENDERERS))}"
        )

    renderers: dict[str, DiffRenderer] = {
        "text": TextDiffRenderer(),
        "rich": RichDiffRenderer(),
        "json": JsonReportRenderer(),
    }

    return renderers[name]
