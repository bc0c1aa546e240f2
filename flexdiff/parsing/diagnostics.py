"""
Human-readable diagnostics for parse failures.

The suggestions are heuristics over the caller's *original* text, so they
describe the mistakes the user actually made rather than whatever the
normalizer turned them into.
"""

from __future__ import annotations

import re

from flexdiff.parsing.errors import ParseError


_UNQUOTED_KEY = re.compile(r"[{,]\s*[A-Za-z_$][A-Za-z0-9_$]*\s*:")
_PYTHON_BOOLEAN = re.compile(r"\b(?:True|False)\b")
_PYTHON_NONE = re.compile(r"\bNone\b")
_UNDEFINED = re.compile(r"\bundefined\b")
_TRAILING_COMMA = re.compile(r",\s*[}\]]")

SUGGESTION_HEADER = "Suggestions:"
SUGGESTION_BULLET = "• "


def _suggestions_for(text: str) -> list[str]:
    suggestions: list[str] = []

    if "'" in text:
        suggestions.append("Try using double quotes (\") instead of single quotes (')")
    if _UNQUOTED_KEY.search(text):
        suggestions.append('Property names should be quoted (e.g., "propertyName": value)')
    if _PYTHON_BOOLEAN.search(text):
        suggestions.append(
            "Use lowercase boolean values: 'true' and 'false' instead of 'True' and 'False'"
        )
    if _PYTHON_NONE.search(text):
        suggestions.append("Replace 'None' with 'null'")
    if _UNDEFINED.search(text):
        suggestions.append("Replace 'undefined' with 'null' or remove the property")
    if _TRAILING_COMMA.search(text):
        suggestions.append("Remove trailing commas before closing brackets")

    return suggestions


def _error_text(error: BaseException) -> str:
    if isinstance(error, ParseError):
        return error.message
    return str(error) or type(error).__name__


def get_parse_error_message(text: str, error: BaseException) -> str:
    """Build a diagnostic message for a failed parse.

    Args:
        text: The original input, before any normalization.
        error: The error raised while parsing (usually a ParseError).

    Returns:
        ``"Invalid JSON: <decoder message>"``, followed by a bulleted list
        of suggestions when any heuristic matches the input.

    Examples:
        >>> print(get_parse_error_message("{a: 1,}", ParseError("Expecting value")))
        Invalid JSON: Expecting value
        <BLANKLINE>
        Suggestions:
        • Property names should be quoted (e.g., "propertyName": value)
        • Remove trailing commas before closing brackets
    """
    message = f"Invalid JSON: {_error_text(error)}"

    suggestions = _suggestions_for(text)
    if suggestions:
        bullets = "\n".join(SUGGESTION_BULLET + suggestion for suggestion in suggestions)
        message += f"\n\n{SUGGESTION_HEADER}\n{bullets}"

    return message
