"""
Lexical normalization of JSON-like text into strict JSON.

The pipeline rewrites the most common deviations from strict JSON, in this
fixed order:

    1. Single-quoted string literals -> double-quoted literals
    2. Unquoted property names        -> quoted property names
    3. Python literals (optional)     -> True/False/None to true/false/null
    4. Trailing commas                -> removed

These are best-effort text rewrites, not a tokenizer. Steps 2-4 only touch
text outside double-quoted string literals, which after step 1 are the only
string literals left in the document.
"""

from __future__ import annotations

import re


# A complete double-quoted literal, honouring backslash escapes
_STRING_LITERAL = re.compile(r'"(?:[^"\\]|\\.)*"', re.DOTALL)

# `{` or `,`, optional whitespace, identifier, optional whitespace, `:`
_UNQUOTED_KEY = re.compile(r"([{,]\s*)([A-Za-z_$][A-Za-z0-9_$]*)\s*:")

_PYTHON_LITERALS = {
    "True": "true",
    "False": "false",
    "None": "null",
}
_PYTHON_LITERAL = re.compile(r"\b(True|False|None)\b")

_TRAILING_COMMA = re.compile(r",(\s*[}\]])")


def _sub_outside_strings(pattern: re.Pattern[str], repl, text: str) -> str:
    """Apply ``pattern.sub(repl, ...)`` to every stretch of text that is not
    inside a double-quoted string literal."""
    pieces: list[str] = []
    last = 0

    for match in _STRING_LITERAL.finditer(text):
        pieces.append(pattern.sub(repl, text[last:match.start()]))
        pieces.append(match.group(0))
        last = match.end()

    pieces.append(pattern.sub(repl, text[last:]))
    return "".join(pieces)


def convert_single_quotes(text: str) -> str:
    """Rewrite single-quoted string literals as double-quoted literals.

    Walks the text once, tracking whether the cursor is inside a
    double-quoted literal, inside a single-quoted literal, or neither.
    A backslash always consumes the next character, so quotes that are
    escaped never act as delimiters. Inside a single-quoted literal the
    escape ``\\'`` becomes a bare apostrophe, since ``\\'`` is not a valid
    escape in strict JSON.

    Quote characters of the other style that appear inside an active
    literal are kept as they are.

    Examples:
        >>> convert_single_quotes("{'name': 'Bob'}")
        '{"name": "Bob"}'
    """
    result: list[str] = []
    in_double = False
    in_single = False
    escaped = False
    length = len(text)
    i = 0

    while i < length:
        char = text[i]

        if escaped:
            result.append(char)
            escaped = False
        elif char == "\\":
            if in_single and i + 1 < length and text[i + 1] == "'":
                result.append("'")
                i += 1
            else:
                result.append(char)
                escaped = True
        elif char == '"' and not in_single:
            in_double = not in_double
            result.append(char)
        elif char == "'" and not in_double:
            in_single = not in_single
            result.append('"')
        else:
            result.append(char)

        i += 1

    return "".join(result)


def quote_property_names(text: str) -> str:
    """Wrap identifier-shaped property names in double quotes.

    Only identifiers directly preceded by ``{`` or ``,`` and followed by
    ``:`` (whitespace allowed in between) are rewritten.

    Examples:
        >>> quote_property_names('{name: "Charlie", age: 25}')
        '{"name": "Charlie", "age": 25}'
    """
    return _sub_outside_strings(_UNQUOTED_KEY, r'\1"\2":', text)


def convert_python_literals(text: str) -> str:
    """Translate the whole words True, False and None to JSON literals.

    Examples:
        >>> convert_python_literals('{"a": True, "b": None}')
        '{"a": true, "b": null}'
    """
    return _sub_outside_strings(
        _PYTHON_LITERAL, lambda match: _PYTHON_LITERALS[match.group(1)], text
    )


def remove_trailing_commas(text: str) -> str:
    """Remove commas that directly precede a closing ``}`` or ``]``.

    Examples:
        >>> remove_trailing_commas('[1, 2, ]')
        '[1, 2 ]'
    """
    return _sub_outside_strings(_TRAILING_COMMA, r"\1", text)


def normalize_json_string(text: str, python_literals: bool = True) -> str:
    """Run the full normalization pipeline over JSON-like text.

    Args:
        text: The raw JSON-like input.
        python_literals: Whether to translate True/False/None.

    Returns:
        The rewritten text. It is not guaranteed to be valid JSON; the
        caller decodes it and reports any remaining error.
    """
    result = text.strip()
    result = convert_single_quotes(result)
    result = quote_property_names(result)
    if python_literals:
        result = convert_python_literals(result)
    result = remove_trailing_commas(result)
    return result
