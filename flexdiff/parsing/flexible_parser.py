"""
Flexible JSON parsing.

Strict JSON is decoded as-is. Anything else gets exactly one more chance:
the text goes through the normalization pipeline and is decoded again.
"""

from __future__ import annotations

import json
import logging
import math
from typing import Any

from flexdiff.parsing.errors import ParseError
from flexdiff.parsing.normalizer import normalize_json_string
from flexdiff.values import nesting_depth


_LOG = logging.getLogger(__name__)

# Documents nested deeper than this are rejected instead of being handed to
# recursive consumers
MAX_NESTING_DEPTH = 512


def _reject_constant(name: str) -> Any:
    # Python's decoder accepts NaN/Infinity, strict JSON does not
    raise ValueError(f"Invalid JSON constant: {name}")


def _parse_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"Number out of range: {text}")
    return value


def _parse_int(text: str) -> int:
    value = int(text)
    try:
        float(value)
    except OverflowError as exc:
        raise ValueError(f"Number out of range: {text}") from exc
    return value


def _decode(text: str) -> Any:
    """Decode strict JSON, converting decoder stack exhaustion to ParseError."""
    try:
        return json.loads(
            text,
            parse_constant=_reject_constant,
            parse_float=_parse_float,
            parse_int=_parse_int,
        )
    except RecursionError as exc:
        raise ParseError("Maximum nesting depth exceeded while decoding") from exc


def parse_flexible(
    text: str,
    python_literals: bool = True,
    max_depth: int = MAX_NESTING_DEPTH,
) -> Any:
    """Parse strict or JSON-like text into a canonical value.

    Accepts, on top of strict JSON: single-quoted strings, unquoted property
    names, Python's True/False/None and trailing commas.

    Args:
        text: The raw input text.
        python_literals: Whether True/False/None are translated during
                         normalization.
        max_depth: Maximum container nesting depth accepted.

    Returns:
        The decoded value (None, bool, int/float, str, list or dict).

    Raises:
        ParseError: If the text is not valid JSON after normalization, if a
                    number does not fit a finite double, or if it nests
                    deeper than ``max_depth``.

    Examples:
        >>> parse_flexible("{'name': 'Bob', 'city': 'Paris'}")
        {'name': 'Bob', 'city': 'Paris'}
        >>> parse_flexible('{name: "Charlie", age: 25}')
        {'name': 'Charlie', 'age': 25}
    """
    try:
        value = _decode(text)
    except ParseError:
        raise
    except ValueError as strict_error:
        _LOG.debug("Strict decode failed (%s); normalizing input", strict_error)
        value = _decode_normalized(text, python_literals)

    depth = nesting_depth(value)
    if depth > max_depth:
        _LOG.debug("Rejecting document nested %d levels deep (max %d)", depth, max_depth)
        raise ParseError(f"Maximum nesting depth exceeded: {depth} > {max_depth}")

    return value


def _decode_normalized(text: str, python_literals: bool) -> Any:
    normalized = normalize_json_string(text, python_literals=python_literals)
    try:
        return _decode(normalized)
    except ParseError as exc:
        exc.normalized = normalized
        raise
    except ValueError as exc:
        raise ParseError.from_decode_error(exc, normalized) from exc
