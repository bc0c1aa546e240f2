"""
Error types raised by the flexible parser.
"""

from __future__ import annotations

import json


class ParseError(ValueError):
    """Input could not be decoded as JSON, even after normalization.

    Attributes:
        message: The decoder's message, including position information when
                 the decoder reported one.
        lineno: 1-based line of the failure in ``normalized`` (or None).
        colno: 1-based column of the failure in ``normalized`` (or None).
        pos: 0-based character offset of the failure (or None).
        normalized: The text that was handed to the decoder on the final
                    attempt. Positions refer to this text, not to the
                    caller's original input.
    """

    def __init__(
        self,
        message: str,
        *,
        lineno: int | None = None,
        colno: int | None = None,
        pos: int | None = None,
        normalized: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.lineno = lineno
        self.colno = colno
        self.pos = pos
        self.normalized = normalized

    @classmethod
    def from_decode_error(cls, error: ValueError, normalized: str) -> "ParseError":
        """Build a ParseError from a decoder failure on ``normalized``."""
        if isinstance(error, json.JSONDecodeError):
            return cls(
                str(error),
                lineno=error.lineno,
                colno=error.colno,
                pos=error.pos,
                normalized=normalized,
            )
        return cls(str(error), normalized=normalized)
