"""
Error taxonomy for the clamp engine.

ClampError is raised by the inner routines (unit conversion, parser steps)
and caught at the public API boundary, where it is turned into a result
object carrying the same ErrorKind.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Category of a calculation or parsing failure."""

    INVALID_FORMAT = "INVALID_FORMAT"
    UNABLE_TO_PARSE_VALUE = "UNABLE_TO_PARSE_VALUE"
    UNIT_MISMATCH = "UNIT_MISMATCH"
    OUT_OF_RANGE = "OUT_OF_RANGE"
    INVALID_NUMBER = "INVALID_NUMBER"
    UNSUPPORTED_UNIT = "UNSUPPORTED_UNIT"
    MISSING_VALUE = "MISSING_VALUE"
    INVALID_RANGE = "INVALID_RANGE"
    CALCULATION_ERROR = "CALCULATION_ERROR"
    PARSING_ERROR = "PARSING_ERROR"


class ClampError(ValueError):
    """A deterministic failure inside the engine, tagged with its kind."""

    def __init__(self, message: str, kind: ErrorKind) -> None:
        super().__init__(message)
        self.kind = kind

    def __repr__(self) -> str:
        return f"ClampError({str(self)!r}, kind={self.kind.value})"
