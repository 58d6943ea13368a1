"""
Value objects shared by the generator, the parser and the public API.

All types are frozen dataclasses created per call and discarded once the
caller has consumed them. None of them validate on construction: inputs
come from half-filled forms, and the API reports problems through
CalculationResult / ParseResult instead of raising.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from fluidscale.errors import ErrorKind

PLACEHOLDER_RESULT = "clamp(min, preferred, max)"


class CSSUnit(str, Enum):
    """Length units the engine can scale."""

    REM = "rem"
    PX = "px"
    EM = "em"

    @property
    def is_font_relative(self) -> bool:
        """True for units sized against the root font size."""
        return self in (CSSUnit.REM, CSSUnit.EM)


class RootFontSize(str, Enum):
    """
    Root font-size convention, valued by the html font-size percentage.

      STANDARD   → 100%  (1rem = 16px)
      SIMPLIFIED → 62.5% (1rem = 10px)
    """

    STANDARD = "100"
    SIMPLIFIED = "62.5"


@dataclass(frozen=True)
class ScaleConfig:
    """
    Everything needed to generate one clamp() expression.

    Attributes:
        root_font_size: Root font-size mode used for rem/em conversion.
        min_device_width: Viewport width (px) where scaling starts.
        max_device_width: Viewport width (px) where scaling stops.
        min_value: Value at min_device_width, as typed (e.g. "1", "2.5").
        max_value: Value at max_device_width, as typed.
        unit: Unit of both values; None while the form is incomplete.
        convert_px_to_rem: Emit rem output for px input.
    """

    root_font_size: RootFontSize
    min_device_width: float
    max_device_width: float
    min_value: str
    max_value: str
    unit: CSSUnit | None
    convert_px_to_rem: bool = False


@dataclass(frozen=True)
class ScaledValue:
    """A number paired with its CSS unit, e.g. ``2.5rem``."""

    number: float
    unit: CSSUnit


@dataclass(frozen=True)
class LinearFunction:
    """
    The line through (min_device_width, min_px) and (max_device_width, max_px).

    Attributes:
        slope: px of output per px of device width.
        y_intercept: output in px at a zero-width viewport.
        vw_coefficient: slope expressed per vw (1% of viewport width).
    """

    slope: float
    y_intercept: float
    vw_coefficient: float


@dataclass(frozen=True)
class CalculationResult:
    """Outcome of calculate_clamp(); ``result`` is a placeholder when invalid."""

    is_valid: bool
    result: str
    error_message: str | None = None
    error_kind: ErrorKind | None = None
    details: LinearFunction | None = None


@dataclass(frozen=True)
class ParseResult:
    """Outcome of parse_clamp_function(); ``config`` is only set when valid."""

    is_valid: bool
    config: ScaleConfig | None = None
    error_message: str | None = None
    error_kind: ErrorKind | None = None
