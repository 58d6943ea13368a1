"""Value objects exchanged with the clamp engine."""

from fluidscale.schemas.config import (
    PLACEHOLDER_RESULT,
    CalculationResult,
    CSSUnit,
    LinearFunction,
    ParseResult,
    RootFontSize,
    ScaleConfig,
    ScaledValue,
)

__all__ = [
    "PLACEHOLDER_RESULT",
    "CalculationResult",
    "CSSUnit",
    "LinearFunction",
    "ParseResult",
    "RootFontSize",
    "ScaleConfig",
    "ScaledValue",
]
