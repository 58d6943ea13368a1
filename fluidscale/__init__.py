"""
Fluid scale engine: bidirectional CSS ``clamp()`` interpolation.

calculate_clamp() turns a ScaleConfig into a ``clamp(MIN, Nvw ± C, MAX)``
string; parse_clamp_function() recovers the ScaleConfig from such a string.
Both are pure and always return a result object, never raise.
"""

from fluidscale.api.calculate import calculate_clamp, get_default_config
from fluidscale.api.parse import parse_clamp_function
from fluidscale.clamp.parser import is_clamp_function
from fluidscale.errors import ClampError, ErrorKind
from fluidscale.schemas.config import (
    CalculationResult,
    CSSUnit,
    LinearFunction,
    ParseResult,
    RootFontSize,
    ScaleConfig,
    ScaledValue,
)

__all__ = [
    # api
    "calculate_clamp",
    "get_default_config",
    "parse_clamp_function",
    "is_clamp_function",
    # types
    "CSSUnit",
    "RootFontSize",
    "ScaleConfig",
    "ScaledValue",
    "LinearFunction",
    "CalculationResult",
    "ParseResult",
    # errors
    "ClampError",
    "ErrorKind",
]
