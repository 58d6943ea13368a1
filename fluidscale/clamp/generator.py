"""
Clamp generator: the line through two (device width, value) points as CSS.

Given the value in px at the minimum and maximum device widths, the
preferred value of the clamp() is ``slope * 100vw + y_intercept``:

    slope       = (max_px - min_px) / (max_device_width - min_device_width)
    y_intercept = min_px - slope * min_device_width

The additive constant is written in rem whenever the bounds are in em;
em bounds never produce an em constant.
"""

from __future__ import annotations

from fluidscale.schemas.config import CSSUnit, LinearFunction, ScaleConfig, ScaledValue
from fluidscale.utilities.conversion import from_pixels
from fluidscale.utilities.formatting import format_css_value, format_number


def derive_linear_function(
    min_px: float,
    max_px: float,
    min_device_width: float,
    max_device_width: float,
) -> LinearFunction:
    """
    Derive slope and intercept from two points.

    The caller guarantees ``min_device_width < max_device_width``; equal
    widths raise ZeroDivisionError.
    """
    slope = (max_px - min_px) / (max_device_width - min_device_width)
    y_intercept = min_px - slope * min_device_width
    return LinearFunction(slope=slope, y_intercept=y_intercept, vw_coefficient=slope * 100)


def generate_clamp_function(
    config: ScaleConfig,
    min_scaled: ScaledValue,
    max_scaled: ScaledValue,
    min_px: float,
    max_px: float,
    base_font_size: float,
) -> str:
    """
    Format ``clamp(MIN, Nvw ± C, MAX)`` for the given endpoints.

    Args:
        config: Supplies the device-width range.
        min_scaled: Minimum value in its display unit.
        max_scaled: Maximum value in its display unit.
        min_px: min_scaled in px.
        max_px: max_scaled in px.
        base_font_size: px size of 1rem.

    Returns:
        The clamp() expression.
    """
    line = derive_linear_function(
        min_px, max_px, config.min_device_width, config.max_device_width
    )

    intercept = from_pixels(line.y_intercept, min_scaled.unit, base_font_size)

    vw_value = format_number(line.vw_coefficient)
    constant = format_number(abs(intercept))
    constant_unit = CSSUnit.REM if min_scaled.unit is CSSUnit.EM else min_scaled.unit
    sign = "+" if intercept >= 0 else "-"

    min_formatted = format_css_value(min_scaled.number, min_scaled.unit.value)
    max_formatted = format_css_value(max_scaled.number, max_scaled.unit.value)

    return (
        f"clamp({min_formatted}, {vw_value}vw {sign} "
        f"{constant}{constant_unit.value}, {max_formatted})"
    )
