"""
Unit conversion between CSS lengths and pixels.

rem and em are both resolved against the root font size; the engine has no
notion of a parent element, so 1em == 1rem here.
All functions are pure and keep no state.
"""

from __future__ import annotations

import math

from fluidscale import messages
from fluidscale.errors import ClampError, ErrorKind
from fluidscale.schemas.config import CSSUnit, RootFontSize
from fluidscale.settings.registry import get_settings


def base_font_size_px(mode: RootFontSize) -> float:
    """Pixel size of 1rem under the given root font-size mode."""
    return get_settings().get_base_font_size(mode)


def to_pixels(value: float, unit: CSSUnit | str, base_font_size: float) -> float:
    """
    Convert ``value`` in ``unit`` to pixels.

    Raises:
        ClampError: INVALID_NUMBER if value or base_font_size is not finite,
            UNSUPPORTED_UNIT if unit is not px, rem or em.
    """
    if not math.isfinite(value) or not math.isfinite(base_font_size):
        raise ClampError(messages.INVALID_NUMERIC_VALUES, ErrorKind.INVALID_NUMBER)

    try:
        css_unit = CSSUnit(unit)
    except ValueError:
        raise ClampError(
            messages.format_message(messages.UNSUPPORTED_UNIT, unit=unit),
            ErrorKind.UNSUPPORTED_UNIT,
        ) from None

    if css_unit.is_font_relative:
        return value * base_font_size
    return value


def from_pixels(px_value: float, unit: CSSUnit, base_font_size: float) -> float:
    """Inverse of to_pixels(): express a pixel length in ``unit``."""
    if unit.is_font_relative:
        return px_value / base_font_size
    return px_value


def px_to_rem(px_value: float, mode: RootFontSize) -> float:
    """Convert pixels to rem under the given root font-size mode."""
    return px_value / base_font_size_px(mode)
