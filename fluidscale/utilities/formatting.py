"""
Numeric formatting for CSS output.

Numbers are rounded to a fixed decimal precision *before* being rendered,
so binary floating-point noise (``0.1 + 0.2``) never reaches the output.
Rendered numbers carry no trailing zeros and no dangling decimal point.
"""

from __future__ import annotations

import math

from fluidscale.settings.registry import get_settings

DECIMAL_PRECISION: int = get_settings().decimal_precision


def round_half_up(value: float, precision: int = 0) -> float:
    """
    Round to ``precision`` decimal places with ties rounded up
    (0.0625 -> 0.063, -0.0625 -> -0.062).
    """
    multiplier = 10**precision
    scaled = value * multiplier
    if not math.isfinite(scaled):
        return value
    return math.floor(scaled + 0.5) / multiplier


def format_number(value: float, precision: int = DECIMAL_PRECISION) -> str:
    """Render ``value`` rounded to ``precision`` digits; non-finite values render as "0"."""
    if not math.isfinite(value):
        return "0"

    rounded = round_half_up(value, precision)
    if rounded == 0:
        rounded = 0.0  # drop the sign of -0.0

    text = f"{rounded:.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_css_value(value: float, unit: str) -> str:
    """Render a ``<number><unit>`` pair, e.g. ``2.5rem``."""
    return f"{format_number(value)}{unit}"
