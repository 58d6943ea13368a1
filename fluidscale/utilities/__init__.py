"""
Shared utilities for the clamp engine.

Provides the pure helpers used identically by the generator and the parser:
number formatting, unit conversion and value tokenizing.
"""

from .conversion import base_font_size_px, from_pixels, px_to_rem, to_pixels
from .formatting import DECIMAL_PRECISION, format_css_value, format_number, round_half_up
from .values import parse_numeric_value, parse_value, validate_numeric_range

__all__ = [
    # formatting
    "DECIMAL_PRECISION",
    "format_number",
    "format_css_value",
    "round_half_up",
    # conversion
    "base_font_size_px",
    "to_pixels",
    "from_pixels",
    "px_to_rem",
    # values
    "parse_value",
    "parse_numeric_value",
    "validate_numeric_range",
]
