"""
User-facing message templates.

Templates may contain ``{name}`` placeholders; fill them with
format_message(). Unknown placeholders are left as-is so a partially
filled message is still readable.
"""

from __future__ import annotations

import re
from typing import Any

# ── Field validation ───────────────────────────────────────────────────────────

MIN_DEVICE_REQUIRED = "Minimum device width is required"
MAX_DEVICE_REQUIRED = "Maximum device width is required"
MIN_VALUE_REQUIRED = "Minimum value is required"
MAX_VALUE_REQUIRED = "Maximum value is required"
MIN_VALUE_INVALID_NUMBER = "Must be a valid number (e.g., 1, 16, 2.5, -0.5)"
MAX_VALUE_INVALID_NUMBER = "Must be a valid number (e.g., 5, 80, 3.5, -1.2)"
RANGE = "Value must be between {min} and {max}"
MIN_LESS_THAN_MAX = "Minimum value must be less than maximum value"
MAX_GREATER_THAN_MIN = "Maximum value must be greater than minimum value"
DEVICE_WIDTH_RANGE = "Value must be between {min} and {max} px"
MIN_DEVICE_LESS_THAN_MAX = "Minimum width must be less than maximum width"
MAX_DEVICE_GREATER_THAN_MIN = "Maximum width must be greater than minimum width"

# ── Calculation ────────────────────────────────────────────────────────────────

MISSING_VALUES = "Minimum and maximum values are required"
MISSING_UNIT = "Unit is required"
INVALID_NUMERIC_VALUES = "Invalid numeric values"
INVALID_DEVICE_WIDTHS = "Device widths must be finite numbers"
UNSUPPORTED_UNIT = "Unsupported unit: {unit}"
CALCULATION_ERROR = "Calculation error occurred"

# ── Parsing ────────────────────────────────────────────────────────────────────

INVALID_FORMAT = "Invalid clamp() function format"
UNABLE_TO_PARSE_MIN_MAX = "Unable to parse min/max values"
UNABLE_TO_PARSE_PREFERRED = "Unable to parse preferred value (expected format: Xvw ± Yunit)"
DIFFERENT_UNITS = "Min and max values must use the same unit"
INVALID_SLOPE = "Invalid slope in clamp function"
DEVICE_WIDTH_ORDER = (
    "Calculated minimum device width ({min_device}px) must be less than "
    "maximum device width ({max_device}px)"
)
DEVICE_WIDTH_OUT_OF_RANGE = (
    "Calculated device widths ({min_device}px - {max_device}px) are out of "
    "valid range ({lower}px - {upper}px)"
)
PARSING_ERROR = "Parsing error occurred"

_PLACEHOLDER = re.compile(r"\{(\w+)\}")


def format_message(template: str, **values: Any) -> str:
    """Replace ``{name}`` placeholders with the matching keyword values."""

    def _sub(match: re.Match[str]) -> str:
        key = match.group(1)
        return str(values[key]) if key in values else match.group(0)

    return _PLACEHOLDER.sub(_sub, template)
