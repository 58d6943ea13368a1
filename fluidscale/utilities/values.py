"""
Tokenizing free-form value strings into numbers and units.

parse_value() reads ``<number><unit>`` (``"2.5rem"``, ``"-1px"``);
parse_numeric_value() reads a bare number (``"16"``, ``".5"``).
Both return None rather than raising on input they do not recognise.
"""

from __future__ import annotations

import math
import re

from fluidscale.schemas.config import CSSUnit, ScaledValue

NUMERIC_VALUE = re.compile(r"^-?\d*\.?\d+$")
CSS_VALUE = re.compile(r"^(-?\d*\.?\d+)(rem|px|em|%)$")


def parse_value(text: str) -> ScaledValue | None:
    """Split ``text`` into a ScaledValue; None if it is not a supported length."""
    match = CSS_VALUE.match(text.strip())
    if match is None:
        return None

    try:
        unit = CSSUnit(match.group(2))
    except ValueError:
        # "%" is tokenized but cannot be scaled
        return None

    return ScaledValue(number=float(match.group(1)), unit=unit)


def parse_numeric_value(text: str) -> float | None:
    """Parse a bare signed decimal; None if ``text`` is anything else."""
    trimmed = text.strip()
    if NUMERIC_VALUE.match(trimmed) is None:
        return None

    number = float(trimmed)
    return None if math.isnan(number) else number


def validate_numeric_range(value: float, minimum: float, maximum: float) -> bool:
    """True if ``minimum <= value <= maximum``."""
    return minimum <= value <= maximum
