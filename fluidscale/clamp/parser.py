"""
Clamp parser: recover a ScaleConfig from a ``clamp()`` expression.

This inverts the generator. For ``clamp(MIN, Nvw ± C, MAX)`` the preferred
value crosses MIN and MAX at the device widths

    device_width = (bound_px - constant_px) / (N / 100)

which are rounded to whole pixels and checked against the absolute
envelope from the settings registry.

Only the three-argument shape with a ``vw`` term plus a constant is
understood; a calc() or var() preferred value is reported as
unparseable. parse_clamp() never raises: every failure comes back as a
ParseResult with ``is_valid=False``.
"""

from __future__ import annotations

import logging
import math
import re
from typing import NamedTuple

from fluidscale import messages
from fluidscale.errors import ClampError, ErrorKind
from fluidscale.schemas.config import CSSUnit, ParseResult, RootFontSize, ScaleConfig, ScaledValue
from fluidscale.settings.registry import get_settings
from fluidscale.utilities.conversion import base_font_size_px, to_pixels
from fluidscale.utilities.formatting import format_number, round_half_up
from fluidscale.utilities.values import parse_numeric_value, parse_value

logger = logging.getLogger(__name__)

CLAMP_PATTERN = re.compile(r"^clamp\(\s*([^,]+),\s*([^,]+),\s*([^)]+)\s*\)$", re.IGNORECASE)
PREFERRED_PATTERN = re.compile(r"^(-?\d*\.?\d+)vw\s*([-+])\s*(-?\d*\.?\d+)(\w+)$")

# Failures raised by conversion/arithmetic rather than by a grammar check;
# these are reported with the generic parsing message.
_ARITHMETIC_KINDS = frozenset(
    {ErrorKind.INVALID_NUMBER, ErrorKind.UNSUPPORTED_UNIT, ErrorKind.CALCULATION_ERROR}
)


class PreferredTerm(NamedTuple):
    """The ``Nvw ± C<unit>`` middle argument, with the sign folded into constant."""

    vw_coefficient: float
    constant: float
    constant_unit: str


def is_clamp_function(text: str) -> bool:
    """Shape-only check: does ``text`` look like a three-argument clamp()?"""
    if not isinstance(text, str):
        return False
    return CLAMP_PATTERN.match(text.strip()) is not None


def parse_clamp(clamp_string: str, root_font_size: RootFontSize) -> ParseResult:
    """
    Parse ``clamp_string`` and recover the config that generates it.

    Args:
        clamp_string: e.g. ``"clamp(1rem, 2.294vw + 0.541rem, 2.5rem)"``.
        root_font_size: Mode used to resolve rem/em to px.

    Returns:
        ParseResult with the recovered ScaleConfig, or the failure reason.
    """
    logger.debug(f"Parsing clamp function {clamp_string!r} ({root_font_size.name})")
    try:
        config = _parse(clamp_string, root_font_size)
    except ClampError as exc:
        logger.warning(f"Clamp parsing rejected {clamp_string!r}: {exc}")
        message = messages.PARSING_ERROR if exc.kind in _ARITHMETIC_KINDS else str(exc)
        return ParseResult(is_valid=False, error_message=message, error_kind=exc.kind)
    except Exception:
        logger.exception(f"Unexpected error while parsing {clamp_string!r}")
        return ParseResult(
            is_valid=False,
            error_message=messages.PARSING_ERROR,
            error_kind=ErrorKind.PARSING_ERROR,
        )

    logger.info(f"Parsed clamp function into {config}")
    return ParseResult(is_valid=True, config=config)


def _parse(clamp_string: str, root_font_size: RootFontSize) -> ScaleConfig:
    match = CLAMP_PATTERN.match(clamp_string.strip())
    if match is None:
        raise ClampError(messages.INVALID_FORMAT, ErrorKind.INVALID_FORMAT)

    min_part, preferred_part, max_part = (part.strip() for part in match.groups())

    min_value = _parse_bound(min_part)
    max_value = _parse_bound(max_part)
    if min_value is None or max_value is None:
        raise ClampError(messages.UNABLE_TO_PARSE_MIN_MAX, ErrorKind.UNABLE_TO_PARSE_VALUE)

    if min_value.unit is not max_value.unit:
        raise ClampError(messages.DIFFERENT_UNITS, ErrorKind.UNIT_MISMATCH)

    preferred = _parse_preferred(preferred_part)
    if preferred is None:
        raise ClampError(messages.UNABLE_TO_PARSE_PREFERRED, ErrorKind.UNABLE_TO_PARSE_VALUE)

    min_device, max_device = _recover_device_widths(min_value, max_value, preferred, root_font_size)
    _check_device_widths(min_device, max_device)

    return ScaleConfig(
        root_font_size=root_font_size,
        min_device_width=min_device,
        max_device_width=max_device,
        min_value=format_number(min_value.number),
        max_value=format_number(max_value.number),
        unit=min_value.unit,
        convert_px_to_rem=False,
    )


def _parse_bound(part: str) -> ScaledValue | None:
    """Read a min/max argument; a bare number is taken as px."""
    parsed = parse_value(part)
    if parsed is not None:
        return parsed

    number = parse_numeric_value(part)
    if number is not None:
        return ScaledValue(number=number, unit=CSSUnit.PX)

    return None


def _parse_preferred(part: str) -> PreferredTerm | None:
    match = PREFERRED_PATTERN.match(part)
    if match is None:
        return None

    vw_coeff, sign, constant, constant_unit = match.groups()
    signed_constant = float(constant) * (-1 if sign == "-" else 1)
    return PreferredTerm(float(vw_coeff), signed_constant, constant_unit)


def _recover_device_widths(
    min_value: ScaledValue,
    max_value: ScaledValue,
    preferred: PreferredTerm,
    root_font_size: RootFontSize,
) -> tuple[int, int]:
    """Solve the preferred line for the widths where it meets MIN and MAX."""
    base = base_font_size_px(root_font_size)
    min_px = to_pixels(min_value.number, min_value.unit, base)
    max_px = to_pixels(max_value.number, max_value.unit, base)
    constant_px = math.copysign(
        to_pixels(abs(preferred.constant), preferred.constant_unit, base), preferred.constant
    )

    slope = preferred.vw_coefficient / 100
    if slope == 0 or not math.isfinite(slope):
        raise ClampError(messages.INVALID_SLOPE, ErrorKind.INVALID_RANGE)

    min_device = (min_px - constant_px) / slope
    max_device = (max_px - constant_px) / slope
    if not (math.isfinite(min_device) and math.isfinite(max_device)):
        raise ClampError(messages.PARSING_ERROR, ErrorKind.CALCULATION_ERROR)

    return int(round_half_up(min_device)), int(round_half_up(max_device))


def _check_device_widths(min_device: int, max_device: int) -> None:
    if min_device >= max_device:
        raise ClampError(
            messages.format_message(
                messages.DEVICE_WIDTH_ORDER, min_device=min_device, max_device=max_device
            ),
            ErrorKind.OUT_OF_RANGE,
        )

    bounds = get_settings().parse_device_width_bounds
    if not (bounds.contains(min_device) and bounds.contains(max_device)):
        raise ClampError(
            messages.format_message(
                messages.DEVICE_WIDTH_OUT_OF_RANGE,
                min_device=min_device,
                max_device=max_device,
                lower=format_number(bounds.min),
                upper=format_number(bounds.max),
            ),
            ErrorKind.OUT_OF_RANGE,
        )
