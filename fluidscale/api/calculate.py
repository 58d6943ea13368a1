"""
Public calculation API.

calculate_clamp() validates a ScaleConfig, applies the optional px→rem
conversion and hands the endpoints to the clamp generator. It returns a
CalculationResult regardless of whether the calculation succeeds, so a form
layer can call it on every change without guarding against exceptions.
"""

from __future__ import annotations

import logging
import math

from fluidscale import messages
from fluidscale.clamp.generator import derive_linear_function, generate_clamp_function
from fluidscale.errors import ClampError, ErrorKind
from fluidscale.schemas.config import (
    PLACEHOLDER_RESULT,
    CalculationResult,
    CSSUnit,
    RootFontSize,
    ScaleConfig,
    ScaledValue,
)
from fluidscale.settings.registry import get_settings
from fluidscale.utilities.conversion import base_font_size_px, px_to_rem, to_pixels
from fluidscale.utilities.values import parse_numeric_value

logger = logging.getLogger(__name__)


def calculate_clamp(config: ScaleConfig) -> CalculationResult:
    """
    Generate the clamp() expression described by ``config``.

    Parameters
    ----------
    config:
        Root font size, device-width range, min/max values and unit.

    Returns
    -------
    CalculationResult
        Always returned; never raises. On success ``result`` holds the
        expression and ``details`` the underlying linear function; on failure
        ``result`` is a placeholder and ``error_message`` says why.
    """
    logger.debug(f"Calculating clamp for {config}")
    try:
        result = _calculate(config)
    except ClampError as exc:
        logger.warning(f"Clamp calculation rejected: {exc}")
        return _error_result(str(exc), exc.kind)
    except Exception:
        logger.exception("Unexpected error during clamp calculation")
        return _error_result(messages.CALCULATION_ERROR, ErrorKind.CALCULATION_ERROR)

    logger.info(f"Clamp calculation completed: {result.result}")
    return result


def get_default_config() -> ScaleConfig:
    """Return the starting configuration for a new form."""
    settings = get_settings()
    defaults = settings.default_config
    return ScaleConfig(
        root_font_size=RootFontSize[defaults["root_font_size"]],
        min_device_width=settings.min_device_limit.default,
        max_device_width=settings.max_device_limit.default,
        min_value=defaults["min_value"],
        max_value=defaults["max_value"],
        unit=CSSUnit(defaults["unit"]),
        convert_px_to_rem=defaults["convert_px_to_rem"],
    )


def _calculate(config: ScaleConfig) -> CalculationResult:
    if not config.min_value or not config.max_value:
        raise ClampError(messages.MISSING_VALUES, ErrorKind.MISSING_VALUE)
    if config.unit is None:
        raise ClampError(messages.MISSING_UNIT, ErrorKind.MISSING_VALUE)

    min_num = parse_numeric_value(config.min_value)
    max_num = parse_numeric_value(config.max_value)
    if min_num is None or max_num is None:
        raise ClampError(messages.INVALID_NUMERIC_VALUES, ErrorKind.INVALID_NUMBER)
    if min_num >= max_num:
        raise ClampError(messages.MIN_LESS_THAN_MAX, ErrorKind.INVALID_RANGE)

    _check_device_widths(config)

    # Conversion failures keep their kind but report the generic message.
    try:
        unit = _resolve_unit(config.unit)
        unit, min_num, max_num = _apply_unit_conversion(config, unit, min_num, max_num)
        base = base_font_size_px(config.root_font_size)
        min_px = to_pixels(min_num, unit, base)
        max_px = to_pixels(max_num, unit, base)
    except ClampError as exc:
        logger.debug(f"Unit conversion failed: {exc}")
        raise ClampError(messages.CALCULATION_ERROR, exc.kind) from exc

    min_scaled = ScaledValue(number=min_num, unit=unit)
    max_scaled = ScaledValue(number=max_num, unit=unit)

    details = derive_linear_function(
        min_px, max_px, config.min_device_width, config.max_device_width
    )
    if not (math.isfinite(details.slope) and math.isfinite(details.y_intercept)):
        raise ClampError(messages.CALCULATION_ERROR, ErrorKind.CALCULATION_ERROR)

    clamp_function = generate_clamp_function(config, min_scaled, max_scaled, min_px, max_px, base)
    return CalculationResult(is_valid=True, result=clamp_function, details=details)


def _check_device_widths(config: ScaleConfig) -> None:
    min_device, max_device = config.min_device_width, config.max_device_width
    if not (math.isfinite(min_device) and math.isfinite(max_device)):
        raise ClampError(messages.INVALID_DEVICE_WIDTHS, ErrorKind.INVALID_NUMBER)
    if min_device >= max_device:
        raise ClampError(messages.MIN_DEVICE_LESS_THAN_MAX, ErrorKind.INVALID_RANGE)


def _resolve_unit(unit: CSSUnit | str) -> CSSUnit:
    try:
        return CSSUnit(unit)
    except ValueError:
        raise ClampError(
            messages.format_message(messages.UNSUPPORTED_UNIT, unit=unit),
            ErrorKind.UNSUPPORTED_UNIT,
        ) from None


def _apply_unit_conversion(
    config: ScaleConfig, unit: CSSUnit, min_num: float, max_num: float
) -> tuple[CSSUnit, float, float]:
    """Switch px input to rem output when the config asks for it."""
    if unit is CSSUnit.PX and config.convert_px_to_rem:
        min_rem = px_to_rem(min_num, config.root_font_size)
        max_rem = px_to_rem(max_num, config.root_font_size)
        logger.debug(f"Converted px to rem: {min_num}px→{min_rem}rem, {max_num}px→{max_rem}rem")
        return CSSUnit.REM, min_rem, max_rem
    return unit, min_num, max_num


def _error_result(message: str, kind: ErrorKind) -> CalculationResult:
    return CalculationResult(
        is_valid=False,
        result=PLACEHOLDER_RESULT,
        error_message=message,
        error_kind=kind,
    )
