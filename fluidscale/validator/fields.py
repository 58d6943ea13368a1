"""
Field-level validation of a ScaleConfig.

validate_config() checks each editable field against its rules and returns
the first failing rule's message per field. Fields that pass are absent from
the result, so an empty dict means the config is ready for calculate_clamp().

Rules
-----
min_device_width  required; inside the min-device limits; below max device
max_device_width  required; inside the max-device limits; above min device
min_value         required; bare number; inside the value range; below max value
max_value         required; bare number; inside the value range; above min value

Cross-field comparisons are skipped while the other field is empty or not
a number, so the user sees one problem at a time.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from typing import Any

from fluidscale import messages
from fluidscale.schemas.config import ScaleConfig
from fluidscale.settings.registry import NumericRange, WidthLimit, get_settings
from fluidscale.utilities.formatting import format_number
from fluidscale.utilities.values import parse_numeric_value, validate_numeric_range

# A rule returns an error message, or None when the value passes.
Rule = Callable[[Any, ScaleConfig], str | None]


def validate_config(config: ScaleConfig) -> dict[str, str]:
    """Return ``{field_name: message}`` for every field that fails a rule."""
    settings = get_settings()
    schema: dict[str, list[Rule]] = {
        "min_device_width": [
            _required(messages.MIN_DEVICE_REQUIRED),
            _width_in(settings.min_device_limit),
            _min_device_below_max,
        ],
        "max_device_width": [
            _required(messages.MAX_DEVICE_REQUIRED),
            _width_in(settings.max_device_limit),
            _max_device_above_min,
        ],
        "min_value": [
            _required(messages.MIN_VALUE_REQUIRED),
            _numeric(messages.MIN_VALUE_INVALID_NUMBER),
            _value_in(settings.value_range),
            _min_value_below_max,
        ],
        "max_value": [
            _required(messages.MAX_VALUE_REQUIRED),
            _numeric(messages.MAX_VALUE_INVALID_NUMBER),
            _value_in(settings.value_range),
            _max_value_above_min,
        ],
    }

    errors: dict[str, str] = {}
    for field_name, rules in schema.items():
        value = getattr(config, field_name)
        for rule in rules:
            error = rule(value, config)
            if error is not None:
                errors[field_name] = error
                break
    return errors


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return isinstance(value, float) and math.isnan(value)


def _required(message: str) -> Rule:
    def _rule(value: Any, config: ScaleConfig) -> str | None:
        return message if _is_blank(value) else None

    return _rule


def _numeric(message: str) -> Rule:
    def _rule(value: str, config: ScaleConfig) -> str | None:
        return message if parse_numeric_value(value) is None else None

    return _rule


def _width_in(limit: WidthLimit) -> Rule:
    def _rule(value: float, config: ScaleConfig) -> str | None:
        if validate_numeric_range(value, limit.min, limit.max):
            return None
        return messages.format_message(
            messages.DEVICE_WIDTH_RANGE,
            min=format_number(limit.min),
            max=format_number(limit.max),
        )

    return _rule


def _value_in(value_range: NumericRange) -> Rule:
    def _rule(value: str, config: ScaleConfig) -> str | None:
        number = parse_numeric_value(value)
        if number is not None and validate_numeric_range(
            number, value_range.min, value_range.max
        ):
            return None
        return messages.format_message(
            messages.RANGE,
            min=format_number(value_range.min),
            max=format_number(value_range.max),
        )

    return _rule


def _min_device_below_max(value: float, config: ScaleConfig) -> str | None:
    if _is_blank(config.max_device_width) or value < config.max_device_width:
        return None
    return messages.MIN_DEVICE_LESS_THAN_MAX


def _max_device_above_min(value: float, config: ScaleConfig) -> str | None:
    if _is_blank(config.min_device_width) or value > config.min_device_width:
        return None
    return messages.MAX_DEVICE_GREATER_THAN_MIN


def _min_value_below_max(value: str, config: ScaleConfig) -> str | None:
    min_num = parse_numeric_value(value)
    max_num = parse_numeric_value(config.max_value or "")
    if min_num is None or max_num is None or min_num < max_num:
        return None
    return messages.MIN_LESS_THAN_MAX


def _max_value_above_min(value: str, config: ScaleConfig) -> str | None:
    min_num = parse_numeric_value(config.min_value or "")
    max_num = parse_numeric_value(value)
    if min_num is None or max_num is None or max_num > min_num:
        return None
    return messages.MAX_GREATER_THAN_MIN
