"""
Settings registry: loads the engine limits from YAML at startup, validates
them, and exposes a read-only query API.

The registry is a module-level singleton; call get_settings() to obtain it.
The limits file is loaded and validated once at import time. Nothing writes
to the registry after startup.

Keys in ``limits.yaml``
-----------------------
decimal_precision          -- digits kept by format_number()
root_font_sizes            -- px size of 1rem per RootFontSize member name
parse_device_width_bounds  -- absolute envelope for parsed device widths
device_width_limits        -- limits for manually entered device widths
value_range                -- plausible range for min/max values
default_config             -- field values of get_default_config()
"""

from __future__ import annotations

import math
from pathlib import Path
from types import MappingProxyType
from typing import Any, NamedTuple, cast

import yaml

from fluidscale.schemas.config import CSSUnit, RootFontSize

_DATA_DIR = Path(__file__).parent / "data"
_LIMITS_FILE = "limits.yaml"

_REQUIRED_KEYS = (
    "decimal_precision",
    "root_font_sizes",
    "parse_device_width_bounds",
    "device_width_limits",
    "value_range",
    "default_config",
)


class NumericRange(NamedTuple):
    """Inclusive ``[min, max]`` range."""

    min: float
    max: float

    def contains(self, value: float) -> bool:
        return self.min <= value <= self.max


class WidthLimit(NamedTuple):
    """Allowed range and default for one device-width field."""

    min: float
    max: float
    default: float


class SettingsRegistry:
    """
    Read-only registry of the engine limits.

    Instantiate directly to use a custom data directory (e.g. in tests);
    otherwise use get_settings() for the module singleton.
    """

    def __init__(self, data_dir: Path = _DATA_DIR) -> None:
        self._data_dir = data_dir

        # Type annotations only; actual assignment happens in _load_all
        self.decimal_precision: int
        self.root_font_sizes: MappingProxyType[RootFontSize, float]
        self.parse_device_width_bounds: NumericRange
        self.min_device_limit: WidthLimit
        self.max_device_limit: WidthLimit
        self.value_range: NumericRange
        self.default_config: MappingProxyType[str, Any]

        self._load_all()

    # ── Loading ────────────────────────────────────────────────────────────────

    def _load_yaml(self, filename: str) -> dict[str, Any]:
        path = self._data_dir / filename
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except FileNotFoundError:
            raise FileNotFoundError(f"Settings data file not found: {path}") from None
        except yaml.YAMLError as exc:
            raise ValueError(f"Failed to parse settings data file {path}: {exc}") from exc
        if not isinstance(data, dict):
            raise ValueError(f"Settings data file {path} must contain a mapping")
        return cast(dict[str, Any], data)

    def _load_all(self) -> None:
        data = self._load_yaml(_LIMITS_FILE)
        missing = [key for key in _REQUIRED_KEYS if key not in data]
        if missing:
            raise ValueError(f"Settings data is missing keys: {', '.join(missing)}")

        precision = data["decimal_precision"]
        if not isinstance(precision, int) or isinstance(precision, bool) or precision < 0:
            raise ValueError(f"decimal_precision must be a non-negative int, got {precision!r}")
        self.decimal_precision = precision

        self._load_root_font_sizes(data["root_font_sizes"])
        self.parse_device_width_bounds = _range(
            data["parse_device_width_bounds"], "parse_device_width_bounds"
        )
        limits = data["device_width_limits"]
        self.min_device_limit = _width_limit(limits, "min_device")
        self.max_device_limit = _width_limit(limits, "max_device")
        if self.min_device_limit.default >= self.max_device_limit.default:
            raise ValueError(
                f"device_width_limits.min_device.default ({self.min_device_limit.default}) "
                f"must be below max_device.default ({self.max_device_limit.default})"
            )
        self.value_range = _range(data["value_range"], "value_range")
        self._load_default_config(data["default_config"])

    def _load_root_font_sizes(self, raw: dict[str, Any]) -> None:
        result: dict[RootFontSize, float] = {}
        for mode in RootFontSize:
            if mode.name not in raw:
                raise ValueError(f"root_font_sizes has no entry for {mode.name}")
            size = _number(raw[mode.name], f"root_font_sizes.{mode.name}")
            if size <= 0:
                raise ValueError(f"root_font_sizes.{mode.name} must be positive, got {size}")
            result[mode] = size
        self.root_font_sizes = MappingProxyType(result)

    def _load_default_config(self, raw: dict[str, Any]) -> None:
        try:
            RootFontSize[raw["root_font_size"]]
            CSSUnit(raw["unit"])
        except (KeyError, TypeError, ValueError) as exc:
            raise ValueError(f"default_config is invalid: {exc!r}") from exc
        self.default_config = MappingProxyType(dict(raw))

    # ── Query API ──────────────────────────────────────────────────────────────

    def get_base_font_size(self, mode: RootFontSize) -> float:
        """Return the px size of 1rem for the given root font-size mode."""
        return self.root_font_sizes[mode]


def _number(value: Any, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
        raise ValueError(f"{name} must be a finite number, got {value!r}")
    return float(value)


def _range(raw: Any, name: str) -> NumericRange:
    try:
        lower = _number(raw["min"], f"{name}.min")
        upper = _number(raw["max"], f"{name}.max")
    except (KeyError, TypeError):
        raise ValueError(f"{name} must be a mapping with min and max") from None
    if lower >= upper:
        raise ValueError(f"{name}.min ({lower}) must be below {name}.max ({upper})")
    return NumericRange(lower, upper)


def _width_limit(limits: Any, name: str) -> WidthLimit:
    try:
        raw = limits[name]
        bounds = _range(raw, f"device_width_limits.{name}")
        default = _number(raw["default"], f"device_width_limits.{name}.default")
    except (KeyError, TypeError):
        raise ValueError(f"device_width_limits.{name} is missing or incomplete") from None
    if not bounds.contains(default):
        raise ValueError(
            f"device_width_limits.{name}.default ({default}) is outside "
            f"[{bounds.min}, {bounds.max}]"
        )
    return WidthLimit(bounds.min, bounds.max, default)


# ── Module-level singleton ─────────────────────────────────────────────────────
#
# Built eagerly at import time; read-only afterwards, so it can be shared
# across threads.

_settings: SettingsRegistry = SettingsRegistry()


def get_settings() -> SettingsRegistry:
    """Return the module-level settings singleton."""
    return _settings
