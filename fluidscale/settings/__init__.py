"""Engine limits and defaults, loaded from YAML at import time."""

from fluidscale.settings.registry import (
    NumericRange,
    SettingsRegistry,
    WidthLimit,
    get_settings,
)

__all__ = ["NumericRange", "SettingsRegistry", "WidthLimit", "get_settings"]
