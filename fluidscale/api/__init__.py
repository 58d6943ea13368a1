"""Public entry points consumed by the form layer."""

from fluidscale.api.calculate import calculate_clamp, get_default_config
from fluidscale.api.parse import parse_clamp_function

__all__ = ["calculate_clamp", "get_default_config", "parse_clamp_function"]
