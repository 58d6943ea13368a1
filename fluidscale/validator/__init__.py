"""
Config validator: public API.

Exposed names
-------------
validate_config  -- per-field error messages for a ScaleConfig (empty when valid)
"""

from fluidscale.validator.fields import validate_config

__all__ = ["validate_config"]
