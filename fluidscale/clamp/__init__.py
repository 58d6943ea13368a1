"""
The bidirectional clamp() engine.

Exposed names
-------------
derive_linear_function   -- slope/intercept through two (width, px) points
generate_clamp_function  -- format the clamp() expression for two endpoints
parse_clamp              -- recover a ScaleConfig from a clamp() expression
is_clamp_function        -- cheap shape check before attempting a parse
"""

from fluidscale.clamp.generator import derive_linear_function, generate_clamp_function
from fluidscale.clamp.parser import is_clamp_function, parse_clamp

__all__ = [
    "derive_linear_function",
    "generate_clamp_function",
    "parse_clamp",
    "is_clamp_function",
]
