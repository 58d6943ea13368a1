"""
Public parsing API.

parse_clamp_function() turns a pasted or typed clamp() expression back into
the ScaleConfig that would generate it, so a form can be populated from an
existing stylesheet. Like calculate_clamp(), it never raises.
"""

from __future__ import annotations

import logging

from fluidscale import messages
from fluidscale.clamp.parser import parse_clamp
from fluidscale.errors import ErrorKind
from fluidscale.schemas.config import ParseResult, RootFontSize

logger = logging.getLogger(__name__)


def parse_clamp_function(
    text: str,
    root_font_size: RootFontSize | str = RootFontSize.STANDARD,
) -> ParseResult:
    """
    Recover a ScaleConfig from ``text``.

    Parameters
    ----------
    text:
        A ``clamp(MIN, Nvw ± C, MAX)`` expression.
    root_font_size:
        Root font-size mode, as a RootFontSize or its value ("100", "62.5").

    Returns
    -------
    ParseResult
        Always returned; never raises. Inspect ``is_valid`` before reading
        ``config``.
    """
    if not isinstance(text, str):
        logger.warning(f"Cannot parse non-string clamp input of type {type(text).__name__}")
        return ParseResult(
            is_valid=False,
            error_message=messages.INVALID_FORMAT,
            error_kind=ErrorKind.INVALID_FORMAT,
        )

    try:
        mode = RootFontSize(root_font_size)
    except ValueError:
        logger.warning(f"Unknown root font size {root_font_size!r}")
        return ParseResult(
            is_valid=False,
            error_message=messages.PARSING_ERROR,
            error_kind=ErrorKind.PARSING_ERROR,
        )

    return parse_clamp(text, mode)
