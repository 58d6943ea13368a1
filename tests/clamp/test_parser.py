"""Tests for the clamp parser."""

import pytest

from fluidscale import messages
from fluidscale.clamp.parser import is_clamp_function, parse_clamp
from fluidscale.errors import ErrorKind
from fluidscale.schemas.config import CSSUnit, RootFontSize, ScaleConfig

STANDARD = RootFontSize.STANDARD


class TestIsClampFunction:
    @pytest.mark.parametrize(
        "text",
        [
            "clamp(1rem, 2vw + 1rem, 3rem)",
            "  clamp(1rem,2vw + 1rem,3rem)  ",
            "CLAMP(16px, 5vw + 2px, 40px)",
            "clamp(a, b, c)",
        ],
    )
    def test_shape_matches(self, text):
        assert is_clamp_function(text)

    @pytest.mark.parametrize(
        "text",
        ["not-a-clamp", "clamp(1rem, 3rem)", "min(1rem, 2vw, 3rem)", "clamp(1rem, 2vw, 3rem", ""],
    )
    def test_shape_rejected(self, text):
        assert not is_clamp_function(text)

    @pytest.mark.parametrize("text", [None, 42, b"clamp(1rem, 2vw + 1rem, 3rem)"])
    def test_non_string_rejected(self, text):
        assert is_clamp_function(text) is False


class TestParseValid:
    def test_px_example(self):
        result = parse_clamp("clamp(16px, 5vw + 2px, 40px)", STANDARD)
        assert result.is_valid
        assert result.error_message is None
        assert result.config == ScaleConfig(
            root_font_size=STANDARD,
            min_device_width=280,
            max_device_width=760,
            min_value="16",
            max_value="40",
            unit=CSSUnit.PX,
            convert_px_to_rem=False,
        )

    def test_device_widths_are_ints(self):
        config = parse_clamp("clamp(16px, 5vw + 2px, 40px)", STANDARD).config
        assert isinstance(config.min_device_width, int)
        assert isinstance(config.max_device_width, int)

    def test_rem_example(self):
        config = parse_clamp("clamp(1rem, 2.294vw + 0.541rem, 2.5rem)", STANDARD).config
        assert config.min_device_width == 320
        assert config.max_device_width == 1366
        assert config.min_value == "1"
        assert config.max_value == "2.5"
        assert config.unit is CSSUnit.REM

    def test_em_bounds_with_rem_constant(self):
        config = parse_clamp("clamp(1em, 2.294vw + 0.541rem, 2.5em)", STANDARD).config
        assert config.unit is CSSUnit.EM
        assert (config.min_device_width, config.max_device_width) == (320, 1366)

    def test_negative_constant(self):
        config = parse_clamp("clamp(1rem, 8vw - 3rem, 3rem)", STANDARD).config
        assert (config.min_device_width, config.max_device_width) == (800, 1200)

    def test_case_insensitive_keyword(self):
        assert parse_clamp("CLAMP(16px, 5vw + 2px, 40px)", STANDARD).is_valid

    def test_bare_numbers_are_px(self):
        config = parse_clamp("clamp(16, 5vw + 2px, 40)", STANDARD).config
        assert config.unit is CSSUnit.PX
        assert (config.min_device_width, config.max_device_width) == (280, 760)

    def test_no_spaces_around_sign(self):
        assert parse_clamp("clamp(16px,5vw+2px,40px)", STANDARD).is_valid

    def test_simplified_mode(self):
        result = parse_clamp("clamp(1.6rem, 2.5vw + 0.8rem, 4rem)", RootFontSize.SIMPLIFIED)
        assert result.is_valid
        assert result.config.root_font_size is RootFontSize.SIMPLIFIED
        assert (result.config.min_device_width, result.config.max_device_width) == (320, 1280)

    def test_values_rounded_to_three_places(self):
        config = parse_clamp("clamp(1.23456rem, 2vw + 0.5rem, 3rem)", STANDARD).config
        assert config.min_value == "1.235"
        assert config.min_device_width == 588
        assert config.max_device_width == 2000


class TestParseInvalid:
    def test_not_a_clamp(self):
        result = parse_clamp("not-a-clamp", STANDARD)
        assert not result.is_valid
        assert result.config is None
        assert result.error_message == "Invalid clamp() function format"
        assert result.error_kind is ErrorKind.INVALID_FORMAT

    def test_unit_mismatch(self):
        result = parse_clamp("clamp(1rem, 3vw + 1px, 2em)", STANDARD)
        assert not result.is_valid
        assert result.error_message == messages.DIFFERENT_UNITS
        assert result.error_kind is ErrorKind.UNIT_MISMATCH

    @pytest.mark.parametrize(
        "text", ["clamp(abc, 5vw + 2px, 40px)", "clamp(50%, 5vw + 2px, 40%)", "clamp(1rem, 2vw, x)"]
    )
    def test_unparseable_bounds(self, text):
        result = parse_clamp(text, STANDARD)
        assert result.error_message == messages.UNABLE_TO_PARSE_MIN_MAX
        assert result.error_kind is ErrorKind.UNABLE_TO_PARSE_VALUE

    @pytest.mark.parametrize(
        "text",
        [
            "clamp(1rem, 2vw, 3rem)",
            "clamp(1rem, 1rem + 2vw, 3rem)",
            "clamp(1rem, calc(2vw + 1rem), 3rem)",
            "clamp(1rem, var(--fluid), 3rem)",
        ],
    )
    def test_unparseable_preferred(self, text):
        result = parse_clamp(text, STANDARD)
        assert result.error_message == messages.UNABLE_TO_PARSE_PREFERRED
        assert result.error_kind is ErrorKind.UNABLE_TO_PARSE_VALUE

    def test_zero_slope(self):
        result = parse_clamp("clamp(16px, 0vw + 2px, 40px)", STANDARD)
        assert result.error_message == messages.INVALID_SLOPE

    def test_unsupported_constant_unit(self):
        result = parse_clamp("clamp(16px, 5vw + 2vh, 40px)", STANDARD)
        assert result.error_message == "Parsing error occurred"
        assert result.error_kind is ErrorKind.UNSUPPORTED_UNIT

    def test_device_widths_below_envelope(self):
        result = parse_clamp("clamp(16px, 50vw + 2px, 40px)", STANDARD)
        assert not result.is_valid
        assert result.error_kind is ErrorKind.OUT_OF_RANGE
        assert "28px - 76px" in result.error_message
        assert "100px - 10000px" in result.error_message

    def test_device_widths_above_envelope(self):
        result = parse_clamp("clamp(16px, 0.1vw + 2px, 40px)", STANDARD)
        assert result.error_kind is ErrorKind.OUT_OF_RANGE
        assert "14000px - 38000px" in result.error_message

    def test_inverted_device_widths(self):
        result = parse_clamp("clamp(16px, -5vw + 60px, 40px)", STANDARD)
        assert result.error_kind is ErrorKind.OUT_OF_RANGE
        assert "880px" in result.error_message
        assert "400px" in result.error_message

    def test_never_raises_on_garbage(self):
        for text in ["clamp(,,)", "clamp(1e999px, 1vw + 1px, 2px)", "clamp((((", ")))"]:
            result = parse_clamp(text, STANDARD)
            assert not result.is_valid
