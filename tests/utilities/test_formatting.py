"""Tests for numeric formatting."""

import math

import pytest

from fluidscale.utilities.formatting import (
    DECIMAL_PRECISION,
    format_css_value,
    format_number,
    round_half_up,
)


class TestRoundHalfUp:
    def test_integer_default_precision(self):
        assert round_half_up(2.4) == 2.0
        assert round_half_up(2.5) == 3.0

    def test_negative_tie_rounds_up(self):
        assert round_half_up(-2.5) == -2.0

    def test_three_decimals(self):
        assert round_half_up(0.0625, 3) == 0.063

    def test_huge_value_passes_through(self):
        assert round_half_up(1e308, 3) == 1e308


class TestFormatNumber:
    def test_default_precision_is_three(self):
        assert DECIMAL_PRECISION == 3

    def test_integer_has_no_decimal_point(self):
        assert format_number(1.0) == "1"
        assert format_number(10.0) == "10"
        assert format_number(100) == "100"

    def test_trailing_zeros_removed(self):
        assert format_number(2.5) == "2.5"
        assert format_number(2.50) == "2.5"

    def test_rounds_to_three_places(self):
        assert format_number(1.23456) == "1.235"
        assert format_number(2.2944550669216062) == "2.294"

    def test_tie_rounds_up(self):
        assert format_number(0.0625) == "0.063"

    def test_no_float_noise(self):
        assert format_number(0.1 + 0.2) == "0.3"

    def test_negative(self):
        assert format_number(-1.5) == "-1.5"

    def test_tiny_negative_is_plain_zero(self):
        assert format_number(-0.0004) == "0"
        assert format_number(-0.0) == "0"

    def test_zero(self):
        assert format_number(0) == "0"

    def test_custom_precision(self):
        assert format_number(2.25, precision=1) == "2.3"
        assert format_number(2.5, precision=0) == "3"

    @pytest.mark.parametrize("value", [math.inf, -math.inf, math.nan])
    def test_non_finite_is_zero(self, value):
        assert format_number(value) == "0"

    def test_idempotent(self):
        for value in [0.1 + 0.2, 1.23456, -7.0005, 1000.5, 2 / 3, 123456.789, -0.0004]:
            once = format_number(value)
            assert format_number(float(once)) == once


class TestFormatCssValue:
    def test_rem(self):
        assert format_css_value(2.5, "rem") == "2.5rem"

    def test_px_integer(self):
        assert format_css_value(16.0, "px") == "16px"

    def test_non_finite_renders_zero(self):
        assert format_css_value(math.nan, "em") == "0em"
