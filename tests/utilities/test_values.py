"""Tests for value tokenizing."""

import pytest

from fluidscale.schemas.config import CSSUnit, ScaledValue
from fluidscale.utilities.values import parse_numeric_value, parse_value, validate_numeric_range


class TestParseValue:
    def test_rem(self):
        assert parse_value("2.5rem") == ScaledValue(number=2.5, unit=CSSUnit.REM)

    def test_negative_px_with_whitespace(self):
        assert parse_value("  -1px ") == ScaledValue(number=-1.0, unit=CSSUnit.PX)

    def test_leading_dot(self):
        assert parse_value(".5em") == ScaledValue(number=0.5, unit=CSSUnit.EM)

    def test_percent_is_not_a_scalable_unit(self):
        assert parse_value("50%") is None

    @pytest.mark.parametrize("text", ["2.5", "2.5vw", "rem", "1.5.5rem", "", "2 rem", "2.5REM"])
    def test_rejected(self, text):
        assert parse_value(text) is None


class TestParseNumericValue:
    def test_integer(self):
        assert parse_numeric_value("16") == 16.0

    def test_negative_decimal(self):
        assert parse_numeric_value("-0.5") == -0.5

    def test_leading_dot(self):
        assert parse_numeric_value(".5") == 0.5

    def test_surrounding_whitespace(self):
        assert parse_numeric_value(" 2.5 ") == 2.5

    @pytest.mark.parametrize("text", ["abc", "1e3", "", "5.", "+5", "1rem", "nan", "inf"])
    def test_rejected(self, text):
        assert parse_numeric_value(text) is None


class TestValidateNumericRange:
    def test_inside(self):
        assert validate_numeric_range(5, 0, 10)

    def test_bounds_inclusive(self):
        assert validate_numeric_range(0, 0, 10)
        assert validate_numeric_range(10, 0, 10)

    def test_outside(self):
        assert not validate_numeric_range(11, 0, 10)
        assert not validate_numeric_range(-0.1, 0, 10)
