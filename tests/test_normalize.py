"""Tests for normalize module - coercion, clamping and required fields."""

import math

import pytest

from wishforge.core.errors import ToolValidationError
from wishforge.core.normalize import clamp_int, require, text_arg


class TestClampInt:
    """clamp_int must be total and idempotent."""

    def test_in_range_passes_through(self):
        assert clamp_int(4, 3, 1, 5) == 4

    def test_above_max(self):
        assert clamp_int(10, 5, 3, 7) == 7

    def test_below_min(self):
        assert clamp_int(-2, 3, 1, 5) == 1

    def test_missing_uses_default(self):
        assert clamp_int(None, 3, 1, 5) == 3

    def test_numeric_string(self):
        assert clamp_int(" 4 ", 3, 1, 5) == 4

    def test_float_truncates(self):
        assert clamp_int(4.9, 3, 1, 5) == 4

    @pytest.mark.parametrize("value", ["abc", "", [], {}, True, False, math.nan, math.inf, object()])
    def test_unusable_values_use_default(self, value):
        assert clamp_int(value, 3, 1, 5) == 3

    def test_huge_integers_clamp_to_edges(self):
        assert clamp_int(10 ** 400, 5, 3, 7) == 7
        assert clamp_int(-(10 ** 400), 5, 3, 7) == 3

    def test_default_outside_range_is_clamped(self):
        assert clamp_int(None, 10, 3, 7) == 7

    @pytest.mark.parametrize("value", [-100, 0, 2, 3, 5, 7, 8, 1e9, "12", None, "x", 10 ** 400, -(10 ** 400), "1" + "0" * 400])
    def test_result_always_in_bounds(self, value):
        result = clamp_int(value, 5, 3, 7)
        assert 3 <= result <= 7

    @pytest.mark.parametrize("value", [-100, 4, 99, None, "x"])
    def test_idempotent(self, value):
        once = clamp_int(value, 5, 3, 7)
        assert clamp_int(once, 5, 3, 7) == once


class TestTextArg:

    def test_present(self):
        assert text_arg({"language": "Hindi"}, "language", "Hinglish") == "Hindi"

    def test_missing(self):
        assert text_arg({}, "language", "Hinglish") == "Hinglish"

    def test_none_arguments(self):
        assert text_arg(None, "language", "Hinglish") == "Hinglish"

    def test_null_value(self):
        assert text_arg({"language": None}, "language", "Hinglish") == "Hinglish"

    def test_blank_value(self):
        assert text_arg({"language": "   "}, "language", "Hinglish") == "Hinglish"

    def test_number_is_stringified(self):
        assert text_arg({"occasion": 2024}, "occasion") == "2024"

    def test_structured_value_uses_default(self):
        assert text_arg({"occasion": {"a": 1}}, "occasion", "x") == "x"


class TestRequire:

    def test_trims(self):
        assert require("  Diwali ", "occasion") == "Diwali"

    def test_empty_raises_with_field_name(self):
        with pytest.raises(ToolValidationError, match="occasion is required"):
            require("   ", "occasion")
