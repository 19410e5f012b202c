"""
Tests for fourc.utils.helpers display formatting.
"""

import math

import pytest

from fourc.utils.helpers import (
    format_cadence,
    format_compact_currency,
    format_currency,
    format_percentage,
    mix_allocation_label,
    safe_divide,
)


class TestFormatting:

    @pytest.mark.parametrize("amount, expected", [(4.44, "$4.44"), (0, "$0.00"), (1234.5, "$1,234.50")])
    def test_currency(self, amount, expected):
        assert format_currency(amount) == expected

    @pytest.mark.parametrize("amount, expected", [(584.04, "$584"), (1000, "$1.0k"), (7_500_000, "$7500.0k")])
    def test_compact_currency(self, amount, expected):
        assert format_compact_currency(amount) == expected

    def test_percentage(self):
        assert format_percentage(0.5) == "50%"
        assert format_percentage(0.1234, 1) == "12.3%"

    def test_cadence(self):
        assert format_cadence(33) == "33"
        assert format_cadence(math.inf) == "∞"

    @pytest.mark.parametrize("total, expected", [
        (100, "✓ 100%"),
        (90, "90% (under-allocated)"),
        (110.0, "110% (over-allocated)"),
    ])
    def test_mix_allocation_label(self, total, expected):
        assert mix_allocation_label(total) == expected


class TestSafeDivide:

    def test_regular(self):
        assert safe_divide(504.04, 80) == pytest.approx(6.3005)

    def test_zero_denominator(self):
        assert safe_divide(1, 0) == 0.0
        assert safe_divide(1, 0, default=-1) == -1

    def test_bad_types(self):
        assert safe_divide("a", 2) == 0.0
