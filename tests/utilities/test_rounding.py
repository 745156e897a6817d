"""Tests for half-up rounding."""

import pytest

from gaugeshift.utilities.rounding import round_half_up, round_half_up_to


class TestRoundHalfUp:
    def test_half_rounds_up(self):
        assert round_half_up(2.5) == 3
        assert round_half_up(0.5) == 1

    def test_differs_from_bankers_rounding(self):
        assert round(2.5) == 2
        assert round_half_up(2.5) == 3

    def test_negative_half_rounds_towards_positive(self):
        assert round_half_up(-2.5) == -2

    def test_below_half_rounds_down(self):
        assert round_half_up(1.49) == 1

    def test_integer_unchanged(self):
        assert round_half_up(7) == 7

    def test_returns_int(self):
        assert isinstance(round_half_up(3.7), int)


class TestRoundHalfUpTo:
    def test_one_decimal(self):
        assert round_half_up_to(2.25, 1) == 2.3

    def test_two_decimals(self):
        assert round_half_up_to(1.1, 2) == 1.1

    def test_zero_decimals(self):
        assert round_half_up_to(2.5, 0) == 3

    def test_rejects_negative_decimals(self):
        with pytest.raises(ValueError, match="decimals must be >= 0"):
            round_half_up_to(1.0, -1)
