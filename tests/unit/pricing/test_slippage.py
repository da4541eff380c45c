"""Tests for slippage bounds."""

import pytest

from amm_quote.constants import MAX_AMOUNT
from amm_quote.pricing import bound, calculate_slippage_bounds


class TestSlippageBounds:
    def test_default_two_percent(self):
        band = calculate_slippage_bounds(10_000)
        assert (band.minimum, band.maximum) == (9_800, 10_200)

    def test_offset_truncates(self):
        """199 * 200 / 10000 = 3.98 -> 3."""
        band = calculate_slippage_bounds(199)
        assert (band.minimum, band.maximum) == (196, 202)

    def test_custom_tolerance(self):
        band = calculate_slippage_bounds(10_000, tolerance_bps=50)
        assert (band.minimum, band.maximum) == (9_950, 10_050)

    def test_zero_tolerance(self):
        band = calculate_slippage_bounds(12_345, tolerance_bps=0)
        assert band.minimum == band.maximum == 12_345

    @pytest.mark.parametrize("amount", [0, 1, 10**18, 123_456_789, MAX_AMOUNT - 1, MAX_AMOUNT])
    def test_band_contains_amount(self, amount):
        band = calculate_slippage_bounds(amount)
        assert band.minimum <= amount <= band.maximum
        assert amount in band

    def test_maximum_clamped(self):
        assert calculate_slippage_bounds(MAX_AMOUNT).maximum == MAX_AMOUNT

    def test_minimum_clamped_at_zero(self):
        """A tolerance above 100% cannot push the minimum negative."""
        assert calculate_slippage_bounds(100, tolerance_bps=20_000).minimum == 0

    def test_negative_amount_clamped(self):
        band = calculate_slippage_bounds(-5)
        assert (band.minimum, band.maximum) == (0, 0)

    def test_negative_tolerance(self):
        with pytest.raises(ValueError):
            calculate_slippage_bounds(100, tolerance_bps=-1)

    def test_alias(self):
        assert bound is calculate_slippage_bounds
