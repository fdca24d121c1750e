"""
Revenue component unit tests.
"""

from __future__ import annotations

import pytest

from src.components.revenue import PERMILLE_BASE, RevenueSplit, split_revenue


class TestSplitRevenue:
    """Fee/earnings split."""

    def test_zero_commission_gives_creator_everything(self) -> None:
        assert split_revenue(1000, 0) == RevenueSplit(platform_fee=0, creator_earnings=1000)

    def test_full_commission_gives_creator_nothing(self) -> None:
        result = split_revenue(1000, PERMILLE_BASE)
        assert result.platform_fee == 1000
        assert result.creator_earnings == 0

    def test_fee_rounds_down(self) -> None:
        """99 * 25 / 1000 = 2.475 -> fee 2, creator absorbs the remainder."""
        result = split_revenue(99, 25)
        assert result.platform_fee == 2
        assert result.creator_earnings == 97

    def test_small_price_fee_floors_to_zero(self) -> None:
        result = split_revenue(1, 999)
        assert result.platform_fee == 0
        assert result.creator_earnings == 1

    @pytest.mark.parametrize(
        ("price", "rate"),
        [(1, 1), (7, 333), (1000, 50), (123_456_789, 17), (10**30, 999)],
    )
    def test_split_conserves_price(self, price: int, rate: int) -> None:
        assert split_revenue(price, rate).total == price

    def test_rate_not_bounded_by_splitter(self) -> None:
        """Out-of-range rates are the setter's concern, not the splitter's."""
        result = split_revenue(100, 1500)
        assert result.platform_fee == 150
        assert result.creator_earnings == -50
