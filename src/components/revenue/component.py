"""
Revenue component.

Pure function splitting a price into platform fee and creator earnings.
"""

from __future__ import annotations

from .models import PERMILLE_BASE, RevenueSplit


def split_revenue(price: int, commission_permille: int) -> RevenueSplit:
    """
    Split price by commission rate.

    The fee rounds down; creator earnings absorb the remainder, so
    platform_fee + creator_earnings == price for every input. The rate is
    not bounded here (the administrative setter enforces [0, 1000]).

    Args:
        price: Price in the smallest currency unit
        commission_permille: Platform commission in thousandths

    Returns:
        RevenueSplit with fee and creator earnings
    """
    platform_fee = price * commission_permille // PERMILLE_BASE
    return RevenueSplit(platform_fee=platform_fee, creator_earnings=price - platform_fee)
