"""
Revenue component models.
"""

from __future__ import annotations

from dataclasses import dataclass

# Rates are expressed in thousandths (1000 = 100%)
PERMILLE_BASE = 1000


@dataclass(frozen=True)
class RevenueSplit:
    """Result of splitting a price between platform and creator."""

    platform_fee: int
    creator_earnings: int

    @property
    def total(self) -> int:
        return self.platform_fee + self.creator_earnings
