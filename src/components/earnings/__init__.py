"""
Earnings component.

Per-creator withdrawable balances: credited by purchases, zeroed-then-paid
on withdrawal.
"""

from .component import EarningsLedger, credit_earnings
from .ports import EarningsStorePort

__all__ = [
    # Service
    "EarningsLedger",
    "credit_earnings",
    # Ports
    "EarningsStorePort",
]
