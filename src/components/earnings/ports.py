"""
Earnings component ports.
"""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import Protocol

from src.domain.entities import Principal


class EarningsStorePort(Protocol):
    """Store surface the earnings ledger needs."""

    def transaction(self) -> AbstractContextManager[None]: ...

    def get_balance(self, creator: Principal) -> int | None: ...

    def set_balance(self, creator: Principal, amount: int) -> None: ...
