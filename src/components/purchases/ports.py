"""
Purchases component ports.
"""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import Protocol

from src.domain.entities import Content, LedgerConfig, Principal, PurchaseRecord


class PurchaseStorePort(Protocol):
    """Store surface the purchase flow needs (reads all tables, writes two)."""

    def transaction(self) -> AbstractContextManager[None]: ...

    def get_content(self, content_id: int) -> Content | None: ...

    def get_config(self) -> LedgerConfig | None: ...

    def get_purchase(self, buyer: Principal, content_id: int) -> PurchaseRecord | None: ...

    def save_purchase(self, record: PurchaseRecord) -> PurchaseRecord: ...

    def get_balance(self, creator: Principal) -> int | None: ...

    def set_balance(self, creator: Principal, amount: int) -> None: ...
