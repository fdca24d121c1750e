"""
Ledger store interfaces.

Protocol-based interfaces for the three persistent ledger tables plus the
process-wide configuration row.
Implementations: in-memory (tests, embedded use), SQLite.

Invariants:
- Every public ledger operation runs inside exactly one transaction()
  block; writes made inside a block that raises are discarded.
- transaction() nests: an inner block that raises rolls back only its own
  writes, the outer block continues.
- Top-level transactions are serialized; no two operations interleave.
"""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import Protocol

from src.domain.entities import Content, LedgerConfig, Principal, PurchaseRecord

# -----------------------------------------------------------------------------
# ContentRegistry table
# -----------------------------------------------------------------------------


class ContentRepoPort(Protocol):
    """Content records keyed by content id."""

    def get_content(self, content_id: int) -> Content | None:
        """Get content by id, or None if never registered."""
        ...

    def save_content(self, content: Content) -> Content:
        """Upsert content record."""
        ...


# -----------------------------------------------------------------------------
# PurchaseLedger table
# -----------------------------------------------------------------------------


class PurchaseRepoPort(Protocol):
    """Purchase records keyed by (buyer, content id)."""

    def get_purchase(self, buyer: Principal, content_id: int) -> PurchaseRecord | None:
        """Get purchase record, or None if the buyer never purchased."""
        ...

    def save_purchase(self, record: PurchaseRecord) -> PurchaseRecord:
        """Upsert purchase record (overwrites any previous record)."""
        ...


# -----------------------------------------------------------------------------
# EarningsLedger table
# -----------------------------------------------------------------------------


class EarningsRepoPort(Protocol):
    """Withdrawable creator balances keyed by creator."""

    def get_balance(self, creator: Principal) -> int | None:
        """Get balance, or None if the creator was never credited."""
        ...

    def set_balance(self, creator: Principal, amount: int) -> None:
        """Set balance (creates the record on first write)."""
        ...


# -----------------------------------------------------------------------------
# Configuration row
# -----------------------------------------------------------------------------


class ConfigRepoPort(Protocol):
    """Singleton LedgerConfig row."""

    def get_config(self) -> LedgerConfig | None:
        """Get config, or None before initialization."""
        ...

    def save_config(self, config: LedgerConfig) -> LedgerConfig:
        """Save config (upsert)."""
        ...


# -----------------------------------------------------------------------------
# Composite store
# -----------------------------------------------------------------------------


class LedgerStorePort(ContentRepoPort, PurchaseRepoPort, EarningsRepoPort, ConfigRepoPort, Protocol):
    """
    Transactional key-value store backing the ledger.

    Provides atomic, serializable apply-or-reject semantics per call.
    """

    def transaction(self) -> AbstractContextManager[None]:
        """
        Open a (possibly nested) transaction.

        Commits on normal exit; rolls back and re-raises on exception.
        """
        ...
