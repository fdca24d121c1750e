"""In-memory ledger store adapter.

Implements LedgerStorePort with plain dicts and a snapshot stack.
Suitable for tests and single-process embedded use; state is lost on exit.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field

from src.domain.entities import Content, LedgerConfig, Principal, PurchaseRecord

logger = logging.getLogger(__name__)


@dataclass
class _Tables:
    contents: dict[int, Content] = field(default_factory=dict)
    purchases: dict[tuple[Principal, int], PurchaseRecord] = field(default_factory=dict)
    balances: dict[Principal, int] = field(default_factory=dict)
    config: LedgerConfig | None = None

    def copy(self) -> _Tables:
        # Models are never mutated in place (save/get hand out copies),
        # so a shallow copy of each map is a full snapshot.
        return _Tables(
            contents=dict(self.contents),
            purchases=dict(self.purchases),
            balances=dict(self.balances),
            config=self.config,
        )


class InMemoryLedgerStore:
    """In-memory transactional store - one process, serialized calls."""

    def __init__(self) -> None:
        self._tables = _Tables()
        self._lock = threading.RLock()
        self._depth = 0

    # --- Transactions ---

    @contextmanager
    def transaction(self) -> Iterator[None]:
        """Run a block atomically; restore the entry snapshot on error."""
        with self._lock:
            snapshot = self._tables.copy()
            self._depth += 1
            try:
                yield
            except BaseException:
                self._tables = snapshot
                logger.debug(f"Rolled back transaction at depth {self._depth}")
                raise
            finally:
                self._depth -= 1

    # --- Content ---

    # Every table access below holds the lock, so readers in other threads
    # wait for an open transaction to commit or roll back.

    def get_content(self, content_id: int) -> Content | None:
        with self._lock:
            content = self._tables.contents.get(content_id)
            return content.model_copy() if content else None

    def save_content(self, content: Content) -> Content:
        with self._lock:
            self._tables.contents[content.content_id] = content.model_copy()
        return content

    # --- Purchases ---

    def get_purchase(self, buyer: Principal, content_id: int) -> PurchaseRecord | None:
        with self._lock:
            record = self._tables.purchases.get((buyer, content_id))
            return record.model_copy() if record else None

    def save_purchase(self, record: PurchaseRecord) -> PurchaseRecord:
        with self._lock:
            self._tables.purchases[(record.buyer, record.content_id)] = record.model_copy()
        return record

    # --- Earnings ---

    def get_balance(self, creator: Principal) -> int | None:
        with self._lock:
            return self._tables.balances.get(creator)

    def set_balance(self, creator: Principal, amount: int) -> None:
        with self._lock:
            self._tables.balances[creator] = amount

    # --- Config ---

    def get_config(self) -> LedgerConfig | None:
        with self._lock:
            config = self._tables.config
            return config.model_copy() if config else None

    def save_config(self, config: LedgerConfig) -> LedgerConfig:
        with self._lock:
            self._tables.config = config.model_copy()
        return config

    # --- Testing Helpers ---

    def clear(self) -> None:
        """Drop all tables - useful for testing."""
        with self._lock:
            self._tables = _Tables()
