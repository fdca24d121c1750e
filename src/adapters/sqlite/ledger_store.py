"""
SQLite ledger store adapter.

Implements LedgerStorePort on a single SQLite connection. Each
transaction() block is a SAVEPOINT, so nested blocks roll back only their
own writes and the outermost RELEASE commits to disk. Every statement,
reads included, runs under the store lock, so no thread observes another
thread's open savepoint.

Schema: src/adapters/sqlite/migrations/0001_ledger.sql (apply with
SQLiteMigrator before first use).
"""

from __future__ import annotations

import logging
import sqlite3
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from src.domain.entities import Content, LedgerConfig, Principal, PurchaseRecord

logger = logging.getLogger(__name__)


# Helper to convert sqlite rows to dicts
def dict_factory(cursor: sqlite3.Cursor, row: tuple[Any, ...]) -> dict[str, Any]:
    return {col[0]: row[idx] for idx, col in enumerate(cursor.description)}


class SQLiteLedgerStore:
    def __init__(self, db_path: str, connection: sqlite3.Connection | None = None):
        self.db_path = db_path
        self._external_conn = connection is not None
        # Autocommit mode: transactions are driven by explicit savepoints
        self._conn = connection or sqlite3.connect(
            db_path, isolation_level=None, check_same_thread=False
        )
        self._conn.row_factory = dict_factory
        self._lock = threading.RLock()
        self._depth = 0

    def close(self) -> None:
        if not self._external_conn:
            self._conn.close()

    # --- Transactions ---

    @contextmanager
    def transaction(self) -> Iterator[None]:
        with self._lock:
            self._depth += 1
            name = f"ledger_sp_{self._depth}"
            self._conn.execute(f"SAVEPOINT {name}")
            try:
                yield
            except BaseException:
                self._conn.execute(f"ROLLBACK TO SAVEPOINT {name}")
                self._conn.execute(f"RELEASE SAVEPOINT {name}")
                logger.debug(f"Rolled back savepoint {name}")
                raise
            else:
                self._conn.execute(f"RELEASE SAVEPOINT {name}")
            finally:
                self._depth -= 1

    def _execute(self, sql: str, params: tuple[Any, ...] = ()) -> None:
        with self._lock:
            self._conn.execute(sql, params)

    def _fetchone(self, sql: str, params: tuple[Any, ...] = ()) -> dict[str, Any] | None:
        with self._lock:
            return self._conn.execute(sql, params).fetchone()

    # --- Content ---

    def get_content(self, content_id: int) -> Content | None:
        row = self._fetchone("SELECT * FROM contents WHERE content_id = ?", (content_id,))
        if not row:
            return None
        return Content(
            content_id=row["content_id"],
            creator=row["creator"],
            price=row["price"],
            creator_share_permille=row["creator_share_permille"],
            metadata_uri=row["metadata_uri"],
            subscription_enabled=bool(row["subscription_enabled"]),
            subscription_period_blocks=row["subscription_period_blocks"],
        )

    def save_content(self, content: Content) -> Content:
        self._execute(
            """
            INSERT INTO contents (
                content_id, creator, price, creator_share_permille,
                metadata_uri, subscription_enabled, subscription_period_blocks
            ) VALUES (?, ?, ?, ?, ?, ?, ?)
            ON CONFLICT(content_id) DO UPDATE SET
                creator=excluded.creator,
                price=excluded.price,
                creator_share_permille=excluded.creator_share_permille,
                metadata_uri=excluded.metadata_uri,
                subscription_enabled=excluded.subscription_enabled,
                subscription_period_blocks=excluded.subscription_period_blocks
        """,
            (
                content.content_id,
                content.creator,
                content.price,
                content.creator_share_permille,
                content.metadata_uri,
                int(content.subscription_enabled),
                content.subscription_period_blocks,
            ),
        )
        return content

    # --- Purchases ---

    def get_purchase(self, buyer: Principal, content_id: int) -> PurchaseRecord | None:
        row = self._fetchone(
            "SELECT * FROM purchases WHERE buyer = ? AND content_id = ?",
            (buyer, content_id),
        )
        if not row:
            return None
        return PurchaseRecord(
            buyer=row["buyer"],
            content_id=row["content_id"],
            purchased_at_block=row["purchased_at_block"],
            subscription_end_block=row["subscription_end_block"],
            active=bool(row["active"]),
        )

    def save_purchase(self, record: PurchaseRecord) -> PurchaseRecord:
        self._execute(
            """
            INSERT INTO purchases (
                buyer, content_id, purchased_at_block, subscription_end_block, active
            ) VALUES (?, ?, ?, ?, ?)
            ON CONFLICT(buyer, content_id) DO UPDATE SET
                purchased_at_block=excluded.purchased_at_block,
                subscription_end_block=excluded.subscription_end_block,
                active=excluded.active
        """,
            (
                record.buyer,
                record.content_id,
                record.purchased_at_block,
                record.subscription_end_block,
                int(record.active),
            ),
        )
        return record

    # --- Earnings ---

    def get_balance(self, creator: Principal) -> int | None:
        row = self._fetchone("SELECT amount FROM earnings WHERE creator = ?", (creator,))
        return row["amount"] if row else None

    def set_balance(self, creator: Principal, amount: int) -> None:
        self._execute(
            """
            INSERT INTO earnings (creator, amount) VALUES (?, ?)
            ON CONFLICT(creator) DO UPDATE SET amount=excluded.amount
        """,
            (creator, amount),
        )

    # --- Config ---

    def get_config(self) -> LedgerConfig | None:
        row = self._fetchone("SELECT * FROM ledger_config WHERE id = 1")
        if not row:
            return None
        return LedgerConfig(
            administrator=row["administrator"],
            commission_permille=row["commission_permille"],
        )

    def save_config(self, config: LedgerConfig) -> LedgerConfig:
        self._execute(
            """
            INSERT INTO ledger_config (id, administrator, commission_permille)
            VALUES (1, ?, ?)
            ON CONFLICT(id) DO UPDATE SET
                administrator=excluded.administrator,
                commission_permille=excluded.commission_permille
        """,
            (config.administrator, config.commission_permille),
        )
        return config
