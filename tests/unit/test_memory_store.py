"""
Unit tests for the in-memory ledger store.
"""

import threading

import pytest

from src.adapters.memory_store import InMemoryLedgerStore
from src.domain.entities import Content, LedgerConfig, PurchaseRecord


def make_content(content_id: int = 1, price: int = 100) -> Content:
    return Content(
        content_id=content_id,
        creator="alice",
        price=price,
        creator_share_permille=500,
        metadata_uri="ipfs://x",
    )


class TestInMemoryLedgerStore:
    def test_missing_rows_are_none(self) -> None:
        store = InMemoryLedgerStore()

        assert store.get_content(1) is None
        assert store.get_purchase("bob", 1) is None
        assert store.get_balance("alice") is None
        assert store.get_config() is None

    def test_returned_models_are_copies(self) -> None:
        store = InMemoryLedgerStore()
        content = make_content()
        store.save_content(content)

        loaded = store.get_content(1)
        assert loaded == content
        assert loaded is not content

    def test_commit(self) -> None:
        store = InMemoryLedgerStore()

        with store.transaction():
            store.save_content(make_content())
            store.set_balance("alice", 5)

        assert store.get_content(1) is not None
        assert store.get_balance("alice") == 5

    def test_rollback_restores_every_table(self) -> None:
        store = InMemoryLedgerStore()
        store.save_config(LedgerConfig(administrator="admin"))
        store.set_balance("alice", 5)

        with pytest.raises(RuntimeError):
            with store.transaction():
                store.save_content(make_content())
                store.save_purchase(
                    PurchaseRecord(buyer="bob", content_id=1, purchased_at_block=1)
                )
                store.set_balance("alice", 50)
                store.save_config(LedgerConfig(administrator="mallory"))
                raise RuntimeError("abort")

        assert store.get_content(1) is None
        assert store.get_purchase("bob", 1) is None
        assert store.get_balance("alice") == 5
        assert store.get_config().administrator == "admin"

    def test_nested_rollback_keeps_outer_writes(self) -> None:
        store = InMemoryLedgerStore()

        with store.transaction():
            store.set_balance("alice", 1)
            with pytest.raises(ValueError):
                with store.transaction():
                    store.set_balance("bob", 2)
                    raise ValueError("inner")

        assert store.get_balance("alice") == 1
        assert store.get_balance("bob") is None

    def test_clear(self) -> None:
        store = InMemoryLedgerStore()
        store.save_content(make_content())
        store.clear()

        assert store.get_content(1) is None


class TestConcurrentReads:
    def test_reader_waits_for_open_transaction(self) -> None:
        store = InMemoryLedgerStore()
        store.set_balance("alice", 100)
        entered = threading.Event()
        release = threading.Event()
        seen: dict[str, int | None] = {}

        def writer() -> None:
            try:
                with store.transaction():
                    store.set_balance("alice", 999)
                    entered.set()
                    release.wait(5)
                    raise RuntimeError("abort")
            except RuntimeError:
                pass

        def reader() -> None:
            seen["during"] = store.get_balance("alice")

        writer_thread = threading.Thread(target=writer)
        writer_thread.start()
        assert entered.wait(5)

        reader_thread = threading.Thread(target=reader)
        reader_thread.start()
        reader_thread.join(0.2)
        # Blocked behind the open transaction
        assert reader_thread.is_alive()

        release.set()
        writer_thread.join(5)
        reader_thread.join(5)

        assert seen == {"during": 100}
        assert store.get_balance("alice") == 100
