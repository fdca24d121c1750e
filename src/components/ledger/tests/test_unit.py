"""
Ledger component unit tests.

Tests for the facade wiring and the run_* shell layer.
"""

from __future__ import annotations

import pytest

from src.adapters.chain_stub import InMemoryValueTransfer, ManualBlockHeight
from src.adapters.memory_store import InMemoryLedgerStore
from src.components.ledger import (
    Ledger,
    PurchaseInput,
    RegisterInput,
    SetCommissionRateInput,
    TerminateInput,
    TransferAdministrationInput,
    run_purchase,
    run_register,
    run_set_commission_rate,
    run_terminate,
    run_transfer_administration,
    run_withdraw,
)
from src.domain.entities import Content, PurchaseRecord
from src.domain.errors import LedgerErrorCode

ESCROW = "escrow"


@pytest.fixture
def bank() -> InMemoryValueTransfer:
    bank = InMemoryValueTransfer()
    bank.mint("bob", 10_000)
    return bank


@pytest.fixture
def blocks() -> ManualBlockHeight:
    return ManualBlockHeight(height=1)


@pytest.fixture
def ledger(bank: InMemoryValueTransfer, blocks: ManualBlockHeight) -> Ledger:
    return Ledger(
        store=InMemoryLedgerStore(),
        transfer=bank,
        blocks=blocks,
        escrow_account=ESCROW,
        deployer="deployer",
        initial_commission_permille=100,
    )


def subscription_input(content_id: int = 7) -> RegisterInput:
    return RegisterInput(
        content_id=content_id,
        price=1000,
        creator_share_permille=800,
        metadata_uri="ipfs://course",
        subscription_enabled=True,
        subscription_period_blocks=30,
    )


class TestLedgerFacade:
    """Facade construction and reads."""

    def test_initial_config(self, ledger: Ledger) -> None:
        assert ledger.get_administrator() == "deployer"
        assert ledger.get_commission_rate() == 100

    def test_existing_store_keeps_config(
        self, bank: InMemoryValueTransfer, blocks: ManualBlockHeight
    ) -> None:
        store = InMemoryLedgerStore()
        Ledger(store, bank, blocks, ESCROW, deployer="first", initial_commission_permille=10)
        again = Ledger(store, bank, blocks, ESCROW, deployer="second")

        assert again.get_administrator() == "first"
        assert again.get_commission_rate() == 10

    def test_reads_for_unknown_keys(self, ledger: Ledger) -> None:
        assert ledger.get_content_info(1) is None
        assert ledger.get_purchase_info("bob", 1) is None
        assert ledger.get_creator_balance("alice") is None

    def test_current_block_height(self, ledger: Ledger, blocks: ManualBlockHeight) -> None:
        blocks.advance(4)
        assert ledger.current_block_height() == 5


class TestShellLayer:
    """run_* entry points convert errors to outputs."""

    def test_register_success(self, ledger: Ledger) -> None:
        result = run_register(subscription_input(), ledger, "alice")

        assert result.success is True
        assert result.error is None
        assert isinstance(result.result, Content)
        assert result.result.creator == "alice"

    def test_register_failure_output(self, ledger: Ledger) -> None:
        bad = RegisterInput(
            content_id=7,
            price=1000,
            creator_share_permille=800,
            metadata_uri="ipfs://course",
            subscription_enabled=True,
            subscription_period_blocks=0,
        )
        result = run_register(bad, ledger, "alice")

        assert result.success is False
        assert result.result is None
        assert result.error is not None
        assert result.error.code == 106
        assert result.error.error == "INVALID_SUBSCRIPTION_DURATION"
        assert result.error.cause == "invalid_subscription_period"

    def test_full_lifecycle(self, ledger: Ledger, bank: InMemoryValueTransfer) -> None:
        run_register(subscription_input(), ledger, "alice")

        bought = run_purchase(PurchaseInput(content_id=7), ledger, "bob")
        assert bought.success is True
        assert isinstance(bought.result, PurchaseRecord)
        assert ledger.is_accessible("bob", 7) is True

        duplicate = run_purchase(PurchaseInput(content_id=7), ledger, "bob")
        assert duplicate.error is not None
        assert duplicate.error.code == LedgerErrorCode.DUPLICATE_PURCHASE

        ended = run_terminate(TerminateInput(content_id=7), ledger, "bob")
        assert ended.success is True
        assert ledger.is_accessible("bob", 7) is False

        withdrawn = run_withdraw(ledger, "alice")
        assert withdrawn.success is True
        assert withdrawn.result == 900
        assert bank.balance_of("alice") == 900
        assert bank.balance_of(ESCROW) == 100

    def test_withdraw_without_earnings(self, ledger: Ledger) -> None:
        result = run_withdraw(ledger, "alice")

        assert result.success is False
        assert result.error is not None
        assert result.error.code == LedgerErrorCode.CONTENT_NOT_FOUND
        assert result.error.cause == "no_earnings_record"

    def test_admin_entry_points(self, ledger: Ledger) -> None:
        denied = run_set_commission_rate(SetCommissionRateInput(new_rate=5), ledger, "bob")
        assert denied.error is not None
        assert denied.error.code == LedgerErrorCode.UNAUTHORIZED

        handed = run_transfer_administration(
            TransferAdministrationInput(new_admin="bob"), ledger, "deployer"
        )
        assert handed.success is True

        allowed = run_set_commission_rate(SetCommissionRateInput(new_rate=5), ledger, "bob")
        assert allowed.success is True
        assert ledger.get_commission_rate() == 5
