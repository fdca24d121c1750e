"""
Earnings component unit tests.

Tests for crediting and the zero-before-transfer withdrawal protocol.
"""

from __future__ import annotations

import pytest

from src.adapters.chain_stub import InMemoryValueTransfer
from src.adapters.memory_store import InMemoryLedgerStore
from src.components.earnings import EarningsLedger, credit_earnings
from src.domain.errors import ErrorCause, LedgerError, LedgerErrorCode

ESCROW = "escrow"


@pytest.fixture
def store() -> InMemoryLedgerStore:
    return InMemoryLedgerStore()


@pytest.fixture
def bank() -> InMemoryValueTransfer:
    bank = InMemoryValueTransfer()
    bank.mint(ESCROW, 10_000)
    return bank


@pytest.fixture
def earnings(store: InMemoryLedgerStore, bank: InMemoryValueTransfer) -> EarningsLedger:
    return EarningsLedger(store=store, transfer=bank, escrow_account=ESCROW)


# --- Credit Tests ---


class TestCreditEarnings:
    """Read-modify-write credit."""

    def test_first_credit_initializes_from_zero(self, store: InMemoryLedgerStore) -> None:
        assert credit_earnings(store, "alice", 300) == 300
        assert store.get_balance("alice") == 300

    def test_credits_accumulate(self, store: InMemoryLedgerStore) -> None:
        credit_earnings(store, "alice", 300)
        credit_earnings(store, "alice", 200)
        assert store.get_balance("alice") == 500

    def test_zero_credit_creates_record(self, store: InMemoryLedgerStore) -> None:
        credit_earnings(store, "alice", 0)
        assert store.get_balance("alice") == 0


# --- Withdraw Tests ---


class TestWithdraw:
    """Withdrawal protocol."""

    def test_withdraw_pays_full_balance(
        self,
        earnings: EarningsLedger,
        store: InMemoryLedgerStore,
        bank: InMemoryValueTransfer,
    ) -> None:
        credit_earnings(store, "alice", 750)

        assert earnings.withdraw("alice") == 750
        assert store.get_balance("alice") == 0
        assert bank.balance_of("alice") == 750
        assert bank.balance_of(ESCROW) == 9_250

    def test_withdraw_without_record(self, earnings: EarningsLedger) -> None:
        with pytest.raises(LedgerError) as exc_info:
            earnings.withdraw("nobody")

        assert exc_info.value.code == LedgerErrorCode.CONTENT_NOT_FOUND
        assert exc_info.value.cause == ErrorCause.NO_EARNINGS_RECORD

    def test_withdraw_zero_balance(
        self, earnings: EarningsLedger, store: InMemoryLedgerStore
    ) -> None:
        credit_earnings(store, "alice", 0)

        with pytest.raises(LedgerError) as exc_info:
            earnings.withdraw("alice")

        assert exc_info.value.code == LedgerErrorCode.INSUFFICIENT_BALANCE
        assert exc_info.value.cause == ErrorCause.ZERO_BALANCE

    def test_second_withdraw_fails(
        self, earnings: EarningsLedger, store: InMemoryLedgerStore
    ) -> None:
        credit_earnings(store, "alice", 100)
        earnings.withdraw("alice")

        with pytest.raises(LedgerError) as exc_info:
            earnings.withdraw("alice")
        assert exc_info.value.cause == ErrorCause.ZERO_BALANCE

    def test_reentrant_withdraw_sees_zero(
        self,
        earnings: EarningsLedger,
        store: InMemoryLedgerStore,
        bank: InMemoryValueTransfer,
    ) -> None:
        """A recipient re-entering withdraw() during payout gets nothing more."""
        credit_earnings(store, "alice", 400)
        reentry_errors: list[LedgerError] = []

        def reenter(amount: int, sender: str, recipient: str) -> None:
            try:
                earnings.withdraw(recipient)
            except LedgerError as err:
                reentry_errors.append(err)

        bank.set_on_transfer(reenter)

        assert earnings.withdraw("alice") == 400
        assert len(reentry_errors) == 1
        assert reentry_errors[0].cause == ErrorCause.ZERO_BALANCE
        assert bank.balance_of("alice") == 400
        assert store.get_balance("alice") == 0

    def test_failed_payout_loses_balance(
        self,
        earnings: EarningsLedger,
        store: InMemoryLedgerStore,
        bank: InMemoryValueTransfer,
    ) -> None:
        """
        Accepted trade-off of zero-before-transfer: a rejected payout is
        reported, but the zeroed balance is not restored.
        """
        credit_earnings(store, "alice", 500)
        bank.fail_next_transfer()

        with pytest.raises(LedgerError) as exc_info:
            earnings.withdraw("alice")

        assert exc_info.value.code == LedgerErrorCode.INSUFFICIENT_BALANCE
        assert exc_info.value.cause == ErrorCause.PAYOUT_FAILED
        assert store.get_balance("alice") == 0
        assert bank.balance_of("alice") == 0

    def test_escrow_shortfall_is_payout_failure(
        self, store: InMemoryLedgerStore
    ) -> None:
        bank = InMemoryValueTransfer()
        earnings = EarningsLedger(store=store, transfer=bank, escrow_account=ESCROW)
        credit_earnings(store, "alice", 50)

        with pytest.raises(LedgerError) as exc_info:
            earnings.withdraw("alice")
        assert exc_info.value.cause == ErrorCause.PAYOUT_FAILED
