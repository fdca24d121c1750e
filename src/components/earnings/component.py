"""
Earnings component.

Withdrawal protocol:
1. Read the caller's balance (missing record / zero balance are errors)
2. Commit the balance to zero
3. Transfer the previously read amount out of escrow

Step 2 precedes step 3 so a call that re-enters withdraw() while the
transfer is in flight sees a zero balance. The same ordering means a
rejected payout leaves the balance at zero; that loss is accepted and
reported to the caller as PAYOUT_FAILED rather than rolled back.
"""

from __future__ import annotations

import logging

from src.core.ports.chain import ValueTransferPort
from src.domain.entities import Principal
from src.domain.errors import ErrorCause, LedgerError

from .ports import EarningsStorePort

logger = logging.getLogger(__name__)


def credit_earnings(store: EarningsStorePort, creator: Principal, amount: int) -> int:
    """
    Add amount to a creator's balance (initializing it from zero).

    Table helper for the purchase flow; callers hold the transaction.

    Returns:
        The new balance
    """
    balance = (store.get_balance(creator) or 0) + amount
    store.set_balance(creator, balance)
    return balance


class EarningsLedger:
    """Creator earnings over a transactional store."""

    def __init__(
        self,
        store: EarningsStorePort,
        transfer: ValueTransferPort,
        escrow_account: Principal,
    ) -> None:
        self._store = store
        self._transfer = transfer
        self._escrow_account = escrow_account

    def get_balance(self, creator: Principal) -> int | None:
        """Withdrawable balance, or None if the creator was never credited."""
        return self._store.get_balance(creator)

    def withdraw(self, caller: Principal) -> int:
        """
        Pay out the caller's whole balance.

        Returns:
            Amount paid

        Raises:
            LedgerError: ContentNotFound (no earnings record),
                InsufficientBalance (zero balance or rejected payout)
        """
        with self._store.transaction():
            amount = self._store.get_balance(caller)
            if amount is None:
                raise LedgerError(
                    ErrorCause.NO_EARNINGS_RECORD, f"No earnings record for {caller}"
                )
            if amount == 0:
                raise LedgerError(ErrorCause.ZERO_BALANCE, "Nothing to withdraw")

            self._store.set_balance(caller, 0)
            paid = self._transfer.transfer(amount, self._escrow_account, caller)

        if not paid:
            logger.warning(
                f"Payout of {amount} to {caller} rejected after balance was zeroed"
            )
            raise LedgerError(
                ErrorCause.PAYOUT_FAILED,
                f"Payout of {amount} failed; balance already zeroed",
            )

        logger.info(f"Withdrew {amount} to {caller}")
        return amount
