"""
Purchases component.

Purchase flow (one transaction, all-or-nothing):
1. Look up content
2. Split price by the current commission rate
3. Reject if the buyer's access is still active (duplicate guard)
4. Move price from buyer to escrow
5. Credit creator earnings
6. Upsert the purchase record

The transfer (4) runs before any ledger write so a rejected transfer
leaves every table untouched. The platform fee is never credited
anywhere: it stays in escrow as price - creator_earnings.
"""

from __future__ import annotations

import logging

from src.components.earnings import credit_earnings
from src.components.revenue import RevenueSplit, split_revenue
from src.core.ports.chain import BlockHeightPort, ValueTransferPort
from src.domain.entities import Principal, PurchaseRecord
from src.domain.errors import ErrorCause, LedgerError

from .models import AccessCheck
from .ports import PurchaseStorePort

logger = logging.getLogger(__name__)


# --- Access Predicate ---


def is_active(record: PurchaseRecord | None, current_block: int) -> bool:
    """
    Access predicate for a purchase record.

    Note: one-time purchases store subscription_end_block = 0, so they
    evaluate False at every block after genesis.
    """
    if record is None:
        return False
    return record.active and current_block <= record.subscription_end_block


# --- Purchase Engine ---


class PurchaseEngine:
    """Purchase, termination and access checks over a transactional store."""

    def __init__(
        self,
        store: PurchaseStorePort,
        transfer: ValueTransferPort,
        blocks: BlockHeightPort,
        escrow_account: Principal,
    ) -> None:
        self._store = store
        self._transfer = transfer
        self._blocks = blocks
        self._escrow_account = escrow_account

    def _commission_permille(self) -> int:
        config = self._store.get_config()
        return config.commission_permille if config else 0

    def purchase(self, content_id: int, buyer: Principal) -> PurchaseRecord:
        """
        Buy (or renew) access to content.

        Raises:
            LedgerError: ContentNotFound, DuplicatePurchase, InsufficientBalance
        """
        with self._store.transaction():
            content = self._store.get_content(content_id)
            if content is None:
                raise LedgerError(
                    ErrorCause.CONTENT_NOT_FOUND, f"Content {content_id} not found"
                )

            split: RevenueSplit = split_revenue(content.price, self._commission_permille())
            current_block = self._blocks.current_block_height()

            if is_active(self._store.get_purchase(buyer, content_id), current_block):
                raise LedgerError(
                    ErrorCause.DUPLICATE_PURCHASE,
                    f"{buyer} already has active access to content {content_id}",
                )

            if not self._transfer.transfer(content.price, buyer, self._escrow_account):
                raise LedgerError(
                    ErrorCause.TRANSFER_REJECTED,
                    f"Transfer of {content.price} from {buyer} rejected",
                )

            credit_earnings(self._store, content.creator, split.creator_earnings)

            end_block = (
                current_block + content.subscription_period_blocks
                if content.subscription_enabled
                else 0
            )
            record = PurchaseRecord(
                buyer=buyer,
                content_id=content_id,
                purchased_at_block=current_block,
                subscription_end_block=end_block,
                active=True,
            )
            self._store.save_purchase(record)

        logger.info(
            f"{buyer} purchased content {content_id} at block {current_block} "
            f"(price={content.price}, fee={split.platform_fee}, "
            f"creator_earnings={split.creator_earnings})"
        )
        return record

    def terminate(self, content_id: int, caller: Principal) -> PurchaseRecord:
        """
        End the caller's access immediately.

        Raises:
            LedgerError: ContentNotFound (no record, or already inactive)
        """
        with self._store.transaction():
            record = self._store.get_purchase(caller, content_id)
            if record is None:
                raise LedgerError(
                    ErrorCause.PURCHASE_NOT_FOUND,
                    f"{caller} has no purchase of content {content_id}",
                )
            if not record.active:
                raise LedgerError(
                    ErrorCause.PURCHASE_INACTIVE,
                    f"Purchase of content {content_id} by {caller} already inactive",
                )

            current_block = self._blocks.current_block_height()
            terminated = record.model_copy(
                update={"active": False, "subscription_end_block": current_block}
            )
            self._store.save_purchase(terminated)

        logger.info(f"{caller} terminated content {content_id} at block {current_block}")
        return terminated

    def get_purchase(self, buyer: Principal, content_id: int) -> PurchaseRecord | None:
        return self._store.get_purchase(buyer, content_id)

    def is_accessible(self, buyer: Principal, content_id: int) -> bool:
        """
        Access predicate at the current block.

        Raises:
            LedgerError: ContentNotFound if the buyer has no purchase record
        """
        return self.check_access(buyer, content_id).accessible

    def check_access(self, buyer: Principal, content_id: int) -> AccessCheck:
        """Evaluate the access predicate, reading the block height once."""
        record = self._store.get_purchase(buyer, content_id)
        if record is None:
            raise LedgerError(
                ErrorCause.PURCHASE_NOT_FOUND,
                f"{buyer} has no purchase of content {content_id}",
            )
        current_block = self._blocks.current_block_height()
        return AccessCheck(
            accessible=is_active(record, current_block), block_height=current_block
        )
