"""
Ledger component - external interface.

Ledger composes the per-table components over one store and exposes the
operations callers invoke. The run_* functions are the shell layer: they
take input DTOs plus the caller principal and convert LedgerError into
LedgerOperationOutput.

No operation calls another state-changing operation; components share
state only through the store.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from src.components.admin import Administration, initialize_config
from src.components.earnings import EarningsLedger
from src.components.purchases import AccessCheck, PurchaseEngine
from src.components.registry import MAX_METADATA_URI_LENGTH, ContentRegistry
from src.core.ports.chain import BlockHeightPort, ValueTransferPort
from src.core.ports.ledger_store import LedgerStorePort
from src.domain.entities import Content, LedgerConfig, Principal, PurchaseRecord
from src.domain.errors import LedgerError

from .models import (
    LedgerErrorOutput,
    LedgerOperationOutput,
    PurchaseInput,
    RegisterInput,
    SetCommissionRateInput,
    TerminateInput,
    TransferAdministrationInput,
)

logger = logging.getLogger(__name__)


# --- Ledger Facade ---


class Ledger:
    """
    Content ownership, revenue and access ledger.

    Args:
        store: Transactional store holding all ledger tables
        transfer: Host value-transfer primitive
        blocks: Host block-height counter
        escrow_account: Account holding collected prices and retained fees
        deployer: Initial administrator (ignored if the store is initialized)
        initial_commission_permille: Initial rate (ignored likewise)
        max_metadata_uri_length: Bound on registered metadata URIs
    """

    def __init__(
        self,
        store: LedgerStorePort,
        transfer: ValueTransferPort,
        blocks: BlockHeightPort,
        escrow_account: Principal,
        deployer: Principal,
        initial_commission_permille: int = 0,
        max_metadata_uri_length: int = MAX_METADATA_URI_LENGTH,
    ) -> None:
        self.store = store
        self.blocks = blocks
        self.escrow_account = escrow_account

        initialize_config(store, deployer, initial_commission_permille)

        self.registry = ContentRegistry(store, max_metadata_uri_length)
        self.purchases = PurchaseEngine(store, transfer, blocks, escrow_account)
        self.earnings = EarningsLedger(store, transfer, escrow_account)
        self.admin = Administration(store)

    # --- State-changing operations ---

    def register(self, data: RegisterInput, caller: Principal) -> Content:
        return self.registry.register(data, caller)

    def purchase(self, content_id: int, caller: Principal) -> PurchaseRecord:
        return self.purchases.purchase(content_id, caller)

    def withdraw(self, caller: Principal) -> int:
        return self.earnings.withdraw(caller)

    def terminate(self, content_id: int, caller: Principal) -> PurchaseRecord:
        return self.purchases.terminate(content_id, caller)

    def set_commission_rate(self, new_rate: int, caller: Principal) -> LedgerConfig:
        return self.admin.set_commission_rate(new_rate, caller)

    def transfer_administration(self, new_admin: Principal, caller: Principal) -> LedgerConfig:
        return self.admin.transfer_administration(new_admin, caller)

    # --- Read-only queries ---

    def get_content_info(self, content_id: int) -> Content | None:
        return self.registry.get(content_id)

    def get_purchase_info(self, buyer: Principal, content_id: int) -> PurchaseRecord | None:
        return self.purchases.get_purchase(buyer, content_id)

    def get_creator_balance(self, creator: Principal) -> int | None:
        return self.earnings.get_balance(creator)

    def is_accessible(self, buyer: Principal, content_id: int) -> bool:
        return self.purchases.is_accessible(buyer, content_id)

    def check_access(self, buyer: Principal, content_id: int) -> AccessCheck:
        return self.purchases.check_access(buyer, content_id)

    def get_commission_rate(self) -> int:
        return self.admin.get_config().commission_permille

    def get_administrator(self) -> Principal:
        return self.admin.get_config().administrator

    def current_block_height(self) -> int:
        return self.blocks.current_block_height()


# --- Shell Layer Functions ---


def _run(operation: str, caller: Principal, call: Callable[[], Any]) -> LedgerOperationOutput:
    try:
        result = call()
    except LedgerError as err:
        logger.info(f"{operation} by {caller} failed: {err!r}")
        return LedgerOperationOutput(success=False, error=LedgerErrorOutput.from_error(err))
    return LedgerOperationOutput(success=True, result=result)


def run_register(
    input_data: RegisterInput, ledger: Ledger, caller: Principal
) -> LedgerOperationOutput:
    """Register content."""
    return _run("register", caller, lambda: ledger.register(input_data, caller))


def run_purchase(
    input_data: PurchaseInput, ledger: Ledger, caller: Principal
) -> LedgerOperationOutput:
    """Purchase content."""
    return _run("purchase", caller, lambda: ledger.purchase(input_data.content_id, caller))


def run_withdraw(ledger: Ledger, caller: Principal) -> LedgerOperationOutput:
    """Withdraw creator earnings."""
    return _run("withdraw", caller, lambda: ledger.withdraw(caller))


def run_terminate(
    input_data: TerminateInput, ledger: Ledger, caller: Principal
) -> LedgerOperationOutput:
    """Terminate a purchase."""
    return _run("terminate", caller, lambda: ledger.terminate(input_data.content_id, caller))


def run_set_commission_rate(
    input_data: SetCommissionRateInput, ledger: Ledger, caller: Principal
) -> LedgerOperationOutput:
    """Change the platform commission (administrator only)."""
    return _run(
        "set_commission_rate",
        caller,
        lambda: ledger.set_commission_rate(input_data.new_rate, caller),
    )


def run_transfer_administration(
    input_data: TransferAdministrationInput, ledger: Ledger, caller: Principal
) -> LedgerOperationOutput:
    """Hand over administration (administrator only)."""
    return _run(
        "transfer_administration",
        caller,
        lambda: ledger.transfer_administration(input_data.new_admin, caller),
    )
