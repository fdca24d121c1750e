from __future__ import annotations

import logging
from dataclasses import dataclass

from src.adapters.sqlite.ledger_store import SQLiteLedgerStore
from src.adapters.sqlite.migrator import SQLiteMigrator
from src.components.ledger import Ledger
from src.core.ports.chain import BlockHeightPort, ValueTransferPort
from src.rules.models import Rules

logger = logging.getLogger(__name__)


@dataclass
class LedgerContext:
    ledger: Ledger
    store: SQLiteLedgerStore
    transfer: ValueTransferPort
    blocks: BlockHeightPort
    rules: Rules

    @classmethod
    def create(
        cls,
        db_path: str,
        rules: Rules,
        transfer: ValueTransferPort,
        blocks: BlockHeightPort,
    ) -> LedgerContext:
        """
        Open the persistent ledger over the host chain's adapters.

        The host adapters are required: earnings persist in db_path, so the
        value they are paid out of must live on the same durable host.
        Processes with no chain pass OfflineHost, which refuses to move value.
        """
        # Schema
        SQLiteMigrator(db_path).run_migrations()

        store = SQLiteLedgerStore(db_path)
        ledger = Ledger(
            store=store,
            transfer=transfer,
            blocks=blocks,
            escrow_account=rules.accounts.escrow,
            deployer=rules.accounts.deployer,
            initial_commission_permille=rules.ledger.initial_commission_permille,
            max_metadata_uri_length=rules.ledger.max_metadata_uri_length,
        )
        logger.info(
            f"Ledger ready at {db_path} (escrow={rules.accounts.escrow}, "
            f"host={type(transfer).__name__})"
        )

        return cls(ledger=ledger, store=store, transfer=transfer, blocks=blocks, rules=rules)

    def close(self) -> None:
        self.store.close()
