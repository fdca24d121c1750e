# content-ledger: Ports (Protocol Interfaces)
# Abstract interfaces for adapters; no implementations here

from src.core.ports.chain import BlockHeightPort, ValueTransferPort
from src.core.ports.ledger_store import (
    ConfigRepoPort,
    ContentRepoPort,
    EarningsRepoPort,
    LedgerStorePort,
    PurchaseRepoPort,
)

__all__ = [
    # Host chain
    "BlockHeightPort",
    "ValueTransferPort",
    # Store
    "ConfigRepoPort",
    "ContentRepoPort",
    "EarningsRepoPort",
    "LedgerStorePort",
    "PurchaseRepoPort",
]
