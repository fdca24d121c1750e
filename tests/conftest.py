from pathlib import Path

import pytest

from src.adapters.chain_stub import InMemoryValueTransfer, ManualBlockHeight
from src.adapters.memory_store import InMemoryLedgerStore
from src.components.ledger import Ledger
from src.rules.loader import load_rules
from src.rules.models import Rules

ESCROW = "escrow"
ADMIN = "admin"


@pytest.fixture
def rules() -> Rules:
    """Load REAL rules from project root (tests run from project root)."""
    rules_path = Path("rules.yaml").resolve()
    if not rules_path.exists():
        raise FileNotFoundError(f"Rules not found at {rules_path}")
    return load_rules(rules_path)


@pytest.fixture
def store() -> InMemoryLedgerStore:
    return InMemoryLedgerStore()


@pytest.fixture
def transfer() -> InMemoryValueTransfer:
    return InMemoryValueTransfer()


@pytest.fixture
def blocks() -> ManualBlockHeight:
    return ManualBlockHeight(height=10)


@pytest.fixture
def ledger(
    store: InMemoryLedgerStore,
    transfer: InMemoryValueTransfer,
    blocks: ManualBlockHeight,
) -> Ledger:
    """In-memory ledger administered by ADMIN with a 10% commission."""
    return Ledger(
        store=store,
        transfer=transfer,
        blocks=blocks,
        escrow_account=ESCROW,
        deployer=ADMIN,
        initial_commission_permille=100,
    )
