"""
Ledger component.

Single logical entry point composing the registry, purchases, earnings,
revenue and administration components over one transactional store.
"""

from .component import (
    Ledger,
    run_purchase,
    run_register,
    run_set_commission_rate,
    run_terminate,
    run_transfer_administration,
    run_withdraw,
)
from .models import (
    LedgerErrorOutput,
    LedgerOperationOutput,
    PurchaseInput,
    RegisterInput,
    SetCommissionRateInput,
    TerminateInput,
    TransferAdministrationInput,
)

__all__ = [
    # Facade
    "Ledger",
    # Entry points
    "run_register",
    "run_purchase",
    "run_withdraw",
    "run_terminate",
    "run_set_commission_rate",
    "run_transfer_administration",
    # Input models
    "RegisterInput",
    "PurchaseInput",
    "TerminateInput",
    "SetCommissionRateInput",
    "TransferAdministrationInput",
    # Output models
    "LedgerOperationOutput",
    "LedgerErrorOutput",
]
