"""
Ledger component input/output models.

Shell-layer DTOs for the external interface. Every operation's caller is
passed separately (the host supplies it; it is never part of the payload).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from src.components.registry import RegisterContentInput
from src.domain.entities import Principal
from src.domain.errors import LedgerError

# --- Input Models ---

# Registration input is shared with the registry component.
RegisterInput = RegisterContentInput


@dataclass(frozen=True)
class PurchaseInput:
    """Input for purchasing content."""

    content_id: int


@dataclass(frozen=True)
class TerminateInput:
    """Input for terminating a purchase."""

    content_id: int


@dataclass(frozen=True)
class SetCommissionRateInput:
    """Input for changing the platform commission."""

    new_rate: int


@dataclass(frozen=True)
class TransferAdministrationInput:
    """Input for handing over administration."""

    new_admin: Principal


# --- Output Models ---


@dataclass(frozen=True)
class LedgerErrorOutput:
    """Typed failure as seen by callers."""

    code: int
    error: str
    cause: str
    message: str

    @classmethod
    def from_error(cls, err: LedgerError) -> LedgerErrorOutput:
        return cls(
            code=int(err.code),
            error=err.code.name,
            cause=err.cause.value,
            message=err.message,
        )


@dataclass(frozen=True)
class LedgerOperationOutput:
    """Output from a state-changing ledger operation."""

    success: bool
    result: Any = None
    error: LedgerErrorOutput | None = None
