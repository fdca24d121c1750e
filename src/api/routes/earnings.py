"""
Earnings API.
"""

from typing import Any

from fastapi import APIRouter, Depends

from src.api.deps import get_current_caller, get_ledger
from src.api.errors import error_response
from src.api.schemas import BalanceResponse, LedgerErrorResponse, WithdrawResponse
from src.components.ledger import Ledger, run_withdraw
from src.domain.entities import Principal
from src.domain.errors import ErrorCause, LedgerError

router = APIRouter()


@router.post(
    "/withdraw",
    response_model=WithdrawResponse,
    summary="Withdraw creator earnings",
    responses={
        402: {"model": LedgerErrorResponse},
        404: {"model": LedgerErrorResponse},
    },
)
def withdraw(
    caller: Principal = Depends(get_current_caller),
    ledger: Ledger = Depends(get_ledger),
) -> Any:
    """Pay the caller's whole earnings balance out of escrow."""
    result = run_withdraw(ledger, caller)
    if result.error:
        return error_response(result.error)
    return WithdrawResponse(creator=caller, amount=result.result)


@router.get(
    "/{creator}",
    response_model=BalanceResponse,
    responses={404: {"model": LedgerErrorResponse}},
)
def get_creator_balance(creator: str, ledger: Ledger = Depends(get_ledger)) -> BalanceResponse:
    balance = ledger.get_creator_balance(creator)
    if balance is None:
        raise LedgerError(ErrorCause.NO_EARNINGS_RECORD, f"No earnings record for {creator}")
    return BalanceResponse(creator=creator, balance=balance)
