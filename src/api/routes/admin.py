"""
Administration API.

Commission rate and administrator hand-over; writes require the caller to
be the current administrator.
"""

from typing import Any

from fastapi import APIRouter, Depends

from src.api.deps import get_current_caller, get_ledger
from src.api.errors import error_response
from src.api.schemas import (
    AdministratorRequest,
    AdministratorResponse,
    CommissionRequest,
    CommissionResponse,
    LedgerErrorResponse,
)
from src.components.ledger import (
    Ledger,
    SetCommissionRateInput,
    TransferAdministrationInput,
    run_set_commission_rate,
    run_transfer_administration,
)
from src.domain.entities import Principal

router = APIRouter()


@router.get("/commission", response_model=CommissionResponse)
def get_commission(ledger: Ledger = Depends(get_ledger)) -> CommissionResponse:
    return CommissionResponse(commission_permille=ledger.get_commission_rate())


@router.put(
    "/commission",
    response_model=CommissionResponse,
    responses={
        400: {"model": LedgerErrorResponse},
        403: {"model": LedgerErrorResponse},
    },
)
def set_commission(
    request: CommissionRequest,
    caller: Principal = Depends(get_current_caller),
    ledger: Ledger = Depends(get_ledger),
) -> Any:
    result = run_set_commission_rate(SetCommissionRateInput(new_rate=request.new_rate), ledger, caller)
    if result.error:
        return error_response(result.error)
    return CommissionResponse(commission_permille=result.result.commission_permille)


@router.get("/administrator", response_model=AdministratorResponse)
def get_administrator(ledger: Ledger = Depends(get_ledger)) -> AdministratorResponse:
    return AdministratorResponse(administrator=ledger.get_administrator())


@router.put(
    "/administrator",
    response_model=AdministratorResponse,
    responses={403: {"model": LedgerErrorResponse}},
)
def transfer_administration(
    request: AdministratorRequest,
    caller: Principal = Depends(get_current_caller),
    ledger: Ledger = Depends(get_ledger),
) -> Any:
    result = run_transfer_administration(
        TransferAdministrationInput(new_admin=request.new_admin), ledger, caller
    )
    if result.error:
        return error_response(result.error)
    return AdministratorResponse(administrator=result.result.administrator)
