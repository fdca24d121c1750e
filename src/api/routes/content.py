"""
Content API.

Registration, lookup, purchase and termination of content.
"""

from typing import Any

from fastapi import APIRouter, Depends

from src.api.deps import get_current_caller, get_ledger
from src.api.errors import error_response
from src.api.schemas import (
    ContentResponse,
    LedgerErrorResponse,
    PurchaseResponse,
    RegisterContentRequest,
)
from src.components.ledger import (
    Ledger,
    PurchaseInput,
    RegisterInput,
    TerminateInput,
    run_purchase,
    run_register,
    run_terminate,
)
from src.domain.entities import Principal
from src.domain.errors import ErrorCause, LedgerError

router = APIRouter()

ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": LedgerErrorResponse},
    402: {"model": LedgerErrorResponse},
    404: {"model": LedgerErrorResponse},
    409: {"model": LedgerErrorResponse},
}


@router.put(
    "/{content_id}",
    response_model=ContentResponse,
    summary="Register content",
    responses=ERROR_RESPONSES,
)
def register_content(
    content_id: int,
    request: RegisterContentRequest,
    caller: Principal = Depends(get_current_caller),
    ledger: Ledger = Depends(get_ledger),
) -> Any:
    """Register content (or overwrite an existing registration's terms)."""
    inp = RegisterInput(
        content_id=content_id,
        price=request.price,
        creator_share_permille=request.creator_share_permille,
        metadata_uri=request.metadata_uri,
        subscription_enabled=request.subscription_enabled,
        subscription_period_blocks=request.subscription_period_blocks,
    )
    result = run_register(inp, ledger, caller)
    if result.error:
        return error_response(result.error)
    return ContentResponse.model_validate(result.result)


@router.get("/{content_id}", response_model=ContentResponse, responses=ERROR_RESPONSES)
def get_content_info(content_id: int, ledger: Ledger = Depends(get_ledger)) -> ContentResponse:
    content = ledger.get_content_info(content_id)
    if content is None:
        raise LedgerError(ErrorCause.CONTENT_NOT_FOUND, f"Content {content_id} not found")
    return ContentResponse.model_validate(content)


@router.post(
    "/{content_id}/purchase",
    response_model=PurchaseResponse,
    summary="Purchase content",
    responses=ERROR_RESPONSES,
)
def purchase_content(
    content_id: int,
    caller: Principal = Depends(get_current_caller),
    ledger: Ledger = Depends(get_ledger),
) -> Any:
    """Pay the content price from the caller's account and record access."""
    result = run_purchase(PurchaseInput(content_id=content_id), ledger, caller)
    if result.error:
        return error_response(result.error)
    return PurchaseResponse.model_validate(result.result)


@router.post(
    "/{content_id}/terminate",
    response_model=PurchaseResponse,
    summary="Terminate a purchase",
    responses=ERROR_RESPONSES,
)
def terminate_purchase(
    content_id: int,
    caller: Principal = Depends(get_current_caller),
    ledger: Ledger = Depends(get_ledger),
) -> Any:
    """End the caller's access to content immediately."""
    result = run_terminate(TerminateInput(content_id=content_id), ledger, caller)
    if result.error:
        return error_response(result.error)
    return PurchaseResponse.model_validate(result.result)
