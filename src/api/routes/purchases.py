"""
Purchases API (read-only).
"""

from fastapi import APIRouter, Depends

from src.api.deps import get_ledger
from src.api.schemas import AccessResponse, LedgerErrorResponse, PurchaseResponse
from src.components.ledger import Ledger
from src.domain.errors import ErrorCause, LedgerError

router = APIRouter()


@router.get(
    "/{buyer}/{content_id}",
    response_model=PurchaseResponse,
    responses={404: {"model": LedgerErrorResponse}},
)
def get_purchase_info(
    buyer: str, content_id: int, ledger: Ledger = Depends(get_ledger)
) -> PurchaseResponse:
    record = ledger.get_purchase_info(buyer, content_id)
    if record is None:
        raise LedgerError(
            ErrorCause.PURCHASE_NOT_FOUND, f"{buyer} has no purchase of content {content_id}"
        )
    return PurchaseResponse.model_validate(record)


@router.get(
    "/{buyer}/{content_id}/access",
    response_model=AccessResponse,
    responses={404: {"model": LedgerErrorResponse}},
)
def is_accessible(buyer: str, content_id: int, ledger: Ledger = Depends(get_ledger)) -> AccessResponse:
    """Access predicate at the current block height."""
    check = ledger.check_access(buyer, content_id)
    return AccessResponse(
        buyer=buyer,
        content_id=content_id,
        accessible=check.accessible,
        block_height=check.block_height,
    )
