"""
LedgerError to HTTP mapping.

Every ledger failure is rendered as LedgerErrorResponse with the external
numeric code; the HTTP status is derived from that code.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from src.api.schemas import LedgerErrorResponse
from src.components.ledger import LedgerErrorOutput
from src.domain.errors import LedgerError, LedgerErrorCode

logger = logging.getLogger(__name__)

STATUS_BY_CODE: dict[LedgerErrorCode, int] = {
    LedgerErrorCode.UNAUTHORIZED: status.HTTP_403_FORBIDDEN,
    LedgerErrorCode.INVALID_PRICING_PARAMETERS: status.HTTP_400_BAD_REQUEST,
    LedgerErrorCode.DUPLICATE_PURCHASE: status.HTTP_409_CONFLICT,
    LedgerErrorCode.CONTENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    LedgerErrorCode.INSUFFICIENT_BALANCE: status.HTTP_402_PAYMENT_REQUIRED,
    LedgerErrorCode.SUBSCRIPTION_EXPIRED: status.HTTP_403_FORBIDDEN,
    LedgerErrorCode.INVALID_SUBSCRIPTION_DURATION: status.HTTP_400_BAD_REQUEST,
}


def error_response(error: LedgerErrorOutput) -> JSONResponse:
    """Render a failed operation as a JSON response."""
    body = LedgerErrorResponse(
        detail=error.message,
        code=error.code,
        error=error.error,
        cause=error.cause,
    )
    return JSONResponse(
        status_code=STATUS_BY_CODE[LedgerErrorCode(error.code)],
        content=body.model_dump(),
    )


async def ledger_error_handler(request: Request, exc: LedgerError) -> JSONResponse:
    """Render LedgerErrors raised by read paths."""
    logger.info(f"{request.method} {request.url.path} rejected: {exc!r}")
    return error_response(LedgerErrorOutput.from_error(exc))


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(LedgerError, ledger_error_handler)
