"""
Ledger error taxonomy.

External callers see a closed set of numeric codes (LedgerErrorCode).
Internally each failure keeps a precise cause (ErrorCause) so that the
overloaded ContentNotFound code can still be told apart in logs and tests.

Every error is terminal for the call: the operation's store transaction
is rolled back before the error reaches the caller. The single exception
is PAYOUT_FAILED, raised after a withdrawal has already zeroed the balance.
"""

from __future__ import annotations

from enum import Enum, IntEnum


class LedgerErrorCode(IntEnum):
    """Closed external error taxonomy, one numeric code per kind."""

    UNAUTHORIZED = 100
    INVALID_PRICING_PARAMETERS = 101
    DUPLICATE_PURCHASE = 102
    CONTENT_NOT_FOUND = 103
    INSUFFICIENT_BALANCE = 104
    SUBSCRIPTION_EXPIRED = 105  # declared, never raised
    INVALID_SUBSCRIPTION_DURATION = 106


class ErrorCause(str, Enum):
    """Internal failure causes."""

    NOT_ADMINISTRATOR = "not_administrator"
    INVALID_PRICE = "invalid_price"
    INVALID_CREATOR_SHARE = "invalid_creator_share"
    INVALID_COMMISSION_RATE = "invalid_commission_rate"
    INVALID_CONTENT_ID = "invalid_content_id"
    METADATA_TOO_LONG = "metadata_too_long"
    INVALID_SUBSCRIPTION_PERIOD = "invalid_subscription_period"
    DUPLICATE_PURCHASE = "duplicate_purchase"
    CONTENT_NOT_FOUND = "content_not_found"
    PURCHASE_NOT_FOUND = "purchase_not_found"
    PURCHASE_INACTIVE = "purchase_inactive"
    NO_EARNINGS_RECORD = "no_earnings_record"
    TRANSFER_REJECTED = "transfer_rejected"
    ZERO_BALANCE = "zero_balance"
    PAYOUT_FAILED = "payout_failed"


CAUSE_CODES: dict[ErrorCause, LedgerErrorCode] = {
    ErrorCause.NOT_ADMINISTRATOR: LedgerErrorCode.UNAUTHORIZED,
    ErrorCause.INVALID_PRICE: LedgerErrorCode.INVALID_PRICING_PARAMETERS,
    ErrorCause.INVALID_CREATOR_SHARE: LedgerErrorCode.INVALID_PRICING_PARAMETERS,
    ErrorCause.INVALID_COMMISSION_RATE: LedgerErrorCode.INVALID_PRICING_PARAMETERS,
    ErrorCause.INVALID_CONTENT_ID: LedgerErrorCode.INVALID_PRICING_PARAMETERS,
    ErrorCause.METADATA_TOO_LONG: LedgerErrorCode.INVALID_PRICING_PARAMETERS,
    ErrorCause.INVALID_SUBSCRIPTION_PERIOD: LedgerErrorCode.INVALID_SUBSCRIPTION_DURATION,
    ErrorCause.DUPLICATE_PURCHASE: LedgerErrorCode.DUPLICATE_PURCHASE,
    ErrorCause.CONTENT_NOT_FOUND: LedgerErrorCode.CONTENT_NOT_FOUND,
    ErrorCause.PURCHASE_NOT_FOUND: LedgerErrorCode.CONTENT_NOT_FOUND,
    ErrorCause.PURCHASE_INACTIVE: LedgerErrorCode.CONTENT_NOT_FOUND,
    ErrorCause.NO_EARNINGS_RECORD: LedgerErrorCode.CONTENT_NOT_FOUND,
    ErrorCause.TRANSFER_REJECTED: LedgerErrorCode.INSUFFICIENT_BALANCE,
    ErrorCause.ZERO_BALANCE: LedgerErrorCode.INSUFFICIENT_BALANCE,
    ErrorCause.PAYOUT_FAILED: LedgerErrorCode.INSUFFICIENT_BALANCE,
}


class LedgerError(Exception):
    """Typed failure raised by ledger operations."""

    def __init__(self, cause: ErrorCause, message: str) -> None:
        super().__init__(message)
        self.cause = cause
        self.message = message

    @property
    def code(self) -> LedgerErrorCode:
        return CAUSE_CODES[self.cause]

    def __repr__(self) -> str:
        return f"LedgerError({self.code.name}, cause={self.cause.value!r}, {self.message!r})"
