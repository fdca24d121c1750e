"""
Unit tests for the ledger error taxonomy.
"""

from src.domain.errors import CAUSE_CODES, ErrorCause, LedgerError, LedgerErrorCode


class TestLedgerErrorCode:
    def test_numeric_codes_are_stable(self) -> None:
        assert LedgerErrorCode.UNAUTHORIZED == 100
        assert LedgerErrorCode.INVALID_PRICING_PARAMETERS == 101
        assert LedgerErrorCode.DUPLICATE_PURCHASE == 102
        assert LedgerErrorCode.CONTENT_NOT_FOUND == 103
        assert LedgerErrorCode.INSUFFICIENT_BALANCE == 104
        assert LedgerErrorCode.SUBSCRIPTION_EXPIRED == 105
        assert LedgerErrorCode.INVALID_SUBSCRIPTION_DURATION == 106

    def test_every_cause_has_a_code(self) -> None:
        assert set(CAUSE_CODES) == set(ErrorCause)

    def test_subscription_expired_never_mapped(self) -> None:
        assert LedgerErrorCode.SUBSCRIPTION_EXPIRED not in CAUSE_CODES.values()


class TestLedgerError:
    def test_code_derived_from_cause(self) -> None:
        err = LedgerError(ErrorCause.NO_EARNINGS_RECORD, "No earnings record for bob")

        assert err.code == LedgerErrorCode.CONTENT_NOT_FOUND
        assert err.message == "No earnings record for bob"
        assert str(err) == "No earnings record for bob"

    def test_repr_names_code_and_cause(self) -> None:
        err = LedgerError(ErrorCause.ZERO_BALANCE, "Nothing to withdraw")

        assert "INSUFFICIENT_BALANCE" in repr(err)
        assert "zero_balance" in repr(err)
