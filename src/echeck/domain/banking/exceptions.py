"""Banking domain exceptions.

Validation of a bank account never raises by itself; these exceptions
are used by callers that need an invalid account to be a hard failure.
"""

from echeck.domain.shared.exceptions import (
    DomainException,
    ErrorCode,
    ValidationError,
)


class BankingDomainError(DomainException):
    """Base exception for banking domain errors."""


class InvalidBankAccountError(ValidationError, BankingDomainError):
    """Raised when bank account details fail validation.

    The per-field messages are available in ``details["errors"]``.
    """

    def __init__(
        self,
        errors: dict[str, list[str]],
        full_messages: list[str] | None = None,
    ) -> None:
        summary = "; ".join(full_messages or [])
        message = (
            f"Bank account is invalid: {summary}"
            if summary
            else "Bank account is invalid"
        )
        super().__init__(
            message=message,
            code=ErrorCode.INVALID_BANK_ACCOUNT,
            details={"errors": errors},
        )
