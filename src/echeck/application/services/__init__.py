"""Application layer services."""

from echeck.application.services.account_validation_service import (
    AccountValidationService,
)

__all__ = [
    "AccountValidationService",
]
