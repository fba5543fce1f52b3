"""Shared kernel used by every domain package."""

from echeck.domain.shared.blank import is_blank, is_present
from echeck.domain.shared.exceptions import (
    DomainException,
    ErrorCode,
    ValidationError,
)

__all__ = [
    "DomainException",
    "ErrorCode",
    "ValidationError",
    "is_blank",
    "is_present",
]
