"""Value objects for banking domain."""

from echeck.domain.banking.value_objects.account_errors import (
    AccountErrors,
    AccountField,
)
from echeck.domain.banking.value_objects.account_record import (
    ACCOUNT_TYPES,
    BOGUS_ACCOUNT_TYPE,
    DEFAULT_ACCOUNT_TYPE,
    ECHECK_TYPES,
    AccountRecord,
)

__all__ = [
    "ACCOUNT_TYPES",
    "BOGUS_ACCOUNT_TYPE",
    "DEFAULT_ACCOUNT_TYPE",
    "ECHECK_TYPES",
    "AccountErrors",
    "AccountField",
    "AccountRecord",
]
