"""Bank account value object with normalization and validation."""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator

from echeck.domain.banking.routing_number import (
    ROUTING_NUMBER_LENGTH,
    is_valid_routing_number,
    strip_non_digits,
)
from echeck.domain.banking.value_objects.account_errors import (
    AccountErrors,
    AccountField,
)
from echeck.domain.shared.blank import is_blank, is_present

DEFAULT_ACCOUNT_TYPE = "checking"

# Test account type: only the essential attributes are checked
BOGUS_ACCOUNT_TYPE = "bogus"

ACCOUNT_TYPES: frozenset[str] = frozenset(
    {"checking", BOGUS_ACCOUNT_TYPE, "savings", "business_checking"},
)

# ACH entry classes: corporate (CCD) and personal (PPD)
ECHECK_TYPES: frozenset[str] = frozenset({"ccd", "ppd"})

MASK_CHAR = "X"
VISIBLE_DIGITS = 4


class AccountRecord(BaseModel):
    """
    Bank account details to be checked before submission to a processor.

    Not backed by storage: the record lives for the duration of a check.
    All fields are optional and nothing is validated on construction;
    call validate() (or is_valid()) and inspect errors afterwards.

    For testing, use the "bogus" account type. A bogus account only needs
    a holder name and an account number.

    Example:
        record = AccountRecord(
            first_name="Steve",
            last_name="Smith",
            type="checking",
            echeck_type="ccd",
            routing_number="111000025",
            account_number="12345678",
        )
        record.is_valid()       # True
        record.display_number   # "XXXX5678"
    """

    # Essential attributes for a valid, non-bogus account
    account_number: str | None = Field(default=None, repr=False)
    routing_number: str | None = Field(default=None, repr=False)
    first_name: str | None = None
    last_name: str | None = None
    account_type: str | None = Field(default=None, alias="type")
    echeck_type: str | None = None

    # Additional optional attributes
    bank_name: str | None = None

    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        validate_assignment=True,
    )

    _errors: AccountErrors = PrivateAttr(default_factory=AccountErrors)

    @field_validator("*", mode="before")
    @classmethod
    def _string_form(cls, value: Any) -> str | None:
        """Store any non-string input (numbers, flags, ...) as its string form."""
        if value is None or isinstance(value, str):
            return value
        return str(value)

    def __copy__(self) -> AccountRecord:
        copied = super().__copy__()
        # Each record owns its errors; a copy starts from the same messages
        copied._errors = copy.deepcopy(self._errors)
        return copied

    @classmethod
    def from_mapping(cls, fields: Mapping[str, Any]) -> AccountRecord:
        """Build a record from a mapping of field names; unknown keys are ignored."""
        return cls.model_validate(dict(fields))

    @property
    def errors(self) -> AccountErrors:
        return self._errors

    # ------------------------------------------------------------------
    # Derived views (no normalization side effects)
    # ------------------------------------------------------------------

    @property
    def has_first_name(self) -> bool:
        return is_present(self.first_name)

    @property
    def has_last_name(self) -> bool:
        return is_present(self.last_name)

    @property
    def has_name(self) -> bool:
        return self.has_first_name and self.has_last_name

    @property
    def name(self) -> str:
        return f"{self.first_name or ''} {self.last_name or ''}"

    @property
    def has_account_number(self) -> bool:
        return is_present(self.account_number)

    @property
    def has_routing_number(self) -> bool:
        return is_present(self.routing_number)

    @property
    def last_digits(self) -> str:
        number = self.account_number or ""
        if len(number) <= VISIBLE_DIGITS:
            return number
        return number[-VISIBLE_DIGITS:]

    @property
    def display_number(self) -> str:
        """
        Account number with all but the last four characters masked.

        Numbers of four characters or fewer are shown unmasked.
        """
        number = self.account_number or ""
        last_digits = self.last_digits
        return MASK_CHAR * (len(number) - len(last_digits)) + last_digits

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def normalize(self) -> None:
        """
        Sanitize raw input in place. Runs as the first step of validate().

        Strips non-digits from the account and routing numbers, lower-cases
        the account type and defaults it to "checking" when blank.
        Idempotent.
        """
        self.account_number = strip_non_digits(self.account_number)
        self.routing_number = strip_non_digits(self.routing_number)
        if self.account_type is not None:
            self.account_type = self.account_type.lower()
        if is_blank(self.account_type):
            self.account_type = DEFAULT_ACCOUNT_TYPE

    def validate(self) -> None:  # type: ignore[override]
        """Rebuild errors from the current field values."""
        self._errors.clear()
        self.normalize()

        self._validate_essential_attributes()

        # Bogus accounts are for testing, skip the remaining rules
        if self.account_type == BOGUS_ACCOUNT_TYPE:
            return

        self._validate_account_type()
        self._validate_routing_number()
        self._validate_echeck_type()

    def is_valid(self) -> bool:
        """Run validation and report whether no errors were recorded."""
        self.validate()
        return self._errors.is_empty()

    def _validate_essential_attributes(self) -> None:
        if is_blank(self.first_name):
            self._errors.add(AccountField.FIRST_NAME, "cannot be empty")
        if is_blank(self.last_name):
            self._errors.add(AccountField.LAST_NAME, "cannot be empty")
        if is_blank(self.account_number):
            self._errors.add(AccountField.ACCOUNT_NUMBER, "cannot be empty")

    def _validate_account_type(self) -> None:
        if self.account_type not in ACCOUNT_TYPES:
            self._errors.add(AccountField.TYPE, "is invalid")

    def _validate_routing_number(self) -> None:
        routing_number = self.routing_number or ""
        if is_blank(routing_number):
            self._errors.add(AccountField.ROUTING_NUMBER, "cannot be empty")
        if len(routing_number) != ROUTING_NUMBER_LENGTH:
            self._errors.add(AccountField.ROUTING_NUMBER, "should be 9 digits")
        if not is_valid_routing_number(routing_number):
            self._errors.add(AccountField.ROUTING_NUMBER, "is invalid")

    def _validate_echeck_type(self) -> None:
        # Fires when echeck_type was never set as well
        if self.echeck_type not in ECHECK_TYPES:
            self._errors.add(AccountField.ECHECK_TYPE, "is invalid")

    def __str__(self) -> str:
        return f"{self.name} - {self.display_number}"
