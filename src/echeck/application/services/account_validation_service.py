"""Run bank account checks and report the outcome."""

from __future__ import annotations

import logging

from echeck.application.dtos.banking import ValidationReportDTO
from echeck.domain.banking.exceptions import InvalidBankAccountError
from echeck.domain.banking.value_objects import AccountRecord

logger = logging.getLogger(__name__)


class AccountValidationService:
    """Validate bank account records on behalf of callers.

    The record itself never logs or raises. This service adds both:
    it logs each outcome (masked account number only) and can turn an
    invalid record into an InvalidBankAccountError.
    """

    def check(self, record: AccountRecord) -> ValidationReportDTO:
        record.validate()
        report = ValidationReportDTO.from_record(record)

        if report.valid:
            logger.info(
                "Bank account %s (%s) is valid",
                report.display_number,
                report.account_type,
            )
        else:
            logger.info(
                "Bank account %s (%s) is invalid: %d error(s)",
                report.display_number,
                report.account_type,
                len(record.errors),
            )
            logger.debug("Validation errors: %s", report.errors)

        return report

    def ensure_valid(self, record: AccountRecord) -> AccountRecord:
        """Validate and return the normalized record, or raise.

        Raises
        ------
        InvalidBankAccountError
            If any validation rule recorded an error.
        """
        report = self.check(record)
        if not report.valid:
            raise InvalidBankAccountError(
                errors=report.errors,
                full_messages=report.full_messages,
            )
        return record
