"""DTO for the outcome of a bank account check."""

from __future__ import annotations

from dataclasses import dataclass, field

from echeck.domain.banking.value_objects import AccountRecord


@dataclass(frozen=True)
class ValidationReportDTO:
    """Validation outcome for presentation layer.

    Carries the masked account number only, never the raw one.
    """

    valid: bool
    holder_name: str
    display_number: str
    account_type: str | None
    errors: dict[str, list[str]] = field(default_factory=dict)
    full_messages: list[str] = field(default_factory=list)

    @classmethod
    def from_record(cls, record: AccountRecord) -> ValidationReportDTO:
        """Snapshot a record that has already been validated."""
        return cls(
            valid=record.errors.is_empty(),
            holder_name=record.name.strip(),
            display_number=record.display_number,
            account_type=record.account_type,
            errors=record.errors.to_dict(),
            full_messages=record.errors.full_messages(),
        )

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "holder_name": self.holder_name,
            "display_number": self.display_number,
            "account_type": self.account_type,
            "errors": {key: list(value) for key, value in self.errors.items()},
            "full_messages": list(self.full_messages),
        }
