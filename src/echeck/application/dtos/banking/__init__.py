"""Banking DTOs - results of bank account checks."""

from echeck.application.dtos.banking.validation_report_dto import (
    ValidationReportDTO,
)

__all__ = [
    "ValidationReportDTO",
]
