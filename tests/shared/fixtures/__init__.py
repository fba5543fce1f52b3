"""Shared test fixtures and factories."""

from tests.shared.fixtures.factories import BankAccountFactory

__all__ = ["BankAccountFactory"]
