"""Error collection for bank account validation."""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum


class AccountField(str, Enum):
    """Fields that validation errors can be recorded on."""

    FIRST_NAME = "first_name"
    LAST_NAME = "last_name"
    ACCOUNT_NUMBER = "account_number"
    ROUTING_NUMBER = "routing_number"
    TYPE = "type"
    ECHECK_TYPE = "echeck_type"
    BASE = "base"


FieldKey = AccountField | str


def _canonical(field: FieldKey) -> str:
    # Enum members first: str(member) would give "AccountField.X"
    if isinstance(field, AccountField):
        return field.value
    return str(field).strip().lower()


def _humanize(key: str) -> str:
    words = key.replace("_", " ").strip()
    return words[:1].upper() + words[1:]


class AccountErrors:
    """
    Ordered mapping of field name to validation messages.

    Keys are stored in one canonical form, so a field can be looked up
    either by its AccountField member or by its name as a string:

        errors.on(AccountField.FIRST_NAME) == errors.on("first_name")
    """

    def __init__(self) -> None:
        self._messages: dict[str, list[str]] = {}

    def add(self, field: FieldKey, message: str) -> None:
        self._messages.setdefault(_canonical(field), []).append(message)

    def add_to_base(self, message: str) -> None:
        """Record an error that concerns the account as a whole."""
        self.add(AccountField.BASE, message)

    def on(self, field: FieldKey) -> list[str]:
        """Return the messages recorded for a field (empty list if none)."""
        return list(self._messages.get(_canonical(field), []))

    def on_base(self) -> list[str]:
        return self.on(AccountField.BASE)

    def clear(self) -> None:
        self._messages.clear()

    def is_empty(self) -> bool:
        return not self._messages

    def full_messages(self) -> list[str]:
        """
        Messages prefixed with the humanized field name.

        "first_name" + "cannot be empty" -> "First name cannot be empty".
        Base errors are returned verbatim.
        """
        return [
            message if field == AccountField.BASE.value
            else f"{_humanize(field)} {message}"
            for field, message in self
        ]

    def to_dict(self) -> dict[str, list[str]]:
        return {field: list(messages) for field, messages in self._messages.items()}

    def __getitem__(self, field: FieldKey) -> list[str]:
        return self.on(field)

    def __contains__(self, field: object) -> bool:
        if not isinstance(field, str):
            return False
        return _canonical(field) in self._messages

    def __iter__(self) -> Iterator[tuple[str, str]]:
        for field, messages in self._messages.items():
            for message in messages:
                yield field, message

    def __len__(self) -> int:
        return sum(len(messages) for messages in self._messages.values())

    def __repr__(self) -> str:
        return f"AccountErrors({self._messages!r})"
