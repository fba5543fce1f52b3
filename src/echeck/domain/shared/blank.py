"""Presence checks for optional text fields."""

from __future__ import annotations


def is_blank(value: str | None) -> bool:
    """Return True for an unset value or a string holding only whitespace."""
    return value is None or not value.strip()


def is_present(value: str | None) -> bool:
    return not is_blank(value)
