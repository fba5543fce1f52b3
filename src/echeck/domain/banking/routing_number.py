"""ABA routing number utilities."""

from __future__ import annotations

import re
from typing import Any

_NON_DIGITS = re.compile(r"[^0-9]")
_NINE_DIGITS = re.compile(r"[0-9]{9}")

# Weights applied to d0..d8, repeating every three digits
CHECKSUM_WEIGHTS: tuple[int, ...] = (3, 7, 1) * 3

ROUTING_NUMBER_LENGTH = 9


def strip_non_digits(value: Any) -> str:
    """Remove every character that is not an ASCII decimal digit.

    Works on the string form of the value; None is treated as "".
    """
    if value is None:
        return ""
    return _NON_DIGITS.sub("", str(value))


def is_valid_routing_number(value: str | None) -> bool:
    """Check a routing transit number against the ABA checksum.

    The formula is::

        (3(d1 + d4 + d7) + 7(d2 + d5 + d8) + 1(d3 + d6 + d9)) mod 10 = 0

    Anything that is not exactly nine ASCII digits is invalid.
    See https://en.wikipedia.org/wiki/ABA_routing_transit_number
    """
    if value is None or not _NINE_DIGITS.fullmatch(value):
        return False
    checksum = sum(
        weight * int(digit)
        for weight, digit in zip(CHECKSUM_WEIGHTS, value, strict=True)
    )
    return checksum % 10 == 0
