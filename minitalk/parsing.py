"""Lenient integer parsing and formatting helpers."""

from __future__ import annotations

import operator
import re

__all__ = ["atoi", "itoa"]

# Leading whitespace is the C "isspace" set: tab, newline, vertical tab,
# form feed, carriage return and space.
_NUMBER = re.compile(r"[\t\n\v\f\r ]*([+-]?)([0-9]*)")


def atoi(text: str) -> int:
    """Parse the leading integer of ``text``.

    Leading whitespace is skipped, one optional sign is accepted, and digits
    are read until the first non-digit. Text without digits gives ``0``.
    """
    match = _NUMBER.match(text)
    sign, digits = match.group(1), match.group(2)
    if not digits:
        return 0
    value = int(digits)
    return -value if sign == "-" else value


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    return str(operator.index(n))