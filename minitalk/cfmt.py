"""A small printf-style formatter supporting ``%d %i %u %c %s %p %x %X %%``."""

from __future__ import annotations

import operator
import re
import sys
from typing import Any, Callable, Iterator, TextIO

from minitalk.parsing import itoa

__all__ = ["format_basic", "printf_basic"]

_UINT_MASK = 0xFFFFFFFF
_POINTER_MASK = 0xFFFFFFFFFFFFFFFF

# A '%' followed by a known conversion, or a '%' that ends the format.
# Any other '%' is copied literally, as is the character after it.
_DIRECTIVE = re.compile(r"%(?:([diucspxX%])|\Z)")


def _signed32(value: Any) -> int:
    n = operator.index(value) & _UINT_MASK
    return n - (1 << 32) if n & 0x80000000 else n


def _unsigned32(value: Any) -> int:
    return operator.index(value) & _UINT_MASK


def _decimal(value: Any) -> str:
    return itoa(_signed32(value))


def _unsigned(value: Any) -> str:
    # Zero produces no digits at all for this conversion.
    n = _unsigned32(value)
    return str(n) if n else ""


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("%c expects a single character")
        return value
    return chr(operator.index(value) & 0xFF)


def _string(value: Any) -> str:
    return "(null)" if value is None else str(value)


def _pointer(value: Any) -> str:
    if value is None:
        return "0x0"
    n = operator.index(value) & _POINTER_MASK
    return "0x0" if n == 0 else "0x" + format(n, "x")


def _hex(spec: str) -> Callable[[Any], str]:
    def convert(value: Any) -> str:
        n = _unsigned32(value)
        return "0" if n == 0 else format(n, spec)

    return convert


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "d": _decimal,
    "i": _decimal,
    "u": _unsigned,
    "c": _char,
    "s": _string,
    "p": _pointer,
    "x": _hex("x"),
    "X": _hex("X"),
}


def format_basic(fmt: str, *args: Any) -> str:
    """Render ``fmt`` with ``args`` and return the resulting text.

    Raises ``ValueError`` when the format asks for more arguments than given.
    """
    values: Iterator[Any] = iter(args)

    def replace(match: re.Match[str]) -> str:
        spec = match.group(1)
        if spec is None:
            return ""
        if spec == "%":
            return "%"
        try:
            value = next(values)
        except StopIteration:
            raise ValueError(
                f"not enough arguments for format {fmt!r}"
            ) from None
        return _CONVERSIONS[spec](value)

    return _DIRECTIVE.sub(replace, fmt)


def printf_basic(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the formatted text to ``stream`` (stdout by default).

    Returns the number of characters written.
    """
    text = format_basic(fmt, *args)
    out = sys.stdout if stream is None else stream
    out.write(text)
    out.flush()
    return len(text)