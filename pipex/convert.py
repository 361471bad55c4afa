"""Conversions between decimal text and integers."""

from __future__ import annotations

from .chars import is_digit

__all__ = ["atoi", "itoa"]

_WHITESPACE = frozenset(" \t\n\v\f\r")
_ULONG_MOD = 1 << 64
_INT_MOD = 1 << 32
_INT_MIN = -(1 << 31)
_INT_MAX = (1 << 31) - 1


def _to_int32(value: int) -> int:
    value %= _INT_MOD
    return value - _INT_MOD if value > _INT_MAX else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer from *text*.

    Leading ASCII whitespace is skipped, one optional ``+`` or ``-`` sign is
    read, then as many ASCII digits as follow. Parsing stops at the first
    other character; text with no digits yields 0. The magnitude is
    accumulated as an unsigned 64-bit value and the signed result is
    wrapped to a 32-bit integer.
    """
    pos = 0
    end = len(text)
    while pos < end and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < end and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    result = 0
    for ch in text[pos:]:
        if not is_digit(ch):
            break
        result = (result * 10 + ord(ch) - ord("0")) % _ULONG_MOD
    return _to_int32(result * sign)


def itoa(n: int) -> str:
    """Format a 32-bit signed integer as decimal text.

    Raises OverflowError when *n* does not fit in 32 signed bits.
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, not {type(n).__name__}")
    if not _INT_MIN <= n <= _INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    magnitude = -n if n < 0 else n
    digits = []
    while True:
        magnitude, digit = divmod(magnitude, 10)
        digits.append(chr(ord("0") + digit))
        if not magnitude:
            break
    if n < 0:
        digits.append("-")
    return "".join(reversed(digits))