"""Integer parsing and digit counting with C integer widths."""

from __future__ import annotations

INT_BITS = 32
LONG_BITS = 64
INT_MIN = -(2 ** (INT_BITS - 1))
INT_MAX = 2 ** (INT_BITS - 1) - 1

_SPACE = " \t\n\v\f\r"


def _wrap(value: int, bits: int) -> int:
    value &= (1 << bits) - 1
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _parse(text: str) -> int:
    """Leading whitespace, one optional sign, then as many digits as follow."""
    rest = text.lstrip(_SPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[:1] == "-":
            sign = -1
        rest = rest[1:]
        if rest[:1] in ("-", "+"):
            return 0
    digits = []
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        digits.append(ch)
    value = int("".join(digits)) if digits else 0
    return sign * value


def atoi(text: str) -> int:
    """Parse a leading integer the way the C library does, in 32-bit range."""
    return _wrap(_parse(text), INT_BITS)


def atol(text: str) -> int:
    """Parse a leading integer the way the C library does, in 64-bit range."""
    return _wrap(_parse(text), LONG_BITS)


def itoa(n: int) -> str:
    """Decimal text of a 32-bit integer."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError("value does not fit in a 32-bit int")
    return str(n)


def n_digits(n: int, base: int) -> int:
    """Number of digits of ``n`` (as a 64-bit unsigned value) in ``base``."""
    if base < 2:
        raise ValueError("base must be at least 2")
    n %= 2**LONG_BITS
    if n == 0:
        return 1
    count = 0
    while n:
        count += 1
        n //= base
    return count