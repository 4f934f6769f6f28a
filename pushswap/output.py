"""Formatted and unformatted text output with a small printf dialect.

The printf dialect knows ``%c %s %p %d %i %u %x %X %%``; an unknown
conversion character is swallowed and prints nothing. Integer conversions
use C widths: ``%d``/``%i`` are 32-bit signed, ``%u``/``%x``/``%X`` are 32-bit
unsigned and ``%p`` is a 64-bit address.
"""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional, TextIO, Union

from .numbers import n_digits

_UINT_MOD = 2**32
_PTR_MOD = 2**64
_NULL_TEXT = "(null)"
_NIL_TEXT = "(nil)"

CharLike = Union[int, str]


def _resolve(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def _int32(n: int) -> int:
    n %= _UINT_MOD
    return n - _UINT_MOD if n >= _UINT_MOD // 2 else n


def _char_text(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError("expected a single character")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError("expected an int or a single character")
    return chr(c & 0xFF)


def _hex_text(nb: int, kind: str) -> str:
    digits = format(nb % _UINT_MOD, "x")
    return digits if kind == "x" else digits.upper()


def _pointer_text(addr: Optional[int]) -> str:
    if not addr:
        return _NIL_TEXT
    return "0x" + format(addr % _PTR_MOD, "x")


def _convert(kind: str, values: Iterator[Any]) -> str:
    if kind == "%":
        return "%"
    if kind not in "cspdiuxX":
        return ""
    try:
        value = next(values)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{kind}") from None
    if kind == "c":
        return _char_text(value)
    if kind == "s":
        return _NULL_TEXT if value is None else str(value)
    if kind == "p":
        return _pointer_text(value)
    if kind in "di":
        return str(_int32(value))
    if kind == "u":
        return str(value % _UINT_MOD)
    return _hex_text(value, kind)


def format_printf(text: str, *args: Any) -> str:
    """The text that ``printf`` would write for ``text`` and ``args``."""
    pieces = []
    values = iter(args)
    chars = iter(text)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        kind = next(chars, None)
        if kind is None:
            break
        pieces.append(_convert(kind, values))
    return "".join(pieces)


def printf(text: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write formatted text to ``stream`` (stdout by default); return its length."""
    out = format_printf(text, *args)
    _resolve(stream).write(out)
    return len(out)


def putchar(c: CharLike, stream: Optional[TextIO] = None) -> None:
    """Write one character."""
    _resolve(stream).write(_char_text(c))


def putstr(s: Optional[str], stream: Optional[TextIO] = None) -> int:
    """Write ``s`` (or ``(null)`` for None); return the number of characters."""
    text = _NULL_TEXT if s is None else s
    _resolve(stream).write(text)
    return len(text)


def putendl(s: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``s`` and a newline; None writes nothing."""
    if s is None:
        return
    _resolve(stream).write(s + "\n")


def putnbr(n: int, stream: Optional[TextIO] = None) -> int:
    """Write ``n`` as a 32-bit signed decimal; return the characters written."""
    value = _int32(n)
    _resolve(stream).write(str(value))
    return n_digits(abs(value), 10) + (1 if value < 0 else 0)


def putnbr_unsigned(n: int, stream: Optional[TextIO] = None) -> int:
    """Write ``n`` as a 32-bit unsigned decimal; return the digits written."""
    value = n % _UINT_MOD
    _resolve(stream).write(str(value))
    return n_digits(value, 10)


def puthex(nb: int, kind: str, stream: Optional[TextIO] = None) -> int:
    """Write ``nb`` in hexadecimal, lower case for ``'x'`` and upper otherwise."""
    value = nb % _UINT_MOD
    _resolve(stream).write(_hex_text(value, kind))
    return n_digits(value, 16)


def putptr(addr: Optional[int], stream: Optional[TextIO] = None) -> int:
    """Write an address as ``0x...``, or ``(nil)`` for zero; return its length."""
    text = _pointer_text(addr)
    _resolve(stream).write(text)
    if text == _NIL_TEXT:
        return len(text)
    return n_digits(addr % _PTR_MOD, 16) + 2