"""Checking and reading the numbers given on the command line."""

from __future__ import annotations

from collections.abc import Sequence

from .chars import isdigit
from .numbers import INT_MAX, INT_MIN, atoi, atol
from .strings import split


class InputError(ValueError):
    """The arguments are not a list of distinct 32-bit integers."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def _words(args: Sequence[str]) -> list[str]:
    """A single argument is split on spaces; several are taken as they are."""
    if len(args) == 1:
        return split(args[0], " ")
    return list(args)


def check_number(word: str) -> bool:
    """True when ``word`` is an optional sign followed by one or more digits."""
    digits = word[1:] if word[:1] in ("-", "+") else word
    return bool(digits) and all(isdigit(ch) for ch in digits)


def check_doubles(words: Sequence[str]) -> bool:
    """True when no two words parse to the same integer."""
    seen = set()
    for word in words:
        number = atoi(word)
        if number in seen:
            return False
        seen.add(number)
    return True


def check_input(args: Sequence[str]) -> None:
    """Raise InputError unless ``args`` hold distinct integers in int range."""
    words = _words(args)
    for word in words:
        if not INT_MIN <= atol(word) <= INT_MAX:
            raise InputError()
        if not check_number(word):
            raise InputError()
    if not check_doubles(words):
        raise InputError()


def parse_arguments(args: Sequence[str]) -> list[int]:
    """The integers held by ``args``, in order, without checking them."""
    return [atoi(word) for word in _words(args)]