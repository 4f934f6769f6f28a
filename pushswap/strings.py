"""String helpers with C string-library semantics, returning Python values.

Positions are returned as indices (or None where nothing is found). A NUL
character counts as the end of a string, as it would in C.
"""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import Callable, MutableSequence, Optional, Union

CharLike = Union[int, str]
_NUL = "\0"


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError("expected a single character")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError("expected an int or a single character")
    return chr(c & 0xFF)


def _terminated(s: str) -> str:
    """The part of ``s`` before its first NUL."""
    end = s.find(_NUL)
    return s if end < 0 else s[:end]


def strlen(s: Union[str, bytes, bytearray]) -> int:
    """Length of ``s`` up to its first NUL."""
    terminator = _NUL if isinstance(s, str) else b"\0"
    end = s.find(terminator)
    return len(s) if end < 0 else end


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first ``c`` in ``s``; searching NUL finds the terminator."""
    text = _terminated(s)
    ch = _char(c)
    if ch == _NUL:
        return len(text)
    position = text.find(ch)
    return None if position < 0 else position


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last ``c`` in ``s``; searching NUL finds the terminator."""
    text = _terminated(s)
    ch = _char(c)
    if ch == _NUL:
        return len(text)
    position = text.rfind(ch)
    return None if position < 0 else position


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; the difference of the first mismatch."""
    if n < 0:
        raise ValueError("count must not be negative")
    pairs = zip_longest(_terminated(s1), _terminated(s2), fillvalue=_NUL)
    for a, b in islice(pairs, n):
        if a != b or a == _NUL or b == _NUL:
            return ord(a) - ord(b)
    return 0


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Index of ``little`` wholly inside the first ``length`` chars of ``big``."""
    if length < 0:
        raise ValueError("length must not be negative")
    needle = _terminated(little)
    if not needle:
        return 0
    position = _terminated(big)[:length].find(needle)
    return None if position < 0 else position


def strdup(s: str) -> str:
    """A copy of ``s`` up to its first NUL."""
    return _terminated(s)


def substr(s: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``s`` from ``start``; empty past the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    text = _terminated(s)
    if start >= len(text):
        return ""
    return text[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """``s1`` followed by ``s2``."""
    if s1 is None or s2 is None:
        raise TypeError("both strings are required")
    return _terminated(s1) + _terminated(s2)


def strtrim(s: str, charset: str) -> str:
    """``s`` without leading and trailing characters found in ``charset``."""
    if s is None or charset is None:
        raise TypeError("string and character set are required")
    chars = _terminated(charset)
    text = _terminated(s)
    return text.strip(chars) if chars else text


def split(s: str, sep: CharLike) -> list[str]:
    """The non-empty pieces of ``s`` between occurrences of ``sep``."""
    text = _terminated(s)
    ch = _char(sep)
    if ch == _NUL:
        return [text] if text else []
    return [word for word in text.split(ch) if word]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """A new string made of ``f(index, char)`` for each character of ``s``."""
    if s is None or f is None:
        raise TypeError("string and function are required")
    return "".join(f(i, ch) for i, ch in enumerate(_terminated(s)))


def striteri(chars: MutableSequence[str], f: Callable[[int, str], Optional[str]]) -> None:
    """Call ``f(index, char)`` on each character, storing any non-None result."""
    if chars is None or f is None:
        raise TypeError("characters and function are required")
    for i, ch in enumerate(list(chars)):
        if ch == _NUL:
            break
        result = f(i, ch)
        if result is not None:
            chars[i] = result


def _buffer_len(buf: bytearray) -> int:
    end = buf.find(b"\0")
    if end < 0:
        raise ValueError("destination buffer is not NUL-terminated")
    return end


def strlcpy(dst: bytearray, src: bytes, size: int) -> int:
    """Copy ``src`` into ``dst`` within ``size`` bytes; returns the length of ``src``."""
    if size < 0:
        raise ValueError("size must not be negative")
    s_len = strlen(src)
    if size == 0:
        return s_len
    count = min(s_len, size - 1)
    if len(dst) < count + 1:
        raise ValueError("destination buffer is too small")
    dst[:count] = bytes(src[:count])
    dst[count] = 0
    return s_len


def strlcat(dst: bytearray, src: bytes, size: int) -> int:
    """Append ``src`` to ``dst`` within ``size`` bytes; returns the length tried for."""
    if size < 0:
        raise ValueError("size must not be negative")
    s_len = strlen(src)
    d_len = _buffer_len(dst)
    if size <= d_len:
        return size + s_len
    count = min(s_len, size - 1 - d_len)
    if len(dst) < d_len + count + 1:
        raise ValueError("destination buffer is too small")
    dst[d_len:d_len + count] = bytes(src[:count])
    dst[d_len + count] = 0
    return s_len + d_len