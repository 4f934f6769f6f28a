"""Byte-buffer helpers working on bytearray and other bytes-like objects."""

from __future__ import annotations

from typing import Optional

SIZE_MAX = 2**64 - 1


def _check_span(length: int, n: int, name: str = "buffer") -> None:
    if n < 0:
        raise ValueError("byte count must not be negative")
    if n > length:
        raise ValueError(f"{name} holds {length} bytes, {n} requested")


def memset(buf: bytearray, c: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buf`` with ``c`` (taken modulo 256)."""
    _check_span(len(buf), n)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> None:
    """Zero the first ``n`` bytes of ``buf``."""
    memset(buf, 0, n)


def memcpy(dest: bytearray, src: bytes, n: int) -> bytearray:
    """Copy ``n`` bytes from ``src`` into the start of ``dest``."""
    _check_span(len(dest), n, "destination")
    _check_span(len(src), n, "source")
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buf: bytearray, dest_offset: int, src_offset: int, n: int) -> bytearray:
    """Move ``n`` bytes inside ``buf``; overlapping regions are handled."""
    if dest_offset < 0 or src_offset < 0:
        raise ValueError("offsets must not be negative")
    _check_span(len(buf) - dest_offset, n, "destination")
    _check_span(len(buf) - src_offset, n, "source")
    buf[dest_offset:dest_offset + n] = bytes(buf[src_offset:src_offset + n])
    return buf


def memchr(data: bytes, c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``c`` among the first ``n``, or None."""
    _check_span(len(data), n)
    position = bytes(data[:n]).find(c & 0xFF)
    return None if position < 0 else position


def memcmp(a: bytes, b: bytes, n: int) -> int:
    """Difference of the first unequal bytes within ``n``, or 0."""
    _check_span(len(a), n, "first buffer")
    _check_span(len(b), n, "second buffer")
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def calloc(nmemb: int, size: int) -> bytearray:
    """A zeroed buffer of ``nmemb * size`` bytes.

    A zero count or size yields a one-byte empty string buffer; a product
    that would not fit in a 64-bit size raises OverflowError.
    """
    if nmemb < 0 or size < 0:
        raise ValueError("counts must not be negative")
    if nmemb == 0 or size == 0:
        return bytearray(1)
    if nmemb > SIZE_MAX // size:
        raise OverflowError("requested allocation size overflows")
    return bytearray(nmemb * size)