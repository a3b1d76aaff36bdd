"""Byte-buffer comparison, search, fill and copy helpers."""

from __future__ import annotations

from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]


def _check_span(length: int, start: int, n: int, what: str) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    if start < 0 or start + n > length:
        raise IndexError(f"{what} range {start}..{start + n} is outside a buffer of {length} bytes")


def memcmp(a: BytesLike, b: BytesLike, n: int) -> int:
    """Compare the first ``n`` bytes as unsigned values.

    Returns the difference of the first pair that differs, or 0.
    """
    _check_span(len(a), 0, n, "first")
    _check_span(len(b), 0, n, "second")
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def memchr(data: BytesLike, c: int, n: Optional[int] = None) -> Optional[int]:
    """Return the offset of the first byte equal to ``c`` within ``n`` bytes.

    Only the low eight bits of ``c`` are used. Returns None when absent.
    """
    if n is None:
        n = len(data)
    _check_span(len(data), 0, n, "search")
    offset = bytes(data[:n]).find(c & 0xFF)
    return None if offset < 0 else offset


def memset(buf: bytearray, c: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buf`` with the low byte of ``c``."""
    _check_span(len(buf), 0, n, "fill")
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    return memset(buf, 0, n)


def memcpy(buf: bytearray, dst: int, src: int, n: int) -> bytearray:
    """Copy ``n`` bytes from offset ``src`` to offset ``dst`` within ``buf``.

    The copy runs front to back, so when the destination starts inside the
    source range the leading bytes repeat through the destination.
    """
    _check_span(len(buf), src, n, "source")
    _check_span(len(buf), dst, n, "destination")
    if n == 0 or dst == src:
        return buf
    if src < dst < src + n:
        period = bytes(buf[src:dst])
        repeats = -(-n // len(period))
        buf[dst:dst + n] = (period * repeats)[:n]
    else:
        buf[dst:dst + n] = bytes(buf[src:src + n])
    return buf


def memmove(buf: bytearray, dst: int, src: int, n: int) -> bytearray:
    """Copy ``n`` bytes from offset ``src`` to offset ``dst``; overlap is safe."""
    _check_span(len(buf), src, n, "source")
    _check_span(len(buf), dst, n, "destination")
    if n and dst != src:
        buf[dst:dst + n] = bytes(buf[src:src + n])
    return buf


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError(f"count and size must not be negative, got {count} and {size}")
    return bytearray(count * size)