"""Integer parsing, formatting and small write helpers for text streams."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

_INT_BITS = 32
_INT_MOD = 1 << _INT_BITS
_INT_MAX = (1 << (_INT_BITS - 1)) - 1

_SPACE = frozenset("\t\n\v\f\r ")
_DIGITS = frozenset("0123456789")


def _wrap_int32(value: int) -> int:
    value %= _INT_MOD
    return value - _INT_MOD if value > _INT_MAX else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way C's atoi does.

    Leading whitespace is skipped, one optional sign is accepted and digits
    are read until the first non-digit. Text with no digits gives 0. The
    result wraps around as a 32-bit signed integer.
    """
    index = 0
    length = len(text)
    while index < length and text[index] in _SPACE:
        index += 1
    sign = 1
    if index < length and text[index] in "+-":
        if text[index] == "-":
            sign = -1
        index += 1
    start = index
    while index < length and text[index] in _DIGITS:
        index += 1
    digits = text[start:index]
    if not digits:
        return 0
    return _wrap_int32(sign * int(digits))


def itoa(n: int) -> str:
    """Format an integer in decimal, with a leading minus for negatives."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    return str(n)


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def write_char(c: str, stream: Optional[TextIO] = None) -> None:
    """Write a single character to ``stream`` (standard output by default)."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _target(stream).write(c)


def write_str(s: str, stream: Optional[TextIO] = None) -> None:
    """Write a string to ``stream`` (standard output by default)."""
    _target(stream).write(s)


def write_endl(s: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write a string followed by a newline; write nothing for None."""
    if s is None:
        return
    _target(stream).write(s + "\n")


def write_nbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write an integer in decimal to ``stream`` (standard output by default)."""
    _target(stream).write(itoa(n))