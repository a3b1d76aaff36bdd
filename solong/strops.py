"""String helpers: splitting, trimming, searching, bounded copy and mapping."""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable, MutableSequence, Optional, Tuple, TypeVar

T = TypeVar("T")

_NUL = "\0"


def _single_char(c: str, what: str = "character") -> str:
    if len(c) != 1:
        raise ValueError(f"expected a single {what}, got {c!r}")
    return c


def _non_negative(value: int, name: str) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on the character ``sep``, dropping empty pieces."""
    _single_char(sep, "separator")
    return [piece for piece in s.split(sep) if piece]


def strtrim(s: str, chars: str) -> str:
    """Remove every character found in ``chars`` from both ends of ``s``."""
    if not chars:
        return s
    return s.strip(chars)


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` beginning at ``start``.

    A start at or past the end gives an empty string.
    """
    _non_negative(start, "start")
    _non_negative(length, "length")
    if start >= len(s):
        return ""
    return s[start:start + length]


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Find ``little`` wholly inside the first ``length`` characters of ``big``.

    Returns the offset of the first match, 0 when ``little`` is empty, or
    None when there is no match.
    """
    _non_negative(length, "length")
    if not little:
        return 0
    offset = big[:length].find(little)
    return None if offset < 0 else offset


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns the difference of the first differing character codes, where a
    string that has ended counts as code 0; returns 0 when they agree.
    """
    _non_negative(n, "n")
    for x, y in zip_longest(a[:n], b[:n], fillvalue=_NUL):
        if x != y or x == _NUL:
            return ord(x) - ord(y)
    return 0


def strchr(s: str, c: str) -> Optional[int]:
    """Offset of the first ``c`` in ``s``; a NUL matches at the end."""
    _single_char(c)
    offset = s.find(c)
    if offset >= 0:
        return offset
    return len(s) if c == _NUL else None


def strrchr(s: str, c: str) -> Optional[int]:
    """Offset of the last ``c`` in ``s``; a NUL matches at the end."""
    _single_char(c)
    if c == _NUL:
        return len(s)
    offset = s.rfind(c)
    return None if offset < 0 else offset


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into room for ``size`` characters including a terminator.

    Returns the copied text and the full length of ``src``, so truncation
    shows as a length of ``size`` or more.
    """
    _non_negative(size, "size")
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within room for ``size`` characters.

    Returns the resulting text and the length it tried to create. When
    ``size`` does not exceed ``dst``'s length nothing is appended and the
    length reported is ``size`` plus the length of ``src``.
    """
    _non_negative(size, "size")
    if size <= len(dst):
        return dst, size + len(src)
    room = size - 1 - len(dst)
    return dst + src[:room], len(dst) + len(src)


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from ``f(index, char)`` applied to every character."""
    return "".join(f(index, char) for index, char in enumerate(s))


def striteri(s: MutableSequence[T], f: Callable[[int, T], Optional[T]]) -> None:
    """Call ``f(index, item)`` for each item of ``s`` and update it in place.

    A return value of None leaves the item unchanged.
    """
    for index, item in enumerate(list(s)):
        replacement = f(index, item)
        if replacement is not None:
            s[index] = replacement


def strjoin(a: str, b: str) -> str:
    """Concatenate two strings."""
    if not isinstance(a, str) or not isinstance(b, str):
        raise TypeError("strjoin expects two strings")
    return a + b