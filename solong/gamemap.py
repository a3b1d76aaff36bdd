"""Map loading and validation for the tile game."""

from __future__ import annotations

from dataclasses import dataclass, field
from os import PathLike
from typing import Iterable, Optional, Sequence, Tuple, Union

from solong.lines import iter_lines

WALL = "1"
EMPTY = "0"
COIN = "C"
PLAYER = "P"


class MapError(Exception):
    """Raised when a map cannot be read or is malformed."""


@dataclass
class GameMap:
    """A grid of tile characters, indexed by column ``x`` and row ``y``."""

    rows: list = field(default_factory=list)

    def __post_init__(self) -> None:
        self.rows = [list(row) for row in self.rows]

    @property
    def width(self) -> int:
        """Number of columns, taken from the first row."""
        return len(self.rows[0]) if self.rows else 0

    @property
    def height(self) -> int:
        """Number of rows."""
        return len(self.rows)

    def contains(self, x: int, y: int) -> bool:
        """True when ``(x, y)`` lies on the map."""
        return 0 <= y < len(self.rows) and 0 <= x < len(self.rows[y])

    def tile(self, x: int, y: int) -> str:
        """Return the tile character at column ``x``, row ``y``."""
        if not self.contains(x, y):
            raise IndexError(f"position ({x}, {y}) is outside the map")
        return self.rows[y][x]

    def __setitem__(self, position: Tuple[int, int], value: str) -> None:
        x, y = position
        if not self.contains(x, y):
            raise IndexError(f"position ({x}, {y}) is outside the map")
        self.rows[y][x] = value

    def find_player(self) -> Optional[Tuple[int, int]]:
        """Return ``(x, y)`` of the player, the last one in reading order, or None."""
        found = None
        for y, row in enumerate(self.rows):
            for x, char in enumerate(row):
                if char == PLAYER:
                    found = (x, y)
        return found

    def __str__(self) -> str:
        return "\n".join("".join(row) for row in self.rows)


def check_rectangle(rows: Iterable[Sequence[str]]) -> None:
    """Raise MapError unless every row is as long as the first."""
    rows = list(rows)
    if not rows:
        return
    reference = len(rows[0])
    if any(len(row) != reference for row in rows):
        raise MapError("Map is not rectangle")


def load_map(path: Union[str, PathLike]) -> GameMap:
    """Read a map file, one row per line, and check that it is rectangular."""
    try:
        with open(path, encoding="utf-8", newline="") as stream:
            rows = list(iter_lines(stream))
    except OSError as exc:
        raise MapError(f"Cannot read map {path}: {exc.strerror}") from exc
    if not rows:
        raise MapError("Map is empty")
    check_rectangle(rows)
    return GameMap(rows)