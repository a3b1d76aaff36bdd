"""Game state and keyboard handling."""

from __future__ import annotations

from enum import IntEnum

from solong.gamemap import COIN, EMPTY, PLAYER, GameMap, MapError


class Key(IntEnum):
    """Key codes the game reacts to."""

    ESC = 65307
    UP = 119
    LEFT = 97
    DOWN = 115
    RIGHT = 100


class GameExit(Exception):
    """Raised when the player asks to leave the game."""


_MOVES = {
    Key.UP: (-1, 0),
    Key.LEFT: (0, -1),
    Key.DOWN: (1, 0),
    Key.RIGHT: (0, 1),
}

_WALKABLE = frozenset((EMPTY, COIN))


class Game:
    """A map together with the player's position on it."""

    def __init__(self, game_map: GameMap) -> None:
        position = game_map.find_player()
        if position is None:
            raise MapError("Map has no player")
        self.map = game_map
        self.player_x, self.player_y = position

    def step(self, dy: int, dx: int) -> bool:
        """Move the player by one tile onto empty ground or a coin.

        Returns True when the player moved.
        """
        x, y = self.player_x + dx, self.player_y + dy
        if not self.map.contains(x, y) or self.map.tile(x, y) not in _WALKABLE:
            return False
        self.map[x, y] = PLAYER
        self.map[self.player_x, self.player_y] = EMPTY
        self.player_x, self.player_y = x, y
        return True

    def handle_key(self, keycode: int) -> bool:
        """React to a key; raise GameExit on escape, return True after a move."""
        if keycode == Key.ESC:
            raise GameExit("Exit with ESC")
        try:
            dy, dx = _MOVES[Key(keycode)]
        except (ValueError, KeyError):
            return False
        return self.step(dy, dx)