"""Texture loading and drawing of the map onto a pygame surface."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Union

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from solong.game import Game  # noqa: E402
from solong.gamemap import COIN, EMPTY, PLAYER, WALL  # noqa: E402

TILE_SIZE = 50
TEXTURE_DIR = "textures"
_BACKGROUND = (0, 0, 0)

_TEXTURE_FILES = (
    ("wall", "grass.xpm", "wall.xpm"),
    ("empty", "empty.xpm", "empty.xpm"),
    ("coin", "collectible.xpm", "coin.xpm"),
    ("character", "character.xpm", "character.xpm"),
)


@dataclass
class Textures:
    """The images drawn for each kind of tile."""

    wall: pygame.Surface
    empty: pygame.Surface
    coin: pygame.Surface
    character: pygame.Surface

    def for_tile(self, char: str):
        """Return the image for a tile character, or None if it has none."""
        return {
            WALL: self.wall,
            EMPTY: self.empty,
            COIN: self.coin,
            PLAYER: self.character,
        }.get(char)


def load_textures(directory: Union[str, os.PathLike] = TEXTURE_DIR) -> Textures:
    """Load the four tile images from ``directory``."""
    base = Path(directory)
    images = {}
    for name, filename, label in _TEXTURE_FILES:
        try:
            images[name] = pygame.image.load(str(base / filename))
        except (pygame.error, OSError) as exc:
            raise RuntimeError(f"Failed to load {label}") from exc
    return Textures(**images)


def render_map(surface: pygame.Surface, game: Game, textures: Textures) -> None:
    """Clear ``surface`` and draw every tile of the game's map on it."""
    surface.fill(_BACKGROUND)
    for y, row in enumerate(game.map.rows):
        for x, char in enumerate(row):
            image = textures.for_tile(char)
            if image is not None:
                surface.blit(image, (x * TILE_SIZE, y * TILE_SIZE))