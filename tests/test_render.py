import pygame
import pytest

from solong.game import Game
from solong.gamemap import GameMap
from solong.render import TILE_SIZE, Textures, load_textures, render_map

WALL_COLOR = (10, 200, 10)
EMPTY_COLOR = (200, 200, 200)
COIN_COLOR = (250, 220, 0)
PLAYER_COLOR = (20, 40, 240)


def _solid(color):
    surface = pygame.Surface((TILE_SIZE, TILE_SIZE))
    surface.fill(color)
    return surface


def _textures():
    return Textures(
        wall=_solid(WALL_COLOR),
        empty=_solid(EMPTY_COLOR),
        coin=_solid(COIN_COLOR),
        character=_solid(PLAYER_COLOR),
    )


def _pixel(surface, x, y):
    centre = (x * TILE_SIZE + TILE_SIZE // 2, y * TILE_SIZE + TILE_SIZE // 2)
    return tuple(surface.get_at(centre))[:3]


def _xpm(color_hex):
    return (
        "/* XPM */\n"
        "static char * tile_xpm[] = {\n"
        '"2 2 1 1",\n'
        f'"a c #{color_hex}",\n'
        '"aa",\n'
        '"aa"};\n'
    )


def test_tiles_are_fifty_pixels_apart():
    game = Game(GameMap(["P1"]))
    surface = pygame.Surface((100, 50))
    render_map(surface, game, _textures())
    assert tuple(surface.get_at((49, 25)))[:3] == PLAYER_COLOR
    assert tuple(surface.get_at((50, 25)))[:3] == WALL_COLOR


def test_render_draws_each_tile():
    game = Game(GameMap(["1C", "P0"]))
    surface = pygame.Surface((2 * TILE_SIZE, 2 * TILE_SIZE))
    render_map(surface, game, _textures())
    assert _pixel(surface, 0, 0) == WALL_COLOR
    assert _pixel(surface, 1, 0) == COIN_COLOR
    assert _pixel(surface, 0, 1) == PLAYER_COLOR
    assert _pixel(surface, 1, 1) == EMPTY_COLOR


def test_render_clears_unknown_tiles():
    game = Game(GameMap(["PE"]))
    surface = pygame.Surface((2 * TILE_SIZE, TILE_SIZE))
    surface.fill((123, 45, 67))
    render_map(surface, game, _textures())
    assert _pixel(surface, 1, 0) == (0, 0, 0)
    assert _pixel(surface, 0, 0) == PLAYER_COLOR


def test_render_follows_moves():
    game = Game(GameMap(["P0"]))
    surface = pygame.Surface((2 * TILE_SIZE, TILE_SIZE))
    game.step(0, 1)
    render_map(surface, game, _textures())
    assert _pixel(surface, 1, 0) == PLAYER_COLOR
    assert _pixel(surface, 0, 0) == EMPTY_COLOR


def test_textures_for_tile():
    textures = _textures()
    assert textures.for_tile("1") is textures.wall
    assert textures.for_tile("P") is textures.character
    assert textures.for_tile("E") is None


def test_load_textures_reads_files(tmp_path):
    for name in ("grass.xpm", "empty.xpm", "collectible.xpm", "character.xpm"):
        (tmp_path / name).write_text(_xpm("FF0000"), encoding="ascii")
    textures = load_textures(tmp_path)
    assert textures.wall.get_size() == (2, 2)
    assert tuple(textures.coin.get_at((0, 0)))[:3] == (255, 0, 0)


def test_load_textures_missing_directory(tmp_path):
    with pytest.raises(RuntimeError, match="Failed to load wall.xpm"):
        load_textures(tmp_path / "absent")


def test_load_textures_missing_one_file(tmp_path):
    for name in ("grass.xpm", "empty.xpm", "collectible.xpm"):
        (tmp_path / name).write_text(_xpm("00FF00"), encoding="ascii")
    with pytest.raises(RuntimeError, match="Failed to load character.xpm"):
        load_textures(tmp_path)