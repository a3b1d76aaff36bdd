"""Command-line entry point: load a map and play it in a window."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from solong.game import Game, GameExit, Key
from solong.gamemap import MapError, load_map
from solong.render import TEXTURE_DIR, TILE_SIZE, load_textures, pygame, render_map

WINDOW_TITLE = "so_long"


def _report(message: str) -> None:
    print(f"Error\n{message}")


def _redraw(screen, game: Game, textures) -> None:
    render_map(screen, game, textures)
    pygame.display.flip()


def _run(screen, game: Game, textures) -> int:
    while True:
        event = pygame.event.wait()
        if event.type == pygame.QUIT:
            print("Window Closed")
            return 0
        if event.type != pygame.KEYDOWN:
            continue
        keycode = Key.ESC if event.key == pygame.K_ESCAPE else event.key
        try:
            moved = game.handle_key(keycode)
        except GameExit as exc:
            print(exc)
            return 0
        if moved:
            _redraw(screen, game, textures)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Play the map named by the single argument; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        return 1
    try:
        game = Game(load_map(args[0]))
    except MapError as exc:
        _report(str(exc))
        return 1
    pygame.init()
    try:
        screen = pygame.display.set_mode(
            (game.map.width * TILE_SIZE, game.map.height * TILE_SIZE)
        )
        pygame.display.set_caption(WINDOW_TITLE)
        try:
            textures = load_textures(TEXTURE_DIR)
        except RuntimeError as exc:
            _report(str(exc))
            return 1
        _redraw(screen, game, textures)
        return _run(screen, game, textures)
    finally:
        pygame.quit()


if __name__ == "__main__":
    sys.exit(main())