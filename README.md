# solong

A small tile-map game. It loads a rectangular map made of characters
and shows it in a pygame window, where the player walks around over
floor and coins.

## Installing

```
pip install .
```

## Playing

```
solong path/to/map.ber
```

The command takes exactly one argument, the map file. With any other
number of arguments it exits with status 1 and prints nothing.

The map is a text file where every line has the same length:

| Character | Meaning     |
|-----------|-------------|
| `1`       | wall        |
| `0`       | empty floor |
| `C`       | coin        |
| `P`       | player      |

For example:

```
11111
1P0C1
11111
```

If the map cannot be started, the command prints `Error` on one line and
the reason on the next, then exits with status 1. The reasons are:

- `Map is not rectangle` when the lines differ in length
- `Map is empty` when the file holds no lines
- `Map has no player` when there is no `P`
- `Cannot read map ...` when the file cannot be opened
- `Failed to load ...` when a texture cannot be loaded

Each tile is drawn 50 pixels square, so the window is 50 times the
map's width by 50 times its height. The textures are read from a
`textures/` directory under the current working directory, which must
hold `grass.xpm` (walls), `empty.xpm`, `collectible.xpm` and
`character.xpm`, in a form pygame can load. Characters other than the
four above are left blank.

Controls:

- `W` moves up, `A` left, `S` down, `D` right
- `Esc` quits, printing `Exit with ESC`
- closing the window quits, printing `Window Closed`

The player can step onto floor and coins; the tile left behind becomes
floor. Walls and the edge of the map stop the player. If the map holds
more than one `P`, the last one in reading order is the player.

## What it does not do

The game has no goal: coins vanish when walked over, but they are not
counted, there is no exit tile, no win, and no move counter. Maps are
only checked for being non-empty, rectangular and holding a player;
they are not checked for closing walls, allowed characters or
reachable coins.

## Using it as a library

```python
from solong.gamemap import load_map
from solong.game import Game, Key

game = Game(load_map("maps/small.ber"))
game.step(0, 1)            # move one tile right; True if the player moved
game.handle_key(Key.DOWN)  # same, driven by a key code
print(game.map)            # the map as text
```

- `solong.gamemap`: `load_map(path)` returns a `GameMap`; it raises
  `MapError` on the problems listed above. `GameMap` has `rows`,
  the `width` and `height` properties, `tile(x, y)`, `contains(x, y)`,
  `find_player()` and item assignment `game_map[x, y] = "0"`.
  `check_rectangle(rows)` raises `MapError` for rows of unequal length.
- `solong.game`: `Game(game_map)` tracks `player_x` and `player_y`.
  `step(dy, dx)` moves by one tile; `handle_key(keycode)` maps the
  `Key` codes (`UP`, `LEFT`, `DOWN`, `RIGHT`) to moves and raises
  `GameExit` for `Key.ESC`. Other codes are ignored.
- `solong.render`: `load_textures(directory)` returns a `Textures`
  holding the four images; `render_map(surface, game, textures)` clears
  a pygame surface and draws the map on it with `TILE_SIZE` tiles.
- `solong.cli`: `main(argv=None)` runs the command and returns its exit
  status.
- `solong.lines`: `LineReader(stream, buffer_size=42, keep_newline=False)`
  reads a text or binary stream in fixed-size chunks; `next_line()`
  returns one line or `None` at the end, and the reader is iterable.
  `iter_lines(stream, keep_newline=False)` yields every line.

The modules `solong.strops`, `solong.numbers`, `solong.memory` and
`solong.charclass` hold small string, integer, byte-buffer and
ASCII character-class helpers, such as `split`, `strtrim`, `strncmp`,
`atoi`, `itoa`, `memmove`, `calloc`, `is_alpha` and `to_upper`.

## Tests

```
pip install .[test]
pytest
```