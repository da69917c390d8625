# solong

A small tile-based game. You walk a player around a walled map, pick up every
coin, and then leave through the exit. In enemy mode, enemies patrol along the
rows, and meeting one ends the game.

## Installing

```
pip install .
```

## Playing

```
solong path/to/level.ber
solong --enemies path/to/level.ber
```

Exactly one map path must be given; otherwise the command does nothing and
exits with status 0. If the map cannot be opened or is invalid, the command
prints `!!ERROR!!` followed by the reason and exits with status 1.

Controls:

- `W` / `↑` move up
- `A` / `←` move left
- `S` / `↓` move down
- `D` / `→` move right
- `Esc` quits

The exit opens once all coins are collected; stepping onto it then wins.
Without enemies, every step is counted and printed to the terminal as
`move :N`. With `--enemies`, the move and coin counters are shown at the bottom
of the window instead, enemies are animated, and about twice a second each
enemy steps one tile to the right if it can, otherwise to the left. Walking
into an enemy, or an enemy walking onto you, loses the game.

When the game ends, its closing message (`YOU WIN THE GAME <3`,
`YOU WIN THE GAME`, `YOU LOSE THE GAME` or `BAY BAY`) is printed to the
terminal. Closing the window ends the game without a message.

## Map files

Maps are plain text files. Each row is one line, and these characters are
allowed:

| Char | Meaning                   |
|------|---------------------------|
| `1`  | wall                      |
| `0`  | floor                     |
| `C`  | coin                      |
| `E`  | exit                      |
| `P`  | player start              |
| `M`  | enemy (enemy mode only)   |

The file name's extension is checked: its text from the first dot on must be
`.ber` or a leading part of it.

A map is rejected if any of these holds:

- it is empty, or has blank lines, or a leading or trailing newline
- its rows differ in length
- it is not closed by walls on every side
- it lacks any of `1`, `0`, `C`, `E` or `P`
- it has more or fewer than one `E` or one `P`
- it has any character outside the allowed set
- a coin cannot be reached from the start, or no reachable tile lies next to
  the exit (in enemy mode, enemy tiles count as walkable for this check)

Example:

```
1111111111
1P0C000001
1000011001
10C0000CE1
1111111111
```

## Using it as a library

```python
from solong.mapfile import load_map, MapError
from solong.game import Game, Direction, GameOver

rows = load_map("level.ber", allow_enemies=False)
game = Game(rows, enemies=False)
try:
    moved = game.move(Direction.RIGHT)   # True if the player stepped
except GameOver as over:
    print(over.outcome, over.message)
print(game.player_position(), game.exit_open(), game.rows())
```

- `solong.mapfile`: `parse_map_text` turns file contents into rows,
  `validate_map` runs every check on rows already in memory, and `load_map`
  does both for a file. Each raises `MapError` when the map is bad.
- `solong.game`: `Game` holds the grid and counters; `move` and `handle_key`
  raise `GameOver` carrying an `Outcome` (`WON`, `LOST` or `QUIT`).
- `solong.enemies`: `move_enemies` steps every enemy once; `Animator.tick`
  advances the animation clock and returns the enemy frame to draw.
- `solong.render`: `window_size` gives the window size for a map, and
  `Renderer.draw` paints a game onto a pygame surface.
- `solong.app`: `run` plays a map in a window and returns the `Outcome`.

## What it does not do

Tiles and sprites are drawn as plain coloured shapes; the game loads no image
files. There is no level editor, no saving of progress and no score keeping
beyond the counters of the current game.

## Running the tests

```
pip install ".[test]"
pytest
```