"""Reading and validating map files.

A map is a rectangle of tiles: ``1`` wall, ``0`` floor, ``C`` coin,
``E`` exit, ``P`` player and, when enemies are enabled, ``M`` enemy.
"""

from __future__ import annotations

import os
from collections import Counter, deque
from collections.abc import Iterator, Sequence

WALL = "1"
FLOOR = "0"
COIN = "C"
EXIT = "E"
PLAYER = "P"
ENEMY = "M"

MAP_SUFFIX = ".ber"

_BASE_TILES = frozenset({WALL, FLOOR, EXIT, COIN, PLAYER})
_REQUIRED_TILES = (WALL, FLOOR, EXIT, PLAYER, COIN)


class MapError(Exception):
    """Raised when a map file cannot be read or describes an invalid map."""


def check_extension(path: str | os.PathLike[str]) -> None:
    """Reject a path whose text from the first dot on is not a prefix of ``.ber``."""
    name = os.fspath(path)
    dot = name.find(".")
    suffix = name[dot:] if dot >= 0 else ""
    if not MAP_SUFFIX.startswith(suffix):
        raise MapError("the extension is not allowed")


def parse_map_text(text: str) -> list[str]:
    """Split map text into rows, rejecting empty text and stray newlines."""
    if not text:
        raise MapError("map is empty")
    if text.startswith("\n") or text.endswith("\n") or "\n\n" in text:
        raise MapError("map is not valid: found an extra newline")
    return text.split("\n")


def check_rectangular(rows: Sequence[str]) -> int:
    """Ensure every row has the width of the first; return that width."""
    if not rows:
        raise MapError("map is empty")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise MapError("the length of each line is not the same")
    return width


def check_closed(rows: Sequence[str]) -> None:
    """Ensure the map is rectangular and surrounded by walls."""
    check_rectangular(rows)
    last = len(rows) - 1
    for index, row in enumerate(rows):
        if index in (0, last):
            closed = all(tile == WALL for tile in row)
        else:
            closed = row[0] == WALL and row[-1] == WALL
        if not closed:
            raise MapError("the map must be closed by walls")


def check_characters(rows: Sequence[str], allow_enemies: bool = False) -> None:
    """Ensure every required tile appears and no unknown tile does."""
    present = set().union(*rows)
    missing = [tile for tile in _REQUIRED_TILES if tile not in present]
    if missing:
        raise MapError(f"missing characters: {''.join(missing)}")
    allowed = _BASE_TILES | {ENEMY} if allow_enemies else _BASE_TILES
    extra = present - allowed
    if extra:
        raise MapError(
            f"the map contains extra characters: {''.join(sorted(extra))}"
        )


def count_sprites(rows: Sequence[str]) -> dict[str, int]:
    """Count exits, players and coins; exactly one exit and player, a coin at least."""
    counts = Counter("".join(rows))
    result = {EXIT: counts[EXIT], PLAYER: counts[PLAYER], COIN: counts[COIN]}
    if result[EXIT] != 1 or result[PLAYER] != 1 or result[COIN] < 1:
        raise MapError("the map must contain the exact number of sprites")
    return result


def _neighbours(
    rows: Sequence[str], row: int, col: int
) -> Iterator[tuple[int, int]]:
    for dr, dc in ((0, -1), (0, 1), (1, 0), (-1, 0)):
        r, c = row + dr, col + dc
        if 0 <= r < len(rows) and 0 <= c < len(rows[r]):
            yield r, c


def check_reachable(rows: Sequence[str], allow_enemies: bool = False) -> None:
    """Ensure the player can collect every coin and then step onto the exit.

    The player walks over floor and coins (and enemies, when enabled) but
    never through the exit.
    """
    passable = {FLOOR, COIN, ENEMY} if allow_enemies else {FLOOR, COIN}
    reached = {
        (r, c)
        for r, row in enumerate(rows)
        for c, tile in enumerate(row)
        if tile == PLAYER
    }
    pending = deque(reached)
    while pending:
        cell = pending.popleft()
        for r, c in _neighbours(rows, *cell):
            if (r, c) not in reached and rows[r][c] in passable:
                reached.add((r, c))
                pending.append((r, c))

    for r, row in enumerate(rows):
        for c, tile in enumerate(row):
            if tile == COIN and (r, c) not in reached:
                raise MapError("the map is not valid: a coin cannot be reached")
            if tile == EXIT and not any(
                cell in reached for cell in _neighbours(rows, r, c)
            ):
                raise MapError("the map is not valid: the exit cannot be reached")


def validate_map(rows: Sequence[str], allow_enemies: bool = False) -> list[str]:
    """Run every map check in order and return the rows as a list."""
    check_closed(rows)
    check_characters(rows, allow_enemies)
    count_sprites(rows)
    check_reachable(rows, allow_enemies)
    return list(rows)


def load_map(
    path: str | os.PathLike[str], allow_enemies: bool = False
) -> list[str]:
    """Open, read and validate a map file, returning its rows."""
    try:
        handle = open(path, "rb")
    except OSError as exc:
        raise MapError("cannot open the file") from exc
    with handle:
        check_extension(path)
        try:
            data = handle.read()
        except OSError as exc:
            raise MapError("cannot read the file") from exc
    rows = parse_map_text(data.decode("latin-1"))
    return validate_map(rows, allow_enemies)