"""Enemy movement and the animation clock that drives it."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence

from solong.game import LOSE_MESSAGE, Game, GameOver, Outcome, find_player
from solong.mapfile import ENEMY, FLOOR, PLAYER

FRAME_TICKS = 10
FRAME_COUNT = 3
MOVE_TICK = FRAME_TICKS * FRAME_COUNT + 1

_ENEMY_TARGETS = frozenset({FLOOR, PLAYER})


def enemy_positions(grid: Sequence[Sequence[str]]) -> list[tuple[int, int]]:
    """Return the (row, column) of every enemy, in reading order."""
    return [
        (r, c)
        for r, row in enumerate(grid)
        for c, tile in enumerate(row)
        if tile == ENEMY
    ]


def move_enemies(grid: Sequence[MutableSequence[str]]) -> int:
    """Step every enemy one tile, right if it can, otherwise left.

    An enemy may move onto floor or onto the player. Enemies are taken in
    reading order from where they stood before any of them moved. Returns
    how many enemies moved.
    """
    moved = 0
    for r, c in enemy_positions(grid):
        row = grid[r]
        for target in (c + 1, c - 1):
            if 0 <= target < len(row) and row[target] in _ENEMY_TARGETS:
                row[target] = ENEMY
                row[c] = FLOOR
                moved += 1
                break
    return moved


class Animator:
    """Cycles the enemy animation frames and moves enemies once per cycle."""

    def __init__(self, game: Game) -> None:
        self.game = game
        self.counter = 0
        self.frame = 1

    def tick(self) -> int:
        """Advance the clock one step and return the enemy frame to show.

        Raises GameOver when an enemy has taken the player's tile.
        """
        if find_player(self.game.grid) is None:
            raise GameOver(Outcome.LOST, LOSE_MESSAGE)
        if self.counter <= FRAME_TICKS * FRAME_COUNT:
            self.frame = (max(self.counter, 1) - 1) // FRAME_TICKS + 1
        elif self.counter == MOVE_TICK:
            move_enemies(self.game.grid)
        else:
            self.counter = 0
        self.counter += 1
        return self.frame