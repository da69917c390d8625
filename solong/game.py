"""Game state and player movement on a validated map."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from enum import Enum
from typing import TextIO

from solong.mapfile import COIN, ENEMY, EXIT, FLOOR, PLAYER, WALL

WIN_MESSAGE = "YOU WIN THE GAME <3"
WIN_MESSAGE_ENEMIES = "YOU WIN THE GAME"
LOSE_MESSAGE = "YOU LOSE THE GAME"
QUIT_MESSAGE = "BAY BAY"

KEY_ESCAPE = 53


class Direction(Enum):
    """A step on the grid as a (row, column) offset."""

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)


class Outcome(Enum):
    """How a game came to an end."""

    WON = "won"
    LOST = "lost"
    QUIT = "quit"


class GameOver(Exception):
    """Raised when the game ends; carries the outcome and the message shown."""

    def __init__(self, outcome: Outcome, message: str) -> None:
        super().__init__(message)
        self.outcome = outcome
        self.message = message


_KEY_DIRECTIONS = {
    13: Direction.UP,
    126: Direction.UP,
    0: Direction.LEFT,
    123: Direction.LEFT,
    1: Direction.DOWN,
    125: Direction.DOWN,
    2: Direction.RIGHT,
    124: Direction.RIGHT,
}


def direction_for_key(key: int) -> Direction | None:
    """Return the direction bound to a key code, or None if it has none."""
    return _KEY_DIRECTIONS.get(key)


def find_player(grid: Sequence[Sequence[str]]) -> tuple[int, int] | None:
    """Return the (row, column) of the first player tile, or None."""
    for r, row in enumerate(grid):
        for c, tile in enumerate(row):
            if tile == PLAYER:
                return r, c
    return None


class Game:
    """The state of one game: the grid, counters and the player's facing."""

    def __init__(
        self,
        rows: Sequence[str],
        enemies: bool = False,
        out: TextIO | None = None,
    ) -> None:
        self.grid: list[list[str]] = [list(row) for row in rows]
        self.enemies = enemies
        self.out = out
        self.moves = 0
        self.coins_total = sum(row.count(COIN) for row in self.grid)
        self.coins_collected = 0
        self.facing = Direction.RIGHT

    def player_position(self) -> tuple[int, int] | None:
        """Return where the player stands, or None if it has been removed."""
        return find_player(self.grid)

    def exit_open(self) -> bool:
        """True once every coin has been collected."""
        return self.coins_collected == self.coins_total

    def rows(self) -> list[str]:
        """Return the current grid as a list of strings."""
        return ["".join(row) for row in self.grid]

    def _tile(self, r: int, c: int) -> str:
        if 0 <= r < len(self.grid) and 0 <= c < len(self.grid[r]):
            return self.grid[r][c]
        return WALL

    def _report_moves(self) -> None:
        stream = self.out if self.out is not None else sys.stdout
        stream.write(f"move :{self.moves}\n")

    def move(self, direction: Direction) -> bool:
        """Try to step the player one tile; return whether it moved.

        Raises GameOver when the step wins or loses the game.
        """
        position = self.player_position()
        if position is None:
            raise GameOver(Outcome.LOST, LOSE_MESSAGE)
        r, c = position
        dr, dc = direction.value
        tr, tc = r + dr, c + dc
        target = self._tile(tr, tc)

        passable = {FLOOR, COIN, EXIT}
        if self.enemies:
            passable.add(ENEMY)

        moved = False
        if target in passable:
            if target == COIN:
                self.coins_collected += 1
            if target == EXIT and self.exit_open():
                message = WIN_MESSAGE_ENEMIES if self.enemies else WIN_MESSAGE
                raise GameOver(Outcome.WON, message)
            if target == ENEMY:
                raise GameOver(Outcome.LOST, LOSE_MESSAGE)
            if self.enemies or target in (FLOOR, COIN):
                self.grid[tr][tc] = PLAYER
                self.grid[r][c] = FLOOR
                self.moves += 1
                if not self.enemies:
                    self._report_moves()
                moved = True

        if direction in (Direction.LEFT, Direction.RIGHT):
            self.facing = direction
        return moved

    def handle_key(self, key: int) -> bool:
        """Act on a key code; escape ends the game, direction keys move."""
        direction = direction_for_key(key)
        moved = self.move(direction) if direction is not None else False
        if key == KEY_ESCAPE:
            raise GameOver(Outcome.QUIT, QUIT_MESSAGE)
        return moved