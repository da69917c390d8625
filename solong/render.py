"""Drawing the game onto a pygame surface."""

from __future__ import annotations

from collections.abc import Sequence

import pygame

from solong.game import Direction, Game
from solong.mapfile import COIN, ENEMY, EXIT, PLAYER, WALL

TILE_SIZE = 64
TOP_MARGIN = 32
STATUS_MARGIN = 32

MISSION_MESSAGE = (
    "hey boy your mission is to collect all coins to be rich and be careful xD"
)
MISSION_MESSAGE_ENEMIES = (
    "hey boy your mission is to collect all coins to be rich and be careful"
)
DONE_MESSAGE = "hhhhhhhhhh ghalik bgha yweli rich hhhh sir sir f7alk"

BACKGROUND_COLOUR = pygame.Color(0, 0, 0)
TEXT_COLOUR = pygame.Color(255, 255, 255)
FLOOR_COLOUR = pygame.Color(196, 170, 120)
WALL_COLOUR = pygame.Color(90, 60, 40)
COIN_COLOUR = pygame.Color(240, 200, 30)
PLAYER_COLOUR = pygame.Color(40, 110, 220)
EYE_COLOUR = pygame.Color(250, 250, 250)
EXIT_OPEN_COLOUR = pygame.Color(40, 180, 70)
EXIT_CLOSED_COLOUR = pygame.Color(150, 30, 30)
ENEMY_COLOURS = (
    pygame.Color(170, 40, 170),
    pygame.Color(200, 60, 200),
    pygame.Color(230, 90, 230),
)

PLAYER_BODY = (36, 44)
PLAYER_EYE_OFFSET = (9, -10)
PLAYER_EYE_RADIUS = 4
COIN_RADIUS = 14
ENEMY_RADIUS = 22
EXIT_DOOR = (36, 52)
FONT_SIZE = 18

_STATUS_COLUMNS = (2, 64, 200, 264)


def window_size(rows: Sequence[str], enemies: bool = False) -> tuple[int, int]:
    """Return the window's (width, height) in pixels for a map."""
    bottom = TILE_SIZE if enemies else STATUS_MARGIN
    return len(rows[0]) * TILE_SIZE, len(rows) * TILE_SIZE + bottom


class Renderer:
    """Draws one game's map, sprites and messages."""

    def __init__(self, game: Game) -> None:
        self.game = game
        self._font: pygame.font.Font | None = None

    def banner(self) -> str:
        """Return the message shown at the top of the window."""
        if self.game.exit_open():
            return DONE_MESSAGE
        return MISSION_MESSAGE_ENEMIES if self.game.enemies else MISSION_MESSAGE

    def status_text(self) -> str:
        """Return the move and coin counters as one line."""
        return f"move:{self.game.moves} coin:{self.game.coins_collected}"

    def draw(self, surface: pygame.Surface, frame: int = 1) -> None:
        """Draw the whole scene; ``frame`` picks the enemy animation frame."""
        if not 1 <= frame <= len(ENEMY_COLOURS):
            raise ValueError(f"no enemy frame {frame}")
        surface.fill(BACKGROUND_COLOUR)
        grid = self.game.grid
        for r, row in enumerate(grid):
            for c, tile in enumerate(row):
                self._draw_ground(surface, self._tile_rect(r, c), tile, frame)
        for r, row in enumerate(grid):
            for c, tile in enumerate(row):
                rect = self._tile_rect(r, c)
                if tile == PLAYER:
                    self._draw_player(surface, rect)
                elif tile == COIN:
                    pygame.draw.circle(surface, COIN_COLOUR, rect.center, COIN_RADIUS)
        for r, row in enumerate(grid):
            for c, tile in enumerate(row):
                if tile == EXIT:
                    self._draw_exit(surface, self._tile_rect(r, c))
        self._draw_text(surface)

    @staticmethod
    def _tile_rect(r: int, c: int) -> pygame.Rect:
        return pygame.Rect(
            c * TILE_SIZE, TOP_MARGIN + r * TILE_SIZE, TILE_SIZE, TILE_SIZE
        )

    @staticmethod
    def _draw_ground(
        surface: pygame.Surface, rect: pygame.Rect, tile: str, frame: int
    ) -> None:
        surface.fill(FLOOR_COLOUR, rect)
        if tile == WALL:
            surface.fill(WALL_COLOUR, rect)
        elif tile == ENEMY:
            pygame.draw.circle(
                surface, ENEMY_COLOURS[frame - 1], rect.center, ENEMY_RADIUS
            )

    def _draw_player(self, surface: pygame.Surface, rect: pygame.Rect) -> None:
        body = pygame.Rect((0, 0), PLAYER_BODY)
        body.center = rect.center
        surface.fill(PLAYER_COLOUR, body)
        dx, dy = PLAYER_EYE_OFFSET
        if self.game.facing is Direction.LEFT:
            dx = -dx
        eye = (rect.centerx + dx, rect.centery + dy)
        pygame.draw.circle(surface, EYE_COLOUR, eye, PLAYER_EYE_RADIUS)

    def _draw_exit(self, surface: pygame.Surface, rect: pygame.Rect) -> None:
        door = pygame.Rect((0, 0), EXIT_DOOR)
        door.center = rect.center
        colour = EXIT_OPEN_COLOUR if self.game.exit_open() else EXIT_CLOSED_COLOUR
        surface.fill(colour, door)

    def _text_font(self) -> pygame.font.Font:
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(None, FONT_SIZE)
        return self._font

    def _draw_text(self, surface: pygame.Surface) -> None:
        font = self._text_font()
        surface.blit(font.render(self.banner(), True, TEXT_COLOUR), (5, 5))
        if not self.game.enemies:
            return
        y = len(self.game.grid) * TILE_SIZE + TOP_MARGIN
        parts = (
            "move:",
            str(self.game.moves),
            "coin:",
            str(self.game.coins_collected),
        )
        for x, text in zip(_STATUS_COLUMNS, parts):
            surface.blit(font.render(text, True, TEXT_COLOUR), (x, y))