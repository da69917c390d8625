"""The command that opens a map and plays it in a window."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence

import pygame

from solong.enemies import Animator
from solong.game import Game, GameOver, Outcome
from solong.mapfile import MapError, load_map
from solong.render import Renderer, window_size

WINDOW_TITLE = "so_long"
FRAMES_PER_SECOND = 60
ENEMIES_FLAG = "--enemies"

_PYGAME_KEYS = {
    pygame.K_w: 13,
    pygame.K_UP: 126,
    pygame.K_a: 0,
    pygame.K_LEFT: 123,
    pygame.K_s: 1,
    pygame.K_DOWN: 125,
    pygame.K_d: 2,
    pygame.K_RIGHT: 124,
    pygame.K_ESCAPE: 53,
}


def key_from_pygame(key: int) -> int | None:
    """Translate a pygame key constant to the game's key code, or None."""
    return _PYGAME_KEYS.get(key)


def run(path: str | os.PathLike[str], enemies: bool = False) -> Outcome:
    """Load a map and play it until the game ends or the window is closed.

    Raises MapError when the map cannot be loaded. The closing message of a
    finished game is written to standard output.
    """
    rows = load_map(path, allow_enemies=enemies)
    game = Game(rows, enemies)
    animator = Animator(game) if enemies else None
    renderer = Renderer(game)

    pygame.init()
    try:
        surface = pygame.display.set_mode(window_size(rows, enemies))
        pygame.display.set_caption(WINDOW_TITLE)
        clock = pygame.time.Clock()
        frame = 1
        while True:
            try:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        return Outcome.QUIT
                    if event.type == pygame.KEYDOWN:
                        code = key_from_pygame(event.key)
                        if code is not None:
                            game.handle_key(code)
                if animator is not None:
                    frame = animator.tick()
                renderer.draw(surface, frame)
                pygame.display.flip()
            except GameOver as over:
                sys.stdout.write(over.message)
                sys.stdout.flush()
                return over.outcome
            clock.tick(FRAMES_PER_SECOND)
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Play the map named on the command line; ``--enemies`` adds enemies."""
    args = list(sys.argv[1:] if argv is None else argv)
    enemies = ENEMIES_FLAG in args
    paths = [arg for arg in args if arg != ENEMIES_FLAG]
    if len(paths) != 1:
        return 0
    try:
        run(paths[0], enemies)
    except MapError as exc:
        sys.stdout.write(f"!!ERROR!!\n{exc}")
        sys.stdout.flush()
        return 1
    return 1