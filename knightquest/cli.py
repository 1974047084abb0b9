"""Command-line entry point: validate a map file and play it."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

import pygame

from .game import Game, GameOver, Key, Outcome
from .mapfile import WRONG_ARGUMENTS, GameMap, MapError, check_map, load_map
from .printf import put_str
from .render import DEFAULT_ASSETS, Renderer

FPS = 12

_KEYS = {
    pygame.K_SPACE: Key.SPACE,
    pygame.K_a: Key.A,
    pygame.K_d: Key.D,
    pygame.K_s: Key.S,
    pygame.K_w: Key.W,
    pygame.K_ESCAPE: Key.ESCAPE,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_UP: Key.UP,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_DOWN: Key.DOWN,
}


def _play(game_map: GameMap) -> int:
    game = Game(game_map, speed=1)
    renderer = Renderer(game_map.width, game_map.height, DEFAULT_ASSETS)
    clock = pygame.time.Clock()
    try:
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    raise GameOver(Outcome.QUIT)
                if event.type == pygame.KEYDOWN and event.key in _KEYS:
                    game.handle_key(_KEYS[event.key])
            if game.tick():
                renderer.draw(game)
            clock.tick(FPS)
    except GameOver as over:
        if over.outcome.value:
            put_str(over.outcome.value, sys.stdout)
    finally:
        renderer.close()
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Load the map named on the command line, check it and run the game."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        put_str(WRONG_ARGUMENTS, sys.stderr)
        return 1
    try:
        game_map = load_map(args[0])
        check_map(game_map)
    except OSError:
        return 0
    except MapError as error:
        put_str(str(error), sys.stderr)
        return 1
    return _play(game_map)


if __name__ == "__main__":
    sys.exit(main())