"""Drawing the game: tile selection rules and a pygame window."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, List, MutableSequence, Optional, Tuple, Union

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .game import BORDER, FRAMES, Facing, Game  # noqa: E402
from .mapfile import COLLECTIBLE, EXIT, WALL  # noqa: E402

TILE = 64
TITLE = "Knight Adventure"
DEFAULT_ASSETS = Path("d")
TEXT_COLOUR = (0, 0, 0)

SpriteRef = Tuple[str, int]
Grid = MutableSequence[MutableSequence[str]]

WALL_TOP: SpriteRef = ("wall", 0)
WALL_MIDDLE: SpriteRef = ("wall", 1)
WALL_SINGLE: SpriteRef = ("wall", 2)
EXIT_CLOSED: SpriteRef = ("exit_closed", 0)
EXIT_OPEN: SpriteRef = ("exit_open", 0)
COLLECTIBLE_SPRITE: SpriteRef = ("collectible", 0)

FLOOR_PLAIN: SpriteRef = ("floor", 0)
FLOOR_TOP_LEFT: SpriteRef = ("floor", 1)
FLOOR_BOTTOM_LEFT: SpriteRef = ("floor", 2)
FLOOR_LEFT: SpriteRef = ("floor", 3)
FLOOR_TOP: SpriteRef = ("floor", 4)
FLOOR_TOP_RIGHT: SpriteRef = ("floor", 5)
FLOOR_BOTTOM_RIGHT: SpriteRef = ("floor", 6)
FLOOR_RIGHT: SpriteRef = ("floor", 7)
FLOOR_BOTTOM: SpriteRef = ("floor", 8)

_WALLISH = frozenset(WALL + BORDER)
_BELOW_OPENS = frozenset("0ECM")
_FLOOR_TILES = frozenset("0CPEM")

_ATTACK_SPRITES = {
    Facing.RIGHT: "attack_right",
    Facing.LEFT: "attack_left",
    Facing.UP: "attack_up",
    Facing.DOWN: "attack_down",
}


def mark_border(grid: Grid) -> Grid:
    """Turn every wall on the outer ring of ``grid`` into a border tile, in place."""
    height = len(grid)
    for i, row in enumerate(grid):
        width = len(row)
        for j, tile in enumerate(row):
            on_edge = i in (0, height - 1) or j in (0, width - 1)
            if on_edge and tile == WALL:
                row[j] = BORDER
    return grid


def wall_tile(grid: Grid, i: int, j: int, all_collected: bool) -> Optional[SpriteRef]:
    """Choose the sprite for the wall, exit or collectible at row ``i``, column ``j``.

    Cells on the outer ring give None: they are drawn as animated border.
    Interior walls whose neighbourhood matches no rule also give None.
    """
    height = len(grid)
    width = len(grid[i])
    if i in (0, height - 1) or j in (0, width - 1):
        return None
    tile = grid[i][j]
    if tile == EXIT:
        return EXIT_OPEN if all_collected else EXIT_CLOSED
    if tile == COLLECTIBLE:
        return COLLECTIBLE_SPRITE
    if tile not in _WALLISH:
        raise ValueError(f"tile {tile!r} at ({i}, {j}) is not a wall, exit or collectible")
    above = grid[i - 1][j]
    below = grid[i + 1][j]
    if above != WALL and below != WALL:
        return WALL_SINGLE
    if below in _BELOW_OPENS or (below == BORDER and i + 1 == height - 1):
        return WALL_TOP
    if above == WALL or below == WALL:
        return WALL_MIDDLE
    return None


def floor_tile(grid: Grid, i: int, j: int) -> SpriteRef:
    """Choose the floor sprite for row ``i``, column ``j`` from its neighbours."""
    above = grid[i - 1][j]
    below = grid[i + 1][j]
    left = grid[i][j - 1]
    right = grid[i][j + 1]
    if below == BORDER and left in _WALLISH:
        return FLOOR_BOTTOM_LEFT
    if above == BORDER and left in _WALLISH:
        return FLOOR_TOP_LEFT
    if right in _WALLISH and above == BORDER:
        return FLOOR_TOP_RIGHT
    if right in _WALLISH and below == BORDER:
        return FLOOR_BOTTOM_RIGHT
    if left in _WALLISH and j <= 2:
        return FLOOR_LEFT
    if above in _WALLISH and i <= 1:
        return FLOOR_TOP
    if below == BORDER:
        return FLOOR_BOTTOM
    if right == BORDER:
        return FLOOR_RIGHT
    return FLOOR_PLAIN


def _series(root: Path, folder: str, stem: str, count: int = FRAMES) -> Tuple[Path, ...]:
    return tuple(root / folder / f"{stem}{n}.xpm" for n in range(1, count + 1))


def sprite_paths(root: Union[str, os.PathLike] = DEFAULT_ASSETS) -> Dict[str, Tuple[Path, ...]]:
    """Map each sprite name to the image files of its frames under ``root``."""
    root = Path(root)
    return {
        "water": tuple(root / "aw_1" / f"W{n}.xpm" for n in range(1, FRAMES + 1)),
        "wall": (root / "Wall2.xpm", root / "Wall3.xpm", root / "Wall4.xpm"),
        "floor": tuple(root / f"Floor{n}.xpm" for n in range(1, 10)),
        "exit_closed": (root / "Exit1.xpm",),
        "exit_open": (root / "Exit2.xpm",),
        "collectible": (root / "Obj1.xpm",),
        "player_right": _series(root, "rp", "rp"),
        "player_left": _series(root, "lp", "lp"),
        "attack_right": _series(root, "pa", "ra"),
        "attack_left": _series(root, "pa", "la"),
        "attack_up": _series(root, "pa", "ua"),
        "attack_down": _series(root, "pa", "da"),
        "enemy_right": _series(root, "pe", "en"),
        "enemy_left": _series(root, "pe", "len"),
        "death": _series(root, "dp", "dp"),
    }


class Renderer:
    """A window that draws the state of a :class:`Game`."""

    def __init__(
        self,
        width: int,
        height: int,
        root: Union[str, os.PathLike] = DEFAULT_ASSETS,
        title: str = TITLE,
    ) -> None:
        pygame.init()
        try:
            self._screen = pygame.display.set_mode((width * TILE, height * TILE))
            pygame.display.set_caption(title)
            self._sprites: Dict[str, List[pygame.Surface]] = {
                name: [pygame.image.load(str(path)).convert_alpha() for path in paths]
                for name, paths in sprite_paths(root).items()
            }
            self._font = pygame.font.Font(None, 24)
        except Exception:
            pygame.quit()
            raise

    def _blit(self, ref: SpriteRef, i: int, j: int) -> None:
        name, index = ref
        self._screen.blit(self._sprites[name][index], (j * TILE, i * TILE))

    def _draw_map(self, game: Game) -> None:
        grid = game.map.rows
        mark_border(grid)
        for i, row in enumerate(grid):
            for j, tile in enumerate(row):
                if tile == BORDER:
                    self._blit(("water", game.frame), i, j)
                elif tile == WALL:
                    ref = wall_tile(grid, i, j, game.all_collected)
                    if ref is not None:
                        self._blit(ref, i, j)
                elif tile in _FLOOR_TILES:
                    self._blit(floor_tile(grid, i, j), i, j)
                    if tile in (COLLECTIBLE, EXIT):
                        ref = wall_tile(grid, i, j, game.all_collected)
                        if ref is not None:
                            self._blit(ref, i, j)

    def _draw_player(self, game: Game) -> None:
        player = game.player
        if player.fight > 0 and player.time < FRAMES:
            ref = (_ATTACK_SPRITES[player.aim], player.time)
        elif game.dead and player.time < FRAMES:
            ref = ("death", player.time)
        elif player.facing is Facing.LEFT:
            ref = ("player_left", game.frame)
        else:
            ref = ("player_right", game.frame)
        self._blit(ref, player.y, player.x)

    def _draw_enemies(self, game: Game) -> None:
        for enemy in game.enemies:
            if enemy.dead:
                ref = ("death", enemy.death_frame)
            elif enemy.direction > 0:
                ref = ("enemy_right", game.frame)
            else:
                ref = ("enemy_left", game.frame)
            self._blit(ref, enemy.y, enemy.x)

    def draw(self, game: Game) -> None:
        """Draw the map, the knight, the enemies and the move counter."""
        self._draw_map(game)
        self._draw_player(game)
        self._draw_enemies(game)
        text = self._font.render(game.moves_text, True, TEXT_COLOUR)
        self._screen.blit(text, (TILE, TILE))
        pygame.display.flip()

    def close(self) -> None:
        """Close the window and release pygame."""
        pygame.quit()