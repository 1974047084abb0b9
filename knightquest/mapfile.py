"""Loading and validating the tile maps the game is played on."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from os import PathLike
from typing import Iterable, Optional, Sequence, Tuple, Union

from .linereader import LineReader

WALL = "1"
FLOOR = "0"
PLAYER = "P"
EXIT = "E"
COLLECTIBLE = "C"
ENEMY = "M"
TILES = WALL + FLOOR + PLAYER + EXIT + COLLECTIBLE + ENEMY
MIN_WIDTH = 3

WRONG_ARGUMENTS = "You need 1 argument !"
BAD_BORDER = "The border of the map need to be only walls."
INVALID_CHARACTER = "Invalid character in map."
INVALID_SIZE = "Invalid size of map."
BAD_ELEMENTS = "Error map, check 'E', 'P' or 'C'."
IMPOSSIBLE = "The map is impossible."
EMPTY = "Empty Map."

Position = Tuple[int, int]
Rows = Sequence[Sequence[str]]


class MapError(ValueError):
    """Raised when a map cannot be read or fails validation."""


@dataclass
class GameMap:
    """A rectangular grid of tiles, addressed as ``game_map[x, y]``."""

    rows: list[list[str]]

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    @property
    def height(self) -> int:
        return len(self.rows)

    def __getitem__(self, pos: Position) -> str:
        x, y = pos
        return self.rows[y][x]

    def __setitem__(self, pos: Position, tile: str) -> None:
        x, y = pos
        self.rows[y][x] = tile

    def find(self, char: str) -> Optional[Position]:
        """Return the (x, y) of the first ``char`` in reading order, or None."""
        for y, row in enumerate(self.rows):
            for x, tile in enumerate(row):
                if tile == char:
                    return x, y
        return None

    def count(self, char: str) -> int:
        """Number of tiles equal to ``char``."""
        return sum(row.count(char) for row in self.rows)

    def copy(self) -> "GameMap":
        """Return an independent copy of the map."""
        return GameMap([list(row) for row in self.rows])

    def __str__(self) -> str:
        return "\n".join("".join(row) for row in self.rows)


def parse_map(lines: Iterable[str]) -> GameMap:
    """Build a map from text lines, each optionally ending in a newline."""
    rows: list[list[str]] = []
    for line in lines:
        if line.endswith("\n"):
            line = line[:-1]
        if any(tile not in TILES for tile in line):
            raise MapError(INVALID_CHARACTER)
        if len(line) < MIN_WIDTH:
            raise MapError(INVALID_SIZE)
        if rows and len(line) != len(rows[0]):
            raise MapError(INVALID_SIZE)
        rows.append(list(line))
    if not rows:
        raise MapError(EMPTY)
    return GameMap(rows)


def load_map(path: Union[str, "PathLike[str]"]) -> GameMap:
    """Read and parse the map file at ``path``."""
    with open(path, encoding="latin-1", newline="") as handle:
        return parse_map(LineReader(handle))


def has_wall_border(rows: Rows) -> bool:
    """True when the outer ring of the grid is made only of walls."""
    if not rows or not rows[0]:
        return False
    top = rows[0]
    if any(tile != WALL for tile in top):
        return False
    right = len(top) - 1
    for row in rows[1:-1]:
        if len(row) <= right or row[0] != WALL or row[right] != WALL:
            return False
    bottom = rows[-1]
    return len(bottom) > right and all(tile == WALL for tile in bottom[:right + 1])


def count_elements(rows: Rows) -> int:
    """Number of collectibles, or 0 unless there is exactly one player and one exit."""
    counts = Counter(tile for row in rows for tile in row)
    if counts[PLAYER] != 1 or counts[EXIT] != 1:
        return 0
    return counts[COLLECTIBLE]


def _walkable(rows: Rows, x: int, y: int) -> bool:
    return 0 <= y < len(rows) and 0 <= x < len(rows[y]) and rows[y][x] != WALL


def reach_exit(rows: Rows, start: Position, end: Position, collectibles: int) -> bool:
    """Explore from ``start`` and judge whether the map can be completed.

    The exit blocks the way while collectibles remain. The map is judged
    completable when every collectible is picked up or the exit is reached.
    ``rows`` is not modified.
    """
    remaining = collectibles
    found = False
    visited: set[Position] = set()
    stack = [start]
    while stack:
        pos = stack.pop()
        x, y = pos
        if pos == end:
            found = True
        if pos in visited or not _walkable(rows, x, y):
            continue
        if found and remaining == 0:
            break
        if remaining and pos == end:
            continue
        if rows[y][x] == COLLECTIBLE:
            remaining -= 1
        visited.add(pos)
        stack.extend([(x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)])
    return remaining == 0 or found


def check_map(game_map: GameMap) -> None:
    """Raise :class:`MapError` unless the map is playable."""
    rows = game_map.rows
    if not has_wall_border(rows):
        raise MapError(BAD_BORDER)
    collectibles = count_elements(rows)
    if collectibles == 0:
        raise MapError(BAD_ELEMENTS)
    start = game_map.find(PLAYER)
    end = game_map.find(EXIT)
    if start is None or end is None:
        raise MapError(BAD_ELEMENTS)
    if not reach_exit(rows, start, end, collectibles):
        raise MapError(IMPOSSIBLE)