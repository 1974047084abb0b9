"""Game state: the knight, the patrolling enemies and their rules."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional, TextIO

from .mapfile import COLLECTIBLE, ENEMY, EXIT, PLAYER, GameMap
from .printf import printf

FRAMES = 6
ENEMY_STEP_DELAY = 10
DEFAULT_SPEED = 5000
BORDER = "2"
BLOCKING = frozenset("1" + BORDER)


class Key(IntEnum):
    """Key codes the game reacts to."""

    SPACE = 32
    A = 97
    D = 100
    S = 115
    W = 119
    ESCAPE = 65307
    LEFT = 65361
    UP = 65362
    RIGHT = 65363
    DOWN = 65364


class Facing(IntEnum):
    """Directions the knight can face or strike towards."""

    RIGHT = 1
    LEFT = 2
    UP = 3
    DOWN = 4


class Outcome(Enum):
    """How a game ended; the value is the message shown to the player."""

    VICTORY = "VICTORY !!"
    DEATH = "YoU aRe DeAd !"
    QUIT = ""


class GameOver(Exception):
    """Raised when the game ends."""

    def __init__(self, outcome: Outcome) -> None:
        super().__init__(outcome.value or outcome.name.lower())
        self.outcome = outcome


_STRIKE = {
    Facing.RIGHT: (1, 0),
    Facing.LEFT: (-1, 0),
    Facing.UP: (0, -1),
    Facing.DOWN: (0, 1),
}


@dataclass
class Player:
    """The knight: position, facing, strike direction and animation state."""

    x: int
    y: int
    facing: Facing = Facing.RIGHT
    aim: Facing = Facing.RIGHT
    moves: int = 0
    fight: int = 0
    time: int = FRAMES


@dataclass
class Enemy:
    """An enemy patrolling left and right."""

    x: int
    y: int
    direction: int = 1
    dead: bool = False
    death_frame: int = 0
    counter: int = 0

    def step(self, game_map: GameMap) -> None:
        """Advance the patrol; every tenth call moves one tile or turns around."""
        self.counter += 1
        if self.counter != ENEMY_STEP_DELAY:
            return
        self.counter = 0
        ahead = self.x + self.direction
        if game_map[ahead, self.y] not in BLOCKING:
            self.x = ahead
        else:
            self.direction = -self.direction


class Game:
    """The state of a running game and the rules that change it."""

    def __init__(
        self,
        game_map: GameMap,
        speed: int = DEFAULT_SPEED,
        output: Optional[TextIO] = None,
    ) -> None:
        if speed < 1:
            raise ValueError(f"speed must be at least 1, got {speed}")
        start = game_map.find(PLAYER)
        if start is None:
            raise ValueError("the map has no player start")
        self.map = game_map
        self.player = Player(*start)
        self.collectibles = game_map.count(COLLECTIBLE)
        self.enemies = [
            Enemy(x, y)
            for y, row in enumerate(game_map.rows)
            for x, tile in enumerate(row)
            if tile == ENEMY
        ]
        self.dead = False
        self.speed = speed
        self.counter = 0
        self.frame = 0
        self._output = output

    @property
    def all_collected(self) -> bool:
        return self.collectibles == 0

    @property
    def moves_text(self) -> str:
        """The move counter as shown on screen."""
        return str(self.player.moves)

    def move_player(self, dx: int, dy: int) -> bool:
        """Move the knight by one step unless a wall is in the way.

        Returns whether the knight moved. Stepping on the exit raises
        :class:`GameOver` with :attr:`Outcome.VICTORY`.
        """
        player = self.player
        nx, ny = player.x + dx, player.y + dy
        tile = self.map[nx, ny]
        if tile in BLOCKING:
            return False
        player.x, player.y = nx, ny
        player.moves += 1
        printf("Number of movements : %d\n", player.moves, stream=self._output)
        if tile == COLLECTIBLE:
            self.collectibles -= 1
            self.map[nx, ny] = "0"
        if tile == EXIT:
            raise GameOver(Outcome.VICTORY)
        return True

    def attack(self) -> None:
        """Start a strike and kill any enemy on the tile being struck."""
        player = self.player
        player.fight = FRAMES
        player.time = 0
        dx, dy = _STRIKE[player.aim]
        target = (player.x + dx, player.y + dy)
        for enemy in self.enemies:
            if (enemy.x, enemy.y) == target:
                enemy.dead = True

    def handle_key(self, key: int) -> None:
        """React to a key press; unknown keys are ignored."""
        try:
            key = Key(key)
        except ValueError:
            return
        if key is Key.ESCAPE:
            raise GameOver(Outcome.QUIT)
        if self.dead:
            return
        self._movement(key)
        self._fight(key)

    def _turn(self, facing: Facing) -> None:
        self.player.facing = facing
        self.player.aim = facing

    def _movement(self, key: Key) -> None:
        if key is Key.A:
            self.move_player(-1, 0)
            self._turn(Facing.LEFT)
        elif key is Key.W:
            self.move_player(0, -1)
        elif key is Key.D:
            self.move_player(1, 0)
            self._turn(Facing.RIGHT)
        elif key is Key.S:
            self.move_player(0, 1)

    def _fight(self, key: Key) -> None:
        if key is Key.SPACE:
            self.attack()
        elif key is Key.LEFT:
            self._turn(Facing.LEFT)
        elif key is Key.RIGHT:
            self._turn(Facing.RIGHT)
        elif key is Key.UP:
            self.player.aim = Facing.UP
        elif key is Key.DOWN:
            self.player.aim = Facing.DOWN

    def check_death(self) -> bool:
        """Kill the knight if a living enemy shares its tile; return whether it is dead."""
        player = self.player
        for enemy in self.enemies:
            if not enemy.dead and (enemy.x, enemy.y) == (player.x, player.y):
                self.dead = True
                player.time = 0
        return self.dead

    def update_enemies(self) -> None:
        """Move living enemies and advance the death animation of dead ones."""
        for enemy in self.enemies:
            if not enemy.dead:
                enemy.step(self.map)
            elif enemy.death_frame < FRAMES - 1:
                enemy.death_frame += 1

    def advance_player_animation(self) -> None:
        """Advance the strike or death animation by one frame.

        Raises :class:`GameOver` with :attr:`Outcome.DEATH` when the death
        animation has finished.
        """
        player = self.player
        if player.fight > 0 and player.time < FRAMES:
            player.time += 1
            player.fight -= 1
        elif self.dead and player.time < FRAMES:
            player.time += 1
            if player.time >= FRAMES:
                raise GameOver(Outcome.DEATH)

    def tick(self) -> bool:
        """Count one loop iteration; every ``speed`` iterations run a game frame.

        Returns True when a frame was run and the screen should be redrawn.
        """
        self.counter += 1
        if self.counter < self.speed:
            return False
        self.counter = 0
        self.frame = (self.frame + 1) % FRAMES
        if not self.dead:
            self.check_death()
        self.advance_player_animation()
        self.update_enemies()
        return True