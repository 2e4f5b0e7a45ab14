"""Sprites of the playfield: the hero ship and the falling aliens."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum

SCENE_WIDTH = 500
SCENE_HEIGHT = 700
SPRITE_SIZE = 70
FALL_STEP = 5
PLAYER_STEP = 10
PLAYER_START_X = 215
PLAYER_START_Y = 600
PLAYER_MAX_X = 430
SPAWN_X_RANGE = 450
SPAWN_Y = -50


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle in scene coordinates."""

    x: float
    y: float
    width: float
    height: float

    def intersects(self, other: Rect) -> bool:
        """Return True when the two rectangles share interior area."""
        return (
            self.x < other.x + other.width
            and other.x < self.x + self.width
            and self.y < other.y + other.height
            and other.y < self.y + self.height
        )


@dataclass
class Player:
    """The hero ship, steered left and right along the bottom of the scene."""

    x: float = PLAYER_START_X
    y: float = PLAYER_START_Y
    moving_left: bool = False
    moving_right: bool = False

    def move(self) -> None:
        """Advance one tick in the directions currently held."""
        if self.moving_left and self.x > 0:
            self.x -= PLAYER_STEP
        if self.moving_right and self.x < PLAYER_MAX_X:
            self.x += PLAYER_STEP

    def rect(self) -> Rect:
        return Rect(self.x, self.y, SPRITE_SIZE, SPRITE_SIZE)


class AlienKind(Enum):
    """The three kinds of falling aliens."""

    GREEN = "green"
    RED = "red"
    BLACK = "black"

    @property
    def image(self) -> str:
        return f"{self.value}.png"

    @property
    def is_lethal(self) -> bool:
        """Whether a hit by this alien takes every remaining life."""
        return self is AlienKind.BLACK


@dataclass
class Alien:
    """A falling alien of a given kind."""

    kind: AlienKind
    x: float
    y: float = SPAWN_Y

    def fall(self) -> None:
        self.y += FALL_STEP

    def rect(self) -> Rect:
        return Rect(self.x, self.y, SPRITE_SIZE, SPRITE_SIZE)

    def collides_with(self, player: Player) -> bool:
        return self.rect().intersects(player.rect())

    @property
    def is_off_screen(self) -> bool:
        return self.y > SCENE_HEIGHT


def spawn_alien(kind: AlienKind, rng: random.Random) -> Alien:
    """Create an alien of ``kind`` at a random column just above the scene."""
    return Alien(kind, rng.randrange(SPAWN_X_RANGE), SPAWN_Y)