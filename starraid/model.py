"""Game state: sprites, invaders, explosions, lock-on targets and the game itself."""

from __future__ import annotations

import time
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any

FOOTER_HEIGHT = 80
START_HEALTH = 3
EXPLOSION_TICKS = 6


@dataclass
class Sprite:
    """An image with a size and a position on the playfield."""

    width: int
    height: int
    x: int = 0
    y: int = 0
    image: Any = field(default=None, repr=False, compare=False)

    def moved(self, x, y):
        """Return a copy of this sprite placed at ``(x, y)``."""
        return replace(self, x=x, y=y)


@dataclass
class SpriteSet:
    """Template sprites for everything drawn in the game."""

    ship: Sprite
    bullet: Sprite
    target: Sprite
    explosion: Sprite
    invader_l1: Sprite
    invader_m1: Sprite
    invader_s1: Sprite


class InvaderType(Enum):
    """The three kinds of invader, from weakest to strongest."""

    L1 = "L1"
    M1 = "M1"
    S1 = "S1"

    def points(self):
        """Score awarded for destroying an invader of this kind."""
        return _POINTS[self]

    def health(self):
        """Number of hits an invader of this kind survives."""
        return _HEALTH[self]


_POINTS = {InvaderType.L1: 100, InvaderType.M1: 200, InvaderType.S1: 400}
_HEALTH = {InvaderType.L1: 3, InvaderType.M1: 6, InvaderType.S1: 12}


@dataclass(eq=False)
class Invader:
    """A descending invader; compared by identity."""

    sprite: Sprite
    kind: InvaderType
    health: int


@dataclass
class Explosion:
    """An explosion shown where an invader was destroyed."""

    x: int
    y: int
    ttl: int = EXPLOSION_TICKS


@dataclass
class Target:
    """A lock-on mark tying a bullet to the invader in its column."""

    sprite: Sprite
    bullet: int
    invader: Invader


@dataclass
class Game:
    """Everything that changes while a game is played."""

    width: int
    height: int
    width_screen: int
    height_screen: int
    sprites: SpriteSet
    ship: Sprite
    health: int = START_HEALTH
    score: int = 0
    hard_level: int = 0
    time_pass: float = 0.0
    time_start: float = 0.0
    bullets: list[Sprite] = field(default_factory=list)
    invaders: list[Invader] = field(default_factory=list)
    explosions: list[Explosion] = field(default_factory=list)
    targets: list[Target] = field(default_factory=list)

    @classmethod
    def create(cls, width, height, sprites):
        """Start a new game on a screen of the given size."""
        if width <= 0 or height <= FOOTER_HEIGHT:
            raise ValueError(
                f"screen {width}x{height} leaves no room for the playfield"
            )
        return cls(
            width=width,
            height=height - FOOTER_HEIGHT,
            width_screen=width,
            height_screen=height,
            sprites=sprites,
            ship=replace(sprites.ship),
            time_start=time.time(),
        )

    def reset(self):
        """Restore health, score and clock and clear invaders and bullets."""
        self.health = START_HEALTH
        self.score = 0
        self.time_pass = 0.0
        self.hard_level = 0
        self.invaders.clear()
        self.bullets.clear()

    def is_over(self):
        """True once the player has no health left."""
        return self.health <= 0