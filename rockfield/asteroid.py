"""Procedurally generated drifting rocks and their size classes."""
from __future__ import annotations

import enum
import math
import random as _random
from typing import TYPE_CHECKING

from rockfield import vec
from rockfield.config import DEFAULT_CONFIG, GameConfig
from rockfield.shape import Shape
from rockfield.vec import Vec

if TYPE_CHECKING:
    from rockfield.types import Canvas


class AsteroidClass(enum.Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"

    @property
    def size(self) -> float:
        """Multiplier on outline radius and divisor on drift speed."""
        return _SIZES[self]

    def degrade(self) -> AsteroidClass | None:
        """Class a rock breaks down into, or None when it shatters completely."""
        return _DEGRADES[self]

    @classmethod
    def random(cls, rng: _random.Random) -> AsteroidClass:
        return rng.choice(list(cls))


_SIZES = {
    AsteroidClass.SMALL: 0.3,
    AsteroidClass.MEDIUM: 1.0,
    AsteroidClass.LARGE: 2.0,
}

_DEGRADES = {
    AsteroidClass.SMALL: None,
    AsteroidClass.MEDIUM: AsteroidClass.SMALL,
    AsteroidClass.LARGE: AsteroidClass.MEDIUM,
}


def uniform_half_open(rng: _random.Random, low: float, high: float) -> float:
    """Sample from [low, high)."""
    return low + (high - low) * rng.random()


def make_outline(
    rng: _random.Random,
    asteroid_class: AsteroidClass,
    config: GameConfig = DEFAULT_CONFIG,
) -> tuple[Vec, ...]:
    """Irregular outline: angle walks 0..2π so the first and last points share an angle."""
    tuning = config.asteroid
    count = tuning.point_count
    increment = math.tau / (count - 1) if count > 1 else 0.0
    low = tuning.min_radius * asteroid_class.size
    high = tuning.max_radius * asteroid_class.size

    points = []
    angle = 0.0
    for _ in range(count):
        radius = uniform_half_open(rng, low, high)
        points.append((math.sin(angle) * radius, math.cos(angle) * radius))
        angle += increment
    return tuple(points)


class Asteroid:
    def __init__(
        self,
        shape: Shape,
        direction: Vec,
        asteroid_class: AsteroidClass,
        config: GameConfig = DEFAULT_CONFIG,
    ) -> None:
        self.shape = shape
        self.direction = direction
        self.asteroid_class = asteroid_class
        self._config = config

    @classmethod
    def spawn(
        cls,
        position: Vec,
        rng: _random.Random,
        config: GameConfig = DEFAULT_CONFIG,
    ) -> Asteroid:
        asteroid_class = AsteroidClass.random(rng)
        # Not normalized: rocks with longer sampled directions drift faster.
        direction = (rng.uniform(-1.0, 1.0), rng.uniform(-1.0, 1.0))
        points = make_outline(rng, asteroid_class, config)
        return cls(Shape(points, position), direction, asteroid_class, config)

    @property
    def position(self) -> Vec:
        return self.shape.position

    @property
    def velocity(self) -> Vec:
        """Drift per second; larger classes move proportionally slower."""
        return vec.scale(
            vec.scale(self.direction, 1.0 / self.asteroid_class.size),
            self._config.asteroid.speed,
        )

    def update(self, dt: float) -> None:
        arena = self._config.arena
        self.shape.position = vec.add(self.shape.position, vec.scale(self.velocity, dt))
        self.shape.apply_wrap(arena.width, arena.height)

    def render(self, canvas: Canvas) -> None:
        self.shape.render(canvas)
