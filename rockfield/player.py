"""Player ship: rotation and thrust control with clamped, drag-damped force."""
from __future__ import annotations

import random as _random
from typing import TYPE_CHECKING

from rockfield import vec
from rockfield.config import DEFAULT_CONFIG, GameConfig
from rockfield.shape import Shape
from rockfield.vec import Vec

if TYPE_CHECKING:
    from rockfield.types import Canvas, InputSnapshot

HULL: tuple[Vec, ...] = (
    (0.0, -20.0),
    (-10.0, 10.0),
    (0.0, 5.0),
    (10.0, 10.0),
)


class Player:
    def __init__(self, shape: Shape, config: GameConfig = DEFAULT_CONFIG) -> None:
        self.shape = shape
        self.force: Vec = vec.zero()
        self._config = config

    @classmethod
    def spawn(
        cls,
        position: Vec,
        rng: _random.Random | None = None,
        config: GameConfig = DEFAULT_CONFIG,
    ) -> Player:
        # The hull is fixed; rng is accepted to satisfy the Entity contract.
        return cls(Shape(HULL, position), config)

    @property
    def position(self) -> Vec:
        return self.shape.position

    @position.setter
    def position(self, value: Vec) -> None:
        self.shape.position = value

    def steer(self, inputs: InputSnapshot, dt: float) -> None:
        """Apply one tick of rotation, thrust or drag from the key state."""
        tuning = self._config.player
        if inputs.rotate_left:
            self.shape.rotation -= tuning.rotational_speed * dt
        if inputs.rotate_right:
            self.shape.rotation += tuning.rotational_speed * dt
        if inputs.thrust:
            self.force = vec.add(self.force, vec.scale(self.shape.heading(), tuning.speed))
            self.force = vec.clamp_components(self.force, tuning.max_speed)
        else:
            self.force = vec.scale(self.force, tuning.drag)

    def update(self, dt: float) -> None:
        arena = self._config.arena
        self.shape.position = vec.add(self.shape.position, vec.scale(self.force, dt))
        self.shape.apply_wrap(arena.width, arena.height)

    def render(self, canvas: Canvas) -> None:
        self.shape.render(canvas)
