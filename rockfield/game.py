"""Game orchestrator: level progression, pause timing and frame composition."""
from __future__ import annotations

import logging
import math
import os
import random
from typing import TYPE_CHECKING

from rockfield.asteroid import Asteroid, uniform_half_open
from rockfield.config import DEFAULT_CONFIG, GameConfig
from rockfield.player import Player

if TYPE_CHECKING:
    from rockfield.types import Canvas, InputSnapshot

logger = logging.getLogger(__name__)


def round_half_away(value: float) -> int:
    """Round to nearest integer, ties away from zero (2.5 -> 3, 7.5 -> 8)."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


class Game:
    """Owns the player, the asteroid field and the Running/Paused state machine.

    The driver calls ``update`` then ``render`` once per frame and calls
    ``level_up`` when a new wave is due. Time is sampled from the values
    the driver passes in; nothing here reads a clock.
    """

    def __init__(self, config: GameConfig = DEFAULT_CONFIG, seed: int | None = None) -> None:
        if seed is None:
            seed = int.from_bytes(os.urandom(8))
        self._seed = seed
        self._rng = random.Random(seed)
        self._config = config

        self._player = Player.spawn(config.arena.center, self._rng, config)
        self._asteroids: list[Asteroid] = []
        self._level = 0

        self._paused = False
        self._pause_start: float | None = None
        self._pause_duration = 0.0
        self._show_level = False

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def player(self) -> Player:
        return self._player

    @property
    def asteroids(self) -> list[Asteroid]:
        return self._asteroids

    @property
    def level(self) -> int:
        return self._level

    @property
    def paused(self) -> bool:
        return self._paused

    @property
    def pause_start(self) -> float | None:
        """Clock reading latched on the first paused tick; None when not latched."""
        return self._pause_start

    @property
    def pause_duration(self) -> float:
        return self._pause_duration

    @property
    def show_level(self) -> bool:
        return self._show_level

    def level_up(self) -> None:
        arena = self._config.arena
        tuning = self._config.level

        self._level += 1
        self._player.position = arena.center

        count = round_half_away(self._level * tuning.difficulty)
        self._asteroids = self._spawn_wave(count)

        self._paused = True
        self._pause_duration = tuning.pause_seconds
        self._show_level = True
        logger.info("level %d: spawned %d asteroids", self._level, count)

    def _spawn_wave(self, count: int) -> list[Asteroid]:
        arena = self._config.arena
        closest = self._config.level.closest
        wave: list[Asteroid] = []
        if count <= 0:
            return wave

        increment = math.tau / count
        angle = 0.0
        for _ in range(count):
            radius = uniform_half_open(self._rng, closest, closest * 2.0)
            position = (
                math.sin(angle) * radius + arena.mid_x,
                math.cos(angle) * radius + arena.mid_y,
            )
            wave.append(Asteroid.spawn(position, self._rng, self._config))
            angle += increment
        return wave

    def pause(self, duration: float) -> None:
        """Freeze the simulation for ``duration`` seconds from the next update."""
        if duration < 0:
            raise ValueError("pause duration must be non-negative")
        self._pause_duration = duration
        self._paused = True
        logger.debug("paused for %.2fs", duration)

    def update(self, inputs: InputSnapshot, now: float, dt: float) -> None:
        if self._paused:
            if self._pause_start is None:
                self._pause_start = now
            if now - self._pause_start >= self._pause_duration:
                self._paused = False
                self._show_level = False
                self._pause_start = None
                logger.debug("resumed at %.3f", now)
            return

        self._player.steer(inputs, dt)
        self._player.update(dt)
        for asteroid in self._asteroids:
            asteroid.update(dt)

    def overlay_text(self) -> str:
        return f"Level: {self._level}"

    def overlay_position(self) -> tuple[int, int]:
        """Top-left of the level text. Width is approximated as chars * size / 4."""
        arena = self._config.arena
        font_size = self._config.overlay.font_size
        half_width = (len(self.overlay_text()) * font_size) // 4
        return (int(arena.mid_x) - half_width, int(arena.mid_y) + font_size)

    def render(self, canvas: Canvas) -> None:
        if self._show_level:
            overlay = self._config.overlay
            canvas.draw_text(
                self.overlay_text(), self.overlay_position(), overlay.font_size, overlay.color
            )

        self._player.render(canvas)
        for asteroid in self._asteroids:
            asteroid.render(canvas)
