"""Immutable tuning and arena configuration."""
from __future__ import annotations

from dataclasses import dataclass, field

from rockfield.types import Color

WHITE: Color = (255, 255, 255)


@dataclass(frozen=True, slots=True)
class ArenaConfig:
    """Size of the toroidal play space."""

    width: float = 800.0
    height: float = 800.0

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"arena dimensions must be positive, got {self.width}x{self.height}"
            )

    @property
    def mid_x(self) -> float:
        return self.width / 2.0

    @property
    def mid_y(self) -> float:
        return self.height / 2.0

    @property
    def center(self) -> tuple[float, float]:
        return (self.mid_x, self.mid_y)


@dataclass(frozen=True, slots=True)
class PlayerTuning:
    speed: float = 5.0
    max_speed: float = 300.0
    rotational_speed: float = 7.5  # radians/second
    drag: float = 0.98  # applied once per tick, not scaled by dt


@dataclass(frozen=True, slots=True)
class AsteroidTuning:
    min_radius: float = 20.0
    max_radius: float = 80.0
    speed: float = 100.0
    point_count: int = 10


@dataclass(frozen=True, slots=True)
class LevelTuning:
    difficulty: float = 2.5
    closest: float = 150.0
    pause_seconds: float = 2.0


@dataclass(frozen=True, slots=True)
class OverlayTuning:
    font_size: int = 80
    color: Color = WHITE


@dataclass(frozen=True, slots=True)
class GameConfig:
    arena: ArenaConfig = field(default_factory=ArenaConfig)
    player: PlayerTuning = field(default_factory=PlayerTuning)
    asteroid: AsteroidTuning = field(default_factory=AsteroidTuning)
    level: LevelTuning = field(default_factory=LevelTuning)
    overlay: OverlayTuning = field(default_factory=OverlayTuning)


DEFAULT_CONFIG = GameConfig()
