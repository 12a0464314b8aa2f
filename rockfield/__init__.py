"""rockfield - A toroidal rock-dodging arcade simulation core."""

from rockfield.asteroid import Asteroid, AsteroidClass
from rockfield.clock import FrameClock
from rockfield.config import (
    DEFAULT_CONFIG,
    ArenaConfig,
    AsteroidTuning,
    GameConfig,
    LevelTuning,
    OverlayTuning,
    PlayerTuning,
)
from rockfield.game import Game
from rockfield.player import Player
from rockfield.shape import Shape
from rockfield.types import Canvas, Entity, FrameTime, InputSnapshot

__all__ = [
    "Game",
    "Player",
    "Asteroid",
    "AsteroidClass",
    "Shape",
    "FrameClock",
    "FrameTime",
    "InputSnapshot",
    "Canvas",
    "Entity",
    "GameConfig",
    "ArenaConfig",
    "PlayerTuning",
    "AsteroidTuning",
    "LevelTuning",
    "OverlayTuning",
    "DEFAULT_CONFIG",
]
