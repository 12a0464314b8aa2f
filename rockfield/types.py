"""Shared type aliases and protocols for the simulation core."""
from __future__ import annotations

import random as _random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, Sequence, TypeVar

Color = tuple[int, int, int]

if TYPE_CHECKING:
    from rockfield.config import GameConfig
    from rockfield.vec import Vec

_E = TypeVar("_E", bound="Entity")


@dataclass(frozen=True, slots=True)
class InputSnapshot:
    """Key-down state for one tick. ``fire`` is read by nothing yet."""

    rotate_left: bool = False
    rotate_right: bool = False
    thrust: bool = False
    fire: bool = False


@dataclass(frozen=True, slots=True)
class FrameTime:
    now: float
    dt: float


class Canvas(Protocol):
    """Render sink consumed by every drawable."""

    def draw_line_strip(self, points: Sequence[Vec], color: Color) -> None: ...

    def draw_text(
        self, text: str, position: tuple[int, int], font_size: int, color: Color
    ) -> None: ...


class Entity(Protocol):
    """Capability shared by every simulated actor."""

    @classmethod
    def spawn(
        cls: type[_E],
        position: Vec,
        rng: _random.Random,
        config: GameConfig,
    ) -> _E: ...

    def render(self, canvas: Canvas) -> None: ...

    def update(self, dt: float) -> None: ...
