"""Transformable closed polygon with wrap-around position."""
from __future__ import annotations

import math
from typing import TYPE_CHECKING, Sequence

from rockfield import vec
from rockfield.config import WHITE
from rockfield.types import Color
from rockfield.vec import Vec

if TYPE_CHECKING:
    from rockfield.types import Canvas


class Shape:
    """Fixed set of local-space points placed in the world by position, rotation and scale.

    The point set cannot change after construction. Rotation is in radians
    and unbounded.
    """

    __slots__ = ("_points", "position", "rotation", "scale", "color")

    def __init__(
        self,
        points: Sequence[Vec],
        position: Vec,
        rotation: float = 0.0,
        scale: float = 1.0,
        color: Color = WHITE,
    ) -> None:
        if len(points) < 1:
            raise ValueError("shape needs at least one point")
        self._points: tuple[Vec, ...] = tuple(
            (float(x), float(y)) for x, y in points
        )
        self.position = position
        self.rotation = rotation
        self.scale = scale
        self.color = color

    @property
    def points(self) -> tuple[Vec, ...]:
        return self._points

    def __len__(self) -> int:
        return len(self._points)

    def outline_points(self) -> list[Vec]:
        """World-space outline, closed by repeating the first point at the end."""
        outline = [
            vec.add(vec.scale(vec.rotate(p, self.rotation), self.scale), self.position)
            for p in self._points
        ]
        outline.append(outline[0])
        return outline

    def render(self, canvas: Canvas) -> None:
        canvas.draw_line_strip(self.outline_points(), self.color)

    def heading(self) -> Vec:
        """Unit forward vector. Rotation 0 faces up (toward decreasing y)."""
        return (math.sin(self.rotation), -math.cos(self.rotation))

    def apply_wrap(self, width: float, height: float) -> None:
        # Half-open: a coordinate sitting exactly on 0 or the far edge stays put.
        x, y = self.position
        if x < 0.0:
            x += width
        elif x > width:
            x -= width
        if y < 0.0:
            y += height
        elif y > height:
            y -= height
        self.position = (x, y)
