"""pygame adapters: a Canvas over a Surface and a keyboard input reader."""
from __future__ import annotations

from typing import Sequence

import pygame

from rockfield.types import Color, InputSnapshot
from rockfield.vec import Vec

KEYMAP = {
    "rotate_left": (pygame.K_a, pygame.K_LEFT),
    "rotate_right": (pygame.K_d, pygame.K_RIGHT),
    "thrust": (pygame.K_w, pygame.K_UP),
    "fire": (pygame.K_SPACE,),
}


class PygameCanvas:
    """Draws line strips and text onto a pygame Surface."""

    def __init__(self, surface: pygame.Surface, smooth: bool = True, line_width: int = 2) -> None:
        self.surface = surface
        self.smooth = smooth
        self.line_width = line_width
        self._fonts: dict[int, pygame.font.Font] = {}

    def _font(self, size: int) -> pygame.font.Font:
        font = self._fonts.get(size)
        if font is None:
            font = pygame.font.Font(None, size)
            self._fonts[size] = font
        return font

    def draw_line_strip(self, points: Sequence[Vec], color: Color) -> None:
        if len(points) < 2:
            return
        if self.smooth:
            pygame.draw.aalines(self.surface, color, False, points)
        else:
            pygame.draw.lines(self.surface, color, False, points, self.line_width)

    def draw_text(
        self, text: str, position: tuple[int, int], font_size: int, color: Color
    ) -> None:
        surf = self._font(font_size).render(text, True, color)
        self.surface.blit(surf, position)


def read_input(pressed: Sequence[bool] | None = None) -> InputSnapshot:
    """Build an InputSnapshot from ``pygame.key.get_pressed()`` (or a given key table)."""
    if pressed is None:
        pressed = pygame.key.get_pressed()
    return InputSnapshot(
        **{action: any(pressed[key] for key in keys) for action, keys in KEYMAP.items()}
    )
