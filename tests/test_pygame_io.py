"""Tests for the pygame canvas and input adapters."""
from __future__ import annotations

from collections import defaultdict

import pygame
import pytest

from rockfield import Game, InputSnapshot
from rockfield.pygame_io import PygameCanvas, read_input


@pytest.fixture
def surface() -> pygame.Surface:
    surf = pygame.Surface((100, 100))
    surf.fill((0, 0, 0))
    return surf


class TestReadInput:
    def test_nothing_pressed(self) -> None:
        assert read_input(defaultdict(bool)) == InputSnapshot()

    def test_wasd(self) -> None:
        pressed = defaultdict(bool, {pygame.K_a: True, pygame.K_w: True})
        assert read_input(pressed) == InputSnapshot(rotate_left=True, thrust=True)

    def test_arrows_alias_wasd(self) -> None:
        pressed = defaultdict(bool, {pygame.K_RIGHT: True, pygame.K_UP: True})
        assert read_input(pressed) == InputSnapshot(rotate_right=True, thrust=True)

    def test_space_sets_fire(self) -> None:
        pressed = defaultdict(bool, {pygame.K_SPACE: True})
        assert read_input(pressed).fire is True


class TestPygameCanvas:
    @pytest.mark.parametrize("smooth", [True, False])
    def test_line_strip_draws_pixels(self, surface: pygame.Surface, smooth: bool) -> None:
        canvas = PygameCanvas(surface, smooth=smooth)
        canvas.draw_line_strip([(10.0, 50.0), (90.0, 50.0), (10.0, 50.0)], (255, 255, 255))
        assert tuple(surface.get_at((50, 50)))[:3] != (0, 0, 0)

    def test_short_strip_is_skipped(self, surface: pygame.Surface) -> None:
        PygameCanvas(surface).draw_line_strip([(10.0, 10.0)], (255, 255, 255))
        assert tuple(surface.get_at((10, 10)))[:3] == (0, 0, 0)

    def test_text_draws_pixels(self, surface: pygame.Surface) -> None:
        pygame.font.init()
        PygameCanvas(surface).draw_text("Level: 1", (0, 0), 40, (255, 255, 255))
        lit = any(
            tuple(surface.get_at((x, y)))[:3] != (0, 0, 0) for x in range(100) for y in range(40)
        )
        assert lit

    def test_game_renders_onto_surface(self) -> None:
        pygame.font.init()
        target = pygame.Surface((800, 800))
        game = Game(seed=1)
        game.level_up()
        game.render(PygameCanvas(target))
        lit = any(
            tuple(target.get_at((x, y)))[:3] != (0, 0, 0)
            for x in range(385, 416)
            for y in range(375, 416)
        )
        assert lit
