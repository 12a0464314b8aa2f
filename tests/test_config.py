"""Tests for configuration dataclasses."""
from __future__ import annotations

import dataclasses

import pytest

from rockfield import DEFAULT_CONFIG, ArenaConfig, GameConfig


class TestArenaConfig:
    def test_defaults(self) -> None:
        arena = ArenaConfig()
        assert (arena.width, arena.height) == (800.0, 800.0)
        assert arena.center == (400.0, 400.0)

    def test_mid_points(self) -> None:
        arena = ArenaConfig(width=640.0, height=480.0)
        assert arena.mid_x == 320.0
        assert arena.mid_y == 240.0

    @pytest.mark.parametrize("width, height", [(0.0, 800.0), (800.0, -1.0)])
    def test_non_positive_rejected(self, width: float, height: float) -> None:
        with pytest.raises(ValueError):
            ArenaConfig(width=width, height=height)

    def test_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            ArenaConfig().width = 10.0  # type: ignore[misc]


class TestDefaults:
    def test_tuning_values(self) -> None:
        config = DEFAULT_CONFIG
        assert config.player.speed == 5.0
        assert config.player.max_speed == 300.0
        assert config.player.rotational_speed == 7.5
        assert config.player.drag == 0.98
        assert config.asteroid.min_radius == 20.0
        assert config.asteroid.max_radius == 80.0
        assert config.asteroid.speed == 100.0
        assert config.asteroid.point_count == 10
        assert config.level.difficulty == 2.5
        assert config.level.closest == 150.0
        assert config.level.pause_seconds == 2.0
        assert config.overlay.font_size == 80

    def test_replace_one_section(self) -> None:
        config = dataclasses.replace(DEFAULT_CONFIG, arena=ArenaConfig(100.0, 100.0))
        assert config.arena.width == 100.0
        assert config.player == GameConfig().player
