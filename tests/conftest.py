from __future__ import annotations

from typing import Any

import pytest


class RecordingCanvas:
    """Canvas that records draw calls instead of drawing."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, Any]] = []

    def draw_line_strip(self, points, color) -> None:
        self.calls.append(("strip", (list(points), color)))

    def draw_text(self, text, position, font_size, color) -> None:
        self.calls.append(("text", (text, position, font_size, color)))

    @property
    def strips(self) -> list[tuple[list, tuple]]:
        return [args for kind, args in self.calls if kind == "strip"]

    @property
    def texts(self) -> list[tuple]:
        return [args for kind, args in self.calls if kind == "text"]


@pytest.fixture
def canvas() -> RecordingCanvas:
    return RecordingCanvas()
