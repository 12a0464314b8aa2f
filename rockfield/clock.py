"""Frame clock supplying current time and previous frame duration."""
from __future__ import annotations

import time
from typing import Callable

from rockfield.types import FrameTime


class FrameClock:
    """Monotonic clock sampled once per frame.

    ``tick()`` reads the wall clock; ``advance()`` steps by a fixed amount
    and is what headless runs and tests use.
    """

    def __init__(self, source: Callable[[], float] = time.monotonic) -> None:
        self._source = source
        self._origin = source()
        self._now = 0.0
        self._dt = 0.0
        self._frame_number = 0

    @property
    def now(self) -> float:
        return self._now

    @property
    def dt(self) -> float:
        return self._dt

    @property
    def frame_number(self) -> int:
        return self._frame_number

    def tick(self) -> FrameTime:
        now = max(self._source() - self._origin, self._now)
        return self._step(now)

    def advance(self, dt: float) -> FrameTime:
        if dt < 0:
            raise ValueError("dt must be non-negative")
        return self._step(self._now + dt)

    def reading(self) -> FrameTime:
        return FrameTime(now=self._now, dt=self._dt)

    def _step(self, now: float) -> FrameTime:
        self._dt = now - self._now
        self._now = now
        self._frame_number += 1
        return FrameTime(now=self._now, dt=self._dt)
