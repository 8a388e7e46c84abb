"""Frame timing with fixed-step lag accounting, timeouts and intervals."""

from __future__ import annotations

import enum
import time
from dataclasses import dataclass
from typing import Callable


class TimingType(enum.Enum):
    DELTA_TIME = enum.auto()
    FIXED_DELTA_TIME = enum.auto()


@dataclass
class _Timer:
    span: float
    remaining: float
    callback: Callable[[], object]


class GameTime:
    """Tracks frame delta time and runs timed callbacks."""

    MS_PER_FRAME = 16
    FIXED_TIME_STEP = 0.005

    def __init__(self, clock: Callable[[], float] = time.perf_counter) -> None:
        self._clock = clock
        self._delta_time = 0.0
        self._timing_type = TimingType.DELTA_TIME
        self._last_time = clock()
        self._lag = 0.0
        self._intervals: list[_Timer] = []
        self._timeouts: list[_Timer] = []

    def tick(self) -> None:
        """Measure the frame delta, accumulate lag and run due timers."""
        now = self._clock()
        self._delta_time = now - self._last_time
        self._last_time = now
        self._lag += self._delta_time

        self._timeouts = self._advance(self._timeouts, repeat=False)
        self._intervals = self._advance(self._intervals, repeat=True)

    def _advance(self, timers: list[_Timer], repeat: bool) -> list[_Timer]:
        for timer in list(timers):
            timer.remaining -= self._delta_time
            if timer.remaining > 0.0:
                continue
            finished = timer.callback()
            if repeat and not finished:
                timer.remaining = timer.span
        current = self._intervals if repeat else self._timeouts
        return [t for t in current if t.remaining > 0.0]

    def fixed_tick(self) -> None:
        self._lag -= self.FIXED_TIME_STEP

    def reset(self) -> None:
        self._last_time = self._clock()
        self._lag = 0.0

    def set_timing_type(self, timing_type: TimingType) -> None:
        self._timing_type = timing_type

    @property
    def delta_time(self) -> float:
        """Frame delta, or the fixed step while fixed timing is selected."""
        if self._timing_type is TimingType.FIXED_DELTA_TIME:
            return self.FIXED_TIME_STEP
        return self._delta_time

    @property
    def fps(self) -> float:
        if self._delta_time == 0.0:
            return float("inf")
        return 1.0 / self._delta_time

    @property
    def is_fixed_tick_required(self) -> bool:
        return self._lag >= self.FIXED_TIME_STEP

    @property
    def sleep_time(self) -> float:
        """Seconds left until the current frame's budget runs out."""
        return self._last_time + self.MS_PER_FRAME / 1000.0 - self._clock()

    def set_interval(self, seconds: float, delegate: Callable[[], bool]) -> None:
        """Call ``delegate`` every ``seconds`` until it returns True."""
        self._intervals.append(_Timer(seconds, seconds, delegate))

    def set_repeating(self, seconds: float, delegate: Callable[[], None]) -> None:
        """Call ``delegate`` every ``seconds`` indefinitely."""

        def run() -> bool:
            delegate()
            return False

        self.set_interval(seconds, run)

    def set_timeout(self, seconds: float, delegate: Callable[[], None]) -> None:
        """Call ``delegate`` once after ``seconds``."""
        self._timeouts.append(_Timer(seconds, seconds, delegate))

    def clear_timeouts(self) -> None:
        self._timeouts.clear()