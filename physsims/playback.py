"""Looping playback of a recorded trajectory with linear interpolation."""

from __future__ import annotations

import bisect
import math
from collections.abc import Sequence
from dataclasses import dataclass


def lerp(a: float, b: float, t: float) -> float:
    """Interpolate from a to b, with t clamped to [0, 1]."""
    t = min(max(t, 0.0), 1.0)
    return a + t * (b - a)


@dataclass
class Trajectory:
    """Recorded positions over increasing times, replayed in a loop."""

    times: Sequence[float]
    xs: Sequence[float]
    ys: Sequence[float]
    scale: float = 35.0

    def __post_init__(self) -> None:
        self.times = tuple(float(t) for t in self.times)
        self.xs = tuple(float(x) for x in self.xs)
        self.ys = tuple(float(y) for y in self.ys)
        if not self.times:
            raise ValueError("trajectory has no samples")
        if not len(self.times) == len(self.xs) == len(self.ys):
            raise ValueError("times, xs and ys must have the same length")

    def index_at(self, time: float) -> int:
        """Index of the last sample at or before ``time`` (0 if none)."""
        return max(bisect.bisect_right(self.times, time) - 1, 0)

    def position_at(self, elapsed: float) -> tuple[float, float]:
        """Scaled position after ``elapsed`` seconds of looping playback."""
        times = self.times
        total = times[-1] - times[0]
        offset = math.fmod(elapsed, total) if total != 0.0 else 0.0
        current_time = times[0] + offset

        index = self.index_at(current_time)
        following = min(index + 1, len(times) - 1)
        span = times[following] - times[index]
        fraction = (current_time - times[index]) / span if span > 0.0 else 0.0

        x = lerp(self.xs[index], self.xs[following], fraction) * self.scale
        y = lerp(self.ys[index], self.ys[following], fraction) * self.scale
        return x, y