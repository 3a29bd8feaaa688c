"""Plotted points and the bounded trail of recent points."""

from __future__ import annotations

import random
import time
from collections import deque
from dataclasses import dataclass

from complex_number import Complex


TRAIL_CAPACITY = 50

PALETTE = (
    "#ff6b6b", "#4ecdc4", "#45b7d1", "#96ceb4",
    "#ffeaa7", "#dda0dd", "#98d8c8",
)


def random_color(rng: random.Random | None = None) -> str:
    """Pick a palette color at random."""
    return (rng or random).choice(PALETTE)


@dataclass(frozen=True)
class PlottedPoint:
    """A complex value placed on the canvas."""

    value: Complex
    color: str
    timestamp: float  # time.monotonic() at insertion, ordering key

    @property
    def real(self) -> float:
        return self.value.real

    @property
    def imag(self) -> float:
        return self.value.imag


class Trail:
    """FIFO of the most recent points; the oldest is evicted when full."""

    def __init__(self, capacity: int = TRAIL_CAPACITY):
        self._points: deque[PlottedPoint] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._points.maxlen

    def append(self, point: PlottedPoint) -> None:
        self._points.append(point)

    def clear(self) -> None:
        self._points.clear()

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self):
        return iter(self._points)


class PointCollection:
    """Ordered plotted points plus the optional trail.

    Points are appended only and removed only by clear().
    """

    def __init__(self, rng: random.Random | None = None,
                 clock=time.monotonic):
        self._points: list[PlottedPoint] = []
        self._trail = Trail()
        self._trail_enabled = False
        self._rng = rng
        self._clock = clock

    @property
    def points(self) -> tuple[PlottedPoint, ...]:
        return tuple(self._points)

    @property
    def trail(self) -> Trail:
        return self._trail

    @property
    def trail_enabled(self) -> bool:
        return self._trail_enabled

    def add(self, value: Complex, color: str | None = None) -> PlottedPoint:
        point = PlottedPoint(
            value=value,
            color=color or random_color(self._rng),
            timestamp=self._clock(),
        )
        self._points.append(point)
        if self._trail_enabled:
            self._trail.append(point)
        return point

    def clear(self) -> None:
        self._points.clear()
        self._trail.clear()

    def set_trail_enabled(self, enabled: bool) -> None:
        """Turn trailing on or off. Either way the trail starts empty."""
        self._trail_enabled = enabled
        self._trail.clear()

    def __len__(self) -> int:
        return len(self._points)
