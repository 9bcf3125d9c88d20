"""Precomputed body paths that are followed step by step over time."""

from __future__ import annotations

from collections.abc import MutableSequence
from itertools import pairwise

import numpy as np

from .core import AppElement
from .vecmath import vec3

_MIN_ADVANCE_PERIOD = 0.001


def _as_point(value):
    return np.array(value, dtype=float)


class Trajectory(AppElement, MutableSequence):
    """A list of points with a cursor that advances while the simulation runs."""

    def __init__(self, context=None, points=()):
        super().__init__(context)
        self.color = vec3(1, 1, 1)
        self._points = [_as_point(p) for p in points]
        self._index = 0
        self._time_since_last_advance = 0.0

    def __getitem__(self, key):
        return self._points[key]

    def __setitem__(self, key, value):
        if isinstance(key, slice):
            self._points[key] = [_as_point(p) for p in value]
        else:
            self._points[key] = _as_point(value)

    def __delitem__(self, key):
        del self._points[key]

    def __len__(self):
        return len(self._points)

    def insert(self, index, value):
        self._points.insert(index, _as_point(value))

    def reset(self):
        """Remove all points and move the cursor back to the start."""
        self._points.clear()
        self._index = 0

    def reset_index(self):
        """Move the cursor back to the start, keeping the points."""
        self._index = 0

    def update(self, dt):
        """Advance the cursor once per elapsed advance period, unless paused."""
        settings = self.context.settings
        period = settings.trajectory_advance_period
        if not settings.is_paused:
            self._time_since_last_advance += dt
        while self._time_since_last_advance >= period and period > _MIN_ADVANCE_PERIOD:
            self._time_since_last_advance -= period
            self._advance()

    def draw(self, dt):
        """Queue the path as connected line segments."""
        renderer = self.context.renderer
        for a, b in pairwise(self._points):
            renderer.add_line(a, b, self.color, self.color)

    def index(self):
        """Position of the cursor."""
        return self._index

    def position(self):
        """Point under the cursor; raises IndexError when there is none."""
        if not 0 <= self._index < len(self._points):
            raise IndexError("trajectory has no point at its cursor")
        return self._points[self._index]

    def mix_noise(self, noise):
        """Offset every point but the first by the noise sampled at that point."""
        self._points[1:] = [p + noise.gen_vec3(p) for p in self._points[1:]]

    def _advance(self):
        self._index = min(self._index + 1, len(self._points) - 1)