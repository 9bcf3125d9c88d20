"""Collects per-frame geometry into draw lists and tracks the camera transform."""

from __future__ import annotations

from enum import IntEnum

import numpy as np

from .camera import CameraMatrices, compute_matrices
from .core import AppElement
from .vecmath import vec3

_SMOOTHING = 0.3


class Primitive(IntEnum):
    """Kind of primitive a draw list holds."""

    POINTS = 0
    LINES = 1
    TRIANGLES = 4


class DrawList:
    """Vertices and colours of one primitive kind, rebuilt every frame."""

    def __init__(self, primitive):
        self.primitive = Primitive(primitive)
        self.mvp = np.identity(4)
        self._vertices = []
        self._colors = []

    def append(self, vertex, color):
        """Add one vertex with its colour."""
        self._vertices.append(np.array(vertex, dtype=float))
        self._colors.append(np.array(color, dtype=float))

    def new_frame(self):
        """Drop all vertices."""
        self._vertices.clear()
        self._colors.clear()

    def __len__(self):
        return len(self._vertices)

    @property
    def vertices(self):
        """Vertices as an (n, 3) array."""
        return np.array(self._vertices, dtype=float).reshape(-1, 3)

    @property
    def colors(self):
        """Colours as an (n, 3) array."""
        return np.array(self._colors, dtype=float).reshape(-1, 3)


class Renderer(AppElement):
    """Holds the triangle, line and point lists and the smoothed MVP matrix."""

    def __init__(self, context=None):
        super().__init__(context)
        self.triangles = DrawList(Primitive.TRIANGLES)
        self.lines = DrawList(Primitive.LINES)
        self.points = DrawList(Primitive.POINTS)
        self.camera = CameraMatrices()
        self.clear_color = vec3(0, 0, 0)
        self._previous_mvp = np.identity(4)

    def _lists(self):
        return (self.triangles, self.lines, self.points)

    def new_frame(self):
        """Clear all draw lists and take the background colour from the settings."""
        self.clear_color = np.array(self.context.settings.background_color, dtype=float)
        for draw_list in self._lists():
            draw_list.new_frame()

    def add_triangle(self, a, b, c, color_a, color_b, color_c):
        """Queue a triangle."""
        self.triangles.append(a, color_a)
        self.triangles.append(b, color_b)
        self.triangles.append(c, color_c)

    def add_line(self, a, b, color_a, color_b):
        """Queue a line segment."""
        self.lines.append(a, color_a)
        self.lines.append(b, color_b)

    def add_point(self, point, color):
        """Queue a point."""
        self.points.append(point, color)

    def handle_event(self, event):
        """The renderer ignores events."""

    def update(self, dt):
        """Move the camera from input and blend the new MVP with the previous one."""
        settings = self.context.settings
        camera = compute_matrices(
            settings, self.context.input, settings.is_camera_control_enabled, dt
        )
        if camera is not None:
            self.camera = camera

        previous = self._previous_mvp
        mvp = (_SMOOTHING * previous + self.camera.mvp()) / 2.0
        mvp = mvp + previous * _SMOOTHING
        self._previous_mvp = mvp
        for draw_list in self._lists():
            draw_list.mvp = mvp.copy()

    def draw(self, dt):
        """Return the draw lists in submission order: triangles, lines, points."""
        return self._lists()

    def mvp(self):
        """The current smoothed MVP matrix."""
        return self._previous_mvp.copy()