"""Camera control: turns mouse and keyboard input into view and projection matrices."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np

from .core import Key
from .vecmath import look_at_matrix, perspective, polar_to_cartesian, vec3

_HALF_PI = 3.14 / 2.0
_CURSOR_TOLERANCE = 100


@dataclass(eq=False)
class CameraMatrices:
    """View and projection matrices of the camera."""

    view: np.ndarray = field(default_factory=lambda: np.identity(4))
    projection: np.ndarray = field(default_factory=lambda: np.identity(4))

    def mvp(self):
        """Combined projection-view matrix (the model matrix is the identity)."""
        return self.projection @ self.view


def compute_matrices(settings, input_state, control_enabled, dt):
    """Update the camera in ``settings`` from input and return its matrices.

    With control enabled the cursor is recentred; if it had jumped more than
    100 pixels from the centre nothing changes and None is returned.
    """
    win_x, win_y = (float(c) for c in settings.window_size)
    center_x, center_y = win_x / 2.0, win_y / 2.0
    x_pos, y_pos = input_state.cursor

    if control_enabled:
        input_state.cursor = (center_x, center_y)
        if abs(center_x - x_pos) > _CURSOR_TOLERANCE or abs(center_y - y_pos) > _CURSOR_TOLERANCE:
            return None
        settings.camera_angle_in_hp += settings.mouse_speed * (center_x - x_pos)
        settings.camera_angle_in_vp += settings.mouse_speed * (center_y - y_pos)

    settings.camera_angle_in_vp = min(max(settings.camera_angle_in_vp, -_HALF_PI), _HALF_PI)

    yaw = settings.camera_angle_in_hp
    direction = polar_to_cartesian(yaw, settings.camera_angle_in_vp)
    settings.camera_direction = direction
    right = vec3(math.sin(yaw - _HALF_PI), 0.0, math.cos(yaw - _HALF_PI))
    up = np.cross(right, direction)

    if control_enabled:
        step = float(dt) * settings.camera_speed
        moves = ((Key.W, direction), (Key.S, -direction), (Key.D, right), (Key.A, -right))
        position = np.array(settings.camera_position, dtype=float)
        for key, offset in moves:
            if input_state.is_pressed(key):
                position = position + offset * step
        settings.camera_position = position

    position = np.asarray(settings.camera_position, dtype=float)
    projection = perspective(
        math.radians(settings.camera_field_of_view),
        win_x / win_y,
        settings.near_plane,
        settings.far_plane,
    )
    view = look_at_matrix(position, position + direction, up)
    return CameraMatrices(view=view, projection=projection)