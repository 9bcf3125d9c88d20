"""Simulation and camera settings with a plain whitespace-separated file format."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path

import numpy as np

from .vecmath import vec3

SETTINGS_FILENAME = "___settings__.txt"


def _v3(x, y, z):
    return field(default_factory=lambda: vec3(x, y, z))


def _iv2(x, y):
    return field(default_factory=lambda: np.array((x, y), dtype=int))


def can_be_loaded(path=SETTINGS_FILENAME):
    """True when the settings file exists and can be opened."""
    try:
        with open(path, encoding="utf-8"):
            return True
    except OSError:
        return False


def _format_scalar(value, template):
    if isinstance(template, (bool, np.bool_)):
        return "1" if value else "0"
    if isinstance(template, (int, np.integer)):
        return str(int(value))
    return f"{float(value):g}"


def _parse_scalar(token, template):
    if isinstance(template, (bool, np.bool_)):
        if token not in ("0", "1"):
            raise ValueError(f"expected 0 or 1 for a flag, got {token!r}")
        return token == "1"
    if isinstance(template, (int, np.integer)):
        return int(token)
    return float(token)


@dataclass(eq=False)
class Settings:
    """All tunable values; the field order is the order of the settings file."""

    window_size: np.ndarray = _iv2(1920, 1080)
    is_camera_control_enabled: bool = False
    camera_angle_in_hp: float = 3.14
    camera_angle_in_vp: float = 0.0
    mouse_speed: float = 0.004
    camera_direction: np.ndarray = _v3(0, 0, -1)
    camera_position: np.ndarray = _v3(0, 0, 3)
    camera_speed: float = 50.0
    camera_field_of_view: float = 45.0
    near_plane: float = 0.1
    far_plane: float = 800.0
    trajectory_advance_period: float = 0.08
    is_paused: bool = True
    trajectory_step_count: int = 300
    trajectory_step: float = 0.02
    gravity: float = -9.78
    angle_computing_epsilon: float = 0.016
    min_random_target_position: np.ndarray = _v3(-100, -100, -100)
    max_random_target_position: np.ndarray = _v3(100, 100, 100)
    min_random_projectile_position: np.ndarray = _v3(-50, -50, -50)
    max_random_projectile_position: np.ndarray = _v3(50, 50, 50)
    min_random_target_radius: float = 1.0
    max_random_target_radius: float = 4.0
    min_random_projectile_radius: float = 2.0
    max_random_projectile_radius: float = 5.0
    min_random_target_initial_angle_in_hp: float = 0.0
    max_random_target_initial_angle_in_hp: float = 3.14 * 2
    min_random_target_initial_angle_in_vp: float = 0.0
    max_random_target_initial_angle_in_vp: float = 3.14 * 2
    min_random_target_initial_speed: float = 1.0
    max_random_target_initial_speed: float = 10.0
    min_random_projectile_initial_speed: float = 50.0
    max_random_projectile_initial_speed: float = 100.0
    min_random_target_color: np.ndarray = _v3(0.3, 0.3, 0.3)
    max_random_target_color: np.ndarray = _v3(0.6, 0.6, 0.6)
    min_random_projectile_color: np.ndarray = _v3(0.7, 0.7, 0.7)
    max_random_projectile_color: np.ndarray = _v3(1, 1, 1)
    min_random_target_acceleration: float = 0.0
    max_random_target_acceleration: float = 5.0
    min_random_projectile_acceleration: float = 2.0
    max_random_projectile_acceleration: float = 20.0
    background_color: np.ndarray = _v3(0.1, 0.1, 0.1)
    terrain_height: float = -100.0
    terrain_color: np.ndarray = _v3(0.3, 0.3, 0.3)
    min_random_obstacle_position: np.ndarray = _v3(-100, -100, -100)
    max_random_obstacle_position: np.ndarray = _v3(100, 100, 100)
    min_random_obstacle_radius: float = 3.0
    max_random_obstacle_radius: float = 15.0
    min_random_obstacle_color: np.ndarray = _v3(0.4, 0.4, 0.4)
    max_random_obstacle_color: np.ndarray = _v3(0.9, 0.9, 0.9)

    def __eq__(self, other):
        if not isinstance(other, Settings):
            return NotImplemented
        return all(
            np.array_equal(getattr(self, f.name), getattr(other, f.name)) for f in fields(self)
        )

    @classmethod
    def loads(cls, text):
        """Parse settings text; values missing at the end keep their defaults.

        Raises ValueError for a token that does not fit its field.
        """
        settings = cls()
        tokens = iter(text.split())
        for f in fields(settings):
            template = getattr(settings, f.name)
            try:
                if isinstance(template, np.ndarray):
                    value = np.array(
                        [_parse_scalar(next(tokens), template[0]) for _ in template],
                        dtype=template.dtype,
                    )
                else:
                    value = _parse_scalar(next(tokens), template)
            except StopIteration:
                break
            setattr(settings, f.name, value)
        return settings

    @classmethod
    def load(cls, path=SETTINGS_FILENAME):
        """Read settings from ``path``."""
        return cls.loads(Path(path).read_text(encoding="utf-8"))

    def dumps(self):
        """Serialise to text, one value per line and a blank line after each entry."""
        template = type(self)()
        parts = []
        for f in fields(self):
            value = getattr(self, f.name)
            default = getattr(template, f.name)
            if isinstance(default, np.ndarray):
                parts.extend(f"{_format_scalar(c, default[0])}\n" for c in value)
            else:
                parts.append(_format_scalar(value, default))
            parts.append("\n")
        return "".join(parts)

    def save(self, path=SETTINGS_FILENAME):
        """Write settings to ``path``."""
        Path(path).write_text(self.dumps(), encoding="utf-8")