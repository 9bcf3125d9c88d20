"""Ground grid drawn as a square of lines at the terrain height."""

from __future__ import annotations

from .core import AppElement
from .vecmath import vec3

_HALF_SIZE = 3000
_SPACING = 10


class Terrain(AppElement):
    """A flat line grid spanning the scene."""

    def draw(self, dt):
        """Queue grid lines parallel to the x axis, then those parallel to z."""
        settings = self.context.settings
        renderer = self.context.renderer
        height = settings.terrain_height
        color = settings.terrain_color
        steps = range(-_HALF_SIZE, _HALF_SIZE + 1, _SPACING)
        for z in steps:
            renderer.add_line(
                vec3(-_HALF_SIZE, height, z), vec3(_HALF_SIZE, height, z), color, color
            )
        for x in steps:
            renderer.add_line(
                vec3(x, height, -_HALF_SIZE), vec3(x, height, _HALF_SIZE), color, color
            )