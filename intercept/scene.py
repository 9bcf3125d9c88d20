"""The scene: pairs of projectiles and targets, obstacles, the ground and the editor."""

from __future__ import annotations

import numpy as np

from .core import Action, AppElement, Key
from .editor import Editor
from .terrain import Terrain
from .vecmath import normalize

_MOUSE_PICKING_PERIOD = 0.2
_PICKING_STEPS = 10000


class Scene(AppElement):
    """Owns every body in the simulation and reacts to user input."""

    def __init__(self, context, editor=None):
        super().__init__(context)
        self.pairs = []
        self.obstacles = []
        self._time_since_last_mouse_picking = 0.0
        self.terrain = Terrain(context)
        context.terrain = self.terrain
        context.scene = self
        self.editor = editor if editor is not None else Editor(context)

    def handle_event(self, event):
        """Escape toggles camera control, Enter resets, Space pauses; scroll zooms."""
        settings = self.context.settings
        if event.action == Action.PRESS:
            if event.key == Key.ESCAPE:
                settings.is_camera_control_enabled = not settings.is_camera_control_enabled
            elif event.key == Key.ENTER:
                self.reset()
            elif event.key == Key.SPACE:
                settings.is_paused = not settings.is_paused

        if settings.is_camera_control_enabled:
            settings.camera_field_of_view -= event.scroll_y

    def update(self, dt):
        """Handle mouse picking, then move every pair and obstacle."""
        settings = self.context.settings
        self._time_since_last_mouse_picking += dt

        if self.context.input.left_button_pressed and settings.is_camera_control_enabled:
            pair_index = self.pick_pair()
            obstacle_index = self.pick_obstacle()
            if pair_index is not None and self._time_since_last_mouse_picking > _MOUSE_PICKING_PERIOD:
                self._time_since_last_mouse_picking = 0.0
                self.editor.toggle_pair_editor(pair_index)
            if (
                obstacle_index is not None
                and self._time_since_last_mouse_picking > _MOUSE_PICKING_PERIOD
            ):
                self._time_since_last_mouse_picking = 0.0
                self.editor.toggle_obstacle_editor(obstacle_index)

        for pair in self.pairs:
            pair.update(dt)
        for obstacle in self.obstacles:
            obstacle.update(dt)

    def draw(self, dt):
        """Queue the ground, pairs and obstacles, then drop one flagged item of each kind."""
        self.terrain.draw(dt)
        for pair in self.pairs:
            pair.draw(dt)
        for obstacle in self.obstacles:
            obstacle.draw(dt)
        self.editor.draw(dt)
        self.check_for_removal()

    def reset(self):
        """Recompute every trajectory and re-aim every projectile."""
        for pair in self.pairs:
            pair.reset()
        for obstacle in self.obstacles:
            obstacle.reset()

    def _first_touched(self, groups):
        """Index of the group first hit by a ray from the camera, or None."""
        if not groups:
            return None
        settings = self.context.settings
        origin = np.asarray(settings.camera_position, dtype=float)
        direction = normalize(settings.camera_direction)
        ray = origin + np.arange(_PICKING_STEPS)[:, None] * direction
        best_step = None
        best_index = None
        for index, bodies in enumerate(groups):
            for body in bodies:
                distances = np.linalg.norm(ray - np.asarray(body.position, dtype=float), axis=1)
                hits = np.flatnonzero(distances <= body.radius)
                if hits.size and (best_step is None or hits[0] < best_step):
                    best_step = int(hits[0])
                    best_index = index
        return best_index

    def pick_pair(self):
        """Index of the pair the camera looks at, or None."""
        return self._first_touched([(p.target(), p.projectile()) for p in self.pairs])

    def pick_obstacle(self):
        """Index of the obstacle the camera looks at, or None."""
        return self._first_touched([(o,) for o in self.obstacles])

    def check_for_removal(self):
        """Drop the first pair and the first obstacle flagged for removal."""
        pair_index = next((i for i, p in enumerate(self.pairs) if p.removed()), None)
        obstacle_index = next((i for i, o in enumerate(self.obstacles) if o.removed()), None)
        if pair_index is not None:
            del self.pairs[pair_index]
        if obstacle_index is not None:
            del self.obstacles[obstacle_index]