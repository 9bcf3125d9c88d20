"""Moving bodies: targets, projectiles that aim at them, and static obstacles."""

from __future__ import annotations

import logging
import math
from enum import IntEnum

import numpy as np

from .core import AppElement
from .model import Model
from .noise import Noise
from .trajectory import Trajectory
from .vecmath import distance, normalize, polar_to_cartesian, vec3

logger = logging.getLogger(__name__)

ROCKET_MODEL_PATH = "./assets/models/rocket.obj"

_FULL_TURN = 2 * math.pi
_MIN_ANGLE_EPSILON = 0.0001
_NO_DISTANCE = 1e6


class DrawingMode(IntEnum):
    """How a body's sphere is drawn."""

    POINTS = 0
    LINES = 1
    TRIANGLES = 2
    NONE = 3


def _angle_steps(delta, limit=_FULL_TURN):
    """Angles from 0 up to ``limit`` accumulated in single precision."""
    step = np.float32(delta)
    angle = np.float32(0.0)
    while angle <= limit:
        yield float(angle)
        angle = np.float32(angle + step)


class Removable:
    """Something that can be flagged for removal from the scene."""

    def __init__(self):
        self._removed = False

    def remove(self):
        """Flag for removal."""
        self._removed = True

    def removed(self):
        """True once flagged for removal."""
        return self._removed


class Body(AppElement):
    """A sphere that follows a precomputed ballistic trajectory."""

    def __init__(self, context=None):
        super().__init__(context)
        self.position = vec3(0, 0, 0)
        self.velocity = vec3(0, 0, 0)
        self.initial_angle_in_hp = 0.0
        self.initial_angle_in_vp = 0.0
        self.initial_speed = 0.0
        self.color = vec3(1, 1, 1)
        self.radius = 10.0
        self.acceleration = 1.0
        self.drawing_mode = DrawingMode.LINES
        self.is_destroyed = False
        self.to_reset_trajectory = True
        self.trajectory = Trajectory(context)

    def reset(self):
        """Recompute the trajectory from the start point and launch parameters."""
        self.is_destroyed = False

        if not self.to_reset_trajectory:
            self.trajectory.reset_index()
            return

        self.velocity = polar_to_cartesian(
            self.initial_angle_in_hp, self.initial_angle_in_vp
        ) * float(self.initial_speed)
        if len(self.trajectory):
            self.position = np.array(self.trajectory[0], dtype=float)
        self.trajectory.reset()
        settings = self.context.settings
        for _ in range(settings.trajectory_step_count):
            self.trajectory.append(self.position)
            self.step(settings.trajectory_step)

    def step(self, dt):
        """Integrate gravity and thrust along the velocity over ``dt`` seconds."""
        dt = float(dt)
        gravity = vec3(0, self.context.settings.gravity, 0)
        thrust = normalize(self.velocity) * self.acceleration
        self.velocity = self.velocity + (gravity + thrust) * dt
        self.position = self.position + self.velocity * dt

    def update(self, dt):
        """Move along the trajectory."""
        if not len(self.trajectory):
            self.trajectory.append(self.position)
        self.trajectory.update(dt)
        if len(self.trajectory):
            self.position = np.array(self.trajectory.position(), dtype=float)

    def draw(self, dt):
        """Queue the trajectory and the sphere in the current drawing mode."""
        if len(self.trajectory):
            self.trajectory.draw(dt)

        try:
            mode = DrawingMode(self.drawing_mode)
        except ValueError:
            raise ValueError(f"invalid drawing mode: {self.drawing_mode!r}") from None

        if mode is DrawingMode.NONE:
            return

        renderer = self.context.renderer
        color = self.color

        def surface(yaw, pitch):
            return self.position + polar_to_cartesian(yaw, pitch) * self.radius

        if mode is DrawingMode.TRIANGLES:
            delta = math.pi / 10
            for yaw in _angle_steps(delta):
                for pitch in _angle_steps(delta):
                    a = surface(yaw, pitch)
                    b = surface(yaw + delta, pitch)
                    c = surface(yaw, pitch + delta)
                    d = surface(yaw + delta, pitch + delta)
                    renderer.add_triangle(a, b, c, color, color, color)
                    renderer.add_triangle(a, b, d, color, color, color)
        elif mode is DrawingMode.POINTS:
            delta = math.pi / 20
            for yaw in _angle_steps(delta):
                for pitch in _angle_steps(delta):
                    renderer.add_point(surface(yaw, pitch), color)
        else:
            delta = math.pi / 20
            for yaw in _angle_steps(delta):
                for pitch in _angle_steps(delta):
                    renderer.add_line(
                        surface(yaw, pitch), surface(yaw + delta, pitch), color, color
                    )


class Obstacle(Body, Removable):
    """A static sphere that projectiles must avoid."""

    def __init__(self, context=None):
        Body.__init__(self, context)
        Removable.__init__(self)

    def reset(self):
        """Obstacles do not move, so there is nothing to reset."""

    def update(self, dt):
        """Obstacles do not move."""

    def draw(self, dt):
        """Queue the obstacle sphere."""
        Body.draw(self, dt)


class Target(Body):
    """A body whose trajectory is perturbed by noise."""

    def __init__(self, context=None):
        super().__init__(context)
        self.drawing_mode = DrawingMode.TRIANGLES
        self.noise = Noise()

    def reset(self):
        """Recompute the trajectory, then mix noise into it."""
        super().reset()
        self.trajectory.mix_noise(self.noise)

    def update(self, dt):
        """Move along the trajectory."""
        super().update(dt)

    def draw(self, dt):
        """Queue the target unless it has been destroyed."""
        if not self.is_destroyed:
            super().draw(dt)


class Projectile(Body):
    """A rocket that picks launch angles to intercept its target."""

    def __init__(self, context=None, model_path=ROCKET_MODEL_PATH):
        super().__init__(context)
        self.to_draw_model = True
        self._no_obstacles_on_the_way = True
        self._model = Model(context)
        if model_path is not None:
            try:
                self._model.load(model_path)
            except (OSError, ValueError, IndexError) as error:
                logger.error("Failed to load %r: %s", str(model_path), error)
        self.position = vec3(0, 0, 0)
        self._model.model_position = self.position.copy()
        self.drawing_mode = DrawingMode.NONE

    def model(self):
        """The mesh drawn for this projectile."""
        return self._model

    def update(self, dt):
        """Move along the trajectory and point the model along it."""
        super().update(dt)
        self._model.model_position = self.position.copy()
        index = self.trajectory.index()
        if index < len(self.trajectory) - 1:
            self._model.model_direction = self.trajectory[index + 1] - self.trajectory[index]

    def draw(self, dt):
        """Queue the projectile and its model unless it has been destroyed."""
        if not self.is_destroyed:
            super().draw(dt)
            if self.to_draw_model:
                self._model.draw(dt)

    def reset_with_target(self, target):
        """Search launch angles that bring the trajectory closest to ``target``.

        The horizontal angle is chosen first with the vertical angle at zero,
        then the vertical angle; angles whose path hits an obstacle are skipped.
        """
        self.initial_angle_in_vp = 0.0
        eps = self.context.settings.angle_computing_epsilon
        if eps < _MIN_ANGLE_EPSILON:
            return

        self.initial_angle_in_hp = self._best_angle(target, eps, "initial_angle_in_hp")
        self.initial_angle_in_vp = self._best_angle(target, eps, "initial_angle_in_vp")
        Body.reset(self)

    def _best_angle(self, target, eps, attribute):
        smallest = _NO_DISTANCE
        best = 0.0
        for angle in _angle_steps(eps):
            setattr(self, attribute, angle)
            Body.reset(self)
            d = self._distance_to_target(target)
            if smallest > d and self._no_obstacles_on_the_way:
                smallest = d
                best = angle
        return best

    def _distance_to_target(self, target):
        self._no_obstacles_on_the_way = True
        d = _NO_DISTANCE
        for i, point in enumerate(self.trajectory):
            d = min(d, distance(target.trajectory[i], point))
            if self._collides_obstacle(point):
                self._no_obstacles_on_the_way = False
        return d

    def _collides_obstacle(self, point):
        scene = self.context.scene
        obstacles = scene.obstacles if scene is not None else ()
        return any(distance(o.position, point) < o.radius + self.radius for o in obstacles)


class Pair(AppElement, Removable):
    """A projectile together with the target it chases."""

    def __init__(self, context, projectile, target):
        AppElement.__init__(self, context)
        Removable.__init__(self)
        self._projectile = projectile
        self._target = target

    def update(self, dt):
        """Move both bodies and destroy them when they touch."""
        self._projectile.update(dt)
        self._target.update(dt)
        reach = self._projectile.radius + self._target.radius
        if distance(self._projectile.position, self._target.position) <= reach:
            self._projectile.is_destroyed = True
            self._target.is_destroyed = True

    def draw(self, dt):
        """Queue both bodies."""
        self._projectile.draw(dt)
        self._target.draw(dt)

    def reset(self):
        """Recompute the target's path, then aim the projectile at it."""
        self._target.reset()
        self._projectile.reset_with_target(self._target)

    def target(self):
        """The target of this pair."""
        return self._target

    def projectile(self):
        """The projectile of this pair."""
        return self._projectile