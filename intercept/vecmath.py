"""Vector, quaternion and 4x4 matrix helpers built on numpy.

Vectors are numpy arrays of three floats. Matrices are 4x4 numpy arrays
meant to be applied to column vectors (``matrix @ point``).
"""

from __future__ import annotations

import math
import numbers
import random
from dataclasses import dataclass

import numpy as np

_Z_AXIS = (0.0, 0.0, 1.0)
_Y_AXIS = (0.0, 1.0, 0.0)
_X_AXIS = (1.0, 0.0, 0.0)


def vec3(x, y, z):
    """Return a three-component float vector."""
    return np.array((x, y, z), dtype=float)


def normalize(v):
    """Return ``v`` scaled to unit length; a zero vector gives NaNs."""
    v = np.asarray(v, dtype=float)
    with np.errstate(invalid="ignore", divide="ignore"):
        return v / np.linalg.norm(v)


def distance(a, b):
    """Euclidean distance between two points."""
    return float(np.linalg.norm(np.asarray(a, dtype=float) - np.asarray(b, dtype=float)))


def polar_to_cartesian(yaw, pitch):
    """Unit direction for a yaw (horizontal) and pitch (vertical) angle."""
    return normalize(
        vec3(
            math.cos(pitch) * math.sin(yaw),
            math.sin(pitch),
            math.cos(pitch) * math.cos(yaw),
        )
    )


def is_near_zero(value):
    """True when ``abs(value)`` is below 0.001."""
    return abs(value) < 0.001


def random_float(low, high, rng=None):
    """Uniform float between ``low`` and ``high``."""
    source = rng if rng is not None else random
    return low + source.random() * (high - low)


def random_vec3(low, high, rng=None):
    """Vector whose components are drawn between those of ``low`` and ``high``."""
    return vec3(*(random_float(lo, hi, rng) for lo, hi in zip(low, high)))


@dataclass(frozen=True)
class Quat:
    """Quaternion ``w + xi + yj + zk``; the default is the identity rotation."""

    w: float = 1.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    # Keep numpy scalars from swallowing arithmetic with quaternions.
    __array_ufunc__ = None

    @property
    def _vector(self):
        return np.array((self.x, self.y, self.z), dtype=float)

    def __mul__(self, other):
        if isinstance(other, Quat):
            w1, x1, y1, z1 = self.w, self.x, self.y, self.z
            w2, x2, y2, z2 = other.w, other.x, other.y, other.z
            return Quat(
                w1 * w2 - x1 * x2 - y1 * y2 - z1 * z2,
                w1 * x2 + x1 * w2 + y1 * z2 - z1 * y2,
                w1 * y2 - x1 * z2 + y1 * w2 + z1 * x2,
                w1 * z2 + x1 * y2 - y1 * x2 + z1 * w2,
            )
        if isinstance(other, numbers.Real):
            k = float(other)
            return Quat(self.w * k, self.x * k, self.y * k, self.z * k)
        if isinstance(other, (np.ndarray, tuple, list)) and len(other) == 3:
            return self.rotate(other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, numbers.Real):
            return self * other
        return NotImplemented

    def __add__(self, other):
        if not isinstance(other, Quat):
            return NotImplemented
        return Quat(self.w + other.w, self.x + other.x, self.y + other.y, self.z + other.z)

    def __neg__(self):
        return self * -1.0

    def __truediv__(self, other):
        if not isinstance(other, numbers.Real):
            return NotImplemented
        return self * (1.0 / float(other))

    def rotate(self, v):
        """Rotate vector ``v`` by this (unit) quaternion."""
        v = np.asarray(v, dtype=float)
        qv = self._vector
        uv = np.cross(qv, v)
        uuv = np.cross(qv, uv)
        return v + (uv * self.w + uuv) * 2.0

    def dot(self, other):
        """Four-dimensional dot product."""
        return self.w * other.w + self.x * other.x + self.y * other.y + self.z * other.z

    def normalized(self):
        """Unit quaternion in the same direction; identity for a zero quaternion."""
        length = math.sqrt(self.dot(self))
        if length <= 0.0:
            return Quat()
        return self / length

    def to_matrix(self):
        """4x4 rotation matrix equivalent to this quaternion."""
        w, x, y, z = self.w, self.x, self.y, self.z
        return np.array(
            (
                (1 - 2 * (y * y + z * z), 2 * (x * y - w * z), 2 * (x * z + w * y), 0.0),
                (2 * (x * y + w * z), 1 - 2 * (x * x + z * z), 2 * (y * z - w * x), 0.0),
                (2 * (x * z - w * y), 2 * (y * z + w * x), 1 - 2 * (x * x + y * y), 0.0),
                (0.0, 0.0, 0.0, 1.0),
            ),
            dtype=float,
        )

    @classmethod
    def from_euler(cls, angles):
        """Quaternion from pitch, yaw and roll angles in radians."""
        cx, cy, cz = (math.cos(a * 0.5) for a in angles)
        sx, sy, sz = (math.sin(a * 0.5) for a in angles)
        return cls(
            cx * cy * cz + sx * sy * sz,
            sx * cy * cz - cx * sy * sz,
            cx * sy * cz + sx * cy * sz,
            cx * cy * sz - sx * sy * cz,
        )


def angle_axis(angle, axis):
    """Rotation of ``angle`` radians about the unit vector ``axis``."""
    half = angle * 0.5
    s = math.sin(half)
    ax, ay, az = (float(c) for c in axis)
    return Quat(math.cos(half), ax * s, ay * s, az * s)


def rotation_between_vectors(start, dest):
    """Shortest rotation that turns direction ``start`` into ``dest``."""
    start = normalize(start)
    dest = normalize(dest)
    cos_theta = float(np.dot(start, dest))

    if cos_theta < -1 + 0.001:
        axis = np.cross(_Z_AXIS, start)
        if float(np.dot(axis, axis)) < 0.01:
            axis = np.cross(_X_AXIS, start)
        return angle_axis(math.pi, normalize(axis))

    axis = np.cross(start, dest)
    s = math.sqrt((1 + cos_theta) * 2)
    inv_s = 1 / s
    return Quat(s * 0.5, *(float(c) * inv_s for c in axis))


def look_at(direction, desired_up):
    """Rotation taking +Z to ``direction`` while keeping +Y near ``desired_up``."""
    direction = np.asarray(direction, dtype=float)
    if float(np.dot(direction, direction)) < 0.0001:
        return Quat()

    right = np.cross(direction, desired_up)
    desired_up = np.cross(right, direction)

    rot1 = rotation_between_vectors(_Z_AXIS, direction)
    new_up = rot1.rotate(_Y_AXIS)
    rot2 = rotation_between_vectors(new_up, desired_up)
    return rot2 * rot1


def rotate_towards(q1, q2, max_angle):
    """Turn ``q1`` towards ``q2`` by at most ``max_angle``."""
    if max_angle < 0.001:
        return q1

    cos_theta = q1.dot(q2)
    if cos_theta > 0.9999:
        return q2

    if cos_theta < 0:
        q1 = q1 * -1.0
        cos_theta = -cos_theta

    angle = math.acos(cos_theta)
    if angle < max_angle:
        return q2

    t = max_angle / angle
    angle = max_angle
    result = (math.sin((1.0 - t) * angle) * q1 + math.sin(t * angle) * q2) / math.sin(angle)
    return result.normalized()


def translation_matrix(offset):
    """4x4 matrix translating points by ``offset``."""
    matrix = np.identity(4)
    matrix[:3, 3] = np.asarray(offset, dtype=float)
    return matrix


def scaling_matrix(factors):
    """4x4 matrix scaling each axis by the matching factor."""
    return np.diag((*(float(f) for f in factors), 1.0))


def perspective(fov_y, aspect, near, far):
    """Right-handed perspective projection mapping depth to [-1, 1]."""
    f = 1.0 / math.tan(fov_y / 2.0)
    matrix = np.zeros((4, 4))
    matrix[0, 0] = f / aspect
    matrix[1, 1] = f
    matrix[2, 2] = -(far + near) / (far - near)
    matrix[2, 3] = -(2.0 * far * near) / (far - near)
    matrix[3, 2] = -1.0
    return matrix


def look_at_matrix(eye, center, up):
    """Right-handed view matrix looking from ``eye`` towards ``center``."""
    eye = np.asarray(eye, dtype=float)
    forward = normalize(np.asarray(center, dtype=float) - eye)
    side = normalize(np.cross(forward, up))
    true_up = np.cross(side, forward)
    matrix = np.identity(4)
    matrix[0, :3] = side
    matrix[1, :3] = true_up
    matrix[2, :3] = -forward
    matrix[0, 3] = -float(np.dot(side, eye))
    matrix[1, 3] = -float(np.dot(true_up, eye))
    matrix[2, 3] = float(np.dot(forward, eye))
    return matrix