"""Seeded three-dimensional gradient noise used to perturb trajectories."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field

import numpy as np

from .vecmath import vec3

_PERMUTATION = list(range(256))
random.Random(0x5EED).shuffle(_PERMUTATION)
_PERMUTATION = tuple(_PERMUTATION)


def _fade(t):
    return t * t * t * (t * (t * 6 - 15) + 10)


def _lerp(t, a, b):
    return a + t * (b - a)


def _grad(hash_value, x, y, z):
    h = hash_value & 15
    u = x if h < 8 else y
    if h < 4:
        v = y
    elif h in (12, 14):
        v = x
    else:
        v = z
    return (u if h & 1 == 0 else -u) + (v if h & 2 == 0 else -v)


def perlin_noise3(x, y, z, seed=0):
    """Gradient noise at a point, roughly in [-1, 1], zero on integer lattice points.

    The lattice repeats every 256 units on each axis; ``seed`` picks one of
    256 variations.
    """
    x, y, z = float(x), float(y), float(z)
    ix, iy, iz = math.floor(x), math.floor(y), math.floor(z)
    fx, fy, fz = x - ix, y - iy, z - iz
    u, v, w = _fade(fx), _fade(fy), _fade(fz)
    offset = seed & 255
    perm = _PERMUTATION

    def corner(dx, dy, dz):
        h = perm[(perm[(perm[(ix + dx + offset) & 255] + iy + dy) & 255] + iz + dz) & 255]
        return _grad(h, fx - dx, fy - dy, fz - dz)

    near_y0 = _lerp(u, corner(0, 0, 0), corner(1, 0, 0))
    near_y1 = _lerp(u, corner(0, 1, 0), corner(1, 1, 0))
    far_y0 = _lerp(u, corner(0, 0, 1), corner(1, 0, 1))
    far_y1 = _lerp(u, corner(0, 1, 1), corner(1, 1, 1))
    return _lerp(w, _lerp(v, near_y0, near_y1), _lerp(v, far_y0, far_y1))


@dataclass(eq=False)
class Noise:
    """Noise source with per-axis strength (``mix``) and sampling ``frequency``."""

    mix: np.ndarray = field(default_factory=lambda: vec3(1, 1, 1))
    frequency: np.ndarray = field(default_factory=lambda: vec3(0.1, 0.1, 0.1))
    seed: int = 0

    def gen_float(self, v):
        """Noise value at point ``v``."""
        return perlin_noise3(v[0], v[1], v[2], self.seed)

    def gen_vec3(self, v):
        """Offset vector for point ``v``, one independent noise sample per axis."""
        v = np.asarray(v, dtype=float) * self.frequency
        return self.mix * vec3(
            self.gen_float((-999.0, 123.0, v[0] + 50000.0)),
            self.gen_float((1000.0 - v[1], -222.0, 4554.0)),
            self.gen_float((5000.0, v[2], 12312.0)),
        )