"""Triangle meshes read from a simple .obj variant with per-vertex colours."""

from __future__ import annotations

import math

import numpy as np

from .core import AppElement
from .vecmath import Quat, look_at, scaling_matrix, translation_matrix, vec3


class Model(AppElement):
    """A coloured triangle mesh placed with a position, direction and scaling.

    Vertex lines read ``v x y z r g b``; face lines read ``f a b c`` with
    1-based vertex indices. Other lines are ignored.
    """

    def __init__(self, context=None):
        super().__init__(context)
        self.model_position = vec3(0, 0, 0)
        self.model_direction = vec3(0, 0, 0)
        self.model_scaling = vec3(1, 1, 1)
        self._vertices = []
        self._colors = []

    @property
    def vertices(self):
        """Triangle corners as an (n, 3) array, three rows per face."""
        return np.array(self._vertices, dtype=float).reshape(-1, 3)

    @property
    def colors(self):
        """Colours of the triangle corners as an (n, 3) array."""
        return np.array(self._colors, dtype=float).reshape(-1, 3)

    def load(self, path):
        """Read a model file; raises OSError when it cannot be opened."""
        with open(path, encoding="utf-8") as source:
            self.loads(source.read())

    def loads(self, text):
        """Add the faces described by ``text`` to the model.

        Raises ValueError for malformed lines and IndexError for faces that
        refer to vertices not defined before them.
        """
        vertices, colors = [], []
        for line in text.splitlines():
            tokens = line.split()
            if not tokens:
                continue
            head, *rest = tokens
            if head == "v":
                if len(rest) < 6:
                    raise ValueError(f"vertex line needs six numbers: {line!r}")
                values = [float(t) for t in rest[:6]]
                vertices.append(vec3(*values[:3]))
                colors.append(vec3(*values[3:]))
            elif head == "f":
                if len(rest) < 3:
                    raise ValueError(f"face line needs three indices: {line!r}")
                for token in rest[:3]:
                    index = int(token)
                    if not 1 <= index <= len(vertices):
                        raise IndexError(f"face refers to missing vertex {index}")
                    self._vertices.append(vertices[index - 1])
                    self._colors.append(colors[index - 1])

    def model_matrix(self):
        """Matrix placing the mesh: translation, then rotation, then scaling."""
        rotation = (
            look_at(self.model_direction, (0.0, 1.0, 0.0)).to_matrix()
            @ Quat.from_euler((math.radians(-270.0), 0.0, 0.0)).to_matrix()
        )
        return (
            translation_matrix(self.model_position)
            @ rotation
            @ scaling_matrix(self.model_scaling)
        )

    def draw(self, dt):
        """Queue every face, transformed by the model matrix, as a triangle."""
        points = self.vertices
        homogeneous = np.hstack((points, np.ones((len(points), 1))))
        transformed = (self.model_matrix() @ homogeneous.T).T[:, :3]
        renderer = self.context.renderer
        corners = iter(zip(transformed, self._colors))
        for (a, color_a), (b, color_b), (c, color_c) in zip(corners, corners, corners):
            renderer.add_triangle(a, b, c, color_a, color_b, color_c)