import numpy as np
import pytest

from intercept.core import Context
from intercept.model import Model
from intercept.renderer import Renderer
from intercept.settings import Settings
from intercept.vecmath import vec3

SAMPLE = """# a single triangle
o rocket
v 0 0 0 1 0 0
v 1 0 0 0 1 0
v 0 1 0 0 0 1
f 1 2 3
"""


def make_context():
    ctx = Context(settings=Settings())
    ctx.renderer = Renderer(ctx)
    return ctx


def test_loads_builds_faces_and_colors():
    model = Model()
    model.loads(SAMPLE)
    assert np.array_equal(model.vertices, [[0, 0, 0], [1, 0, 0], [0, 1, 0]])
    assert np.array_equal(model.colors, [[1, 0, 0], [0, 1, 0], [0, 0, 1]])


def test_face_order_follows_indices():
    model = Model()
    model.loads(SAMPLE.replace("f 1 2 3", "f 3 1 2"))
    assert np.array_equal(model.vertices[0], [0, 1, 0])


def test_missing_vertex_raises_index_error():
    model = Model()
    with pytest.raises(IndexError):
        model.loads("v 0 0 0 1 1 1\nf 1 2 3\n")


def test_short_vertex_line_raises_value_error():
    with pytest.raises(ValueError):
        Model().loads("v 0 0 0\n")


def test_load_from_file(tmp_path):
    path = tmp_path / "mesh.obj"
    path.write_text(SAMPLE, encoding="utf-8")
    model = Model()
    model.load(path)
    assert model.vertices.shape == (3, 3)


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        Model().load(tmp_path / "absent.obj")


def test_default_model_matrix_is_a_rotation():
    matrix = Model().model_matrix()
    rotation = matrix[:3, :3]
    assert np.allclose(rotation @ rotation.T, np.identity(3))
    assert np.linalg.det(rotation) == pytest.approx(1.0)
    assert np.allclose(matrix[:3, 3], 0.0)


def test_model_matrix_translates_to_position():
    model = Model()
    model.model_position = vec3(4, -2, 7)
    assert np.allclose(model.model_matrix()[:3, 3], [4, -2, 7])


def test_draw_queues_transformed_triangles():
    ctx = make_context()
    model = Model(ctx)
    model.loads(SAMPLE)
    model.model_position = vec3(5, 0, 0)
    model.draw(0.0)
    triangles = ctx.renderer.triangles
    assert len(triangles) == 3
    assert np.allclose(triangles.vertices[0], [5, 0, 0])
    distances = np.linalg.norm(triangles.vertices - [5, 0, 0], axis=1)
    assert np.allclose(distances, np.linalg.norm(model.vertices, axis=1))
    assert np.array_equal(triangles.colors, model.colors)