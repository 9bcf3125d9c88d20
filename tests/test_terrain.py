import numpy as np

from intercept.core import Context
from intercept.renderer import Renderer
from intercept.settings import Settings
from intercept.terrain import Terrain
from intercept.vecmath import vec3


def draw_terrain(**settings_values):
    ctx = Context(settings=Settings(**settings_values))
    ctx.renderer = Renderer(ctx)
    Terrain(ctx).draw(0.0)
    return ctx.renderer.lines


def test_grid_line_count():
    lines = draw_terrain()
    assert len(lines) == 2404


def test_grid_lies_at_terrain_height():
    lines = draw_terrain(terrain_height=-42.0)
    heights = set(np.asarray(lines.vertices)[:, 1].tolist())
    assert heights == {-42.0}


def test_grid_uses_terrain_color():
    lines = draw_terrain(terrain_color=vec3(0.2, 0.4, 0.6))
    colors = {tuple(c) for c in np.asarray(lines.colors).tolist()}
    assert colors == {(0.2, 0.4, 0.6)}


def test_grid_spans_square():
    vertices = draw_terrain().vertices
    assert np.max(np.abs(vertices[:, 0])) == 3000
    assert np.max(np.abs(vertices[:, 2])) == 3000


def test_each_line_is_axis_aligned():
    vertices = np.asarray(draw_terrain().vertices)
    starts, ends = vertices[0::2], vertices[1::2]
    changed = np.count_nonzero(starts != ends, axis=1)
    assert len(changed) == 1202
    assert set(changed.tolist()) == {1}


def test_no_triangles_or_points():
    ctx = Context(settings=Settings())
    ctx.renderer = Renderer(ctx)
    Terrain(ctx).draw(0.0)
    assert len(ctx.renderer.triangles) == 0
    assert len(ctx.renderer.points) == 0