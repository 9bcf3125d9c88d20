import numpy as np

from intercept.core import Context
from intercept.renderer import DrawList, Primitive, Renderer
from intercept.settings import Settings
from intercept.vecmath import vec3


def make_renderer():
    ctx = Context(settings=Settings())
    renderer = Renderer(ctx)
    ctx.renderer = renderer
    return renderer


def test_add_triangle_line_point_fill_matching_lists():
    r = make_renderer()
    red, green = vec3(1, 0, 0), vec3(0, 1, 0)
    r.add_triangle(vec3(0, 0, 0), vec3(1, 0, 0), vec3(0, 1, 0), red, green, red)
    r.add_line(vec3(0, 0, 0), vec3(2, 2, 2), green, green)
    r.add_point(vec3(3, 3, 3), red)
    assert len(r.triangles) == 3
    assert len(r.lines) == 2
    assert len(r.points) == 1
    assert np.array_equal(r.lines.vertices[1], [2, 2, 2])
    assert np.array_equal(r.triangles.colors[1], green)


def test_new_frame_clears_lists_and_takes_background():
    r = make_renderer()
    r.add_point(vec3(1, 2, 3), vec3(1, 1, 1))
    r.add_line(vec3(0, 0, 0), vec3(1, 1, 1), vec3(1, 1, 1), vec3(1, 1, 1))
    r.context.settings.background_color = vec3(0.5, 0.25, 0.75)
    r.new_frame()
    assert len(r.points) == 0 and len(r.lines) == 0 and len(r.triangles) == 0
    assert np.array_equal(r.clear_color, [0.5, 0.25, 0.75])


def test_draw_returns_lists_in_order():
    r = make_renderer()
    order = [draw_list.primitive for draw_list in r.draw(0.1)]
    assert order == [Primitive.TRIANGLES, Primitive.LINES, Primitive.POINTS]


def test_empty_draw_list_has_no_rows():
    draw_list = DrawList(Primitive.LINES)
    assert draw_list.vertices.shape == (0, 3)
    assert draw_list.colors.shape == (0, 3)


def test_appended_vertex_is_copied():
    draw_list = DrawList(Primitive.POINTS)
    point = vec3(1, 2, 3)
    draw_list.append(point, vec3(0, 0, 0))
    point[0] = 9.0
    assert draw_list.vertices[0][0] == 1.0


def test_update_shares_mvp_with_lists():
    r = make_renderer()
    r.update(1 / 60)
    mvp = r.mvp()
    assert not np.allclose(mvp, np.identity(4))
    for draw_list in r.draw(0.0):
        assert np.array_equal(draw_list.mvp, mvp)


def test_smoothed_mvp_settles():
    r = make_renderer()
    for _ in range(200):
        r.update(1 / 60)
    before = r.mvp()
    r.update(1 / 60)
    assert np.allclose(before, r.mvp())