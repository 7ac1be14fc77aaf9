import pytest

from lancer.processor import generate_vertices, interpolate_points
from lancer.stroke import StrokePoint


def _point(x, y, thickness=2.0, color=(0.0, 0.0, 0.0)):
    r, g, b = color
    return StrokePoint(pos=(x, y), pressure=0.5, thickness=thickness, r=r, g=g, b=b)


def test_interpolate_endpoints_and_count():
    points = interpolate_points((1.0, 2.0), (7.0, -4.0), 3)
    assert len(points) == 4
    assert points[0] == pytest.approx((1.0, 2.0))
    assert points[-1] == pytest.approx((7.0, -4.0))


def test_interpolate_even_spacing():
    points = interpolate_points((0.0, 0.0), (9.0, 12.0), 5)
    steps = [(b[0] - a[0], b[1] - a[1]) for a, b in zip(points, points[1:])]
    for step in steps:
        assert step == pytest.approx(steps[0])


def test_interpolate_rejects_zero_segments():
    with pytest.raises(ValueError):
        interpolate_points((0.0, 0.0), (1.0, 1.0), 0)


@pytest.mark.parametrize("stroke", [[], [_point(3.0, 3.0)]])
def test_short_stroke_has_no_vertices(stroke):
    assert generate_vertices(stroke) == []


def test_near_points_give_one_segment():
    vertices = generate_vertices([_point(0.0, 0.0), _point(3.0, 0.0)])
    assert len(vertices) == 2


def test_far_points_are_subdivided():
    start, end = _point(0.0, 0.0), _point(30.0, 0.0)
    vertices = generate_vertices([start, end])
    assert len(vertices) == 6
    expected_centres = interpolate_points(start.pos, end.pos, 3)[:-1]
    for (v1, v2), centre in zip(zip(vertices[::2], vertices[1::2]), expected_centres):
        assert ((v1.x + v2.x) / 2, (v1.y + v2.y) / 2) == pytest.approx(centre)


def test_offset_is_perpendicular_and_matches_thickness():
    v1, v2 = generate_vertices([_point(5.0, 5.0), _point(5.0, 8.0)])
    assert v1.y == pytest.approx(v2.y)
    assert abs(v1.x - v2.x) == pytest.approx(2 * v1.thickness)


def test_thickness_is_capped():
    vertices = generate_vertices([_point(0.0, 0.0, 10.0), _point(2.0, 0.0, 10.0)])
    assert all(v.thickness == pytest.approx(2.0) for v in vertices)


def test_colours_come_from_each_end():
    red, blue = (1.0, 0.0, 0.0), (0.0, 0.0, 1.0)
    v1, v2 = generate_vertices([_point(0.0, 0.0, color=red), _point(2.0, 0.0, color=blue)])
    assert (v1.r, v1.g, v1.b) == red
    assert (v2.r, v2.g, v2.b) == blue


def test_tiny_segments_are_skipped():
    assert generate_vertices([_point(1.0, 1.0), _point(1.05, 1.0)]) == []


def test_accepts_generator():
    stroke = (_point(float(x), 0.0) for x in range(4))
    assert len(generate_vertices(stroke)) == 6