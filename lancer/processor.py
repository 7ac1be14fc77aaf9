"""Turning sampled strokes into triangle-strip vertices."""

from __future__ import annotations

import math
from collections.abc import Iterable
from itertools import pairwise

from lancer.geometry import Point, distance, to_opengl_coords
from lancer.stroke import StrokePoint, Vertex

_INTERPOLATE_ABOVE = 5.0
_INTERPOLATION_SEGMENTS = 3
_MIN_SEGMENT_LENGTH = 0.1
_MAX_THICKNESS = 4.0
_THICKNESS_SCALE = 0.5


def interpolate_points(p1: Point, p2: Point, segments: int) -> list[Point]:
    """Return ``segments + 1`` evenly spaced points from ``p1`` to ``p2``."""
    if segments < 1:
        raise ValueError("segments must be at least 1")
    result = []
    for i in range(segments + 1):
        t = i / segments
        result.append((p1[0] * (1 - t) + p2[0] * t, p1[1] * (1 - t) + p2[1] * t))
    return result


def generate_vertices(stroke: Iterable[StrokePoint]) -> list[Vertex]:
    """Build triangle-strip vertices for a stroke.

    Each drawn segment contributes two vertices offset perpendicular to
    its direction; long segments are subdivided first.
    """
    vertices: list[Vertex] = []
    for p1, p2 in pairwise(stroke):
        if distance(p1.pos, p2.pos) > _INTERPOLATE_ABOVE:
            points = interpolate_points(p1.pos, p2.pos, _INTERPOLATION_SEGMENTS)
        else:
            points = [p1.pos, p2.pos]
        last = len(points) - 1

        for j, (current, following) in enumerate(pairwise(points)):
            dir_x = following[0] - current[0]
            dir_y = following[1] - current[1]
            length = math.hypot(dir_x, dir_y)
            if length < _MIN_SEGMENT_LENGTH:
                continue
            dir_x /= length
            dir_y /= length

            t = j / last
            thick = p1.thickness * (1.0 - t) + p2.thickness * t
            thick = min(thick, _MAX_THICKNESS) * _THICKNESS_SCALE
            perp_x = -dir_y * thick
            perp_y = dir_x * thick

            cx, cy = to_opengl_coords(current)
            vertices.append(Vertex(cx + perp_x, cy + perp_y, p1.r, p1.g, p1.b, thick))
            vertices.append(Vertex(cx - perp_x, cy - perp_y, p2.r, p2.g, p2.b, thick))
    return vertices