"""Vertex preparation for drawing strokes as triangle strips."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator, Sequence
from itertools import pairwise

from lancer.color import Color
from lancer.stroke import StrokePoint, Vertex

PREVIEW_ALPHA = 0.8
VERTEX_SIZE = 6 * 4  # six 32-bit floats per vertex

_MIN_SEGMENT_LENGTH = 0.1
_MAX_PREVIEW_THICKNESS = 3.0
_THICKNESS_SCALE = 0.5


class VertexBuffer:
    """Holds the vertex data uploaded for drawing."""

    def __init__(self) -> None:
        self._vertices: tuple[Vertex, ...] = ()

    @property
    def vertices(self) -> tuple[Vertex, ...]:
        """The vertices currently held."""
        return self._vertices

    @property
    def nbytes(self) -> int:
        """Size of the held data in bytes."""
        return len(self._vertices) * VERTEX_SIZE

    def __len__(self) -> int:
        return len(self._vertices)

    def upload(self, vertices: Iterable[Vertex]) -> None:
        """Replace the held data with ``vertices``."""
        self._vertices = tuple(vertices)

    def clear(self) -> None:
        """Release all held data."""
        self._vertices = ()


def stroke_preview_vertices(stroke: Sequence[StrokePoint], color: Color) -> list[Vertex]:
    """Vertices for drawing an in-progress stroke in a single colour.

    Segments shorter than 0.1 and vertices that are not finite are skipped.
    """
    vertices: list[Vertex] = []
    for p1, p2 in pairwise(stroke):
        cx, cy = p1.pos
        dx = p2.pos[0] - cx
        dy = p2.pos[1] - cy
        length = math.hypot(dx, dy)
        if not length >= _MIN_SEGMENT_LENGTH:
            continue
        if not (math.isfinite(cx) and math.isfinite(cy)):
            continue
        dx /= length
        dy /= length

        thick = min(p1.thickness, _MAX_PREVIEW_THICKNESS) * _THICKNESS_SCALE
        perp_x = -dy * thick
        perp_y = dx * thick

        v1 = Vertex(cx + perp_x, cy + perp_y, color.red, color.green, color.blue, thick)
        v2 = Vertex(cx - perp_x, cy - perp_y, color.red, color.green, color.blue, thick)
        if all(math.isfinite(c) for c in (v1.x, v1.y, v2.x, v2.y)):
            vertices.append(v1)
            vertices.append(v2)
    return vertices


def strip_ranges(counts: Iterable[int]) -> Iterator[tuple[int, int]]:
    """Yield ``(start, count)`` for each stroke that has vertices."""
    start = 0
    for count in counts:
        if count > 0:
            yield start, count
            start += count


def split_strips(vertices: Sequence[Vertex], counts: Iterable[int]) -> list[list[Vertex]]:
    """Cut the shared vertex list into one triangle strip per stroke."""
    if not vertices:
        return []
    return [list(vertices[start:start + count]) for start, count in strip_ranges(counts)]