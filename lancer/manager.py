"""Bookkeeping for completed strokes and their vertex data."""

from __future__ import annotations

from collections.abc import Sequence

from lancer.processor import generate_vertices
from lancer.stroke import StrokePoint, Vertex


class StrokeManager:
    """Keeps the finished strokes and how many vertices each produced.

    The vertex list handed to :meth:`add_stroke` and :meth:`undo` is the
    shared buffer owned by the canvas; it is updated in place.
    """

    def __init__(self) -> None:
        self._strokes: list[tuple[StrokePoint, ...]] = []
        self._vertex_counts: list[int] = []

    @property
    def strokes(self) -> tuple[tuple[StrokePoint, ...], ...]:
        """The completed strokes, oldest first."""
        return tuple(self._strokes)

    @property
    def vertex_counts(self) -> list[int]:
        """Number of vertices generated for each stroke, in stroke order."""
        return list(self._vertex_counts)

    def add_stroke(self, stroke: Sequence[StrokePoint], vertices: list[Vertex]) -> list[Vertex]:
        """Record a stroke, append its vertices to ``vertices`` and return them."""
        self._strokes.append(tuple(stroke))
        new_vertices = generate_vertices(stroke)
        vertices.extend(new_vertices)
        self._vertex_counts.append(len(new_vertices))
        return new_vertices

    def undo(self, vertices: list[Vertex]) -> bool:
        """Drop the last stroke and rebuild ``vertices`` from the rest.

        Returns False when there was nothing to undo.
        """
        if not self._strokes:
            return False
        self._strokes.pop()
        vertices.clear()
        self._vertex_counts.clear()
        for stroke in self._strokes:
            new_vertices = generate_vertices(stroke)
            vertices.extend(new_vertices)
            self._vertex_counts.append(len(new_vertices))
        return True

    def clear(self) -> None:
        """Forget every stroke."""
        self._strokes.clear()

    def clear_vertex_counts(self) -> None:
        """Forget the per-stroke vertex counts."""
        self._vertex_counts.clear()

    def append_stroke(self, stroke: Sequence[StrokePoint]) -> None:
        """Record a stroke without generating vertices for it."""
        self._strokes.append(tuple(stroke))