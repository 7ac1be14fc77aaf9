"""The drawing surface: collects strokes and prepares frames for display."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from lancer.color import Color
from lancer.controller import CanvasController, MouseButton
from lancer.geometry import Point
from lancer.renderer import PREVIEW_ALPHA, VertexBuffer, split_strips, stroke_preview_vertices
from lancer.stroke import StrokePoint, Vertex

_LOG = logging.getLogger(__name__)

BACKGROUND = Color(1.0, 1.0, 1.0)
MIN_SIZE = 500

_ADD_LIMIT = 10000
_RELEASE_LIMIT = 5000
_RELEASE_WINDOW = 10


@dataclass(frozen=True)
class Frame:
    """Everything needed to draw one frame of the canvas."""

    background: Color
    strips: list[list[Vertex]] = field(default_factory=list)
    preview: list[Vertex] = field(default_factory=list)
    preview_alpha: float = PREVIEW_ALPHA


def _report_bad(vertices: Iterable[tuple[int, Vertex]], limit: float, label: str) -> None:
    for index, vertex in vertices:
        if (
            not math.isfinite(vertex.x)
            or not math.isfinite(vertex.y)
            or abs(vertex.x) > limit
            or abs(vertex.y) > limit
        ):
            _LOG.warning("%s [%d]: x=%s, y=%s", label, index, vertex.x, vertex.y)


class Canvas:
    """Holds finished strokes as vertex data and the stroke being drawn."""

    def __init__(self, controller: CanvasController | None = None) -> None:
        self.controller = controller if controller is not None else CanvasController()
        self.vertex_buffer = VertexBuffer()
        self._vertices: list[Vertex] = []
        self._buffer_dirty = False

    @property
    def vertices(self) -> tuple[Vertex, ...]:
        """Vertices of all finished strokes, oldest first."""
        return tuple(self._vertices)

    @property
    def buffer_dirty(self) -> bool:
        """Whether the vertex buffer is waiting for an upload."""
        return self._buffer_dirty

    def press(self, pos: Point, button: MouseButton, now: float | None = None) -> None:
        """Forward a button press to the controller."""
        self.controller.press(pos, button, now)

    def move(self, pos: Point, buttons: MouseButton, now: float | None = None) -> None:
        """Forward pointer movement to the controller."""
        self.controller.move(pos, buttons, now)

    def _check_tail(self) -> None:
        start = max(len(self._vertices) - _RELEASE_WINDOW, 0)
        _report_bad(
            enumerate(self._vertices[start:], start), _RELEASE_LIMIT, "PROBLEMATIC VERTEX"
        )

    def release(self, button: MouseButton) -> None:
        """Finish the stroke when the left button is released while drawing.

        Strokes of fewer than two points are discarded.
        """
        if button != MouseButton.LEFT or not self.controller.drawing:
            return
        self.controller.release()
        stroke = self.controller.current_stroke
        if len(stroke) > 1:
            self._check_tail()
            self.add_stroke_to_vertex_buffer(stroke)
            self._check_tail()
            self._buffer_dirty = True
        self.controller.clear_current_stroke()

    def add_stroke_to_vertex_buffer(self, stroke: Sequence[StrokePoint]) -> list[Vertex]:
        """Record a finished stroke and append its vertices; return the new ones."""
        old_size = len(self._vertices)
        new_vertices = self.controller.manager.add_stroke(stroke, self._vertices)
        _report_bad(
            enumerate(self._vertices[old_size:], old_size), _ADD_LIMIT, "INVALID VERTEX"
        )
        return new_vertices

    def update_vertex_buffer(self) -> None:
        """Upload the current vertices to the vertex buffer."""
        self.vertex_buffer.upload(self._vertices)
        self._buffer_dirty = False

    def undo(self) -> bool:
        """Remove the last finished stroke; False when there is none."""
        undone = self.controller.manager.undo(self._vertices)
        self.update_vertex_buffer()
        return undone

    def clear(self) -> None:
        """Remove every stroke, including the one being drawn."""
        self.controller.clear_current_stroke()
        self.controller.manager.clear()
        self._vertices.clear()
        self.controller.manager.clear_vertex_counts()
        self.vertex_buffer.clear()
        self._buffer_dirty = False

    def set_color(self, color: Color) -> None:
        """Set the pen colour for new points."""
        self.controller.color = color

    def paint(self) -> Frame:
        """Produce the next frame, uploading pending vertex data first."""
        if self._buffer_dirty:
            self.update_vertex_buffer()
        strips: list[list[Vertex]] = []
        if self._vertices:
            strips = split_strips(
                self.vertex_buffer.vertices, self.controller.manager.vertex_counts
            )
        preview: list[Vertex] = []
        stroke = self.controller.current_stroke
        if len(stroke) > 1:
            preview = stroke_preview_vertices(stroke, self.controller.color)
        return Frame(BACKGROUND, strips, preview)