"""Turns pointer input into stroke points."""

from __future__ import annotations

import enum
import time

from lancer.color import Color
from lancer.geometry import Point, calculate_pressure, distance
from lancer.manager import StrokeManager
from lancer.stroke import StrokePoint

START_PRESSURE = 0.2
_FIRST_MOVE_PRESSURE = 0.25
_MIN_MOVE_DISTANCE = 1.5
_PREVIOUS_WEIGHT = 0.25
_NEW_WEIGHT = 0.75


class MouseButton(enum.Flag):
    """Pointer buttons; combine with ``|`` for the set of held buttons."""

    NONE = 0
    LEFT = enum.auto()
    RIGHT = enum.auto()
    MIDDLE = enum.auto()


def _now_ms() -> float:
    return time.monotonic() * 1000.0


class CanvasController:
    """Collects the points of the stroke currently being drawn."""

    def __init__(
        self,
        min_thickness: float = 1.0,
        max_thickness: float = 5.0,
        speed_sensitivity: float = 0.75,
    ) -> None:
        self.min_thickness = min_thickness
        self.max_thickness = max_thickness
        self.speed_sensitivity = speed_sensitivity
        self.color = Color(0.0, 0.0, 0.0)
        self.manager = StrokeManager()
        self._drawing = False
        self._stroke: list[StrokePoint] = []

    @property
    def drawing(self) -> bool:
        """Whether a stroke is in progress."""
        return self._drawing

    @property
    def current_stroke(self) -> tuple[StrokePoint, ...]:
        """Points of the stroke in progress."""
        return tuple(self._stroke)

    def _point(self, pos: Point, pressure: float, now: float) -> StrokePoint:
        point = StrokePoint(
            pos=(float(pos[0]), float(pos[1])),
            pressure=pressure,
            stroke_time=now,
            r=self.color.red,
            g=self.color.green,
            b=self.color.blue,
        )
        return point.with_thickness(self.min_thickness, self.max_thickness)

    def press(self, pos: Point, button: MouseButton, now: float | None = None) -> None:
        """Start a new stroke when the left button goes down."""
        if button != MouseButton.LEFT:
            return
        self._drawing = True
        self._stroke.clear()
        self._stroke.append(self._point(pos, START_PRESSURE, _now_ms() if now is None else now))

    def move(self, pos: Point, buttons: MouseButton, now: float | None = None) -> None:
        """Extend the stroke while the left button is held.

        Movements shorter than 1.5 pixels are ignored. Pressure follows
        speed and is smoothed against the previous point.
        """
        if not (self._drawing and MouseButton.LEFT in buttons):
            return
        if self._stroke and distance(pos, self._stroke[-1].pos) < _MIN_MOVE_DISTANCE:
            return
        now = _now_ms() if now is None else now
        if self._stroke:
            last = self._stroke[-1]
            pressure = calculate_pressure(
                pos, last.pos, now - last.stroke_time, self.speed_sensitivity
            )
            pressure = last.pressure * _PREVIOUS_WEIGHT + pressure * _NEW_WEIGHT
        else:
            pressure = _FIRST_MOVE_PRESSURE
        self._stroke.append(self._point(pos, pressure, now))

    def release(self) -> None:
        """Stop drawing; the collected points stay until cleared."""
        self._drawing = False

    def clear_current_stroke(self) -> None:
        """Discard the points of the stroke in progress."""
        self._stroke.clear()

    def append_to_current_stroke(self, point: StrokePoint) -> None:
        """Add a ready-made point to the stroke in progress."""
        self._stroke.append(point)