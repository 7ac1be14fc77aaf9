"""Small geometric helpers shared by the stroke pipeline."""

from __future__ import annotations

import math

Point = tuple[float, float]

_MAX_SPEED = 1000.0  # pixels per second at which pressure bottoms out
_MIN_PRESSURE = 0.1
_MAX_PRESSURE = 1.0
_UNKNOWN_PRESSURE = 0.5


def distance(p1: Point, p2: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(p1[0] - p2[0], p1[1] - p2[1])


def calculate_pressure(pos_f: Point, pos_i: Point, delta_ms: float, speed_sense: float) -> float:
    """Estimate pen pressure from the speed of travel between two points.

    Faster movement gives lower pressure. The result is clamped to
    the range 0.1 to 1.0; a non-positive time delta yields 0.5.
    """
    if delta_ms <= 0:
        return _UNKNOWN_PRESSURE
    speed = distance(pos_f, pos_i) / (delta_ms / 1000.0)
    pressure = 1.0 - (speed / _MAX_SPEED) * speed_sense
    return min(max(pressure, _MIN_PRESSURE), _MAX_PRESSURE)


def to_opengl_coords(point: Point) -> Point:
    """Map a widget-space point to drawing coordinates.

    The projection is set up so that both spaces coincide.
    """
    return float(point[0]), float(point[1])