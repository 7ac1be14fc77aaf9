"""Data carried by strokes: captured points and generated vertices."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass

from lancer.geometry import Point


@dataclass(frozen=True)
class StrokePoint:
    """A sampled point of a stroke.

    ``stroke_time`` is the capture time in milliseconds; ``r``, ``g``
    and ``b`` are colour components between 0 and 1.
    """

    pos: Point
    pressure: float = 0.0
    thickness: float = 0.0
    stroke_time: float = 0.0
    r: float = 0.0
    g: float = 0.0
    b: float = 0.0

    def with_thickness(self, min_thickness: float, max_thickness: float) -> StrokePoint:
        """Return a copy whose thickness is derived from its pressure."""
        thickness = min_thickness + (max_thickness - min_thickness) * self.pressure
        return dataclasses.replace(self, thickness=thickness)


@dataclass(frozen=True)
class Vertex:
    """A vertex of a triangle strip: position, colour and thickness."""

    x: float
    y: float
    r: float
    g: float
    b: float
    thickness: float