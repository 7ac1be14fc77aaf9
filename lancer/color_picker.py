"""A hue wheel with a saturation/value triangle for choosing colours."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterator
from typing import NamedTuple

from lancer.color import Color
from lancer.geometry import Point, distance

MIN_SIZE = 200
_OUTER_FACTOR = 0.35
_INNER_FACTOR = 0.275
_TRIANGLE_SCALE = 0.9
_SIN_60 = 0.866


class WheelLine(NamedTuple):
    """One radial line of the hue wheel."""

    start: Point
    end: Point
    color: Color


def _clamp(value: float) -> float:
    return min(max(value, 0.0), 1.0)


def _round(value: float) -> int:
    return math.floor(value + 0.5)


class HSVColorPicker:
    """State and geometry of a hue wheel surrounding an S/V triangle.

    The triangle's top vertex is white, the bottom-left black and the
    bottom-right the pure hue. Callables in ``listeners`` receive the new
    colour whenever user input changes it.
    """

    def __init__(self, width: int = MIN_SIZE, height: int = MIN_SIZE) -> None:
        self.listeners: list[Callable[[Color], None]] = []
        self._width = 0
        self._height = 0
        self._center: Point = (0.0, 0.0)
        self._outer_radius = 0.0
        self._inner_radius = 0.0
        self._triangle: tuple[Point, Point, Point] = ((0.0, 0.0),) * 3
        self._dragging_wheel = False
        self._dragging_triangle = False
        self.set_current_color(Color(0.0, 0.0, 0.0))
        self.resize(width, height)

    @property
    def color(self) -> Color:
        """The currently selected colour."""
        return self._color

    @property
    def hue(self) -> float:
        """Current hue in degrees."""
        return self._hue

    @property
    def saturation(self) -> float:
        """Current saturation between 0 and 1."""
        return self._saturation

    @property
    def value(self) -> float:
        """Current value between 0 and 1."""
        return self._value

    @property
    def size(self) -> tuple[int, int]:
        """Width and height of the picker."""
        return self._width, self._height

    @property
    def center(self) -> Point:
        """Centre of the wheel."""
        return self._center

    @property
    def inner_radius(self) -> float:
        """Inner radius of the hue ring."""
        return self._inner_radius

    @property
    def outer_radius(self) -> float:
        """Outer radius of the hue ring."""
        return self._outer_radius

    @property
    def triangle(self) -> tuple[Point, Point, Point]:
        """Triangle vertices: white (top), black (bottom-left), pure hue (bottom-right)."""
        return self._triangle

    @property
    def dragging_wheel(self) -> bool:
        """Whether a drag on the hue ring is in progress."""
        return self._dragging_wheel

    @property
    def dragging_triangle(self) -> bool:
        """Whether a drag inside the triangle is in progress."""
        return self._dragging_triangle

    @property
    def sv_indicator(self) -> Point:
        """Where the current saturation and value sit in the triangle."""
        return self.sv_point_in_triangle(self._saturation, self._value)

    def resize(self, width: int, height: int) -> None:
        """Set the picker's size and recompute its geometry."""
        if width < 0 or height < 0:
            raise ValueError(f"size must not be negative, got {width}x{height}")
        self._width = width
        self._height = height
        size = min(width, height)
        self._center = (0.5 * width, 0.5 * height)
        self._outer_radius = size * _OUTER_FACTOR
        self._inner_radius = size * _INNER_FACTOR

        r = self._inner_radius * _TRIANGLE_SCALE
        cx, cy = self._center
        self._triangle = (
            (cx, cy - r),
            (cx - r * _SIN_60, cy + r * 0.5),
            (cx + r * _SIN_60, cy + r * 0.5),
        )

    def set_current_color(self, color: Color) -> None:
        """Select ``color`` without notifying listeners."""
        self._color = color
        self._hue, self._saturation, self._value = color.to_hsv()

    def press(self, point: Point) -> None:
        """Begin a drag on the ring or in the triangle, whichever is hit."""
        if self.is_point_in_wheel(point) and not self.is_point_in_triangle(point):
            self._dragging_wheel = True
            self._update_from_wheel(point)
        elif self.is_point_in_triangle(point):
            self._dragging_triangle = True
            self._update_from_triangle(point)

    def move(self, point: Point) -> None:
        """Continue a drag while the pointer stays in the dragged area."""
        if self._dragging_wheel and self.is_point_in_wheel(point):
            self._update_from_wheel(point)
        elif self._dragging_triangle and self.is_point_in_triangle(point):
            self._update_from_triangle(point)

    def release(self) -> None:
        """End any drag."""
        self._dragging_wheel = False
        self._dragging_triangle = False

    def angle_from_point(self, point: Point) -> float:
        """Hue angle in degrees for ``point``, with 0 straight up, clockwise."""
        dx = point[0] - self._center[0]
        dy = point[1] - self._center[1]
        angle = math.degrees(math.atan2(dy, dx)) + 90.0
        if angle < 0:
            angle += 360.0
        return angle

    def sv_point_in_triangle(self, saturation: float, value: float) -> Point:
        """Position in the triangle for a saturation and value."""
        white, black, pure = self._triangle
        u = saturation
        w = value - saturation
        v = 1.0 - u - w
        return (
            white[0] * w + black[0] * v + pure[0] * u,
            white[1] * w + black[1] * v + pure[1] * u,
        )

    def _barycentric(self, point: Point) -> tuple[float, float] | None:
        white, black, pure = self._triangle
        v0 = (pure[0] - white[0], pure[1] - white[1])
        v1 = (black[0] - white[0], black[1] - white[1])
        v2 = (point[0] - white[0], point[1] - white[1])
        dot00 = v0[0] * v0[0] + v0[1] * v0[1]
        dot01 = v0[0] * v1[0] + v0[1] * v1[1]
        dot02 = v0[0] * v2[0] + v0[1] * v2[1]
        dot11 = v1[0] * v1[0] + v1[1] * v1[1]
        dot12 = v1[0] * v2[0] + v1[1] * v2[1]
        denom = dot00 * dot11 - dot01 * dot01
        if denom == 0:
            return None
        u = (dot11 * dot02 - dot01 * dot12) / denom
        v = (dot00 * dot12 - dot01 * dot02) / denom
        return u, v

    def sv_from_triangle_point(self, point: Point) -> tuple[float, float]:
        """Saturation and value, each clamped to 0..1, for a triangle point."""
        weights = self._barycentric(point)
        if weights is None:
            raise ValueError("the triangle is degenerate at this size")
        u, v = weights
        w = 1.0 - u - v
        return _clamp(u), _clamp(w + u)

    def is_point_in_wheel(self, point: Point) -> bool:
        """Whether ``point`` lies on the hue ring."""
        return self._inner_radius <= distance(point, self._center) <= self._outer_radius

    def is_point_in_triangle(self, point: Point) -> bool:
        """Whether ``point`` lies inside the S/V triangle."""
        weights = self._barycentric(point)
        if weights is None:
            return False
        u, v = weights
        return u >= 0 and v >= 0 and u + v <= 1

    def wheel_lines(self) -> list[WheelLine]:
        """The 360 radial lines making up the hue ring, one per degree."""
        cx, cy = self._center
        lines = []
        for degree in range(360):
            angle = math.radians(degree - 90)
            cos_a, sin_a = math.cos(angle), math.sin(angle)
            lines.append(
                WheelLine(
                    (cx + self._inner_radius * cos_a, cy + self._inner_radius * sin_a),
                    (cx + self._outer_radius * cos_a, cy + self._outer_radius * sin_a),
                    Color.from_hsv(degree, 1.0, 1.0),
                )
            )
        return lines

    def hue_indicator(self) -> Point:
        """Position of the hue marker, midway across the ring."""
        angle = math.radians(self._hue - 90.0)
        radius = (self._inner_radius + self._outer_radius) * 0.5
        return (
            self._center[0] + radius * math.cos(angle),
            self._center[1] + radius * math.sin(angle),
        )

    def triangle_pixels(self) -> Iterator[tuple[tuple[int, int], Color]]:
        """Yield each pixel inside the triangle with its colour at the current hue."""
        xs = [p[0] for p in self._triangle]
        ys = [p[1] for p in self._triangle]
        left = max(_round(min(xs)), 0)
        top = max(_round(min(ys)), 0)
        right = min(_round(max(xs)), self._width)
        bottom = min(_round(max(ys)), self._height)
        for y in range(top, bottom):
            for x in range(left, right):
                point = (float(x), float(y))
                if self.is_point_in_triangle(point):
                    saturation, value = self.sv_from_triangle_point(point)
                    yield (x, y), Color.from_hsv(self._hue, saturation, value)

    def _emit(self) -> None:
        for listener in self.listeners:
            listener(self._color)

    def _update_from_wheel(self, point: Point) -> None:
        self._hue = self.angle_from_point(point)
        self._color = Color.from_hsv(self._hue, self._saturation, self._value)
        self._emit()

    def _update_from_triangle(self, point: Point) -> None:
        self._saturation, self._value = self.sv_from_triangle_point(point)
        self._color = Color.from_hsv(self._hue, self._saturation, self._value)
        self._emit()