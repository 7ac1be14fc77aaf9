"""An RGB colour with HSV conversions."""

from __future__ import annotations

import colorsys
from dataclasses import dataclass


def _check_unit(name: str, value: float) -> None:
    if not 0.0 <= value <= 1.0:
        raise ValueError(f"{name} must be between 0 and 1, got {value}")


@dataclass(frozen=True)
class Color:
    """A colour with red, green and blue components between 0 and 1."""

    red: float = 0.0
    green: float = 0.0
    blue: float = 0.0

    def __post_init__(self) -> None:
        _check_unit("red", self.red)
        _check_unit("green", self.green)
        _check_unit("blue", self.blue)

    @classmethod
    def from_hsv(cls, h: float, s: float, v: float) -> Color:
        """Build a colour from hue in degrees (0-360), saturation and value."""
        if not 0.0 <= h <= 360.0:
            raise ValueError(f"hue must be between 0 and 360, got {h}")
        _check_unit("saturation", s)
        _check_unit("value", v)
        r, g, b = colorsys.hsv_to_rgb(h / 360.0, s, v)
        return cls(r, g, b)

    def to_hsv(self) -> tuple[float, float, float]:
        """Return hue in degrees, saturation and value; grey has hue 0."""
        h, s, v = colorsys.rgb_to_hsv(self.red, self.green, self.blue)
        if s == 0.0:
            h = 0.0
        return h * 360.0, s, v

    def name(self) -> str:
        """Return the colour as ``#rrggbb``."""
        r, g, b = (round(c * 255) for c in (self.red, self.green, self.blue))
        return f"#{r:02x}{g:02x}{b:02x}"