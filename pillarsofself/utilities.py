"""Small 2D vector helpers shared by the game code."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

_EPSILON = 0.00001


@dataclass(frozen=True, slots=True)
class Vec2:
    """An immutable two-dimensional vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vec2:
        return Vec2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> Vec2:
        return Vec2(self.x / divisor, self.y / divisor)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y


def rad_to_deg(r: float) -> float:
    """Convert radians to degrees."""
    return r * 180.0 / math.pi


def deg_to_rad(d: float) -> float:
    """Convert degrees to radians."""
    return d * math.pi / 180.0


def length(v: Vec2) -> float:
    """Euclidean length of a vector."""
    return math.hypot(v.x, v.y)


def normalize(v: Vec2) -> Vec2:
    """Unit vector in the direction of v; near-zero vectors come back unchanged."""
    d = length(v)
    return v / d if d > _EPSILON else v


def dist(u: Vec2, v: Vec2) -> float:
    """Distance between two points."""
    return length(v - u)


def bearing(v: Vec2) -> float:
    """Angle of a vector in degrees, measured from the x axis."""
    return rad_to_deg(math.atan2(v.y, v.x))


def u_vec_bearing(b: float) -> Vec2:
    """Unit vector pointing along a bearing given in degrees."""
    rad = deg_to_rad(b)
    return Vec2(math.cos(rad), math.sin(rad))


def center_origin(left: float, top: float, width: float, height: float) -> Vec2:
    """Origin that places a shape with the given local bounds at its centre."""
    return Vec2(width / 2.0 + left, height / 2.0 + top)


def _num(value: float) -> str:
    return f"{value:g}"


def format_vector(v: Vec2) -> str:
    """Render a vector as ``{x, y}``."""
    return f"{{{_num(v.x)}, {_num(v.y)}}}"


def format_rect(left: float, top: float, width: float, height: float) -> str:
    """Render a rectangle as ``{{left, top}, {width, height}``."""
    return f"{{{{{_num(left)}, {_num(top)}}}, {{{_num(width)}, {_num(height)}}}"