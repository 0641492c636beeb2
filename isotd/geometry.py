"""Small 2D geometry helpers shared by the game objects."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

Color = tuple[int, int, int]


@dataclass(frozen=True)
class Vec2:
    """An immutable 2D vector."""

    x: float
    y: float

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

    def length(self) -> float:
        return math.hypot(self.x, self.y)


@dataclass
class Circle:
    """A filled circle drawn around ``position``."""

    position: Vec2
    radius: float
    color: Color


def angle_to(origin: Vec2, target: Vec2) -> float:
    """Angle in radians of the direction from ``origin`` to ``target``."""
    direction = target - origin
    return math.atan2(direction.y, direction.x)


def shortest_angle_delta(start: float, end: float) -> float:
    """Signed smallest rotation taking angle ``start`` to angle ``end``."""
    return math.fmod(end - start + 3.0 * math.pi, 2.0 * math.pi) - math.pi


def calc_dist(a: Vec2, b: Vec2) -> float:
    """Euclidean distance between two points."""
    return (b - a).length()


def build_circle(pos: Vec2, color: Color, radius: float) -> Circle:
    """Build a circle whose position is offset by its radius from ``pos``."""
    return Circle(Vec2(pos.x - radius, pos.y - radius), radius, color)