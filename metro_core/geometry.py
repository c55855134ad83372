"""
Planar geometry primitives for the transit map.

Coordinates follow the SVG convention (x grows to the right, y grows
downwards). Rotations are measured in degrees clockwise from north, so a
rotation of 90 degrees points east.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, Dict, Iterable


def approx_equals(a: float, b: float, tolerance: float = 1e-4) -> bool:
    """Tolerance-based float equality."""
    return abs(a - b) < tolerance


def _normalize_degrees(degrees: float) -> float:
    degrees = math.fmod(degrees, 360)
    if degrees <= -180:
        degrees += 360
    elif degrees > 180:
        degrees -= 360
    return degrees


@dataclass(frozen=True)
class Rotation:
    """
    An orientation in degrees, normalized to the interval (-180, 180].

    Attributes:
        degrees: Clockwise angle from north
    """

    degrees: float = 0.0

    DIRECTIONS: ClassVar[Dict[str, float]] = {
        "n": 0,
        "ne": 45,
        "e": 90,
        "se": 135,
        "s": 180,
        "sw": -135,
        "w": -90,
        "nw": -45,
    }

    def __post_init__(self):
        object.__setattr__(self, "degrees", _normalize_degrees(float(self.degrees)))

    @classmethod
    def from_name(cls, name: str | None) -> "Rotation":
        """Build a rotation from a compass name; unknown names map to north."""
        return cls(cls.DIRECTIONS.get((name or "n").lower(), 0))

    @property
    def name(self) -> str:
        for name, degrees in self.DIRECTIONS.items():
            if approx_equals(_normalize_degrees(degrees), self.degrees):
                return name
        return "n"

    @property
    def radians(self) -> float:
        return math.radians(self.degrees)

    def add(self, other: "Rotation") -> "Rotation":
        return Rotation(self.degrees + other.degrees)

    def delta(self, other: "Rotation") -> "Rotation":
        """Signed smallest rotation that turns `self` into `other`."""
        return Rotation(other.degrees - self.degrees)

    def is_vertical(self) -> bool:
        return self.degrees % 180 == 0


@dataclass(frozen=True)
class Vector:
    """An immutable 2D vector."""

    x: float
    y: float

    def add(self, other: "Vector") -> "Vector":
        return Vector(self.x + other.x, self.y + other.y)

    def delta(self, other: "Vector") -> "Vector":
        """Vector pointing from `self` to `other`."""
        return Vector(other.x - self.x, other.y - self.y)

    def scale(self, factor: float) -> "Vector":
        return Vector(self.x * factor, self.y * factor)

    @property
    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def rotate(self, theta: Rotation) -> "Vector":
        rad = theta.radians
        return Vector(
            self.x * math.cos(rad) - self.y * math.sin(rad),
            self.x * math.sin(rad) + self.y * math.cos(rad),
        )

    def between(self, other: "Vector", fraction: float) -> "Vector":
        return self.add(self.delta(other).scale(fraction))

    def inclination(self) -> Rotation:
        """Direction of this vector as a Rotation; the null vector points north."""
        if approx_equals(self.x, 0) and approx_equals(self.y, 0):
            return Rotation(0)
        return Rotation(math.degrees(math.atan2(self.x, -self.y)))

    def is_null(self) -> bool:
        return approx_equals(self.x, 0) and approx_equals(self.y, 0)


Vector.NULL = Vector(0, 0)
Vector.UNIT = Vector(0, -1)


@dataclass(frozen=True)
class BoundingBox:
    """
    Axis-aligned box spanned by its top-left and bottom-right corners.

    A box whose corners are both the null vector is treated as "no box".
    """

    tl: Vector
    br: Vector

    @classmethod
    def from_points(cls, points: Iterable[Vector]) -> "BoundingBox":
        points = list(points)
        if not points:
            return cls(Vector.NULL, Vector.NULL)
        return cls(
            Vector(min(p.x for p in points), min(p.y for p in points)),
            Vector(max(p.x for p in points), max(p.y for p in points)),
        )

    @property
    def width(self) -> float:
        return self.br.x - self.tl.x

    @property
    def height(self) -> float:
        return self.br.y - self.tl.y

    @property
    def center(self) -> Vector:
        return self.tl.between(self.br, 0.5)

    def is_null(self) -> bool:
        return self.tl.is_null() and self.br.is_null()

    def union(self, other: "BoundingBox") -> "BoundingBox":
        if self.is_null():
            return other
        if other.is_null():
            return self
        return BoundingBox.from_points([self.tl, self.br, other.tl, other.br])
