"""Points in the plane, circles and circles with a centre."""

from __future__ import annotations

import math
from dataclasses import dataclass

_PI = 3.14


def _fmt(value: float) -> str:
    return f"{value:g}"


@dataclass
class Point:
    """A point in cartesian coordinates."""

    x: float = 0.0
    y: float = 0.0

    X = 0
    Y = 1

    @classmethod
    def create_cartesian(cls, x: float, y: float) -> Point:
        """Build a point from its cartesian coordinates."""
        return cls(float(x), float(y))

    @classmethod
    def create_polar(cls, r: float, theta: float) -> Point:
        """Build a point from a radius and an angle in radians."""
        return cls(r * math.cos(theta), r * math.sin(theta))

    def offset(self, dx: float, dy: float | None = None) -> None:
        """Move the point; with one argument both coordinates move by it."""
        if dy is None:
            dy = dx
        self.x += dx
        self.y += dy

    def distance(self, other: Point | None = None) -> float:
        """Return the distance to ``other``, or to the origin when omitted."""
        if other is None:
            return self.distance_to(0.0, 0.0)
        return self.distance_to(other.x, other.y)

    def distance_to(self, a: float, b: float) -> float:
        """Return the distance to the point with coordinates ``(a, b)``."""
        return math.hypot(self.x - a, self.y - b)

    def __getitem__(self, index: int) -> float:
        if index == self.X:
            return self.x
        if index == self.Y:
            return self.y
        raise IndexError("index must be zero or one")

    def __str__(self) -> str:
        return f"({_fmt(self.x)}, {_fmt(self.y)})"

    @classmethod
    def parse(cls, text: str) -> Point:
        """Build a point from two whitespace-separated numbers."""
        parts = text.split()
        if len(parts) != 2:
            raise ValueError(f"expected two numbers, got {text!r}")
        return cls(float(parts[0]), float(parts[1]))


class Circle:
    """A circle given by its radius; negative radii are taken as positive."""

    def __init__(self, radius: float = 0.0) -> None:
        self._r = abs(float(radius))

    @property
    def radius(self) -> float:
        return self._r

    @radius.setter
    def radius(self, value: float) -> None:
        self._r = abs(float(value))

    def area(self) -> float:
        """Return the area."""
        return _PI * self._r * self._r

    def circumference(self) -> float:
        """Return the circumference."""
        return 2 * _PI * self._r

    def __str__(self) -> str:
        return (f"Radius: {_fmt(self._r)}, Area: {_fmt(self.area())}, "
                f"Circumference: {_fmt(self.circumference())}")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._r!r})"

    @classmethod
    def parse(cls, text: str) -> Circle:
        """Build a circle from a single number giving the radius."""
        parts = text.split()
        if len(parts) != 1:
            raise ValueError(f"expected one number, got {text!r}")
        return cls(float(parts[0]))


class AnalyticalCircle(Circle):
    """A circle with a centre point."""

    def __init__(self, radius: float = 0.0, x: float = 0.0, y: float = 0.0) -> None:
        super().__init__(radius)
        self._center = Point.create_cartesian(x, y)

    @property
    def x(self) -> float:
        return self._center.x

    @x.setter
    def x(self, value: float) -> None:
        self._center.x = value

    @property
    def y(self) -> float:
        return self._center.y

    @y.setter
    def y(self, value: float) -> None:
        self._center.y = value

    def offset(self, dx: float, dy: float | None = None) -> None:
        """Move the centre; with one argument both coordinates move by it."""
        self._center.offset(dx, dy)

    def __repr__(self) -> str:
        return f"AnalyticalCircle({self.radius!r}, {self.x!r}, {self.y!r})"