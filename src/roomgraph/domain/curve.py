"""Core geometric types for boundary representation.

This module defines the fundamental geometric types used throughout roomgraph:
- Point: A 2D point in working units
- LineCurve: A straight boundary segment
- ArcCurve: A circular arc boundary segment
- BezierCurve: A quadratic or cubic Bezier boundary segment
"""

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space.

    Immutable and hashable for use in sets/dicts.

    Attributes:
        x: X coordinate in working units
        y: Y coordinate in working units
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def distance_to(self, other: "Point") -> float:
        """Euclidean distance to another point."""
        return math.hypot(other.x - self.x, other.y - self.y)

    def offset(self, dx: float, dy: float, distance: float = 1.0) -> "Point":
        """Return this point moved by ``distance`` along the vector (dx, dy)."""
        return Point(self.x + dx * distance, self.y + dy * distance)


@dataclass(frozen=True, slots=True)
class LineCurve:
    """A straight segment from start to end."""

    start: Point
    end: Point

    @property
    def is_linear(self) -> bool:
        return True

    def evaluate(self, t: float) -> Point:
        """Point at normalized parameter t in [0, 1]."""
        return Point(
            self.start.x + t * (self.end.x - self.start.x),
            self.start.y + t * (self.end.y - self.start.y),
        )

    def length(self) -> float:
        return self.start.distance_to(self.end)


@dataclass(frozen=True, slots=True)
class ArcCurve:
    """A circular arc.

    The arc sweeps from ``start_angle`` to ``end_angle`` (radians). It runs
    counter-clockwise when end_angle > start_angle and clockwise otherwise.

    Attributes:
        center: Arc center
        radius: Arc radius in working units
        start_angle: Angle of the start point in radians
        end_angle: Angle of the end point in radians
    """

    center: Point
    radius: float
    start_angle: float
    end_angle: float

    @property
    def is_linear(self) -> bool:
        return False

    @property
    def sweep(self) -> float:
        """Signed sweep angle in radians."""
        return self.end_angle - self.start_angle

    @property
    def start(self) -> Point:
        return self.evaluate(0.0)

    @property
    def end(self) -> Point:
        return self.evaluate(1.0)

    def evaluate(self, t: float) -> Point:
        """Point at normalized parameter t in [0, 1]."""
        angle = self.start_angle + t * self.sweep
        return Point(
            self.center.x + self.radius * math.cos(angle),
            self.center.y + self.radius * math.sin(angle),
        )

    def length(self) -> float:
        return abs(self.sweep) * self.radius


@dataclass(frozen=True, slots=True)
class BezierCurve:
    """A quadratic (3 control points) or cubic (4 control points) Bezier curve."""

    points: tuple[Point, ...]

    def __post_init__(self) -> None:
        if len(self.points) not in (3, 4):
            raise ValueError(
                f"Expected 3 or 4 control points for Bezier curve, got {len(self.points)}"
            )

    @property
    def is_linear(self) -> bool:
        return False

    @property
    def start(self) -> Point:
        return self.points[0]

    @property
    def end(self) -> Point:
        return self.points[-1]

    def evaluate(self, t: float) -> Point:
        """Point at parameter t in [0, 1] (De Casteljau)."""
        pts = list(self.points)
        while len(pts) > 1:
            pts = [
                Point(a.x + t * (b.x - a.x), a.y + t * (b.y - a.y))
                for a, b in zip(pts, pts[1:])
            ]
        return pts[0]

    def length(self, steps: int = 64) -> float:
        """Approximate arc length from a fixed-step polyline."""
        total = 0.0
        prev = self.start
        for i in range(1, steps + 1):
            pt = self.evaluate(i / steps)
            total += prev.distance_to(pt)
            prev = pt
        return total


Curve = LineCurve | ArcCurve | BezierCurve

