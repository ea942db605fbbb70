"""Geometric operations for boundary and adjacency calculations.

This module provides core mathematical utilities for:
- Vector normalization and rotation
- Point-to-line distances
- Duplicate point removal
- Point-in-polygon testing (ray casting algorithm)
- Arc chord counts for a given sagitta tolerance

All functions are pure, stateless, and safe for use in worker processes.
"""

import math

from roomgraph.domain import Point
from roomgraph.exceptions import GeometryError


def unit_vector(dx: float, dy: float) -> tuple[float, float]:
    """Normalize a 2D vector.

    Args:
        dx: X component
        dy: Y component

    Returns:
        Tuple (ux, uy) of unit length

    Raises:
        GeometryError: If the vector has zero length

    Examples:
        >>> unit_vector(3.0, 4.0)
        (0.6, 0.8)
    """
    length = math.hypot(dx, dy)
    if length < 1e-12:
        raise GeometryError("Cannot normalize zero-length vector")
    return dx / length, dy / length


def rotate_ccw(vector: tuple[float, float]) -> tuple[float, float]:
    """Rotate a vector 90 degrees counter-clockwise: (x, y) -> (-y, x)."""
    x, y = vector
    return -y, x


def distance_to_line(point: Point, a: Point, b: Point) -> float:
    """Distance from a point to the infinite line through a and b.

    Falls back to the distance to ``a`` when a and b coincide.
    """
    dx = b.x - a.x
    dy = b.y - a.y
    length = math.hypot(dx, dy)
    if length < 1e-12:
        return point.distance_to(a)
    return abs(dx * (point.y - a.y) - dy * (point.x - a.x)) / length


def dedupe_consecutive(points: list[Point], epsilon: float, closed: bool = False) -> list[Point]:
    """Remove points lying within epsilon of their predecessor.

    Args:
        points: Input points
        epsilon: Distance under which two points are considered equal
        closed: Also drop the last point if it duplicates the first

    Returns:
        Points with consecutive duplicates removed
    """
    result: list[Point] = []
    for pt in points:
        if result and result[-1].distance_to(pt) <= epsilon:
            continue
        result.append(pt)
    if closed and len(result) > 1 and result[-1].distance_to(result[0]) <= epsilon:
        result.pop()
    return result


def point_in_polygon(point: Point, polygon: list[Point]) -> bool:
    """Determine if a point is inside a polygon using ray casting algorithm.

    Casts a horizontal ray from the point to the right and counts intersections
    with polygon edges. Odd number of intersections = inside, even = outside.

    Args:
        point: The point to test
        polygon: List of points forming the polygon boundary

    Returns:
        True if point is inside polygon, False otherwise

    Examples:
        >>> square = [Point(0.0, 0.0), Point(2.0, 0.0), Point(2.0, 2.0), Point(0.0, 2.0)]
        >>> point_in_polygon(Point(1.0, 1.0), square)
        True
        >>> point_in_polygon(Point(3.0, 3.0), square)
        False
    """
    n = len(polygon)
    if n < 3:
        return False

    inside = False
    x, y = point.x, point.y
    j = n - 1

    for i in range(n):
        xi, yi = polygon[i].x, polygon[i].y
        xj, yj = polygon[j].x, polygon[j].y

        if ((yi > y) != (yj > y)) and (x < (xj - xi) * (y - yi) / (yj - yi) + xi):
            inside = not inside

        j = i

    return inside


def point_in_polygons(point: Point, polygons: list[list[Point]]) -> bool:
    """Even-odd containment over several loops, so inner loops act as holes."""
    inside = False
    for polygon in polygons:
        if point_in_polygon(point, polygon):
            inside = not inside
    return inside


def arc_chord_count(radius: float, sweep: float, tolerance: float, max_chords: int) -> int:
    """Smallest chord count keeping an arc's sagitta within tolerance.

    A chord spanning angle a on a circle of radius r deviates from the arc by
    r * (1 - cos(a / 2)).

    Args:
        radius: Arc radius
        sweep: Sweep angle in radians (sign ignored)
        tolerance: Maximum chord deviation
        max_chords: Upper bound on the result

    Returns:
        Number of chords, at least 2 and at most max_chords
    """
    sweep = abs(sweep)
    if tolerance >= radius:
        return min(2, max_chords)

    # Largest angle per chord for which the sagitta stays within tolerance
    max_angle = 2.0 * math.acos(1.0 - tolerance / radius)
    count = math.ceil(sweep / max_angle) if max_angle > 0 else max_chords
    return max(2, min(count, max_chords))
