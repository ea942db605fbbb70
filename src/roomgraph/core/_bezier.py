"""Internal Bezier curve flattening algorithms.

This is an internal module containing helper functions for the segment tessellator.
Not intended for public use.
"""

from roomgraph.core.geometry import distance_to_line
from roomgraph.domain import Point

# Subdivision depth limit; 2**12 chords is far beyond any sample cap
MAX_DEPTH = 12


def split_bezier(points: list[Point]) -> tuple[list[Point], list[Point]]:
    """Split a Bezier curve of any degree at t=0.5 (De Casteljau).

    Args:
        points: Control points

    Returns:
        Tuple of (left, right) control point lists sharing the split point
    """
    left = [points[0]]
    right = [points[-1]]
    level = points
    while len(level) > 1:
        level = [
            Point((a.x + b.x) / 2, (a.y + b.y) / 2)
            for a, b in zip(level, level[1:])
        ]
        left.append(level[0])
        right.append(level[-1])
    right.reverse()
    return left, right


def is_flat(points: list[Point], tolerance: float) -> bool:
    """Check whether all control points lie within tolerance of the chord.

    The curve lies inside the convex hull of its control points, so this bounds
    the deviation of the curve from the chord joining its endpoints.
    """
    p0, pn = points[0], points[-1]
    return all(distance_to_line(p, p0, pn) <= tolerance for p in points[1:-1])


def flatten_bezier(points: list[Point], tolerance: float, depth: int = 0) -> list[Point]:
    """Flatten a quadratic or cubic Bezier curve using recursive subdivision.

    Args:
        points: Control points [p0, ..., pn]
        tolerance: Maximum distance from true curve
        depth: Current recursion depth

    Returns:
        List of points approximating the curve, including both endpoints
    """
    if depth >= MAX_DEPTH or is_flat(points, tolerance):
        return [points[0], points[-1]]

    left, right = split_bezier(points)
    left_flat = flatten_bezier(left, tolerance, depth + 1)
    right_flat = flatten_bezier(right, tolerance, depth + 1)

    # Combine, avoiding duplicate midpoint
    return left_flat[:-1] + right_flat
