"""Segment tessellation.

Turns each boundary curve into a short polyline and derives the midpoint,
tangent and (sign-ambiguous) normal used for matching and probing.
"""

from roomgraph.config import GeometryConfig
from roomgraph.core._bezier import flatten_bezier
from roomgraph.core.geometry import arc_chord_count, dedupe_consecutive, rotate_ccw, unit_vector
from roomgraph.domain import (
    ArcCurve,
    BezierCurve,
    BoundaryPolygon,
    BoundarySegment,
    Curve,
    Point,
    Tessellation,
)
from roomgraph.exceptions import GeometryError, TessellationError


class SegmentTessellator:
    """Samples boundary curves within a chord tolerance.

    Straight segments tessellate to their endpoints. Arcs get the smallest chord
    count keeping the sagitta within tolerance; Bezier curves are subdivided until
    flat. Curved results are capped at ``max_curve_samples`` chords.
    """

    def __init__(self, config: GeometryConfig | None = None) -> None:
        self.config = config or GeometryConfig()

    def sample(self, curve: Curve) -> list[Point]:
        """Polyline approximation of a curve, start to end.

        Args:
            curve: Curve to sample

        Returns:
            At least two points
        """
        tolerance = self.config.chord_tolerance
        cap = self.config.max_curve_samples

        if curve.is_linear:
            return [curve.start, curve.end]

        if isinstance(curve, ArcCurve):
            count = arc_chord_count(curve.radius, curve.sweep, tolerance, cap)
            return [curve.evaluate(i / count) for i in range(count + 1)]

        if isinstance(curve, BezierCurve):
            points = flatten_bezier(list(curve.points), tolerance)
            if len(points) - 1 > cap:
                # Too fine; resample at the cap with a fixed parametric step
                points = [curve.evaluate(i / cap) for i in range(cap + 1)]
            return points

        raise TessellationError(f"Unsupported curve type: {type(curve).__name__}")

    def tessellate(
        self,
        segment: BoundarySegment,
        region_id: str,
        loop_index: int,
        segment_index: int,
    ) -> Tessellation:
        """Tessellate one boundary segment.

        Args:
            segment: Segment to tessellate
            region_id: Owning region
            loop_index: Loop index within the region
            segment_index: Segment index within the loop

        Returns:
            Tessellation with midpoint, unit tangent and unit normal

        Raises:
            TessellationError: If the sampled polyline has no usable direction
        """
        points = dedupe_consecutive(self.sample(segment.curve), self.config.epsilon)
        if len(points) < 2:
            raise TessellationError(
                f"Segment {segment_index} of region '{region_id}' collapses to a point"
            )

        n = len(points)
        mid = n // 2
        if n % 2 == 1:
            midpoint = points[mid]
            before, after = points[mid - 1], points[mid + 1]
        else:
            before, after = points[mid - 1], points[mid]
            midpoint = Point((before.x + after.x) / 2, (before.y + after.y) / 2)

        try:
            tangent = unit_vector(after.x - before.x, after.y - before.y)
        except GeometryError as e:
            raise TessellationError(
                f"Segment {segment_index} of region '{region_id}' has no tangent: {e}"
            ) from e

        return Tessellation(
            region_id=region_id,
            loop_index=loop_index,
            segment_index=segment_index,
            points=tuple(points),
            midpoint=midpoint,
            tangent=tangent,
            normal=rotate_ccw(tangent),
            element=segment.element,
            thickness=segment.thickness,
        )

    def tessellate_polygon(self, polygon: BoundaryPolygon) -> list[Tessellation]:
        """Tessellate every segment of a validated loop, in loop order.

        Tessellations keep the segment's position in the original loop, so dropped
        zero-length segments leave gaps in the numbering.
        """
        return [
            self.tessellate(segment, polygon.region_id, polygon.loop_index, index)
            for segment, index in zip(polygon.segments, polygon.segment_indices)
        ]
