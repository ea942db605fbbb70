"""Region and boundary types.

A region (room or space) is bounded by one or more closed loops. Each loop is an
ordered cycle of boundary segments, and each segment may carry a reference to the
partition element (wall) that lies along it.
"""

from dataclasses import dataclass, field
from typing import Any

from roomgraph.domain.curve import Curve, LineCurve, Point


@dataclass(frozen=True)
class BoundarySegment:
    """One curve of a boundary loop.

    Attributes:
        curve: Segment geometry
        element: Opaque reference to the separating element, passed through unchanged
        thickness: Thickness of the separating element (0.0 when unknown)
    """

    curve: Curve
    element: Any = None
    thickness: float = 0.0

    @property
    def start(self) -> Point:
        return self.curve.start

    @property
    def end(self) -> Point:
        return self.curve.end

    def length(self) -> float:
        return self.curve.length()


@dataclass(frozen=True)
class BoundaryLoop:
    """An ordered, cyclic sequence of boundary segments."""

    segments: tuple[BoundarySegment, ...]

    def __len__(self) -> int:
        return len(self.segments)

    @classmethod
    def from_polygon(
        cls,
        vertices: list[Point],
        elements: list[Any] | None = None,
        thickness: float | list[float] = 0.0,
    ) -> "BoundaryLoop":
        """Build a loop of straight segments joining consecutive vertices.

        Args:
            vertices: Polygon vertices, not repeating the first one at the end
            elements: Optional element reference per edge (edge i runs from vertex i)
            thickness: Thickness for all edges, or one value per edge

        Returns:
            BoundaryLoop with one LineCurve per edge
        """
        n = len(vertices)
        if elements is not None and len(elements) != n:
            raise ValueError(f"Expected {n} edge elements, got {len(elements)}")
        if isinstance(thickness, list):
            if len(thickness) != n:
                raise ValueError(f"Expected {n} edge thickness values, got {len(thickness)}")
            thicknesses = thickness
        else:
            thicknesses = [thickness] * n

        segments = tuple(
            BoundarySegment(
                curve=LineCurve(vertices[i], vertices[(i + 1) % n]),
                element=elements[i] if elements is not None else None,
                thickness=thicknesses[i],
            )
            for i in range(n)
        )
        return cls(segments=segments)


@dataclass(frozen=True)
class Region:
    """A bounded planar region whose adjacency is being determined.

    The first loop is the outer perimeter, further loops are holes. Regions are
    owned by the caller and never mutated during resolution.

    Attributes:
        id: Unique region identifier
        loops: Boundary loops (may be empty for unbounded or unplaced spaces)
        name: Optional display name
    """

    id: str
    loops: tuple[BoundaryLoop, ...] = field(default_factory=tuple)
    name: str | None = None

    @property
    def display_name(self) -> str:
        if self.name:
            return f"{self.name} ({self.id})"
        return self.id

    @property
    def segment_count(self) -> int:
        return sum(len(loop) for loop in self.loops)

    @classmethod
    def from_polygon(
        cls,
        region_id: str,
        vertices: list[Point],
        elements: list[Any] | None = None,
        thickness: float | list[float] = 0.0,
        name: str | None = None,
    ) -> "Region":
        """Create a single-loop region from polygon vertices."""
        loop = BoundaryLoop.from_polygon(vertices, elements=elements, thickness=thickness)
        return cls(id=region_id, loops=(loop,), name=name)


@dataclass
class BoundaryPolygon:
    """A validated boundary loop produced by the boundary extractor.

    Attributes:
        region_id: Owning region
        loop_index: Index of the loop within the region
        segments: Non-degenerate segments in loop order
        segment_indices: Position of each kept segment in the original loop
        vertices: Start point of each segment, consecutive duplicates removed
    """

    region_id: str
    loop_index: int
    segments: list[BoundarySegment]
    segment_indices: list[int]
    vertices: list[Point]
