"""Domain models for roomgraph.

This module contains the domain models representing regions, their boundaries
and the adjacency results derived from them. All models are designed to be:

- Immutable where possible (using frozen dataclasses)
- Independent of any host application object model

Key classes:
- Point: A 2D point
- LineCurve, ArcCurve, BezierCurve: Boundary segment geometry
- BoundarySegment, BoundaryLoop, Region: Caller-supplied boundaries
- BoundaryPolygon: A validated loop
- Tessellation, Pairing, Adjacency: Per-run matching state
- AdjacencyGraph: Region to neighbours mapping
"""

from roomgraph.domain.adjacency import (
    Adjacency,
    AdjacencyGraph,
    Pairing,
    SkippedItem,
    SkipReason,
    Tessellation,
)
from roomgraph.domain.curve import (
    ArcCurve,
    BezierCurve,
    Curve,
    LineCurve,
    Point,
)
from roomgraph.domain.region import (
    BoundaryLoop,
    BoundaryPolygon,
    BoundarySegment,
    Region,
)

__all__: list[str] = [
    # Enums
    "SkipReason",
    # Geometry
    "Point",
    "Curve",
    "LineCurve",
    "ArcCurve",
    "BezierCurve",
    # Boundaries
    "BoundarySegment",
    "BoundaryLoop",
    "BoundaryPolygon",
    "Region",
    # Results
    "Tessellation",
    "Pairing",
    "Adjacency",
    "SkippedItem",
    "AdjacencyGraph",
]
