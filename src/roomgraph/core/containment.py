"""Point containment for regions.

The resolver only needs to ask "is this point inside that region". Hosts with a
real geometry kernel plug their own test in through the ContainmentOracle
protocol; PolygonContainment serves plain 2D layouts.
"""

from typing import Protocol

from roomgraph.config import GeometryConfig
from roomgraph.core.geometry import dedupe_consecutive, point_in_polygons
from roomgraph.core.tessellator import SegmentTessellator
from roomgraph.domain import Point, Region


class ContainmentOracle(Protocol):
    """Answers whether a point lies inside a region."""

    def contains_point(self, region: Region, point: Point) -> bool: ...


class PolygonContainment:
    """Even-odd ray casting over a region's tessellated loops.

    Inner loops act as holes. Polygons are built lazily and cached per region id,
    so one instance should serve one resolution run.
    """

    def __init__(self, config: GeometryConfig | None = None) -> None:
        self.config = config or GeometryConfig()
        self._tessellator = SegmentTessellator(self.config)
        self._polygons: dict[str, list[list[Point]]] = {}

    def polygons(self, region: Region) -> list[list[Point]]:
        """Closed polygons approximating each loop of the region."""
        cached = self._polygons.get(region.id)
        if cached is not None:
            return cached

        polygons = []
        for loop in region.loops:
            points: list[Point] = []
            for segment in loop.segments:
                # Each curve's end is the next curve's start
                points.extend(self._tessellator.sample(segment.curve)[:-1])
            polygon = dedupe_consecutive(points, self.config.epsilon, closed=True)
            if len(polygon) >= 3:
                polygons.append(polygon)

        self._polygons[region.id] = polygons
        return polygons

    def contains_point(self, region: Region, point: Point) -> bool:
        return point_in_polygons(point, self.polygons(region))
