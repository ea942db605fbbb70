"""Per-segment neighbour queries.

Answers, for each boundary segment of a region, which region lies on the other
side of it, by probing from the segment midpoint across the partition. Unlike the
resolver this does not pair segments first: every region is a candidate.
"""

from collections import defaultdict
from dataclasses import dataclass
from typing import Any

import structlog

from roomgraph.config import GeometryConfig, ResolverConfig
from roomgraph.core.containment import ContainmentOracle, PolygonContainment
from roomgraph.core.tessellator import SegmentTessellator
from roomgraph.domain import Point, Region, Tessellation
from roomgraph.exceptions import TessellationError


@dataclass(frozen=True)
class SegmentNeighbour:
    """The region found across one boundary segment.

    Attributes:
        region_id: Region owning the segment
        loop_index: Loop index within the region
        segment_index: Segment index within the loop
        element: Separating element on the segment
        neighbour_id: Region across the segment, or None
        probe: Last probe point tested
    """

    region_id: str
    loop_index: int
    segment_index: int
    element: Any
    neighbour_id: str | None
    probe: Point | None


class NeighbourFinder:
    """Looks up the region across each boundary segment.

    Example:
        finder = NeighbourFinder(regions)
        for found in finder.segment_neighbours(regions[0]):
            print(found.segment_index, found.neighbour_id)
    """

    def __init__(
        self,
        regions: list[Region],
        oracle: ContainmentOracle | None = None,
        geometry: GeometryConfig | None = None,
        resolver: ResolverConfig | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        self.regions = regions
        self.geometry = geometry or GeometryConfig()
        self.resolver = resolver or ResolverConfig()
        self.oracle = oracle or PolygonContainment(self.geometry)
        self.tessellator = SegmentTessellator(self.geometry)
        self.logger = logger or structlog.get_logger("roomgraph")

    def region_at(self, point: Point) -> Region | None:
        """First region (in input order) containing the point."""
        for region in self.regions:
            if self.oracle.contains_point(region, point):
                return region
        return None

    def neighbour_at(self, tessellation: Tessellation) -> tuple[Region | None, Point]:
        """Region across a tessellated segment.

        Probes just past the segment first, by the probe offset alone, so a
        neighbour narrower than the recorded thickness is not stepped over. If
        nothing is found there, probes again by the segment thickness plus the
        offset to cross the partition. At each reach a probe that lands back in
        the owning region is retried in the other direction.

        Returns:
            Tuple of (region or None, last probe point tested)
        """
        offset = self.resolver.probe_offset_distance
        reaches = [offset]
        if tessellation.thickness > 0:
            reaches.append(tessellation.thickness + offset)

        for reach in reaches:
            found, probe = self._probe(tessellation, reach)
            if found is not None:
                return found, probe
        return None, probe

    def _probe(self, tessellation: Tessellation, reach: float) -> tuple[Region | None, Point]:
        nx, ny = tessellation.normal
        probe = tessellation.midpoint.offset(nx, ny, reach)
        found = self.region_at(probe)
        if found is not None and found.id == tessellation.region_id:
            probe = tessellation.midpoint.offset(-nx, -ny, reach)
            found = self.region_at(probe)
            if found is not None and found.id == tessellation.region_id:
                self.logger.warning(
                    "Both probe directions land in the owning region",
                    region=tessellation.region_id,
                    segment=tessellation.segment_index,
                    reach=reach,
                )
                found = None
        return found, probe

    def segment_neighbours(self, region: Region) -> list[SegmentNeighbour]:
        """Neighbour lookup for every segment of every loop of a region."""
        results: list[SegmentNeighbour] = []
        for loop_index, loop in enumerate(region.loops):
            for segment_index, segment in enumerate(loop.segments):
                try:
                    tessellation = self.tessellator.tessellate(
                        segment, region.id, loop_index, segment_index
                    )
                except TessellationError as e:
                    self.logger.warning(
                        "Skipping segment",
                        region=region.id,
                        loop=loop_index,
                        segment=segment_index,
                        error=str(e),
                    )
                    results.append(
                        SegmentNeighbour(
                            region.id, loop_index, segment_index, segment.element, None, None
                        )
                    )
                    continue

                neighbour, probe = self.neighbour_at(tessellation)
                results.append(
                    SegmentNeighbour(
                        region_id=region.id,
                        loop_index=loop_index,
                        segment_index=segment_index,
                        element=segment.element,
                        neighbour_id=neighbour.id if neighbour is not None else None,
                        probe=probe,
                    )
                )
        return results


def boundary_element_lengths(region: Region) -> dict[Any, float]:
    """Total boundary length along each separating element of a region.

    Segments without an element are summed under None.

    Args:
        region: Region to measure

    Returns:
        Element reference to adjacent length, in order of first appearance
    """
    lengths: dict[Any, float] = defaultdict(float)
    for loop in region.loops:
        for segment in loop.segments:
            lengths[segment.element] += segment.length()
    return dict(lengths)
