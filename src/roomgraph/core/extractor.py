"""Boundary extraction and validation.

Converts a region's loops into validated boundary polygons. Loops are checked
for closure and minimum size; nothing is repaired or reordered.
"""

import structlog

from roomgraph.config import GeometryConfig
from roomgraph.core.geometry import dedupe_consecutive
from roomgraph.domain import BoundaryPolygon, BoundarySegment, Region
from roomgraph.exceptions import MalformedBoundaryError

# A closed loop needs at least this many segments to bound an area
MIN_LOOP_SEGMENTS = 3


class BoundaryExtractor:
    """Validates region boundaries and normalizes them into polygons.

    The extractor is stateless and safe for use in parallel processing.
    """

    def __init__(
        self,
        config: GeometryConfig | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        self.config = config or GeometryConfig()
        self.logger = logger or structlog.get_logger("roomgraph")

    def extract(self, region: Region) -> list[BoundaryPolygon]:
        """Validate every loop of a region.

        Args:
            region: Region to extract

        Returns:
            One BoundaryPolygon per loop, in loop order. Empty for a region
            without loops.

        Raises:
            MalformedBoundaryError: If any loop has fewer than 3 usable segments
                or is not closed within epsilon
        """
        if not region.loops:
            self.logger.info("Region has no boundary loops", region=region.id)
            return []

        return [
            self._extract_loop(region.id, loop_index, list(loop.segments))
            for loop_index, loop in enumerate(region.loops)
        ]

    def _extract_loop(
        self,
        region_id: str,
        loop_index: int,
        segments: list[BoundarySegment],
    ) -> BoundaryPolygon:
        eps = self.config.epsilon

        kept: list[BoundarySegment] = []
        kept_indices: list[int] = []
        for segment_index, segment in enumerate(segments):
            if segment.start.distance_to(segment.end) <= eps and segment.curve.is_linear:
                self.logger.debug(
                    "Dropping zero-length segment",
                    region=region_id,
                    loop=loop_index,
                    segment=segment_index,
                )
                continue
            kept.append(segment)
            kept_indices.append(segment_index)

        if len(kept) < MIN_LOOP_SEGMENTS:
            raise MalformedBoundaryError(
                region_id,
                f"loop has {len(kept)} segment(s), at least {MIN_LOOP_SEGMENTS} required",
                loop_index=loop_index,
            )

        n = len(kept)
        for i in range(n):
            j = (i + 1) % n
            gap = kept[i].end.distance_to(kept[j].start)
            if gap > eps:
                raise MalformedBoundaryError(
                    region_id,
                    f"segment {kept_indices[i]} ends {gap:.6g} away from the start of "
                    f"segment {kept_indices[j]}",
                    loop_index=loop_index,
                )

        vertices = dedupe_consecutive([s.start for s in kept], eps, closed=True)

        return BoundaryPolygon(
            region_id=region_id,
            loop_index=loop_index,
            segments=kept,
            segment_indices=kept_indices,
            vertices=vertices,
        )
