"""Adjacency resolution pipeline.

This module runs the full resolution once per invocation:

1. Validate region boundaries (BoundaryExtractor)
2. Tessellate every segment (SegmentTessellator)
3. Pair each segment with its nearest cross-region segment (NearestSegmentMatcher,
   optionally through the CandidateIndex)
4. Confirm pairings by threshold and containment (AdjacencyClassifier)
5. Aggregate confirmed pairings per region (AdjacencyGraphBuilder)

Failures are isolated per region and per segment. The resolver always returns a
best-effort graph plus the list of what it had to leave out.
"""

import time
from collections.abc import Iterable
from dataclasses import dataclass, field

import structlog

from roomgraph.config import RoomGraphSettings
from roomgraph.core.classifier import AdjacencyClassifier
from roomgraph.core.containment import ContainmentOracle, PolygonContainment
from roomgraph.core.extractor import BoundaryExtractor
from roomgraph.core.graph import AdjacencyGraphBuilder
from roomgraph.core.matcher import NearestSegmentMatcher
from roomgraph.core.tessellator import SegmentTessellator
from roomgraph.domain import (
    Adjacency,
    AdjacencyGraph,
    Region,
    SkippedItem,
    SkipReason,
    Tessellation,
)
from roomgraph.exceptions import MalformedBoundaryError, TessellationError
from roomgraph.utils import ResolutionLogger, ResolutionStats


@dataclass
class ResolutionResult:
    """Everything a resolution run produces.

    Attributes:
        graph: Region to neighbours mapping
        skipped: Regions and segments left out, with reasons
        stats: Run statistics
    """

    graph: AdjacencyGraph
    skipped: list[SkippedItem] = field(default_factory=list)
    stats: ResolutionStats = field(default_factory=ResolutionStats)

    @property
    def adjacencies(self) -> list[Adjacency]:
        return self.graph.adjacencies

    @property
    def skipped_regions(self) -> list[str]:
        return [
            item.region_id
            for item in self.skipped
            if item.kind == SkipReason.MALFORMED_BOUNDARY
        ]


class AdjacencyResolver:
    """Determines which regions neighbour each other.

    Example:
        resolver = AdjacencyResolver(RoomGraphSettings())
        result = resolver.resolve(regions)
        result.graph.neighbours("kitchen")
    """

    def __init__(
        self,
        settings: RoomGraphSettings | None = None,
        oracle: ContainmentOracle | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the resolver.

        Args:
            settings: Roomgraph settings (defaults if None)
            oracle: Containment test; a PolygonContainment is created per run if None
            logger: Bound logger (module logger if None)
        """
        self.settings = settings or RoomGraphSettings()
        self.oracle = oracle
        self.logger = logger or structlog.get_logger("roomgraph")

    def resolve(self, regions: Iterable[Region]) -> ResolutionResult:
        """Resolve adjacency for a set of regions.

        Args:
            regions: Regions with unique ids; order fixes tie-breaking

        Returns:
            ResolutionResult with the graph, skipped items and statistics
        """
        regions = list(regions)
        resolution_logger = ResolutionLogger(self.logger)
        stats = resolution_logger.stats
        stats.start_time = time.time()
        skipped: list[SkippedItem] = []

        self.logger.info("Starting adjacency resolution", region_count=len(regions))

        # Stages 1 and 2: extract and tessellate per region
        stage_start = time.time()
        extractor = BoundaryExtractor(self.settings.geometry, self.logger)
        tessellator = SegmentTessellator(self.settings.geometry)

        valid_ids: list[str] = []
        tessellations: list[Tessellation] = []
        for region in regions:
            try:
                polygons = extractor.extract(region)
                region_tessellations = [
                    t for polygon in polygons for t in tessellator.tessellate_polygon(polygon)
                ]
            except (MalformedBoundaryError, TessellationError) as e:
                resolution_logger.log_region_skipped(region.id, e)
                skipped.append(
                    SkippedItem(
                        kind=SkipReason.MALFORMED_BOUNDARY,
                        region_id=region.id,
                        reason=getattr(e, "reason", str(e)),
                        loop_index=getattr(e, "loop_index", None),
                    )
                )
                continue

            valid_ids.append(region.id)
            tessellations.extend(region_tessellations)
            resolution_logger.log_region_extracted(
                region.id, len(polygons), len(region_tessellations)
            )

        resolution_logger.log_stage_complete(
            "tessellate",
            (time.time() - stage_start) * 1000,
            regions=len(valid_ids),
            segments=len(tessellations),
        )

        # Stages 3 and 4: nearest-segment matching
        stage_start = time.time()
        resolver_config = self.settings.resolver
        matcher = NearestSegmentMatcher(
            cell_size=(
                resolver_config.get_index_cell_size()
                if resolver_config.use_candidate_index
                else None
            ),
            max_workers=self.settings.processing.max_workers,
            min_segments_per_worker=self.settings.processing.min_segments_per_worker,
            logger=self.logger,
        )
        pairings = matcher.match(tessellations)
        resolution_logger.log_pairings(len(tessellations), len(pairings))
        resolution_logger.log_stage_complete("match", (time.time() - stage_start) * 1000)

        # Stage 5: classification
        stage_start = time.time()
        oracle = self.oracle or PolygonContainment(self.settings.geometry)
        by_id = {region.id: region for region in regions}
        classifier = AdjacencyClassifier(oracle, by_id, resolver_config, self.logger)
        classification = classifier.classify(pairings)
        skipped.extend(classification.ambiguous)
        resolution_logger.log_classification(
            confirmed=len(classification.confirmed),
            discarded=len(classification.discarded),
            ambiguous=len(classification.ambiguous),
        )
        resolution_logger.log_stage_complete("classify", (time.time() - stage_start) * 1000)

        # Stage 6: graph
        graph = AdjacencyGraphBuilder().build(valid_ids, classification.confirmed)

        stats.end_time = time.time()
        self.logger.info(
            "Resolution complete",
            regions=stats.region_count,
            segments=stats.segment_count,
            confirmed=stats.confirmed_count,
            skipped_regions=stats.skipped_regions,
            skipped_segments=stats.skipped_segments,
            duration_seconds=round(stats.duration_seconds, 3),
        )

        return ResolutionResult(graph=graph, skipped=skipped, stats=stats)
