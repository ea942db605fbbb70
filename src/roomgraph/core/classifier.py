"""Adjacency classification.

Decides whether a nearest-segment pairing is a real adjacency. The pairing must be
closer than the thickest plausible partition, and a probe point stepped across the
source segment must land inside the target region. Which way the segment normal
points is not known in advance, so both signs are tried.
"""

from dataclasses import dataclass, field

import structlog

from roomgraph.config import ResolverConfig
from roomgraph.core.containment import ContainmentOracle
from roomgraph.domain import Adjacency, Pairing, Point, Region, SkippedItem, SkipReason


@dataclass
class Classification:
    """Outcome of classifying a batch of pairings.

    Attributes:
        confirmed: Pairings confirmed by the containment probe
        discarded: Pairings at or beyond the partition thickness threshold
        ambiguous: Pairings whose probe never reached the target region
    """

    confirmed: list[Adjacency] = field(default_factory=list)
    discarded: list[Pairing] = field(default_factory=list)
    ambiguous: list[SkippedItem] = field(default_factory=list)


class AdjacencyClassifier:
    """Validates pairings against the thickness threshold and containment.

    The probe starts at the source midpoint and steps along the normal by the
    source segment's partition thickness plus the probe offset, which places it
    just past the partition on the far side. The step never exceeds the pairing
    distance plus the offset, so a neighbour narrower than the recorded
    thickness is not stepped over.
    """

    def __init__(
        self,
        oracle: ContainmentOracle,
        regions: dict[str, Region],
        config: ResolverConfig | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the classifier.

        Args:
            oracle: Containment test for regions
            regions: Regions by id, used to hand the oracle full region objects
            config: Resolver thresholds
            logger: Bound logger
        """
        self.oracle = oracle
        self.regions = regions
        self.config = config or ResolverConfig()
        self.logger = logger or structlog.get_logger("roomgraph")

    def probe_point(self, pairing: Pairing, sign: int) -> Point:
        """Probe point across the source segment for the given normal sign."""
        source = pairing.source
        nx, ny = source.normal
        reach = min(source.thickness, pairing.distance) + self.config.probe_offset_distance
        return source.midpoint.offset(sign * nx, sign * ny, reach)

    def classify_pairing(self, pairing: Pairing) -> Adjacency | SkippedItem | None:
        """Classify a single pairing.

        Returns:
            Adjacency if confirmed, SkippedItem if the probe is ambiguous, or
            None if the pairing is beyond the thickness threshold
        """
        if pairing.distance >= self.config.max_partition_thickness:
            return None

        source = pairing.source
        own = self.regions[source.region_id]
        target = self.regions[pairing.target.region_id]

        for sign in (1, -1):
            probe = self.probe_point(pairing, sign)
            if self.oracle.contains_point(target, probe):
                return Adjacency(pairing=pairing, normal_sign=sign, probe=probe)
            if sign == 1:
                self.logger.debug(
                    "Flipping probe direction",
                    region=source.region_id,
                    segment=source.segment_index,
                    landed_in_source=self.oracle.contains_point(own, probe),
                )

        return SkippedItem(
            kind=SkipReason.AMBIGUOUS_CONTAINMENT,
            region_id=source.region_id,
            reason=(
                f"neither probe direction reaches region '{target.id}' "
                f"at distance {pairing.distance:.6g}"
            ),
            loop_index=source.loop_index,
            segment_index=source.segment_index,
        )

    def classify(self, pairings: list[Pairing]) -> Classification:
        """Classify pairings in order.

        Args:
            pairings: Pairings from the matcher

        Returns:
            Classification splitting pairings into confirmed, discarded and ambiguous
        """
        result = Classification()
        for pairing in pairings:
            outcome = self.classify_pairing(pairing)
            if outcome is None:
                result.discarded.append(pairing)
            elif isinstance(outcome, SkippedItem):
                self.logger.info(
                    "Ambiguous containment",
                    region=outcome.region_id,
                    loop=outcome.loop_index,
                    segment=outcome.segment_index,
                    neighbour=pairing.target.region_id,
                )
                result.ambiguous.append(outcome)
            else:
                result.confirmed.append(outcome)
        return result
