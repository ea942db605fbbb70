"""Adjacency types produced while resolving neighbouring regions.

Tessellations and pairings are scratch structures rebuilt on every run. The
AdjacencyGraph is the result handed back to the caller.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any

from roomgraph.domain.curve import Point


@dataclass(frozen=True)
class Tessellation:
    """Piecewise-linear sampling of one boundary segment.

    The normal is the tangent rotated 90 degrees counter-clockwise. Whether it
    points into or out of the owning region is not known until the classifier
    probes across it.

    Attributes:
        region_id: Region owning the segment
        loop_index: Loop index within the region
        segment_index: Segment index within the loop
        points: Polyline approximation, start to end
        midpoint: Geometric midpoint of the polyline's center points
        tangent: Unit tangent (dx, dy) at the midpoint
        normal: Unit normal (dx, dy), sign unresolved
        element: Separating element reference carried by the segment
        thickness: Separating element thickness
    """

    region_id: str
    loop_index: int
    segment_index: int
    points: tuple[Point, ...]
    midpoint: Point
    tangent: tuple[float, float]
    normal: tuple[float, float]
    element: Any = None
    thickness: float = 0.0

    @property
    def key(self) -> tuple[str, int, int]:
        """Unique (region, loop, segment) key."""
        return (self.region_id, self.loop_index, self.segment_index)


@dataclass(frozen=True)
class Pairing:
    """A segment and its nearest segment owned by a different region."""

    source: Tessellation
    target: Tessellation
    distance: float


@dataclass(frozen=True)
class Adjacency:
    """A pairing confirmed by the containment probe.

    Attributes:
        pairing: The confirmed pairing
        normal_sign: +1 if the unflipped normal reached the target region, -1 if flipped
        probe: Probe point found inside the target region
    """

    pairing: Pairing
    normal_sign: int
    probe: Point

    @property
    def region_id(self) -> str:
        return self.pairing.source.region_id

    @property
    def neighbour_id(self) -> str:
        return self.pairing.target.region_id

    @property
    def element(self) -> Any:
        """Separating element on the source side."""
        return self.pairing.source.element

    @property
    def neighbour_element(self) -> Any:
        """Separating element on the target side."""
        return self.pairing.target.element


class SkipReason(Enum):
    """Why a region or segment was left out of the graph."""

    MALFORMED_BOUNDARY = auto()
    AMBIGUOUS_CONTAINMENT = auto()


@dataclass(frozen=True)
class SkippedItem:
    """A region or segment excluded from resolution, with the reason."""

    kind: SkipReason
    region_id: str
    reason: str
    loop_index: int | None = None
    segment_index: int | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.name.lower(),
            "region": self.region_id,
            "loop": self.loop_index,
            "segment": self.segment_index,
            "reason": self.reason,
        }


@dataclass
class AdjacencyGraph:
    """Mapping from region id to the ids of its neighbours.

    Each direction is resolved independently, so ``b in graph.neighbours(a)`` does
    not imply ``a in graph.neighbours(b)``.

    Attributes:
        neighbour_map: Region id to set of neighbouring region ids
        adjacencies: Confirmed adjacencies backing the map
    """

    neighbour_map: dict[str, set[str]] = field(default_factory=dict)
    adjacencies: list[Adjacency] = field(default_factory=list)

    def __contains__(self, region_id: object) -> bool:
        return region_id in self.neighbour_map

    def __iter__(self) -> Iterator[str]:
        return iter(self.neighbour_map)

    def __len__(self) -> int:
        return len(self.neighbour_map)

    def add_region(self, region_id: str) -> None:
        self.neighbour_map.setdefault(region_id, set())

    def neighbours(self, region_id: str) -> frozenset[str]:
        """Neighbours of a region (empty if the region is unknown)."""
        return frozenset(self.neighbour_map.get(region_id, ()))

    def is_symmetric(self, a: str, b: str) -> bool:
        """True if each region lists the other as a neighbour."""
        return b in self.neighbours(a) and a in self.neighbours(b)

    def separating_elements(self, region_id: str, neighbour_id: str) -> list[Any]:
        """Distinct elements on the region's side between it and the neighbour.

        Elements are returned in the order their adjacencies were confirmed.
        Segments without an element reference are not listed.
        """
        found: list[Any] = []
        for adjacency in self.adjacencies:
            if adjacency.region_id != region_id or adjacency.neighbour_id != neighbour_id:
                continue
            element = adjacency.element
            if element is not None and element not in found:
                found.append(element)
        return found

    def to_dict(self) -> dict[str, list[str]]:
        """Serialize with sorted region and neighbour ids."""
        return {
            region_id: sorted(self.neighbour_map[region_id])
            for region_id in sorted(self.neighbour_map)
        }
