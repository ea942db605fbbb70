"""End-to-end tests for the adjacency resolver."""

import pytest

from roomgraph.config import ProcessingConfig, ResolverConfig, RoomGraphSettings
from roomgraph.core import AdjacencyResolver
from roomgraph.domain import (
    BoundaryLoop,
    BoundarySegment,
    LineCurve,
    Point,
    Region,
    SkipReason,
)


def _settings(max_thickness=1.0, **resolver_options):
    return RoomGraphSettings(
        resolver=ResolverConfig(
            max_partition_thickness=max_thickness,
            probe_offset_distance=0.002,
            **resolver_options,
        )
    )


@pytest.fixture
def corridor_layout(rect):
    """Rooms A and C separated by a 0.4 wide strip B.

    A's east side is split in two at y=5, and so is C's west side.
    """
    a = Region.from_polygon(
        "A", [Point(0, 0), Point(10, 0), Point(10, 5), Point(10, 10), Point(0, 10)]
    )
    b = rect("B", 10, 0, 10.4, 10)
    c = Region.from_polygon(
        "C",
        [Point(10.4, 0), Point(20.4, 0), Point(20.4, 10), Point(10.4, 10), Point(10.4, 5)],
    )
    return [a, b, c]


class NeverInside:
    """Containment test that rejects every point."""

    def contains_point(self, region, point):
        return False


class TestTouchingRooms:
    """Two rooms sharing one wall."""

    def test_symmetric_adjacency(self, touching_pair, settings):
        """Each room lists the other."""
        result = AdjacencyResolver(settings).resolve(touching_pair)
        assert result.graph.to_dict() == {"A": ["B"], "B": ["A"]}
        assert result.graph.is_symmetric("A", "B")
        assert result.skipped == []

    def test_separating_elements(self, touching_pair, settings):
        """The shared wall is reported from both sides."""
        graph = AdjacencyResolver(settings).resolve(touching_pair).graph
        assert graph.separating_elements("A", "B") == ["W1"]
        assert graph.separating_elements("B", "A") == ["W1"]

    def test_probe_direction_recorded(self, touching_pair, settings):
        """Both shared segments needed the flipped normal."""
        result = AdjacencyResolver(settings).resolve(touching_pair)
        assert [(a.region_id, a.normal_sign) for a in result.adjacencies] == [
            ("A", -1),
            ("B", -1),
        ]

    def test_room_narrower_than_recorded_wall(self, rect, settings):
        """A neighbour thinner than the wall thickness is still reached from both sides."""
        regions = [
            rect("A", 0, 0, 10, 10, thickness=0.5),
            rect("B", 10, 0, 10.4, 10, thickness=0.5),
        ]
        result = AdjacencyResolver(settings).resolve(regions)
        assert result.graph.to_dict() == {"A": ["B"], "B": ["A"]}
        assert result.skipped == []

    def test_positions_survive_dropped_segments(self, rect, settings):
        """Adjacencies name the segment by its place in the supplied loop."""
        a = Region.from_polygon(
            "A", [Point(0, 0), Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 10)]
        )
        result = AdjacencyResolver(settings).resolve([a, rect("B", 10, 0, 20, 10)])
        assert result.graph.to_dict() == {"A": ["B"], "B": ["A"]}
        keys = [adj.pairing.source.key for adj in result.adjacencies if adj.region_id == "A"]
        assert keys == [("A", 0, 2)]

    def test_resolution_is_repeatable(self, touching_pair, settings):
        """Running twice on the same input gives the same graph."""
        resolver = AdjacencyResolver(settings)
        first = resolver.resolve(touching_pair)
        second = resolver.resolve(touching_pair)
        assert first.graph.to_dict() == second.graph.to_dict()
        assert [a.pairing.source.key for a in first.adjacencies] == [
            a.pairing.source.key for a in second.adjacencies
        ]

    def test_index_and_brute_force_agree(self, touching_pair):
        """Disabling the candidate index does not change the outcome."""
        indexed = AdjacencyResolver(_settings()).resolve(touching_pair)
        brute = AdjacencyResolver(_settings(use_candidate_index=False)).resolve(touching_pair)
        assert indexed.graph.to_dict() == brute.graph.to_dict()

    def test_parallel_matching(self, touching_pair):
        """Worker processes give the same graph as an in-process run."""
        settings = RoomGraphSettings(
            resolver=_settings().resolver,
            processing=ProcessingConfig(max_workers=2, min_segments_per_worker=1),
        )
        result = AdjacencyResolver(settings).resolve(touching_pair)
        assert result.graph.to_dict() == {"A": ["B"], "B": ["A"]}

    def test_stats(self, touching_pair, settings):
        """Statistics count every stage."""
        stats = AdjacencyResolver(settings).resolve(touching_pair).stats
        assert stats.region_count == 2
        assert stats.segment_count == 8
        assert stats.pairing_count == 8
        assert stats.confirmed_count == 2
        assert stats.discarded_count == 6
        assert set(stats.stage_timings_ms) == {"tessellate", "match", "classify"}
        assert stats.duration_seconds >= 0.0


class TestThreshold:
    """Partition thickness threshold."""

    def test_gap_beyond_threshold(self, rect):
        """Rooms 2.0 apart are not neighbours but both appear in the graph."""
        regions = [rect("A", 0, 0, 10, 10), rect("B", 12, 0, 22, 10)]
        result = AdjacencyResolver(_settings()).resolve(regions)
        assert result.graph.to_dict() == {"A": [], "B": []}

    def test_distance_equal_to_threshold_rejected(self, rect):
        """A pairing exactly at the threshold is not an adjacency."""
        regions = [
            rect("A", 0, 0, 10, 10, thickness=1.0),
            rect("B", 11, 0, 21, 10, thickness=1.0),
        ]
        result = AdjacencyResolver(_settings()).resolve(regions)
        assert result.graph.to_dict() == {"A": [], "B": []}

    def test_distance_below_threshold_accepted(self, rect):
        """A pairing just under the threshold is confirmed."""
        regions = [
            rect("A", 0, 0, 10, 10, thickness=0.999),
            rect("B", 10.999, 0, 20.999, 10, thickness=0.999),
        ]
        result = AdjacencyResolver(_settings()).resolve(regions)
        assert result.graph.to_dict() == {"A": ["B"], "B": ["A"]}


class TestIntermediateRegion:
    """A thin region between two rooms."""

    def test_no_adjacency_across_intermediate(self, corridor_layout):
        """Probes land in B, so A and C are never neighbours."""
        result = AdjacencyResolver(_settings(1.0)).resolve(corridor_layout)
        assert result.graph.to_dict() == {"A": [], "B": [], "C": []}

        ambiguous = [s for s in result.skipped if s.kind == SkipReason.AMBIGUOUS_CONTAINMENT]
        assert [(s.region_id, s.segment_index) for s in ambiguous] == [
            ("A", 1),
            ("A", 2),
            ("C", 3),
            ("C", 4),
        ]

    def test_directions_resolved_independently(self, corridor_layout):
        """With a wider threshold B finds both rooms but they do not find B."""
        graph = AdjacencyResolver(_settings(3.0)).resolve(corridor_layout).graph
        assert graph.to_dict() == {"A": [], "B": ["A", "C"], "C": []}
        assert "C" not in graph.neighbours("A")
        assert not graph.is_symmetric("A", "B")


class TestMalformedInput:
    """Regions that cannot be resolved."""

    def test_degenerate_region_excluded(self, settings, touching_pair):
        """A two-segment region is skipped without affecting the others."""
        degenerate = Region(
            "D",
            (
                BoundaryLoop(
                    (
                        BoundarySegment(LineCurve(Point(30, 0), Point(31, 0))),
                        BoundarySegment(LineCurve(Point(31, 0), Point(30, 0))),
                    )
                ),
            ),
        )
        result = AdjacencyResolver(settings).resolve([*touching_pair, degenerate])

        assert "D" not in result.graph
        assert result.skipped_regions == ["D"]
        assert result.skipped[0].kind == SkipReason.MALFORMED_BOUNDARY
        assert result.skipped[0].loop_index == 0
        assert result.graph.to_dict() == {"A": ["B"], "B": ["A"]}
        assert result.stats.skipped_regions == 1

    def test_region_without_loops_included(self, touching_pair, settings):
        """An unbounded region is in the graph with no neighbours."""
        result = AdjacencyResolver(settings).resolve([*touching_pair, Region("E")])
        assert result.graph.neighbours("E") == frozenset()
        assert "E" in result.graph
        assert result.skipped_regions == []

    def test_empty_input(self, settings):
        """No regions gives an empty graph."""
        result = AdjacencyResolver(settings).resolve([])
        assert len(result.graph) == 0
        assert result.skipped == []


class TestContainment:
    """Containment-specific behaviour."""

    def test_room_inside_hole(self, rect, settings):
        """A column filling a hole neighbours the surrounding hall."""
        outer = rect("Hall", 0, 0, 10, 10).loops[0]
        hole = BoundaryLoop.from_polygon([Point(4, 4), Point(4, 6), Point(6, 6), Point(6, 4)])
        hall = Region("Hall", (outer, hole))
        column = rect("Column", 4, 4, 6, 6)

        graph = AdjacencyResolver(settings).resolve([hall, column]).graph
        assert graph.to_dict() == {"Column": ["Hall"], "Hall": ["Column"]}

    def test_custom_oracle(self, touching_pair, settings):
        """A supplied oracle decides containment."""
        result = AdjacencyResolver(settings, oracle=NeverInside()).resolve(touching_pair)
        assert result.graph.to_dict() == {"A": [], "B": []}
        assert [(s.region_id, s.segment_index) for s in result.skipped] == [("A", 1), ("B", 3)]
