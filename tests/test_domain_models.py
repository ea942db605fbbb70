"""Tests for domain models to verify they work correctly."""

import math

import pytest

from roomgraph.domain import (
    Adjacency,
    AdjacencyGraph,
    ArcCurve,
    BezierCurve,
    BoundaryLoop,
    LineCurve,
    Pairing,
    Point,
    Region,
    SkippedItem,
    SkipReason,
    Tessellation,
)


def _tess(region_id: str, x: float, y: float, element: str | None = None) -> Tessellation:
    return Tessellation(
        region_id=region_id,
        loop_index=0,
        segment_index=0,
        points=(Point(x, y - 1), Point(x, y + 1)),
        midpoint=Point(x, y),
        tangent=(0.0, 1.0),
        normal=(-1.0, 0.0),
        element=element,
    )


class TestPoint:
    """Tests for Point class."""

    def test_point_creation(self) -> None:
        """Test basic point creation."""
        p = Point(100.0, 200.0)
        assert p.x == 100.0
        assert p.y == 200.0

    def test_point_to_tuple(self) -> None:
        """Test point to tuple conversion."""
        assert Point(1.0, 2.0).to_tuple() == (1.0, 2.0)

    def test_distance_and_offset(self) -> None:
        """Distance is Euclidean; offset scales the direction vector."""
        assert Point(0.0, 0.0).distance_to(Point(3.0, 4.0)) == 5.0
        assert Point(1.0, 1.0).offset(0.0, -1.0, 2.0) == Point(1.0, -1.0)

    def test_point_immutable(self) -> None:
        """Test that point is immutable."""
        p = Point(100.0, 200.0)
        with pytest.raises(AttributeError):
            p.x = 300.0  # type: ignore


class TestCurves:
    """Tests for curve types."""

    def test_line_evaluate_and_length(self) -> None:
        """Line evaluates linearly between its endpoints."""
        line = LineCurve(Point(0, 0), Point(10, 0))
        assert line.is_linear
        assert line.evaluate(0.25) == Point(2.5, 0.0)
        assert line.length() == 10.0

    def test_arc_endpoints_follow_angles(self) -> None:
        """Arc start and end are derived from center, radius and angles."""
        arc = ArcCurve(Point(0, 0), 2.0, 0.0, math.pi / 2)
        assert not arc.is_linear
        assert arc.start.x == pytest.approx(2.0)
        assert arc.start.y == pytest.approx(0.0)
        assert arc.end.x == pytest.approx(0.0, abs=1e-12)
        assert arc.end.y == pytest.approx(2.0)
        assert arc.length() == pytest.approx(math.pi)

    def test_clockwise_arc(self) -> None:
        """Arc with end_angle < start_angle sweeps clockwise."""
        arc = ArcCurve(Point(0, 0), 1.0, math.pi / 2, 0.0)
        mid = arc.evaluate(0.5)
        assert arc.sweep < 0
        assert mid.x == pytest.approx(math.sqrt(0.5))
        assert mid.y == pytest.approx(math.sqrt(0.5))

    def test_bezier_requires_three_or_four_points(self) -> None:
        """Bezier curves reject unsupported degrees."""
        with pytest.raises(ValueError, match="3 or 4 control points"):
            BezierCurve((Point(0, 0), Point(1, 1)))

    def test_bezier_evaluate_midpoint(self) -> None:
        """Quadratic Bezier at t=0.5 is the De Casteljau midpoint."""
        curve = BezierCurve((Point(0, 0), Point(5, 10), Point(10, 0)))
        assert curve.evaluate(0.5) == Point(5.0, 5.0)
        assert curve.start == Point(0, 0)
        assert curve.end == Point(10, 0)


class TestRegion:
    """Tests for Region and BoundaryLoop."""

    def test_from_polygon_builds_closed_loop(self) -> None:
        """Polygon shorthand creates one line per edge, closing the loop."""
        region = Region.from_polygon(
            "A", [Point(0, 0), Point(4, 0), Point(4, 3)], elements=["a", "b", "c"]
        )
        loop = region.loops[0]
        assert len(loop) == 3
        assert loop.segments[2].start == Point(4, 3)
        assert loop.segments[2].end == Point(0, 0)
        assert [s.element for s in loop.segments] == ["a", "b", "c"]
        assert region.segment_count == 3

    def test_from_polygon_element_count_mismatch(self) -> None:
        """Element list must match the edge count."""
        with pytest.raises(ValueError, match="edge elements"):
            BoundaryLoop.from_polygon([Point(0, 0), Point(1, 0), Point(1, 1)], elements=["a"])

    def test_per_edge_thickness(self) -> None:
        """Thickness may be given per edge."""
        loop = BoundaryLoop.from_polygon(
            [Point(0, 0), Point(1, 0), Point(1, 1)], thickness=[0.1, 0.2, 0.3]
        )
        assert [s.thickness for s in loop.segments] == [0.1, 0.2, 0.3]

    def test_display_name(self) -> None:
        """Display name includes the id when a name is set."""
        assert Region("101", name="Office").display_name == "Office (101)"
        assert Region("102").display_name == "102"


class TestAdjacencyGraph:
    """Tests for AdjacencyGraph."""

    def test_unknown_region_has_no_neighbours(self) -> None:
        """Querying an unknown region returns an empty set."""
        assert AdjacencyGraph().neighbours("missing") == frozenset()

    def test_to_dict_sorted(self) -> None:
        """Serialization sorts regions and neighbours."""
        graph = AdjacencyGraph(neighbour_map={"B": {"C", "A"}, "A": set()})
        assert graph.to_dict() == {"A": [], "B": ["A", "C"]}
        assert list(graph.to_dict()) == ["A", "B"]

    def test_separating_elements(self) -> None:
        """Elements are listed once per direction, in confirmation order."""
        pairing = Pairing(_tess("A", 10, 5, "W1"), _tess("B", 10, 5, "W9"), 0.0)
        again = Pairing(_tess("A", 10, 7, "W1"), _tess("B", 10, 7, "W9"), 0.0)
        graph = AdjacencyGraph(
            neighbour_map={"A": {"B"}, "B": set()},
            adjacencies=[
                Adjacency(pairing, 1, Point(10.1, 5)),
                Adjacency(again, 1, Point(10.1, 7)),
            ],
        )
        assert graph.separating_elements("A", "B") == ["W1"]
        assert graph.separating_elements("B", "A") == []
        assert not graph.is_symmetric("A", "B")

    def test_skipped_item_to_dict(self) -> None:
        """Skipped items serialize their kind in lowercase."""
        item = SkippedItem(SkipReason.MALFORMED_BOUNDARY, "D", "too few segments", 0)
        assert item.to_dict() == {
            "kind": "malformed_boundary",
            "region": "D",
            "loop": 0,
            "segment": None,
            "reason": "too few segments",
        }
