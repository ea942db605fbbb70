"""Unit tests for the candidate grid index."""

import pytest

from roomgraph.core.index import CandidateIndex
from roomgraph.domain import Point


def _record_rings(index: CandidateIndex) -> list[int]:
    """Record the ring number of every ring the index walks."""
    scanned: list[int] = []
    ring = index._ring

    def recording_ring(ci, cj, k):
        scanned.append(k)
        return ring(ci, cj, k)

    index._ring = recording_ring
    return scanned


class TestCandidateIndex:
    """Tests for CandidateIndex."""

    def test_rejects_non_positive_cell_size(self):
        """Cell size must be positive."""
        with pytest.raises(ValueError, match="cell_size"):
            CandidateIndex([], 0.0)

    def test_empty_index(self):
        """An empty index finds nothing."""
        index = CandidateIndex([], 1.0)
        assert len(index) == 0
        assert index.nearest(Point(0, 0)) is None
        assert index.within(Point(0, 0), 10.0) == []

    def test_nearest_excludes_region(self):
        """Segments of the excluded region are never returned."""
        entries = [("A", Point(0, 0)), ("A", Point(0.1, 0)), ("B", Point(3, 0))]
        index = CandidateIndex(entries, 1.0)
        position, distance = index.nearest(Point(0, 0), exclude_region="A")
        assert position == 2
        assert distance == pytest.approx(3.0)

    def test_only_own_region(self):
        """No candidate when every segment belongs to the excluded region."""
        index = CandidateIndex([("A", Point(0, 0)), ("A", Point(5, 5))], 1.0)
        assert index.nearest(Point(0, 0), exclude_region="A") is None

    def test_tie_goes_to_lowest_position(self):
        """Equidistant candidates resolve to the earliest input position."""
        entries = [("A", Point(0, 0)), ("B", Point(1, 0)), ("C", Point(-1, 0))]
        assert CandidateIndex(entries, 0.5).nearest(Point(0, 0), "A") == (1, 1.0)

        reordered = [("A", Point(0, 0)), ("C", Point(-1, 0)), ("B", Point(1, 0))]
        assert CandidateIndex(reordered, 0.5).nearest(Point(0, 0), "A") == (1, 1.0)

    def test_nearest_beyond_first_rings(self):
        """A distant winner is found when nearby cells are empty."""
        entries = [("A", Point(0, 0)), ("B", Point(40, 30))]
        position, distance = CandidateIndex(entries, 1.0).nearest(Point(0, 0), "A")
        assert position == 1
        assert distance == pytest.approx(50.0)

    def test_closer_point_in_outer_ring_wins(self):
        """Ring search does not stop at the first hit if a closer one may exist."""
        # B shares the query cell but C, one ring out, is closer
        entries = [("A", Point(0.1, 0.1)), ("B", Point(0.1, 0.9)), ("C", Point(1.05, 0.1))]
        position, distance = CandidateIndex(entries, 1.0).nearest(Point(0.9, 0.1), "A")
        assert position == 2
        assert distance == pytest.approx(0.15)

    def test_within_radius(self):
        """Radius queries return sorted positions inside the radius."""
        entries = [("A", Point(5, 5)), ("B", Point(0, 0)), ("C", Point(1, 1)), ("D", Point(0, 2))]
        index = CandidateIndex(entries, 1.0)
        assert index.within(Point(0, 0), 2.0) == [1, 2, 3]
        assert index.within(Point(0, 0), 1.5) == [1, 2]

    def test_no_ring_scan_without_candidates(self):
        """A region alone in the index answers without walking the grid."""
        index = CandidateIndex([("A", Point(0, 0)), ("A", Point(1000, 1000))], 1.0)
        scanned = _record_rings(index)

        assert index.nearest(Point(0, 0), exclude_region="A") is None
        assert scanned == []

    def test_ring_scan_limited_to_other_regions(self):
        """Rings stop at the other regions' cells, not the far end of the grid."""
        entries = [("A", Point(0.5, 0.5)), ("A", Point(1000, 1000)), ("B", Point(2.5, 0.5))]
        index = CandidateIndex(entries, 1.0)
        scanned = _record_rings(index)

        assert index.nearest(Point(0.5, 0.5), exclude_region="A") == (2, 2.0)
        assert scanned == [0, 1, 2]
