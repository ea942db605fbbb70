"""Uniform grid index over segment midpoints.

The index narrows nearest-segment searches to nearby grid cells. It never changes
which segment wins: ring search continues until no unscanned cell can hold a
closer midpoint, and ties go to the lowest input position, exactly as a
front-to-back linear scan with a strict ``<`` would pick them.
"""

import math
from collections import defaultdict

from roomgraph.domain import Point

# (region_id, midpoint) per indexed segment, addressed by input position
IndexEntry = tuple[str, Point]

# (min_i, max_i, min_j, max_j) in cell coordinates
CellBounds = tuple[int, int, int, int]


def _extend(bounds: CellBounds | None, cell: tuple[int, int]) -> CellBounds:
    i, j = cell
    if bounds is None:
        return (i, i, j, j)
    min_i, max_i, min_j, max_j = bounds
    return (min(min_i, i), max(max_i, i), min(min_j, j), max(max_j, j))


class CandidateIndex:
    """Read-only grid of segment midpoints.

    Example:
        index = CandidateIndex(entries, cell_size=1.0)
        hit = index.nearest(Point(0.0, 0.0), exclude_region="A")
    """

    def __init__(self, entries: list[IndexEntry], cell_size: float) -> None:
        """Build the grid.

        Args:
            entries: (region_id, midpoint) per segment in input order
            cell_size: Grid cell edge length
        """
        if cell_size <= 0:
            raise ValueError("cell_size must be positive")

        self.entries = entries
        self.cell_size = cell_size
        self._cells: dict[tuple[int, int], list[int]] = defaultdict(list)
        # (min_i, max_i, min_j, max_j) of occupied cells per region
        self._region_bounds: dict[str, CellBounds] = {}

        for position, (region_id, midpoint) in enumerate(entries):
            cell = self._cell_of(midpoint)
            self._cells[cell].append(position)
            bounds = self._region_bounds.get(region_id)
            self._region_bounds[region_id] = _extend(bounds, cell)

        self._excluding: dict[str | None, CellBounds | None] = {}
        self._bounds = self._bounds_excluding(None)

    def __len__(self) -> int:
        return len(self.entries)

    def _cell_of(self, point: Point) -> tuple[int, int]:
        return (
            math.floor(point.x / self.cell_size),
            math.floor(point.y / self.cell_size),
        )

    def _ring(self, ci: int, cj: int, k: int) -> list[tuple[int, int]]:
        """Cells at Chebyshev distance exactly k from (ci, cj)."""
        if k == 0:
            return [(ci, cj)]
        cells = []
        for i in range(ci - k, ci + k + 1):
            cells.append((i, cj - k))
            cells.append((i, cj + k))
        for j in range(cj - k + 1, cj + k):
            cells.append((ci - k, j))
            cells.append((ci + k, j))
        return cells

    def _bounds_excluding(self, exclude_region: str | None) -> CellBounds | None:
        """Cell bounds over every region except exclude_region."""
        if exclude_region in self._excluding:
            return self._excluding[exclude_region]
        merged: CellBounds | None = None
        for region_id, (min_i, max_i, min_j, max_j) in self._region_bounds.items():
            if region_id == exclude_region:
                continue
            merged = _extend(_extend(merged, (min_i, min_j)), (max_i, max_j))
        self._excluding[exclude_region] = merged
        return merged

    def _max_ring(self, ci: int, cj: int, bounds: CellBounds) -> int:
        min_i, max_i, min_j, max_j = bounds
        return max(abs(ci - min_i), abs(ci - max_i), abs(cj - min_j), abs(cj - max_j))

    def within(self, point: Point, radius: float) -> list[int]:
        """Positions of segments whose midpoint lies within radius of point.

        Returns:
            Matching positions in ascending (input) order
        """
        if self._bounds is None:
            return []
        min_i, max_i, min_j, max_j = self._bounds

        lo_i, lo_j = self._cell_of(Point(point.x - radius, point.y - radius))
        hi_i, hi_j = self._cell_of(Point(point.x + radius, point.y + radius))

        found: list[int] = []
        for i in range(max(lo_i, min_i), min(hi_i, max_i) + 1):
            for j in range(max(lo_j, min_j), min(hi_j, max_j) + 1):
                for position in self._cells.get((i, j), ()):
                    if self.entries[position][1].distance_to(point) <= radius:
                        found.append(position)
        found.sort()
        return found

    def nearest(self, point: Point, exclude_region: str | None = None) -> tuple[int, float] | None:
        """Nearest indexed midpoint belonging to a region other than exclude_region.

        Args:
            point: Query point
            exclude_region: Region whose segments are ignored

        Returns:
            (position, distance) of the winner, or None if there is no candidate
        """
        # Rings beyond the other regions' cells can hold no candidate
        bounds = self._bounds_excluding(exclude_region)
        if bounds is None:
            return None

        ci, cj = self._cell_of(point)
        best: tuple[int, float] | None = None

        for k in range(self._max_ring(ci, cj, bounds) + 1):
            for cell in self._ring(ci, cj, k):
                for position in self._cells.get(cell, ()):
                    region_id, midpoint = self.entries[position]
                    if region_id == exclude_region:
                        continue
                    d = midpoint.distance_to(point)
                    if best is None or d < best[1] or (d == best[1] and position < best[0]):
                        best = (position, d)

            # Anything in ring k+1 or beyond is at least k cells away
            if best is not None and best[1] < k * self.cell_size:
                break

        return best
