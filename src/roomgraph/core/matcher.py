"""Nearest-segment matching across regions.

For every segment, finds the segment of a different region whose midpoint is
closest to its own midpoint. Matching can be spread over worker processes;
chunk results are merged in input order so the outcome matches a serial run.
"""

import os
from concurrent.futures import ProcessPoolExecutor

import structlog

from roomgraph.core.index import CandidateIndex, IndexEntry
from roomgraph.domain import Pairing, Point, Tessellation

# (target position, distance) or None for each source segment
MatchResult = tuple[int, float] | None


def _brute_force_nearest(entries: list[IndexEntry], position: int) -> MatchResult:
    region_id, midpoint = entries[position]
    best: MatchResult = None
    for other, (other_region, other_mid) in enumerate(entries):
        if other_region == region_id:
            continue
        d = midpoint.distance_to(other_mid)
        # Strict comparison keeps the first encountered on ties
        if best is None or d < best[1]:
            best = (other, d)
    return best


def match_chunk(
    entry_dicts: list[tuple[str, float, float]],
    start: int,
    stop: int,
    cell_size: float | None,
) -> list[MatchResult]:
    """Match the segments at positions [start, stop).

    Top-level function designed to be picklable for use with ProcessPoolExecutor.

    Args:
        entry_dicts: (region_id, x, y) midpoint per segment, all segments
        start: First position to match
        stop: One past the last position to match
        cell_size: Grid cell size, or None for all-pairs search

    Returns:
        One MatchResult per position in the chunk
    """
    entries = [(region_id, Point(x, y)) for region_id, x, y in entry_dicts]

    if cell_size is None:
        return [_brute_force_nearest(entries, p) for p in range(start, stop)]

    index = CandidateIndex(entries, cell_size)
    return [
        index.nearest(entries[p][1], exclude_region=entries[p][0])
        for p in range(start, stop)
    ]


class NearestSegmentMatcher:
    """Pairs each segment with its nearest cross-region segment.

    Distance is midpoint to midpoint. A segment with no segment of another
    region to compare against gets no pairing.
    """

    def __init__(
        self,
        cell_size: float | None = None,
        max_workers: int | None = 1,
        min_segments_per_worker: int = 256,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the matcher.

        Args:
            cell_size: Candidate index cell size (None = all-pairs search)
            max_workers: Worker processes (1 = in-process, None = auto)
            min_segments_per_worker: Minimum chunk size before work is split
            logger: Bound logger
        """
        self.cell_size = cell_size
        self.max_workers = max_workers
        self.min_segments_per_worker = min_segments_per_worker
        self.logger = logger or structlog.get_logger("roomgraph")

    def match(self, tessellations: list[Tessellation]) -> list[Pairing]:
        """Find the nearest cross-region segment for every segment.

        Args:
            tessellations: All segments of all regions in a fixed order

        Returns:
            Pairings in the order of their source segments
        """
        entry_dicts = [
            (t.region_id, t.midpoint.x, t.midpoint.y) for t in tessellations
        ]
        results = self._run(entry_dicts)

        pairings: list[Pairing] = []
        for source, result in zip(tessellations, results):
            if result is None:
                self.logger.info(
                    "No cross-region candidate",
                    region=source.region_id,
                    loop=source.loop_index,
                    segment=source.segment_index,
                )
                continue
            position, distance = result
            pairings.append(Pairing(source, tessellations[position], distance))
        return pairings

    def _worker_count(self, total: int) -> int:
        workers = self.max_workers if self.max_workers is not None else (os.cpu_count() or 1)
        by_size = max(1, total // self.min_segments_per_worker)
        return max(1, min(workers, by_size))

    def _run(self, entry_dicts: list[tuple[str, float, float]]) -> list[MatchResult]:
        total = len(entry_dicts)
        workers = self._worker_count(total)

        if workers == 1:
            return match_chunk(entry_dicts, 0, total, self.cell_size)

        chunk = -(-total // workers)
        bounds = [(lo, min(lo + chunk, total)) for lo in range(0, total, chunk)]

        self.logger.info(
            "Starting parallel matching",
            segment_count=total,
            max_workers=workers,
            chunks=len(bounds),
        )

        with ProcessPoolExecutor(max_workers=workers) as executor:
            futures = [
                executor.submit(match_chunk, entry_dicts, lo, hi, self.cell_size)
                for lo, hi in bounds
            ]
            # Collected in submission order, not completion order
            results: list[MatchResult] = []
            for future in futures:
                results.extend(future.result())
        return results
