"""Core resolution algorithms for roomgraph.

This module contains the adjacency resolution pipeline:

- Boundary extraction (closure and segment count validation)
- Segment tessellation (midpoint, tangent, normal)
- Candidate indexing and nearest-segment matching
- Adjacency classification (thickness threshold, containment probe)
- Graph building

All stages are designed to be:
- Deterministic for a fixed input order
- Free of state between runs
- Isolated per region, so one bad boundary does not abort a run

Key classes:
- AdjacencyResolver: Runs the full pipeline
- BoundaryExtractor, SegmentTessellator, CandidateIndex, NearestSegmentMatcher,
  AdjacencyClassifier, AdjacencyGraphBuilder: The individual stages
- ContainmentOracle, PolygonContainment: Point containment
- NeighbourFinder: Per-segment neighbour lookup
"""

from roomgraph.core.classifier import AdjacencyClassifier, Classification
from roomgraph.core.containment import ContainmentOracle, PolygonContainment
from roomgraph.core.extractor import BoundaryExtractor
from roomgraph.core.graph import AdjacencyGraphBuilder
from roomgraph.core.index import CandidateIndex
from roomgraph.core.matcher import NearestSegmentMatcher, match_chunk
from roomgraph.core.neighbours import (
    NeighbourFinder,
    SegmentNeighbour,
    boundary_element_lengths,
)
from roomgraph.core.resolver import AdjacencyResolver, ResolutionResult
from roomgraph.core.tessellator import SegmentTessellator

__all__ = [
    # Classifier
    "AdjacencyClassifier",
    "AdjacencyGraphBuilder",
    # Resolver
    "AdjacencyResolver",
    # Extraction
    "BoundaryExtractor",
    "CandidateIndex",
    "Classification",
    # Containment
    "ContainmentOracle",
    "NearestSegmentMatcher",
    # Neighbour lookup
    "NeighbourFinder",
    "PolygonContainment",
    "ResolutionResult",
    "SegmentNeighbour",
    "SegmentTessellator",
    "boundary_element_lengths",
    "match_chunk",
]
