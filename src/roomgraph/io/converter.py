"""Conversion between layout file models and domain models."""

from typing import Any

from roomgraph.core.neighbours import SegmentNeighbour
from roomgraph.core.resolver import ResolutionResult
from roomgraph.domain import (
    Adjacency,
    ArcCurve,
    BezierCurve,
    BoundaryLoop,
    BoundarySegment,
    LineCurve,
    Point,
    Region,
)
from roomgraph.io.schema import ArcModel, BezierModel, LineModel, RegionModel


def _point(coord: tuple[float, float]) -> Point:
    return Point(float(coord[0]), float(coord[1]))


def segment_model_to_domain(model: LineModel | ArcModel | BezierModel) -> BoundarySegment:
    """Convert one segment model to a BoundarySegment."""
    if isinstance(model, LineModel):
        curve = LineCurve(_point(model.start), _point(model.end))
    elif isinstance(model, ArcModel):
        curve = ArcCurve(
            center=_point(model.center),
            radius=model.radius,
            start_angle=model.start_angle,
            end_angle=model.end_angle,
        )
    else:
        curve = BezierCurve(tuple(_point(p) for p in model.points))
    return BoundarySegment(curve=curve, element=model.element, thickness=model.thickness)


def region_model_to_domain(model: RegionModel) -> Region:
    """Convert a region model to a Region.

    A region with neither loops nor a polygon becomes a region without loops.
    """
    if model.polygon is not None:
        return Region.from_polygon(
            model.id,
            [_point(c) for c in model.polygon],
            elements=model.elements,
            thickness=model.thickness,
            name=model.name,
        )

    loops = tuple(
        BoundaryLoop(segments=tuple(segment_model_to_domain(s) for s in loop))
        for loop in (model.loops or [])
    )
    return Region(id=model.id, loops=loops, name=model.name)


def adjacency_to_dict(adjacency: Adjacency) -> dict[str, Any]:
    """Serialize a confirmed adjacency."""
    source = adjacency.pairing.source
    target = adjacency.pairing.target
    return {
        "region": adjacency.region_id,
        "neighbour": adjacency.neighbour_id,
        "loop": source.loop_index,
        "segment": source.segment_index,
        "neighbour_loop": target.loop_index,
        "neighbour_segment": target.segment_index,
        "element": adjacency.element,
        "neighbour_element": adjacency.neighbour_element,
        "distance": adjacency.pairing.distance,
        "normal_sign": adjacency.normal_sign,
        "probe": list(adjacency.probe.to_tuple()),
    }


def result_to_dict(result: ResolutionResult) -> dict[str, Any]:
    """Serialize a resolution result for JSON output."""
    return {
        "neighbours": result.graph.to_dict(),
        "adjacencies": [adjacency_to_dict(a) for a in result.adjacencies],
        "skipped": [item.to_dict() for item in result.skipped],
    }


def segment_neighbour_to_dict(found: SegmentNeighbour) -> dict[str, Any]:
    """Serialize a per-segment neighbour lookup."""
    return {
        "region": found.region_id,
        "loop": found.loop_index,
        "segment": found.segment_index,
        "element": found.element,
        "neighbour": found.neighbour_id,
    }
