"""Shared fixtures for roomgraph tests."""

from collections.abc import Callable
from typing import Any

import pytest

from roomgraph.config import ResolverConfig, RoomGraphSettings
from roomgraph.domain import Point, Region

RectFactory = Callable[..., Region]


def make_rect(
    region_id: str,
    x0: float,
    y0: float,
    x1: float,
    y1: float,
    elements: list[Any] | None = None,
    thickness: float = 0.0,
) -> Region:
    """Counter-clockwise rectangular region; edges run bottom, right, top, left."""
    return Region.from_polygon(
        region_id,
        [Point(x0, y0), Point(x1, y0), Point(x1, y1), Point(x0, y1)],
        elements=elements,
        thickness=thickness,
    )


@pytest.fixture
def rect() -> RectFactory:
    """Factory for rectangular regions."""
    return make_rect


@pytest.fixture
def settings() -> RoomGraphSettings:
    """Settings with a 1.0 partition threshold and a 0.002 probe offset."""
    return RoomGraphSettings(
        resolver=ResolverConfig(max_partition_thickness=1.0, probe_offset_distance=0.002),
    )


@pytest.fixture
def touching_pair() -> list[Region]:
    """Two 10x10 rooms sharing the wall W1 at x=10, 0.5 thick."""
    return [
        make_rect("A", 0, 0, 10, 10, elements=["WA0", "W1", "WA2", "WA3"], thickness=0.5),
        make_rect("B", 10, 0, 20, 10, elements=["WB0", "WB1", "WB2", "W1"], thickness=0.5),
    ]
