"""Pydantic models describing the JSON layout file format.

Example layout::

    {
      "units": "ft",
      "regions": [
        {"id": "101", "name": "Office",
         "polygon": [[0, 0], [10, 0], [10, 10], [0, 10]],
         "elements": ["W1", "W2", "W3", "W4"], "thickness": 0.5},
        {"id": "102",
         "loops": [[
           {"type": "line", "start": [10, 0], "end": [20, 0]},
           {"type": "arc", "center": [20, 5], "radius": 5,
            "start_angle": -1.5708, "end_angle": 1.5708},
           {"type": "line", "start": [20, 10], "end": [10, 10]},
           {"type": "line", "start": [10, 10], "end": [10, 0], "element": "W2"}
         ]]}
      ]
    }
"""

from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field, model_validator

Coordinate = tuple[float, float]


class LineModel(BaseModel):
    """Straight boundary segment."""

    type: Literal["line"]
    start: Coordinate
    end: Coordinate
    element: Any = None
    thickness: float = Field(default=0.0, ge=0.0)


class ArcModel(BaseModel):
    """Circular arc boundary segment (angles in radians)."""

    type: Literal["arc"]
    center: Coordinate
    radius: float = Field(gt=0.0)
    start_angle: float
    end_angle: float
    element: Any = None
    thickness: float = Field(default=0.0, ge=0.0)


class BezierModel(BaseModel):
    """Quadratic or cubic Bezier boundary segment."""

    type: Literal["bezier"]
    points: list[Coordinate] = Field(min_length=3, max_length=4)
    element: Any = None
    thickness: float = Field(default=0.0, ge=0.0)


SegmentModel = Annotated[LineModel | ArcModel | BezierModel, Field(discriminator="type")]


class RegionModel(BaseModel):
    """One region, given either as explicit loops or as a polygon shorthand."""

    id: str
    name: str | None = None
    loops: list[list[SegmentModel]] | None = None
    polygon: list[Coordinate] | None = None
    elements: list[Any] | None = None
    thickness: float | list[float] = 0.0

    @model_validator(mode="after")
    def check_boundary_source(self) -> "RegionModel":
        if self.loops is not None and self.polygon is not None:
            raise ValueError("region must not define both 'loops' and 'polygon'")
        if self.polygon is None and (self.elements is not None or self.thickness != 0.0):
            raise ValueError("'elements' and 'thickness' only apply to 'polygon' regions")
        return self


class LayoutModel(BaseModel):
    """Top-level layout document."""

    units: str = "ft"
    regions: list[RegionModel] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_unique_ids(self) -> "LayoutModel":
        seen: set[str] = set()
        for region in self.regions:
            if region.id in seen:
                raise ValueError(f"duplicate region id '{region.id}'")
            seen.add(region.id)
        return self
