"""Exception hierarchy for Roomgraph."""


class RoomGraphError(Exception):
    """Base exception for all Roomgraph errors."""

    pass


class GeometryError(RoomGraphError):
    """Errors in geometric calculations."""

    pass


class MalformedBoundaryError(GeometryError):
    """A boundary loop failed continuity or minimum segment count validation."""

    def __init__(self, region_id: str, reason: str, loop_index: int | None = None) -> None:
        self.region_id = region_id
        self.reason = reason
        self.loop_index = loop_index
        where = f"region '{region_id}'"
        if loop_index is not None:
            where += f" loop {loop_index}"
        super().__init__(f"Malformed boundary in {where}: {reason}")


class TessellationError(GeometryError):
    """A curve could not be tessellated into a usable polyline."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class LayoutError(RoomGraphError):
    """Errors related to layout loading or saving."""

    pass


class LayoutLoadError(LayoutError):
    """Error loading a layout file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load layout '{path}': {reason}")


class LayoutFormatError(LayoutError):
    """Layout file content does not match the expected schema."""

    def __init__(self, path: str, details: str) -> None:
        self.path = path
        self.details = details
        super().__init__(f"Invalid layout format '{path}': {details}")


class LayoutSaveError(LayoutError):
    """Error saving resolution results."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save results '{path}': {reason}")
