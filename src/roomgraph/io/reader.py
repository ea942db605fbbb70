"""Layout reader for loading JSON floor layouts.

This module provides the LayoutReader class for loading layout files
and converting them into domain regions.
"""

import json
from collections.abc import Iterator
from pathlib import Path

from pydantic import ValidationError

from roomgraph.domain import Region
from roomgraph.exceptions import LayoutFormatError, LayoutLoadError
from roomgraph.io.converter import region_model_to_domain
from roomgraph.io.schema import LayoutModel


class LayoutReader:
    """Loads layout files and extracts region data.

    Example:
        reader = LayoutReader(Path("floor.json"))
        reader.load()
        for region in reader.iter_regions():
            print(region.id)
    """

    def __init__(self, layout_path: Path) -> None:
        """Initialize the layout reader.

        Args:
            layout_path: Path to the JSON layout file
        """
        self._layout_path = layout_path
        self._layout: LayoutModel | None = None

    def load(self) -> None:
        """Load and validate the layout file.

        Raises:
            FileNotFoundError: If the layout file does not exist
            LayoutLoadError: If the file is not readable JSON
            LayoutFormatError: If the JSON does not match the layout schema
        """
        if not self._layout_path.exists():
            raise FileNotFoundError(f"Layout file not found: {self._layout_path}")

        try:
            data = json.loads(self._layout_path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise LayoutLoadError(str(self._layout_path), str(e)) from e

        try:
            self._layout = LayoutModel.model_validate(data)
        except ValidationError as e:
            raise LayoutFormatError(str(self._layout_path), str(e)) from e

    def _require_layout(self) -> LayoutModel:
        if self._layout is None:
            raise RuntimeError("Layout not loaded. Call load() first.")
        return self._layout

    @property
    def units(self) -> str:
        """Working units declared by the layout."""
        return self._require_layout().units

    @property
    def region_count(self) -> int:
        return len(self._require_layout().regions)

    def iter_regions(self) -> Iterator[Region]:
        """Iterate over regions in file order.

        Yields:
            Region domain objects
        """
        for model in self._require_layout().regions:
            yield region_model_to_domain(model)

    def regions(self) -> list[Region]:
        """All regions in file order."""
        return list(self.iter_regions())
