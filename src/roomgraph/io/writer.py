"""Result writer for saving resolution output as JSON."""

import json
from pathlib import Path
from typing import Any

from roomgraph.core.neighbours import SegmentNeighbour
from roomgraph.core.resolver import ResolutionResult
from roomgraph.exceptions import LayoutSaveError
from roomgraph.io.converter import result_to_dict, segment_neighbour_to_dict


class ResultWriter:
    """Writes resolution results to a JSON file.

    Example:
        writer = ResultWriter(Path("floor-adjacency.json"))
        writer.save(result)
    """

    def __init__(self, output_path: Path) -> None:
        self._output_path = output_path

    def save(self, result: ResolutionResult, extra: dict[str, Any] | None = None) -> None:
        """Save the result.

        Args:
            result: Resolution result
            extra: Additional top-level fields to include

        Raises:
            LayoutSaveError: If the file cannot be written
        """
        self._write(result_to_dict(result), extra)

    def save_segments(
        self,
        found: list[SegmentNeighbour],
        extra: dict[str, Any] | None = None,
    ) -> None:
        """Save per-segment neighbour lookups.

        Args:
            found: Lookup results, in region and segment order
            extra: Additional top-level fields to include

        Raises:
            LayoutSaveError: If the file cannot be written
        """
        self._write({"segments": [segment_neighbour_to_dict(f) for f in found]}, extra)

    def _write(self, payload: dict[str, Any], extra: dict[str, Any] | None) -> None:
        if extra:
            payload.update(extra)

        try:
            self._output_path.write_text(
                json.dumps(payload, indent=2, default=str),
                encoding="utf-8",
            )
        except OSError as e:
            raise LayoutSaveError(str(self._output_path), str(e)) from e
