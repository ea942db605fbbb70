"""Layout I/O for roomgraph.

This module handles loading JSON layout files and saving resolution results.

Key classes:
- LayoutReader: Loads layouts and yields domain regions
- ResultWriter: Writes adjacency results as JSON
"""

from roomgraph.io.reader import LayoutReader
from roomgraph.io.writer import ResultWriter

__all__ = [
    "LayoutReader",
    "ResultWriter",
]
