"""Command-line interface for roomgraph.

This module provides the CLI using Typer with rich output for
readable adjacency reports.

Key features:
- Adjacency report per region with separating elements
- Per-segment neighbour lookup
- Boundary length per separating element
- JSON result output
"""

from roomgraph.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
