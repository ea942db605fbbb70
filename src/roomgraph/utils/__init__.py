"""Utility functions for roomgraph.

This module provides utility functions including:

- Logging setup and configuration
- Resolution statistics tracking
"""

from roomgraph.utils.logging import (
    ResolutionLogger,
    ResolutionStats,
    configure_logging,
)

__all__ = [
    "ResolutionLogger",
    "ResolutionStats",
    "configure_logging",
]
