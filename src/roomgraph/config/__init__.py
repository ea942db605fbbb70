"""Configuration management for roomgraph.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- GeometryConfig: Tolerances for boundary validation and tessellation
- ResolverConfig: Adjacency thresholds and candidate index settings
- ProcessingConfig: Worker process settings
- LoggingConfig: Logging settings
- RoomGraphSettings: Main application settings
"""

from roomgraph.config.settings import (
    GeometryConfig,
    LoggingConfig,
    ProcessingConfig,
    ResolverConfig,
    RoomGraphSettings,
    get_default_settings,
)

__all__ = [
    "GeometryConfig",
    "LoggingConfig",
    "ProcessingConfig",
    "ResolverConfig",
    "RoomGraphSettings",
    "get_default_settings",
]
