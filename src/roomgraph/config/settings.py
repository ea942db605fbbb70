"""Configuration settings for Roomgraph.

Lengths are in working units. The defaults assume feet, the internal unit of the
building models the layouts are usually exported from.
"""

from pathlib import Path

from pydantic import BaseModel, Field

# 2 mm expressed in feet
PROBE_OFFSET_FEET = 2.0 / 25.4 / 12

# Thickest plausible wall, 14 inches in feet
MAX_PARTITION_THICKNESS_FEET = 14.0 / 12


class GeometryConfig(BaseModel):
    """Tolerances for boundary validation and curve tessellation."""

    epsilon: float = Field(
        default=1e-6,
        gt=0.0,
        le=1.0,
        description="Maximum gap between consecutive segment endpoints of a loop",
    )
    chord_tolerance: float = Field(
        default=0.01,
        gt=0.0,
        description="Maximum deviation of a tessellation chord from the true curve",
    )
    max_curve_samples: int = Field(
        default=64,
        ge=2,
        le=4096,
        description="Upper bound on chords per curved segment",
    )


class ResolverConfig(BaseModel):
    """Configuration for adjacency resolution."""

    max_partition_thickness: float = Field(
        default=MAX_PARTITION_THICKNESS_FEET,
        gt=0.0,
        description="Pairings at or beyond this midpoint distance are not adjacent",
    )
    probe_offset_distance: float = Field(
        default=PROBE_OFFSET_FEET,
        gt=0.0,
        description="Distance past the partition at which containment is probed",
    )
    use_candidate_index: bool = Field(
        default=True,
        description="Use a grid index instead of all-pairs search when matching segments",
    )
    index_cell_size: float | None = Field(
        default=None,
        gt=0.0,
        description="Grid cell size (None = max_partition_thickness)",
    )

    def get_index_cell_size(self) -> float:
        """Get the effective candidate index cell size."""
        if self.index_cell_size is not None:
            return self.index_cell_size
        return self.max_partition_thickness


class ProcessingConfig(BaseModel):
    """Configuration for segment matching workers."""

    max_workers: int | None = Field(
        default=1,
        ge=1,
        description="Max worker processes (1 = in-process, None = auto)",
    )
    min_segments_per_worker: int = Field(
        default=256,
        ge=1,
        description="Below this many segments per worker, matching stays in-process",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class RoomGraphSettings(BaseModel):
    """Main application settings."""

    geometry: GeometryConfig = Field(default_factory=GeometryConfig)
    resolver: ResolverConfig = Field(default_factory=ResolverConfig)
    processing: ProcessingConfig = Field(default_factory=ProcessingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> RoomGraphSettings:
    """Get default application settings."""
    return RoomGraphSettings()
