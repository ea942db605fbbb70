"""Logging utilities for Roomgraph."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

HANDLER_TAG = "_roomgraph_handler"


@dataclass
class ResolutionStats:
    """Statistics from a resolution run."""

    region_count: int = 0
    segment_count: int = 0
    pairing_count: int = 0
    unmatched_count: int = 0
    discarded_count: int = 0
    confirmed_count: int = 0
    skipped_regions: int = 0
    skipped_segments: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)
    stage_timings_ms: dict[str, float] = field(default_factory=dict)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate resolution duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Reconfiguring replaces the handlers installed by an earlier call
    for handler in [h for h in root_logger.handlers if getattr(h, HANDLER_TAG, False)]:
        root_logger.removeHandler(handler)
        handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        setattr(file_handler, HANDLER_TAG, True)
        root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        setattr(console_handler, HANDLER_TAG, True)
        root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("roomgraph")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class ResolutionLogger:
    """Logger for tracking resolution progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = ResolutionStats()

    def log_stage_complete(self, stage: str, duration_ms: float, **counts: int) -> None:
        """Log completion of a pipeline stage."""
        self._logger.debug(
            "Stage complete",
            stage=stage,
            duration_ms=round(duration_ms, 2),
            **counts,
        )
        self._stats.stage_timings_ms[stage] = duration_ms

    def log_region_extracted(self, region_id: str, loop_count: int, segment_count: int) -> None:
        """Log a region whose boundaries passed validation."""
        self._logger.debug(
            "Region extracted",
            region=region_id,
            loops=loop_count,
            segments=segment_count,
        )
        self._stats.region_count += 1
        self._stats.segment_count += segment_count

    def log_region_skipped(self, region_id: str, error: Exception) -> None:
        """Log a region excluded from the graph."""
        self._logger.warning(
            "Region skipped",
            region=region_id,
            error=str(error),
            error_type=type(error).__name__,
        )
        self._stats.skipped_regions += 1
        self._stats.errors.append((region_id, str(error)))

    def log_pairings(self, segment_count: int, pairing_count: int) -> None:
        """Log matcher output."""
        self._logger.info(
            "Segments matched",
            segments=segment_count,
            pairings=pairing_count,
            unmatched=segment_count - pairing_count,
        )
        self._stats.pairing_count += pairing_count
        self._stats.unmatched_count += segment_count - pairing_count

    def log_classification(self, confirmed: int, discarded: int, ambiguous: int) -> None:
        """Log classifier output."""
        self._logger.info(
            "Pairings classified",
            confirmed=confirmed,
            discarded=discarded,
            ambiguous=ambiguous,
        )
        self._stats.confirmed_count += confirmed
        self._stats.discarded_count += discarded
        self._stats.skipped_segments += ambiguous

    @property
    def stats(self) -> ResolutionStats:
        """Get current resolution statistics."""
        return self._stats
