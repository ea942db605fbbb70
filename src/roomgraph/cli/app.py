"""CLI application entry point for roomgraph.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from roomgraph import __version__
from roomgraph.cli.output import (
    console,
    print_adjacency_report,
    print_element_lengths,
    print_error,
    print_header,
    print_layout_info,
    print_segment_neighbours,
    print_skipped,
    print_step,
    print_success,
)
from roomgraph.config import (
    GeometryConfig,
    LoggingConfig,
    ProcessingConfig,
    ResolverConfig,
    RoomGraphSettings,
)
from roomgraph.config.settings import MAX_PARTITION_THICKNESS_FEET, PROBE_OFFSET_FEET
from roomgraph.core import AdjacencyResolver, NeighbourFinder, boundary_element_lengths
from roomgraph.domain import Region
from roomgraph.exceptions import (
    LayoutFormatError,
    LayoutLoadError,
    LayoutSaveError,
    RoomGraphError,
)
from roomgraph.io import LayoutReader, ResultWriter
from roomgraph.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="roomgraph",
    help="Determine which rooms neighbour each other across their boundary segments.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Roomgraph[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def resolve(
    layout: Annotated[
        Path,
        typer.Argument(
            help="Path to a JSON layout file",
            show_default=False,
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Write the result (adjacency or --segments lookups) as JSON to this path",
        ),
    ] = None,
    max_thickness: Annotated[
        float,
        typer.Option(
            "--max-thickness",
            "-t",
            help="Thickest plausible partition, in layout units",
            min=0.0,
        ),
    ] = MAX_PARTITION_THICKNESS_FEET,
    probe_offset: Annotated[
        float,
        typer.Option(
            "--probe-offset",
            help="Containment probe distance past the partition, in layout units",
            min=0.0,
        ),
    ] = PROBE_OFFSET_FEET,
    chord_tolerance: Annotated[
        float,
        typer.Option(
            "--chord-tolerance",
            help="Maximum chord deviation when tessellating curves",
            min=0.0,
        ),
    ] = 0.01,
    workers: Annotated[
        int | None,
        typer.Option(
            "--workers",
            "-j",
            help="Worker processes for segment matching (default: in-process)",
            min=1,
        ),
    ] = None,
    no_index: Annotated[
        bool,
        typer.Option(
            "--no-index",
            help="Compare all segment pairs instead of using the grid index",
        ),
    ] = False,
    segments: Annotated[
        bool,
        typer.Option(
            "--segments",
            help="List the neighbour across every boundary segment and exit",
        ),
    ] = False,
    elements: Annotated[
        bool,
        typer.Option(
            "--elements",
            help="List boundary length per separating element and exit",
        ),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Resolve room adjacency for a layout and print each room with its neighbours.

    Every boundary segment is paired with the nearest segment of another room. The
    pair counts as adjacent when it is thinner than --max-thickness and a probe
    stepped across the segment lands inside the other room.

    Example:
        roomgraph floor-2.json -o floor-2-adjacency.json
    """
    # Validate mutually exclusive options
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    if segments and elements:
        print_error("Cannot use --segments and --elements together")
        raise typer.Exit(code=1)

    # Validate input file exists
    if not layout.exists():
        print_error(
            f"Layout file not found: {layout}",
            details=f"The file '{layout}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    if not layout.is_file():
        print_error(
            f"Layout path is not a file: {layout}",
            details="Please provide a path to a JSON layout file.",
        )
        raise typer.Exit(code=1)

    if max_thickness <= 0 or probe_offset <= 0 or chord_tolerance <= 0:
        print_error("Thickness, probe offset and chord tolerance must be positive")
        raise typer.Exit(code=1)

    # Print header
    if not quiet:
        print_header(__version__)

    # Create settings from CLI arguments
    settings = RoomGraphSettings(
        geometry=GeometryConfig(chord_tolerance=chord_tolerance),
        resolver=ResolverConfig(
            max_partition_thickness=max_thickness,
            probe_offset_distance=probe_offset,
            use_candidate_index=not no_index,
        ),
        processing=ProcessingConfig(max_workers=workers if workers else 1),
        logging=LoggingConfig(
            log_file=log_file,
            log_level="DEBUG" if verbose else log_level,
        ),
    )

    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )

    try:
        if not quiet:
            print_step("Loading layout")

        reader = LayoutReader(layout)
        reader.load()
        regions = reader.regions()

        if not quiet:
            print_layout_info(
                layout_path=str(layout),
                units=reader.units,
                region_count=len(regions),
                segment_count=sum(r.segment_count for r in regions),
            )

        if segments:
            _handle_segments(regions, settings, quiet, output, reader.units)
            raise typer.Exit(code=0)

        if elements:
            _handle_elements(regions, quiet)
            raise typer.Exit(code=0)

        if not quiet:
            print_step("Resolving adjacency")

        resolver = AdjacencyResolver(settings, logger=logger)
        result = resolver.resolve(regions)

        if not quiet:
            names = {r.id: r.display_name for r in regions}
            print_adjacency_report(result.graph, names)
            print_skipped(result.skipped, verbose=verbose)

        if output is not None:
            ResultWriter(output).save(result, extra={"units": reader.units})

        if not quiet:
            print_success(
                total_time_s=result.stats.duration_seconds,
                regions=len(result.graph),
                adjacencies=len(result.adjacencies),
                skipped=len(result.skipped),
                output_path=str(output) if output is not None else None,
            )

    except FileNotFoundError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except LayoutLoadError as e:
        print_error(f"Could not load layout: {e.reason}")
        raise typer.Exit(code=1)
    except LayoutFormatError as e:
        print_error("Invalid layout", details=e.details)
        raise typer.Exit(code=1)
    except LayoutSaveError as e:
        print_error(f"Could not save result: {e.reason}")
        raise typer.Exit(code=1)
    except RoomGraphError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        # Re-raise typer.Exit to allow clean exits
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


def _handle_segments(
    regions: list[Region],
    settings: RoomGraphSettings,
    quiet: bool,
    output: Path | None,
    units: str,
) -> None:
    """Handle --segments mode.

    Args:
        regions: Regions from the layout
        settings: Roomgraph settings
        quiet: Suppress headings
        output: JSON path for the lookups, if any
        units: Layout units, recorded in the JSON output
    """
    if not quiet:
        print_step("Looking up neighbours per segment")

    finder = NeighbourFinder(
        regions,
        geometry=settings.geometry,
        resolver=settings.resolver,
    )
    all_found = []
    for region in regions:
        found = finder.segment_neighbours(region)
        print_segment_neighbours(region, found)
        all_found.extend(found)

    if output is not None:
        ResultWriter(output).save_segments(all_found, extra={"units": units})


def _handle_elements(regions: list[Region], quiet: bool) -> None:
    """Handle --elements mode.

    Args:
        regions: Regions from the layout
        quiet: Suppress headings
    """
    if not quiet:
        print_step("Measuring boundary length per element")

    for region in regions:
        print_element_lengths(region, boundary_element_lengths(region))


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
