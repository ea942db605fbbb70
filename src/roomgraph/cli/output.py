"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with formatted reports and messages.
"""

from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.text import Text

from roomgraph.core.neighbours import SegmentNeighbour
from roomgraph.domain import AdjacencyGraph, Region, SkippedItem

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info
SYM_ARROW = "→"  # Adjacency


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Roomgraph[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_layout_info(layout_path: str, units: str, region_count: int, segment_count: int) -> None:
    """Print layout information.

    Args:
        layout_path: Path to the layout file
        units: Working units declared by the layout
        region_count: Number of regions
        segment_count: Total boundary segments
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(layout_path)
    line.append(f" ({units})")
    console.print(line)
    console.print(f"  {region_count:,} regions {SYM_DOT} {segment_count:,} segments")


def _name(names: dict[str, str], region_id: str) -> str:
    return names.get(region_id, region_id)


def print_adjacency_report(graph: AdjacencyGraph, names: dict[str, str]) -> None:
    """Print each region followed by its neighbours.

    Args:
        graph: Resolved adjacency graph
        names: Display name per region id
    """
    console.print("\n[bold]Adjacencies[/bold]\n")
    for region_id in graph:
        line = Text("  ")
        line.append(_name(names, region_id), style="bold")
        console.print(line)
        neighbours = sorted(graph.neighbours(region_id))
        if not neighbours:
            console.print(f"    {SYM_DOT} no neighbours", style="dim")
        for neighbour_id in neighbours:
            elements = graph.separating_elements(region_id, neighbour_id)
            line = Text(f"    {SYM_ARROW} ")
            line.append(_name(names, neighbour_id))
            if elements:
                line.append(f" via {', '.join(str(e) for e in elements)}", style="dim")
            console.print(line)


def print_segment_neighbours(
    region: Region,
    found: list[SegmentNeighbour],
) -> None:
    """Print the neighbour across each boundary segment of a region.

    Args:
        region: Region being reported
        found: Lookup result per segment
    """
    loop_count = len(region.loops)
    plural = "loop" if loop_count == 1 else "loops"
    name = escape(region.display_name)
    console.print(f"\n  [bold]{name}[/bold] {SYM_DOT} {loop_count} {plural}")
    for item in found:
        neighbour = item.neighbour_id if item.neighbour_id is not None else "<none>"
        element = " " + escape(f"[{item.element}]") if item.element is not None else ""
        console.print(
            f"    {item.loop_index + 1}.{item.segment_index + 1}{element} {SYM_ARROW} {neighbour}"
        )


def print_element_lengths(region: Region, lengths: dict[Any, float]) -> None:
    """Print boundary length per separating element of a region.

    Args:
        region: Region being reported
        lengths: Element to adjacent boundary length
    """
    console.print(f"\n  [bold]{escape(region.display_name)}[/bold]")
    if not lengths:
        console.print(f"    {SYM_DOT} no boundary", style="dim")
    for element, length in lengths.items():
        label = str(element) if element is not None else "<no element>"
        console.print(f"    {escape(label)}: {length:,.3f}")


def print_skipped(skipped: list[SkippedItem], verbose: bool) -> None:
    """Print regions and segments left out of the graph.

    Args:
        skipped: Skipped items
        verbose: Show every item instead of a summary
    """
    if not skipped:
        return
    console.print(f"\n  [yellow]{len(skipped)} skipped[/yellow]")
    shown = skipped if verbose else skipped[:5]
    for item in shown:
        where = item.region_id
        if item.segment_index is not None:
            where += f" segment {item.segment_index + 1}"
        console.print(f"    {SYM_ERR} {escape(where)}: {escape(item.reason)}")
    if len(skipped) > len(shown):
        console.print(f"    {SYM_DOT}{SYM_DOT}{SYM_DOT} (+{len(skipped) - len(shown)} more)")


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_success(
    total_time_s: float,
    regions: int,
    adjacencies: int,
    skipped: int,
    output_path: str | None = None,
) -> None:
    """Print success message with summary.

    Args:
        total_time_s: Total resolution time in seconds
        regions: Number of regions resolved
        adjacencies: Number of confirmed adjacencies
        skipped: Number of skipped regions and segments
        output_path: Path of the written JSON result, if any
    """
    time_str = _format_time(total_time_s)

    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {time_str}")

    if output_path is not None:
        line = Text("  ")
        line.append(output_path, style="bold")
        console.print(line)

    skipped_style = "yellow" if skipped > 0 else "green"
    console.print(
        f"  {regions} regions {SYM_DOT} {adjacencies} adjacencies {SYM_DOT} "
        f"[{skipped_style}]{skipped} skipped[/{skipped_style}]"
    )


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
