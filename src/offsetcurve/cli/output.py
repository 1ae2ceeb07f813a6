"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with formatted messages and summaries.
"""


from rich.console import Console
from rich.text import Text

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Offsetcurve[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_line_info(source: str, vertex_count: int, length: float) -> None:
    """Print input line information.

    Args:
        source: Where the line was read from
        vertex_count: Number of vertices in the line
        length: Line length
    """
    line = Text("  ")
    line.append(source)
    console.print(line)
    console.print(f"  {vertex_count:,} vertices {SYM_DOT} length {length:,.3f}")


def print_wkt(wkt_text: str) -> None:
    """Print WKT without markup or wrapping so it can be piped."""
    console.print(wkt_text, markup=False, highlight=False, soft_wrap=True)


def _format_time(milliseconds: float) -> str:
    """Format milliseconds into human-readable time string."""
    if milliseconds < 1:
        return f"{milliseconds * 1000:.0f}µs"
    elif milliseconds < 1000:
        return f"{milliseconds:.1f}ms"
    return f"{milliseconds / 1000:.1f}s"


def print_success(
    strategy: str,
    vertex_count: int,
    length: float,
    graph_vertices: int,
    committed: int,
    duration_ms: float,
    output_path: str | None = None,
) -> None:
    """Print success message with summary.

    Args:
        strategy: Resolver strategy name
        vertex_count: Vertices in the resolved curve
        length: Length of the resolved curve
        graph_vertices: Vertices in the noded graph
        committed: Vertices committed by the search
        duration_ms: Search time in milliseconds
        output_path: File the curve was written to, if any
    """
    console.print(
        f"\n[bold green]{SYM_OK} Resolved[/bold green] in {_format_time(duration_ms)} "
        f"({strategy})"
    )

    if output_path:
        line = Text("  ")
        line.append(output_path, style="bold")
        console.print(line)

    console.print(f"  {vertex_count} vertices {SYM_DOT} length {length:,.3f}")
    console.print(f"  {committed} of {graph_vertices} graph vertices searched")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
