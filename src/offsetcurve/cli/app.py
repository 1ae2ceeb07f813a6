"""CLI application entry point for offsetcurve.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer
from shapely.geometry import LineString

from offsetcurve import __version__
from offsetcurve.cli.output import (
    console,
    print_error,
    print_header,
    print_line_info,
    print_step,
    print_success,
    print_wkt,
)
from offsetcurve.config import (
    BufferConfig,
    JoinStyle,
    LoggingConfig,
    OffsetCurveSettings,
    ResolverConfig,
    ResolverStrategy,
)
from offsetcurve.core import OffsetCurve
from offsetcurve.domain import path_length, to_coordinates
from offsetcurve.exceptions import GeometryReadError, OffsetCurveError
from offsetcurve.io import format_wkt, read_line, read_line_file, write_wkt
from offsetcurve.utils import OffsetCurveLogger, configure_logging

# Create the Typer app
app = typer.Typer(
    name="offsetcurve",
    help="Resolve clean, non-self-intersecting offset curves for lines.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Offsetcurve[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def offset(
    line_wkt: Annotated[
        str | None,
        typer.Argument(
            help="Input line as WKT, e.g. 'LINESTRING (0 0, 10 0)'",
            show_default=False,
        ),
    ] = None,
    distance: Annotated[
        float,
        typer.Option(
            "--distance",
            "-d",
            help="Signed offset distance (positive = left side)",
        ),
    ] = 1.0,
    input_file: Annotated[
        Path | None,
        typer.Option(
            "--input-file",
            "-i",
            help="Read the input line as WKT from a file",
        ),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Write the resolved curve as WKT to a file",
        ),
    ] = None,
    join: Annotated[
        str,
        typer.Option(
            "--join",
            "-j",
            help="Join style for outside turns (round|mitre|bevel)",
        ),
    ] = "round",
    quadrant_segments: Annotated[
        int,
        typer.Option(
            "--quadrant-segments",
            help="Segments per quarter circle for round joins",
            min=1,
            max=64,
        ),
    ] = 8,
    mitre_limit: Annotated[
        float,
        typer.Option(
            "--mitre-limit",
            help="Mitre length limit as a multiple of the distance",
            min=0.0,
            max=100.0,
        ),
    ] = 5.0,
    simplify_factor: Annotated[
        float,
        typer.Option(
            "--simplify-factor",
            help="Simplification tolerance as a fraction of the distance",
            min=0.0,
            max=1.0,
        ),
    ] = 0.01,
    strategy: Annotated[
        str,
        typer.Option(
            "--strategy",
            "-s",
            help="Shortest-path selection strategy (linear|pq)",
        ),
    ] = "linear",
    raw: Annotated[
        bool,
        typer.Option(
            "--raw",
            help="Output the simplified raw curve without resolving it",
        ),
    ] = False,
    precision: Annotated[
        int | None,
        typer.Option(
            "--precision",
            "-p",
            help="Decimal places in WKT output (default: full precision)",
            min=0,
        ),
    ] = None,
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
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Print only the resulting WKT",
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
    """Compute the offset curve of a line at a signed distance.

    The raw offset is noded at its self-intersections and the shortest path
    from its start to its end is printed as WKT.

    Example:
        offsetcurve "LINESTRING (0 10, 125 10, 75 0, 200 0)" --distance 5
    """
    # Validate input source
    if (line_wkt is None) == (input_file is None):
        print_error("Provide exactly one of LINE_WKT or --input-file")
        raise typer.Exit(code=1)

    try:
        join_style = JoinStyle(join.lower())
    except ValueError:
        print_error(f"Invalid join style: {join}", details="Valid values: round, mitre, bevel")
        raise typer.Exit(code=1)

    try:
        resolver_strategy = ResolverStrategy(strategy.lower())
    except ValueError:
        print_error(f"Invalid strategy: {strategy}", details="Valid values: linear, pq")
        raise typer.Exit(code=1)

    if mitre_limit <= 0.0:
        print_error("--mitre-limit must be greater than 0")
        raise typer.Exit(code=1)

    # Create settings from CLI arguments
    settings = OffsetCurveSettings(
        buffer=BufferConfig(
            join_style=join_style,
            quadrant_segments=quadrant_segments,
            mitre_limit=mitre_limit,
            simplify_factor=simplify_factor,
        ),
        resolver=ResolverConfig(strategy=resolver_strategy),
        logging=LoggingConfig(log_file=log_file, log_level=log_level),
    )

    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )

    if not quiet:
        print_header(__version__)

    try:
        if input_file is not None:
            line = read_line_file(input_file)
            source = str(input_file)
        else:
            line = read_line(line_wkt or "")
            source = "<argument>"

        if not quiet:
            print_step("Reading line")
            coords = to_coordinates(line.coords)
            print_line_info(source, len(coords), path_length(coords))
            print_step(f"Offsetting by {distance}")

        builder = OffsetCurve(
            config=settings.buffer,
            strategy=settings.resolver.strategy,
            logger=OffsetCurveLogger(logger),
        )

        if raw:
            curve = builder.compute_raw(line, distance)
            result = LineString([c.to_tuple() for c in curve])
        else:
            result = builder.compute(line, distance)

        if output is not None:
            write_wkt(result, output, precision)

        print_wkt(format_wkt(result, precision))

        if not quiet and builder.last_stats is not None and not raw:
            stats = builder.last_stats
            print_success(
                strategy=resolver_strategy.value,
                vertex_count=stats.path_vertex_count,
                length=stats.path_length,
                graph_vertices=stats.vertex_count,
                committed=stats.committed_count,
                duration_ms=stats.duration_ms,
                output_path=str(output) if output else None,
            )

    except GeometryReadError as e:
        print_error(f"Could not read line: {e.reason}")
        raise typer.Exit(code=1)
    except OffsetCurveError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except OSError as e:
        print_error(f"Could not write output: {e}")
        raise typer.Exit(code=1)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
