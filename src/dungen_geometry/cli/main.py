"""dungen-geometry CLI.

Command-line interface for previewing shapes and sampling ranges.
"""

from __future__ import annotations

import json
from typing import Annotated, NoReturn

import numpy as np
import typer

from dungen_geometry import __version__
from dungen_geometry.geometry.capabilities import PlacedShape
from dungen_geometry.geometry.composition import InvertPlacedShape
from dungen_geometry.geometry.oval import Oval
from dungen_geometry.geometry.primitives import Area, Position, Size
from dungen_geometry.geometry.render import padded, render_containment
from dungen_geometry.sampling.ranges import PositionRange, SizeRange
from dungen_geometry.sampling.rng import get_default_rng
from dungen_geometry.utils.logging import (
    configure_logging,
    correlation_context,
    get_logger,
    new_run_id,
)

app = typer.Typer(
    name="dungen-geometry",
    help="dungen-geometry: tile-grid shapes and samplers for dungeon generation",
    add_completion=False,
)

VerboseOption = Annotated[
    int,
    typer.Option("--verbose", "-v", count=True, help="Increase verbosity (-v, -vv)"),
]
JsonOption = Annotated[bool, typer.Option("--json", help="Output as JSON")]
CountOption = Annotated[
    int, typer.Option("--count", "-n", min=1, help="Number of samples to draw")
]
SeedOption = Annotated[
    int | None,
    typer.Option("--seed", "-s", help="Seed for reproducible samples"),
]


# =============================================================================
# Commands
# =============================================================================


@app.command()
def version(json_output: JsonOption = False) -> None:
    """Show version information."""
    if json_output:
        typer.echo(json.dumps({"version": __version__}))
    else:
        typer.echo(f"dungen-geometry {__version__}")


@app.command()
def oval(
    width: Annotated[int, typer.Argument(min=0, help="Bounding box width")],
    height: Annotated[int, typer.Argument(min=0, help="Bounding box height")],
    invert: Annotated[
        bool, typer.Option("--invert", help="Render the complement of the oval")
    ] = False,
    padding: Annotated[
        int, typer.Option("--padding", "-p", min=0, help="Tiles to show per side")
    ] = 0,
    verbose: VerboseOption = 0,
) -> None:
    """Render an oval's containment grid."""
    _configure_logging(verbose)
    shape: PlacedShape = Oval(area=Area.from_size(Size(width=width, height=height)))
    if invert:
        shape = InvertPlacedShape(shape)
    _echo_shape(shape, padding)


@app.command()
def area(
    width: Annotated[int, typer.Argument(min=0, help="Area width")],
    height: Annotated[int, typer.Argument(min=0, help="Area height")],
    padding: Annotated[
        int, typer.Option("--padding", "-p", min=0, help="Tiles to show per side")
    ] = 0,
    verbose: VerboseOption = 0,
) -> None:
    """Render a rectangular area's containment grid."""
    _configure_logging(verbose)
    _echo_shape(Area.from_size(Size(width=width, height=height)), padding)


@app.command("sample-size")
def sample_size(  # noqa: PLR0913
    min_width: Annotated[int, typer.Argument(min=0, help="Minimum width")],
    min_height: Annotated[int, typer.Argument(min=0, help="Minimum height")],
    max_width: Annotated[int, typer.Argument(min=0, help="Maximum width")],
    max_height: Annotated[int, typer.Argument(min=0, help="Maximum height")],
    count: CountOption = 1,
    seed: SeedOption = None,
    verbose: VerboseOption = 0,
    json_output: JsonOption = False,
) -> None:
    """Sample sizes uniformly from inclusive bounds."""
    _configure_logging(verbose)
    logger = get_logger(__name__)

    try:
        size_range = SizeRange(
            min_size=Size(width=min_width, height=min_height),
            max_size=Size(width=max_width, height=max_height),
        )
    except ValueError as e:
        _fail(e, json_output)

    rng = _make_rng(seed)
    with correlation_context(run_id=new_run_id(), layer="sample-size"):
        sizes = [size_range.sample(rng) for _ in range(count)]
        logger.info("Sampled sizes", count=count, seed=seed)

    if json_output:
        typer.echo(json.dumps([size.model_dump() for size in sizes]))
    else:
        for size in sizes:
            typer.echo(f"{size.width}x{size.height}")


@app.command("sample-position")
def sample_position(  # noqa: PLR0913
    start_x: Annotated[int, typer.Argument(help="Segment start x")],
    start_y: Annotated[int, typer.Argument(help="Segment start y")],
    end_x: Annotated[int, typer.Argument(help="Segment end x")],
    end_y: Annotated[int, typer.Argument(help="Segment end y")],
    count: CountOption = 1,
    seed: SeedOption = None,
    verbose: VerboseOption = 0,
    json_output: JsonOption = False,
) -> None:
    """Sample positions on the segment between two corners."""
    _configure_logging(verbose)
    logger = get_logger(__name__)

    position_range = PositionRange(
        start=Position(x=start_x, y=start_y),
        end=Position(x=end_x, y=end_y),
    )
    rng = _make_rng(seed)
    with correlation_context(run_id=new_run_id(), layer="sample-position"):
        positions = [position_range.sample(rng) for _ in range(count)]
        logger.info("Sampled positions", count=count, seed=seed)

    if json_output:
        typer.echo(json.dumps([position.model_dump() for position in positions]))
    else:
        for position in positions:
            typer.echo(f"{position.x},{position.y}")


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context) -> None:
    """dungen-geometry: tile-grid shapes and samplers for dungeon generation."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())


def _configure_logging(verbose: int) -> None:
    """Configure logging based on verbosity level."""
    if verbose == 0:
        level = "WARNING"
    elif verbose == 1:
        level = "INFO"
    else:  # verbose >= 2
        level = "DEBUG"

    configure_logging(level=level)


def _make_rng(seed: int | None) -> np.random.Generator:
    if seed is None:
        return get_default_rng()
    return np.random.default_rng(seed)


def _echo_shape(shape: PlacedShape, padding: int) -> None:
    typer.echo(render_containment(shape, padded(shape.area, padding)))


def _fail(error: Exception, json_output: bool) -> NoReturn:
    if json_output:
        typer.echo(json.dumps({"error": str(error)}))
    else:
        typer.echo(f"Error: {error}", err=True)
    raise typer.Exit(1) from None
