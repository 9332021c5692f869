"""Typer CLI for floor plank layout."""

import logging
import math
from pathlib import Path
from typing import Annotated

import typer

from floorboards.application import FloorPlanner
from floorboards.application.config import (
    ConfigError,
    RoomDocument,
    load_document,
    merge_parameters_with_cli,
)
from floorboards.domain import CutEnd, FloorboardsError, Room

app = typer.Typer(
    name="floorboards",
    help="Plan the cutting and laying of floor planks in a rectilinear room.",
)


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log each column as it is laid")
    ] = False,
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def parse_precut(value: str) -> tuple[float, CutEnd]:
    """Parse a pre-cut plank given as ``LENGTH>`` (cut at top) or ``<LENGTH``.

    Raises:
        typer.BadParameter: If the value is not in either form.
    """
    text = value.strip()
    if text.endswith(CutEnd.TOP.value):
        cut_end, number = CutEnd.TOP, text[:-1]
    elif text.startswith(CutEnd.BOTTOM.value):
        cut_end, number = CutEnd.BOTTOM, text[1:]
    else:
        raise typer.BadParameter(
            f"{value!r}: use LENGTH> for a plank cut at the top, <LENGTH for the bottom"
        )
    try:
        length = float(number)
    except ValueError:
        raise typer.BadParameter(f"{value!r}: length must be a number")
    if not math.isfinite(length) or length <= 0:
        raise typer.BadParameter(f"{value!r}: length must be a positive number")
    return length, cut_end


def _load(room_file: Path) -> RoomDocument:
    try:
        return load_document(room_file)
    except ConfigError as e:
        _display_config_error(e)
        raise typer.Exit(code=1)


def _display_config_error(error: ConfigError) -> None:
    typer.echo("Errors:", err=True)
    if error.error_type == "validation" and error.details:
        for detail in error.details:
            typer.echo(f"  {detail['path']}: {detail['message']}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)


def _echo_summary(room: Room) -> None:
    result = room.result()
    typer.echo(f"Columns:       {result.column_count}")
    typer.echo(f"Planks needed: {result.planks_needed}")
    typer.echo(f"Cuts:          {result.cuts}")
    typer.echo(f"Waste:         {result.waste:.1f}")
    typer.echo(f"Partials left: {len(room.partials)}")


@app.command()
def layout(
    room_file: Annotated[
        Path, typer.Argument(help="Path to the JSON room document")
    ],
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the laid-out room to this file"),
    ] = None,
    shuffle: Annotated[
        bool,
        typer.Option("--shuffle", help="Shuffle equal-height columns to avoid staircases"),
    ] = False,
    schedule: Annotated[
        bool,
        typer.Option("--schedule", help="List the pieces cut from each plank"),
    ] = False,
    recompute: Annotated[
        bool,
        typer.Option("--recompute", help="Lay the room out again even if it is already laid"),
    ] = False,
    precut: Annotated[
        list[str] | None,
        typer.Option(
            "--precut",
            help="Pre-cut plank in stock, as LENGTH> (cut at top) or <LENGTH (cut at bottom). Repeatable.",
        ),
    ] = None,
    seed: Annotated[
        int | None, typer.Option("--seed", help="Random seed for --shuffle")
    ] = None,
    plank_width: Annotated[
        float | None, typer.Option("--plank-width", help="Plank width")
    ] = None,
    plank_length: Annotated[
        float | None, typer.Option("--plank-length", help="Length of an uncut plank")
    ] = None,
    cut_thickness: Annotated[
        float | None, typer.Option("--cut-thickness", help="Saw kerf")
    ] = None,
    min_plank_length: Annotated[
        float | None,
        typer.Option("--min-plank-length", help="Shortest plank or offcut worth using"),
    ] = None,
    start_left: Annotated[
        float | None,
        typer.Option("--start-left", help="Horizontal offset of the first column"),
    ] = None,
    start_top: Annotated[
        float | None,
        typer.Option("--start-top", help="Vertical offset of the first plank"),
    ] = None,
) -> None:
    """Lay planks into a room and report what it takes.

    A room file that already holds a layout is reported as saved, unless
    --recompute, --precut or a parameter override is given.

    Example:
        floorboards layout room.json --shuffle -o room-laid.json
    """
    stock = [parse_precut(value) for value in precut or []]
    document = _load(room_file)

    overrides = {
        "plank_width": plank_width,
        "plank_length": plank_length,
        "cut_thickness": cut_thickness,
        "min_plank_length": min_plank_length,
        "start_left": start_left,
        "start_top": start_top,
    }
    if any(value is not None for value in overrides.values()):
        try:
            document = merge_parameters_with_cli(document, **overrides)
        except ConfigError as e:
            _display_config_error(e)
            raise typer.Exit(code=1)
        recompute = True

    planner = FloorPlanner(seed=seed)
    try:
        room = planner.room_from_document(document, recompute=recompute and not stock)
        for length, cut_end in stock:
            planner.engine.add_partial(room, length, cut_end, recompute=False)
        if stock:
            planner.recompute(room)
        if shuffle:
            planner.shuffle(room)
    except FloorboardsError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    _echo_summary(room)
    if schedule:
        typer.echo("\nCutting schedule:")
        for entry in planner.schedule(room):
            typer.echo(f"  {entry}")

    if output is not None:
        try:
            planner.save(room, output)
        except ConfigError as e:
            _display_config_error(e)
            raise typer.Exit(code=1)
        typer.echo(f"\nSaved to {output}")


@app.command()
def validate(
    room_file: Annotated[
        Path, typer.Argument(help="Path to the JSON room document to validate")
    ],
) -> None:
    """Check a room document without laying it out.

    Exit codes:
        0 - Document is valid
        1 - Document has errors
    """
    document = _load(room_file)
    typer.echo(
        f"{room_file} is valid: {len(document.vertices)} vertices, "
        f"{len(document.columns)} saved columns"
    )


if __name__ == "__main__":
    app()
