"""Command: load a JSON file and re-encode it."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from structmodel.commands._base import MODEL_TYPE, StructCommand
from structmodel.errors import StructModelError

if TYPE_CHECKING:
    from pydantic import BaseModel

    from structmodel.commands._context import AppContext


@click.command(
    cls=StructCommand,
    examples="""\
  structmodel dump user.json -m structmodel.example:ExampleUser
  structmodel dump user.json -m structmodel.example:ExampleUser --indent 4
  structmodel dump user.json -m structmodel.example:ExampleUser -o pretty.json""",
)
@click.argument("path", type=click.Path(dir_okay=True, path_type=Path))
@click.option(
    "-m",
    "--model",
    "model_type",
    type=MODEL_TYPE,
    required=True,
    help="Model class as module:Class.",
)
@click.option(
    "--indent",
    type=int,
    default=None,
    help="Spaces per nesting level; 0 for compact (default from settings).",
)
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write to this file instead of stdout.",
)
@click.option("--no-validate", is_flag=True, help="Skip rule validation after loading.")
@click.pass_obj
def dump(
    app: AppContext,
    path: Path,
    model_type: type[BaseModel],
    indent: int | None,
    output: Path | None,
    no_validate: bool,
) -> None:
    """Load PATH as MODEL and print it as JSON."""
    try:
        instance = app.io.read_from_file(path, model_type, validate=not no_validate)
        if output is None:
            click.echo(app.io.to_json_text(instance, indent))
            return
    except (StructModelError, OSError) as exc:
        app.fail(str(exc))

    if not app.io.write_to_file(instance, output, indent):
        app.fail(f"Unable to write {output}")
    click.echo(f"Wrote {output}")
