"""Command: validate a JSON file against a model's rules."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from structmodel.commands._base import MODEL_TYPE, StructCommand
from structmodel.errors import StructModelError
from structmodel.output.renderers import render_valid, render_violations

if TYPE_CHECKING:
    from pydantic import BaseModel

    from structmodel.commands._context import AppContext


@click.command(
    cls=StructCommand,
    examples="""\
  structmodel check user.json --model structmodel.example:ExampleUser
  structmodel --log-json check data/order.json -m shop.models:Order""",
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
@click.pass_obj
def check(app: AppContext, path: Path, model_type: type[BaseModel]) -> None:
    """Load PATH as MODEL and report every rule violation."""
    try:
        instance = app.io.read_from_file(path, model_type, validate=False)
    except (StructModelError, OSError) as exc:
        app.fail(str(exc))

    violations = app.io.check(instance)
    if violations:
        click.echo(render_violations(model_type.__name__, violations), err=True)
        raise SystemExit(1)
    click.echo(render_valid(model_type.__name__, path))
