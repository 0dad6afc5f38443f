"""Command: run the ExampleUser walkthrough."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from structmodel.commands._base import StructCommand
from structmodel.errors import StructModelError

if TYPE_CHECKING:
    from structmodel.commands._context import AppContext


@click.command(
    cls=StructCommand,
    examples="""\
  structmodel example
  structmodel example /tmp/arthur.json""",
)
@click.argument("path", type=click.Path(dir_okay=False, path_type=Path), default="user.json")
@click.pass_obj
def example(app: AppContext, path: Path) -> None:
    """Write, read back and validate an example user at PATH."""
    from structmodel.example import run_example

    try:
        lines = run_example(path)
    except (StructModelError, OSError) as exc:
        app.fail(str(exc))
    for line in lines:
        click.echo(line)
