"""AppContext: shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Owns the settings, a ModelIO bound to them, and
error emission (stderr + exit code 1).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn

import click

from structmodel.services.model_io import ModelIO

if TYPE_CHECKING:
    from structmodel.config.settings import StructSettings


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: StructSettings) -> None:
        self.settings = settings
        self.io = ModelIO(settings)

        from structmodel.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def fail(self, message: str) -> NoReturn:
        """Write *message* to stderr and exit with status 1."""
        click.echo(f"ERROR: {message}", err=True)
        raise SystemExit(1)
