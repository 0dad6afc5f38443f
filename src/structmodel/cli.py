"""Root CLI group for structmodel with global flags and command registration."""

from __future__ import annotations

import click

from structmodel import __version__
from structmodel.commands import register_commands
from structmodel.commands._context import AppContext
from structmodel.config.settings import StructSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="structmodel")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """structmodel: JSON models with opt-in rule validation."""
    overrides: dict[str, bool] = {}
    if verbose:
        overrides["verbose"] = True
    if log_json:
        overrides["log_json"] = True
    settings = StructSettings.load(config_path=config_path, **overrides)
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
