"""Subcommand modules for structmodel.

Provides register_commands() which uses deferred imports to keep
``structmodel --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from structmodel.commands.check import check
    from structmodel.commands.dump import dump
    from structmodel.commands.example import example

    cli.add_command(check)
    cli.add_command(dump)
    cli.add_command(example)
