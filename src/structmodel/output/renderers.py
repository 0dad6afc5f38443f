"""Human-readable rendering of validation outcomes for the CLI."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape
from rich.table import Table
from rich.text import Text

from structmodel.output.console import create_console, get_output

if TYPE_CHECKING:
    from pathlib import Path

    from structmodel.domain.results import Violation


def render_valid(model_name: str, path: Path | str, *, no_color: bool = False) -> str:
    """One-line confirmation that a file holds a valid model."""
    console = create_console(no_color=no_color)
    console.print(
        f"[sm.ok]OK[/sm.ok] [sm.path]{escape(str(path))}[/sm.path] "
        f"is a valid [sm.model]{model_name}[/sm.model]",
        soft_wrap=True,
    )
    return get_output(console).rstrip("\n")


def render_violations(
    model_name: str,
    violations: list[Violation],
    *,
    no_color: bool = False,
) -> str:
    """Render a header line plus a table with one row per violation."""
    console = create_console(no_color=no_color)
    console.print(
        f"[sm.error]INVALID[/sm.error] [sm.model]{model_name}[/sm.model] "
        f"({len(violations)} violation(s))"
    )
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Field", style="sm.field", no_wrap=True)
    table.add_column("Message")
    for violation in violations:
        table.add_row(Text(violation.field_path), Text(violation.message))
    console.print(table)
    return get_output(console).rstrip("\n")
