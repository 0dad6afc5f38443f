"""Custom Click base classes: ``--examples`` support and a model-type parameter.

StructCommand accepts an ``examples`` parameter. When ``--examples`` is
passed, the command prints usage examples and exits. ModelTypeParam turns
``package.module:ClassName`` into the pydantic model class it names.
"""

from __future__ import annotations

import importlib
from typing import Any

import click
from pydantic import BaseModel


def _add_examples_option(cmd: click.Command, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class StructCommand(click.Command):
    """Click Command subclass that supports an ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


class ModelTypeParam(click.ParamType):
    """A ``module:ClassName`` reference to a pydantic model class."""

    name = "module:Class"

    def convert(
        self, value: Any, param: click.Parameter | None, ctx: click.Context | None
    ) -> type[BaseModel]:
        if isinstance(value, type) and issubclass(value, BaseModel):
            return value

        module_name, sep, attr_path = str(value).partition(":")
        if not sep or not module_name or not attr_path:
            self.fail(f"{value!r} is not of the form 'module:Class'", param, ctx)

        try:
            target: Any = importlib.import_module(module_name)
        except ImportError as exc:
            self.fail(f"Cannot import module {module_name!r}: {exc}", param, ctx)

        for attr in attr_path.split("."):
            try:
                target = getattr(target, attr)
            except AttributeError:
                self.fail(f"Module {module_name!r} has no attribute {attr_path!r}", param, ctx)

        if not (isinstance(target, type) and issubclass(target, BaseModel)):
            self.fail(f"{value!r} is not a pydantic model class", param, ctx)
        return target


MODEL_TYPE = ModelTypeParam()
