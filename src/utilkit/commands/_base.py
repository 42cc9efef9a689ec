"""Custom Click base classes with --examples support.

Provides UtilCommand and UtilGroup that accept an ``examples`` parameter.
When ``--examples`` is passed, the command prints usage examples and exits.
"""

from __future__ import annotations

import json
from typing import IO, Any

import click

from utilkit.domain.errors import InvalidInputError
from utilkit.domain.values import parse_number


def _add_examples_option(cmd: click.Command | click.Group, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command or group."""

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


class UtilCommand(click.Command):
    """Click Command subclass that supports an ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


class UtilGroup(click.Group):
    """Click Group subclass that supports an ``--examples`` flag.

    Sets ``command_class = UtilCommand`` so all subcommands automatically
    accept the ``examples`` parameter without explicit ``cls=`` each time.
    """

    command_class = UtilCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


def load_json_list(source: IO[str] | str, *, param_hint: str) -> list[Any]:
    """Parse a JSON array from a file object or a literal string.

    Raises:
        click.BadParameter: If the input is not valid JSON or not an array.
    """
    raw = source if isinstance(source, str) else source.read()
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise click.BadParameter(f"Invalid JSON: {exc}", param_hint=param_hint) from exc
    if not isinstance(data, list):
        raise click.BadParameter("Expected a JSON array", param_hint=param_hint)
    return data


class NumberParamType(click.ParamType):
    """Plain decimal literal; integers stay exact ints."""

    name = "number"

    def convert(
        self, value: Any, param: click.Parameter | None, ctx: click.Context | None
    ) -> int | float:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return value
        try:
            return parse_number(value)
        except InvalidInputError as exc:
            self.fail(str(exc), param, ctx)


NUMBER = NumberParamType()
