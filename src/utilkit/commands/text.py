"""Commands: string casing and array concatenation."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from utilkit.commands._base import UtilCommand, load_json_list

if TYPE_CHECKING:
    from utilkit.commands._context import AppContext


@click.command(
    "format",
    cls=UtilCommand,
    examples="""\
  utilkit format "Hello World"
  utilkit format "Hello World" --upper
  utilkit --json format "MiXeD" --lower""",
)
@click.argument("text")
@click.option("--upper/--lower", "to_upper", default=False, help="Target case (default: lower).")
@click.pass_obj
def format_cmd(app: AppContext, text: str, to_upper: bool) -> None:
    """Convert TEXT to upper or lower case."""
    app.emit(app.toolkit.format_string(text, to_upper=to_upper))


@click.command(
    cls=UtilCommand,
    examples="""\
  utilkit concat '[1, 2]' '[3]' '[4, 5]'
  utilkit --json concat '["a"]' '[]' '["b", "c"]'""",
)
@click.argument("arrays", nargs=-1)
@click.pass_obj
def concat(app: AppContext, arrays: tuple[str, ...]) -> None:
    """Concatenate JSON ARRAYS one level deep, in order."""
    parsed = [load_json_list(raw, param_hint="ARRAYS") for raw in arrays]
    app.emit(app.toolkit.concatenate(parsed))
