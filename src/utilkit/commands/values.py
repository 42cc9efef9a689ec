"""Commands: text/number processing and day classification."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from utilkit.commands._base import UtilCommand

if TYPE_CHECKING:
    from utilkit.commands._context import AppContext
    from utilkit.services.toolkit import ValueKind


@click.command(
    cls=UtilCommand,
    context_settings={"ignore_unknown_options": True},
    examples="""\
  utilkit process hello
  utilkit process 10
  utilkit process 10 --as text
  utilkit process -- -2.5""",
)
@click.argument("value")
@click.option(
    "--as",
    "kind",
    type=click.Choice(["auto", "text", "number"]),
    default="auto",
    help="Treat VALUE as text or number (default: detect).",
)
@click.pass_obj
def process(app: AppContext, value: str, kind: ValueKind) -> None:
    """Length of a text VALUE, or double a numeric VALUE."""
    app.emit(app.toolkit.process_value(value, kind=kind))


@click.command(
    "day-type",
    cls=UtilCommand,
    examples="""\
  utilkit day-type Saturday
  utilkit --json day-type wednesday""",
)
@click.argument("day")
@click.pass_obj
def day_type(app: AppContext, day: str) -> None:
    """Classify DAY as Weekday or Weekend."""
    app.emit(app.toolkit.day_type(day))
