"""Command: delayed square."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from utilkit.commands._base import NUMBER, UtilCommand

if TYPE_CHECKING:
    from utilkit.commands._context import AppContext


@click.command(
    cls=UtilCommand,
    context_settings={"ignore_unknown_options": True},
    examples="""\
  utilkit square 5
  utilkit square 5 --delay 0
  utilkit --json square 1.5""",
)
@click.argument("n", type=NUMBER)
@click.option(
    "--delay",
    type=click.FloatRange(min=0),
    default=None,
    help="Seconds to wait before answering (default from [square] config).",
)
@click.pass_obj
def square(app: AppContext, n: int | float, delay: float | None) -> None:
    """Square N after a delay. Negative N fails immediately."""
    app.emit(app.toolkit.square(n, delay=delay))
