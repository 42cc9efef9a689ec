"""Commands: rated-item filtering, product selection, vehicle descriptions."""

from __future__ import annotations

from typing import IO, TYPE_CHECKING

import click

from utilkit.commands._base import UtilCommand, load_json_list

if TYPE_CHECKING:
    from utilkit.commands._context import AppContext


@click.command(
    "filter-rating",
    cls=UtilCommand,
    examples="""\
  echo '[{"title": "A", "rating": 5}, {"title": "B", "rating": 2}]' | utilkit filter-rating
  utilkit filter-rating items.json --min-rating 3.5""",
)
@click.argument("source", type=click.File("r"), default="-")
@click.option(
    "--min-rating",
    type=float,
    default=None,
    help="Minimum rating to keep (default from [ratings] config).",
)
@click.pass_obj
def filter_rating(app: AppContext, source: IO[str], min_rating: float | None) -> None:
    """Keep rated items from SOURCE (JSON array, default stdin) above a threshold."""
    items = load_json_list(source, param_hint="SOURCE")
    app.emit(app.toolkit.filter_by_rating(items, min_rating=min_rating))


@click.command(
    cls=UtilCommand,
    examples="""\
  echo '[{"name": "A", "price": 10}, {"name": "B", "price": 20}]' | utilkit priciest
  utilkit --json priciest products.json""",
)
@click.argument("source", type=click.File("r"), default="-")
@click.pass_obj
def priciest(app: AppContext, source: IO[str]) -> None:
    """Show the most expensive product in SOURCE (JSON array, default stdin)."""
    products = load_json_list(source, param_hint="SOURCE")
    app.emit(app.toolkit.most_expensive(products))


@click.command(
    cls=UtilCommand,
    examples="""\
  utilkit describe Toyota 2020
  utilkit describe Toyota 2020 --model Corolla""",
)
@click.argument("make")
@click.argument("year", type=int)
@click.option("--model", default=None, help="Also describe the car model.")
@click.pass_obj
def describe(app: AppContext, make: str, year: int, model: str | None) -> None:
    """Describe a vehicle by MAKE and YEAR."""
    app.emit(app.toolkit.describe(make, year, model=model))
