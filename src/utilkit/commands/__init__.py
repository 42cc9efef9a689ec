"""Subcommand modules for utilkit.

Provides register_commands() which uses deferred imports to keep
``utilkit --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from utilkit.commands.records import describe, filter_rating, priciest
    from utilkit.commands.square import square
    from utilkit.commands.text import concat, format_cmd
    from utilkit.commands.values import day_type, process

    cli.add_command(format_cmd)
    cli.add_command(concat)
    cli.add_command(filter_rating)
    cli.add_command(priciest)
    cli.add_command(describe)
    cli.add_command(process)
    cli.add_command(day_type)
    cli.add_command(square)
