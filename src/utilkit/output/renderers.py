"""Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  Lists of
records are drawn as a table; everything else as key-value fields.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from utilkit.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from utilkit.services.result import ServiceResult


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()
    if result.ok:
        _render_ok(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    return f"OK: {result.op}"


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    line = Text()
    line.append(f"  {key}: ", style="utilkit.key")
    if isinstance(value, (dict, list)):
        line.append(_json.dumps(value, separators=(",", ":")))
    elif key in ("output", "result"):
        line.append(str(value), style="utilkit.value")
    else:
        line.append(str(value))
    console.print(line)


def _is_record_list(value: Any) -> bool:
    return isinstance(value, list) and bool(value) and all(isinstance(v, dict) for v in value)


def _record_table(records: list[dict[str, Any]]) -> Table:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    columns = list(records[0])
    for col in columns:
        table.add_column(col.replace("_", " ").title())
    for record in records:
        table.add_row(*(str(record.get(col, "")) for col in columns))
    return table


def _render_ok(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    console.print(Text("OK", style="utilkit.ok"), Text(f"  {result.op}", style="utilkit.op"))
    tables: list[list[dict[str, Any]]] = []
    for key, value in result.data.items():
        if _is_record_list(value):
            tables.append(value)
        else:
            _field(console, key, value)
    for records in tables:
        console.print(_record_table(records))
    if verbose and result.meta:
        console.print(Text("  meta:", style="dim"))
        for k, v in result.meta.items():
            console.print(Text(f"    {k}: {v}"))


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="utilkit.error")
    op = Text(f"  {result.op}", style="utilkit.op")
    console.print(label, op, Text(" — "), Text(msg))

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))
