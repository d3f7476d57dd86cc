"""Render command contexts as a rich table or as JSON."""

from __future__ import annotations

import dataclasses
import json
from collections.abc import Sequence
from datetime import datetime
from enum import Enum
from typing import Any

import click
from rich.console import Console
from rich.table import Table

__all__ = ["format_cell", "render"]

Column = tuple[str, str]


def format_cell(value: Any) -> str:
    """Text for one table cell."""
    if value is None:
        return "-"
    if isinstance(value, bool):
        return "yes" if value else "no"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, datetime):
        return value.strftime("%Y-%m-%d %H:%M:%S")
    if isinstance(value, list | tuple):
        return ", ".join(format_cell(item) for item in value) or "-"
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        value = {k: v for k, v in value.to_dict().items() if v is not None}
    if isinstance(value, dict):
        return ", ".join(f"{k}={v}" for k, v in value.items()) or "-"
    return str(value)


def _render_json(contexts: Sequence[Any]) -> None:
    click.echo(json.dumps([context.to_dict() for context in contexts], indent=2))


def _render_table(
    contexts: Sequence[Any], columns: Sequence[Column], title: str | None, console: Console
) -> None:
    table = Table(title=title, show_header=True, header_style="bold", border_style="dim")
    for header, _ in columns:
        table.add_column(header)

    if not contexts:
        table.add_row("[dim]No results[/dim]", *([""] * (len(columns) - 1)))
    else:
        for context in contexts:
            table.add_row(*(format_cell(getattr(context, attr, None)) for _, attr in columns))

    console.print(table)


def render(
    contexts: Sequence[Any],
    columns: Sequence[Column],
    output_format: str = "table",
    title: str | None = None,
    console: Console | None = None,
) -> None:
    """Print contexts in the requested output format.

    Args:
        contexts: Context objects with a to_dict method
        columns: (header, attribute) pairs shown in table output
        output_format: "table" or "json"
        title: Table title
        console: Console to print tables to (defaults to stdout)
    """
    if output_format == "json":
        _render_json(contexts)
        return
    _render_table(contexts, columns, title, console or Console())
