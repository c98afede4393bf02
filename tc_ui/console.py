"""Rich rendering helpers for the command line."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

from tc_ui.models import TableModel


def render_table(console: Console, model: TableModel) -> None:
    table = Table(title=model.title, show_lines=False)
    for column in model.columns:
        table.add_column(column)
    for row in model.rows:
        table.add_row(*row)
    console.print(table)
