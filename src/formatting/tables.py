"""Plain-text table rendering shared by the formatters."""

from __future__ import annotations

from io import StringIO
from typing import Any, Iterable, Optional, Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text

__all__ = ["render_table"]

TABLE_WIDTH = 120


def render_table(
    columns: Sequence[str],
    rows: Iterable[Sequence[Any]],
    *,
    title: Optional[str] = None,
) -> str:
    table = Table(title=title, show_header=True, header_style="bold")
    for col in columns:
        table.add_column(col, no_wrap=True)
    for row in rows:
        table.add_row(*(Text(str(v)) for v in row))
    buf = StringIO()
    console = Console(file=buf, width=TABLE_WIDTH, color_system=None, force_terminal=False)
    console.print(table)
    return buf.getvalue().rstrip("\n")
