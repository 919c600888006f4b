"""Shared table construction for report output."""

from collections.abc import Sequence

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from .merge_cells import merge_cells


def _render_table(
    console: Console,
    headers: Sequence[str],
    rows: Sequence[Sequence[str]],
    merge_columns: Sequence[int],
    column_styles: Sequence[str] | None = None,
    header_style: str = "",
) -> None:
    """Print an ASCII table with merged cells.

    A row line is drawn after every row except where the next row continues
    the current merge group, so merged cells span their rows.
    """
    table = Table(box=box.ASCII, show_header=True, header_style=header_style, show_lines=False)
    styles = list(column_styles) if column_styles else [""] * len(headers)
    for header, style in zip(headers, styles):
        table.add_column(header, style=style, overflow="fold")

    merged = merge_cells(rows, merge_columns)
    for index, (cells, _continued) in enumerate(merged):
        next_continues = index + 1 < len(merged) and merged[index + 1][1]
        table.add_row(*[Text(cell) for cell in cells], end_section=not next_continues)

    console.print(table)
