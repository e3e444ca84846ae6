from __future__ import annotations

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from acs_ui.tui.system.models import TableModel

_MIN_TABLE_WIDTH = 40


def build_rich_table(
    model: TableModel,
    *,
    console: Console,
    border_style: str = "blue",
    header_style: str = "bold blue",
    title_style: str = "bold blue",
    box_style: box.Box = box.ROUNDED,
) -> Table:
    """
    Build a Rich Table from a TableModel capped at the console width.

    The table is at least as wide as its title. Cells stay single-line and
    are truncated with an ellipsis.
    """
    max_width = max(_MIN_TABLE_WIDTH, console.size.width - 2)

    title = Text.from_markup(model.title)
    title.no_wrap = True
    title.overflow = "ellipsis"

    table = Table(
        title=title,
        box=box_style,
        border_style=border_style,
        header_style=header_style,
        title_style=title_style,
        caption=model.caption,
        caption_style="dim",
    )
    for column in model.columns:
        table.add_column(column, overflow="ellipsis", no_wrap=True)
    for row in model.rows:
        table.add_row(*row)

    natural = console.measure(table).maximum
    if natural > max_width:
        table.width = max_width
    elif natural < title.cell_len:
        table.width = min(title.cell_len, max_width)
    return table
