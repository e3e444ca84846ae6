from __future__ import annotations

from typing import Any

from rich.align import Align
from rich.console import Group, RenderableType
from rich.errors import MarkupError
from rich.padding import Padding
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from acs_layout.models import LayoutPlan, RowGroup, Slot
from acs_ui.models import Alignment, Brightness, SheetOptions
from acs_ui.tui.core import theme

Position = tuple[int, int]

# Spacer ratios (outer, between) emulating flex main-axis distribution.
_SPACER_RATIOS: dict[Alignment, tuple[int, int]] = {
    Alignment.SPACE_BETWEEN: (0, 1),
    Alignment.SPACE_AROUND: (1, 2),
    Alignment.SPACE_EVENLY: (1, 1),
}

_PACKED_ALIGN: dict[Alignment, str] = {
    Alignment.START: "left",
    Alignment.CENTER: "center",
    Alignment.END: "right",
}


def _as_renderable(value: Any) -> RenderableType:
    """Strings are shown literally; pass a Text or renderable for styling."""
    if isinstance(value, str):
        return Text(value)
    return value


def _title_renderable(value: Any) -> RenderableType:
    if not isinstance(value, str):
        return value
    try:
        return Text.from_markup(value)
    except MarkupError:
        return Text(value)


def interactive_positions(plan: LayoutPlan) -> list[Position]:
    """Grid positions of the interactive slots in reading order."""
    return [
        (row_idx, col_idx)
        for row_idx, row in enumerate(plan.rows)
        for col_idx, slot in enumerate(row)
        if slot.interactive
    ]


def index_labels(plan: LayoutPlan) -> dict[Position, str]:
    return {
        position: str(number)
        for number, position in enumerate(interactive_positions(plan), start=1)
    }


def arrange_row(cells: list[RenderableType], alignment: Alignment) -> RenderableType:
    """Lay ``cells`` out horizontally following ``alignment``."""
    if alignment in _PACKED_ALIGN:
        grid = Table.grid(padding=(0, 1))
        for _ in cells:
            grid.add_column()
        grid.add_row(*cells)
        return Align(grid, align=_PACKED_ALIGN[alignment])  # type: ignore[arg-type]

    outer, between = _SPACER_RATIOS[alignment]
    grid = Table.grid(expand=True)
    row: list[RenderableType] = []

    def spacer(ratio: int) -> None:
        if ratio:
            grid.add_column(ratio=ratio)
            row.append(Text(""))

    spacer(outer)
    for idx, cell in enumerate(cells):
        if idx:
            spacer(between)
        grid.add_column(no_wrap=True)
        row.append(cell)
    spacer(outer)
    grid.add_row(*row)
    return grid


class SheetRenderer:
    """
    Build the rich renderable for an action sheet.

    Interactive slots are drawn as bordered cells with their caption below,
    other slots as borderless cells of the same footprint. Rows are
    separated by ``row_gap`` blank lines. The border colour is resolved once
    from the options override or the theme brightness.
    """

    def __init__(self, options: SheetOptions, brightness: Brightness) -> None:
        self._options = options
        self._border_color = theme.resolve_border_color(options.border_color, brightness)
        self._box = theme.border_box(options.border_box)

    @property
    def border_color(self) -> str:
        return self._border_color

    @property
    def cell_width(self) -> int:
        # Two border columns around the padded item area.
        return self._options.item_width + self._options.item_padding.horizontal + 2

    def render(
        self,
        plan: LayoutPlan,
        *,
        focus: Position | None = None,
        numbered: bool = False,
    ) -> RenderableType:
        parts: list[RenderableType] = []
        title = self.render_title()
        if title is not None:
            parts.append(title)
        labels = index_labels(plan) if numbered else {}
        last = plan.row_count - 1
        for row_idx, row in enumerate(plan.rows):
            rendered = self.render_row(row, row_idx, focus=focus, labels=labels)
            if row_idx < last and self._options.row_gap:
                rendered = Padding(rendered, (0, 0, self._options.row_gap, 0))
            parts.append(rendered)

        style = ""
        if self._options.background_color:
            style = f"on {self._options.background_color}"
        return Padding(Group(*parts), self._options.sheet_padding.as_rich(), style=style)

    def render_title(self) -> RenderableType | None:
        if not self._options.title:
            return None
        return Padding(
            Align.center(_title_renderable(self._options.title)),
            self._options.title_padding.as_rich(),
        )

    def render_row(
        self,
        row: RowGroup,
        row_idx: int,
        *,
        focus: Position | None = None,
        labels: dict[Position, str] | None = None,
    ) -> RenderableType:
        labels = labels or {}
        cells = [
            self.render_cell(
                slot,
                focused=focus == (row_idx, col_idx),
                label=labels.get((row_idx, col_idx)),
            )
            for col_idx, slot in enumerate(row)
        ]
        return arrange_row(cells, self._options.alignment)

    def render_cell(
        self,
        slot: Slot,
        *,
        focused: bool = False,
        label: str | None = None,
    ) -> RenderableType:
        body = Align.center(_as_renderable(slot.item) if slot.item is not None else Text(""))
        if slot.interactive:
            border_style = theme.FOCUS_BORDER_STYLE if focused else self._border_color
            cell_box = self._box
        else:
            border_style = ""
            cell_box = theme.BLANK_BOX
        frame = Panel(
            body,
            box=cell_box,
            border_style=border_style,
            padding=self._options.item_padding.as_rich(),
            width=self.cell_width,
            title=Text(label, style=theme.INDEX_LABEL_STYLE) if label else None,
        )

        caption = slot.visible_caption
        if caption is None:
            return frame
        caption_text = _as_renderable(caption)
        return Group(
            Align.center(frame),
            Padding(Align.center(caption_text), self._options.caption_padding.as_rich()),
        )
