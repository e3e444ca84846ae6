from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console

from acs_common.errors import ACSError
from acs_layout.models import LayoutPlan, PositioningMode, RowGroup
from acs_layout.planner import plan_layout
from acs_ui.cli.commands.helpers import fail
from acs_ui.models import SheetOptions
from acs_ui.tui.system.components.sheet_layout import SheetRenderer
from acs_ui.tui.system.facade import TUI
from acs_ui.tui.system.models import TableModel
from acs_ui.wiring.dependencies import UIContext


def _slot_summary(row: RowGroup) -> str:
    return " ".join("·" if slot.placeholder else "■" for slot in row)


def build_plan_table(plan: LayoutPlan) -> TableModel:
    """Tabulate a plan one row per grid row."""
    summary = plan.describe()
    title = (
        f"{summary['items']} items, capacity {summary['capacity']}, "
        f"{summary['mode']}, {summary['padding']} placeholders"
    )
    rows = [
        [
            str(idx + 1),
            str(len(row)),
            _slot_summary(row),
            ", ".join(str(slot.item) for slot in row if not slot.placeholder),
        ]
        for idx, row in enumerate(plan.rows)
    ]
    return TableModel(
        title=title,
        columns=["Row", "Slots", "Layout", "Items"],
        rows=rows,
        caption="■ item  · placeholder",
    )


def _preview_console(ctx: UIContext) -> Console:
    ui = ctx.ui
    if isinstance(ui, TUI):
        return ui.console
    return Console(color_system=None)


def register_plan_command(app: typer.Typer, ctx: UIContext) -> None:
    @app.command("plan")
    def plan(
        count: int = typer.Argument(..., min=0, help="Number of items to lay out."),
        mode: PositioningMode = typer.Option(
            PositioningMode.FILLED_GRID,
            "--mode",
            "-m",
            help="Grid positioning mode.",
            case_sensitive=False,
        ),
        max_per_row: Optional[int] = typer.Option(
            None,
            "--max-per-row",
            help="Row capacity override (inferred when omitted).",
        ),
        preview: bool = typer.Option(
            False,
            "--preview",
            help="Also print a static preview of the grid.",
        ),
    ) -> None:
        """Print the row capacity and rows planned for COUNT items."""
        try:
            layout = plan_layout(
                [str(number) for number in range(1, count + 1)],
                mode=mode,
                max_per_row=max_per_row,
            )
        except ACSError as exc:
            raise fail(ctx, exc) from exc

        ctx.ui.tables.show(build_plan_table(layout))
        if preview:
            renderer = SheetRenderer(SheetOptions(), ctx.settings.brightness)
            _preview_console(ctx).print(renderer.render(layout))
