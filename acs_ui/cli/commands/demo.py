from __future__ import annotations

from typing import Optional

import typer

from acs_common.errors import ACSError
from acs_layout.models import PositioningMode
from acs_ui.action_sheet import show_bottom_action_sheet
from acs_ui.cli.commands.helpers import fail
from acs_ui.models import Brightness
from acs_ui.wiring.dependencies import UIContext

DEMO_ENTRIES: list[tuple[str, str]] = [
    ("📚", "Class"),
    ("📁", "Folder"),
    ("📝", "Note"),
]


def demo_entries(count: int) -> list[tuple[str, str]]:
    """Cycle the demo entries, numbering repeats so captions stay distinct."""
    entries = []
    for idx in range(count):
        icon, caption = DEMO_ENTRIES[idx % len(DEMO_ENTRIES)]
        lap = idx // len(DEMO_ENTRIES)
        entries.append((icon, f"{caption} {lap + 1}" if lap else caption))
    return entries


def _pick(caption: str):
    return lambda: caption


def register_demo_command(app: typer.Typer, ctx: UIContext) -> None:
    @app.command("demo")
    def demo(
        mode: PositioningMode = typer.Option(
            PositioningMode.NATURAL_FLOW,
            "--mode",
            "-m",
            help="Grid positioning mode.",
            case_sensitive=False,
        ),
        count: int = typer.Option(
            len(DEMO_ENTRIES),
            "--count",
            "-n",
            min=0,
            help="Number of demo items to show.",
        ),
        max_per_row: Optional[int] = typer.Option(
            None,
            "--max-per-row",
            help="Row capacity override (inferred when omitted).",
        ),
        title: str = typer.Option("Add", "--title", help="Sheet title (rich markup)."),
        theme: Optional[Brightness] = typer.Option(
            None,
            "--theme",
            help="Theme brightness used for default border colours.",
            case_sensitive=False,
        ),
    ) -> None:
        """Show the "Add" sheet (Class / Folder / Note) and report the choice."""
        entries = demo_entries(count)
        if not entries:
            ctx.ui.present.warning("Nothing to show: --count is 0.")
            return
        try:
            choice = show_bottom_action_sheet(
                [icon for icon, _ in entries],
                actions=[_pick(caption) for _, caption in entries],
                captions=[caption for _, caption in entries],
                mode=mode,
                max_per_row=max_per_row,
                host=ctx.ui.sheets,
                settings=ctx.settings,
                title=f"[b]{title}[/b]",
                brightness=theme,
            )
        except ACSError as exc:
            raise fail(ctx, exc) from exc

        if choice is None:
            ctx.ui.present.info("Sheet dismissed.")
        else:
            ctx.ui.present.success(f"Selected: {choice}")
