import io

import pytest
from rich.console import Console

from acs_layout.planner import plan_layout
from acs_ui.cli.commands.plan import build_plan_table
from acs_ui.tui.system.components.table import RichTablePresenter
from acs_ui.tui.system.models import TableModel

pytestmark = pytest.mark.unit_ui


def test_rich_table_presenter_prints_plan_table() -> None:
    console = Console(file=io.StringIO(), width=100, color_system=None)
    RichTablePresenter(console).show(build_plan_table(plan_layout(list("abcdefg"))))
    output = console.file.getvalue()
    assert "7 items, capacity 3, filled_grid, 2 placeholders" in output
    assert "■ · ·" in output
    assert "placeholder" in output.splitlines()[-1]


def test_rich_table_presenter_truncates_to_console_width() -> None:
    console = Console(file=io.StringIO(), width=50, color_system=None)
    model = TableModel(title="wide", columns=["Items"], rows=[["x" * 200]])
    RichTablePresenter(console).show(model)
    assert all(len(line) <= 50 for line in console.file.getvalue().splitlines())
