import io

import pytest
from rich.console import Console
from rich.text import Text

from acs_layout.models import noop
from acs_layout.planner import plan_layout
from acs_ui.models import Alignment, Brightness, SheetOptions
from acs_ui.tui.system.components.sheet_layout import (
    SheetRenderer,
    arrange_row,
    index_labels,
    interactive_positions,
)

pytestmark = pytest.mark.unit_ui


def _render(renderable, width: int = 80) -> str:
    console = Console(width=width, color_system=None, file=io.StringIO())
    with console.capture() as capture:
        console.print(renderable)
    return capture.get()


def test_interactive_positions_skip_inert_and_placeholder_cells() -> None:
    plan = plan_layout(["a", "b", "c", "d"], actions=[noop, None, noop, noop], max_per_row=3)
    assert interactive_positions(plan) == [(0, 0), (0, 2), (1, 0)]
    assert index_labels(plan) == {(0, 0): "1", (0, 2): "2", (1, 0): "3"}


def test_only_interactive_cells_have_borders() -> None:
    plan = plan_layout(list("abcdefg"))
    output = _render(SheetRenderer(SheetOptions(), Brightness.DARK).render(plan))
    assert output.count("╭") == 7
    assert output.count("╰") == 7


def test_captions_only_under_interactive_items() -> None:
    plan = plan_layout(
        ["a", "b"],
        actions=[noop, None],
        captions=["Shown", "Hidden"],
        mode="natural_flow",
    )
    output = _render(SheetRenderer(SheetOptions(), Brightness.DARK).render(plan))
    assert "Shown" in output
    assert "Hidden" not in output
    assert output.count("╭") == 1


def test_title_is_rendered_above_rows() -> None:
    plan = plan_layout(["a"])
    output = _render(SheetRenderer(SheetOptions(title="[b]Add[/b]"), Brightness.DARK).render(plan))
    lines = [line for line in output.splitlines() if line.strip()]
    assert "Add" in lines[0]
    assert "[b]" not in output


def test_numbered_render_labels_cells() -> None:
    plan = plan_layout(["a", "b"], mode="natural_flow")
    output = _render(
        SheetRenderer(SheetOptions(), Brightness.DARK).render(plan, numbered=True)
    )
    top = next(line for line in output.splitlines() if "╭" in line)
    assert "1" in top
    assert "2" in top


def test_border_color_resolved_without_touching_options() -> None:
    options = SheetOptions()
    assert SheetRenderer(options, Brightness.DARK).border_color == "white"
    assert SheetRenderer(options, Brightness.LIGHT).border_color == "black"
    assert options.border_color is None
    assert SheetRenderer(SheetOptions(border_color="red"), Brightness.DARK).border_color == "red"


def test_cell_width_accounts_for_padding_and_border() -> None:
    renderer = SheetRenderer(SheetOptions(item_width=4), Brightness.DARK)
    assert renderer.cell_width == 4 + 2 + 2


def test_row_gap_separates_rows() -> None:
    plan = plan_layout(list("abcd"))
    tight = _render(SheetRenderer(SheetOptions(row_gap=0), Brightness.DARK).render(plan))
    loose = _render(SheetRenderer(SheetOptions(row_gap=2), Brightness.DARK).render(plan))
    assert len(loose.splitlines()) == len(tight.splitlines()) + 2


def test_arrange_row_start_and_end() -> None:
    cells = [Text("A"), Text("B")]
    start = _render(arrange_row(cells, Alignment.START), width=40).splitlines()[0]
    end = _render(arrange_row(cells, Alignment.END), width=40).splitlines()[0]
    assert start.startswith("A B")
    assert end.rstrip().endswith("A B")
    assert end.index("A") > start.index("A")


def test_arrange_row_space_between_pushes_to_edges() -> None:
    line = _render(arrange_row([Text("A"), Text("B")], Alignment.SPACE_BETWEEN), width=40)
    first = line.splitlines()[0]
    assert first.startswith("A")
    assert first.rstrip().endswith("B")
    assert len(first.rstrip()) == 40


@pytest.mark.parametrize(
    "alignment", [Alignment.CENTER, Alignment.SPACE_AROUND, Alignment.SPACE_EVENLY]
)
def test_arrange_row_centered_modes_leave_margins(alignment: Alignment) -> None:
    first = _render(arrange_row([Text("A"), Text("B")], alignment), width=40).splitlines()[0]
    assert first.startswith(" ")
    assert "A" in first and "B" in first


def test_caption_brackets_are_shown_literally() -> None:
    plan = plan_layout(["a", "b"], captions=["Save to [/tmp]", "[b]"], mode="natural_flow")
    output = _render(SheetRenderer(SheetOptions(), Brightness.DARK).render(plan))
    assert "Save to [/tmp]" in output
    assert "[b]" in output


def test_item_strings_are_not_markup() -> None:
    plan = plan_layout(["[/x]"], max_per_row=1)
    output = _render(SheetRenderer(SheetOptions(item_width=5), Brightness.DARK).render(plan))
    assert "[/x]" in output


def test_malformed_title_markup_falls_back_to_text() -> None:
    plan = plan_layout(["a"])
    output = _render(SheetRenderer(SheetOptions(title="Files [/tmp]"), Brightness.DARK).render(plan))
    assert "Files [/tmp]" in output
