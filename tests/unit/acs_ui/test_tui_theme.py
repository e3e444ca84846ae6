import pytest
from rich import box

from acs_ui.models import Brightness
from acs_ui.tui.core import theme

pytestmark = pytest.mark.unit_ui


def test_theme_prompt_toolkit_style_has_keys() -> None:
    styles = theme.prompt_toolkit_sheet_style()
    for key in ("scrim", "sheet", "hint"):
        assert key in styles


def test_theme_barrier_color_tints_scrim() -> None:
    styles = theme.prompt_toolkit_sheet_style("#112233")
    assert styles["scrim"] == "bg:#112233"


def test_theme_border_color_follows_brightness() -> None:
    assert theme.resolve_border_color(None, Brightness.DARK) == "white"
    assert theme.resolve_border_color(None, Brightness.LIGHT) == "black"
    assert theme.resolve_border_color("magenta", Brightness.LIGHT) == "magenta"


def test_theme_border_box_lookup() -> None:
    assert theme.border_box("heavy") is box.HEAVY
    assert theme.border_box("missing") is box.ROUNDED


def test_theme_presenter_message_formats_known_level() -> None:
    assert theme.presenter_message("error", "x") == "[red]✖ x[/red]"
    assert theme.presenter_message("debug", "x") == "x"


def test_theme_panel_title_wraps_accent() -> None:
    title = theme.panel_title("Hello")
    assert theme.RICH_ACCENT_BOLD in title
