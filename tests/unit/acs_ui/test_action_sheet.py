import asyncio

import pytest

from acs_common.errors import ConfigurationError
from acs_layout.models import PositioningMode, noop
from acs_ui.action_sheet import (
    prepare_sheet,
    show_bottom_action_sheet,
    show_bottom_action_sheet_async,
)
from acs_ui.models import Brightness, EdgeInsets, SheetOptions
from acs_ui.settings import UISettings
from acs_ui.tui.system.headless import HeadlessSheetHost

pytestmark = pytest.mark.unit_ui


def test_show_sheet_forwards_plan_and_options() -> None:
    host = HeadlessSheetHost()
    result = show_bottom_action_sheet(
        ["📚", "📁", "📝"],
        captions=["Class", "Folder", "Note"],
        mode=PositioningMode.NATURAL_FLOW,
        host=host,
        settings=UISettings(),
        title="Add",
        host_options={"elevation": 8, "use_root_navigator": True},
    )
    assert result is None
    recorded = host.recorded[0]
    assert recorded.plan.capacity == 3
    assert recorded.plan.row_count == 1
    assert all(slot.action is noop for slot in recorded.plan.slots())
    assert recorded.options.title == "Add"
    assert recorded.options.host_options == {"elevation": 8, "use_root_navigator": True}


def test_show_sheet_returns_action_result() -> None:
    host = HeadlessSheetHost(next_tap=2)
    result = show_bottom_action_sheet(
        ["a", "b", "c", "d"],
        actions=[lambda: 1, lambda: 2, lambda: 3, lambda: 4],
        host=host,
        settings=UISettings(),
    )
    assert result == 3


def test_show_sheet_fills_brightness_from_settings() -> None:
    host = HeadlessSheetHost()
    show_bottom_action_sheet(["a"], host=host, settings=UISettings(brightness=Brightness.LIGHT))
    assert host.recorded[0].options.brightness is Brightness.LIGHT


def test_show_sheet_keeps_caller_options() -> None:
    host = HeadlessSheetHost()
    base = SheetOptions(border_color="green")
    show_bottom_action_sheet(["a"], options=base, host=host, settings=UISettings(), row_gap=3)
    forwarded = host.recorded[0].options
    assert forwarded.border_color == "green"
    assert forwarded.row_gap == 3
    assert base.row_gap == 1
    assert base.brightness is None


def test_show_sheet_configuration_errors_skip_host() -> None:
    host = HeadlessSheetHost()
    with pytest.raises(ConfigurationError):
        show_bottom_action_sheet(["a"], max_per_row=0, host=host, settings=UISettings())
    with pytest.raises(ConfigurationError):
        show_bottom_action_sheet(["a"], host=host, settings=UISettings(), item_width=0)
    with pytest.raises(ConfigurationError):
        show_bottom_action_sheet(["a"], mode="zigzag", host=host, settings=UISettings())
    assert host.recorded == []


def test_show_sheet_uses_headless_host_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ACS_HEADLESS", "1")
    assert show_bottom_action_sheet(["a", "b"]) is None


def test_prepare_sheet_accepts_mapping_options() -> None:
    plan, options = prepare_sheet(
        list("abcdefg"),
        options={"sheet_padding": 0},
        settings=UISettings(),
    )
    assert plan.padding == 2
    assert options.sheet_padding == EdgeInsets()
    assert options.brightness is Brightness.DARK


def test_async_variant_awaits_host() -> None:
    host = HeadlessSheetHost(next_tap=0)
    result = asyncio.run(
        show_bottom_action_sheet_async(
            ["a", "b"],
            actions=[lambda: "first", lambda: "second"],
            host=host,
            settings=UISettings(),
        )
    )
    assert result == "first"
    assert len(host.recorded) == 1
