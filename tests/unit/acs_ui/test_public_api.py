import pytest

pytestmark = pytest.mark.unit_ui


def test_ui_public_api_exports() -> None:
    import acs_ui
    from acs_ui import api

    for name in (
        "show_bottom_action_sheet",
        "show_bottom_action_sheet_async",
        "prepare_sheet",
        "SheetOptions",
        "EdgeInsets",
        "Alignment",
        "Brightness",
        "UISettings",
        "HeadlessSheetHost",
        "PositioningMode",
    ):
        assert hasattr(acs_ui, name)
        assert name in api.__all__


def test_tui_public_api_exports() -> None:
    from acs_ui import tui

    assert {"UI", "TUI", "HeadlessUI", "SheetHost", "default_sheet_host"} <= set(tui.__all__)


def test_layout_public_api_exports() -> None:
    import acs_layout
    from acs_layout import api

    assert acs_layout.plan_layout is api.plan_layout
    assert {"infer_row_capacity", "reconcile", "noop", "PLACEHOLDER"} <= set(api.__all__)


def test_common_public_api_exports() -> None:
    import acs_common

    assert issubclass(acs_common.ConfigurationError, acs_common.ACSError)
    assert callable(acs_common.configure_logging)
