"""Modal bottom action sheets for the terminal.

Wraps the layout planner with rich rendering and prompt_toolkit hosts.
"""

from acs_ui.api import (
    Alignment,
    Brightness,
    EdgeInsets,
    HeadlessSheetHost,
    PositioningMode,
    SheetOptions,
    UISettings,
    prepare_sheet,
    show_bottom_action_sheet,
    show_bottom_action_sheet_async,
)

__all__ = [
    "Alignment",
    "Brightness",
    "EdgeInsets",
    "HeadlessSheetHost",
    "PositioningMode",
    "SheetOptions",
    "UISettings",
    "prepare_sheet",
    "show_bottom_action_sheet",
    "show_bottom_action_sheet_async",
]
