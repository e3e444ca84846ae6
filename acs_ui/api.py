"""Stable UI API surface."""

from __future__ import annotations

from acs_layout.models import PositioningMode
from acs_ui.action_sheet import (
    prepare_sheet,
    show_bottom_action_sheet,
    show_bottom_action_sheet_async,
)
from acs_ui.models import Alignment, Brightness, EdgeInsets, SheetOptions
from acs_ui.settings import UISettings
from acs_ui.tui.system.components.sheet import ConsoleSheetHost, PromptToolkitSheetHost
from acs_ui.tui.system.headless import HeadlessSheetHost, HeadlessUI

__all__ = [
    "Alignment",
    "Brightness",
    "ConsoleSheetHost",
    "EdgeInsets",
    "HeadlessSheetHost",
    "HeadlessUI",
    "PositioningMode",
    "PromptToolkitSheetHost",
    "SheetOptions",
    "UISettings",
    "prepare_sheet",
    "show_bottom_action_sheet",
    "show_bottom_action_sheet_async",
]
