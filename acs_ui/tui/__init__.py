"""
Sheet hosts and presenters: Rich/prompt_toolkit renderers plus a headless one.
"""

from acs_ui.tui.system.protocols import UI, SheetHost, TablePresenter, Presenter
from acs_ui.tui.system.facade import TUI, default_sheet_host
from acs_ui.tui.system.headless import HeadlessSheetHost, HeadlessUI

__all__ = [
    "UI",
    "TUI",
    "HeadlessUI",
    "HeadlessSheetHost",
    "SheetHost",
    "TablePresenter",
    "Presenter",
    "default_sheet_host",
]
