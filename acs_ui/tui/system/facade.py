from rich.console import Console

from acs_ui.settings import UISettings
from acs_ui.tui.core import capabilities
from acs_ui.tui.system.components.presenter import RichPresenter
from acs_ui.tui.system.components.sheet import ConsoleSheetHost, PromptToolkitSheetHost
from acs_ui.tui.system.components.table import RichTablePresenter
from acs_ui.tui.system.protocols import Presenter, SheetHost, TablePresenter, UI


def default_sheet_host(
    settings: UISettings | None = None,
    console: Console | None = None,
) -> SheetHost:
    """Headless when configured, full-screen on a TTY, line mode otherwise."""
    resolved = settings or UISettings.from_env()
    if resolved.headless:
        from acs_ui.tui.system.headless import HeadlessSheetHost

        return HeadlessSheetHost()
    if capabilities.supports_fullscreen_ui():
        return PromptToolkitSheetHost(resolved)
    return ConsoleSheetHost(console or Console(), resolved)


class TUI(UI):
    def __init__(self, console: Console | None = None, settings: UISettings | None = None):
        self.settings = settings or UISettings.from_env()
        self._console = console or Console(color_system=self.settings.color_system)
        self.sheets: SheetHost = default_sheet_host(self.settings, self._console)
        self.tables: TablePresenter = RichTablePresenter(self._console)
        self.present: Presenter = RichPresenter(self._console)

    @property
    def console(self) -> Console:
        return self._console
