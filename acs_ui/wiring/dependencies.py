from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from acs_common.api import configure_logging
from acs_ui.settings import UISettings
from acs_ui.tui.system.facade import TUI
from acs_ui.tui.system.protocols import UI


@dataclass
class UIContext:
    """Container for UI services and state, initialized lazily."""
    headless: bool = False

    _settings: Optional[UISettings] = None
    _ui: Optional[UI] = None

    @property
    def settings(self) -> UISettings:
        if self._settings is None:
            settings = UISettings.from_env()
            if self.headless and not settings.headless:
                settings = settings.model_copy(update={"headless": True})
            self._settings = settings
        return self._settings

    @settings.setter
    def settings(self, value: UISettings):
        self._settings = value

    @property
    def ui(self) -> UI:
        if self._ui is None:
            if self.settings.headless:
                from acs_ui.tui.system.headless import HeadlessUI
                self._ui = HeadlessUI()
            else:
                self._ui = TUI(settings=self.settings)
        return self._ui

    @ui.setter
    def ui(self, value: UI):
        self._ui = value


__all__ = [
    "UIContext",
    "configure_logging",
]
