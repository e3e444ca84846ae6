from __future__ import annotations

from typing import Any, Protocol

from acs_layout.models import LayoutPlan
from acs_ui.models import SheetOptions
from acs_ui.tui.system.models import TableModel


class SheetHost(Protocol):
    """Presents a dismissible sheet anchored to the bottom of the screen."""

    def present(self, plan: LayoutPlan, options: SheetOptions) -> Any: ...

    async def present_async(self, plan: LayoutPlan, options: SheetOptions) -> Any: ...


class TablePresenter(Protocol):
    def show(self, table: TableModel) -> None: ...


class PresenterSink(Protocol):
    def emit(self, level: str, message: str) -> None: ...

    def emit_panel(
        self, message: str, title: str | None, border_style: str | None
    ) -> None: ...


class Presenter(Protocol):
    def info(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def success(self, message: str) -> None: ...

    def panel(
        self,
        message: str,
        title: str | None = None,
        border_style: str | None = None,
    ) -> None: ...


class UI(Protocol):
    sheets: SheetHost
    tables: TablePresenter
    present: Presenter
