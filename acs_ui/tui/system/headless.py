from dataclasses import dataclass, field
from typing import Any

from acs_layout.models import LayoutPlan
from acs_ui.models import SheetOptions
from acs_ui.tui.system.components.presenter import PresenterBase
from acs_ui.tui.system.models import TableModel
from acs_ui.tui.system.protocols import PresenterSink, SheetHost, TablePresenter, UI


@dataclass
class RecordedSheet:
    plan: LayoutPlan
    options: SheetOptions


@dataclass
class HeadlessSheetHost(SheetHost):
    """
    Sheet host for tests and CI.

    Every presentation is recorded. When ``next_tap`` is set, the n-th
    interactive item (reading order, zero based) is activated and the
    action's return value is the result; otherwise ``next_result`` is
    returned as if the sheet had been dismissed.
    """

    recorded: list[RecordedSheet] = field(default_factory=list)
    next_tap: int | None = None
    next_result: Any = None

    def present(self, plan: LayoutPlan, options: SheetOptions) -> Any:
        self.recorded.append(RecordedSheet(plan=plan, options=options))
        if self.next_tap is None:
            return self.next_result
        slots = plan.interactive_slots()
        if not 0 <= self.next_tap < len(slots):
            raise IndexError(
                f"next_tap={self.next_tap} but the sheet has {len(slots)} interactive items"
            )
        result = slots[self.next_tap].action()
        if options.close_on_action:
            return result
        return self.next_result

    async def present_async(self, plan: LayoutPlan, options: SheetOptions) -> Any:
        return self.present(plan, options)


@dataclass
class HeadlessUI(UI):
    recorded_tables: list[TableModel] = field(default_factory=list)
    recorded_messages: list[str] = field(default_factory=list)
    sheets: HeadlessSheetHost = field(default_factory=HeadlessSheetHost)

    def __post_init__(self) -> None:
        self.tables = _HeadlessTablePresenter(self)
        self.present = _HeadlessPresenter(self)


class _HeadlessTablePresenter(TablePresenter):
    def __init__(self, ui: HeadlessUI):
        self._ui = ui

    def show(self, table: TableModel) -> None:
        self._ui.recorded_tables.append(table)


class _HeadlessPresenterSink(PresenterSink):
    def __init__(self, ui: HeadlessUI) -> None:
        self._ui = ui

    def emit(self, level: str, message: str) -> None:
        self._ui.recorded_messages.append(f"{level.upper()}: {message}")

    def emit_panel(
        self,
        message: str,
        title: str | None,
        border_style: str | None,
    ) -> None:
        self._ui.recorded_messages.append(f"PANEL: {title} - {message}")


class _HeadlessPresenter(PresenterBase):
    def __init__(self, ui: HeadlessUI) -> None:
        super().__init__(_HeadlessPresenterSink(ui))
