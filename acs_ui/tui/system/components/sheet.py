from __future__ import annotations

import asyncio
import logging
from typing import Any

from prompt_toolkit.input import Input
from prompt_toolkit.output import Output
from rich.console import Console
from rich.prompt import Prompt

from acs_common.errors import SheetHostError, wrap_error
from acs_layout.models import LayoutPlan, Slot
from acs_ui.models import SheetOptions
from acs_ui.settings import UISettings
from acs_ui.tui.core import capabilities
from acs_ui.tui.screens.sheet_screen import SheetScreen
from acs_ui.tui.system.components.sheet_layout import SheetRenderer, interactive_positions
from acs_ui.tui.system.protocols import SheetHost

logger = logging.getLogger(__name__)


def _color_system(settings: UISettings) -> str:
    # ANSI captured for prompt_toolkit needs an explicit colour system.
    if settings.color_system == "auto":
        return "truecolor"
    return settings.color_system


class PromptToolkitSheetHost(SheetHost):
    """Interactive bottom sheet drawn by a full-screen prompt_toolkit app."""

    def __init__(
        self,
        settings: UISettings | None = None,
        *,
        input: Input | None = None,
        output: Output | None = None,
    ) -> None:
        self._settings = settings or UISettings()
        self._input = input
        self._output = output

    def _screen(self, plan: LayoutPlan, options: SheetOptions) -> SheetScreen:
        if self._input is None and not capabilities.supports_fullscreen_ui():
            raise SheetHostError(
                "An interactive terminal is required to present the sheet.",
                context={"items": plan.item_count},
            )
        return SheetScreen(
            plan,
            options,
            brightness=self._settings.effective_brightness(options),
            color_system=_color_system(self._settings),
            input=self._input,
            output=self._output,
        )

    def present(self, plan: LayoutPlan, options: SheetOptions) -> Any:
        return self._screen(plan, options).run()

    async def present_async(self, plan: LayoutPlan, options: SheetOptions) -> Any:
        return await self._screen(plan, options).run_async()


class ConsoleSheetHost(SheetHost):
    """Line-mode fallback: print the numbered sheet and ask for a number."""

    def __init__(self, console: Console, settings: UISettings | None = None) -> None:
        self._console = console
        self._settings = settings or UISettings()

    def _choices(self, plan: LayoutPlan) -> list[Slot]:
        return [plan.rows[row][col] for row, col in interactive_positions(plan)]

    def _ask(self, choices: list[str], dismissible: bool) -> str:
        try:
            if dismissible:
                return Prompt.ask(
                    "Select an item (empty to dismiss)",
                    console=self._console,
                    choices=choices,
                    default="",
                    show_choices=False,
                    show_default=False,
                )
            return Prompt.ask(
                "Select an item",
                console=self._console,
                choices=choices,
                show_choices=False,
            )
        except EOFError as exc:
            raise wrap_error(
                SheetHostError,
                "Input closed while the sheet was open.",
                context={"choices": len(choices)},
                cause=exc,
            ) from exc

    def present(self, plan: LayoutPlan, options: SheetOptions) -> Any:
        renderer = SheetRenderer(options, self._settings.effective_brightness(options))
        self._console.print(renderer.render(plan, numbered=True))

        slots = self._choices(plan)
        if not slots:
            logger.debug("Sheet has no interactive items; closing immediately")
            return None
        choices = [str(number) for number in range(1, len(slots) + 1)]
        while True:
            answer = self._ask(choices, options.is_dismissible)
            if not answer:
                return None
            slot = slots[int(answer) - 1]
            result = slot.action() if slot.action is not None else None
            if options.close_on_action:
                return result

    async def present_async(self, plan: LayoutPlan, options: SheetOptions) -> Any:
        return await asyncio.to_thread(self.present, plan, options)
