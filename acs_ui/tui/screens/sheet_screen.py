from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from prompt_toolkit.application import Application
from prompt_toolkit.formatted_text import ANSI, StyleAndTextTuples, to_formatted_text
from prompt_toolkit.input import Input
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.layout import HSplit, Layout, Window
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.layout.dimension import Dimension
from prompt_toolkit.output import Output
from prompt_toolkit.styles import Style
from rich.console import Console

from acs_layout.models import LayoutPlan, Slot
from acs_ui.models import Brightness, SheetOptions
from acs_ui.tui.core import theme
from acs_ui.tui.system.components.sheet_layout import (
    Position,
    SheetRenderer,
    interactive_positions,
)

# Non scroll-controlled sheets stop at this share of the screen height.
_MAX_SHEET_HEIGHT_RATIO = 9 / 16

_HINT = " ←↑↓→ move · enter select · esc dismiss"


@dataclass
class SheetNavigator:
    """Keyboard focus over the interactive cells of a plan."""

    plan: LayoutPlan
    positions: list[Position] = field(init=False)
    cursor: int = 0

    def __post_init__(self) -> None:
        self.positions = interactive_positions(self.plan)

    @property
    def focus(self) -> Position | None:
        if not self.positions:
            return None
        return self.positions[self.cursor]

    @property
    def focused_slot(self) -> Slot | None:
        position = self.focus
        if position is None:
            return None
        row_idx, col_idx = position
        return self.plan.rows[row_idx][col_idx]

    def move_horizontal(self, delta: int) -> None:
        if not self.positions:
            return
        self.cursor = max(0, min(self.cursor + delta, len(self.positions) - 1))

    def move_vertical(self, delta: int) -> None:
        position = self.focus
        if position is None:
            return
        row_idx, col_idx = position
        rows_with_focusable = sorted({row for row, _ in self.positions})
        if delta > 0:
            targets = [row for row in rows_with_focusable if row > row_idx]
        else:
            targets = [row for row in reversed(rows_with_focusable) if row < row_idx]
        if not targets:
            return
        target_row = targets[0]
        candidates = [
            (abs(col - col_idx), idx)
            for idx, (row, col) in enumerate(self.positions)
            if row == target_row
        ]
        self.cursor = min(candidates)[1]


def _with_cursor_at_line(fragments: StyleAndTextTuples, line: int) -> StyleAndTextTuples:
    """Insert a cursor marker at the start of ``line`` so the window scrolls to it."""
    marker = ("[SetCursorPosition]", "")
    if line <= 0:
        return [marker, *fragments]
    result: StyleAndTextTuples = []
    seen = 0
    placed = False
    for fragment in fragments:
        style, text = fragment[0], fragment[1]
        if placed or "\n" not in text:
            result.append(fragment)
            continue
        head = ""
        rest = text
        while not placed and "\n" in rest:
            before, _, rest = rest.partition("\n")
            head += before + "\n"
            seen += 1
            if seen == line:
                placed = True
        result.append((style, head))
        if placed:
            result.append(marker)
        if rest:
            result.append((style, rest))
    if not placed:
        result.append(marker)
    return result


class SheetScreen:
    """Full-screen prompt_toolkit application with the sheet docked at the bottom."""

    def __init__(
        self,
        plan: LayoutPlan,
        options: SheetOptions,
        *,
        brightness: Brightness,
        color_system: str = "truecolor",
        input: Input | None = None,
        output: Output | None = None,
    ) -> None:
        self._plan = plan
        self._options = options
        self._renderer = SheetRenderer(options, brightness)
        self._color_system = color_system
        self.navigator = SheetNavigator(plan)
        self._snapshot_key: tuple[Position | None, int] | None = None
        self._snapshot: tuple[str, int] = ("", 0)

        self.sheet_control = FormattedTextControl(
            self._render_fragments, focusable=True, show_cursor=False
        )
        self._kb = self._bindings()

        root_container = HSplit(
            [
                Window(char=" ", style="class:scrim"),
                Window(
                    self.sheet_control,
                    height=self._sheet_height,
                    wrap_lines=False,
                    style="class:sheet",
                ),
                Window(
                    FormattedTextControl(self._render_hint),
                    height=1,
                    style="class:hint",
                ),
            ]
        )
        self._app: Application[Any] = Application(
            layout=Layout(root_container, focused_element=self.sheet_control),
            key_bindings=self._kb,
            style=Style.from_dict(dict(theme.prompt_toolkit_sheet_style(options.barrier_color))),
            full_screen=True,
            input=input,
            output=output,
        )

    def run(self) -> Any:
        return self._app.run()

    async def run_async(self) -> Any:
        return await self._app.run_async()

    def _width(self) -> int:
        return max(1, self._app.output.get_size().columns)

    def _console(self) -> Console:
        return Console(
            force_terminal=True,
            color_system=self._color_system,  # type: ignore[arg-type]
            width=self._width(),
        )

    def _rendered(self) -> tuple[str, int]:
        """Captured sheet text and focus line, reused until focus or width change."""
        key = (self.navigator.focus, self._width())
        if key != self._snapshot_key:
            console = self._console()
            with console.capture() as cap:
                console.print(self._renderer.render(self._plan, focus=self.navigator.focus))
            self._snapshot = (cap.get(), self._focus_line(console))
            self._snapshot_key = key
        return self._snapshot

    def render_text(self) -> str:
        return self._rendered()[0]

    def _focus_line(self, console: Console) -> int:
        focus = self.navigator.focus
        if focus is None:
            return 0
        inner = console.options.update_width(
            max(1, self._width() - self._options.sheet_padding.horizontal)
        )
        line = self._options.sheet_padding.top
        title = self._renderer.render_title()
        if title is not None:
            line += len(console.render_lines(title, inner, pad=False))
        for row_idx in range(focus[0]):
            row = self._renderer.render_row(self._plan.rows[row_idx], row_idx)
            line += len(console.render_lines(row, inner, pad=False))
            line += self._options.row_gap
        return line

    def _render_fragments(self) -> StyleAndTextTuples:
        text, focus_line = self._rendered()
        return _with_cursor_at_line(to_formatted_text(ANSI(text)), focus_line)

    def _render_hint(self) -> str:
        if self._options.is_dismissible:
            return _HINT
        return _HINT.split(" · esc")[0]

    def _sheet_height(self) -> Dimension:
        lines = self.render_text().count("\n")
        screen_rows = self._app.output.get_size().rows
        if self._options.is_scroll_controlled:
            cap = screen_rows
        else:
            cap = max(1, int(screen_rows * _MAX_SHEET_HEIGHT_RATIO))
        return Dimension(min=1, preferred=lines, max=max(1, min(lines, cap)))

    def _bindings(self) -> KeyBindings:
        kb = KeyBindings()

        @kb.add("left")
        @kb.add("h")
        def _(event: Any) -> None:
            self.navigator.move_horizontal(-1)
            self._app.invalidate()

        @kb.add("right")
        @kb.add("l")
        def _(event: Any) -> None:
            self.navigator.move_horizontal(1)
            self._app.invalidate()

        @kb.add("up")
        @kb.add("k")
        def _(event: Any) -> None:
            self.navigator.move_vertical(-1)
            self._app.invalidate()

        @kb.add("down")
        @kb.add("j")
        def _(event: Any) -> None:
            self.navigator.move_vertical(1)
            self._app.invalidate()

        @kb.add("enter")
        @kb.add("space")
        def _(event: Any) -> None:
            self._activate()

        @kb.add("escape", eager=True)
        @kb.add("q")
        def _(event: Any) -> None:
            if self._options.is_dismissible:
                self._exit(None)

        @kb.add("pagedown")
        def _(event: Any) -> None:
            if self._options.enable_drag:
                self._exit(None)

        @kb.add("c-c")
        def _(event: Any) -> None:
            self._app.exit(exception=KeyboardInterrupt)

        return kb

    def _activate(self) -> None:
        slot = self.navigator.focused_slot
        if slot is None or slot.action is None:
            return
        try:
            result = slot.action()
        except Exception as exc:
            self._app.exit(exception=exc)
            return
        if self._options.close_on_action:
            self._exit(result)
        else:
            self._app.invalidate()

    def _exit(self, result: Any) -> None:
        try:
            self._app.exit(result=result)
        except Exception as exc:  # pragma: no cover
            if "Return value already set" not in str(exc):
                raise
