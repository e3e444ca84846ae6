from __future__ import annotations

from typing import Mapping

from rich import box

from acs_ui.models import Brightness

RICH_ACCENT = "blue"
RICH_ACCENT_BOLD = f"bold {RICH_ACCENT}"
RICH_BORDER_STYLE = RICH_ACCENT

FOCUS_BORDER_STYLE = "bold cyan"
INDEX_LABEL_STYLE = "dim"

PRESENTER_TEMPLATES: dict[str, str] = {
    "info": "[blue]ℹ[/blue] {message}",
    "warning": "[yellow]⚠ {message}[/yellow]",
    "error": "[red]✖ {message}[/red]",
    "success": "[green]✔ {message}[/green]",
}

BORDER_BOXES: dict[str, box.Box] = {
    "rounded": box.ROUNDED,
    "square": box.SQUARE,
    "heavy": box.HEAVY,
    "double": box.DOUBLE,
    "ascii": box.ASCII,
}

# Border drawn with spaces: same footprint as a real border, nothing visible.
BLANK_BOX = box.Box("    \n    \n    \n    \n    \n    \n    \n    \n")


def default_border_color(brightness: Brightness) -> str:
    """Light borders on dark themes, dark borders on light ones."""
    if brightness is Brightness.DARK:
        return "white"
    return "black"


def resolve_border_color(override: str | None, brightness: Brightness) -> str:
    return override or default_border_color(brightness)


def border_box(name: str) -> box.Box:
    return BORDER_BOXES.get(name, box.ROUNDED)


def panel_title(text: str) -> str:
    return f"[{RICH_ACCENT_BOLD}]{text}[/{RICH_ACCENT_BOLD}]"


def presenter_message(level: str, message: str) -> str:
    template = PRESENTER_TEMPLATES.get(level, "{message}")
    return template.format(message=message)


def prompt_toolkit_sheet_style(
    barrier_color: str | None = None,
) -> Mapping[str, str]:
    styles = {
        "scrim": "bg:#000000",
        "sheet": "",
        "hint": "fg:#888888 italic",
    }
    if barrier_color:
        styles["scrim"] = f"bg:{barrier_color}"
    return styles
