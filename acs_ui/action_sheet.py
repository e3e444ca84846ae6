"""
Show a modal bottom sheet holding a grid of actionable items.

The layout comes from :func:`acs_layout.plan_layout`; presentation is left to
a :class:`~acs_ui.tui.system.protocols.SheetHost`. Example::

    from acs_ui import show_bottom_action_sheet

    choice = show_bottom_action_sheet(
        ["📚", "📁", "📝"],
        actions=[lambda: "class", lambda: "folder", lambda: "note"],
        captions=["Class", "Folder", "Note"],
        mode="natural_flow",
        title="[b]Add[/b]",
    )
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Sequence

from acs_layout.models import Action, LayoutPlan, PositioningMode
from acs_layout.planner import plan_layout
from acs_ui.models import SheetOptions, resolve_sheet_options
from acs_ui.settings import UISettings
from acs_ui.tui.system.facade import default_sheet_host
from acs_ui.tui.system.protocols import SheetHost

logger = logging.getLogger(__name__)


def prepare_sheet(
    items: Sequence[Any],
    actions: Sequence[Optional[Action]] | None = None,
    captions: Sequence[Any] | None = None,
    *,
    mode: PositioningMode | str = PositioningMode.FILLED_GRID,
    max_per_row: int | None = None,
    options: SheetOptions | Mapping[str, Any] | None = None,
    settings: UISettings | None = None,
    **overrides: Any,
) -> tuple[LayoutPlan, SheetOptions]:
    """Validate options and plan the grid without presenting anything."""
    resolved = resolve_sheet_options(options, overrides)
    if resolved.brightness is None:
        active = settings or UISettings.from_env()
        resolved = resolved.model_copy(update={"brightness": active.brightness})
    plan = plan_layout(
        items,
        actions,
        captions,
        mode=mode,
        max_per_row=max_per_row,
    )
    return plan, resolved


def _resolve_host(host: SheetHost | None, settings: UISettings | None) -> SheetHost:
    if host is not None:
        return host
    selected = default_sheet_host(settings)
    logger.debug("Using sheet host %s", type(selected).__name__)
    return selected


def show_bottom_action_sheet(
    items: Sequence[Any],
    actions: Sequence[Optional[Action]] | None = None,
    captions: Sequence[Any] | None = None,
    *,
    mode: PositioningMode | str = PositioningMode.FILLED_GRID,
    max_per_row: int | None = None,
    options: SheetOptions | Mapping[str, Any] | None = None,
    host: SheetHost | None = None,
    settings: UISettings | None = None,
    **overrides: Any,
) -> Any:
    """
    Present ``items`` as a bottom sheet grid and wait for it to close.

    Args:
        items: Visual elements. Strings are shown literally; use
            ``rich.text.Text`` or any renderable for styling.
        actions: Zero-argument callables paired with ``items`` by position.
            Without actions every item is clickable and does nothing; with a
            short list the remaining items are inert.
        captions: Texts shown under interactive items.
        mode: ``FILLED_GRID`` pads the last row with invisible cells,
            ``NATURAL_FLOW`` keeps it short and aligns it.
        max_per_row: Explicit row capacity, inferred (2..5) when omitted.
        options: Base :class:`SheetOptions` (or a mapping of its fields).
        host: Modal host; chosen from the environment when omitted.
        settings: UI settings; read from ``ACS_*`` variables when omitted.
        **overrides: Individual :class:`SheetOptions` fields.

    Returns:
        The return value of the activated action when the sheet closes on
        it, otherwise None (dismissed).

    Raises:
        ConfigurationError: invalid row capacity, mode or options. Raised
            before the host is involved.
    """
    plan, resolved = prepare_sheet(
        items,
        actions,
        captions,
        mode=mode,
        max_per_row=max_per_row,
        options=options,
        settings=settings,
        **overrides,
    )
    return _resolve_host(host, settings).present(plan, resolved)


async def show_bottom_action_sheet_async(
    items: Sequence[Any],
    actions: Sequence[Optional[Action]] | None = None,
    captions: Sequence[Any] | None = None,
    *,
    mode: PositioningMode | str = PositioningMode.FILLED_GRID,
    max_per_row: int | None = None,
    options: SheetOptions | Mapping[str, Any] | None = None,
    host: SheetHost | None = None,
    settings: UISettings | None = None,
    **overrides: Any,
) -> Any:
    """Awaitable variant of :func:`show_bottom_action_sheet`."""
    plan, resolved = prepare_sheet(
        items,
        actions,
        captions,
        mode=mode,
        max_per_row=max_per_row,
        options=options,
        settings=settings,
        **overrides,
    )
    return await _resolve_host(host, settings).present_async(plan, resolved)
