"""Grid layout planner: split sheet items into rows."""

from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from acs_common.errors import ConfigurationError
from acs_layout.capacity import padding_count, resolve_row_capacity
from acs_layout.models import Action, LayoutPlan, PositioningMode, RowGroup, Slot
from acs_layout.reconcile import reconcile

logger = logging.getLogger(__name__)


def coerce_mode(value: PositioningMode | str) -> PositioningMode:
    if isinstance(value, PositioningMode):
        return value
    try:
        return PositioningMode(str(value).strip().lower().replace("-", "_"))
    except ValueError as exc:
        raise ConfigurationError(
            f"Unknown positioning mode: {value!r}",
            setting="mode",
            context={
                "mode": value,
                "choices": [mode.value for mode in PositioningMode],
            },
            cause=exc,
        ) from exc


def partition(
    slots: Sequence[Slot], capacity: int, mode: PositioningMode
) -> tuple[RowGroup, ...]:
    """Cut ``slots`` into rows of ``capacity``; natural flow keeps a short tail."""
    rows: list[RowGroup] = []
    current: list[Slot] = []
    for slot in slots:
        current.append(slot)
        if len(current) == capacity:
            rows.append(RowGroup(tuple(current)))
            current = []
    if current and mode is PositioningMode.NATURAL_FLOW:
        rows.append(RowGroup(tuple(current)))
    return tuple(rows)


def plan_layout(
    items: Sequence[Any],
    actions: Sequence[Optional[Action]] | None = None,
    captions: Sequence[Any] | None = None,
    *,
    mode: PositioningMode | str = PositioningMode.FILLED_GRID,
    max_per_row: int | None = None,
) -> LayoutPlan:
    """
    Build the layout plan for an action sheet.

    Args:
        items: Visual elements, one per cell. Referenced, never copied.
        actions: Zero-argument callables paired with ``items`` by position.
            ``None`` entries make the matching item non-interactive.
        captions: Texts shown under interactive items.
        mode: FILLED_GRID pads the last row with placeholders,
            NATURAL_FLOW leaves it short.
        max_per_row: Explicit row capacity; inferred when omitted.

    Raises:
        ConfigurationError: ``max_per_row`` is not a positive integer or
            ``mode`` is unknown.
    """
    resolved_mode = coerce_mode(mode)
    item_seq = tuple(items)
    capacity = resolve_row_capacity(len(item_seq), max_per_row)
    padding = padding_count(len(item_seq), capacity, resolved_mode)

    slots = reconcile(item_seq, actions, captions, padding=padding)
    rows = partition(slots, capacity, resolved_mode)

    plan = LayoutPlan(
        rows=rows,
        capacity=capacity,
        mode=resolved_mode,
        item_count=len(item_seq),
        padding=padding,
    )
    logger.debug(
        "Planned %d items into %d rows of %d (mode=%s, padding=%d)",
        plan.item_count,
        plan.row_count,
        plan.capacity,
        plan.mode.value,
        plan.padding,
    )
    return plan
