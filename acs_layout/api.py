"""Stable layout API surface."""

from __future__ import annotations

from acs_layout.capacity import (
    MAX_ROW_CAPACITY,
    MIN_ROW_CAPACITY,
    infer_row_capacity,
    resolve_row_capacity,
)
from acs_layout.models import (
    PLACEHOLDER,
    Action,
    LayoutPlan,
    PositioningMode,
    RowGroup,
    Slot,
    noop,
)
from acs_layout.planner import coerce_mode, partition, plan_layout
from acs_layout.reconcile import reconcile

__all__ = [
    "Action",
    "LayoutPlan",
    "MAX_ROW_CAPACITY",
    "MIN_ROW_CAPACITY",
    "PLACEHOLDER",
    "PositioningMode",
    "RowGroup",
    "Slot",
    "coerce_mode",
    "infer_row_capacity",
    "noop",
    "partition",
    "plan_layout",
    "reconcile",
    "resolve_row_capacity",
]
