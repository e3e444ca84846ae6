"""Grid layout planner for action sheets."""

from acs_layout.api import LayoutPlan, PositioningMode, RowGroup, Slot, plan_layout

__all__ = ["LayoutPlan", "PositioningMode", "RowGroup", "Slot", "plan_layout"]
