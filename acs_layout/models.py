"""Immutable models produced by the grid layout planner."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Iterator, Optional

Action = Callable[[], Any]


class PositioningMode(str, Enum):
    """How the last, possibly partial, row of a sheet is filled."""

    # Every row is padded with invisible placeholders for a symmetric grid.
    FILLED_GRID = "filled_grid"
    # The last row may be shorter and follows the row alignment.
    NATURAL_FLOW = "natural_flow"


def noop() -> None:
    """Action given to items the caller did not attach behaviour to."""
    return None


@dataclass(frozen=True)
class Slot:
    item: Any
    action: Optional[Action] = None
    caption: Any = None
    placeholder: bool = False

    @property
    def interactive(self) -> bool:
        return self.action is not None

    @property
    def visible_caption(self) -> Any:
        """Caption to draw under the item; only interactive items show one."""
        return self.caption if self.interactive else None


PLACEHOLDER = Slot(item=None, placeholder=True)


@dataclass(frozen=True)
class RowGroup:
    slots: tuple[Slot, ...]

    def __len__(self) -> int:
        return len(self.slots)

    def __iter__(self) -> Iterator[Slot]:
        return iter(self.slots)

    def __getitem__(self, index: int) -> Slot:
        return self.slots[index]


@dataclass(frozen=True)
class LayoutPlan:
    """Rows of slots covering every input item plus grid padding."""

    rows: tuple[RowGroup, ...]
    capacity: int
    mode: PositioningMode
    item_count: int
    padding: int

    @property
    def row_count(self) -> int:
        return len(self.rows)

    def slots(self) -> Iterator[Slot]:
        for row in self.rows:
            yield from row

    def real_items(self) -> list[Any]:
        return [slot.item for slot in self.slots() if not slot.placeholder]

    def interactive_slots(self) -> list[Slot]:
        return [slot for slot in self.slots() if slot.interactive]

    def describe(self) -> dict[str, Any]:
        return {
            "capacity": self.capacity,
            "mode": self.mode.value,
            "items": self.item_count,
            "rows": self.row_count,
            "padding": self.padding,
        }
