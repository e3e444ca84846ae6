"""Row capacity inference for near-square action grids."""

from __future__ import annotations

import math

from acs_common.errors import ConfigurationError
from acs_layout.models import PositioningMode

MIN_ROW_CAPACITY = 2
MAX_ROW_CAPACITY = 5


def _candidates() -> range:
    return range(MAX_ROW_CAPACITY, MIN_ROW_CAPACITY - 1, -1)


def _fits(count: int, capacity: int) -> bool:
    return math.ceil(count / capacity) <= capacity


def infer_row_capacity(count: int) -> int:
    """
    Pick how many items go in one row so the grid stays close to square.

    Candidates are scanned from MAX_ROW_CAPACITY down to MIN_ROW_CAPACITY.
    Capacities that divide ``count`` evenly win over the rest; among the
    qualifying ones (row count not above the capacity) the last one of the
    scan, i.e. the smallest, is kept. Counts too large for any candidate
    get MAX_ROW_CAPACITY and grow vertically.
    """
    if count < 0:
        raise ConfigurationError(
            "Item count cannot be negative.", setting="items", context={"count": count}
        )
    chosen: int | None = None
    for capacity in _candidates():
        if count % capacity == 0 and _fits(count, capacity):
            chosen = capacity
    if chosen is None:
        for capacity in _candidates():
            if _fits(count, capacity):
                chosen = capacity
    return chosen if chosen is not None else MAX_ROW_CAPACITY


def validate_row_capacity(value: object) -> int:
    # bool is an int subclass; True would silently mean one item per row.
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(
            "Row capacity must be an integer.",
            setting="max_per_row",
            context={"max_per_row": value},
        )
    if value < 1:
        raise ConfigurationError(
            "Row capacity must be at least 1.",
            setting="max_per_row",
            context={"max_per_row": value},
        )
    return value


def resolve_row_capacity(count: int, override: int | None = None) -> int:
    """Return the explicit capacity when given, the inferred one otherwise."""
    if override is not None:
        return validate_row_capacity(override)
    return infer_row_capacity(count)


def row_count(count: int, capacity: int) -> int:
    return math.ceil(count / capacity)


def padding_count(count: int, capacity: int, mode: PositioningMode) -> int:
    if mode is not PositioningMode.FILLED_GRID:
        return 0
    return row_count(count, capacity) * capacity - count
