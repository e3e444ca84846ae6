"""Align items, actions and captions into slots before partitioning."""

from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from acs_layout.models import PLACEHOLDER, Action, Slot, noop

logger = logging.getLogger(__name__)


def _action_for(index: int, actions: tuple[Optional[Action], ...]) -> Optional[Action]:
    if not actions:
        return noop
    if index < len(actions):
        return actions[index]
    return None


def _caption_for(index: int, captions: tuple[Any, ...]) -> Any:
    if index < len(captions):
        return captions[index]
    return None


def reconcile(
    items: Sequence[Any],
    actions: Sequence[Optional[Action]] | None = None,
    captions: Sequence[Any] | None = None,
    *,
    padding: int = 0,
) -> tuple[Slot, ...]:
    """
    Pair every item with its action and caption by position.

    Missing actions and captions are padded, items are never dropped:
    - without actions every item gets the shared no-op action;
    - with a short action list the remaining items are non-interactive;
    - missing captions are absent.
    ``padding`` placeholder slots are appended at the end. The caller's
    sequences are copied and left untouched.
    """
    item_seq = tuple(items)
    action_seq = tuple(actions or ())
    caption_seq = tuple(captions or ())

    if len(action_seq) > len(item_seq):
        logger.debug(
            "Ignoring %d actions without a matching item",
            len(action_seq) - len(item_seq),
        )
    if len(caption_seq) > len(item_seq):
        logger.debug(
            "Ignoring %d captions without a matching item",
            len(caption_seq) - len(item_seq),
        )

    slots = [
        Slot(
            item=item,
            action=_action_for(index, action_seq),
            caption=_caption_for(index, caption_seq),
        )
        for index, item in enumerate(item_seq)
    ]
    slots.extend(PLACEHOLDER for _ in range(padding))
    return tuple(slots)
