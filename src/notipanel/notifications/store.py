"""
Notification store: the single owner of the current snapshot.

The mutation rule lives in plain functions over snapshots so it can be used
and tested without a store handle. ``NotificationStore`` only keeps track of
which snapshot is current.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, Optional

from notipanel.config import NotipanelConfig, load_config
from notipanel.notifications.seeds import seed_for_config
from notipanel.notifications.types import NotificationItem, NotificationsState

if TYPE_CHECKING:
    from notipanel.notifications.actions import MarkAsRead

logger = logging.getLogger(__name__)


def initialize(seed: Iterable[NotificationItem] = ()) -> NotificationsState:
    """Build the initial snapshot from a caller supplied seed (may be empty)."""
    return NotificationsState.of(seed)


def mark_as_read(state: NotificationsState, notification_id: str) -> NotificationsState:
    """
    Return a snapshot where the item with ``notification_id`` is read.

    Unknown ids and items that are already read leave the snapshot untouched,
    in which case the same object is returned.
    """
    changed = False
    items = []
    for item in state.items:
        if item.id == notification_id and not item.read:
            item = item.marked_read()
            changed = True
        items.append(item)
    if not changed:
        return state
    return NotificationsState.of(items)


class NotificationStore:
    """Holds the current notification snapshot."""

    def __init__(self, seed: Iterable[NotificationItem] = ()) -> None:
        self._state = initialize(seed)

    @classmethod
    def from_config(cls, config: Optional[NotipanelConfig] = None) -> "NotificationStore":
        cfg = config or load_config()
        seed = seed_for_config(cfg)
        logger.debug("store_init items=%d", len(seed))
        return cls(seed)

    @property
    def state(self) -> NotificationsState:
        return self._state

    def apply(self, request: "MarkAsRead") -> NotificationsState:
        """Apply a mutation request and make the resulting snapshot current."""
        self._state = request.reduce(self._state)
        return self._state
