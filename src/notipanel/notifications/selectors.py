"""Read-only views over a notification snapshot."""

from __future__ import annotations

from typing import Tuple

from notipanel.notifications.types import NotificationItem, NotificationsState


def select_notifications(state: NotificationsState) -> Tuple[NotificationItem, ...]:
    """All notifications in store order."""
    # Items are frozen and the container is a tuple, so callers cannot mutate it.
    return state.items


def select_unread_count(state: NotificationsState) -> int:
    """Number of notifications not yet read."""
    return sum(1 for item in state.items if not item.read)
