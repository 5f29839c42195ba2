"""Notification store, selectors and dispatch."""

# Re-export common helpers for convenience.
from .types import NotificationItem, NotificationsState  # noqa: F401
from .store import NotificationStore, initialize, mark_as_read  # noqa: F401
from .selectors import select_notifications, select_unread_count  # noqa: F401
from .actions import MarkAsRead, UnsupportedRequest, parse_request  # noqa: F401
from .dispatch import DispatchResult, NotificationDispatcher  # noqa: F401
