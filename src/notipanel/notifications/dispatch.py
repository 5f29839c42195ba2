"""
Dispatch gateway: the single point where mutation requests enter the store.

Requests are applied strictly one at a time. A request dispatched while
another is being applied (typically from a ``notifications.changed``
subscriber) is queued and handled once the current one has produced its
snapshot.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import Any, Callable, Deque, List, Optional, Tuple, Union

from notipanel.config import NotipanelConfig, configure_logging, load_config
from notipanel.event_bus import Event, EventBus
from notipanel.notifications.actions import MarkAsRead, UnsupportedRequest, parse_request
from notipanel.notifications.selectors import select_unread_count
from notipanel.notifications.store import NotificationStore
from notipanel.notifications.types import NotificationsState

logger = logging.getLogger(__name__)

CHANGED_EVENT = "notifications.changed"


@dataclass(frozen=True)
class DispatchResult:
    ok: bool
    state: NotificationsState
    error: Optional[UnsupportedRequest] = None


class NotificationDispatcher:
    """Serializes mutation requests into a ``NotificationStore``."""

    def __init__(self, store: NotificationStore, bus: Optional[EventBus] = None) -> None:
        self.store = store
        self.bus = bus or EventBus()
        self._queue: Deque[Tuple[MarkAsRead, List[NotificationsState]]] = deque()
        self._draining = False

    @classmethod
    def from_config(cls, config: Optional[NotipanelConfig] = None) -> "NotificationDispatcher":
        """Build a store and bus from configuration."""
        cfg = config or load_config()
        configure_logging(cfg.log_level)
        return cls(NotificationStore.from_config(cfg), EventBus(backlog_size=cfg.event_backlog_maxlen))

    def dispatch(self, request: Union[MarkAsRead, Any]) -> DispatchResult:
        """Apply a request (or raw ``{"kind", "id"}`` mapping) to the store."""
        parsed = parse_request(request)
        if isinstance(parsed, UnsupportedRequest):
            logger.warning("unsupported_request kind=%s reason=%s", parsed.kind, parsed.reason)
            return DispatchResult(ok=False, state=self.store.state, error=parsed)

        slot: List[NotificationsState] = []
        self._queue.append((parsed, slot))
        if not self._draining:
            self._drain()
        if slot:
            return DispatchResult(ok=True, state=slot[0])
        # Queued behind the request currently being applied
        return DispatchResult(ok=True, state=self.store.state)

    def subscribe(self, callback: Callable[[Event], None]) -> Callable[[], None]:
        """Register a callback for snapshot changes; returns an unsubscribe function."""
        return self.bus.subscribe(CHANGED_EVENT, callback)

    def _drain(self) -> None:
        self._draining = True
        try:
            while self._queue:
                request, slot = self._queue.popleft()
                self._apply(request, slot)
        finally:
            self._draining = False

    def _apply(self, request: MarkAsRead, slot: List[NotificationsState]) -> None:
        before = self.store.state
        after = self.store.apply(request)
        slot.append(after)
        if after is before:
            logger.debug("request_noop kind=%s id=%s", request.kind, request.id)
            return
        unread = select_unread_count(after)
        logger.debug("request_applied kind=%s id=%s unread=%d", request.kind, request.id, unread)
        self.bus.emit(CHANGED_EVENT, {"kind": request.kind, "id": request.id, "unread_count": unread})
