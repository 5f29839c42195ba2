"""
Minimal EventBus used to tell rendering code that a new snapshot is current.
"""

from __future__ import annotations

import logging
import time
from collections import deque
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

logger = logging.getLogger(__name__)


@dataclass
class Event:
    """Represents an event in the system."""
    type: str
    ts: float
    payload: Optional[Dict[str, Any]] = None


class EventBus:
    """In-process event bus with backlog buffer."""

    def __init__(self, backlog_size: int = 100) -> None:
        self._subscribers: Dict[str, list[Callable[[Event], None]]] = {}
        self._backlog: deque[Event] = deque(maxlen=backlog_size)

    def publish(self, event: Event) -> None:
        """Publish an event to all subscribers of its type."""
        self._backlog.append(event)

        # Copy so callbacks may unsubscribe while being notified
        for callback in list(self._subscribers.get(event.type, [])):
            try:
                callback(event)
            except Exception:
                # A broken subscriber must not stop delivery to the others
                logger.exception("subscriber_error event=%s", event.type)

    def emit(self, event_type: str, payload: Optional[Dict[str, Any]] = None) -> Event:
        """Build and publish an event, returning it."""
        event = Event(event_type, time.time(), payload=payload)
        self.publish(event)
        return event

    def subscribe(self, event_type: str, callback: Callable[[Event], None]) -> Callable[[], None]:
        """Subscribe to events of a specific type. Returns an unsubscribe function."""
        self._subscribers.setdefault(event_type, []).append(callback)

        def unsubscribe() -> None:
            self.unsubscribe(event_type, callback)

        return unsubscribe

    def unsubscribe(self, event_type: str, callback: Callable[[Event], None]) -> None:
        """Unsubscribe from events of a specific type."""
        if event_type in self._subscribers:
            try:
                self._subscribers[event_type].remove(callback)
                # Clean up empty lists
                if not self._subscribers[event_type]:
                    del self._subscribers[event_type]
            except ValueError:
                pass  # Callback not found, ignore

    def get_backlog(self, event_type: Optional[str] = None) -> list[Event]:
        """Get events from backlog, optionally filtered by type."""
        events = list(self._backlog)
        if event_type:
            events = [e for e in events if e.type == event_type]
        return events

    def clear_backlog(self) -> None:
        """Clear the event backlog."""
        self._backlog.clear()
