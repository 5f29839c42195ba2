"""Notification records and store snapshots."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Iterable, Tuple


@dataclass(frozen=True)
class NotificationItem:
    id: str
    text: str
    read: bool = False

    def as_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "text": self.text, "read": self.read}

    def marked_read(self) -> "NotificationItem":
        """Return a copy with the read flag set."""
        if self.read:
            return self
        return replace(self, read=True)


@dataclass(frozen=True)
class NotificationsState:
    """Immutable snapshot of the notification collection, in insertion order."""

    items: Tuple[NotificationItem, ...] = field(default_factory=tuple)

    @classmethod
    def of(cls, items: Iterable[NotificationItem]) -> "NotificationsState":
        return cls(items=tuple(items))

    def __len__(self) -> int:
        return len(self.items)

    def ids(self) -> Tuple[str, ...]:
        return tuple(item.id for item in self.items)
