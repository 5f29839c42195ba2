"""
View model for the notification panel.

Rendering code reads everything it shows from here: the header title, the
badge on the bell button and one row per notification. A row's mark-as-read
control is only shown while the notification is unread.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from notipanel.notifications.selectors import select_notifications, select_unread_count
from notipanel.notifications.types import NotificationsState

DEFAULT_TITLE = "Redux Notifications"


@dataclass(frozen=True)
class PanelRow:
    id: str
    text: str
    show_mark_button: bool


@dataclass(frozen=True)
class PanelView:
    title: str
    badge: int
    rows: Tuple[PanelRow, ...]

    def render_text(self) -> str:
        lines = [f"{self.title} [{self.badge}]"]
        for row in self.rows:
            marker = "( )" if row.show_mark_button else "(x)"
            lines.append(f"{marker} {row.text}")
        return "\n".join(lines)


def build_panel(state: NotificationsState, title: str = DEFAULT_TITLE) -> PanelView:
    rows = tuple(
        PanelRow(id=item.id, text=item.text, show_mark_button=not item.read)
        for item in select_notifications(state)
    )
    return PanelView(title=title, badge=select_unread_count(state), rows=rows)
