"""Mutation requests accepted by the notification dispatcher."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, StrictStr, ValidationError

from notipanel.notifications.store import mark_as_read
from notipanel.notifications.types import NotificationsState

MARK_AS_READ = "markAsRead"


class MarkAsRead(BaseModel):
    """Mark a single notification as read. Carries the id and nothing else."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["markAsRead"] = MARK_AS_READ
    id: StrictStr

    def reduce(self, state: NotificationsState) -> NotificationsState:
        return mark_as_read(state, self.id)


@dataclass(frozen=True)
class UnsupportedRequest:
    """Returned instead of raising when a request cannot be handled."""

    kind: Optional[str]
    reason: str


# Only one mutation exists today; new kinds join this union.
Request = MarkAsRead

_REQUEST_TYPES = {
    MARK_AS_READ: MarkAsRead,
}


def parse_request(payload: Any) -> Union[Request, UnsupportedRequest]:
    """Turn a raw ``{"kind": ..., "id": ...}`` mapping into a request."""
    if isinstance(payload, MarkAsRead):
        return payload
    if not isinstance(payload, Mapping):
        return UnsupportedRequest(kind=None, reason=f"expected a mapping, got {type(payload).__name__}")

    kind = payload.get("kind")
    model = _REQUEST_TYPES.get(kind) if isinstance(kind, str) else None
    if model is None:
        return UnsupportedRequest(kind=kind if isinstance(kind, str) else None, reason="unknown request kind")
    try:
        return model.model_validate(dict(payload))
    except ValidationError as exc:
        fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in exc.errors())
        return UnsupportedRequest(kind=kind, reason=f"invalid payload: {fields}")
