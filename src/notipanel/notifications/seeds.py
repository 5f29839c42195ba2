"""Initial notification collections."""

from __future__ import annotations

import json
from pathlib import Path
from typing import List, Tuple, Union

from pydantic import BaseModel, ConfigDict, StrictBool, StrictStr, TypeAdapter, ValidationError

from notipanel.config import NotipanelConfig
from notipanel.notifications.types import NotificationItem


class SeedError(ValueError):
    """Raised when a seed file cannot be turned into notifications."""


class SeedEntry(BaseModel):
    """One notification as written in a seed file."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: StrictStr
    text: StrictStr
    read: StrictBool = False

    def to_item(self) -> NotificationItem:
        return NotificationItem(id=self.id, text=self.text, read=self.read)


_SEED_FILE = TypeAdapter(List[SeedEntry])


EMPTY_SEED: Tuple[NotificationItem, ...] = ()

DEMO_SEED: Tuple[NotificationItem, ...] = (
    NotificationItem(id="abc123", text="Notification First", read=False),
    NotificationItem(id="abc456", text="Notification Second", read=True),
    NotificationItem(id="abc789", text="Notification Third", read=False),
)

NAMED_SEEDS = {
    "empty": EMPTY_SEED,
    "demo": DEMO_SEED,
}


def load_seed(path: Union[str, Path]) -> List[NotificationItem]:
    """Read a JSON list of ``{"id", "text", "read"}`` objects."""
    seed_path = Path(path)
    try:
        raw = seed_path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise SeedError(f"seed file not found: {seed_path}") from exc
    except UnicodeDecodeError as exc:
        raise SeedError(f"seed file is not valid UTF-8: {seed_path}") from exc
    except OSError as exc:
        raise SeedError(f"seed file cannot be read: {seed_path}: {exc}") from exc
    try:
        entries = _SEED_FILE.validate_python(json.loads(raw))
    except json.JSONDecodeError as exc:
        raise SeedError(f"seed file is not valid JSON: {seed_path}") from exc
    except ValidationError as exc:
        fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in exc.errors())
        raise SeedError(f"seed file has invalid entries: {fields}") from exc
    return [entry.to_item() for entry in entries]


def seed_for_config(config: NotipanelConfig) -> Tuple[NotificationItem, ...]:
    if config.seed_path:
        return tuple(load_seed(config.seed_path))
    return NAMED_SEEDS[config.seed]
