from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

SEED_CHOICES = ("empty", "demo")


@dataclass
class NotipanelConfig:
    seed: str
    seed_path: Optional[str]
    event_backlog_maxlen: int
    log_level: str


def load_config(dotenv_path: Optional[str] = None) -> NotipanelConfig:
    """Load configuration from environment at call time (runtime-safe)."""
    load_dotenv(dotenv_path)
    seed = (os.getenv("NOTIPANEL_SEED") or "empty").strip().lower()
    if seed not in SEED_CHOICES:
        raise ValueError(f"NOTIPANEL_SEED must be one of {', '.join(SEED_CHOICES)}, got {seed!r}")
    seed_path = os.getenv("NOTIPANEL_SEED_PATH") or None
    if seed_path:
        seed_path = os.path.abspath(seed_path)
    event_backlog_maxlen = int(os.getenv("NOTIPANEL_EVENT_BACKLOG", "100"))
    log_level = os.getenv("NOTIPANEL_LOG_LEVEL", "INFO").upper()

    return NotipanelConfig(
        seed=seed,
        seed_path=seed_path,
        event_backlog_maxlen=event_backlog_maxlen,
        log_level=log_level,
    )


def configure_logging(level: str = "INFO") -> None:
    """Set up root logging once; later calls are no-ops."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
