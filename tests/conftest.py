import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from notipanel.notifications.seeds import DEMO_SEED  # noqa: E402
from notipanel.notifications.store import initialize  # noqa: E402


@pytest.fixture
def demo_state():
    return initialize(DEMO_SEED)


@pytest.fixture(autouse=True)
def clean_notipanel_env(monkeypatch):
    """Keep configuration tests independent of the developer's shell."""
    for key in ("NOTIPANEL_SEED", "NOTIPANEL_SEED_PATH", "NOTIPANEL_EVENT_BACKLOG", "NOTIPANEL_LOG_LEVEL"):
        # Registers the key so values loaded from .env files are undone too
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
