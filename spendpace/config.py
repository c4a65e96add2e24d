"""Configuration values for spendpace.

Paths can be overridden through environment variables so tests and
deployments can point the state file somewhere else.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional, Union

# Single civil calendar used for "today" and day boundaries
TIMEZONE = "Europe/Berlin"


def default_data_dir() -> Path:
    """``SPENDPACE_DATA_DIR`` if set, else ``~/.spendpace``."""
    return Path(os.getenv("SPENDPACE_DATA_DIR") or Path.home() / ".spendpace")


DATA_DIR = default_data_dir()
STATE_PATH = Path(os.getenv("SPENDPACE_STATE_PATH", DATA_DIR / "state.json"))

LOG_LEVEL = os.getenv("SPENDPACE_LOG_LEVEL", "WARNING")
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

LANGUAGES = ("en", "de", "ru")
DEFAULT_LANGUAGE = "en"

# ratio bounds for the pace motivation message
MOTIVATION_POSITIVE_MAX = 0.9
MOTIVATION_NEUTRAL_MAX = 1.1


def configure_logging(level: Optional[Union[str, int]] = None) -> None:
    """Install a root handler using ``LOG_LEVEL`` unless a level is given."""
    logging.basicConfig(level=level or LOG_LEVEL, format=LOG_FORMAT)


def ensure_data_directory() -> None:
    DATA_DIR.mkdir(parents=True, exist_ok=True)
