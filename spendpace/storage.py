"""Load and save the whole app state as one JSON file."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Optional

from spendpace import config
from spendpace.domain import AppState
from spendpace.transforms import state_from_dict, state_to_dict

logger = logging.getLogger(__name__)


def load_state(path: Optional[Path] = None) -> Optional[AppState]:
    """Return the stored state, or None when there is nothing usable."""
    target = Path(path or config.STATE_PATH)
    if not target.exists():
        return None
    try:
        with target.open("r", encoding="utf-8") as handle:
            data = json.load(handle)
        return state_from_dict(data)
    except (json.JSONDecodeError, OSError, KeyError, TypeError, ValueError, AttributeError) as exc:
        logger.warning("Ignoring unreadable state file %s: %s", target, exc)
        return None


def save_state(state: AppState, path: Optional[Path] = None) -> bool:
    """Write the state next to the target, then swap it into place.

    The previous file stays intact until the new one is fully written.
    """
    target = Path(path or config.STATE_PATH)
    tmp_name = None
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            "w", encoding="utf-8", dir=target.parent, prefix=f".{target.name}.", suffix=".tmp", delete=False
        ) as handle:
            tmp_name = handle.name
            json.dump(state_to_dict(state), handle, indent=2)
        os.replace(tmp_name, target)
    except OSError:
        logger.exception("Failed to save state to %s", target)
        if tmp_name is not None:
            Path(tmp_name).unlink(missing_ok=True)
        return False
    return True
