# state_io.py
"""
Loading and saving the combined {entries, spoons} state document.

The session only talks to StateGateway through load / save / clear. Every
failure is logged and swallowed so the app keeps running in memory.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, Optional

from storage import get_state_path

logger = logging.getLogger(__name__)


def load_state(path: str | Path) -> Optional[Dict[str, Any]]:
    p = Path(path)
    if not p.exists():
        return None
    with p.open("r", encoding="utf-8") as f:
        return json.load(f)


def atomic_write_json(path: str | Path, obj: Dict[str, Any]) -> None:
    p = Path(path)
    parent = p.parent
    parent.mkdir(parents=True, exist_ok=True)

    fd, tmp = tempfile.mkstemp(prefix=".tmp_state_", dir=str(parent), text=True)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(obj, f, ensure_ascii=False, indent=2)
        os.replace(tmp, str(p))
    except BaseException:
        if os.path.exists(tmp):
            os.remove(tmp)
        raise


class StateGateway:
    """File-backed persistence for the session snapshot."""

    def __init__(self, path: str | Path | None = None):
        self.path = Path(path) if path is not None else Path(get_state_path())

    def load(self) -> Optional[Dict[str, Any]]:
        """
        Return the stored snapshot, or None when nothing usable is stored.
        """
        try:
            data = load_state(self.path)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.warning("Stored state at %s is not valid JSON, starting empty: %s", self.path, e)
            return None
        except OSError:
            logger.exception("Loading stored state from %s failed", self.path)
            return None

        if data is None:
            logger.info("No stored state at %s", self.path)
            return None
        if not isinstance(data, dict):
            logger.warning(
                "Stored state at %s must be an object, got %s; starting empty",
                self.path,
                type(data).__name__,
            )
            return None
        return data

    def save(self, snapshot: Dict[str, Any]) -> bool:
        try:
            atomic_write_json(self.path, snapshot)
        except (OSError, TypeError, ValueError):
            logger.exception("Saving state to %s failed; continuing in memory", self.path)
            return False
        return True

    def clear(self) -> bool:
        """Remove the stored record entirely (destructive reset)."""
        try:
            self.path.unlink(missing_ok=True)
        except OSError:
            logger.exception("Removing stored state at %s failed", self.path)
            return False
        return True
