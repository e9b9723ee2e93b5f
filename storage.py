import os
from datetime import date
from typing import Optional

from app_config import HEALTH_DATA_DIR

BASE_DIR = HEALTH_DATA_DIR
STATE_FILENAME = "fibroBalanceDataV1.json"
EXPORTS_DIRNAME = "exports"


def ensure_base_dir(base_dir: Optional[str] = None) -> str:
    """Ensure that the base data directory exists and return it."""
    directory = base_dir or BASE_DIR
    os.makedirs(directory, exist_ok=True)
    return directory


def today_str() -> str:
    """Return today's date as an ISO string (YYYY-MM-DD)."""
    return date.today().isoformat()


def get_state_path(base_dir: Optional[str] = None) -> str:
    """Return the path of the single persisted state document."""
    return os.path.join(base_dir or BASE_DIR, STATE_FILENAME)


def get_exports_dir(base_dir: Optional[str] = None) -> str:
    """Return the CSV export directory, creating it if necessary."""
    directory = os.path.join(base_dir or BASE_DIR, EXPORTS_DIRNAME)
    os.makedirs(directory, exist_ok=True)
    return directory
