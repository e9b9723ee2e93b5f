# app_config.py
"""
Central configuration for the Fibro Balance tracker.

- HEALTH_DATA_DIR: directory holding the persisted state and CSV exports.
- ROLLOVER_INTERVAL_SECONDS: how often the spoon budget checks for a new day.
- DEFAULT_SPOONS: capacity of a freshly created energy budget.
- TREND_WINDOW / RECENT_LIMIT: sizes of the trend table and recent list.
- LOG_LEVEL: root logging level for app.py.
- SHARE_UI: if True, ask Gradio for a public share link.
"""

import os


def _bool_env(name: str, default: str = "false") -> bool:
    value = os.getenv(name, default).strip().lower()
    return value in {"1", "true", "yes", "y"}


def _int_env(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


# Where the JSON state file and exports live
HEALTH_DATA_DIR: str = os.getenv("HEALTH_DATA_DIR", "user_data")

# Day-rollover polling interval; rollover is detected lazily, not at midnight
ROLLOVER_INTERVAL_SECONDS: int = _int_env("ROLLOVER_INTERVAL_SECONDS", 60)

# Spoons per day for a new budget (user can change it in settings)
DEFAULT_SPOONS: int = _int_env("DEFAULT_SPOONS", 10)

TREND_WINDOW: int = _int_env("TREND_WINDOW", 14)
RECENT_LIMIT: int = _int_env("RECENT_LIMIT", 10)

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").strip().upper()

SHARE_UI: bool = _bool_env("SHARE_UI", "false")
