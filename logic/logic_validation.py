import math
from datetime import date, datetime
from typing import Any

NOTES_MAX_LENGTH = 500


def _to_number(raw: Any) -> float:
    try:
        n = float(raw)
    except (TypeError, ValueError, OverflowError):
        return 0.0
    if math.isnan(n):
        return 0.0
    return n


def clamp(raw: Any, min_value: float = 0, max_value: float = 10):
    """
    Coerce raw input to a number and constrain it to [min_value, max_value].

    Non-numeric, missing or NaN input counts as 0. Never raises.
    Integral results come back as int, so 8.0 hours stays "8" on export.
    """
    n = max(min_value, min(max_value, _to_number(raw)))
    if isinstance(n, float) and n.is_integer():
        return int(n)
    return n


def clamp_int(raw: Any, min_value: int = 0, max_value: int = 10) -> int:
    """Clamp, then round half-up to an integer inside the same range."""
    n = clamp(raw, min_value, max_value)
    return int(min(max_value, max(min_value, math.floor(n + 0.5))))


def truncate(text: Any, limit: int = NOTES_MAX_LENGTH) -> str:
    if text is None:
        return ""
    return str(text)[:limit]


def normalize_date(raw: Any) -> str:
    """
    Return raw as a canonical YYYY-MM-DD string.

    Raises ValueError when raw is not a date; dates cannot be clamped.
    """
    if isinstance(raw, datetime):
        return raw.date().isoformat()
    if isinstance(raw, date):
        return raw.isoformat()
    if not isinstance(raw, str) or not raw.strip():
        raise ValueError(f"Not a date: {raw!r}")
    text = raw.strip()
    try:
        return date.fromisoformat(text).isoformat()
    except ValueError:
        return datetime.fromisoformat(text).date().isoformat()
