import math
from typing import Dict, Iterable, List

from .logic_entries import HealthEntry

AVERAGED_FIELDS = ("pain", "fatigue", "sleep", "stress")
TREND_FIELDS = ("pain", "fatigue", "stress")


def round_tenths(x: float) -> float:
    """Round to one decimal, halves going up (4.25 -> 4.3)."""
    return math.floor(x * 10 + 0.5) / 10


def compute_averages(entries: Iterable[HealthEntry]) -> Dict[str, float]:
    """
    Mean pain, fatigue, sleep and stress over all entries.

    An empty collection gives zeros for every metric.
    """
    entries = list(entries)
    if not entries:
        return {name: 0 for name in AVERAGED_FIELDS}

    n = len(entries)
    sums = {name: 0.0 for name in AVERAGED_FIELDS}
    for entry in entries:
        for name in AVERAGED_FIELDS:
            sums[name] += getattr(entry, name)
    return {name: round_tenths(sums[name] / n) for name in AVERAGED_FIELDS}


def trend_rows(entries: List[HealthEntry]) -> List[Dict[str, object]]:
    """Project an already windowed, oldest-first list onto the trend series."""
    rows = []
    for entry in entries:
        row = {"date": entry.date}
        for name in TREND_FIELDS:
            row[name] = getattr(entry, name)
        rows.append(row)
    return rows
