import logging
from dataclasses import asdict, dataclass
from datetime import date, datetime
from typing import Any, Dict, Optional

from storage import today_str
from .logic_validation import clamp_int, normalize_date

logger = logging.getLogger(__name__)

DEFAULT_TOTAL = 10
TOTAL_RANGE = (1, 30)


def _day_of(now: date | datetime | str | None) -> str:
    if now is None:
        return today_str()
    return normalize_date(now)


@dataclass
class SpoonBudget:
    """
    Daily energy allowance ("spoons").

    total is a standing preference and survives rollover; used resets to 0
    whenever the calendar day changes.
    """
    date: str
    total: int = DEFAULT_TOTAL
    used: int = 0

    @classmethod
    def fresh(cls, now=None, total: int = DEFAULT_TOTAL) -> "SpoonBudget":
        return cls(date=_day_of(now), total=clamp_int(total, *TOTAL_RANGE), used=0)

    @property
    def remaining(self) -> int:
        return max(0, self.total - self.used)

    def is_stale(self, now=None) -> bool:
        return self.date != _day_of(now)

    def tick(self, now=None) -> bool:
        """
        Roll over to a fresh day if the stored date is not today.
        Returns True when a rollover happened.
        """
        today = _day_of(now)
        if self.date == today:
            return False
        logger.info("Spoon budget rollover %s -> %s (total %d kept)", self.date, today, self.total)
        self.date = today
        self.used = 0
        return True

    def consume(self, amount: int = 1) -> int:
        self.used = clamp_int(self.used + amount, 0, self.total)
        return self.used

    def release(self, amount: int = 1) -> int:
        self.used = clamp_int(self.used - amount, 0, self.total)
        return self.used

    def reset(self) -> None:
        self.used = 0

    def set_capacity(self, new_total: Any) -> int:
        # used is left alone here; the next consume/release re-clamps it
        self.total = clamp_int(new_total, *TOTAL_RANGE)
        return self.total

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]], now=None, total: int = DEFAULT_TOTAL) -> "SpoonBudget":
        """Rebuild from the persisted object, falling back to a fresh budget."""
        if not isinstance(data, dict):
            if data is not None:
                logger.warning("Stored spoons must be an object, got %s; using defaults", type(data).__name__)
            return cls.fresh(now, total=total)
        try:
            day = normalize_date(data.get("date"))
        except ValueError:
            logger.warning("Stored spoons date %r is invalid; using today", data.get("date"))
            day = _day_of(now)
        total = clamp_int(data.get("total", total), *TOTAL_RANGE)
        used = clamp_int(data.get("used"), 0, total)
        return cls(date=day, total=total, used=used)
