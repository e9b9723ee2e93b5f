"""
The session owns the whole persisted state: the entry store, today's spoon
budget and the gateway they are saved through.

Every mutation goes through a HealthSession method, runs under one lock and
ends with a full snapshot save. Save failures are logged by the gateway and
never interrupt the session.
"""

import logging
import threading
from typing import Any, Dict, List, Optional

from apscheduler.schedulers.background import BackgroundScheduler

from app_config import DEFAULT_SPOONS, RECENT_LIMIT, ROLLOVER_INTERVAL_SECONDS, TREND_WINDOW
from state_io import StateGateway
from .logic_entries import EntryStore, HealthEntry
from .logic_exercises import Exercise, get_exercise
from .logic_spoons import SpoonBudget
from .logic_stats import compute_averages

logger = logging.getLogger(__name__)

ROLLOVER_JOB_ID = "spoon-rollover"


class HealthSession:
    def __init__(
        self,
        gateway: StateGateway,
        store: Optional[EntryStore] = None,
        budget: Optional[SpoonBudget] = None,
        default_total: int = DEFAULT_SPOONS,
    ):
        self.gateway = gateway
        self.default_total = default_total
        self.store = store if store is not None else EntryStore()
        self.budget = budget if budget is not None else SpoonBudget.fresh(total=default_total)
        self._lock = threading.RLock()
        self._scheduler: Optional[BackgroundScheduler] = None

    @classmethod
    def open(cls, gateway: StateGateway, now=None, default_total: int = DEFAULT_SPOONS) -> "HealthSession":
        """
        Load the stored snapshot once. Missing or unreadable data gives an
        empty store and a fresh budget; a stale budget is rolled over.
        """
        data = gateway.load()
        if data is None:
            session = cls(gateway, budget=SpoonBudget.fresh(now, total=default_total), default_total=default_total)
        else:
            session = cls(
                gateway,
                store=EntryStore.from_list(data.get("entries")),
                budget=SpoonBudget.from_dict(data.get("spoons"), now=now, total=default_total),
                default_total=default_total,
            )
            logger.info("Loaded %d entries from %s", len(session.store), gateway.path)
        session.tick(now)
        return session

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    # ---------- snapshot ----------

    def snapshot(self) -> Dict[str, Any]:
        with self._lock:
            return {"entries": self.store.to_list(), "spoons": self.budget.to_dict()}

    def _commit(self) -> bool:
        return self.gateway.save(self.snapshot())

    # ---------- entries ----------

    def save_entry(self, raw: HealthEntry | Dict[str, Any]) -> HealthEntry:
        """Upsert an entry by date. Raises ValueError for an unparseable date."""
        with self._lock:
            entry = self.store.upsert(raw)
            self._commit()
            return entry

    def delete_entry(self, date_str: str) -> bool:
        with self._lock:
            removed = self.store.delete(date_str)
            if removed:
                self._commit()
            return removed

    def averages(self) -> Dict[str, float]:
        with self._lock:
            return compute_averages(self.store)

    def recent_window(self, n: int = TREND_WINDOW) -> List[HealthEntry]:
        with self._lock:
            return self.store.list_recent_window(n)

    def recent_entries(self, n: int = RECENT_LIMIT) -> List[HealthEntry]:
        with self._lock:
            return self.store.list_recent_descending(n)

    # ---------- spoons ----------

    def consume_spoons(self, amount: int = 1) -> int:
        with self._lock:
            used = self.budget.consume(amount)
            self._commit()
            return used

    def release_spoons(self, amount: int = 1) -> int:
        with self._lock:
            used = self.budget.release(amount)
            self._commit()
            return used

    def reset_spoons(self) -> None:
        with self._lock:
            self.budget.reset()
            self._commit()

    def set_capacity(self, new_total: Any) -> int:
        with self._lock:
            total = self.budget.set_capacity(new_total)
            self._commit()
            return total

    def complete_exercise(self, exercise_id: str) -> Optional[Exercise]:
        exercise = get_exercise(exercise_id)
        if exercise is None:
            logger.warning("Unknown exercise %r", exercise_id)
            return None
        self.consume_spoons(exercise.spoons)
        return exercise

    def tick(self, now=None) -> bool:
        """Day-rollover check; saves only when the budget actually rolled over."""
        with self._lock:
            rolled = self.budget.tick(now)
            if rolled:
                self._commit()
            return rolled

    # ---------- destructive reset ----------

    def reset_all(self, confirmed: bool, now=None) -> bool:
        """
        Drop every entry, the stored record and the budget's consumption.
        Does nothing unless confirmed.
        """
        if not confirmed:
            return False
        with self._lock:
            self.store.clear()
            self.budget = SpoonBudget.fresh(now, total=self.default_total)
            self.gateway.clear()
        logger.info("All data reset")
        return True

    # ---------- rollover task ----------

    def start_rollover(self, interval_seconds: int = ROLLOVER_INTERVAL_SECONDS) -> None:
        if self._scheduler is not None:
            return
        scheduler = BackgroundScheduler(daemon=True)
        scheduler.add_job(
            self.tick,
            "interval",
            seconds=interval_seconds,
            id=ROLLOVER_JOB_ID,
            max_instances=1,
            coalesce=True,
        )
        scheduler.start()
        self._scheduler = scheduler
        logger.info("Spoon rollover check every %ss", interval_seconds)

    def stop_rollover(self) -> None:
        if self._scheduler is None:
            return
        self._scheduler.shutdown(wait=False)
        self._scheduler = None

    @property
    def rollover_running(self) -> bool:
        return self._scheduler is not None

    def close(self) -> None:
        self.stop_rollover()
