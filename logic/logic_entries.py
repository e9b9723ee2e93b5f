import logging
from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterator, List, Optional

from .logic_validation import clamp, clamp_int, normalize_date, truncate

logger = logging.getLogger(__name__)

# field -> (min, max) for the integer-typed metrics
INT_FIELDS = {
    "pain": (0, 10),
    "fatigue": (0, 10),
    "mood": (1, 5),
    "stress": (0, 10),
}
SLEEP_RANGE = (0, 14)

ENTRY_FIELDS = ["date", "pain", "fatigue", "mood", "sleep", "stress", "notes"]


@dataclass
class HealthEntry:
    """One day of symptom metrics."""
    date: str
    pain: int = 0
    fatigue: int = 0
    mood: int = 1
    sleep: float = 0
    stress: int = 0
    notes: str = ""

    @classmethod
    def from_raw(cls, raw: Dict[str, Any]) -> "HealthEntry":
        """
        Build a normalized entry from loosely typed input (form values or a
        stored dict). Numbers are clamped into range, never rejected.
        Raises ValueError only when the date cannot be parsed.
        """
        values: Dict[str, Any] = {"date": normalize_date(raw.get("date"))}
        for name, (lo, hi) in INT_FIELDS.items():
            values[name] = clamp_int(raw.get(name), lo, hi)
        values["sleep"] = clamp(raw.get("sleep"), *SLEEP_RANGE)
        values["notes"] = truncate(raw.get("notes"))

        for name in ("pain", "fatigue", "mood", "sleep", "stress"):
            try:
                changed = float(raw.get(name)) != values[name]
            except (TypeError, ValueError, OverflowError):
                changed = True
            if changed:
                logger.debug(
                    "Entry %s: %s normalized from %r to %r",
                    values["date"], name, raw.get(name), values[name],
                )
        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class EntryStore:
    """
    Daily health records keyed by date, kept in insertion order.

    Ordering by date happens only when reading the recent views.
    """

    def __init__(self, entries: Optional[List[HealthEntry]] = None):
        self._entries: List[HealthEntry] = []
        for entry in entries or []:
            self.upsert(entry)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[HealthEntry]:
        return iter(list(self._entries))

    @staticmethod
    def _key(date_str: Any) -> Optional[str]:
        try:
            return normalize_date(date_str)
        except ValueError:
            return None

    def get(self, date_str: str) -> Optional[HealthEntry]:
        key = self._key(date_str)
        for entry in self._entries:
            if entry.date == key:
                return entry
        return None

    def upsert(self, entry: HealthEntry | Dict[str, Any]) -> HealthEntry:
        """Normalize and store entry, replacing any entry with the same date."""
        raw = entry.to_dict() if isinstance(entry, HealthEntry) else entry
        normalized = HealthEntry.from_raw(raw)

        for i, existing in enumerate(self._entries):
            if existing.date == normalized.date:
                self._entries[i] = normalized
                return normalized
        self._entries.append(normalized)
        return normalized

    def delete(self, date_str: str) -> bool:
        """Remove the entry for date_str. Returns False if there was none."""
        key = self._key(date_str)
        before = len(self._entries)
        self._entries = [e for e in self._entries if e.date != key]
        return len(self._entries) != before

    def clear(self) -> None:
        self._entries = []

    def list_recent_window(self, n: int = 14) -> List[HealthEntry]:
        """Oldest-first, the trailing n entries (trend view)."""
        ordered = sorted(self._entries, key=lambda e: e.date)
        if n <= 0:
            return []
        return ordered[-n:]

    def list_recent_descending(self, n: int = 10) -> List[HealthEntry]:
        """Newest-first, at most n entries (recent entries list)."""
        ordered = sorted(self._entries, key=lambda e: e.date, reverse=True)
        return ordered[:max(n, 0)]

    def to_list(self) -> List[Dict[str, Any]]:
        return [e.to_dict() for e in self._entries]

    @classmethod
    def from_list(cls, items: Any) -> "EntryStore":
        """
        Rebuild a store from the persisted list. Malformed items are skipped
        with a warning; later duplicates of a date win.
        """
        store = cls()
        if not isinstance(items, list):
            if items is not None:
                logger.warning("Stored entries must be a list, got %s; ignoring", type(items).__name__)
            return store

        skipped = []
        for idx, item in enumerate(items):
            if not isinstance(item, dict):
                skipped.append((idx, f"expected an object, got {type(item).__name__}"))
                continue
            try:
                store.upsert(item)
            except ValueError as e:
                skipped.append((idx, str(e)))

        if skipped:
            logger.warning("Skipped %d invalid stored entry(ies)", len(skipped))
            for idx, error in skipped:
                logger.warning("  - entry %d: %s", idx, error)
        return store
