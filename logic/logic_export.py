import logging
import os
from typing import Iterable, Optional

from storage import get_exports_dir, today_str
from .logic_entries import ENTRY_FIELDS, HealthEntry

logger = logging.getLogger(__name__)


def _cell(value) -> str:
    text = "" if value is None else str(value)
    return text.replace("\r", " ").replace("\n", " ")


def entries_to_csv(entries: Iterable[HealthEntry]) -> str:
    """
    Render entries as comma-separated text, header first, one row per entry.

    Cells are not quoted; line breaks inside notes become spaces.
    """
    lines = [",".join(ENTRY_FIELDS)]
    for entry in entries:
        row = entry.to_dict()
        lines.append(",".join(_cell(row.get(k)) for k in ENTRY_FIELDS))
    return "\n".join(lines)


def export_filename(date_str: Optional[str] = None) -> str:
    return f"fibro-balance-entries-{date_str or today_str()}.csv"


def write_export(entries: Iterable[HealthEntry], base_dir: Optional[str] = None) -> str:
    """Write the CSV export into the exports dir and return its path."""
    directory = get_exports_dir(base_dir)
    path = os.path.join(directory, export_filename())
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(entries_to_csv(entries))
    logger.info("Exported entries to %s", path)
    return path
