"""
Saved compass readings.

A record snapshots what the user was facing in which year, so the
reading can be reloaded later. Only the newest few are kept.

Storage is a plain JSON list in chart_data/records.json by default.
"""

import json
import logging
import time
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Optional, Union

from luopan.mountains import facing_label, resolve_mountain

logger = logging.getLogger(__name__)

RECORD_LIMIT = 3
DEFAULT_RECORDS_PATH = Path(__file__).parent.parent / "chart_data" / "records.json"


@dataclass(frozen=True)
class SavedRecord:
    id: str
    year: int
    heading: float
    name: str      # facing mountain
    sitting: str   # sitting mountain
    timestamp: int  # epoch milliseconds

    @property
    def label(self) -> str:
        return f"{self.year}年 坐{self.sitting}向{self.name}"

    def to_dict(self):
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "SavedRecord":
        try:
            return cls(
                id=str(data["id"]),
                year=int(data["year"]),
                heading=float(data["heading"]),
                name=str(data["name"]),
                sitting=str(data["sitting"]),
                timestamp=int(data["timestamp"]),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise ValueError(f"Malformed saved record {data!r}: {e}") from e


def make_record(year: int, heading: float, now: Optional[int] = None) -> SavedRecord:
    """
    Snapshot a year and heading.

    Args:
        year: feng-shui year of the reading
        heading: compass heading in degrees
        now: timestamp in epoch milliseconds (defaults to current time)
    """
    if now is None:
        now = int(time.time() * 1000)
    mountain = resolve_mountain(heading)
    record = SavedRecord(
        id=str(now),
        year=year,
        heading=heading,
        name=mountain.name,
        sitting=mountain.sitting,
        timestamp=now,
    )
    logger.debug("Made record %s (%s)", record.label, facing_label(mountain))
    return record


def push_record(records: list[SavedRecord], record: SavedRecord,
                limit: int = RECORD_LIMIT) -> list[SavedRecord]:
    """Put a record first and keep only the newest `limit`."""
    return [record, *records][:limit]


def remove_record(records: list[SavedRecord], record_id: str) -> list[SavedRecord]:
    return [r for r in records if r.id != record_id]


def load_records(path: Union[str, Path] = DEFAULT_RECORDS_PATH) -> list[SavedRecord]:
    """Load saved records; a missing file means none saved yet."""
    path = Path(path)
    if not path.exists():
        logger.debug("No records file at %s", path)
        return []

    with open(path, encoding="utf-8") as f:
        try:
            raw = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Records file {path} is not valid JSON: {e}") from e

    if not isinstance(raw, list):
        raise ValueError(f"Records file {path} must hold a JSON list")
    return [SavedRecord.from_dict(item) for item in raw]


def save_records(records: list[SavedRecord],
                 path: Union[str, Path] = DEFAULT_RECORDS_PATH) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump([r.to_dict() for r in records], f, indent=2, ensure_ascii=False)
    logger.debug("Wrote %d records to %s", len(records), path)
    return path
