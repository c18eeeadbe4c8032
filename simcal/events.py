# simcal/events.py
from __future__ import annotations

import datetime as dt
from typing import Dict, List, Tuple

from .model import EventEntry
from .util.dateparse import as_day, iter_days

DayKey = Tuple[int, int, int]


def day_key(d: dt.date) -> DayKey:
    d = as_day(d)
    return (d.year, d.month, d.day)


class EventIndex:
    """Per-day event titles keyed by (year, month, day).

    Entries for a day keep insertion order. Ids come from a counter owned by
    the index and are never reused, clear() included.
    """

    def __init__(self) -> None:
        self._by_day: Dict[DayKey, List[EventEntry]] = {}
        self._next_id = 0

    def add(self, title: str, start: dt.date, end: dt.date) -> Tuple[int, int]:
        """Insert `title` on every day start..end (inclusive). Returns (id, days)."""
        event_id = self._next_id
        self._next_id += 1
        entry = EventEntry(event_id=event_id, title=title)
        n = 0
        for d in iter_days(start, end):
            self._by_day.setdefault(day_key(d), []).append(entry)
            n += 1
        return event_id, n

    def clear(self) -> None:
        self._by_day = {}

    def on(self, d: dt.date) -> Tuple[EventEntry, ...]:
        return tuple(self._by_day.get(day_key(d), ()))

    @property
    def next_id(self) -> int:
        return self._next_id

    def days(self) -> List[DayKey]:
        return sorted(self._by_day)

    def __len__(self) -> int:
        return len(self._by_day)

    def __bool__(self) -> bool:
        return bool(self._by_day)
