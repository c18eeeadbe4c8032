# simcal/model.py
from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class HighlightMode(str, Enum):
    SUPPRESSED = "suppressed"
    USE_TODAY = "use_today"
    EXPLICIT = "explicit"


@dataclass(frozen=True)
class Highlight:
    mode: HighlightMode
    date: Optional[dt.date] = None

    @classmethod
    def suppressed(cls) -> "Highlight":
        return cls(HighlightMode.SUPPRESSED)

    @classmethod
    def use_today(cls) -> "Highlight":
        return cls(HighlightMode.USE_TODAY)

    @classmethod
    def explicit(cls, date: dt.date) -> "Highlight":
        return cls(HighlightMode.EXPLICIT, date)


@dataclass(frozen=True)
class EventEntry:
    event_id: int
    title: str  # raw HTML, emitted verbatim


@dataclass(frozen=True)
class DayCell:
    date: dt.date
    iso: str
    classes: Tuple[str, ...]
    active: bool
    attributes: str           # pre-rendered ` key="value"` pairs, may be ""
    events: Tuple[EventEntry, ...]


@dataclass(frozen=True)
class MonthLayout:
    month: dt.date
    headers: Tuple[str, ...]
    leading: int
    days: Tuple[DayCell, ...]
    trailing: int

    @property
    def cell_count(self) -> int:
        return self.leading + len(self.days) + self.trailing

    @property
    def row_count(self) -> int:
        return self.cell_count // 7


# role key -> default class name
DEFAULT_CSS_CLASSES = {
    "calendar": "simcal",
    "leading_day": "simcal-lead",
    "trailing_day": "simcal-trail",
    "highlight": "simcal-highlight",
    "event": "simcal-event",
    "events": "simcal-events",
    "disabled": "simcal-disabled",
}


__all__ = [
    "DEFAULT_CSS_CLASSES",
    "DayCell",
    "EventEntry",
    "Highlight",
    "HighlightMode",
    "MonthLayout",
]
