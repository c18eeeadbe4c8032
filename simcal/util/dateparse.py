# simcal/util/dateparse.py
from __future__ import annotations

import calendar
import datetime as dt
import re
from typing import Iterator, List, Optional, Union

from .tz import today_date

DateLike = Union[dt.date, dt.datetime, str]

_YM_RE = re.compile(r"^(\d{4})-(\d{1,2})$")
_YMD_RE = re.compile(r"^(\d{4})-(\d{1,2})-(\d{1,2})$")

# 0=Sunday .. 6=Saturday
_WEEKDAY_NAMES = {
    "sunday": 0, "sun": 0,
    "monday": 1, "mon": 1,
    "tuesday": 2, "tue": 2, "tues": 2,
    "wednesday": 3, "wed": 3,
    "thursday": 4, "thu": 4, "thur": 4, "thurs": 4,
    "friday": 5, "fri": 5,
    "saturday": 6, "sat": 6,
}

_RELATIVE_DAYS = {"today": 0, "now": 0, "tomorrow": 1, "yesterday": -1}


def day_of_week(d: dt.date) -> int:
    """Day of week with 0=Sunday .. 6=Saturday."""
    return d.isoweekday() % 7


def as_day(d: dt.date) -> dt.date:
    if isinstance(d, dt.datetime):
        return d.date()
    return d


def same_day(a: Optional[dt.date], b: Optional[dt.date]) -> bool:
    if a is None or b is None:
        return False
    return as_day(a) == as_day(b)


def month_start(d: dt.date) -> dt.date:
    return dt.date(d.year, d.month, 1)


def days_in_month(d: dt.date) -> int:
    return calendar.monthrange(d.year, d.month)[1]


def iso_day(d: dt.date) -> str:
    return as_day(d).isoformat()


def iter_days(start: dt.date, end: dt.date) -> Iterator[dt.date]:
    """Every calendar day from start through end, inclusive."""
    cur = as_day(start)
    last = as_day(end)
    one = dt.timedelta(days=1)
    while cur <= last:
        yield cur
        cur += one


def default_weekday_names() -> List[str]:
    # calendar.day_name is Monday-first and follows the active locale.
    return [calendar.day_name[(i - 1) % 7] for i in range(7)]


def _next_weekday(target: int, today: dt.date) -> dt.date:
    ahead = (target - day_of_week(today)) % 7
    return today + dt.timedelta(days=ahead)


def to_date(value: DateLike, *, today: Optional[dt.date] = None) -> dt.date:
    """Convert a date-like input into a date (or datetime, when one is given).

    Accepted strings:
      - "today" / "now" / "tomorrow" / "yesterday"
      - "YYYY-MM-DD", "YYYY-MM" (first of month)
      - ISO datetimes accepted by datetime.fromisoformat
      - weekday names ("monday", "mon"): next occurrence on/after today

    Raises ValueError for anything else.
    """
    if isinstance(value, dt.date):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Invalid date value: {value!r}")

    s = value.strip()
    low = s.lower()
    if not s:
        raise ValueError("Invalid date value: ''")

    if low in _RELATIVE_DAYS:
        base = today or today_date()
        return base + dt.timedelta(days=_RELATIVE_DAYS[low])

    if low in _WEEKDAY_NAMES:
        return _next_weekday(_WEEKDAY_NAMES[low], today or today_date())

    m = _YMD_RE.match(s)
    if m:
        return dt.date(int(m.group(1)), int(m.group(2)), int(m.group(3)))

    m = _YM_RE.match(s)
    if m:
        return dt.date(int(m.group(1)), int(m.group(2)), 1)

    try:
        return dt.datetime.fromisoformat(s.replace("Z", "+00:00"))
    except ValueError:
        raise ValueError(f"Invalid date value: {value!r}") from None


def to_day(value: DateLike, *, today: Optional[dt.date] = None) -> dt.date:
    return as_day(to_date(value, today=today))


def weekday_from_name(name: str) -> int:
    """Resolve a weekday name ("Monday", "mon") or a date string to 0..6.

    Raises ValueError when the name cannot be resolved.
    """
    low = str(name).strip().lower()
    if low in _WEEKDAY_NAMES:
        return _WEEKDAY_NAMES[low]
    return day_of_week(to_date(str(name).strip()))
