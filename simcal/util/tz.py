# simcal/util/tz.py
from __future__ import annotations

import datetime as dt
import os
import re
from typing import Optional
from zoneinfo import ZoneInfo

_OFFSET_RE = re.compile(r"^([+-])(\d{2}):(\d{2})$")


def resolve_tz(name: Optional[str]) -> dt.tzinfo:
    """Resolve "local" (default), "UTC", an IANA name or a "+HH:MM" offset.

    Raises ValueError for anything else.
    """
    s = (name or "").strip() or "local"
    if s.lower() == "local":
        return dt.datetime.now().astimezone().tzinfo or dt.timezone.utc
    if s.upper() == "UTC":
        return dt.timezone.utc

    m = _OFFSET_RE.match(s)
    if m:
        hh, mm = int(m.group(2)), int(m.group(3))
        if hh > 23 or mm > 59:
            raise ValueError(f"Invalid timezone offset: {s!r}")
        minutes = hh * 60 + mm
        return dt.timezone(dt.timedelta(minutes=-minutes if m.group(1) == "-" else minutes))

    try:
        return ZoneInfo(s)
    except Exception as ex:
        raise ValueError(f"Invalid timezone identifier: {s!r}") from ex


def calendar_tz() -> dt.tzinfo:
    """Timezone used to resolve "today" (env SIMCAL_TZ, default local)."""
    return resolve_tz(os.getenv("SIMCAL_TZ", "local"))


def today_date(tz: Optional[dt.tzinfo] = None) -> dt.date:
    return dt.datetime.now(tz=tz or calendar_tz()).date()
