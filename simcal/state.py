# simcal/state.py
from __future__ import annotations

import datetime as dt
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from .events import EventIndex
from .model import DEFAULT_CSS_CLASSES, EventEntry
from .render.grid import render_grid, rotate_weekdays
from .util.console import eprint, obs_enabled
from .util.dateparse import DateLike, default_weekday_names, month_start, to_date
from .util.markup import format_attributes, sanitize_identifier
from .util.tz import today_date
from .validate import (
    ConfigurationError,
    check_css_classes,
    check_custom_attributes,
    check_event_span,
    check_weekday_labels,
    coerce_highlight,
    coerce_weekday,
    coerce_weekdays,
    resolve_highlight,
)


def _warn(msg: str) -> None:
    if obs_enabled():
        eprint(f"[simcal.state] WARN: {msg}")


class CalendarState:
    """Configuration for one month grid.

    Setters validate first and only then assign, so a ConfigurationError
    leaves the state exactly as it was. Weekday labels are stored in
    canonical Sunday-first order; the rotated header is derived per render.
    """

    def __init__(self, month: Optional[DateLike] = None, highlight: Any = None) -> None:
        self.month: dt.date = month_start(today_date())
        self.highlight: Optional[dt.date] = None
        self.week_offset = 0
        self.excluded_days: List[int] = []
        self.events = EventIndex()
        self.table_id = ""
        self.attributes_on_active_days_only = False
        self._weekdays: Tuple[str, ...] = tuple(default_weekday_names())
        self._css_classes: Dict[str, str] = dict(DEFAULT_CSS_CLASSES)
        self._custom_attributes: Dict[str, str] = {}

        self.set_highlight(highlight)
        self.set_month(month)

    # --- configuration -----------------------------------------------------

    def set_month(self, month: Optional[DateLike] = None) -> None:
        if month is None:
            self.month = month_start(today_date())
        else:
            self.month = month_start(to_date(month))

    def set_highlight(self, highlight: Any = None) -> None:
        """False clears, True/None means today, anything else is parsed as-is."""
        self.highlight = resolve_highlight(coerce_highlight(highlight))

    def set_css_classes(self, classes: Mapping[str, Any]) -> None:
        try:
            checked = check_css_classes(classes)
        except ConfigurationError as e:
            _warn(str(e))
            raise
        self._css_classes.update(checked)

    def set_weekdays(self, weekdays: Optional[Sequence[str]] = None) -> None:
        """Seven Sunday-first labels; empty or None restores the locale names.

        Labels are rendered as escaped text, so markup such as `<abbr>` shows
        literally instead of being emitted raw.
        """
        try:
            labels = check_weekday_labels(weekdays)
        except ConfigurationError as e:
            _warn(str(e))
            raise
        self._weekdays = tuple(labels) if labels else tuple(default_weekday_names())

    def add_event(self, title: str, start: DateLike, end: Optional[DateLike] = None) -> int:
        """Add raw HTML `title` to every day from start through end (inclusive).

        Returns the event id.
        """
        start_d = to_date(start)
        end_d = start_d if end is None else to_date(end)
        try:
            check_event_span(start_d, end_d)
        except ConfigurationError as e:
            _warn(f"{e} start={start_d} end={end_d}")
            raise

        event_id, n = self.events.add(str(title), start_d, end_d)
        if obs_enabled():
            eprint(f"[simcal.state] event.add id={event_id} days={n} start={start_d} end={end_d}")
        return event_id

    def clear_events(self) -> None:
        self.events.clear()

    # Name used by the original project for the same operation.
    clear_daily_html = clear_events

    def set_week_offset(self, offset: Any) -> None:
        """Day the week starts on: 0-6 (0 is Sunday), "Monday" or "mon"."""
        try:
            self.week_offset = coerce_weekday(offset)
        except ConfigurationError as e:
            _warn(str(e))
            raise

    def set_excluded_days(self, weekdays: Iterable[Any]) -> None:
        try:
            resolved = coerce_weekdays(weekdays)
        except ConfigurationError as e:
            _warn(str(e))
            raise
        self.excluded_days.extend(resolved)

    def set_custom_attributes(self, attributes: Mapping[str, Any], active_days_only: bool = False) -> None:
        """Merge per-cell attributes; `:simcal_date:` in a value becomes the cell's date."""
        checked = check_custom_attributes(attributes)
        self._custom_attributes.update(checked)
        self.attributes_on_active_days_only = bool(active_days_only)

    def set_table_id(self, table_id: Optional[str]) -> None:
        self.table_id = sanitize_identifier(table_id)

    # --- accessors ---------------------------------------------------------

    @property
    def weekday_labels(self) -> List[str]:
        return list(self._weekdays)

    @property
    def css_classes(self) -> Dict[str, str]:
        return dict(self._css_classes)

    @property
    def custom_attributes(self) -> Dict[str, str]:
        return dict(self._custom_attributes)

    def header_labels(self) -> List[str]:
        return rotate_weekdays(self._weekdays, self.week_offset)

    def custom_attributes_markup(self) -> str:
        return format_attributes(self._custom_attributes)

    def events_on(self, day: DateLike) -> Tuple[EventEntry, ...]:
        return self.events.on(to_date(day))

    def render(self, table_id: Optional[str] = None) -> str:
        """Render the grid; a given table_id is stored on the state first."""
        if table_id is not None:
            self.set_table_id(table_id)
        return render_grid(self)
