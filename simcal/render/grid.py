# simcal/render/grid.py
from __future__ import annotations

import datetime as dt
import time
from typing import TYPE_CHECKING, List, Optional, Sequence

from simcal.model import DayCell, MonthLayout
from simcal.util.console import eprint, obs_enabled
from simcal.util.dateparse import day_of_week, days_in_month, iso_day, same_day
from simcal.util.markup import escape_attr, escape_text, fill_date, format_attributes, sanitize_identifier

from . import markup as M

if TYPE_CHECKING:  # pragma: no cover
    from simcal.state import CalendarState

SUNDAY = 0


def rotate_weekdays(labels: Sequence[str], offset: int) -> List[str]:
    """Left-rotate labels so index `offset` comes first. Never mutates `labels`."""
    items = list(labels)
    if not items:
        return items
    k = offset % len(items)
    return items[k:] + items[:k]


def leading_blanks(first_dow: int, offset: int) -> int:
    """Empty cells before day 1 so it lands under its rotated weekday column."""
    if offset == SUNDAY:
        return first_dow
    if offset < first_dow:
        return first_dow - offset
    if offset > first_dow:
        return first_dow + (7 - offset)
    return 0


def trailing_blanks(filled: int) -> int:
    """Cells needed to pad `filled` up to the next multiple of 7."""
    return (-filled) % 7


def layout_month(state: "CalendarState") -> MonthLayout:
    """Compute the grid for `state` without producing markup."""
    labels = state.weekday_labels
    assert len(labels) == 7, "weekday labels must have exactly 7 entries"

    month = state.month
    offset = state.week_offset
    classes = state.css_classes
    excluded = set(state.excluded_days)
    attrs_markup = format_attributes(state.custom_attributes)
    attrs_everywhere = not state.attributes_on_active_days_only

    leading = leading_blanks(day_of_week(month), offset)

    days: List[DayCell] = []
    for i in range(days_in_month(month)):
        date = month + dt.timedelta(days=i)
        iso = iso_day(date)

        class_list: List[str] = []
        if same_day(state.highlight, date):
            class_list.append(classes["highlight"])
        active = True
        if day_of_week(date) in excluded:
            class_list.append(classes["disabled"])
            active = False

        attrs = ""
        if attrs_markup and (active or attrs_everywhere):
            attrs = fill_date(attrs_markup, iso)

        days.append(
            DayCell(
                date=date,
                iso=iso,
                classes=tuple(class_list),
                active=active,
                attributes=attrs,
                events=state.events.on(date),
            )
        )

    trailing = trailing_blanks(leading + len(days))
    return MonthLayout(
        month=month,
        headers=tuple(rotate_weekdays(labels, offset)),
        leading=leading,
        days=tuple(days),
        trailing=trailing,
    )


def _day_markup(cell: DayCell, classes: dict) -> str:
    out = M.DAY_OPEN.format(
        iso=cell.iso,
        classes=" ".join(escape_attr(c) for c in cell.classes),
        attrs=cell.attributes,
    )
    out += M.DAY_TIME.format(iso=cell.iso, day=cell.date.day)
    if cell.events:
        out += M.EVENTS_OPEN.format(events=escape_attr(classes["events"]))
        for ev in cell.events:
            # titles are trusted raw HTML
            out += M.EVENT_ITEM.format(event=escape_attr(classes["event"]), title=ev.title)
        out += M.EVENTS_CLOSE
    return out + M.DAY_CLOSE


def render_layout(layout: MonthLayout, *, table_id: str, classes: dict) -> str:
    parts: List[str] = [
        M.TABLE_OPEN.format(table_id=table_id, calendar=escape_attr(classes["calendar"]))
    ]
    parts.extend(M.HEADER_CELL.format(label=escape_text(label)) for label in layout.headers)
    parts.append(M.HEAD_CLOSE)

    lead_cell = M.PAD_CELL.format(role=escape_attr(classes["leading_day"]))
    parts.append(lead_cell * layout.leading)

    col = layout.leading
    last = len(layout.days) - 1
    for i, cell in enumerate(layout.days):
        parts.append(_day_markup(cell, classes))
        col += 1
        if col == 7:
            col = 0
            parts.append(M.ROW_CLOSE if i == last else M.ROW_BREAK)

    if col:
        trail_cell = M.PAD_CELL.format(role=escape_attr(classes["trailing_day"]))
        parts.append(trail_cell * layout.trailing + M.ROW_CLOSE)

    parts.append(M.TABLE_CLOSE)
    return "".join(parts)


def render_grid(state: "CalendarState", table_id: Optional[str] = None) -> str:
    """Render `state` as an HTML table.

    `table_id` overrides state.table_id for this call only (sanitized).
    """
    t0 = time.monotonic()
    layout = layout_month(state)
    tid = state.table_id if table_id is None else sanitize_identifier(table_id)
    html = render_layout(layout, table_id=tid, classes=state.css_classes)

    if obs_enabled():
        elapsed_ms = int((time.monotonic() - t0) * 1000)
        eprint(
            f"[simcal.render] render.ok ms={elapsed_ms} month={layout.month:%Y-%m} "
            f"leading={layout.leading} days={len(layout.days)} trailing={layout.trailing}"
        )
    return html


__all__ = [
    "layout_month",
    "leading_blanks",
    "render_grid",
    "render_layout",
    "rotate_weekdays",
    "trailing_blanks",
]
