"""simcal.api

Stable *library* entrypoint for simcal.

Policy:
  - Only names listed in __all__ are considered public API.
  - Everything else is internal and may change without notice.
"""

from __future__ import annotations

from typing import Any, Optional

from simcal.config import apply_config, calendar_from_config, load_calendar_config
from simcal.events import EventIndex
from simcal.html_extract import ExtractedCell, GridExtractError, extract_grid, extract_grid_from_file, extract_headers
from simcal.model import DEFAULT_CSS_CLASSES, DayCell, EventEntry, Highlight, HighlightMode, MonthLayout
from simcal.render.grid import layout_month, leading_blanks, render_grid, rotate_weekdays
from simcal.render.page import build_page
from simcal.state import CalendarState
from simcal.util.dateparse import DateLike
from simcal.validate import ConfigurationError


def render_month(
    month: Optional[DateLike] = None,
    *,
    highlight: Any = None,
    week_offset: Any = 0,
    table_id: Optional[str] = None,
) -> str:
    """One-shot render of a month grid with default labels and classes."""
    state = CalendarState(month, highlight)
    state.set_week_offset(week_offset)
    return state.render(table_id)


# --- Public API exports ---------------------------------------------------
_PUBLIC_EXPORTS = (
    "CalendarState",
    "ConfigurationError",
    "DEFAULT_CSS_CLASSES",
    "DayCell",
    "EventEntry",
    "EventIndex",
    "ExtractedCell",
    "GridExtractError",
    "Highlight",
    "HighlightMode",
    "MonthLayout",
    "apply_config",
    "build_page",
    "calendar_from_config",
    "extract_grid",
    "extract_grid_from_file",
    "extract_headers",
    "layout_month",
    "leading_blanks",
    "load_calendar_config",
    "render_grid",
    "render_month",
    "rotate_weekdays",
)

__all__ = [n for n in _PUBLIC_EXPORTS if n in globals()]
# --- /Public API exports --------------------------------------------------
