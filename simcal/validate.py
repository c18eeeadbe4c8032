"""Configuration validation helpers (library-facing).

Every check here runs before a CalendarState setter mutates anything, so a
raised ConfigurationError always leaves the state untouched.
"""

from __future__ import annotations

import datetime as dt
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

from simcal.model import DEFAULT_CSS_CLASSES, Highlight, HighlightMode
from simcal.util.dateparse import as_day, to_date, weekday_from_name
from simcal.util.tz import today_date


class ConfigurationError(ValueError):
    """Raised when a calendar setter receives invalid configuration."""


def coerce_weekday(value: Any) -> int:
    """Resolve an int (>= 0, reduced mod 7) or weekday name to 0..6 (0=Sunday)."""
    if isinstance(value, bool):
        raise ConfigurationError(f"Weekday must be an int or a weekday name, got {value!r}")
    if isinstance(value, int):
        if value < 0:
            raise ConfigurationError("Weekday cannot be a negative number.")
        return value % 7
    if isinstance(value, str):
        try:
            return weekday_from_name(value)
        except ValueError as e:
            raise ConfigurationError(f"Weekday must be a weekday name or date string, got {value!r}") from e
    raise ConfigurationError(f"Weekday must be an int or a weekday name, got {type(value).__name__}")


def coerce_weekdays(values: Iterable[Any]) -> List[int]:
    if isinstance(values, (str, int)):
        raise ConfigurationError("Excluded days must be a sequence of weekdays")
    return [coerce_weekday(v) for v in values]


def coerce_highlight(value: Any) -> Highlight:
    """Map the accepted highlight inputs onto a Highlight variant.

    False -> suppressed; True/None -> today; Highlight passthrough; anything
    else is parsed as a date. Parse errors propagate unchanged.
    """
    if isinstance(value, Highlight):
        return value
    if value is False:
        return Highlight.suppressed()
    if value is True or value is None:
        return Highlight.use_today()
    return Highlight.explicit(to_date(value))


def resolve_highlight(h: Highlight) -> Optional[dt.date]:
    if h.mode is HighlightMode.SUPPRESSED:
        return None
    if h.mode is HighlightMode.USE_TODAY:
        return today_date()
    return h.date


def check_css_classes(classes: Mapping[str, Any]) -> Dict[str, str]:
    if not isinstance(classes, Mapping):
        raise ConfigurationError(f"CSS classes must be a mapping, got {type(classes).__name__}")
    out: Dict[str, str] = {}
    for key, value in classes.items():
        if key not in DEFAULT_CSS_CLASSES:
            raise ConfigurationError(f"class '{key}' not supported")
        out[key] = str(value)
    return out


def check_weekday_labels(labels: Optional[Sequence[str]]) -> List[str]:
    if labels is None:
        return []
    if isinstance(labels, (str, bytes)) or not isinstance(labels, Iterable):
        raise ConfigurationError(f"Week day names must be a sequence of strings, got {type(labels).__name__}")
    labels = list(labels)
    if labels and len(labels) != 7:
        raise ConfigurationError("Week day names array must have exactly 7 values")
    return [str(x) for x in labels]


def check_event_span(start: dt.date, end: dt.date) -> None:
    if as_day(start) > as_day(end):
        raise ConfigurationError("The end date must be greater than the start date.")


def check_custom_attributes(attrs: Mapping[str, Any]) -> Dict[str, str]:
    if not isinstance(attrs, Mapping):
        raise ConfigurationError(f"Custom attributes must be a mapping, got {type(attrs).__name__}")
    return {str(k): str(v) for k, v in attrs.items()}


__all__ = [
    "ConfigurationError",
    "check_css_classes",
    "check_custom_attributes",
    "check_event_span",
    "check_weekday_labels",
    "coerce_highlight",
    "coerce_weekday",
    "coerce_weekdays",
    "resolve_highlight",
]
