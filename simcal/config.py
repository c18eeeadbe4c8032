from __future__ import annotations

import json
import os
from typing import Any, Dict, List, Optional

from .state import CalendarState
from .validate import ConfigurationError

_KNOWN_KEYS = (
    "month",
    "highlight",
    "weekdays",
    "week_offset",
    "excluded_days",
    "css_classes",
    "custom_attributes",
    "attributes_on_active_days_only",
    "table_id",
    "events",
)


def _normalize_events(raw: Any) -> List[Dict[str, Any]]:
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise ConfigurationError("events must be a list")
    out = []
    for i, ev in enumerate(raw):
        if not isinstance(ev, dict):
            raise ConfigurationError(f"events[{i}] must be an object")
        title = ev.get("title")
        start = ev.get("start")
        if not isinstance(title, str) or not isinstance(start, str) or not start.strip():
            raise ConfigurationError(f"events[{i}] needs string title and start")
        end = ev.get("end")
        out.append({"title": title, "start": start.strip(), "end": end.strip() if isinstance(end, str) and end.strip() else None})
    return out


def load_calendar_config(path: str) -> Optional[Dict[str, Any]]:
    """Load a calendar config JSON object.

    Accepted keys (all optional):
      month, highlight         date strings ("2023-06", "today"); highlight may be true/false
      weekdays                 list of 7 labels, Sunday first
      week_offset              0-6 or a weekday name
      excluded_days            list of 0-6 / weekday names
      css_classes              role -> class name
      custom_attributes        name -> value (":simcal_date:" is substituted)
      attributes_on_active_days_only   bool
      table_id                 string
      events                   [{"title": .., "start": .., "end": ..}]

    Returns None when `path` is empty or missing. Unknown keys are ignored.
    """
    if not path or not os.path.exists(path):
        return None
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid calendar config JSON: {path} ({e})") from e

    if not isinstance(raw, dict):
        raise ConfigurationError(f"calendar config must be a JSON object; got {type(raw).__name__}")

    cfg = {k: raw[k] for k in _KNOWN_KEYS if k in raw}
    cfg["events"] = _normalize_events(raw.get("events"))
    return cfg


def apply_config(state: CalendarState, cfg: Dict[str, Any]) -> CalendarState:
    """Push a loaded config through the CalendarState setters."""
    if "month" in cfg:
        state.set_month(cfg["month"])
    if "highlight" in cfg:
        state.set_highlight(cfg["highlight"])
    if "weekdays" in cfg:
        state.set_weekdays(cfg["weekdays"])
    if "week_offset" in cfg:
        state.set_week_offset(cfg["week_offset"])
    if "excluded_days" in cfg:
        state.set_excluded_days([] if cfg["excluded_days"] is None else cfg["excluded_days"])
    if "css_classes" in cfg:
        state.set_css_classes(cfg["css_classes"])
    if "custom_attributes" in cfg:
        state.set_custom_attributes(
            {} if cfg["custom_attributes"] is None else cfg["custom_attributes"],
            bool(cfg.get("attributes_on_active_days_only", False)),
        )
    elif "attributes_on_active_days_only" in cfg:
        state.attributes_on_active_days_only = bool(cfg["attributes_on_active_days_only"])
    if cfg.get("table_id") is not None:
        state.set_table_id(str(cfg["table_id"]))
    for ev in cfg.get("events") or []:
        state.add_event(ev["title"], ev["start"], ev.get("end"))
    return state


def calendar_from_config(path: str) -> CalendarState:
    """CalendarState configured from `path`; defaults when the file is missing."""
    state = CalendarState()
    cfg = load_calendar_config(path)
    if cfg:
        apply_config(state, cfg)
    return state
