# simcal/render/page.py
from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from simcal.util.markup import escape_text

from .grid import render_grid

if TYPE_CHECKING:  # pragma: no cover
    from simcal.state import CalendarState

PAGE_SHELL = r"""<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width, initial-scale=1" />
<title>__TITLE__</title>
<style>
__CSS_BLOCK__
</style>
</head>
<body>
__GRID_MARKUP__
</body>
</html>
"""

# Styles for the default role classes (simcal, simcal-lead, ...).
DEFAULT_CSS = r""".simcal {
  border-collapse: collapse;
  table-layout: fixed;
  width: 100%;
  font-family: system-ui, -apple-system, "Segoe UI", Roboto, sans-serif;
}
.simcal th {
  padding: 4px;
  font-weight: 600;
  text-align: center;
  background: #f3f3f3;
  border: 1px solid #ddd;
}
.simcal td {
  height: 80px;
  padding: 4px;
  vertical-align: top;
  border: 1px solid #ddd;
}
.simcal td time {
  display: block;
  font-weight: 600;
}
.simcal .simcal-lead,
.simcal .simcal-trail {
  background: #fafafa;
}
.simcal .simcal-highlight {
  background: #e6f1fb;
}
.simcal .simcal-highlight time {
  color: #0078d4;
}
.simcal .simcal-disabled {
  color: #aaa;
  background: #f6f6f6;
  pointer-events: none;
}
.simcal .simcal-events {
  margin-top: 2px;
  font-size: 0.85em;
}
.simcal .simcal-event {
  margin-bottom: 2px;
  padding: 1px 3px;
  border-radius: 3px;
  background: #fff3c4;
}"""

_MARKERS = ("__TITLE__", "__CSS_BLOCK__", "__GRID_MARKUP__")


def build_page(
    state: "CalendarState",
    *,
    title: str = "Calendar",
    css: Optional[str] = None,
    table_id: Optional[str] = None,
) -> str:
    """Standalone HTML document wrapping the rendered grid.

    `css` replaces DEFAULT_CSS; use it when role classes were renamed.
    """
    for marker in _MARKERS:
        n = PAGE_SHELL.count(marker)
        if n != 1:
            raise RuntimeError(f"PAGE_SHELL must contain {marker} exactly once (found {n})")

    grid = render_grid(state, table_id=table_id)
    # Grid last: event titles are raw HTML and may contain marker-like text.
    html = (
        PAGE_SHELL
        .replace("__TITLE__", escape_text(title))
        .replace("__CSS_BLOCK__", DEFAULT_CSS if css is None else css)
        .replace("__GRID_MARKUP__", grid)
    )
    return html
