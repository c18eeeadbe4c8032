# Public helper API: read a rendered simcal grid back into rows of cells
from __future__ import annotations

import html as _html
import re
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple


@dataclass
class GridExtractError(RuntimeError):
    message: str
    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class ExtractedCell:
    kind: str                   # "day" | "pad"
    date: Optional[str]         # ISO date for day cells
    classes: Tuple[str, ...]


_TABLE_RE = re.compile(
    r"<table\b(?P<attrs>[^>]*)>(?P<body>.*?)</table>",
    flags=re.IGNORECASE | re.DOTALL,
)
_TBODY_RE = re.compile(r"<tbody>(?P<body>.*?)</tbody>", flags=re.IGNORECASE | re.DOTALL)
_TH_RE = re.compile(r"<th>(?P<label>.*?)</th>", flags=re.IGNORECASE | re.DOTALL)
_ROW_RE = re.compile(r"<tr>(?P<row>.*?)</tr>", flags=re.IGNORECASE | re.DOTALL)
# Cells open with <td ...>; event titles may hold arbitrary markup, so cells
# are split on their opening tag rather than matched to </td>.
_TD_OPEN_RE = re.compile(r"<td\b(?P<attrs>[^>]*)>", flags=re.IGNORECASE)
_CLASS_RE = re.compile(r'\bclass="(?P<v>[^"]*)"')
_DATE_RE = re.compile(r'\bdata-simcal-id="(?P<v>[^"]*)"')
_ID_RE = re.compile(r'\bid="(?P<v>[^"]*)"')


def _find_table(html_text: str, table_id: Optional[str]) -> re.Match:
    for m in _TABLE_RE.finditer(html_text):
        if "data-simcal-id" not in m.group("body") and "&nbsp;" not in m.group("body"):
            continue
        if table_id is not None:
            idm = _ID_RE.search(m.group("attrs"))
            if not idm or _html.unescape(idm.group("v")) != table_id:
                continue
        return m
    raise GridExtractError("No simcal <table> found in HTML.")


def extract_headers(html_text: str, *, table_id: Optional[str] = None) -> List[str]:
    m = _find_table(html_text, table_id)
    return [_html.unescape(x.group("label")) for x in _TH_RE.finditer(m.group("body"))]


def extract_grid(html_text: str, *, table_id: Optional[str] = None) -> List[List[ExtractedCell]]:
    """Rows of body cells from the first simcal table (or the one with `table_id`).

    Raises GridExtractError when no table is found.
    """
    m = _find_table(html_text, table_id)
    tb = _TBODY_RE.search(m.group("body"))
    if not tb:
        raise GridExtractError("simcal table has no <tbody>.")

    rows: List[List[ExtractedCell]] = []
    for rm in _ROW_RE.finditer(tb.group("body")):
        cells: List[ExtractedCell] = []
        for cm in _TD_OPEN_RE.finditer(rm.group("row")):
            attrs = cm.group("attrs")
            cls = _CLASS_RE.search(attrs)
            classes = tuple((_html.unescape(cls.group("v")) if cls else "").split())
            dm = _DATE_RE.search(attrs)
            if dm:
                cells.append(ExtractedCell(kind="day", date=dm.group("v"), classes=classes))
            else:
                cells.append(ExtractedCell(kind="pad", date=None, classes=classes))
        if cells:
            rows.append(cells)
    return rows


def extract_grid_from_file(path: str | Path) -> List[List[ExtractedCell]]:
    return extract_grid(Path(path).read_text(encoding="utf-8"))
