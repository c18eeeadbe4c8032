# simcal/util/markup.py
from __future__ import annotations

import html
import re
from typing import Mapping, Optional

_TAG_RE = re.compile(r"<[^>]*>?", flags=re.DOTALL)

DATE_PLACEHOLDER = ":simcal_date:"


def strip_tags(s: str) -> str:
    return _TAG_RE.sub("", s)


def escape_attr(s: str) -> str:
    return html.escape(str(s), quote=True)


def escape_text(s: str) -> str:
    return html.escape(str(s), quote=False)


def sanitize_identifier(s: Optional[str]) -> str:
    """Attribute-safe identifier: tags stripped, spaces hyphenated, escaped."""
    if s is None:
        return ""
    return escape_attr(strip_tags(str(s)).replace(" ", "-"))


def format_attributes(attrs: Mapping[str, str]) -> str:
    """Render ` key="value"` pairs; empty string when there are none.

    Keys go through sanitize_identifier, values are escaped only.
    """
    if not attrs:
        return ""
    parts = [f'{sanitize_identifier(k)}="{escape_attr(v)}"' for k, v in attrs.items()]
    return " " + " ".join(parts)


def fill_date(attrs_markup: str, iso: str) -> str:
    return attrs_markup.replace(DATE_PLACEHOLDER, iso)
