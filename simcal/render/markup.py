# simcal/render/markup.py
from __future__ import annotations

# Table fragments, formatted with str.format. Kept as exact strings; the
# grid extractor and tests rely on this layout.

TABLE_OPEN = '<table id="{table_id}" class="{calendar}"><thead><tr>'
HEADER_CELL = "<th>{label}</th>"
HEAD_CLOSE = "</tr></thead>\n<tbody>\n<tr>"

PAD_CELL = '<td class="{role}">&nbsp;</td>'

DAY_OPEN = '<td data-simcal-id="{iso}" class="{classes}"{attrs}>'
DAY_TIME = '<time datetime="{iso}">{day}</time>'
DAY_CLOSE = "</td>"

EVENTS_OPEN = '<div class="{events}">'
EVENT_ITEM = '<div class="{event}">{title}</div>'
EVENTS_CLOSE = "</div>"

ROW_BREAK = "</tr>\n<tr>"
ROW_CLOSE = "</tr>"

TABLE_CLOSE = "\n</tbody></table>\n"
