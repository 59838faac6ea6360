"""Resolve the calendar day a record belongs to."""

from __future__ import annotations

import re
from datetime import date

from heatmap.calendar_service import DEFAULT_CALENDAR, CalendarService
from heatmap.models import Record, value_to_text

# 2024-01-31 anywhere in a filename
ISO_DATE_RE = re.compile(r"(\d{4}-\d{2}-\d{2})")
# 01-31-2024 anywhere in a filename
MDY_DATE_RE = re.compile(r"(\d{2}-\d{2}-\d{4})")


def resolve_day_key(
    record: Record,
    date_property: str | None = None,
    calendar: CalendarService | None = None,
) -> date | None:
    """
    Return the record's day key, first match wins:
    1) date_property value, when present and parseable
    2) YYYY-MM-DD in the basename
    3) MM-DD-YYYY in the basename
    Otherwise None (the record is skipped by aggregation).
    """
    cal = calendar or DEFAULT_CALENDAR

    if date_property:
        raw = value_to_text(record.get_value(date_property))
        if raw:
            parsed = cal.parse(raw)
            if parsed is not None:
                return parsed

    basename = record.basename or ""
    iso_match = ISO_DATE_RE.search(basename)
    if iso_match:
        # An ISO-shaped but impossible date (2024-13-40) does not fall through to MM-DD-YYYY.
        return cal.parse(iso_match.group(1))

    mdy_match = MDY_DATE_RE.search(basename)
    if mdy_match:
        return cal.parse_month_day_year(mdy_match.group(1))

    return None
