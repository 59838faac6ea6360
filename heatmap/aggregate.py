"""Group records by day key and sum their tracked values."""

from __future__ import annotations

import math
from datetime import date
from logging import getLogger
from typing import Iterable

from heatmap.calendar_service import CalendarService
from heatmap.date_keys import resolve_day_key
from heatmap.models import AggregatedDay, Record, value_to_text

logger = getLogger(__name__)


def parse_track_value(raw: object) -> float:
    """
    Turn a raw track-property value into a number.
    'true' -> 1, 'false' -> 0, numeric text -> that number, anything else -> 0.
    """
    text = value_to_text(raw)
    if text is None:
        return 0.0
    if text == "true":
        return 1.0
    if text == "false":
        return 0.0
    s = text.strip()
    if not s:
        return 0.0
    # float() accepts digit separators, the numeric property syntax does not
    if "_" in s:
        return 0.0
    try:
        value = float(s)
    except (ValueError, TypeError):
        return 0.0
    if math.isnan(value):
        return 0.0
    return value


def build_day_map(
    records: Iterable[Record],
    date_property: str | None = None,
    track_property: str | None = None,
    calendar: CalendarService | None = None,
) -> dict[date, AggregatedDay]:
    """
    Build day_key -> AggregatedDay.

    Without a track property every record contributes 0; the grid builder
    substitutes max_value for days that have any record. The first record seen
    for a day stays its representative, later ones only add to value.
    """
    day_map: dict[date, AggregatedDay] = {}
    skipped = 0

    for record in records:
        day_key = resolve_day_key(record, date_property, calendar)
        if day_key is None:
            skipped += 1
            logger.debug("no day key for record %s", record.identity)
            continue

        value = parse_track_value(record.get_value(track_property)) if track_property else 0.0

        existing = day_map.get(day_key)
        if existing is not None:
            existing.value += value
        else:
            day_map[day_key] = AggregatedDay(
                day_key=day_key,
                value=value,
                representative=record.identity,
                display_name=record.basename,
            )

    if skipped:
        logger.debug("skipped %d record(s) without a resolvable date", skipped)
    return day_map
