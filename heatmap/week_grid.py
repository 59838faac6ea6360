"""Lay the aggregated day map out as week columns covering the configured range."""

from __future__ import annotations

import dataclasses
from datetime import date

from heatmap.calendar_service import DEFAULT_CALENDAR, CalendarService
from heatmap.models import AggregatedDay, Cell, Grid


def build_week_columns(
    day_map: dict[date, AggregatedDay],
    start_date: date,
    end_date: date,
    has_track_property: bool,
    max_value: float,
    calendar: CalendarService | None = None,
) -> Grid:
    """
    Build one 7-cell column per week from the week containing start_date through
    the week containing end_date. Cells outside [start_date, end_date] are kept
    for alignment but never carry data.

    Without a track property a day with any record shows as max_value.
    An inverted range (start_date > end_date) gives an empty grid.
    """
    cal = calendar or DEFAULT_CALENDAR
    if start_date > end_date:
        return []

    display_start = cal.start_of_week(start_date)
    display_end = cal.end_of_week(end_date)

    weeks: Grid = []
    cursor = display_start
    while cursor < display_end:
        week: list[Cell] = []
        for dow in range(7):
            day = cal.add_days(cursor, dow)
            in_range = start_date <= day <= end_date

            aggregated: AggregatedDay | None = None
            if in_range:
                existing = day_map.get(day)
                if existing is not None:
                    aggregated = existing if has_track_property else dataclasses.replace(existing, value=max_value)

            week.append(Cell(day_key=day, aggregated=aggregated, in_range=in_range))
        weeks.append(tuple(week))
        cursor = cal.add_days(cursor, 7)

    return weeks
