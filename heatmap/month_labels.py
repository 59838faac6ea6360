"""Place month names above the week columns where the month changes."""

from __future__ import annotations

from heatmap.calendar_service import DEFAULT_CALENDAR, CalendarService
from heatmap.models import Grid, MonthLabel

MIN_LABEL_SPACING = 2


def month_label_candidates(weeks: Grid, calendar: CalendarService | None = None) -> list[MonthLabel]:
    """One candidate per month change, read from each column's first in-range day. Columns are 1-based."""
    cal = calendar or DEFAULT_CALENDAR
    last_month = -1
    candidates: list[MonthLabel] = []
    for w, week in enumerate(weeks):
        first = next((cell for cell in week if cell.in_range), None)
        if first is None:
            continue
        month = cal.month_index(first.day_key)
        if month != last_month:
            candidates.append(MonthLabel(month_index=month, column=w + 1))
            last_month = month
    return candidates


def place_month_labels(weeks: Grid, calendar: CalendarService | None = None) -> list[MonthLabel]:
    """
    Drop candidates that sit closer than MIN_LABEL_SPACING columns to the
    last label kept. The first candidate is always kept.
    """
    placed: list[MonthLabel] = []
    for label in month_label_candidates(weeks, calendar):
        if placed and label.column - placed[-1].column < MIN_LABEL_SPACING:
            continue
        placed.append(label)
    return placed
