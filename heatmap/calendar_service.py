"""Calendar arithmetic used by the grid builder: week bounds, day math, parse and format."""

from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta


MONTH_NAMES = ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]


class CalendarService:
    """
    Whole-day calendar operations on datetime.date values.

    first_weekday follows the calendar module numbering (calendar.MONDAY == 0,
    calendar.SUNDAY == 6), same as calendar.setfirstweekday.
    """

    def __init__(self, first_weekday: int = calendar.MONDAY) -> None:
        self.first_weekday = first_weekday % 7

    def start_of_week(self, day: date) -> date:
        offset = (day.weekday() - self.first_weekday) % 7
        return day - timedelta(days=offset)

    def end_of_week(self, day: date) -> date:
        return self.start_of_week(day) + timedelta(days=6)

    def add_days(self, day: date, days: int) -> date:
        return day + timedelta(days=days)

    def add_years(self, day: date, years: int) -> date:
        """Shift by whole years; Feb 29 lands on Feb 28 in non-leap years."""
        year = day.year + years
        last_day = calendar.monthrange(year, day.month)[1]
        return date(year, day.month, min(day.day, last_day))

    def today(self) -> date:
        return date.today()

    def parse(self, text: str | None) -> date | None:
        """
        Parse an ISO date or datetime string (e.g. 2024-01-05, 2024-01-05T08:30:00Z).
        Returns None for anything that is not a valid calendar date.
        """
        if not text:
            return None
        s = str(text).strip()
        if not s:
            return None
        try:
            return datetime.fromisoformat(s.replace("Z", "+00:00")).date()
        except (ValueError, TypeError):
            pass
        try:
            return date.fromisoformat(s[:10])
        except (ValueError, TypeError):
            return None

    def parse_month_day_year(self, text: str) -> date | None:
        """Parse MM-DD-YYYY, returning None for impossible dates like 02-30-2024."""
        try:
            return datetime.strptime(text, "%m-%d-%Y").date()
        except (ValueError, TypeError):
            return None

    def format_key(self, day: date) -> str:
        return day.isoformat()

    def format_long(self, day: date) -> str:
        """Format as 'January 5, 2024' (no %-d so it works on Windows too)."""
        return f"{day.strftime('%B')} {day.day}, {day.year}"

    def month_index(self, day: date) -> int:
        return day.month - 1


DEFAULT_CALENDAR = CalendarService()
