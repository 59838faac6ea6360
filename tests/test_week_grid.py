import calendar
from datetime import date, timedelta

from heatmap.aggregate import build_day_map
from heatmap.calendar_service import CalendarService
from heatmap.models import AggregatedDay, Record
from heatmap.week_grid import build_week_columns


def test_single_full_week_without_records():
    weeks = build_week_columns({}, date(2024, 1, 1), date(2024, 1, 7), True, 10)

    assert len(weeks) == 1
    assert len(weeks[0]) == 7
    assert all(cell.in_range for cell in weeks[0])
    assert all(cell.aggregated is None for cell in weeks[0])
    assert weeks[0][0].day_key == date(2024, 1, 1)


def test_columns_cover_whole_weeks_and_in_range_matches_window():
    start, end = date(2024, 1, 3), date(2024, 1, 20)
    weeks = build_week_columns({}, start, end, True, 10)

    assert [week[0].day_key for week in weeks] == [date(2024, 1, 1), date(2024, 1, 8), date(2024, 1, 15)]
    assert sum(len(week) for week in weeks) == 7 * len(weeks)
    for week in weeks:
        for cell in week:
            assert cell.in_range == (start <= cell.day_key <= end)


def test_consecutive_days_across_columns():
    weeks = build_week_columns({}, date(2024, 2, 20), date(2024, 3, 10), True, 10)
    days = [cell.day_key for week in weeks for cell in week]
    assert all(b - a == timedelta(days=1) for a, b in zip(days, days[1:]))


def test_sunday_first_weekday():
    weeks = build_week_columns({}, date(2024, 1, 1), date(2024, 1, 7), True, 10, CalendarService(calendar.SUNDAY))
    assert len(weeks) == 2
    assert weeks[0][0].day_key == date(2023, 12, 31)
    assert not weeks[0][0].in_range


def test_inverted_range_gives_empty_grid():
    assert build_week_columns({}, date(2024, 2, 1), date(2024, 1, 1), True, 10) == []


def test_inverted_range_within_one_week_gives_empty_grid():
    assert build_week_columns({}, date(2024, 1, 5), date(2024, 1, 3), True, 10) == []


def test_tracked_values_are_used_as_is():
    day = AggregatedDay(date(2024, 1, 3), 7, "a.md", "a")
    weeks = build_week_columns({day.day_key: day}, date(2024, 1, 1), date(2024, 1, 7), True, 10)
    assert weeks[0][2].aggregated is day


def test_presence_counts_as_max_value_without_track_property():
    day_map = build_day_map([Record("a.md", "2024-01-03", {})])
    weeks = build_week_columns(day_map, date(2024, 1, 1), date(2024, 1, 7), False, 10)

    assert weeks[0][2].aggregated.value == 10
    assert weeks[0][2].aggregated.representative == "a.md"
    assert day_map[date(2024, 1, 3)].value == 0


def test_out_of_range_day_never_carries_data():
    day = AggregatedDay(date(2024, 1, 1), 5, "a.md", "a")
    weeks = build_week_columns({day.day_key: day}, date(2024, 1, 3), date(2024, 1, 5), True, 10)
    assert weeks[0][0].day_key == date(2024, 1, 1)
    assert not weeks[0][0].in_range
    assert weeks[0][0].aggregated is None


def test_rebuild_is_structurally_identical():
    day_map = build_day_map([Record("a.md", "2024-01-03", {"n": "2"})], track_property="n")
    first = build_week_columns(day_map, date(2023, 12, 1), date(2024, 2, 1), True, 10)
    second = build_week_columns(day_map, date(2023, 12, 1), date(2024, 2, 1), True, 10)
    assert first == second
