from datetime import date, timedelta

from heatmap.models import Cell
from heatmap.month_labels import month_label_candidates, place_month_labels
from heatmap.week_grid import build_week_columns


def _column(first_day: date, in_range: bool = True) -> tuple:
    return tuple(Cell(first_day + timedelta(days=i), None, in_range) for i in range(7))


def test_labels_at_month_changes():
    weeks = build_week_columns({}, date(2024, 1, 1), date(2024, 3, 31), True, 10)
    labels = place_month_labels(weeks)
    assert [(label.text, label.column) for label in labels] == [("Jan", 1), ("Feb", 6), ("Mar", 10)]


def test_close_label_is_dropped():
    weeks = build_week_columns({}, date(2024, 1, 29), date(2024, 3, 10), True, 10)
    candidates = month_label_candidates(weeks)
    assert [(c.text, c.column) for c in candidates] == [("Jan", 1), ("Feb", 2), ("Mar", 6)]
    labels = place_month_labels(weeks)
    assert [(label.text, label.column) for label in labels] == [("Jan", 1), ("Mar", 6)]


def test_spacing_measured_from_last_kept_label():
    weeks = [_column(date(2024, month, 1)) for month in (1, 2, 3, 4)]
    labels = place_month_labels(weeks)
    assert [label.column for label in labels] == [1, 3]


def test_columns_without_in_range_days_are_skipped():
    weeks = [_column(date(2024, 1, 1), in_range=False), _column(date(2024, 2, 1)), _column(date(2024, 3, 1))]
    labels = month_label_candidates(weeks)
    assert [(label.month_index, label.column) for label in labels] == [(1, 2), (2, 3)]


def test_empty_grid_has_no_labels():
    assert place_month_labels([]) == []


def test_labels_are_never_closer_than_two_columns():
    weeks = build_week_columns({}, date(2022, 1, 15), date(2024, 6, 1), True, 10)
    labels = place_month_labels(weeks)
    assert len(labels) > 12
    assert all(b.column - a.column >= 2 for a, b in zip(labels, labels[1:]))
