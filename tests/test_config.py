import json
from datetime import date

import pytest

from heatmap.config import DEFAULT_MAX_VALUE, HeatmapConfig, load_config


def test_defaults():
    config = HeatmapConfig.from_mapping({}, today=date(2024, 3, 15))
    assert config.date_property is None
    assert config.track_property is None
    assert config.start_date == date(2023, 3, 15)
    assert config.end_date == date(2024, 3, 15)
    assert config.min_value == 0
    assert config.max_value == 10


def test_camel_case_settings():
    config = HeatmapConfig.from_mapping(
        {
            "dateProperty": "note.day",
            "trackProperty": "note.pushups",
            "startDate": "2024-01-01",
            "endDate": "2024-06-30",
            "minValue": "2",
            "maxValue": 20,
        },
        today=date(2024, 3, 15),
    )
    assert config.date_property == "note.day"
    assert config.track_property == "note.pushups"
    assert config.start_date == date(2024, 1, 1)
    assert config.end_date == date(2024, 6, 30)
    assert config.min_value == 2
    assert config.max_value == 20


def test_snake_case_settings():
    config = HeatmapConfig.from_mapping({"start_date": "2024-01-01", "max_value": 5}, today=date(2024, 3, 15))
    assert config.start_date == date(2024, 1, 1)
    assert config.max_value == 5


def test_invalid_values_fall_back():
    config = HeatmapConfig.from_mapping(
        {"startDate": "yesterday-ish", "endDate": "2024-02-30", "minValue": "abc", "maxValue": 0, "trackProperty": "  "},
        today=date(2024, 3, 15),
    )
    assert config.start_date == date(2023, 3, 15)
    assert config.end_date == date(2024, 3, 15)
    assert config.min_value == 0
    assert config.max_value == DEFAULT_MAX_VALUE
    assert config.track_property is None


def test_default_start_on_leap_day():
    config = HeatmapConfig.from_mapping({}, today=date(2024, 2, 29))
    assert config.start_date == date(2023, 2, 28)


def test_load_config(tmp_path):
    path = tmp_path / "heatmap.json"
    path.write_text(json.dumps({"trackProperty": "pushups"}), encoding="utf-8")
    assert load_config(path) == {"trackProperty": "pushups"}
    assert load_config(tmp_path / "missing.json") == {}
    assert load_config(None) == {}


def test_load_config_rejects_non_object(tmp_path):
    path = tmp_path / "heatmap.json"
    path.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(path)
