"""Heatmap settings: defaults for missing or invalid values, and JSON config files."""

from __future__ import annotations

import json
import math
from dataclasses import dataclass
from datetime import date, datetime
from pathlib import Path
from typing import Any, Mapping

from heatmap.calendar_service import DEFAULT_CALENDAR, CalendarService

DEFAULT_MIN_VALUE = 0
DEFAULT_MAX_VALUE = 10

# camelCase (as stored by the host) -> field name
_KEY_ALIASES = {
    "dateProperty": "date_property",
    "trackProperty": "track_property",
    "startDate": "start_date",
    "endDate": "end_date",
    "minValue": "min_value",
    "maxValue": "max_value",
}


@dataclass(frozen=True)
class HeatmapConfig:
    date_property: str | None
    track_property: str | None
    start_date: date
    end_date: date
    min_value: float
    max_value: float

    @classmethod
    def from_mapping(
        cls,
        mapping: Mapping[str, Any] | None = None,
        today: date | None = None,
        calendar: CalendarService | None = None,
    ) -> "HeatmapConfig":
        """
        Build a config from raw settings. Date strings that do not parse fall
        back to one year ago / today; a zero or non-numeric bound falls back to
        its default.
        """
        cal = calendar or DEFAULT_CALENDAR
        today = today or cal.today()
        raw = _normalize_keys(mapping or {})

        start = _parse_date_setting(raw.get("start_date"), cal)
        end = _parse_date_setting(raw.get("end_date"), cal)

        return cls(
            date_property=_property_key(raw.get("date_property")),
            track_property=_property_key(raw.get("track_property")),
            start_date=start if start is not None else cal.add_years(today, -1),
            end_date=end if end is not None else today,
            min_value=_number_or_default(raw.get("min_value"), DEFAULT_MIN_VALUE),
            max_value=_number_or_default(raw.get("max_value"), DEFAULT_MAX_VALUE),
        )


def _normalize_keys(mapping: Mapping[str, Any]) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for key, value in mapping.items():
        result[_KEY_ALIASES.get(key, key)] = value
    return result


def _property_key(value: Any) -> str | None:
    if value is None:
        return None
    s = str(value).strip()
    return s or None


def _parse_date_setting(value: Any, cal: CalendarService) -> date | None:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not value:
        return None
    return cal.parse(str(value))


def _number_or_default(value: Any, default: float) -> float:
    if value is None or isinstance(value, bool):
        return default
    try:
        number = float(value)
    except (ValueError, TypeError):
        return default
    if math.isnan(number) or number == 0:
        return default
    return number


def load_config(config_path: Path | None) -> dict[str, Any]:
    """Read a JSON object of settings. A missing file gives an empty mapping."""
    if config_path is None:
        return {}
    config_path = Path(config_path)
    if not config_path.exists():
        return {}
    with open(config_path, encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a JSON object: {config_path}")
    return data
