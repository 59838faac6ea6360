"""Data structures shared by the aggregation, grid and label stages."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any

from heatmap.calendar_service import MONTH_NAMES


@dataclass
class Record:
    """
    One source record (a note). identity is what a renderer navigates to,
    basename is used for filename date fallback and as the display name.
    """

    identity: str
    basename: str
    properties: dict[str, Any] = field(default_factory=dict)

    def get_value(self, key: str) -> Any:
        """Return the raw property value for key, or None when absent."""
        if not key:
            return None
        if key in ("file.name", "file.basename"):
            return self.basename
        if key.startswith("note."):
            key = key[len("note."):]
        if key in self.properties:
            return self.properties[key]
        return self.properties.get(key.lower())


@dataclass
class AggregatedDay:
    day_key: date
    value: float
    representative: str
    display_name: str


@dataclass(frozen=True)
class Cell:
    day_key: date
    aggregated: AggregatedDay | None
    in_range: bool


WeekColumn = tuple[Cell, ...]
Grid = list[WeekColumn]


@dataclass(frozen=True)
class MonthLabel:
    month_index: int
    column: int

    @property
    def text(self) -> str:
        return MONTH_NAMES[self.month_index]


def value_to_text(value: Any) -> str | None:
    """Stringify a raw property value; None means absent."""
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(t for t in (value_to_text(v) for v in value) if t is not None)
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def format_value(value: float) -> str:
    """Print integral values without a decimal point (7.0 -> '7')."""
    try:
        if float(value).is_integer():
            return str(int(value))
    except (TypeError, ValueError):
        pass
    return str(value)
