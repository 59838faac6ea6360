"""State owner between the data pipeline and a renderer.

Rebuilds the grid when data changes (deferred while a text field has focus),
and recomputes geometry alone when the container is resized.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Callable, Iterable, Mapping

from heatmap.aggregate import build_day_map
from heatmap.calendar_service import DEFAULT_CALENDAR, CalendarService
from heatmap.config import DEFAULT_MAX_VALUE, DEFAULT_MIN_VALUE, HeatmapConfig
from heatmap.layout import GridGeometry, grid_geometry
from heatmap.models import Cell, Grid, MonthLabel, Record, format_value
from heatmap.month_labels import place_month_labels
from heatmap.week_grid import build_week_columns


def build_grid(
    records: Iterable[Record],
    config: HeatmapConfig,
    calendar: CalendarService | None = None,
) -> Grid:
    """Records -> day map -> week columns for one config."""
    day_map = build_day_map(records, config.date_property, config.track_property, calendar)
    return build_week_columns(
        day_map,
        config.start_date,
        config.end_date,
        config.track_property is not None,
        config.max_value,
        calendar,
    )


def hover_lines(cell: Cell, calendar: CalendarService | None = None) -> list[str]:
    """Long-form date, plus 'Value: n' when the cell has data."""
    cal = calendar or DEFAULT_CALENDAR
    lines = [cal.format_long(cell.day_key)]
    if cell.aggregated is not None:
        lines.append(f"Value: {format_value(cell.aggregated.value)}")
    return lines


class HeatmapView:
    """
    Holds the built grid, its labels and geometry for one rendered heatmap.

    load_records and load_config are read on every rebuild. on_render is called
    after a data rebuild, on_layout after any geometry change.
    """

    def __init__(
        self,
        load_records: Callable[[], Iterable[Record]],
        load_config: Callable[[], Mapping[str, Any]],
        calendar: CalendarService | None = None,
        on_render: Callable[["HeatmapView"], None] | None = None,
        on_layout: Callable[["HeatmapView"], None] | None = None,
        today: date | None = None,
    ) -> None:
        self._load_records = load_records
        self._load_config = load_config
        self._calendar = calendar or DEFAULT_CALENDAR
        self._on_render = on_render
        self._on_layout = on_layout
        self._today = today

        self.weeks: Grid = []
        self.labels: list[MonthLabel] = []
        self.geometry: GridGeometry | None = None
        self.config: HeatmapConfig | None = None
        self.min_value: float = DEFAULT_MIN_VALUE
        self.max_value: float = DEFAULT_MAX_VALUE
        self.container_width: float = 0
        self.has_pending_update = False
        self.closed = False

    def on_data_updated(self, text_input_focused: bool = False) -> bool:
        """Rebuild now, or mark a pending rebuild while a text input is being edited."""
        if self.closed:
            return False
        if text_input_focused:
            self.has_pending_update = True
            return False
        self.refresh()
        return True

    def on_focus_out(self, from_text_input: bool, to_text_input: bool) -> bool:
        """Run the pending rebuild once focus leaves a text input for something else."""
        if self.closed or not self.has_pending_update:
            return False
        if from_text_input and not to_text_input:
            self.has_pending_update = False
            self.refresh()
            return True
        return False

    def on_resize(self, container_width: float) -> None:
        if self.closed:
            return
        self.container_width = container_width
        self._update_layout()

    def refresh(self) -> None:
        """Full rebuild from the current records and config."""
        config = HeatmapConfig.from_mapping(self._load_config(), today=self._today, calendar=self._calendar)
        self.config = config
        self.min_value = config.min_value
        self.max_value = config.max_value

        self.weeks = build_grid(self._load_records(), config, self._calendar)
        self.labels = place_month_labels(self.weeks, self._calendar)
        if self._on_render is not None:
            self._on_render(self)
        self._update_layout()

    def hover_lines(self, cell: Cell) -> list[str]:
        return hover_lines(cell, self._calendar)

    @property
    def first_weekday(self) -> int:
        return self._calendar.first_weekday

    def format_day(self, cell: Cell) -> str:
        return self._calendar.format_key(cell.day_key)

    def close(self) -> None:
        self.weeks = []
        self.labels = []
        self.geometry = None
        self.has_pending_update = False
        self._on_render = None
        self._on_layout = None
        self.closed = True

    def _update_layout(self) -> None:
        if not self.weeks:
            self.geometry = None
            return
        self.geometry = grid_geometry(self.container_width, len(self.weeks))
        if self._on_layout is not None:
            self._on_layout(self)
