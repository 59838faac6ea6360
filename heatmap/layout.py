"""Square cell sizing for a given container width."""

from __future__ import annotations

from dataclasses import dataclass

CELL_GAP = 3
DAY_LABEL_WIDTH = 20
CONTAINER_PADDING = 16
MIN_CELL_SIZE = 4
_WEEKDAY_LETTERS = {0: "M", 2: "W", 4: "F"}


@dataclass(frozen=True)
class GridGeometry:
    cell_size: int
    week_count: int
    gap: int = CELL_GAP

    @property
    def grid_template_columns(self) -> str:
        return f"repeat({self.week_count}, {self.cell_size}px)"

    @property
    def grid_template_rows(self) -> str:
        return f"repeat(7, {self.cell_size}px)"

    @property
    def month_row_template_columns(self) -> str:
        return self.grid_template_columns

    @property
    def month_row_padding_left(self) -> int:
        return DAY_LABEL_WIDTH + self.gap

    def as_dict(self) -> dict:
        return {
            "cellSize": self.cell_size,
            "weekCount": self.week_count,
            "gap": self.gap,
            "gridTemplateColumns": self.grid_template_columns,
            "gridTemplateRows": self.grid_template_rows,
            "monthRowTemplateColumns": self.month_row_template_columns,
            "monthRowPaddingLeft": self.month_row_padding_left,
        }


def available_width(container_width: float) -> float:
    """Width left for week columns after the day-label column, one gap and padding."""
    return container_width - DAY_LABEL_WIDTH - CELL_GAP - CONTAINER_PADDING


def cell_size(available: float, gap: int, week_count: int) -> int:
    if week_count <= 0:
        return MIN_CELL_SIZE
    return max(MIN_CELL_SIZE, int((available - gap * (week_count - 1)) // week_count))


def grid_geometry(container_width: float, week_count: int, gap: int = CELL_GAP) -> GridGeometry:
    size = cell_size(available_width(container_width), gap, week_count)
    return GridGeometry(cell_size=size, week_count=week_count, gap=gap)


def day_labels(first_weekday: int) -> list[str]:
    """Row labels for the day column: M, W and F on their rows, blank elsewhere."""
    return [_WEEKDAY_LETTERS.get((first_weekday + i) % 7, "") for i in range(7)]
