"""Map values to one of five intensity buckets and their colors."""

from __future__ import annotations

import math

from heatmap.models import Cell

# Bucket 0 is the empty-cell color; 1..4 are the green ramp.
BUCKET_COLORS = ["#1a1a1a", "#9be9a8", "#40c463", "#30a14e", "#216e39"]
EMPTY_CELL_COLOR = BUCKET_COLORS[0]
OUT_OF_RANGE_COLOR = "transparent"


def color_bucket(value: float | None, min_value: float, max_value: float) -> int:
    """
    Return 0..4. None or value <= min is 0; a degenerate range (max <= min) or
    value >= max is 4; anything strictly above min is at least 1.
    """
    if value is None or value <= min_value:
        return 0
    if max_value <= min_value or value >= max_value:
        return 4
    return max(1, math.ceil(((value - min_value) / (max_value - min_value)) * 4))


def cell_bucket(cell: Cell, min_value: float, max_value: float) -> int:
    if not cell.in_range or cell.aggregated is None:
        return 0
    return color_bucket(cell.aggregated.value, min_value, max_value)


def cell_color(cell: Cell, min_value: float, max_value: float) -> str:
    if not cell.in_range:
        return OUT_OF_RANGE_COLOR
    if cell.aggregated is None:
        return EMPTY_CELL_COLOR
    return BUCKET_COLORS[color_bucket(cell.aggregated.value, min_value, max_value)]
