"""Calendar-style habit heatmap built from dated notes."""

from heatmap.aggregate import build_day_map
from heatmap.color_scale import color_bucket
from heatmap.config import HeatmapConfig
from heatmap.layout import cell_size
from heatmap.month_labels import place_month_labels
from heatmap.view import HeatmapView, build_grid
from heatmap.week_grid import build_week_columns

__all__ = [
    "build_day_map",
    "build_grid",
    "build_week_columns",
    "cell_size",
    "color_bucket",
    "place_month_labels",
    "HeatmapConfig",
    "HeatmapView",
]
