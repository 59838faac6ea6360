"""Write heatmap.json: the built grid, month labels and geometry for external renderers."""

from __future__ import annotations

import json
from pathlib import Path

from heatmap.color_scale import cell_bucket, cell_color
from heatmap.view import HeatmapView


def heatmap_payload(view: HeatmapView) -> dict:
    weeks: list[list[dict]] = []
    for week in view.weeks:
        column: list[dict] = []
        for cell in week:
            aggregated = cell.aggregated
            column.append({
                "date": view.format_day(cell),
                "inRange": cell.in_range,
                "bucket": cell_bucket(cell, view.min_value, view.max_value),
                "color": cell_color(cell, view.min_value, view.max_value),
                "path": aggregated.representative if aggregated else None,
                "name": aggregated.display_name if aggregated else None,
                "value": aggregated.value if aggregated else None,
                "hover": view.hover_lines(cell),
            })
        weeks.append(column)

    return {
        "weeks": weeks,
        "labels": [{"text": label.text, "column": label.column} for label in view.labels],
        "geometry": view.geometry.as_dict() if view.geometry else None,
        "minValue": view.min_value,
        "maxValue": view.max_value,
    }


def write_heatmap_json(view: HeatmapView, output_path: Path) -> Path:
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(heatmap_payload(view), f, indent=2, ensure_ascii=False)
    return output_path
