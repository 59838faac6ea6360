"""Generate heatmap.html: month row, day labels and the colored week grid."""

from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from heatmap.color_scale import cell_color
from heatmap.layout import CELL_GAP, CONTAINER_PADDING, DAY_LABEL_WIDTH, day_labels
from heatmap.models import format_value
from heatmap.view import HeatmapView


def _build_heatmap_context(view: HeatmapView) -> dict:
    """
    Flatten the view into template rows. Cells are listed week by week so the
    grid can use grid-auto-flow: column.
    """
    cells: list[dict] = []
    for week in view.weeks:
        for cell in week:
            row = {
                "date": view.format_day(cell),
                "color": cell_color(cell, view.min_value, view.max_value),
                "title": "\n".join(view.hover_lines(cell)),
                "path": None,
                "name": None,
                "value": None,
            }
            if cell.aggregated is not None:
                row["path"] = cell.aggregated.representative
                row["name"] = cell.aggregated.display_name
                row["value"] = format_value(cell.aggregated.value)
            cells.append(row)

    geometry = view.geometry
    return {
        "cells": cells,
        "labels": [{"text": label.text, "column": label.column} for label in view.labels],
        "day_labels": day_labels(view.first_weekday),
        "geometry": geometry.as_dict() if geometry else None,
        "cell_gap": CELL_GAP,
        "day_label_width": DAY_LABEL_WIDTH,
        "container_padding": CONTAINER_PADDING,
    }


def render_heatmap_html(view: HeatmapView, title: str = "Habit Heatmap") -> str:
    templates_dir = Path(__file__).resolve().parent / "templates"
    env = Environment(loader=FileSystemLoader(templates_dir), autoescape=True)
    template = env.get_template("heatmap.html")
    context = _build_heatmap_context(view)
    context["title"] = title
    return template.render(context)


def generate_heatmap_html(view: HeatmapView, output_path: Path, title: str = "Habit Heatmap") -> Path:
    """Write the rendered page to output_path, creating parent folders."""
    output_path = Path(output_path)
    html = render_heatmap_html(view, title=title)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(html, encoding="utf-8")
    return output_path
