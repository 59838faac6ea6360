"""Build the habit heatmap for a folder of notes and write archive/heatmap.html."""

import argparse
import sys
import time
from pathlib import Path

from heatmap.config import load_config
from heatmap.heatmap_html import generate_heatmap_html
from heatmap.heatmap_json import write_heatmap_json
from heatmap.vault import load_records
from heatmap.view import HeatmapView

DEFAULT_WIDTH = 960


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate a habit heatmap from dated Markdown notes.")
    parser.add_argument("vault", type=Path, help="Folder containing the notes")
    parser.add_argument("--config", type=Path, default=None, help="JSON file with heatmap settings")
    parser.add_argument("--date-property", dest="dateProperty", default=None)
    parser.add_argument("--track-property", dest="trackProperty", default=None)
    parser.add_argument("--start", dest="startDate", default=None, help="YYYY-MM-DD")
    parser.add_argument("--end", dest="endDate", default=None, help="YYYY-MM-DD")
    parser.add_argument("--min", dest="minValue", type=float, default=None)
    parser.add_argument("--max", dest="maxValue", type=float, default=None)
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH, help="Container width in pixels")
    parser.add_argument("--out", type=Path, default=Path("archive"), help="Output folder")
    parser.add_argument("--json", action="store_true", help="Also write heatmap.json")
    return parser.parse_args(argv)


def _settings(args: argparse.Namespace) -> dict:
    """Config file values, overridden by any flag given on the command line."""
    settings = load_config(args.config)
    for key in ("dateProperty", "trackProperty", "startDate", "endDate", "minValue", "maxValue"):
        value = getattr(args, key)
        if value is not None:
            settings[key] = value
    return settings


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    vault_dir: Path = args.vault
    if not vault_dir.is_dir():
        print(f"Vault folder not found: {vault_dir}")
        return 1

    start = time.perf_counter()
    try:
        settings = _settings(args)
    except ValueError as exc:
        # json.JSONDecodeError is a ValueError too
        print(f"Could not read config {args.config}: {exc}")
        return 1

    print(f"Reading notes from {vault_dir} ...")
    records = load_records(vault_dir)
    print(f"Found {len(records)} note(s).")

    view = HeatmapView(lambda: records, lambda: settings)
    view.on_resize(args.width)
    view.on_data_updated()
    print(f"Built {len(view.weeks)} week(s), {len(view.labels)} month label(s).")

    out_dir: Path = args.out
    html_path = generate_heatmap_html(view, out_dir / "heatmap.html")
    print(f"Wrote {html_path}")
    if args.json:
        json_path = write_heatmap_json(view, out_dir / "heatmap.json")
        print(f"Wrote {json_path}")

    end = time.perf_counter()
    print(f"Done in {end - start:.2f}s.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
