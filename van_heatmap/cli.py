"""Command-line interface for rendering defect heatmaps to SVG."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import pandas as pd

from .constants import MODE_CATEGORY, MODES, VAN_SIDES
from .render import SvgSurface
from .settings import HeatmapSettings
from .visual import HeatmapVisual


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render defect positions as an SVG heatmap overlay")
    parser.add_argument("input", help="CSV file with x, y and optional label columns")
    parser.add_argument(
        "-o", "--output",
        default="heatmap.svg",
        help="Output SVG path (default: heatmap.svg)",
    )
    parser.add_argument("--mode", choices=MODES, default=None, help="Coloring mode (default: density)")
    parser.add_argument("--x", dest="x_column", default=None, help="Name of the x column (default: first column)")
    parser.add_argument("--y", dest="y_column", default=None, help="Name of the y column (default: second column)")
    parser.add_argument(
        "--label",
        dest="label_column",
        default=None,
        help="Name of the defect type column (default: third column)",
    )
    parser.add_argument("--radius", type=float, default=None, help="Neighbourhood radius for density, in percent")
    parser.add_argument("--marker-size", type=float, default=None, help="Marker radius in pixels")
    parser.add_argument("--marker-color", default=None, help="Fill for defects without a type")
    parser.add_argument("--palette", default=None, help="Named matplotlib colormap for density mode")
    parser.add_argument(
        "--custom-colors",
        default=None,
        help="Comma-separated fallback palette for category mode",
    )
    parser.add_argument(
        "--manual-color",
        action="append",
        default=[],
        metavar="LABEL=COLOR",
        help="Fixed color for a defect type (repeatable)",
    )
    parser.add_argument("--width", type=float, default=None, help="Canvas width in pixels (default: 500)")
    parser.add_argument("--height", type=float, default=None, help="Canvas height in pixels (default: 500)")
    parser.add_argument("--van-side", choices=VAN_SIDES, default=None, help="Background reference image")
    parser.add_argument(
        "--background-dir",
        type=Path,
        default=None,
        help="Directory holding van_<side>.png background images",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log pipeline diagnostics")
    return parser.parse_args(argv)


def _parse_manual_colors(entries: Sequence[str]) -> Dict[str, str]:
    manual: Dict[str, str] = {}
    for entry in entries:
        label, sep, color = entry.partition("=")
        if not sep or not label.strip() or not color.strip():
            raise ValueError(f"Expected LABEL=COLOR, got '{entry}'")
        manual[label.strip()] = color.strip()
    return manual


def build_settings(args: argparse.Namespace) -> HeatmapSettings:
    options: Dict[str, Any] = {
        "mode": args.mode,
        "densityRadius": args.radius,
        "markerSize": args.marker_size,
        "markerColor": args.marker_color,
        "palette": args.palette,
        "vanSide": args.van_side,
    }
    if args.custom_colors:
        options["customColors"] = [c.strip() for c in args.custom_colors.split(",") if c.strip()]
    if args.manual_color:
        options["manualColors"] = _parse_manual_colors(args.manual_color)
    return HeatmapSettings.from_mapping(options)


def select_columns(frame: pd.DataFrame, args: argparse.Namespace, required: int) -> List[List[Any]]:
    """Pick x, y and label columns by name, falling back to position."""
    names = [args.x_column, args.y_column, args.label_column][:required]
    columns: List[List[Any]] = []
    for position, name in enumerate(names):
        if name is not None:
            if name not in frame.columns:
                raise ValueError(f"Column '{name}' not found. Found: {list(frame.columns)}")
            columns.append(frame[name].tolist())
        elif position < frame.shape[1]:
            columns.append(frame.iloc[:, position].tolist())
    return columns


def background_images(directory: Optional[Path]) -> Dict[str, str]:
    if directory is None:
        return {}
    return {side: str(directory / f"van_{side}.png") for side in VAN_SIDES}


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="[%(name)s] %(levelname)s %(message)s",
    )

    input_path = Path(args.input)
    if not input_path.exists():
        raise SystemExit(f"Cannot find input table: {input_path}")

    try:
        settings = build_settings(args)
        frame = pd.read_csv(input_path, dtype=object, keep_default_na=True)
        columns = select_columns(frame, args, settings.required_columns)
        surface = SvgSurface(
            glow_size=settings.glow_size,
            background_images=background_images(args.background_dir),
        )
        visual = HeatmapVisual(settings=settings, surface=surface)
        result = visual.update(columns, args.width, args.height)
    except ValueError as exc:
        print(f"[van_heatmap] Error: {exc}", file=sys.stderr)
        raise SystemExit(2) from exc

    if result.skipped:
        needed = "x, y and label" if settings.mode == MODE_CATEGORY else "x and y"
        print(f"[van_heatmap] Input has no {needed} columns; writing an empty scene", file=sys.stderr)

    output_path = surface.save(Path(args.output))
    print(f"[van_heatmap] Wrote {len(result.markers)} markers to {output_path}")


__all__ = [
    "build_settings",
    "main",
    "parse_args",
    "select_columns",
]
