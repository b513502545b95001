"""Rendering defaults for the van heatmap overlay."""

from __future__ import annotations

DEFAULT_CANVAS_WIDTH = 500
DEFAULT_CANVAS_HEIGHT = 500

MODE_DENSITY = "density"
MODE_CATEGORY = "category"
MODES = (MODE_DENSITY, MODE_CATEGORY)

UNKNOWN_LABEL = "Unknown"

# Density mode appearance
DENSITY_MARKER_SIZE = 6.0
DENSITY_MARKER_OPACITY = 0.75
DENSITY_GLOW_SIZE = 6.0
DENSITY_RADIUS = 12.0
DENSITY_COLOR_MIN = "#ffffb2"  # light yellow
DENSITY_COLOR_MAX = "#bd0026"  # dark red
DENSITY_STROKE_COLOR = "#ff6b00"
DENSITY_STROKE_OPACITY = 0.15

# Category mode appearance
CATEGORY_MARKER_SIZE = 10.0
CATEGORY_MARKER_COLOR = "#FF0000"
CATEGORY_FALLBACK_COLOR = "#808080"

VAN_SIDES = ("front", "back", "left", "right", "roof")
DEFAULT_VAN_SIDE = "front"

GLOW_FILTER_ID = "glow"

DEFAULT_CATEGORICAL_PALETTE = (
    "#1f77b4", "#ff7f0e", "#2ca02c", "#d62728", "#9467bd",
    "#8c564b", "#e377c2", "#7f7f7f", "#bcbd22", "#17becf",
)
