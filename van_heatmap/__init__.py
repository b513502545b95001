"""Defect heatmap overlay package."""

from .cli import main, parse_args
from .colors import CategoricalColorScale, ContinuousColorScale, map_colors
from .constants import MODE_CATEGORY, MODE_DENSITY, UNKNOWN_LABEL
from .density import compute_densities, density_domain
from .extraction import extract_points
from .models import Marker, MarkerGeometry, Point, TypedPoint
from .observers import CountingObserver, HeatmapObserver, LoggingObserver
from .render import RenderSurface, SvgSurface
from .scene import MarkerArena, build_markers
from .scene_types import SceneDiff, Viewport
from .settings import HeatmapSettings
from .visual import HeatmapVisual, RenderResult

__all__ = [
    "MODE_CATEGORY",
    "MODE_DENSITY",
    "UNKNOWN_LABEL",
    "CategoricalColorScale",
    "ContinuousColorScale",
    "CountingObserver",
    "HeatmapObserver",
    "HeatmapSettings",
    "HeatmapVisual",
    "LoggingObserver",
    "Marker",
    "MarkerArena",
    "MarkerGeometry",
    "Point",
    "RenderResult",
    "RenderSurface",
    "SceneDiff",
    "SvgSurface",
    "TypedPoint",
    "Viewport",
    "build_markers",
    "compute_densities",
    "density_domain",
    "extract_points",
    "main",
    "map_colors",
    "parse_args",
]
