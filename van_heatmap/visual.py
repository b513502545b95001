"""Heatmap visual: runs the full pipeline for each update cycle."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional, Sequence

from .colors import map_colors
from .constants import MODE_CATEGORY
from .density import compute_densities
from .extraction import extract_points
from .models import Marker, TypedPoint
from .observers import HeatmapObserver, LoggingObserver
from .render import RenderSurface, SvgSurface
from .scene import MarkerArena, build_markers, geometry_for
from .scene_types import SceneDiff, Viewport
from .settings import HeatmapSettings


@dataclass
class RenderResult:
    markers: List[Marker]
    diff: SceneDiff
    viewport: Viewport
    densities: List[int] = field(default_factory=list)
    labels: List[str] = field(default_factory=list)
    skipped: bool = False


class HeatmapVisual:
    """Defect overlay that redraws on every data update or container resize.

    Updates run synchronously to completion; each call supersedes the previous
    one. The marker arena is the only state carried between frames.
    """

    def __init__(
        self,
        settings: Optional[HeatmapSettings] = None,
        surface: Optional[RenderSurface] = None,
        observer: Optional[HeatmapObserver] = None,
    ) -> None:
        self.settings = settings or HeatmapSettings()
        self.surface = surface if surface is not None else SvgSurface(glow_size=self.settings.glow_size)
        self.observer = observer or LoggingObserver()
        self.viewport = Viewport()
        self._arena = MarkerArena()
        self._columns: Optional[Sequence[Sequence[Any]]] = None
        self._sync_surface_style()

    @property
    def markers(self) -> List[Marker]:
        return self._arena.markers

    def _sync_surface_style(self) -> None:
        if isinstance(self.surface, SvgSurface):
            self.surface.set_glow_size(self.settings.glow_size)
            self.surface.set_van_side(self.settings.van_side)

    def update_settings(self, settings: HeatmapSettings) -> None:
        self.settings = settings
        self._sync_surface_style()

    def update(
        self,
        columns: Optional[Sequence[Sequence[Any]]],
        width: Any = None,
        height: Any = None,
    ) -> RenderResult:
        self.viewport = Viewport.from_container(width, height)
        self.surface.set_viewport(self.viewport)
        self._columns = columns

        settings = self.settings
        points = extract_points(columns, settings.mode, self.observer)
        if points is None:
            diff = self._arena.clear()
            self.surface.apply(diff, [])
            return RenderResult(markers=[], diff=diff, viewport=self.viewport, skipped=True)

        densities: List[int] = []
        labels: List[str] = []
        if settings.mode == MODE_CATEGORY:
            labels = [point.label for point in points if isinstance(point, TypedPoint)]
            colors = map_colors(settings, points, observer=self.observer)
        else:
            densities = [int(value) for value in compute_densities(points, settings.density_radius)]
            colors = map_colors(settings, points, densities, observer=self.observer)

        markers = build_markers(points, colors, geometry_for(settings), self.viewport)
        diff = self._arena.reconcile(markers)
        self.surface.apply(diff, markers)
        self.observer.on_render(len(markers), diff)
        return RenderResult(
            markers=markers,
            diff=diff,
            viewport=self.viewport,
            densities=densities,
            labels=labels,
        )

    def resize(self, width: Any, height: Any) -> RenderResult:
        """Re-run the last update against a new container size."""
        return self.update(self._columns, width, height)


__all__ = [
    "HeatmapVisual",
    "RenderResult",
]
