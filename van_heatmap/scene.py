"""Marker construction and frame-to-frame reconciliation."""

from __future__ import annotations

from typing import List, Optional, Sequence

import numpy as np

from .constants import GLOW_FILTER_ID, MODE_CATEGORY
from .models import Marker, MarkerGeometry, Point
from .scene_types import SceneDiff, Viewport
from .settings import HeatmapSettings


def geometry_for(settings: HeatmapSettings) -> MarkerGeometry:
    # Glow only applies to the density overlay
    return MarkerGeometry(
        radius=settings.effective_marker_size,
        fill_opacity=settings.marker_opacity,
        stroke_color=settings.stroke_color,
        stroke_opacity=settings.stroke_opacity,
        filter_id=None if settings.mode == MODE_CATEGORY else GLOW_FILTER_ID,
    )


def _radius_array(radius, count: int) -> np.ndarray:
    radii = np.asarray(radius, dtype=np.float64)
    if radii.ndim == 0:
        return np.full((count,), float(radii), dtype=np.float64)
    if radii.shape[0] != count:
        raise ValueError(f"Expected {count} per-point radii, got {radii.shape[0]}")
    return radii


def build_markers(
    points: Sequence[Point],
    colors: Sequence[str],
    geometry: MarkerGeometry,
    viewport: Viewport,
) -> List[Marker]:
    count = len(points)
    if len(colors) != count:
        raise ValueError(f"Expected {count} colors, got {len(colors)}")
    if count == 0:
        return []
    radii = _radius_array(geometry.radius, count)
    markers: List[Marker] = []
    for point, color, radius in zip(points, colors, radii):
        cx, cy = viewport.scale(point.x, point.y)
        markers.append(
            Marker(
                cx=cx,
                cy=cy,
                radius=float(radius),
                fill_color=color,
                fill_opacity=geometry.fill_opacity,
                stroke_color=geometry.stroke_color,
                stroke_opacity=geometry.stroke_opacity,
                filter_id=geometry.filter_id,
            )
        )
    return markers


class MarkerArena:
    """Marker slots indexed by point position, reused across frames."""

    def __init__(self) -> None:
        self._slots: List[Optional[Marker]] = []

    def __len__(self) -> int:
        return len(self._slots)

    @property
    def markers(self) -> List[Marker]:
        return [marker for marker in self._slots if marker is not None]

    def reconcile(self, markers: Sequence[Marker]) -> SceneDiff:
        """Resize to ``len(markers)`` and overwrite the shared slots in place."""
        previous = len(self._slots)
        target = len(markers)
        diff = SceneDiff(
            added=list(range(previous, target)),
            updated=list(range(min(previous, target))),
            removed=list(range(target, previous)),
        )
        if target < previous:
            del self._slots[target:]
        else:
            self._slots.extend([None] * (target - previous))
        for index, marker in enumerate(markers):
            self._slots[index] = marker
        return diff

    def clear(self) -> SceneDiff:
        return self.reconcile([])


__all__ = [
    "MarkerArena",
    "build_markers",
    "geometry_for",
]
