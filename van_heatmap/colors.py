"""Continuous and categorical color scales for defect markers."""

from __future__ import annotations

import math
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

import matplotlib
import numpy as np

from .constants import CATEGORY_FALLBACK_COLOR, MODE_CATEGORY, UNKNOWN_LABEL
from .density import density_domain
from .models import TypedPoint
from .observers import HeatmapObserver
from .settings import HeatmapSettings
from .visual_utils import to_hex, to_rgb


class ContinuousColorScale:
    """Map a scalar onto a gradient, clamping outside ``domain``.

    The gradient is either two or more explicit color stops, spaced evenly and
    interpolated in RGB, or a named matplotlib colormap such as ``viridis``.
    """

    def __init__(
        self,
        domain: Tuple[float, float],
        colors: Optional[Sequence[str]] = None,
        palette: Optional[str] = None,
    ) -> None:
        self.domain = (float(domain[0]), float(domain[1]))
        self._cmap = None
        self._stops: Optional[np.ndarray] = None
        if palette:
            try:
                self._cmap = matplotlib.colormaps[palette]
            except KeyError:
                raise ValueError(f"Unknown color palette '{palette}'") from None
        else:
            stops = list(colors or [])
            if len(stops) < 2:
                raise ValueError("A continuous color scale needs at least two colors")
            self._stops = np.array([to_rgb(color) for color in stops], dtype=np.float64)

    def position(self, value: float) -> float:
        low, high = self.domain
        span = high - low
        try:
            value = float(value)
        except (TypeError, ValueError):
            return 0.0
        if not math.isfinite(value) or not span > 0.0:
            return 0.0
        return float(np.clip((value - low) / span, 0.0, 1.0))

    def color_at(self, position: float) -> str:
        if self._cmap is not None:
            return to_hex(self._cmap(float(position))[:3])
        stops = self._stops
        anchors = np.linspace(0.0, 1.0, stops.shape[0])
        rgb = [float(np.interp(position, anchors, stops[:, channel])) for channel in range(3)]
        return to_hex(rgb)

    def __call__(self, value: float) -> str:
        return self.color_at(self.position(value))


class CategoricalColorScale:
    """Resolve labels through a manual table, then a fallback palette.

    Palette entries are handed out in first-seen label order and cached, so a
    label keeps its color for the rest of the pass. Once the palette runs out
    every further unmapped label gets ``fallback_color``.
    """

    def __init__(
        self,
        manual_colors: Optional[Mapping[str, str]] = None,
        palette: Sequence[str] = (),
        fallback_color: str = CATEGORY_FALLBACK_COLOR,
        observer: Optional[HeatmapObserver] = None,
    ) -> None:
        self.manual_colors: Dict[str, str] = dict(manual_colors or {})
        self.palette: Tuple[str, ...] = tuple(palette)
        self.fallback_color = fallback_color
        self.observer = observer or HeatmapObserver()
        self.assignments: Dict[str, str] = {}
        self.domain: List[str] = []
        self._next_index = 0
        self.exhausted = False

    def __call__(self, label: str) -> str:
        if label not in self.assignments:
            self.domain.append(label)
            self.assignments[label] = self._resolve(label)
        return self.assignments[label]

    def _resolve(self, label: str) -> str:
        if label in self.manual_colors:
            return self.manual_colors[label]
        if self._next_index < len(self.palette):
            color = self.palette[self._next_index]
            self._next_index += 1
            return color
        self.exhausted = True
        self.observer.on_palette_exhausted(label, self.fallback_color)
        return self.fallback_color


def category_scale_for(
    settings: HeatmapSettings,
    observer: Optional[HeatmapObserver] = None,
) -> CategoricalColorScale:
    manual = {UNKNOWN_LABEL: settings.marker_color}
    manual.update(settings.manual_colors)
    return CategoricalColorScale(
        manual_colors=manual,
        palette=settings.custom_colors,
        observer=observer,
    )


def density_scale_for(settings: HeatmapSettings, densities: Sequence[int]) -> ContinuousColorScale:
    return ContinuousColorScale(
        density_domain(densities),
        colors=(settings.color_min, settings.color_max),
        palette=settings.palette,
    )


def map_colors(
    settings: HeatmapSettings,
    points: Sequence,
    densities: Optional[Sequence[int]] = None,
    observer: Optional[HeatmapObserver] = None,
) -> List[str]:
    """Per-point fill colors for the active mode."""
    if settings.mode == MODE_CATEGORY:
        scale = category_scale_for(settings, observer)
        return [scale(point.label if isinstance(point, TypedPoint) else UNKNOWN_LABEL) for point in points]
    values = list(densities) if densities is not None else [0] * len(points)
    scale = density_scale_for(settings, values)
    return [scale(value) for value in values]


__all__ = [
    "CategoricalColorScale",
    "ContinuousColorScale",
    "category_scale_for",
    "density_scale_for",
    "map_colors",
]
