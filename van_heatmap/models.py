"""Datamodels shared by the heatmap pipeline stages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Union

from .constants import UNKNOWN_LABEL


@dataclass(frozen=True)
class Point:
    """Defect position as a percentage of image width/height (0-100)."""

    x: float
    y: float


@dataclass(frozen=True)
class TypedPoint(Point):
    """Defect position carrying a category label."""

    label: str = UNKNOWN_LABEL


@dataclass(frozen=True)
class MarkerGeometry:
    """Per-frame marker styling; ``radius`` may be given per point."""

    radius: Union[float, Sequence[float]]
    fill_opacity: float
    stroke_color: str
    stroke_opacity: float
    filter_id: Optional[str] = None


@dataclass(frozen=True)
class Marker:
    """Render-ready circle in canvas pixel space."""

    cx: float
    cy: float
    radius: float
    fill_color: str
    fill_opacity: float
    stroke_color: str
    stroke_opacity: float
    filter_id: Optional[str] = None

    def as_dict(self) -> dict:
        return {
            "cx": self.cx,
            "cy": self.cy,
            "radius": self.radius,
            "fill_color": self.fill_color,
            "fill_opacity": self.fill_opacity,
            "stroke_color": self.stroke_color,
            "stroke_opacity": self.stroke_opacity,
            "filter_id": self.filter_id,
        }


__all__ = [
    "Marker",
    "MarkerGeometry",
    "Point",
    "TypedPoint",
]
