"""Rendering surfaces that consume reconciled marker frames."""

from __future__ import annotations

from html import escape
from pathlib import Path
from typing import Dict, Mapping, Optional, Sequence

from .constants import DENSITY_GLOW_SIZE, GLOW_FILTER_ID
from .models import Marker
from .scene_types import SceneDiff, Viewport

SVG_TEMPLATE = '''<svg xmlns="http://www.w3.org/2000/svg" width="100%" height="100%" viewBox="{view_box}" style="display: block; background: none">
  <defs>
    <filter id="{filter_id}">
      <feGaussianBlur stdDeviation="{glow_size:g}" result="blur"/>
      <feMerge>
        <feMergeNode in="blur"/>
        <feMergeNode in="SourceGraphic"/>
      </feMerge>
    </filter>
  </defs>
{background}{circles}</svg>
'''

CIRCLE_TEMPLATE = (
    '  <circle cx="{cx:.6g}" cy="{cy:.6g}" r="{r:g}" fill="{fill}" fill-opacity="{fill_opacity:g}"'
    ' stroke="{stroke}" stroke-opacity="{stroke_opacity:g}"{filter}/>\n'
)

IMAGE_TEMPLATE = (
    '  <image href="{href}" x="0" y="0" width="{width:g}" height="{height:g}"'
    ' preserveAspectRatio="xMidYMid meet"/>\n'
)


class RenderSurface:
    """Drawing surface driven by index-keyed add/update/remove calls."""

    def set_viewport(self, viewport: Viewport) -> None:
        raise NotImplementedError

    def add_marker(self, index: int, marker: Marker) -> None:
        raise NotImplementedError

    def update_marker(self, index: int, marker: Marker) -> None:
        raise NotImplementedError

    def remove_marker(self, index: int) -> None:
        raise NotImplementedError

    def apply(self, diff: SceneDiff, markers: Sequence[Marker]) -> None:
        # Remove from the tail first so indices stay contiguous
        for index in sorted(diff.removed, reverse=True):
            self.remove_marker(index)
        for index in diff.updated:
            self.update_marker(index, markers[index])
        for index in diff.added:
            self.add_marker(index, markers[index])


class SvgSurface(RenderSurface):
    """Keeps circle elements by index and serialises them as an SVG document."""

    def __init__(
        self,
        *,
        glow_size: float = DENSITY_GLOW_SIZE,
        background_images: Optional[Mapping[str, str]] = None,
        van_side: Optional[str] = None,
    ) -> None:
        self.viewport = Viewport()
        self.glow_size = float(glow_size)
        self.background_images: Dict[str, str] = dict(background_images or {})
        self.van_side = van_side
        self._elements: Dict[int, Marker] = {}

    def __len__(self) -> int:
        return len(self._elements)

    @property
    def markers(self) -> list:
        return [self._elements[index] for index in sorted(self._elements)]

    def set_viewport(self, viewport: Viewport) -> None:
        self.viewport = viewport

    def set_glow_size(self, glow_size: float) -> None:
        self.glow_size = float(glow_size)

    def set_van_side(self, van_side: Optional[str]) -> None:
        self.van_side = van_side

    def add_marker(self, index: int, marker: Marker) -> None:
        if index in self._elements:
            raise KeyError(f"Marker {index} already present")
        self._elements[index] = marker

    def update_marker(self, index: int, marker: Marker) -> None:
        if index not in self._elements:
            raise KeyError(f"Marker {index} not present")
        self._elements[index] = marker

    def remove_marker(self, index: int) -> None:
        self._elements.pop(index, None)

    def _background_markup(self) -> str:
        href = self.background_images.get(self.van_side or "")
        if not href:
            return ""
        return IMAGE_TEMPLATE.format(
            href=escape(href, quote=True),
            width=self.viewport.width,
            height=self.viewport.height,
        )

    @staticmethod
    def _circle_markup(marker: Marker) -> str:
        filter_attr = f' filter="url(#{marker.filter_id})"' if marker.filter_id else ""
        return CIRCLE_TEMPLATE.format(
            cx=marker.cx,
            cy=marker.cy,
            r=marker.radius,
            fill=escape(marker.fill_color, quote=True),
            fill_opacity=marker.fill_opacity,
            stroke=escape(marker.stroke_color, quote=True),
            stroke_opacity=marker.stroke_opacity,
            filter=filter_attr,
        )

    def to_svg(self) -> str:
        circles = "".join(self._circle_markup(marker) for marker in self.markers)
        return SVG_TEMPLATE.format(
            view_box=self.viewport.view_box,
            filter_id=GLOW_FILTER_ID,
            glow_size=self.glow_size,
            background=self._background_markup(),
            circles=circles,
        )

    def save(self, path: Path) -> Path:
        destination = Path(path)
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_text(self.to_svg(), encoding="utf-8")
        return destination


__all__ = [
    "RenderSurface",
    "SvgSurface",
]
