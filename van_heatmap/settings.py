"""Explicit configuration for the heatmap pipeline."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Mapping, Optional, Tuple

from .constants import (
    CATEGORY_MARKER_COLOR,
    CATEGORY_MARKER_SIZE,
    DEFAULT_CATEGORICAL_PALETTE,
    DEFAULT_VAN_SIDE,
    DENSITY_COLOR_MAX,
    DENSITY_COLOR_MIN,
    DENSITY_GLOW_SIZE,
    DENSITY_MARKER_OPACITY,
    DENSITY_MARKER_SIZE,
    DENSITY_RADIUS,
    DENSITY_STROKE_COLOR,
    DENSITY_STROKE_OPACITY,
    MODE_CATEGORY,
    MODE_DENSITY,
    MODES,
    VAN_SIDES,
)
from .visual_utils import is_color

logger = logging.getLogger(__name__)

# Host option names mapped onto dataclass fields
_OPTION_ALIASES = {
    "mode": "mode",
    "markerColor": "marker_color",
    "markerSize": "marker_size",
    "vanSide": "van_side",
    "customColors": "custom_colors",
    "manualColors": "manual_colors",
    "densityRadius": "density_radius",
    "markerOpacity": "marker_opacity",
    "glowSize": "glow_size",
    "colorMin": "color_min",
    "colorMax": "color_max",
    "palette": "palette",
    "strokeColor": "stroke_color",
    "strokeOpacity": "stroke_opacity",
}


def _positive_number(value: Any) -> Optional[float]:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number) or number <= 0.0:
        return None
    return number


def _unit_interval(value: Any) -> Optional[float]:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return max(0.0, min(1.0, number))


@dataclass(frozen=True)
class HeatmapSettings:
    mode: str = MODE_DENSITY
    marker_color: str = CATEGORY_MARKER_COLOR
    marker_size: Optional[float] = None
    van_side: str = DEFAULT_VAN_SIDE
    custom_colors: Tuple[str, ...] = DEFAULT_CATEGORICAL_PALETTE
    manual_colors: Dict[str, str] = field(default_factory=dict)
    density_radius: float = DENSITY_RADIUS
    marker_opacity: float = DENSITY_MARKER_OPACITY
    glow_size: float = DENSITY_GLOW_SIZE
    color_min: str = DENSITY_COLOR_MIN
    color_max: str = DENSITY_COLOR_MAX
    palette: Optional[str] = None
    stroke_color: str = DENSITY_STROKE_COLOR
    stroke_opacity: float = DENSITY_STROKE_OPACITY

    @property
    def effective_marker_size(self) -> float:
        if self.marker_size is not None:
            return float(self.marker_size)
        if self.mode == MODE_CATEGORY:
            return CATEGORY_MARKER_SIZE
        return DENSITY_MARKER_SIZE

    @property
    def required_columns(self) -> int:
        return 3 if self.mode == MODE_CATEGORY else 2

    def merged(self, **overrides: Any) -> "HeatmapSettings":
        return replace(self, **overrides)

    @classmethod
    def from_mapping(cls, options: Optional[Mapping[str, Any]]) -> "HeatmapSettings":
        """Build settings from host-style options, keeping defaults for invalid values."""
        settings = cls()
        if not options:
            return settings

        values: Dict[str, Any] = {}
        for key, raw in options.items():
            name = _OPTION_ALIASES.get(key, key)
            if raw is None or name not in cls.__dataclass_fields__:
                continue
            values[name] = raw

        updates: Dict[str, Any] = {}
        mode = values.get("mode")
        if mode is not None:
            text = str(mode).strip().lower()
            if text in MODES:
                updates["mode"] = text
            else:
                logger.warning("Ignoring unknown heatmap mode %r", mode)

        if "marker_color" in values:
            if is_color(values["marker_color"]):
                updates["marker_color"] = values["marker_color"]
            else:
                logger.warning("Ignoring invalid marker color %r", values["marker_color"])

        if "marker_size" in values:
            size = _positive_number(values["marker_size"])
            if size is not None:
                updates["marker_size"] = size
            else:
                logger.warning("Ignoring invalid marker size %r", values["marker_size"])

        if "van_side" in values:
            side = str(values["van_side"]).strip().lower()
            if side in VAN_SIDES:
                updates["van_side"] = side
            else:
                logger.warning("Ignoring unknown van side %r", values["van_side"])

        custom = values.get("custom_colors")
        if isinstance(custom, (list, tuple)):
            colors = tuple(str(color) for color in custom if color is not None)
            if colors:
                updates["custom_colors"] = colors
        elif custom is not None:
            logger.warning("Ignoring non-list custom colors %r", custom)

        manual = values.get("manual_colors")
        if isinstance(manual, Mapping):
            updates["manual_colors"] = {str(label): str(color) for label, color in manual.items()}
        elif manual is not None:
            logger.warning("Ignoring non-mapping manual colors %r", manual)

        if "density_radius" in values:
            try:
                updates["density_radius"] = float(values["density_radius"])
            except (TypeError, ValueError):
                logger.warning("Ignoring invalid density radius %r", values["density_radius"])

        if "glow_size" in values:
            glow = _positive_number(values["glow_size"])
            if glow is not None:
                updates["glow_size"] = glow

        for name in ("marker_opacity", "stroke_opacity"):
            if name in values:
                opacity = _unit_interval(values[name])
                if opacity is not None:
                    updates[name] = opacity

        for name in ("color_min", "color_max", "stroke_color"):
            if name in values:
                if is_color(values[name]):
                    updates[name] = values[name].strip()
                else:
                    logger.warning("Ignoring invalid %s %r", name.replace("_", " "), values[name])

        if "palette" in values:
            updates["palette"] = str(values["palette"])

        return replace(settings, **updates)


__all__ = ["HeatmapSettings"]
