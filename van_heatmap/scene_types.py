"""Shared dataclasses for canvas geometry and frame reconciliation."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, List, Tuple

from .constants import DEFAULT_CANVAS_HEIGHT, DEFAULT_CANVAS_WIDTH


def _dimension(value: Any, default: int) -> float:
    try:
        size = float(value)
    except (TypeError, ValueError):
        return float(default)
    if not math.isfinite(size) or size <= 0.0:
        return float(default)
    return size


@dataclass(frozen=True)
class Viewport:
    width: float = float(DEFAULT_CANVAS_WIDTH)
    height: float = float(DEFAULT_CANVAS_HEIGHT)

    @staticmethod
    def from_container(width: Any = None, height: Any = None) -> "Viewport":
        """Use the container size, falling back to 500x500 when unset or zero."""
        return Viewport(
            width=_dimension(width, DEFAULT_CANVAS_WIDTH),
            height=_dimension(height, DEFAULT_CANVAS_HEIGHT),
        )

    def scale(self, x: float, y: float) -> Tuple[float, float]:
        return ((x / 100.0) * self.width, (y / 100.0) * self.height)

    @property
    def view_box(self) -> str:
        return f"0 0 {self.width:g} {self.height:g}"


@dataclass
class SceneDiff:
    """Index lists describing how one frame differs from the previous one."""

    added: List[int] = field(default_factory=list)
    updated: List[int] = field(default_factory=list)
    removed: List[int] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not (self.added or self.updated or self.removed)

    def as_dict(self) -> dict:
        return {
            "added": list(self.added),
            "updated": list(self.updated),
            "removed": list(self.removed),
        }


__all__ = [
    "SceneDiff",
    "Viewport",
]
