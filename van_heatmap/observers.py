"""Diagnostic hooks invoked at defined points of the heatmap pipeline."""

from __future__ import annotations

import logging
from collections import Counter
from typing import Any, List, Optional, Tuple

from .scene_types import SceneDiff


class HeatmapObserver:
    """No-op base; subclasses override the events they care about."""

    def on_skip(self, reason: str, column_count: int, required: int) -> None:
        pass

    def on_coercion(self, column: str, index: int, value: Any, replacement: Any) -> None:
        pass

    def on_palette_exhausted(self, label: str, fallback_color: str) -> None:
        pass

    def on_render(self, marker_count: int, diff: SceneDiff) -> None:
        pass


class LoggingObserver(HeatmapObserver):
    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self.logger = logger or logging.getLogger("van_heatmap")

    def on_skip(self, reason: str, column_count: int, required: int) -> None:
        self.logger.info(
            "Skipping render: %s (%d of %d columns)", reason, column_count, required
        )

    def on_coercion(self, column: str, index: int, value: Any, replacement: Any) -> None:
        self.logger.debug(
            "Coerced %s[%d]=%r to %r", column, index, value, replacement
        )

    def on_palette_exhausted(self, label: str, fallback_color: str) -> None:
        self.logger.warning(
            "Palette exhausted; label %r uses fallback color %s", label, fallback_color
        )

    def on_render(self, marker_count: int, diff: SceneDiff) -> None:
        self.logger.debug(
            "Rendered %d markers (+%d ~%d -%d)",
            marker_count,
            len(diff.added),
            len(diff.updated),
            len(diff.removed),
        )


class CountingObserver(HeatmapObserver):
    """Keeps event counters, usable as a metrics sink."""

    def __init__(self) -> None:
        self.counts: Counter = Counter()
        self.coercions: List[Tuple[str, int, Any]] = []
        self.exhausted_labels: List[str] = []
        self.last_skip_reason: Optional[str] = None

    def on_skip(self, reason: str, column_count: int, required: int) -> None:
        self.counts["skip"] += 1
        self.last_skip_reason = reason

    def on_coercion(self, column: str, index: int, value: Any, replacement: Any) -> None:
        self.counts["coercion"] += 1
        self.coercions.append((column, index, value))

    def on_palette_exhausted(self, label: str, fallback_color: str) -> None:
        self.counts["palette_exhausted"] += 1
        self.exhausted_labels.append(label)

    def on_render(self, marker_count: int, diff: SceneDiff) -> None:
        self.counts["render"] += 1
        self.counts["markers"] = marker_count


__all__ = [
    "CountingObserver",
    "HeatmapObserver",
    "LoggingObserver",
]
