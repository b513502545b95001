from __future__ import annotations

import matplotlib
import pytest
from matplotlib import colors as mcolors

from van_heatmap.colors import CategoricalColorScale, ContinuousColorScale, map_colors
from van_heatmap.constants import CATEGORY_FALLBACK_COLOR, MODE_CATEGORY, UNKNOWN_LABEL
from van_heatmap.models import Point, TypedPoint
from van_heatmap.observers import CountingObserver
from van_heatmap.settings import HeatmapSettings


def test_gradient_endpoints_and_clamping() -> None:
    scale = ContinuousColorScale((0, 4), colors=["#ffffb2", "#bd0026"])
    assert scale(0) == "#ffffb2"
    assert scale(4) == "#bd0026"
    assert scale(-2) == "#ffffb2"
    assert scale(10) == "#bd0026"


def test_gradient_position_is_monotonic() -> None:
    scale = ContinuousColorScale((0, 10), colors=["#000000", "#ffffff"])
    positions = [scale.position(value) for value in range(-1, 12)]
    assert positions == sorted(positions)
    assert scale.position(5) == pytest.approx(0.5)


def test_three_stop_gradient_hits_middle_stop() -> None:
    scale = ContinuousColorScale((0, 2), colors=["#000000", "#00ff00", "#ffffff"])
    assert scale(1) == "#00ff00"


def test_degenerate_domain_uses_minimum_color() -> None:
    scale = ContinuousColorScale((0, 0), colors=["#ffffb2", "#bd0026"])
    assert scale(0) == "#ffffb2"
    assert scale(3) == "#ffffb2"
    assert scale(float("nan")) == "#ffffb2"


def test_named_palette_uses_matplotlib_colormap() -> None:
    scale = ContinuousColorScale((0, 1), palette="viridis")
    cmap = matplotlib.colormaps["viridis"]
    assert scale(0) == mcolors.to_hex(cmap(0.0))
    assert scale(1) == mcolors.to_hex(cmap(1.0))


def test_invalid_continuous_configuration() -> None:
    with pytest.raises(ValueError):
        ContinuousColorScale((0, 1), colors=["#ffffff"])
    with pytest.raises(ValueError):
        ContinuousColorScale((0, 1), palette="not-a-palette")
    with pytest.raises(ValueError):
        ContinuousColorScale((0, 1), colors=["#ffffff", "chartreuse-ish"])


def test_manual_colors_take_priority() -> None:
    scale = CategoricalColorScale(
        manual_colors={"Scratch": "#FF0000", "Dent": "#0000FF"},
        palette=["#111111"],
    )
    colors = [scale(label) for label in ["Scratch", "Dent", "Scratch"]]
    assert colors == ["#FF0000", "#0000FF", "#FF0000"]
    assert scale.domain == ["Scratch", "Dent"]
    assert not scale.exhausted


def test_palette_is_consumed_in_first_seen_order() -> None:
    scale = CategoricalColorScale(palette=["#111111", "#222222"])
    assert scale("b") == "#111111"
    assert scale("a") == "#222222"
    assert scale("b") == "#111111"
    assert scale.assignments == {"b": "#111111", "a": "#222222"}


def test_palette_exhaustion_falls_back_to_gray() -> None:
    observer = CountingObserver()
    scale = CategoricalColorScale(palette=["#111111"], observer=observer)
    assert [scale(label) for label in ["a", "b", "c", "b"]] == [
        "#111111",
        CATEGORY_FALLBACK_COLOR,
        CATEGORY_FALLBACK_COLOR,
        CATEGORY_FALLBACK_COLOR,
    ]
    assert scale.exhausted
    assert observer.exhausted_labels == ["b", "c"]


def test_map_colors_in_category_mode() -> None:
    settings = HeatmapSettings(
        mode=MODE_CATEGORY,
        manual_colors={"Scratch": "#FF0000", "Dent": "#0000FF"},
    )
    points = [TypedPoint(1, 1, "Scratch"), TypedPoint(2, 2, "Dent"), TypedPoint(3, 3, "Scratch")]
    assert map_colors(settings, points) == ["#FF0000", "#0000FF", "#FF0000"]


def test_unknown_label_uses_marker_color() -> None:
    settings = HeatmapSettings(mode=MODE_CATEGORY, marker_color="#00FF00")
    points = [TypedPoint(1, 1, UNKNOWN_LABEL), TypedPoint(2, 2, "Rust")]
    colors = map_colors(settings, points)
    assert colors[0] == "#00FF00"
    assert colors[1] == settings.custom_colors[0]


def test_map_colors_in_density_mode_with_no_neighbours() -> None:
    settings = HeatmapSettings()
    points = [Point(0, 0), Point(50, 50)]
    assert map_colors(settings, points, [0, 0]) == [settings.color_min, settings.color_min]


def test_named_css_gradient_stops() -> None:
    scale = ContinuousColorScale((0, 1), colors=["navy", "rgb(255, 255, 255)"])
    assert scale(0) == "#000080"
    assert scale(1) == "#ffffff"
