from __future__ import annotations

import pytest

from van_heatmap.constants import GLOW_FILTER_ID, MODE_CATEGORY
from van_heatmap.models import MarkerGeometry, Point
from van_heatmap.scene import MarkerArena, build_markers, geometry_for
from van_heatmap.scene_types import Viewport
from van_heatmap.settings import HeatmapSettings

GEOMETRY = MarkerGeometry(radius=6, fill_opacity=0.75, stroke_color="#ff6b00", stroke_opacity=0.15)


def _markers(count: int, viewport: Viewport = Viewport()):
    points = [Point(float(i), float(i)) for i in range(count)]
    return build_markers(points, ["#000000"] * count, GEOMETRY, viewport)


def test_positions_scale_to_viewport() -> None:
    viewport = Viewport(200, 400)
    points = [Point(50, 25), Point(12.5, 100)]
    markers = build_markers(points, ["#ff0000", "#00ff00"], GEOMETRY, viewport)
    assert [m.cx for m in markers] == pytest.approx([100.0, 25.0])
    assert [m.cy for m in markers] == pytest.approx([100.0, 400.0])
    for point, marker in zip(points, markers):
        assert marker.cx / viewport.width * 100 == pytest.approx(point.x)
        assert marker.cy / viewport.height * 100 == pytest.approx(point.y)
    assert markers[1].fill_color == "#00ff00"
    assert markers[0].radius == 6.0
    assert markers[0].stroke_opacity == 0.15


def test_per_point_radius() -> None:
    geometry = MarkerGeometry(radius=[2, 4], fill_opacity=1.0, stroke_color="#000", stroke_opacity=0.0)
    markers = build_markers([Point(0, 0), Point(1, 1)], ["#fff", "#fff"], geometry, Viewport())
    assert [m.radius for m in markers] == [2.0, 4.0]


def test_mismatched_inputs_raise() -> None:
    with pytest.raises(ValueError):
        build_markers([Point(0, 0)], [], GEOMETRY, Viewport())
    bad = MarkerGeometry(radius=[1, 2, 3], fill_opacity=1.0, stroke_color="#000", stroke_opacity=0.0)
    with pytest.raises(ValueError):
        build_markers([Point(0, 0)], ["#fff"], bad, Viewport())


def test_empty_input_builds_nothing() -> None:
    assert build_markers([], [], GEOMETRY, Viewport()) == []


def test_arena_grow_update_shrink() -> None:
    arena = MarkerArena()
    diff = arena.reconcile(_markers(3))
    assert (diff.added, diff.updated, diff.removed) == ([0, 1, 2], [], [])

    diff = arena.reconcile(_markers(5))
    assert (diff.added, diff.updated, diff.removed) == ([3, 4], [0, 1, 2], [])
    assert len(arena) == 5

    diff = arena.reconcile(_markers(5, Viewport(100, 100)))
    assert (diff.added, diff.updated, diff.removed) == ([], [0, 1, 2, 3, 4], [])
    assert arena.markers[4].cx == pytest.approx(4.0)

    diff = arena.reconcile(_markers(2))
    assert (diff.added, diff.updated, diff.removed) == ([], [0, 1], [2, 3, 4])
    assert len(arena) == 2


def test_arena_clear() -> None:
    arena = MarkerArena()
    arena.reconcile(_markers(2))
    diff = arena.clear()
    assert diff.removed == [0, 1]
    assert arena.markers == []
    assert arena.clear().is_empty


def test_viewport_falls_back_to_default_size() -> None:
    assert Viewport.from_container(None, 0) == Viewport(500, 500)
    assert Viewport.from_container("bad", -10) == Viewport(500, 500)
    assert Viewport.from_container(800, 600) == Viewport(800, 600)
    assert Viewport(800, 600).view_box == "0 0 800 600"


def test_geometry_follows_mode() -> None:
    density = geometry_for(HeatmapSettings())
    assert density.radius == 6.0
    assert density.filter_id == GLOW_FILTER_ID
    category = geometry_for(HeatmapSettings(mode=MODE_CATEGORY))
    assert category.radius == 10.0
    assert category.filter_id is None
