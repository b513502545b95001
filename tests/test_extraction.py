from __future__ import annotations

import math

from van_heatmap.constants import MODE_CATEGORY, MODE_DENSITY, UNKNOWN_LABEL
from van_heatmap.extraction import coerce_coordinates, extract_points
from van_heatmap.models import Point, TypedPoint
from van_heatmap.observers import CountingObserver


def test_density_mode_needs_two_columns() -> None:
    observer = CountingObserver()
    assert extract_points([[10, 20]], MODE_DENSITY, observer) is None
    assert observer.counts["skip"] == 1
    assert observer.last_skip_reason == "insufficient columns"


def test_category_mode_needs_three_columns() -> None:
    assert extract_points([[10], [20]], MODE_CATEGORY) is None
    assert extract_points(None, MODE_CATEGORY) is None


def test_no_columns_is_a_skip_not_an_error() -> None:
    assert extract_points([], MODE_DENSITY) is None


def test_empty_columns_give_no_points() -> None:
    assert extract_points([[], []], MODE_DENSITY) == []


def test_numeric_strings_are_parsed() -> None:
    points = extract_points([["10", 20.5], ["11.25", "0"]], MODE_DENSITY)
    assert points == [Point(10.0, 11.25), Point(20.5, 0.0)]


def test_invalid_coordinates_become_zero() -> None:
    observer = CountingObserver()
    xs = ["abc", None, float("nan"), 150, -1, float("inf"), 42]
    ys = [1, 2, 3, 4, 5, 6, 7]
    points = extract_points([xs, ys], MODE_DENSITY, observer)
    assert [p.x for p in points] == [0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 42.0]
    assert [p.y for p in points] == [1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0]
    assert not any(math.isnan(p.x) for p in points)
    assert observer.counts["coercion"] == 6
    assert observer.coercions[0] == ("x", 0, "abc")


def test_bounds_are_inclusive() -> None:
    values = coerce_coordinates([0, 100, 100.0001])
    assert list(values) == [0.0, 100.0, 0.0]


def test_labels_default_to_unknown() -> None:
    observer = CountingObserver()
    points = extract_points(
        [[1, 2, 3, 4], [1, 2, 3, 4], ["Scratch", None, "  ", 7]],
        MODE_CATEGORY,
        observer,
    )
    assert [p.label for p in points] == ["Scratch", UNKNOWN_LABEL, UNKNOWN_LABEL, "7"]
    assert all(isinstance(p, TypedPoint) for p in points)
    assert observer.counts["coercion"] == 2


def test_short_columns_read_as_missing() -> None:
    points = extract_points([[10, 20, 30], [5]], MODE_DENSITY)
    assert points == [Point(10.0, 5.0), Point(20.0, 0.0), Point(30.0, 0.0)]


def test_input_columns_are_not_mutated() -> None:
    xs = ["abc", 10]
    ys = [None, 20]
    labels = [None, "Dent"]
    extract_points([xs, ys, labels], MODE_CATEGORY)
    assert xs == ["abc", 10]
    assert ys == [None, 20]
    assert labels == [None, "Dent"]
