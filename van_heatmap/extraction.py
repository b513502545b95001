"""Convert host value columns into validated defect points."""

from __future__ import annotations

from typing import Any, List, Optional, Sequence, Union

import numpy as np
import pandas as pd

from .constants import MODE_CATEGORY, UNKNOWN_LABEL
from .models import Point, TypedPoint
from .observers import HeatmapObserver

_COLUMN_NAMES = ("x", "y", "label")


def _column_values(columns: Sequence[Sequence[Any]], index: int, length: int) -> List[Any]:
    values = list(columns[index]) if index < len(columns) else []
    if len(values) < length:
        values.extend([None] * (length - len(values)))
    return values[:length]


def coerce_coordinates(
    values: Sequence[Any],
    *,
    column: str = "x",
    observer: Optional[HeatmapObserver] = None,
) -> np.ndarray:
    """Numeric coercion; non-numeric, non-finite or out-of-range values become 0."""
    raw = pd.Series(list(values), dtype=object)
    numeric = pd.to_numeric(raw, errors="coerce").astype(float).to_numpy()
    valid = np.isfinite(numeric) & (numeric >= 0.0) & (numeric <= 100.0)
    if observer is not None:
        for index in np.flatnonzero(~valid):
            observer.on_coercion(column, int(index), raw.iloc[index], 0.0)
    return np.where(valid, numeric, 0.0)


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def coerce_labels(
    values: Sequence[Any],
    *,
    observer: Optional[HeatmapObserver] = None,
) -> List[str]:
    labels: List[str] = []
    for index, value in enumerate(values):
        if _is_missing(value):
            if observer is not None:
                observer.on_coercion(_COLUMN_NAMES[2], index, value, UNKNOWN_LABEL)
            labels.append(UNKNOWN_LABEL)
        else:
            labels.append(str(value).strip())
    return labels


def extract_points(
    columns: Optional[Sequence[Sequence[Any]]],
    mode: str,
    observer: Optional[HeatmapObserver] = None,
) -> Optional[Union[List[Point], List[TypedPoint]]]:
    """Build one point per row, or ``None`` when too few columns are present.

    ``columns`` holds parallel x, y and (category mode) label columns. The row
    count follows the x column; short trailing columns read as missing.
    """
    observer = observer or HeatmapObserver()
    required = 3 if mode == MODE_CATEGORY else 2
    column_count = len(columns) if columns is not None else 0
    if column_count < required:
        observer.on_skip("insufficient columns", column_count, required)
        return None

    length = len(columns[0])
    xs = coerce_coordinates(_column_values(columns, 0, length), column="x", observer=observer)
    ys = coerce_coordinates(_column_values(columns, 1, length), column="y", observer=observer)

    if mode != MODE_CATEGORY:
        return [Point(float(x), float(y)) for x, y in zip(xs, ys)]

    labels = coerce_labels(_column_values(columns, 2, length), observer=observer)
    return [
        TypedPoint(float(x), float(y), label)
        for x, y, label in zip(xs, ys, labels)
    ]


__all__ = [
    "coerce_coordinates",
    "coerce_labels",
    "extract_points",
]
