"""Local density estimation by neighbour counting."""

from __future__ import annotations

import math
from typing import Sequence, Tuple

import numpy as np
from scipy.spatial import distance

from .models import Point


def points_to_array(points: Sequence[Point]) -> np.ndarray:
    if len(points) == 0:
        return np.empty((0, 2), dtype=np.float64)
    return np.array([(p.x, p.y) for p in points], dtype=np.float64)


def compute_densities(points: Sequence[Point], radius: float) -> np.ndarray:
    """Count, for every point, the other points closer than ``radius``.

    Exhaustive pairwise comparison with a strict ``<`` on Euclidean distance.
    A point never counts itself, even when duplicates share its position.
    """
    count = len(points)
    try:
        radius = float(radius)
    except (TypeError, ValueError):
        radius = 0.0
    if count <= 1 or not math.isfinite(radius) or radius <= 0.0:
        return np.zeros(count, dtype=np.int64)

    coords = points_to_array(points)
    within = distance.cdist(coords, coords, metric="euclidean") < radius
    np.fill_diagonal(within, False)
    return within.sum(axis=1).astype(np.int64)


def density_domain(densities: Sequence[int]) -> Tuple[float, float]:
    """Color domain ``(0, max)``; the max falls back to 1 when nothing is dense."""
    values = np.asarray(densities)
    peak = float(values.max()) if values.size else 0.0
    return (0.0, peak if peak > 0.0 else 1.0)


__all__ = [
    "compute_densities",
    "density_domain",
    "points_to_array",
]
