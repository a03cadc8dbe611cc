"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray


def as_points(coords: Sequence[Sequence[float]]) -> NDArray[np.float64]:
    """Nx2 float array from a coordinate sequence (empty input gives shape (0, 2))."""
    if len(coords) == 0:
        return np.empty((0, 2))
    return np.asarray(coords, dtype=np.float64).reshape(-1, 2)


def bbox(coords: Sequence[Sequence[float]]) -> tuple[float, float, float, float] | None:
    """Compute (xmin, ymin, xmax, ymax) over a coordinate sequence, None if empty.

    Values come back as plain Python numbers of the input's type, so integer
    coordinates stay integers.
    """
    if len(coords) == 0:
        return None
    pts = np.asarray(coords).reshape(-1, 2)
    xmin, ymin = pts.min(axis=0).tolist()
    xmax, ymax = pts.max(axis=0).tolist()
    return (xmin, ymin, xmax, ymax)


def points_in_box(
    points: NDArray[np.float64],
    box: tuple[float, float, float, float],
) -> NDArray[np.bool_]:
    """Inclusive per-point containment test against (xmin, ymin, xmax, ymax)."""
    xmin, ymin, xmax, ymax = box
    x = points[:, 0]
    y = points[:, 1]
    return (x >= xmin) & (x <= xmax) & (y >= ymin) & (y <= ymax)


def vertex_distances_sq(point: tuple[float, float], points: NDArray[np.float64]) -> NDArray[np.float64]:
    """Squared distance from ``point`` to every vertex."""
    d = points - np.asarray(point, dtype=np.float64)
    return np.sum(d**2, axis=1)


def segment_distances_sq(point: tuple[float, float], polyline: NDArray[np.float64]) -> NDArray[np.float64]:
    """Squared distance from ``point`` to each segment between consecutive vertices.

    Point-to-segment, not point-to-line: the projection is clamped to the segment.
    Zero-length segments degrade to the distance to their start vertex.
    """
    if len(polyline) < 2:
        return np.empty(0)
    start = polyline[:-1]
    seg = polyline[1:] - start
    seg_len_sq = np.sum(seg**2, axis=1)
    to_point = np.asarray(point, dtype=np.float64) - start
    dot = np.sum(to_point * seg, axis=1)
    safe_len = np.where(seg_len_sq > 0.0, seg_len_sq, 1.0)
    t = np.where(seg_len_sq > 0.0, np.clip(dot / safe_len, 0.0, 1.0), 0.0)
    projection = start + seg * t[:, None]
    return np.sum((np.asarray(point, dtype=np.float64) - projection) ** 2, axis=1)
