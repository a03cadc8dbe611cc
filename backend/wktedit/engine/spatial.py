"""Spatial queries used for selection: hit-testing and rectangle containment.

Purely model-space: callers convert pixels to model coordinates first
(see ``wktedit.engine.viewport``).
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from wktedit.engine.elements import Element, Rect
from wktedit.utils.geometry import as_points, segment_distances_sq, vertex_distances_sq


def is_near(element: Element, x: float, y: float, max_distance: float) -> bool:
    """True if (x, y) lies within ``max_distance`` of a vertex or an edge of ``element``.

    Each path (polygon ring) is an open polyline here: the implicit closing edge
    of a ring is not tested.
    """
    limit_sq = max_distance * max_distance
    for path in element.paths():
        pts = as_points(path)
        if np.any(vertex_distances_sq((x, y), pts) <= limit_sq):
            return True
        if np.any(segment_distances_sq((x, y), pts) <= limit_sq):
            return True
    return False


def hit_test(elements: Sequence[Element], x: float, y: float, max_distance: float) -> int | None:
    """Index of the first element, in document order, near (x, y)."""
    for i, element in enumerate(elements):
        if is_near(element, x, y, max_distance):
            return i
    return None


def elements_within(elements: Sequence[Element], rect: Rect) -> set[int]:
    """Indices of every element lying entirely inside ``rect``."""
    return {i for i, element in enumerate(elements) if element.contained_by(rect)}
