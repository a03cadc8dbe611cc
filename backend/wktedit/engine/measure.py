"""Length/area of elements via shapely, for document listings."""

from __future__ import annotations

import shapely.geometry as sg
from shapely.geometry.base import BaseGeometry

from wktedit.engine.elements import Element, LineString, Point, Polygon

# A ring needs three distinct vertices to enclose an area.
_MIN_RING_POINTS = 3


def to_shapely(element: Element) -> BaseGeometry | None:
    """Shapely geometry for ``element``, or None when it is too degenerate to build."""
    if isinstance(element, Point):
        if element.coordinate is None:
            return None
        return sg.Point(element.coordinate)
    if isinstance(element, LineString):
        if len(element.points) < 2:
            return None
        return sg.LineString(element.points)
    if isinstance(element, Polygon):
        if not element.rings or len(element.rings[0]) < _MIN_RING_POINTS:
            return None
        holes = [ring for ring in element.rings[1:] if len(ring) >= _MIN_RING_POINTS]
        return sg.Polygon(element.rings[0], holes)
    raise TypeError(f"Not a geometry element: {element!r}")


def measure(element: Element) -> tuple[float, float]:
    """(length, area). Polygon length is the perimeter of all rings, closed."""
    geom = to_shapely(element)
    if geom is None or geom.is_empty:
        return (0.0, 0.0)
    return (float(geom.length), float(geom.area))
