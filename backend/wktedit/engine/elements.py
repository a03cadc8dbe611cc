"""Geometry elements: the closed set of shapes a WKT document holds.

Point, LineString and Polygon are plain dataclasses sharing one protocol:
``add``, ``can_add``, ``end_sub_element``, ``paths``, ``to_wkt``,
``bounding_rectangle`` and ``contained_by``. Spatial code only looks at
``paths()``, the coordinate sequences an element is drawn from.

Equality and hashing are structural. Elements are mutable, so never keep one
as a dict key across edits; the session refers to elements by index instead.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, NamedTuple, Union

import numpy as np

from wktedit.utils.geometry import as_points, bbox, points_in_box

# Single place to widen coordinates to float.
Coordinate = int
XY = tuple[Coordinate, Coordinate]


class Rect(NamedTuple):
    """Axis-aligned rectangle with inclusive bounds."""

    xmin: Coordinate
    ymin: Coordinate
    xmax: Coordinate
    ymax: Coordinate

    @classmethod
    def from_corners(cls, x1: Coordinate, y1: Coordinate, x2: Coordinate, y2: Coordinate) -> Rect:
        """Normalize two opposite corners given in any order (e.g. a drag to the upper left)."""
        return cls(min(x1, x2), min(y1, y2), max(x1, x2), max(y1, y2))

    @property
    def width(self) -> Coordinate:
        return self.xmax - self.xmin

    @property
    def height(self) -> Coordinate:
        return self.ymax - self.ymin

    def contains(self, x: float, y: float) -> bool:
        return self.xmin <= x <= self.xmax and self.ymin <= y <= self.ymax


def _format_xy(p: XY) -> str:
    return f"{p[0]} {p[1]}"


def _format_seq(points: list[XY]) -> str:
    return ", ".join(_format_xy(p) for p in points)


class _ElementMixin:
    """Spatial behaviour shared by every variant, expressed over ``paths()``."""

    def paths(self) -> list[list[XY]]:
        raise NotImplementedError

    def vertices(self) -> list[XY]:
        return [p for path in self.paths() for p in path]

    def bounding_rectangle(self) -> Rect | None:
        box = bbox(self.vertices())
        if box is None:
            return None
        return Rect(*box)

    def contained_by(self, rect: Rect) -> bool:
        pts = as_points(self.vertices())
        return bool(np.all(points_in_box(pts, tuple(rect))))

    def __str__(self) -> str:
        return self.to_wkt()  # type: ignore[attr-defined]


@dataclass
class Point(_ElementMixin):
    """A single coordinate. Adding to a Point moves it."""

    kind: ClassVar[str] = "POINT"

    coordinate: XY | None = None

    def add(self, x: Coordinate, y: Coordinate) -> None:
        self.coordinate = (x, y)

    def can_add(self) -> bool:
        return True

    def end_sub_element(self) -> None:
        pass

    def paths(self) -> list[list[XY]]:
        if self.coordinate is None:
            return []
        return [[self.coordinate]]

    def to_wkt(self) -> str:
        if self.coordinate is None:
            return "POINT EMPTY"
        return f"POINT ({_format_xy(self.coordinate)})"

    def __hash__(self) -> int:
        return hash((self.kind, self.coordinate))


@dataclass
class LineString(_ElementMixin):
    """Ordered, always-open sequence of points."""

    kind: ClassVar[str] = "LINESTRING"

    points: list[XY] = field(default_factory=list)

    def add(self, x: Coordinate, y: Coordinate) -> None:
        self.points.append((x, y))

    def can_add(self) -> bool:
        return True

    def end_sub_element(self) -> None:
        pass

    def paths(self) -> list[list[XY]]:
        if not self.points:
            return []
        return [self.points]

    def to_wkt(self) -> str:
        return f"LINESTRING ({_format_seq(self.points)})"

    def __hash__(self) -> int:
        return hash((self.kind, tuple(self.points)))


@dataclass
class Polygon(_ElementMixin):
    """Exterior ring followed by holes.

    Rings are stored open (no repeated closing point); ``to_wkt`` closes them.
    Points always go to the last ring, which ``end_sub_element`` replaces with a
    fresh empty one.
    """

    kind: ClassVar[str] = "POLYGON"

    rings: list[list[XY]] = field(default_factory=list)

    def add(self, x: Coordinate, y: Coordinate) -> None:
        if not self.rings:
            self.rings.append([])
        self.rings[-1].append((x, y))

    def can_add(self) -> bool:
        return True

    def end_sub_element(self) -> None:
        self.rings.append([])

    def paths(self) -> list[list[XY]]:
        return [ring for ring in self.rings if ring]

    def to_wkt(self) -> str:
        return f"POLYGON ({', '.join(self._ring_wkt(ring) for ring in self.rings)})"

    @staticmethod
    def _ring_wkt(ring: list[XY]) -> str:
        if not ring:
            return "()"
        return f"({_format_seq(ring + [ring[0]])})"

    def __hash__(self) -> int:
        return hash((self.kind, tuple(tuple(ring) for ring in self.rings)))


Element = Union[Point, LineString, Polygon]

ELEMENT_TYPES: dict[str, type[Element]] = {
    Point.kind: Point,
    LineString.kind: LineString,
    Polygon.kind: Polygon,
}


def new_element(kind: str) -> Element:
    """Create an empty element for a WKT type keyword (``POINT``, ``LINESTRING``, ``POLYGON``)."""
    try:
        return ELEMENT_TYPES[kind]()
    except KeyError:
        raise ValueError(f"Unsupported geometry type: {kind}") from None
