"""WKT parser: facade over WktReader.

Converts a WKT text stream → list of geometry elements, in file order.

Unknown type keywords are skipped with a warning. A malformed coordinate raises
WktParseError and aborts the whole read.
"""

from __future__ import annotations

import io
import logging
import re
from collections.abc import Iterator
from typing import Callable, TextIO

from wktedit.engine.elements import XY, Element, LineString, Point, Polygon, new_element
from wktedit.wkt.errors import WktParseError
from wktedit.wkt.reader import WktReader

logger = logging.getLogger(__name__)

_INT_RE = re.compile(r"[+-]?\d+")


def parse_point(content: str) -> XY:
    """Parse ``"x y"``: exactly two whitespace-separated integers."""
    tokens = content.split()
    if len(tokens) != 2 or not all(_INT_RE.fullmatch(t) for t in tokens):
        raise WktParseError("Bad coordinate values", content)
    return (int(tokens[0]), int(tokens[1]))


def split_top_level(content: str, sep: str = ",") -> list[str]:
    """Split on ``sep`` wherever it is not enclosed in parentheses."""
    parts: list[str] = []
    current: list[str] = []
    depth = 0
    for c in content:
        if c == "(":
            depth += 1
        elif c == ")":
            depth -= 1
        if c == sep and depth == 0:
            parts.append("".join(current))
            current = []
        else:
            current.append(c)
    parts.append("".join(current))
    return parts


def _point_list(content: str) -> list[XY]:
    if not content.strip():
        return []
    return [parse_point(part) for part in split_top_level(content)]


def _strip_ring(ring: str) -> str:
    start = ring.find("(")
    end = ring.rfind(")")
    if start < 0 or end < start:
        raise WktParseError("Polygon ring is not enclosed in parentheses", ring)
    return ring[start + 1:end]


def _parse_point_geom(content: str) -> Point:
    return Point(parse_point(content))


def _parse_linestring(content: str) -> LineString:
    line = LineString()
    for x, y in _point_list(content):
        line.add(x, y)
    return line


def _open_ring(points: list[XY]) -> list[XY]:
    """Drop the repeated closing vertex written on output."""
    if len(points) > 1 and points[-1] == points[0]:
        return points[:-1]
    return points


def _parse_polygon(content: str) -> Polygon:
    if not content.strip():
        return Polygon()
    rings = [_open_ring(_point_list(_strip_ring(ring))) for ring in split_top_level(content)]
    return Polygon(rings)


_DISPATCH: dict[str, Callable[[str], Element]] = {
    "POINT": _parse_point_geom,
    "LINESTRING": _parse_linestring,
    "POLYGON": _parse_polygon,
}


class WktParser:
    """Pulls (keyword, content) pairs from a reader and builds elements."""

    def __init__(self, reader: WktReader) -> None:
        self._reader = reader
        self.skipped: list[str] = []

    def __iter__(self) -> Iterator[Element]:
        while not self._reader.eof:
            element = self.read_element()
            if element is not None:
                yield element

    def read_element(self) -> Element | None:
        """Read the next element. None for an unknown keyword or end of input."""
        keyword = self._reader.next_type()
        if keyword is None:
            return None

        build = _DISPATCH.get(keyword)
        if build is None:
            logger.warning("Skipping unknown geometry type %r", keyword)
            self.skipped.append(keyword)
            return None

        if self._reader.next_is_empty():
            return new_element(keyword)

        content = self._reader.next_balanced_content()
        if not content and self._reader.eof:
            logger.warning("%s has no coordinates before end of input, ignoring", keyword)
            return None

        element = build(content)
        logger.debug("Parsed %s", element.kind)
        return element


def parse_wkt(stream: TextIO) -> list[Element]:
    """Read every element from a WKT text stream."""
    elements = list(WktParser(WktReader(stream)))
    logger.info("Parsed WKT: %d elements", len(elements))
    return elements


def loads_wkt(text: str) -> list[Element]:
    """Parse WKT elements from a string."""
    return parse_wkt(io.StringIO(text))
