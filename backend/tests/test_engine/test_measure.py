"""Tests for shapely-backed element measurements."""

import pytest

from wktedit.engine.elements import LineString, Point, Polygon
from wktedit.engine.measure import measure, to_shapely


def test_linestring_length():
    assert measure(LineString([(0, 0), (3, 4)])) == (5.0, 0.0)


def test_polygon_area_excludes_hole(polygon_hole_wkt):
    from wktedit.wkt.parser import loads_wkt

    (poly,) = loads_wkt(polygon_hole_wkt)
    length, area = measure(poly)
    assert area == pytest.approx(96.0)
    assert length == pytest.approx(48.0)


def test_point_has_no_extent():
    assert measure(Point((3, 3))) == (0.0, 0.0)


def test_degenerate_elements_measure_zero():
    assert to_shapely(LineString([(1, 1)])) is None
    assert to_shapely(Polygon([[(0, 0), (1, 1)]])) is None
    assert to_shapely(Point()) is None
    assert measure(Polygon()) == (0.0, 0.0)


def test_short_hole_is_dropped():
    poly = Polygon([[(0, 0), (0, 10), (10, 10), (10, 0)], [(2, 2)]])
    assert measure(poly)[1] == pytest.approx(100.0)


def test_rejects_non_elements():
    with pytest.raises(TypeError):
        to_shapely("POINT (1 1)")
