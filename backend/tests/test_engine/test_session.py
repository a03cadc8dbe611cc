"""Tests for the editing session: construction, selection, notifications."""

import io

import pytest

from wktedit.engine.document import Document
from wktedit.engine.elements import LineString, Point, Polygon, Rect
from wktedit.engine.session import CursorMode, EditingSession, element_for_mode
from wktedit.wkt.errors import WktParseError


def test_draw_linestring(session, events):
    session.set_mode(CursorMode.LINE)
    for x, y in [(0, 0), (10, 0), (10, 10)]:
        assert session.add_point(x, y) == 0
    assert session.elements == [LineString([(0, 0), (10, 0), (10, 10)])]
    assert session.current == 0
    assert session.selection == {0}
    assert session.document.dirty
    # One document notification per click; selection changed only on the first.
    assert len(events["document"]) == 3
    assert events["selection"] == [frozenset({0})]


def test_end_current_element_commits(session, events):
    session.set_mode("line")
    session.add_point(0, 0)
    session.add_point(5, 5)
    session.end_current_element()
    assert session.current is None
    assert session.selection == set()
    assert events["selection"][-1] == frozenset()

    session.add_point(20, 20)
    assert len(session.elements) == 2
    assert session.current == 1


def test_end_current_element_is_idempotent(session, events):
    session.end_current_element()
    session.end_current_element()
    assert events == {"document": [], "selection": [], "hover": []}


def test_point_mode_each_click_after_end_makes_new_point(session):
    session.set_mode(CursorMode.POINT)
    session.add_point(1, 1)
    session.add_point(2, 2)
    assert session.elements == [Point((2, 2))]
    session.end_current_element()
    session.add_point(3, 3)
    assert session.elements == [Point((2, 2)), Point((3, 3))]


def test_polygon_with_hole(session):
    session.set_mode(CursorMode.POLYGON)
    for x, y in [(0, 0), (0, 10), (10, 10), (10, 0)]:
        session.add_point(x, y)
    session.end_current_sub_element()
    for x, y in [(2, 2), (2, 4), (4, 4)]:
        session.add_point(x, y)
    session.end_current_element()
    (poly,) = session.elements
    assert poly.to_wkt() == "POLYGON ((0 0, 0 10, 10 10, 10 0, 0 0), (2 2, 2 4, 4 4, 2 2))"


def test_sub_element_ignored_outside_polygon_mode(session, events):
    session.set_mode(CursorMode.LINE)
    session.add_point(0, 0)
    count = len(events["document"])
    session.end_current_sub_element()
    assert len(events["document"]) == count
    assert session.elements == [LineString([(0, 0)])]


def test_sub_element_ignored_for_selected_linestring(session, events):
    session.open(io.StringIO("LINESTRING (0 0, 10 0)\n"))
    session.add_point(5, 0)
    session.set_mode(CursorMode.POLYGON)
    events["document"].clear()

    session.end_current_sub_element()

    assert events["document"] == []
    assert not session.document.dirty
    assert session.elements == [LineString([(0, 0), (10, 0)])]


def test_mode_change_mid_element_ends_it(session, caplog):
    session.set_mode(CursorMode.LINE)
    session.add_point(0, 0)
    session.add_point(1, 1)
    session.set_mode(CursorMode.POLYGON)
    assert session.add_point(5, 5) == 1
    assert isinstance(session.elements[1], Polygon)
    assert session.elements[0] == LineString([(0, 0), (1, 1)])
    assert "without ending" in caplog.text


def test_select_hits_element(session, events):
    session.open(io.StringIO("LINESTRING (0 0, 10 0)\nPOINT (50 50)\n"))
    session.document.dirty = False
    events["document"].clear()

    assert session.add_point(51, 50) == 1
    assert session.selection == {1}
    assert session.current == 1
    assert events["selection"][-1] == frozenset({1})
    # Selecting does not modify the document.
    assert not session.document.dirty
    assert events["document"] == []


def test_select_miss_clears_selection(session):
    session.open(io.StringIO("POINT (50 50)\n"))
    session.add_point(50, 50)
    assert session.add_point(0, 0) is None
    assert session.selection == set()
    assert session.current is None


def test_selected_element_can_be_resumed(session):
    session.open(io.StringIO("LINESTRING (0 0, 10 0)\n"))
    session.add_point(5, 0)
    session.set_mode(CursorMode.LINE)
    session.add_point(20, 0)
    assert session.elements == [LineString([(0, 0), (10, 0), (20, 0)])]


def test_select_within(session, site_wkt, events):
    session.open(io.StringIO(site_wkt))
    assert session.select_within(Rect(70, 10, 90, 30)) == {2}
    assert session.current == 2
    assert session.select_within(Rect(-50, -50, 200, 200)) == {0, 1, 2}
    assert session.current is None
    assert events["selection"][-1] == frozenset({0, 1, 2})


def test_hover_fires_only_on_change(session, events):
    session.open(io.StringIO("POINT (10 10)\n"))
    session.update_hover(10, 11)
    session.update_hover(11, 10)
    session.update_hover(40, 40)
    assert events["hover"] == [0, None]


def test_hit_tolerance_from_config():
    from wktedit.engine.config import EditorConfig

    session = EditingSession(Document([Point((0, 0))]), EditorConfig(hit_tolerance=10.0))
    assert session.hit_test(7, 7) == 0
    assert session.hit_test(7, 7, max_distance=1.0) is None


def test_open_replaces_document_and_resets(session, multi_wkt, events):
    session.set_mode(CursorMode.LINE)
    session.add_point(0, 0)
    session.open(io.StringIO(multi_wkt))
    assert len(session.elements) == 2
    assert session.current is None
    assert session.selection == set()
    assert not session.document.dirty
    assert len(events["document"]) == 2


def test_failed_open_keeps_previous_state(session, events):
    session.set_mode(CursorMode.POINT)
    session.add_point(1, 1)
    before = (list(session.elements), session.current, set(session.selection))
    events["document"].clear()

    with pytest.raises(WktParseError):
        session.open(io.StringIO("POINT (1 1)\nPOINT (x y)\n"))

    assert (session.elements, session.current, session.selection) == before
    assert events["document"] == []


def test_save_ends_current_element(session):
    session.set_mode(CursorMode.LINE)
    session.add_point(0, 0)
    session.add_point(1, 1)
    buf = io.StringIO()
    assert session.save(buf) == 1
    assert buf.getvalue() == "LINESTRING (0 0, 1 1)\n"
    assert session.current is None
    assert not session.document.dirty


def test_failed_save_keeps_dirty(session, tmp_path):
    session.set_mode(CursorMode.POINT)
    session.add_point(1, 1)
    with pytest.raises(OSError):
        session.save_file(tmp_path / "missing" / "out.wkt")
    assert session.document.dirty


def test_stale_current_index_is_dropped(session):
    session.current = 7
    assert session.current_element is None
    assert session.current is None


def test_element_for_mode():
    assert element_for_mode(CursorMode.POLYGON) == Polygon()
    with pytest.raises(ValueError):
        element_for_mode(CursorMode.SELECT)


def test_cursor_mode_flags():
    assert not CursorMode.SELECT.is_drawing
    assert CursorMode.LINE.is_drawing
    assert CursorMode.POLYGON.has_sub_elements
    assert not CursorMode.LINE.has_sub_elements
