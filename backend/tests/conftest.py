"""Shared test fixtures."""

from __future__ import annotations

import pytest

from wktedit.engine.document import Document
from wktedit.engine.session import EditingSession


# Sample WKT documents

MULTI_WKT = "POINT (1 2)\nLINESTRING (0 0, 1 1, 2 2)\n"

POLYGON_HOLE_WKT = "POLYGON ((0 0, 0 10, 10 10, 10 0), (2 2, 2 4, 4 4, 4 2))"

POLYGON_HOLE_SAVED = "POLYGON ((0 0, 0 10, 10 10, 10 0, 0 0), (2 2, 2 4, 4 4, 4 2, 2 2))"

UNKNOWN_TYPE_WKT = "CIRCLE (0 0)\nPOINT (1 1)\n"

# A small site plan: a parcel with a courtyard, a path and a well.
SITE_WKT = """POLYGON ((0 0, 0 100, 100 100, 100 0), (40 40, 40 60, 60 60, 60 40))

LINESTRING (-20 50, 0 50, 40 50)
POINT (80 20)
"""


@pytest.fixture
def multi_wkt() -> str:
    return MULTI_WKT


@pytest.fixture
def polygon_hole_wkt() -> str:
    return POLYGON_HOLE_WKT


@pytest.fixture
def polygon_hole_saved() -> str:
    return POLYGON_HOLE_SAVED


@pytest.fixture
def unknown_type_wkt() -> str:
    return UNKNOWN_TYPE_WKT


@pytest.fixture
def site_wkt() -> str:
    return SITE_WKT


@pytest.fixture
def session() -> EditingSession:
    return EditingSession(Document())


@pytest.fixture
def events(session: EditingSession) -> dict[str, list]:
    """Record every notification the session fires."""
    log: dict[str, list] = {"document": [], "selection": [], "hover": []}
    session.document_changed.connect(lambda: log["document"].append(True))
    session.selection_changed.connect(lambda sel: log["selection"].append(sel))
    session.hover_changed.connect(lambda idx: log["hover"].append(idx))
    return log
