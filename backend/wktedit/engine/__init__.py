"""wktedit geometry editing engine."""

from wktedit.engine.document import Document
from wktedit.engine.elements import Element, LineString, Point, Polygon, Rect
from wktedit.engine.session import CursorMode, EditingSession
from wktedit.engine.viewport import Viewport

__all__ = [
    "Document",
    "Element",
    "Point",
    "LineString",
    "Polygon",
    "Rect",
    "CursorMode",
    "EditingSession",
    "Viewport",
]
