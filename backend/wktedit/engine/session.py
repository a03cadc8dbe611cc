"""Editing session: routes clicks to selection or to element construction.

The cursor mode decides what ``add_point`` means:

    SELECT   -> hit-test, the element under the cursor becomes selected/current
    POINT    -> build Point elements
    LINE     -> build LineString elements
    POLYGON  -> build Polygon elements (``end_current_sub_element`` starts a hole)

Current, hovered and selected elements are indices into ``document.elements``.
Each public call fires ``document_changed`` and ``selection_changed`` at most
once, and only if something actually changed.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import TextIO

from wktedit.engine.config import EditorConfig
from wktedit.engine.document import Document
from wktedit.engine.elements import Element, LineString, Point, Polygon, Rect
from wktedit.engine.events import Signal
from wktedit.engine.spatial import elements_within, hit_test

logger = logging.getLogger(__name__)


class CursorMode(str, enum.Enum):
    SELECT = "select"
    POINT = "point"
    LINE = "line"
    POLYGON = "polygon"

    @property
    def is_drawing(self) -> bool:
        return self is not CursorMode.SELECT

    @property
    def has_sub_elements(self) -> bool:
        return self is CursorMode.POLYGON


_FACTORIES: dict[CursorMode, type[Element]] = {
    CursorMode.POINT: Point,
    CursorMode.LINE: LineString,
    CursorMode.POLYGON: Polygon,
}


def element_for_mode(mode: CursorMode) -> Element:
    """New empty element of the variant a drawing mode builds."""
    try:
        return _FACTORIES[mode]()
    except KeyError:
        raise ValueError(f"Cursor mode {mode.value!r} does not draw elements") from None


class EditingSession:
    """Interactive editing state over one Document."""

    def __init__(self, document: Document | None = None, config: EditorConfig | None = None) -> None:
        self.document = document if document is not None else Document()
        self.config = config or EditorConfig()
        self.mode = CursorMode.SELECT
        self.current: int | None = None
        self.hover: int | None = None
        self.selection: set[int] = set()

        self.document_changed = Signal("document_changed")
        self.selection_changed = Signal("selection_changed")
        self.hover_changed = Signal("hover_changed")

        self._doc_dirty = False
        self._sel_dirty = False
        self._depth = 0

    # --- notification batching -----------------------------------------

    @contextmanager
    def _batch(self) -> Iterator[None]:
        """Collect changes during one public call; emit each channel once at the end."""
        self._depth += 1
        try:
            yield
        finally:
            self._depth -= 1
            if self._depth == 0:
                doc, sel = self._doc_dirty, self._sel_dirty
                self._doc_dirty = self._sel_dirty = False
                if doc:
                    self.document_changed.emit()
                if sel:
                    self.selection_changed.emit(frozenset(self.selection))

    def _set_selection(self, indices: set[int]) -> None:
        if indices != self.selection:
            self.selection = set(indices)
            self._sel_dirty = True

    def _geometry_changed(self) -> None:
        self.document.mark_dirty()
        self._doc_dirty = True

    # --- accessors ------------------------------------------------------

    @property
    def elements(self) -> list[Element]:
        return self.document.elements

    @property
    def current_element(self) -> Element | None:
        if self.current is None:
            return None
        if not 0 <= self.current < len(self.document):
            logger.warning("Current element index %d is stale, dropping it", self.current)
            self.current = None
            return None
        return self.document[self.current]

    def set_mode(self, mode: CursorMode | str) -> None:
        self.mode = CursorMode(mode)
        logger.debug("Cursor mode -> %s", self.mode.value)

    # --- editing --------------------------------------------------------

    def add_point(self, x: int, y: int) -> int | None:
        """Handle a click at model coordinates (x, y).

        Returns the index of the selected element (SELECT mode) or of the element
        that received the point (drawing modes).
        """
        with self._batch():
            if not self.mode.is_drawing:
                return self._select_at(x, y)
            return self._draw_at(x, y)

    def _select_at(self, x: int, y: int) -> int | None:
        index = self.hit_test(x, y)
        self.current = index
        self._set_selection(set() if index is None else {index})
        return index

    def _draw_at(self, x: int, y: int) -> int:
        element = self.current_element
        if element is not None and not isinstance(element, _FACTORIES[self.mode]):
            logger.warning(
                "Cursor mode changed to %s without ending the %s in progress",
                self.mode.value,
                element.kind,
            )
            self.end_current_element()
            element = None

        if element is not None and not element.can_add():
            self.end_current_element()
            element = None

        if element is None:
            element = element_for_mode(self.mode)
            self.current = self.document.append(element)
            self._set_selection({self.current})
            logger.debug("Started %s #%d", element.kind, self.current)

        element.add(x, y)
        self._geometry_changed()
        return self.current

    def end_current_element(self) -> None:
        """Commit the element being built. A no-op when nothing is current."""
        if self.current_element is None:
            return
        with self._batch():
            logger.debug("Ended element #%d", self.current)
            self.current = None
            self._set_selection(set())

    def end_current_sub_element(self) -> None:
        """Start a new ring on the current polygon."""
        if not self.mode.has_sub_elements:
            return
        element = self.current_element
        if not isinstance(element, Polygon):
            return
        with self._batch():
            element.end_sub_element()
            self._geometry_changed()

    # --- queries & selection --------------------------------------------

    def hit_test(self, x: float, y: float, max_distance: float | None = None) -> int | None:
        tol = self.config.hit_tolerance if max_distance is None else max_distance
        return hit_test(self.elements, x, y, tol)

    def elements_within(self, rect: Rect) -> set[int]:
        return elements_within(self.elements, rect)

    def select_within(self, rect: Rect) -> set[int]:
        """Select every element inside ``rect`` (rubber-band selection)."""
        with self._batch():
            selected = self.elements_within(rect)
            self._set_selection(selected)
            self.current = next(iter(selected)) if len(selected) == 1 else None
            return selected

    def update_hover(self, x: float, y: float) -> int | None:
        """Track the element under the cursor; ``hover_changed`` fires on change only."""
        index = self.hit_test(x, y)
        if index != self.hover:
            self.hover = index
            self.hover_changed.emit(index)
        return index

    # --- persistence ----------------------------------------------------

    def open(self, stream: TextIO) -> list[Element]:
        """Load a WKT stream. On error the current document is left as it was."""
        with self._batch():
            elements = self.document.open(stream)
            self._reset_refs()
            self._doc_dirty = True
            return elements

    def open_file(self, path: str | Path) -> list[Element]:
        with self._batch():
            elements = self.document.open_file(path)
            self._reset_refs()
            self._doc_dirty = True
            return elements

    def save(self, stream: TextIO) -> int:
        self.end_current_element()
        return self.document.save(stream)

    def save_file(self, path: str | Path | None = None) -> Path:
        self.end_current_element()
        return self.document.save_file(path)

    def _reset_refs(self) -> None:
        self.current = None
        self._set_selection(set())
        if self.hover is not None:
            self.hover = None
            self.hover_changed.emit(None)
