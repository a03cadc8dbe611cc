"""Document: the ordered element collection of one WKT file plus its save state."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TextIO

from wktedit.engine.elements import Element

logger = logging.getLogger(__name__)

DEFAULT_FILE_NAME = "Unnamed Geometry.wkt"


class Document:
    """Owns the elements for the lifetime of an open file.

    A failed ``open`` leaves the previous elements in place; a failed ``save``
    leaves ``dirty`` set. Errors (WktParseError, OSError) propagate.
    """

    def __init__(
        self,
        elements: list[Element] | None = None,
        encoding: str = "utf-8",
        default_file_name: str = DEFAULT_FILE_NAME,
    ) -> None:
        self.elements: list[Element] = list(elements or [])
        self.path: Path | None = None
        self.dirty = False
        self.encoding = encoding
        self.default_file_name = default_file_name

    def __len__(self) -> int:
        return len(self.elements)

    def __getitem__(self, index: int) -> Element:
        return self.elements[index]

    def append(self, element: Element) -> int:
        """Add an element and return its index."""
        self.elements.append(element)
        self.dirty = True
        return len(self.elements) - 1

    def mark_dirty(self) -> None:
        self.dirty = True

    # --- streams --------------------------------------------------------

    def open(self, stream: TextIO) -> list[Element]:
        """Replace the elements with those parsed from ``stream`` and forget the file path."""
        from wktedit.wkt.parser import parse_wkt

        elements = parse_wkt(stream)
        self.elements = elements
        self.dirty = False
        self.path = None
        return elements

    def save(self, stream: TextIO) -> int:
        """Write every element to ``stream``, one per line."""
        from wktedit.wkt.serializer import dump_wkt

        count = dump_wkt(self.elements, stream)
        self.dirty = False
        return count

    def to_text(self) -> str:
        from wktedit.wkt.serializer import dumps_wkt

        return dumps_wkt(self.elements)

    # --- files ----------------------------------------------------------

    def open_file(self, path: str | Path) -> list[Element]:
        path = Path(path)
        with path.open(encoding=self.encoding) as f:
            elements = self.open(f)
        self.path = path
        logger.info("Opened %s: %d elements", path, len(elements))
        return elements

    def save_file(self, path: str | Path | None = None) -> Path:
        """Save to ``path``, else to the open file, else to the default file name."""
        target = Path(path) if path is not None else (self.path or Path(self.default_file_name))
        with target.open("w", encoding=self.encoding, newline="\n") as f:
            count = self.save(f)
        self.path = target
        logger.info("Saved %d elements to %s", count, target)
        return target
