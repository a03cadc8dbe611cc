"""Write WKT text from geometry elements."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TextIO

from wktedit.engine.elements import Element


def dump_wkt(elements: Iterable[Element], stream: TextIO) -> int:
    """Write one geometry per line to ``stream``. Returns the number written."""
    count = 0
    for element in elements:
        stream.write(element.to_wkt())
        stream.write("\n")
        count += 1
    return count


def dumps_wkt(elements: Iterable[Element]) -> str:
    """Serialize elements to WKT text, each followed by a newline."""
    return "".join(f"{element.to_wkt()}\n" for element in elements)
