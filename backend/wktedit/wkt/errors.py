"""Errors raised while reading WKT text."""

from __future__ import annotations


class WktParseError(ValueError):
    """Malformed coordinate or ring. ``content`` is the raw offending text."""

    def __init__(self, message: str, content: str) -> None:
        super().__init__(f"{message}: {content!r}")
        self.content = content
