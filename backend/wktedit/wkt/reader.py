"""Tokenizing reader: pulls type keywords and balanced ``( ... )`` blocks off a text stream.

Knows nothing about geometry. Reads one character at a time so memory use stays
flat no matter how large the file is; the only buffered text is the content block
currently being collected.
"""

from __future__ import annotations

import logging
from typing import TextIO

logger = logging.getLogger(__name__)

_OPEN = "("
_CLOSE = ")"
_EMPTY = "EMPTY"


class WktReader:
    """Single-pass reader over a text stream.

    End of stream is a sticky flag: once hit, ``next_type()`` keeps returning
    ``None`` and ``next_balanced_content()`` returns an empty string.
    """

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        # Characters handed back to the stream, last one read first.
        self._pushback: list[str] = []
        self.eof = False

    def __enter__(self) -> WktReader:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self._stream.close()

    def next_type(self) -> str | None:
        """Return the next candidate type keyword, or None at end of stream."""
        while not self.eof:
            word = self._read_word()
            if word:
                return word
        return None

    def next_is_empty(self) -> bool:
        """Consume an ``EMPTY`` marker if it comes next; otherwise push back what was read past the whitespace."""
        c = self._skip_whitespace()
        chars: list[str] = []
        while c and len(chars) < len(_EMPTY) and c == _EMPTY[len(chars)]:
            chars.append(c)
            c = self._read_char()
        if len(chars) == len(_EMPTY) and (not c or c.isspace()):
            if not c:
                self.eof = True
            return True
        self._unread("".join(chars) + c)
        return False

    def next_balanced_content(self) -> str:
        """Return the text inside the next balanced parenthesis group.

        The leading ``(`` and the matching ``)`` are not included. If the stream
        ends first, whatever was collected is returned and ``eof`` is set.
        """
        if not self._skip_until(_OPEN):
            return ""

        chars: list[str] = []
        depth = 1
        while True:
            c = self._read_char()
            if not c:
                self.eof = True
                logger.debug("Unbalanced parenthesis group at end of stream (depth %d)", depth)
                return "".join(chars)
            if c == _OPEN:
                depth += 1
            elif c == _CLOSE:
                depth -= 1
                if depth == 0:
                    return "".join(chars)
            chars.append(c)

    # ------------------------------------------------------------------

    def _read_char(self) -> str:
        if self._pushback:
            return self._pushback.pop()
        return self._stream.read(1)

    def _unread(self, text: str) -> None:
        self._pushback.extend(reversed(text))

    def _read_word(self) -> str:
        """Read a run of non-whitespace characters.

        The run stops in front of ``(`` so ``POINT(1 2)`` yields ``POINT``. A run
        that starts with ``(`` keeps it, otherwise the reader would never advance.
        """
        c = self._skip_whitespace()
        chars: list[str] = []
        while c and not c.isspace():
            if c == _OPEN and chars:
                self._unread(c)
                return "".join(chars)
            chars.append(c)
            c = self._read_char()
        if not c:
            self.eof = True
        return "".join(chars)

    def _skip_whitespace(self) -> str:
        c = self._read_char()
        while c and c.isspace():
            c = self._read_char()
        return c

    def _skip_until(self, target: str) -> bool:
        c = self._read_char()
        while c and c != target:
            c = self._read_char()
        if not c:
            self.eof = True
            return False
        return True
