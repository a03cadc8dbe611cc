"""Outbound notification channels.

One ``Signal`` per notification kind. Callbacks are plain callables:

    session.document_changed.connect(lambda: canvas.repaint())

Deciding *whether* to emit is the owner's job; a Signal just fans out.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

logger = logging.getLogger(__name__)


class Signal:
    """Ordered list of callbacks fired synchronously on ``emit``."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._callbacks: list[Callable[..., Any]] = []

    def connect(self, callback: Callable[..., Any]) -> Callable[..., Any]:
        """Register ``callback``. Returns it, so this also works as a decorator."""
        if callback not in self._callbacks:
            self._callbacks.append(callback)
        return callback

    def disconnect(self, callback: Callable[..., Any]) -> None:
        if callback in self._callbacks:
            self._callbacks.remove(callback)

    def emit(self, *args: Any) -> None:
        logger.debug("Signal %s -> %d listeners", self.name, len(self._callbacks))
        for callback in list(self._callbacks):
            callback(*args)

    def __len__(self) -> int:
        return len(self._callbacks)
