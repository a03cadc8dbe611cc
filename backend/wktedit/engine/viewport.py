"""Viewport: pan/zoom state and pixel <-> model conversion.

screen = (model + translation) * zoom, truncated to whole pixels.
"""

from __future__ import annotations

import logging

from wktedit.engine.config import EditorConfig
from wktedit.engine.elements import Rect
from wktedit.engine.events import Signal

logger = logging.getLogger(__name__)


class Viewport:
    """Translation and zoom of the drawing area.

    ``changed`` fires after ``pan_by``/``zoom_by``/``reset`` only when the
    translation or zoom actually moved.
    """

    def __init__(self, config: EditorConfig | None = None) -> None:
        self.config = config or EditorConfig()
        self.translate_x = 0.0
        self.translate_y = 0.0
        self.zoom = 1.0
        self.changed = Signal("viewport_changed")

    # --- conversion -----------------------------------------------------

    def to_screen(self, x: float, y: float) -> tuple[int, int]:
        return (int((x + self.translate_x) * self.zoom), int((y + self.translate_y) * self.zoom))

    def to_model(self, sx: float, sy: float) -> tuple[int, int]:
        return (int(sx / self.zoom - self.translate_x), int(sy / self.zoom - self.translate_y))

    def scale(self, length: float) -> int:
        return int(length * self.zoom)

    def unscale(self, length: float) -> int:
        return int(length / self.zoom)

    def screen_rect_to_model(self, x1: float, y1: float, x2: float, y2: float) -> Rect:
        """Model rectangle under a screen-space drag from (x1, y1) to (x2, y2)."""
        mx1, my1 = self.to_model(min(x1, x2), min(y1, y2))
        return Rect(mx1, my1, mx1 + self.unscale(abs(x2 - x1)), my1 + self.unscale(abs(y2 - y1)))

    # --- mutation -------------------------------------------------------

    def pan_by(self, dx: float, dy: float) -> bool:
        """Shift the translation by (dx, dy) model units. Returns True if it changed."""
        return self._update(self.translate_x + dx, self.translate_y + dy, self.zoom)

    def zoom_by(self, diff: float, cx: float = 0.0, cy: float = 0.0) -> bool:
        """Zoom in (diff > 0) or out keeping screen point (cx, cy) fixed.

        The factor moves by ``diff * zoom_step`` and is clamped to the configured range.
        """
        cfg = self.config
        new_zoom = min(max(self.zoom + diff * cfg.zoom_step, cfg.zoom_min), cfg.zoom_max)
        if new_zoom == self.zoom:
            return False
        # Model point under the anchor before zooming must stay under it afterwards.
        anchor_x = cx / self.zoom - self.translate_x
        anchor_y = cy / self.zoom - self.translate_y
        return self._update(cx / new_zoom - anchor_x, cy / new_zoom - anchor_y, new_zoom)

    def reset(self) -> bool:
        return self._update(0.0, 0.0, 1.0)

    def _update(self, tx: float, ty: float, zoom: float) -> bool:
        if (tx, ty, zoom) == (self.translate_x, self.translate_y, self.zoom):
            return False
        self.translate_x, self.translate_y, self.zoom = tx, ty, zoom
        logger.debug("Viewport: translate=(%.2f, %.2f) zoom=%.2f", tx, ty, zoom)
        self.changed.emit(self)
        return True
