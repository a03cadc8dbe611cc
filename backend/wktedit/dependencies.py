"""FastAPI dependency injection."""

from __future__ import annotations

from wktedit.config import Settings, settings
from wktedit.engine.config import EditorConfig
from wktedit.engine.document import Document
from wktedit.engine.session import EditingSession

_session: EditingSession | None = None


def get_settings() -> Settings:
    return settings


def new_session(cfg: Settings | None = None) -> EditingSession:
    cfg = cfg or settings
    document = Document(encoding=cfg.file_encoding, default_file_name=cfg.default_file_name)
    return EditingSession(document, EditorConfig(hit_tolerance=cfg.hit_tolerance))


def get_session() -> EditingSession:
    """The process-wide editing session; all requests mutate this one document."""
    global _session
    if _session is None:
        _session = new_session()
    return _session


def reset_session() -> EditingSession:
    global _session
    _session = new_session()
    return _session
