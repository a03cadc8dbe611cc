"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    env: str = "development"


class ElementInfo(BaseModel):
    index: int
    kind: str
    wkt: str
    bbox: tuple[int, int, int, int] | None = None
    length: float = 0.0
    area: float = 0.0


class SessionState(BaseModel):
    mode: str
    current: int | None = None
    selection: list[int] = Field(default_factory=list)
    dirty: bool = False
    element_count: int = 0


class DocumentResponse(BaseModel):
    elements: list[ElementInfo] = Field(default_factory=list)
    path: str | None = None
    session: SessionState


class HitResponse(BaseModel):
    index: int | None = None


class WithinResponse(BaseModel):
    indices: list[int] = Field(default_factory=list)
