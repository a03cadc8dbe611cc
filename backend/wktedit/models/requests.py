"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from wktedit.engine.session import CursorMode


class OpenRequest(BaseModel):
    wkt: str = Field(..., description="WKT text, one or more geometries")


class ModeRequest(BaseModel):
    mode: CursorMode = Field(..., description="Cursor mode: select, point, line or polygon")


class PointRequest(BaseModel):
    x: int = Field(..., description="Model x coordinate")
    y: int = Field(..., description="Model y coordinate")


class HitRequest(BaseModel):
    x: float = Field(..., description="Model x coordinate")
    y: float = Field(..., description="Model y coordinate")
    max_distance: float | None = Field(
        default=None,
        ge=0.0,
        description="Hit radius in model units (defaults to the configured tolerance)",
    )


class RectRequest(BaseModel):
    """Two opposite corners, in any order."""

    x1: int
    y1: int
    x2: int
    y2: int
