"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from wktedit import __version__
from wktedit.config import Settings
from wktedit.dependencies import get_settings
from wktedit.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(cfg: Settings = Depends(get_settings)) -> HealthResponse:
    return HealthResponse(status="ok", version=__version__, env=cfg.wktedit_env)
