"""Master API router: mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from wktedit.api import document, health, query, session

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(document.router)
api_router.include_router(session.router)
api_router.include_router(query.router)
