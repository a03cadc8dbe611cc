"""POST /api/query/*: read-only spatial queries."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from wktedit.dependencies import get_session
from wktedit.engine.elements import Rect
from wktedit.engine.session import EditingSession
from wktedit.models.requests import HitRequest, RectRequest
from wktedit.models.responses import HitResponse, WithinResponse

router = APIRouter(prefix="/query")


@router.post("/hit", response_model=HitResponse)
async def hit(req: HitRequest, session: EditingSession = Depends(get_session)) -> HitResponse:
    return HitResponse(index=session.hit_test(req.x, req.y, req.max_distance))


@router.post("/within", response_model=WithinResponse)
async def within(req: RectRequest, session: EditingSession = Depends(get_session)) -> WithinResponse:
    rect = Rect.from_corners(req.x1, req.y1, req.x2, req.y2)
    return WithinResponse(indices=sorted(session.elements_within(rect)))
