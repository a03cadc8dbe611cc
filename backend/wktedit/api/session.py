"""POST /api/session/*: cursor mode and interactive construction."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from wktedit.api.document import session_state
from wktedit.dependencies import get_session
from wktedit.engine.elements import Rect
from wktedit.engine.session import EditingSession
from wktedit.models.requests import ModeRequest, PointRequest, RectRequest
from wktedit.models.responses import SessionState

router = APIRouter(prefix="/session")


@router.put("/mode", response_model=SessionState)
async def set_mode(req: ModeRequest, session: EditingSession = Depends(get_session)) -> SessionState:
    session.set_mode(req.mode)
    return session_state(session)


@router.post("/points", response_model=SessionState)
async def add_point(req: PointRequest, session: EditingSession = Depends(get_session)) -> SessionState:
    session.add_point(req.x, req.y)
    return session_state(session)


@router.post("/end-element", response_model=SessionState)
async def end_element(session: EditingSession = Depends(get_session)) -> SessionState:
    session.end_current_element()
    return session_state(session)


@router.post("/end-sub-element", response_model=SessionState)
async def end_sub_element(session: EditingSession = Depends(get_session)) -> SessionState:
    session.end_current_sub_element()
    return session_state(session)


@router.post("/select-rect", response_model=SessionState)
async def select_rect(req: RectRequest, session: EditingSession = Depends(get_session)) -> SessionState:
    session.select_within(Rect.from_corners(req.x1, req.y1, req.x2, req.y2))
    return session_state(session)
