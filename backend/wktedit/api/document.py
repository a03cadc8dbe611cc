"""/api/document: load, inspect and save the WKT document."""

from __future__ import annotations

import io
import logging

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from wktedit.dependencies import get_session
from wktedit.engine.measure import measure
from wktedit.engine.session import EditingSession
from wktedit.models.requests import OpenRequest
from wktedit.models.responses import DocumentResponse, ElementInfo, SessionState

router = APIRouter(prefix="/document")
logger = logging.getLogger(__name__)


def session_state(session: EditingSession) -> SessionState:
    return SessionState(
        mode=session.mode.value,
        current=session.current,
        selection=sorted(session.selection),
        dirty=session.document.dirty,
        element_count=len(session.document),
    )


def document_response(session: EditingSession) -> DocumentResponse:
    infos: list[ElementInfo] = []
    for i, element in enumerate(session.elements):
        length, area = measure(element)
        rect = element.bounding_rectangle()
        infos.append(
            ElementInfo(
                index=i,
                kind=element.kind,
                wkt=element.to_wkt(),
                bbox=tuple(rect) if rect is not None else None,
                length=length,
                area=area,
            )
        )
    path = session.document.path
    return DocumentResponse(
        elements=infos,
        path=str(path) if path is not None else None,
        session=session_state(session),
    )


@router.get("", response_model=DocumentResponse)
async def get_document(session: EditingSession = Depends(get_session)) -> DocumentResponse:
    return document_response(session)


@router.post("/open", response_model=DocumentResponse)
async def open_document(req: OpenRequest, session: EditingSession = Depends(get_session)) -> DocumentResponse:
    elements = session.open(io.StringIO(req.wkt))
    logger.info("Opened document from request: %d elements", len(elements))
    return document_response(session)


@router.post("/save", response_class=PlainTextResponse)
async def save_document(session: EditingSession = Depends(get_session)) -> PlainTextResponse:
    buf = io.StringIO()
    count = session.save(buf)
    logger.info("Saved document: %d elements", count)
    return PlainTextResponse(buf.getvalue(), media_type="text/plain; charset=utf-8")
