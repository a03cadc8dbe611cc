"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from wktedit import __version__
from wktedit.config import settings
from wktedit.wkt.errors import WktParseError

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.wktedit_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(
        title="wktedit",
        description="WKT geometry editor backend: parsing, construction and spatial selection",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(WktParseError)
    async def _wkt_parse_error(request: Request, exc: WktParseError) -> JSONResponse:
        logger.warning("Rejected WKT on %s: %s", request.url.path, exc)
        return JSONResponse(status_code=422, content={"detail": str(exc), "content": exc.content})

    from wktedit.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
