"""FastAPI application factory."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from buildlab.api.routes import router
from buildlab.config import BuildLabSettings, get_settings
from buildlab.core.errors import CopyCountOutOfRange, NoCurrentResult
from buildlab.logging_config import setup_logging
from buildlab.services.building_service import BuildingService

logger = logging.getLogger(__name__)


def create_app(settings: BuildLabSettings | None = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(
        title="Building Builder",
        description="Builder and Prototype patterns applied to buildings",
        version="0.1.0",
    )

    # CORS — allow any local frontend
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.service = BuildingService(settings)

    @app.exception_handler(NoCurrentResult)
    async def _no_current_result(request: Request, exc: NoCurrentResult) -> JSONResponse:
        logger.warning("Rejected copy request: %s", exc)
        return JSONResponse(status_code=409, content={"detail": str(exc)})

    @app.exception_handler(CopyCountOutOfRange)
    async def _copy_count(request: Request, exc: CopyCountOutOfRange) -> JSONResponse:
        logger.warning("Rejected copy request: %s", exc)
        return JSONResponse(status_code=422, content={"detail": str(exc)})

    app.include_router(router, prefix="/api")

    return app


app = create_app()
