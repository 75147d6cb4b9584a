from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from aiorbit.config import AppConfig
from aiorbit.snapshot import SnapshotError
from aiorbit.web.middleware import SecurityHeadersMiddleware
from aiorbit.web.routes import router

logger = logging.getLogger("aiorbit.web")


def create_app(config: AppConfig) -> FastAPI:
    docs_enabled = bool(config.dev_enable_docs)

    app = FastAPI(
        title="AIOrbit Insights",
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
    )
    app.state.config = config

    @app.exception_handler(SnapshotError)
    async def snapshot_error_handler(request: Request, exc: SnapshotError) -> JSONResponse:
        logger.error("snapshot unreadable", extra={"path": request.url.path, "error": str(exc)})
        return JSONResponse(status_code=503, content={"detail": "data snapshot unreadable"})

    app.add_middleware(SecurityHeadersMiddleware)
    app.include_router(router)

    return app
