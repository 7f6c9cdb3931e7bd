"""Bookkeeping backend entrypoint.

``create_app`` builds the database engine, session factory and invoice
renderer once and keeps them on ``app.state``; route dependencies read them
from there. Nothing is built at import time; serve the app with

    uvicorn --factory backend.app.main:create_app
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from backend.app.api import entries, login, register
from backend.app.core.logging_config import configure_logging
from backend.app.core.settings import Settings, get_settings
from backend.app.db.base import Base
from backend.app.db.session import build_engine, build_session_factory
from backend.app.services.invoice_renderer import InvoicePdfRenderer

logger = logging.getLogger(__name__)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"detail": "Server error"})


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title=settings.app_name, version=settings.api_version)

    engine = build_engine(settings.database_url)
    Base.metadata.create_all(bind=engine)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)
    app.state.invoice_renderer = InvoicePdfRenderer(font_path=settings.invoice_font_path)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["Content-Disposition"],
    )
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.include_router(register.router, prefix="/api")
    app.include_router(login.router, prefix="/api")
    app.include_router(entries.router, prefix="/api")

    @app.get("/")
    def read_root():
        return {"app": settings.app_name, "status": "running"}

    @app.get("/health")
    def health_check():
        return {"status": "ok"}

    logger.info("%s started (%s)", settings.app_name, settings.environment)
    return app

