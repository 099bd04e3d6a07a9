"""
Lingosheet — FastAPI Application.

Entry point for the API server.
Run: uvicorn lingosheet.main:app --host 0.0.0.0 --port 8080 --reload

Bundles are loaded once in the lifespan hook. If the base language cannot be
loaded the process stays up, /health reports "unavailable", and every engine
route answers 503.
"""

from contextlib import asynccontextmanager
from typing import Optional

import structlog
from fastapi import FastAPI
from fastapi.responses import JSONResponse

from lingosheet.api.routers.checklist import router as checklist_router
from lingosheet.config import settings
from lingosheet.controller import Controller, create_controller
from lingosheet.exceptions import BaseLanguageUnavailable, register_exception_handlers
from lingosheet.logging_config import configure_logging

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan — load bundles and paint the first pass."""
    configure_logging(settings)
    logger.info("lingosheet_starting", version=settings.app_version)

    controller: Controller = getattr(app.state, "controller", None) or create_controller(settings)
    app.state.controller = controller
    try:
        await controller.start()
    except BaseLanguageUnavailable as e:
        logger.error("engine_start_failed", language=e.language, reason=e.reason)
    yield
    logger.info("lingosheet_shutdown")


def create_app(controller: Optional[Controller] = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title=settings.app_name,
        description="Translated instruction checklist and sheet generator.",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_tags=[
            {"name": "health", "description": "Liveness and readiness probe"},
            {"name": "checklist", "description": "Language switching, selection, sheet generation"},
        ],
    )
    if controller is not None:
        app.state.controller = controller

    register_exception_handlers(app)
    app.include_router(checklist_router)

    # ── Health Check ──────────────────────────────────────────────────
    @app.get("/health", tags=["health"])
    async def health():
        """200 once the base language is loaded, 503 otherwise."""
        engine: Optional[Controller] = getattr(app.state, "controller", None)
        ready = engine is not None and engine.ready
        return JSONResponse(
            status_code=200 if ready else 503,
            content={
                "status": "ok" if ready else "unavailable",
                "version": settings.app_version,
                "service": "lingosheet",
                "active_language": engine.active_language if engine else None,
                "languages": engine.available_languages if engine else [],
            },
        )

    return app


app = create_app()
