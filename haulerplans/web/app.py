"""FastAPI application factory."""

from __future__ import annotations

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from haulerplans import __version__
from haulerplans.config.logging import setup_logging
from haulerplans.config.settings import get_settings
from haulerplans.exceptions import EntitlementError, UnknownFeatureError, UnknownTierError
from haulerplans.web.health import check_health
from haulerplans.web.middleware import RequestIDMiddleware
from haulerplans.web.routes.entitlements import router as entitlements_router
from haulerplans.web.routes.plans import router as plans_router

logger = structlog.get_logger(__name__)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()
    setup_logging(log_level=settings.log_level, json_output=not settings.debug)

    app = FastAPI(
        title="haulerplans",
        description="Subscription entitlements for the hauler marketplace",
        version=__version__,
    )

    async def invalid_input_handler(request: Request, exc: EntitlementError) -> JSONResponse:
        logger.warning("entitlement_input_rejected", path=request.url.path, error=str(exc))
        return JSONResponse(status_code=422, content={"detail": str(exc)})

    app.add_exception_handler(UnknownTierError, invalid_input_handler)  # type: ignore[arg-type]
    app.add_exception_handler(UnknownFeatureError, invalid_input_handler)  # type: ignore[arg-type]

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_methods=["GET", "POST"],
        allow_headers=["Content-Type", "X-Request-ID"],
    )
    app.add_middleware(RequestIDMiddleware)

    @app.get("/api/health")
    async def health_check() -> dict[str, object]:
        return await check_health()

    app.include_router(plans_router)
    app.include_router(entitlements_router)

    logger.info("app_created")
    return app
