from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, RedirectResponse

from .config.config_manager import ConfigManager
from .core.store import AgencyState
from .routers import agency, reports
from .utils.logging_utils import setup_logging

log = logging.getLogger("agencytrack")


def create_app(config: Optional[ConfigManager] = None, state: Optional[AgencyState] = None) -> FastAPI:
    """Build the API with its own in-memory session state."""
    config = config or ConfigManager()

    # -----------------------------
    # Logging
    # -----------------------------
    setup_logging(
        config.get("logging", "level", "INFO"),
        config.get("logging", "file"),
        bool(config.get("logging", "json", False)),
    )

    # -----------------------------
    # App init + state
    # -----------------------------
    app = FastAPI(
        title=config.get("app", "title", "Insurance Performance Tracker"),
        version=str(config.get("app", "version", "0.1.0")),
    )
    app.state.config = config
    app.state.agency = state or AgencyState.from_sample(
        unmatched_commission=float(config.get("commission", "unmatched_amount", 0.0))
    )
    log.info("Session state ready: %s", app.state.agency.summary())

    app.include_router(agency.router)
    app.include_router(reports.router)

    # -----------------------------
    # Routes
    # -----------------------------
    @app.get("/", include_in_schema=False)
    def root() -> RedirectResponse:
        """Redirect to Swagger UI for convenience."""
        return RedirectResponse(url="/docs")

    @app.get("/healthz", summary="Lightweight health check")
    def healthz() -> dict:
        return {"status": "ok", **app.state.agency.summary()}

    # -----------------------------
    # Error handlers (nice messages)
    # -----------------------------
    @app.exception_handler(HTTPException)
    async def http_exc_handler(request: Request, exc: HTTPException):
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})

    @app.exception_handler(RequestValidationError)
    async def validation_exc_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=422,
            content={"detail": "Invalid request", "errors": jsonable_encoder(exc.errors())},
        )

    @app.exception_handler(Exception)
    async def unhandled_exc_handler(request: Request, exc: Exception):
        log.exception("Unhandled error: %s", exc)
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})

    return app


app = create_app()
