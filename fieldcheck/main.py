"""fieldcheck: declarative record validation service.

Main FastAPI application with lifespan management and global error handling.
"""

import logging
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from fieldcheck.config import get_settings
from fieldcheck.api.router import api_router
from fieldcheck.services.submission import SubmissionService
from fieldcheck.validators import SchemaError
from fieldcheck.validators.schemas import get_all_models


def configure_logging() -> None:
    """Configure structured logging from settings."""
    settings = get_settings()
    level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer() if settings.DEBUG else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
    )


configure_logging()

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown lifecycle."""
    settings = get_settings()

    # ── Startup ──
    logger.info("app_starting", debug=settings.DEBUG)

    # Broken schemas must stop startup, not surface on the first request
    try:
        models = get_all_models()
    except SchemaError as e:
        logger.error("schema_load_failed", error=str(e))
        raise
    logger.info("schemas_loaded", models=models)

    app.state.submission_service = SubmissionService()

    logger.info("app_started")

    yield

    # ── Shutdown ──
    logger.info("app_stopped")


# ── Create Application ──

app = FastAPI(
    title="fieldcheck",
    description=(
        "Declarative record validation. Model schemas attach Required, "
        "StringLength, RegularExpression and Range constraints to fields; "
        "records are stored only when every constraint holds."
    ),
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)


# ── Global Exception Handlers ──

@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Catch-all error handler for unhandled exceptions."""
    logger.error(
        "unhandled_exception",
        path=request.url.path,
        method=request.method,
        error=str(exc),
        error_type=type(exc).__name__,
    )
    return JSONResponse(
        status_code=500,
        content={
            "error": "internal_server_error",
            "message": "An unexpected error occurred. Please try again.",
        },
    )


@app.exception_handler(SchemaError)
async def schema_error_handler(request: Request, exc: SchemaError):
    """Broken declarations are server faults, never validation failures."""
    logger.error(
        "schema_error",
        path=request.url.path,
        error=str(exc),
        error_type=type(exc).__name__,
    )
    return JSONResponse(
        status_code=500,
        content={"error": "configuration_error", "message": str(exc)},
    )


# ── Routes ──

app.include_router(api_router, prefix="/api/v1")


# ── Root endpoint ──

@app.get("/")
async def root():
    """Root endpoint: API info."""
    return {
        "name": "fieldcheck",
        "version": "0.1.0",
        "description": "Declarative record validation service",
        "docs": "/docs",
        "health": "/api/v1/health",
    }
