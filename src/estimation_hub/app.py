"""FastAPI application with lifespan, error handling, and health endpoint."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from estimation_hub.api import estimations_router, extract_router
from estimation_hub.config import get_settings
from estimation_hub.errors import EstimationHubError
from estimation_hub.logging_config import configure_logging
from estimation_hub.slack.router import router as slack_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: load config and configure logging on startup."""
    settings = get_settings()
    configure_logging(settings.log_level)
    yield


app = FastAPI(
    title="Estimation Hub",
    lifespan=lifespan,
)
app.include_router(slack_router)
app.include_router(extract_router)
app.include_router(estimations_router)


@app.exception_handler(EstimationHubError)
async def domain_error_handler(request: Request, exc: EstimationHubError) -> JSONResponse:
    """Render domain errors as ``{"error": ..., "details": ...}``.

    Messages are returned verbatim: this is an internal tool and operators
    need the underlying diagnostic text.
    """
    log = logger.error if exc.status_code >= 500 else logger.warning
    log(
        "%s %s failed: %s",
        request.method,
        request.url.path,
        exc,
        extra={"error_type": type(exc).__name__, "status_code": exc.status_code},
    )
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.summary, "details": exc.details},
    )


@app.get("/health")
async def health():
    """Health check endpoint for Cloud Run and local development."""
    return {
        "status": "ok",
        "service": "estimation-hub",
        "version": "0.1.0",
    }
