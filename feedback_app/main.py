"""
App Feedback

Small FastAPI service that renders a feedback form and forwards submissions
to the Userback API.
"""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncGenerator
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from feedback_app.config import get_settings
from feedback_app.logging_config import configure_logging
from feedback_app.middleware import RequestIDMiddleware, SecurityHeadersMiddleware
from feedback_app.routers import feedback, form
from feedback_app.services.http_client import close_userback_client

logger = logging.getLogger(__name__)

settings = get_settings()

SERVICE_NAME = "app-feedback"
VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan: startup and shutdown."""
    configure_logging(get_settings().log_level)
    logger.info("Starting %s %s", SERVICE_NAME, VERSION)
    yield
    await close_userback_client()


app = FastAPI(
    title="App Feedback",
    description="Feedback form that submits to the Userback API",
    version=VERSION,
    lifespan=lifespan,
)

app.add_middleware(SecurityHeadersMiddleware)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "X-Request-ID"],
)

# Request ID (added last, so outermost)
app.add_middleware(RequestIDMiddleware)

# Routers
app.include_router(form.router)
app.include_router(feedback.router, prefix="/api")


def _check_config() -> dict[str, str]:
    """Verify the Userback configuration is usable."""
    s = get_settings()
    return {
        "config": "ok" if s.userback_api_url and s.userback_project_id > 0 else "fail",
        "api_key": "ok" if s.userback_api_key else "missing",
    }


@app.get("/api/health")
async def health_check() -> JSONResponse:
    """Health check reporting configuration status."""
    checks = _check_config()
    overall = "ok" if all(v == "ok" for v in checks.values()) else "degraded"
    if overall != "ok":
        logger.warning(
            "Health check degraded: %s",
            ", ".join(f"{k}={v}" for k, v in checks.items() if v != "ok"),
        )
    result: dict[str, Any] = {
        "status": overall,
        "service": SERVICE_NAME,
        "version": VERSION,
        "checks": checks,
    }
    status_code = 200 if checks["config"] == "ok" else 503
    return JSONResponse(content=result, status_code=status_code)
