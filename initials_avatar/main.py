"""
Initials Avatar Service - Main FastAPI Application

Serves square SVG avatars built from one or two initials:

- GET /api/avatar   SVG avatar, configurable through query parameters
- GET /health       liveness probe
- /api-docs         interactive API documentation (Swagger UI)
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import settings
from .health import router as health_router
from .router import router as avatar_router

_log = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup / shutdown tasks."""
    logging.basicConfig(level=settings.LOG_LEVEL)

    _log.info(f"Starting {settings.SERVICE_NAME} v{settings.SERVICE_VERSION}")
    _log.info(f"API docs: {settings.DOCS_URL}")
    _log.info(
        "Parameter validation: %s",
        "strict" if settings.STRICT_VALIDATION else "lenient (defaults on invalid input)",
    )
    yield
    _log.info(f"Shutting down {settings.SERVICE_NAME}")


# Application metadata
app = FastAPI(
    title=settings.API_TITLE,
    description=settings.API_DESCRIPTION,
    version=settings.SERVICE_VERSION,
    contact={"name": settings.CONTACT_NAME, "email": settings.CONTACT_EMAIL},
    servers=[{"url": settings.public_url}],
    docs_url=settings.DOCS_URL,
    redoc_url="/redoc",
    lifespan=lifespan,
)


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=False,
    allow_methods=["GET"],
    allow_headers=["*"],
)


app.include_router(health_router)
app.include_router(avatar_router)


# Custom exception handler for consistent error responses
@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    """Return consistent JSON error responses."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail},
    )


def run() -> None:
    """Start the HTTP server with the configured host and port."""
    import uvicorn

    logging.basicConfig(level=settings.LOG_LEVEL)
    _log.info(f"{settings.SERVICE_NAME} listening on {settings.public_url}")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
