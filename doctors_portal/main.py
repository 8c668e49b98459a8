"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from doctors_portal import __version__
from doctors_portal.api.router import api_router
from doctors_portal.core.config import settings
from doctors_portal.core.exceptions import PortalError
from doctors_portal.core.logging import setup_logging
from doctors_portal.db.init_db import init_db
from doctors_portal.db.session import AsyncSessionLocal

# Setup logging
setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup and shutdown events."""
    logger.info(f"Starting Doctors Portal API (env={settings.env})")

    if settings.init_db_on_startup:
        logger.info("Initializing database...")
        async with AsyncSessionLocal() as session:
            await init_db(session)

    yield

    logger.info("Shutting down Doctors Portal API")


app = FastAPI(
    title="Doctors Portal API",
    description="Clinic appointment booking backend",
    version=__version__,
    docs_url="/docs" if settings.is_dev else None,
    redoc_url="/redoc" if settings.is_dev else None,
    openapi_url="/openapi.json" if settings.is_dev else None,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(PortalError)
async def portal_error_handler(request: Request, exc: PortalError) -> JSONResponse:
    """Render application errors as ``{"message", "code"}``."""
    extra = {"request_id": request.headers.get("X-Request-ID")}
    if exc.status_code >= 500:
        logger.error(
            f"{exc.code} on {request.method} {request.url.path}: {exc.message}",
            extra=extra,
        )
    else:
        logger.info(f"{exc.code} on {request.method} {request.url.path}", extra=extra)

    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unhandled exceptions."""
    logger.exception(
        f"Unhandled exception: {exc}",
        extra={"request_id": request.headers.get("X-Request-ID")},
    )

    # Don't expose internal errors in production
    message = "Internal server error" if settings.is_prod else str(exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": message, "code": "internal_error"},
    )


app.include_router(api_router)


@app.get("/", include_in_schema=False)
async def root() -> dict:
    """Service banner."""
    return {
        "service": "Doctors Portal Is Running",
        "version": __version__,
    }
