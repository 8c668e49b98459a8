"""Health check endpoints."""

from fastapi import APIRouter, status
from pydantic import BaseModel
from sqlalchemy import text

from doctors_portal.api.deps import DbSession

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response."""

    status: str


@router.get(
    "",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
    summary="Health check",
)
async def health_check() -> HealthResponse:
    """Check if the service is up."""
    return HealthResponse(status="ok")


@router.get(
    "/ready",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
    summary="Readiness check",
    description="Returns ok once the database answers a trivial query",
)
async def readiness_check(session: DbSession) -> HealthResponse:
    """Check that the database is reachable."""
    await session.execute(text("SELECT 1"))
    return HealthResponse(status="ok")
