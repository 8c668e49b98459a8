"""Treatment service and availability endpoints."""

from typing import Literal

from fastapi import APIRouter, Query

from doctors_portal.api.deps import DbSession
from doctors_portal.schemas.service import ServiceNameResponse, ServiceResponse
from doctors_portal.services.booking import BookingService
from doctors_portal.services.catalogue import CatalogueService

router = APIRouter()


@router.get(
    "/service",
    response_model=list[ServiceResponse] | list[ServiceNameResponse],
    summary="List services",
    description="List treatment services; `projection=name` returns names only",
)
async def list_services(
    session: DbSession,
    projection: Literal["full", "name"] = Query("full"),
) -> list[ServiceResponse] | list[ServiceNameResponse]:
    catalogue = CatalogueService(session)

    if projection == "name":
        return [
            ServiceNameResponse(id=service_id, name=name)
            for service_id, name in await catalogue.list_service_names()
        ]

    return [ServiceResponse.model_validate(s) for s in await catalogue.list_services()]


@router.get(
    "/available",
    response_model=list[ServiceResponse],
    summary="Available slots",
    description="Services with slots narrowed to those still open on `date`",
)
async def available_services(
    session: DbSession,
    date: str | None = Query(None, description="Calendar date label, e.g. 2024-01-01"),
) -> list[ServiceResponse]:
    """Return each service with the slots not yet booked for ``date``.

    Without ``date`` every service is returned with its full template.
    """
    services = await BookingService(session).compute_availability(date)
    return [ServiceResponse.model_validate(s) for s in services]
