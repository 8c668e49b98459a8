"""Treatment service schemas."""

from doctors_portal.schemas.base import PortalSchema


class ServiceResponse(PortalSchema):
    """Service with its (possibly availability-filtered) slots."""

    id: str
    name: str
    price: float
    slots: list[str]


class ServiceNameResponse(PortalSchema):
    """Name-only projection of a service."""

    id: str
    name: str
