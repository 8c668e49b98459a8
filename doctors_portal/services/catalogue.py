"""Treatment service catalogue."""

from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from doctors_portal.models.service import Service


class CatalogueService:
    """Read access to the treatment services offered by the clinic."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def list_services(self) -> Sequence[Service]:
        """List every service in catalogue order."""
        result = await self.session.execute(
            select(Service).order_by(Service.created_at, Service.name)
        )
        return result.scalars().all()

    async def list_service_names(self) -> Sequence[tuple[str, str]]:
        """List ``(id, name)`` pairs without loading slot templates."""
        result = await self.session.execute(
            select(Service.id, Service.name).order_by(Service.created_at, Service.name)
        )
        return [(row.id, row.name) for row in result.all()]
