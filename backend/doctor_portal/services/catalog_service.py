from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from doctor_portal.models.service import Service


class CatalogService:
    async def list_services(self, db: AsyncSession) -> list[dict]:
        result = await db.execute(select(Service).order_by(Service.id))
        return [s.to_document() for s in result.scalars().all()]

    async def list_service_names(self, db: AsyncSession) -> list[dict]:
        result = await db.execute(select(Service.id, Service.name).order_by(Service.id))
        return [{"_id": str(service_id), "name": name} for service_id, name in result.all()]


catalog_service = CatalogService()
