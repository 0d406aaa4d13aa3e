from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from doctor_portal.database import get_db
from doctor_portal.services.availability_service import availability_service
from doctor_portal.services.catalog_service import catalog_service

router = APIRouter()


@router.get("/service")
async def list_service_names(db: AsyncSession = Depends(get_db)):
    return await catalog_service.list_service_names(db)


@router.get("/services")
async def list_services(db: AsyncSession = Depends(get_db)):
    return await catalog_service.list_services(db)


@router.get("/available")
async def available_slots(
    date: Optional[str] = Query(None, description="Calendar date, as the client formats it"),
    db: AsyncSession = Depends(get_db),
):
    return await availability_service.available_on(db, date)
