from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from doctor_portal.auth import Principal, admin_only, authenticated, guarded
from doctor_portal.database import get_db
from doctor_portal.schemas.doctor import DoctorCreate
from doctor_portal.schemas.results import DeleteResult, InsertResult
from doctor_portal.services.doctor_service import doctor_service

router = APIRouter()


@router.get("/doctor")
async def list_doctors(
    db: AsyncSession = Depends(get_db),
    current_user: Principal = Depends(guarded(authenticated, admin_only)),
):
    return await doctor_service.list_doctors(db)


@router.post("/doctor", response_model=InsertResult)
async def create_doctor(
    data: DoctorCreate,
    db: AsyncSession = Depends(get_db),
    current_user: Principal = Depends(guarded(authenticated, admin_only)),
):
    return await doctor_service.create_doctor(db, data)


@router.delete("/doctor/{email}", response_model=DeleteResult)
async def delete_doctor(email: str, db: AsyncSession = Depends(get_db)):
    return await doctor_service.delete_doctor(db, email)
