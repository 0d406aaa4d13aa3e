from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from doctor_portal.auth import Principal, authenticated, guarded
from doctor_portal.database import get_db
from doctor_portal.schemas.booking import BookingCreate
from doctor_portal.services.booking_service import booking_ledger

router = APIRouter()


@router.get("/booking")
async def list_bookings(
    patient: Optional[str] = Query(None),
    db: AsyncSession = Depends(get_db),
    current_user: Principal = Depends(guarded(authenticated)),
):
    return await booking_ledger.list_for_patient(db, patient, current_user.email)


@router.post("/booking")
async def create_booking(data: BookingCreate, db: AsyncSession = Depends(get_db)):
    """Book a slot. A repeat for the same treatment/date/patient reports the existing booking."""
    outcome = await booking_ledger.create_booking(db, data)
    return outcome.to_response()
