from typing import Iterable, Mapping, Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from doctor_portal.exceptions import BadRequestError
from doctor_portal.models.booking import Booking
from doctor_portal.models.service import Service


def compute_availability(
    date: Optional[str],
    services: Iterable[Mapping],
    bookings: Iterable[Mapping],
) -> list[dict]:
    """Return copies of ``services`` whose slots exclude those booked on ``date``.

    Slot order is preserved and the inputs are left untouched.
    """
    if not date:
        raise BadRequestError("date query parameter is required")

    booked: dict[str, set[str]] = {}
    for booking in bookings:
        if booking.get("date") != date:
            continue
        booked.setdefault(booking.get("treatment"), set()).add(booking.get("slot"))

    available = []
    for service in services:
        taken = booked.get(service.get("name"), set())
        available.append({
            **service,
            "slots": [slot for slot in service.get("slots") or [] if slot not in taken],
        })
    return available


class AvailabilityService:
    async def available_on(self, db: AsyncSession, date: Optional[str]) -> list[dict]:
        # Fail before querying; compute_availability repeats this for direct callers
        if not date:
            raise BadRequestError("date query parameter is required")

        services = (await db.execute(select(Service).order_by(Service.id))).scalars().all()
        bookings = (await db.execute(select(Booking).where(Booking.date == date))).scalars().all()

        return compute_availability(
            date,
            [s.to_document() for s in services],
            [b.to_document() for b in bookings],
        )


availability_service = AvailabilityService()
