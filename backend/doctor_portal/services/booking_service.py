from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from doctor_portal.database import conflict_insert
from doctor_portal.exceptions import ForbiddenError
from doctor_portal.logging_config import get_logger
from doctor_portal.models.booking import Booking
from doctor_portal.schemas.booking import BookingCreate
from doctor_portal.schemas.results import InsertResult

logger = get_logger(__name__)

UNIQUE_KEY = ("treatment", "date", "patient")


@dataclass
class BookingOutcome:
    created: bool
    booking: Booking

    def to_response(self) -> dict:
        if self.created:
            return {"success": True, "result": InsertResult(inserted_id=str(self.booking.id))}
        return {"success": False, "booking": self.booking.to_document()}


class BookingLedger:
    """Bookings with at most one entry per (treatment, date, patient)."""

    async def create_booking(self, db: AsyncSession, data: BookingCreate) -> BookingOutcome:
        """
        Insert ``data`` unless the patient already holds a booking for that
        treatment on that date. The insert is a single conditional statement
        against the unique constraint, so concurrent duplicates yield one row.
        """
        stmt = (
            conflict_insert(db, Booking)
            .values(
                treatment=data.treatment,
                date=data.date,
                patient=data.patient,
                slot=data.slot,
                details=data.details(),
            )
            .on_conflict_do_nothing(index_elements=list(UNIQUE_KEY))
            .returning(Booking.id)
        )
        booking_id = (await db.execute(stmt)).scalar_one_or_none()
        await db.commit()

        if booking_id is None:
            existing = await self.find_booking(db, data.treatment, data.date, data.patient)
            logger.info(
                "booking_duplicate",
                treatment=data.treatment,
                date=data.date,
                patient=data.patient,
                booking_id=existing.id,
            )
            return BookingOutcome(created=False, booking=existing)

        booking = await db.get(Booking, booking_id)
        logger.info(
            "booking_created",
            treatment=data.treatment,
            date=data.date,
            patient=data.patient,
            slot=data.slot,
            booking_id=booking_id,
        )
        return BookingOutcome(created=True, booking=booking)

    async def find_booking(self, db: AsyncSession, treatment: str, date: str, patient: str):
        result = await db.execute(
            select(Booking).where(
                Booking.treatment == treatment,
                Booking.date == date,
                Booking.patient == patient,
            )
        )
        return result.scalar_one_or_none()

    async def list_for_patient(self, db: AsyncSession, patient: str, requester_email: str) -> list[dict]:
        """Bookings of ``patient``, visible only to the patient's own token."""
        if not patient or patient != requester_email:
            raise ForbiddenError("forbidden access")
        result = await db.execute(
            select(Booking).where(Booking.patient == patient).order_by(Booking.id)
        )
        return [b.to_document() for b in result.scalars().all()]


booking_ledger = BookingLedger()
