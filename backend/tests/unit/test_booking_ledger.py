"""Test the booking ledger against a real SQLite database."""
import asyncio

import pytest
from sqlalchemy import func, select

from doctor_portal.exceptions import ForbiddenError
from doctor_portal.models.booking import Booking
from doctor_portal.schemas.booking import BookingCreate
from doctor_portal.services.booking_service import booking_ledger


def cleaning(patient="p@x.com", slot="9:00", **extra) -> BookingCreate:
    return BookingCreate(treatment="Cleaning", date="2024-01-01", patient=patient, slot=slot, **extra)


async def count_bookings(database) -> int:
    async with database.session() as session:
        return await session.scalar(select(func.count(Booking.id)))


@pytest.mark.asyncio
async def test_create_booking_inserts_new_booking(database):
    async with database.session() as session:
        outcome = await booking_ledger.create_booking(session, cleaning(patientName="Pat"))

    assert outcome.created is True
    assert outcome.booking.id is not None
    assert outcome.booking.details == {"patientName": "Pat"}
    assert await count_bookings(database) == 1


@pytest.mark.asyncio
async def test_second_identical_booking_reports_existing(database):
    async with database.session() as session:
        first = await booking_ledger.create_booking(session, cleaning())
        second = await booking_ledger.create_booking(session, cleaning())

    assert second.created is False
    assert second.booking.id == first.booking.id
    assert await count_bookings(database) == 1


@pytest.mark.asyncio
async def test_different_slot_same_day_is_still_a_duplicate(database):
    """Uniqueness is per (treatment, date, patient), regardless of slot."""
    async with database.session() as session:
        await booking_ledger.create_booking(session, cleaning(slot="9:00"))
        outcome = await booking_ledger.create_booking(session, cleaning(slot="10:00"))

    assert outcome.created is False
    assert outcome.booking.slot == "9:00"


@pytest.mark.asyncio
async def test_other_patients_can_book_same_treatment_and_date(database):
    async with database.session() as session:
        await booking_ledger.create_booking(session, cleaning(patient="a@x.com"))
        outcome = await booking_ledger.create_booking(session, cleaning(patient="b@x.com", slot="10:00"))

    assert outcome.created is True
    assert await count_bookings(database) == 2


@pytest.mark.asyncio
async def test_concurrent_duplicates_store_one_row(database):
    """Simultaneous submissions of the same booking leave exactly one record."""
    async def submit():
        async with database.session() as session:
            return await booking_ledger.create_booking(session, cleaning())

    outcomes = await asyncio.gather(*(submit() for _ in range(5)))

    assert sum(o.created for o in outcomes) == 1
    assert await count_bookings(database) == 1


@pytest.mark.asyncio
async def test_list_for_patient_requires_matching_requester(database):
    async with database.session() as session:
        await booking_ledger.create_booking(session, cleaning(patient="a@x.com"))

        with pytest.raises(ForbiddenError):
            await booking_ledger.list_for_patient(session, "a@x.com", "b@x.com")

        bookings = await booking_ledger.list_for_patient(session, "a@x.com", "a@x.com")

    assert [b["patient"] for b in bookings] == ["a@x.com"]


@pytest.mark.asyncio
async def test_list_for_patient_without_patient_is_forbidden(database):
    async with database.session() as session:
        with pytest.raises(ForbiddenError):
            await booking_ledger.list_for_patient(session, None, "a@x.com")
