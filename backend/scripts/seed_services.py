"""
Load the clinic's treatment catalog (services and their daily slots).
Run with: python -m scripts.seed_services
Run with: python -m scripts.seed_services --reset-slots  (overwrite slots of existing services)
"""

import argparse
import asyncio
from sqlalchemy import select
from doctor_portal.config import get_settings
from doctor_portal.database import Database
from doctor_portal.models.service import Service

DAILY_SLOTS = [
    "08.00 AM - 08.30 AM",
    "08.30 AM - 09.00 AM",
    "09.00 AM - 09.30 AM",
    "09.30 AM - 10.00 AM",
    "10.00 AM - 10.30 AM",
    "10.30 AM - 11.00 AM",
    "11.00 AM - 11.30 AM",
    "11.30 AM - 12.00 PM",
    "01.00 PM - 01.30 PM",
    "01.30 PM - 02.00 PM",
    "02.00 PM - 02.30 PM",
    "02.30 PM - 03.00 PM",
    "03.00 PM - 03.30 PM",
    "03.30 PM - 04.00 PM",
    "04.00 PM - 04.30 PM",
    "04.30 PM - 05.00 PM",
]

CATALOG = {
    "Teeth Orthodontics": DAILY_SLOTS,
    "Cosmetic Dentistry": DAILY_SLOTS,
    "Teeth Cleaning": DAILY_SLOTS,
    "Cavity Protection": DAILY_SLOTS,
    "Pediatric Dental": DAILY_SLOTS[:8],
    "Oral Surgery": DAILY_SLOTS[8:],
}


async def seed(reset_slots: bool = False):
    settings = get_settings()
    db = Database(settings.database_url)
    await db.create_all()

    async with db.session() as session:
        result = await session.execute(select(Service))
        existing = {s.name: s for s in result.scalars().all()}

        added = 0
        for name, slots in CATALOG.items():
            service = existing.get(name)
            if service is None:
                session.add(Service(name=name, slots=list(slots)))
                added += 1
            elif reset_slots:
                service.slots = list(slots)
        await session.commit()

    print(f"Added {added} services ({len(CATALOG) - added} already present).")
    await db.dispose()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed the treatment catalog")
    parser.add_argument(
        "--reset-slots",
        action="store_true",
        help="Overwrite the slots of services that already exist",
    )
    args = parser.parse_args()

    asyncio.run(seed(reset_slots=args.reset_slots))
