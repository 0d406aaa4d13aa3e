"""
Initialize the database: create all tables.
Run with: python -m scripts.init_db
"""

import asyncio
from doctor_portal.config import get_settings
from doctor_portal.database import Database


async def init():
    settings = get_settings()
    db = Database(settings.database_url)
    print(f"Creating database tables on {db.dialect}...")
    await db.create_all()
    print("All tables created successfully.")
    await db.dispose()


if __name__ == "__main__":
    asyncio.run(init())
