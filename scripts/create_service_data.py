"""Create the clinic's treatment services with their daily slot templates."""

import asyncio

from sqlalchemy import select

from doctors_portal.db.init_db import create_tables
from doctors_portal.db.session import AsyncSessionLocal
from doctors_portal.models.service import Service

DEFAULT_SLOTS = [
    "08:00 AM - 08:30 AM",
    "08:30 AM - 09:00 AM",
    "09:00 AM - 09:30 AM",
    "09:30 AM - 10:00 AM",
    "10:00 AM - 10:30 AM",
    "10:30 AM - 11:00 AM",
    "11:00 AM - 11:30 AM",
    "11:30 AM - 12:00 PM",
    "04:00 PM - 04:30 PM",
    "04:30 PM - 05:00 PM",
]

SERVICES = [
    ("Teeth Orthodontics", 120),
    ("Cosmetic Dentistry", 95),
    ("Teeth Cleaning", 45),
    ("Cavity Protection", 60),
    ("Pediatric Dental", 70),
    ("Oral Surgery", 150),
]


async def create_service_data():
    """Create any of the default services that do not exist yet."""
    await create_tables()

    async with AsyncSessionLocal() as session:
        result = await session.execute(select(Service.name))
        existing = set(result.scalars().all())

        created = 0
        for name, price in SERVICES:
            if name in existing:
                print(f"Service '{name}' already exists, skipping...")
                continue

            session.add(Service(name=name, price=price, slots=list(DEFAULT_SLOTS)))
            created += 1

        await session.commit()

        print(f"Created {created} services")


if __name__ == "__main__":
    asyncio.run(create_service_data())
