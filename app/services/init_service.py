"""Initialization service for seeding the database with demo requests."""

import logging
import typing as t

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import SETTINGS
from app.core.models import AidCategory
from app.schemas.aid_request import AidItemCreate, AidRequestCreate
from app.services.request_service import RequestService
from app.utils.dates import now_ms

LOGGER: logging.Logger = logging.getLogger(__name__)

HOUR_MS: int = 60 * 60 * 1000

# (submission, age in hours, received quantity per item)
DEMO_REQUESTS: t.List[t.Tuple[AidRequestCreate, int, t.List[int]]] = [
    (
        AidRequestCreate(
            nic="900010001V",
            full_name="Sarah Connor",
            contact_number="555-010-101",
            district="Colombo",
            region="Dehiwala",
            items=[
                AidItemCreate(
                    name="Water Bottles",
                    category=AidCategory.WATER,
                    quantity_needed=20,
                    unit="liters",
                    keywords=["Drinking Water", "Bottled", "Hydration"],
                ),
                AidItemCreate(
                    name="Rice",
                    category=AidCategory.FOOD,
                    quantity_needed=10,
                    unit="kg",
                    keywords=["Dry Rations", "Carbohydrates", "Staple Food"],
                ),
            ],
        ),
        24,
        [5, 0],
    ),
    (
        AidRequestCreate(
            nic="900020002V",
            full_name="John Smith",
            contact_number="555-010-102",
            district="Kandy",
            region="Peradeniya",
            items=[
                AidItemCreate(
                    name="Bandages",
                    category=AidCategory.MEDICAL,
                    quantity_needed=5,
                    unit="packs",
                    keywords=["First Aid", "Sterile", "Wound Care", "Medical"],
                ),
            ],
        ),
        48,
        [0],
    ),
    (
        AidRequestCreate(
            nic="900030003V",
            full_name="Kamal Perera",
            contact_number="077-1234567",
            district="Gampaha",
            region="Negombo",
            items=[
                AidItemCreate(
                    name="Milk Powder",
                    category=AidCategory.FOOD,
                    quantity_needed=5,
                    unit="packs",
                    keywords=["Infant", "Dairy", "Nutrition", "Dry Rations"],
                ),
                AidItemCreate(
                    name="Baby Soap",
                    category=AidCategory.HYGIENE,
                    quantity_needed=2,
                    unit="units",
                    keywords=["Infant Care", "Sanitation", "Cleaning"],
                ),
            ],
        ),
        12,
        [1, 0],
    ),
]


async def seed_demo_requests(db: AsyncSession) -> int:
    """Insert the demo requests if the store is empty.

    Args:
        db (AsyncSession): The database session.

    Returns:
        int: Number of requests inserted.
    """
    service: RequestService = RequestService(db)
    if await service.count_requests() > 0:
        LOGGER.debug("Requests already present, skipping demo data")
        return 0

    now: int = now_ms()
    for submission, age_hours, received in DEMO_REQUESTS:
        created = await service.create_request(
            submission, created_at=now - age_hours * HOUR_MS
        )
        for item, quantity in zip(created.items, received):
            if quantity:
                await service.update_received(created.id, item.id, quantity)

    return len(DEMO_REQUESTS)


async def initialize_database(db: AsyncSession) -> None:
    """Initialize the database with default data.

    Args:
        db (AsyncSession): The database session.
    """
    LOGGER.info("Running database initialization...")

    if SETTINGS.seed_demo_data:
        inserted: int = await seed_demo_requests(db)
        if inserted:
            LOGGER.info("Seeded %d demo aid requests", inserted)

    await db.commit()
    LOGGER.info("Database initialization complete")
