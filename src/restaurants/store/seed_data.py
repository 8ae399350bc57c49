"""
Sample restaurants for development databases.
"""

from __future__ import annotations

from ..logging import get_logger
from .base import Budget, RestaurantFields, RestaurantRecord, RestaurantStore

logger = get_logger(__name__)

SAMPLE_RESTAURANTS: tuple[RestaurantFields, ...] = (
    RestaurantFields(
        name="Campus Pizza",
        address="160 University Ave W #2, Waterloo, ON N2L 3E9",
        type="Pizzeria",
        budget=Budget.LOW,
        description="giant slices, affordable prices",
        rating=2,
    ),
    RestaurantFields(
        name="Lancaster Smokehouse",
        address="574 Lancaster St W, Kitchener, ON N2K 1M3",
        type="Barbecue",
        budget=Budget.MEDIUM,
        description="slow-smoked ribs and brisket",
        rating=4,
    ),
    RestaurantFields(
        name="Proof Kitchen & Lounge",
        address="110 Erb St W, Waterloo, ON N2L 0C6",
        type="Contemporary",
        budget=Budget.HIGH,
        description="small plates and cocktails",
        rating=None,
    ),
)


async def seed_sample_restaurants(store: RestaurantStore, force: bool = False) -> list[RestaurantRecord]:
    """
    Load the sample restaurants into a store.

    Seeding is skipped when the store already holds restaurants, unless
    ``force`` is set.

    Returns:
        The records that were created (empty if seeding was skipped)
    """
    existing = await store.get_all()
    if existing and not force:
        logger.info("Store already populated; skipping seed", count=len(existing))
        return []

    created = [await store.create(fields) for fields in SAMPLE_RESTAURANTS]
    logger.info("Seeded sample restaurants", count=len(created), store=store.name)
    return created
