from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ...store.base import RestaurantStore
from ...validation import ValidationError, validate_rating

if TYPE_CHECKING:
    from ..types.restaurant import Restaurant, RestaurantInput

logger = get_logger(__name__)


def get_store_from_info(info: strawberry.Info) -> RestaurantStore:
    """Return the restaurant store attached to the GraphQL request context."""
    store = info.context.get("store") if isinstance(info.context, dict) else None
    if store is None:
        raise RuntimeError("No restaurant store configured in GraphQL context")
    return store


def _validate_input(input: RestaurantInput, operation: str) -> None:
    try:
        validate_rating(input.rating)
    except ValidationError:
        logger.warning("Rejected restaurant input", operation=operation, rating=input.rating)
        raise


# Query resolvers
async def resolve_restaurant_by_id(info: strawberry.Info, id: strawberry.ID) -> Restaurant | None:
    """Resolve a single restaurant, or None when the store has no such id."""
    from ..types.restaurant import Restaurant as RestaurantType

    record = await get_store_from_info(info).get(str(id))
    if record is None:
        logger.info("Restaurant not found", restaurant_id=str(id))
        return None

    return RestaurantType.from_record(record)


async def resolve_restaurants(info: strawberry.Info) -> list[Restaurant]:
    """Resolve every restaurant, in the order the store returns them."""
    from ..types.restaurant import Restaurant as RestaurantType

    records = await get_store_from_info(info).get_all()
    return [RestaurantType.from_record(record) for record in records]


# Mutation resolvers
async def create_restaurant(info: strawberry.Info, input: RestaurantInput) -> Restaurant:
    """
    Create a new restaurant.

    The rating is validated before the store is touched.
    """
    _validate_input(input, "createRestaurant")

    store = get_store_from_info(info)
    record = await store.create(input.to_fields())

    logger.info("Restaurant created", restaurant_id=record.id, name=record.name)

    from ..types.restaurant import Restaurant as RestaurantType

    return RestaurantType.from_record(record)


async def update_restaurant(
    info: strawberry.Info, id: strawberry.ID, input: RestaurantInput
) -> Restaurant:
    """
    Replace every field of an existing restaurant.

    Store errors, including an unknown id, propagate unchanged.
    """
    _validate_input(input, "updateRestaurant")

    store = get_store_from_info(info)
    record = await store.update(str(id), input.to_fields())

    logger.info("Restaurant updated", restaurant_id=record.id)

    from ..types.restaurant import Restaurant as RestaurantType

    return RestaurantType.from_record(record)


async def delete_restaurant(info: strawberry.Info, id: strawberry.ID) -> bool:
    """Delete a restaurant. Returns False if the id did not exist."""
    deleted = await get_store_from_info(info).delete(str(id))

    logger.info("Restaurant deleted", restaurant_id=str(id), deleted=deleted)

    return deleted
