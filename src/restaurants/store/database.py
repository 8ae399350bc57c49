"""SQL-backed restaurant store using SQLAlchemy's async ORM."""

from __future__ import annotations

from sqlalchemy import select

from ..database.connection import (
    check_database_connection,
    create_tables,
    dispose_database,
    get_async_session,
    init_database,
)
from ..dbmodels import Restaurants
from ..logging import get_logger
from .base import RestaurantFields, RestaurantNotFoundError, RestaurantRecord, RestaurantStore

logger = get_logger(__name__)


def _parse_id(restaurant_id: str) -> int | None:
    """Primary keys are integers; any other id cannot match a row."""
    try:
        return int(restaurant_id)
    except (TypeError, ValueError):
        return None


def _to_record(row: Restaurants) -> RestaurantRecord:
    rating = row.rating
    # REAL column: whole ratings come back as floats
    if isinstance(rating, float) and rating.is_integer():
        rating = int(rating)

    return RestaurantRecord(
        id=str(row.id),
        name=row.name,
        address=row.address,
        type=row.type,
        budget=row.budget,
        description=row.description,
        rating=rating,
    )


class DatabaseRestaurantStore(RestaurantStore):
    """Stores restaurants in the ``restaurants`` table."""

    name = "database"

    def __init__(self, database_url: str | None = None, create_schema: bool = True) -> None:
        self.database_url = database_url
        self.create_schema = create_schema

    async def initialize(self) -> None:
        init_database(self.database_url, force_reinit=self.database_url is not None)
        if self.create_schema:
            await create_tables()

    async def close(self) -> None:
        await dispose_database()

    async def ping(self) -> tuple[bool, str | None]:
        return await check_database_connection()

    async def get(self, restaurant_id: str) -> RestaurantRecord | None:
        pk = _parse_id(restaurant_id)
        if pk is None:
            return None

        async with get_async_session() as session:
            row = await session.get(Restaurants, pk)
            return _to_record(row) if row is not None else None

    async def get_all(self) -> list[RestaurantRecord]:
        async with get_async_session() as session:
            result = await session.execute(select(Restaurants).order_by(Restaurants.id))
            return [_to_record(row) for row in result.scalars().all()]

    async def create(self, fields: RestaurantFields) -> RestaurantRecord:
        async with get_async_session() as session:
            row = Restaurants(
                name=fields.name,
                address=fields.address,
                type=fields.type,
                budget=fields.budget,
                description=fields.description,
                rating=fields.rating,
            )
            session.add(row)
            await session.flush()
            record = _to_record(row)

        logger.debug("Inserted restaurant row", restaurant_id=record.id)
        return record

    async def update(self, restaurant_id: str, fields: RestaurantFields) -> RestaurantRecord:
        pk = _parse_id(restaurant_id)
        if pk is None:
            raise RestaurantNotFoundError(str(restaurant_id))

        async with get_async_session() as session:
            row = await session.get(Restaurants, pk)
            if row is None:
                raise RestaurantNotFoundError(str(restaurant_id))

            row.name = fields.name
            row.address = fields.address
            row.type = fields.type
            row.budget = fields.budget
            row.description = fields.description
            row.rating = fields.rating
            await session.flush()
            return _to_record(row)

    async def delete(self, restaurant_id: str) -> bool:
        pk = _parse_id(restaurant_id)
        if pk is None:
            return False

        async with get_async_session() as session:
            row = await session.get(Restaurants, pk)
            if row is None:
                return False
            await session.delete(row)
            return True
