"""In-memory restaurant store for development and tests."""

import asyncio
import itertools
from dataclasses import asdict

from ..logging import get_logger
from .base import RestaurantFields, RestaurantNotFoundError, RestaurantRecord, RestaurantStore

logger = get_logger(__name__)


class InMemoryRestaurantStore(RestaurantStore):
    """Keeps restaurants in a dict keyed by id, in insertion order.

    Ids are sequential integers rendered as strings, starting at "1".
    """

    name = "memory"

    def __init__(self) -> None:
        self._records: dict[str, RestaurantRecord] = {}
        self._ids = itertools.count(1)
        self._lock = asyncio.Lock()

    def __len__(self) -> int:
        return len(self._records)

    async def get(self, restaurant_id: str) -> RestaurantRecord | None:
        record = self._records.get(str(restaurant_id))
        if record is None:
            return None
        # Hand out copies so callers cannot mutate stored state
        return RestaurantRecord(**asdict(record))

    async def get_all(self) -> list[RestaurantRecord]:
        return [RestaurantRecord(**asdict(record)) for record in self._records.values()]

    async def create(self, fields: RestaurantFields) -> RestaurantRecord:
        async with self._lock:
            restaurant_id = str(next(self._ids))
            record = RestaurantRecord(**asdict(fields), id=restaurant_id)
            self._records[restaurant_id] = record

        logger.debug("Stored restaurant", restaurant_id=restaurant_id, store=self.name)
        return RestaurantRecord(**asdict(record))

    async def update(self, restaurant_id: str, fields: RestaurantFields) -> RestaurantRecord:
        restaurant_id = str(restaurant_id)
        async with self._lock:
            if restaurant_id not in self._records:
                raise RestaurantNotFoundError(restaurant_id)
            record = RestaurantRecord(**asdict(fields), id=restaurant_id)
            self._records[restaurant_id] = record

        return RestaurantRecord(**asdict(record))

    async def delete(self, restaurant_id: str) -> bool:
        async with self._lock:
            return self._records.pop(str(restaurant_id), None) is not None
