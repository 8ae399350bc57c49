"""Contract tests run against every restaurant store implementation."""

from dataclasses import replace

import pytest
import pytest_asyncio

from restaurants.store.base import Budget, RestaurantNotFoundError, RestaurantRecord
from restaurants.store.database import DatabaseRestaurantStore
from restaurants.store.memory import InMemoryRestaurantStore


@pytest_asyncio.fixture(params=["memory", "database"])
async def any_store(request):
    if request.param == "memory":
        store = InMemoryRestaurantStore()
    else:
        store = DatabaseRestaurantStore(database_url="sqlite://")
    await store.initialize()
    yield store
    await store.close()


@pytest.mark.asyncio
async def test_create_assigns_string_id(any_store, campus_pizza_fields):
    record = await any_store.create(campus_pizza_fields)

    assert isinstance(record, RestaurantRecord)
    assert isinstance(record.id, str) and record.id
    assert record.fields == campus_pizza_fields


@pytest.mark.asyncio
async def test_ids_are_unique(any_store, campus_pizza_fields):
    first = await any_store.create(campus_pizza_fields)
    second = await any_store.create(campus_pizza_fields)

    assert first.id != second.id


@pytest.mark.asyncio
async def test_get_returns_stored_fields(any_store, campus_pizza_fields):
    record = await any_store.create(campus_pizza_fields)

    fetched = await any_store.get(record.id)

    assert fetched == record
    assert fetched.budget is Budget.LOW


@pytest.mark.asyncio
@pytest.mark.parametrize("missing_id", ["999", "not-a-number"])
async def test_get_missing_returns_none(any_store, missing_id):
    assert await any_store.get(missing_id) is None


@pytest.mark.asyncio
async def test_get_all_in_creation_order(any_store, campus_pizza_fields):
    names = ["A", "B", "C"]
    for name in names:
        await any_store.create(replace(campus_pizza_fields, name=name))

    assert [r.name for r in await any_store.get_all()] == names


@pytest.mark.asyncio
async def test_update_replaces_every_field(any_store, campus_pizza_fields):
    record = await any_store.create(campus_pizza_fields)
    new_fields = replace(
        campus_pizza_fields,
        name="Campus Pizza & Wings",
        budget=Budget.MEDIUM,
        description="now with wings",
        rating=None,
    )

    updated = await any_store.update(record.id, new_fields)

    assert updated.id == record.id
    assert updated.fields == new_fields
    assert await any_store.get(record.id) == updated


@pytest.mark.asyncio
async def test_update_missing_raises(any_store, campus_pizza_fields):
    with pytest.raises(RestaurantNotFoundError) as exc_info:
        await any_store.update("999", campus_pizza_fields)

    assert exc_info.value.restaurant_id == "999"


@pytest.mark.asyncio
async def test_delete(any_store, campus_pizza_fields):
    record = await any_store.create(campus_pizza_fields)

    assert await any_store.delete(record.id) is True
    assert await any_store.get(record.id) is None
    assert await any_store.delete(record.id) is False


@pytest.mark.asyncio
async def test_ping(any_store):
    assert await any_store.ping() == (True, None)


@pytest.mark.asyncio
async def test_memory_store_returns_copies(campus_pizza_fields):
    store = InMemoryRestaurantStore()
    record = await store.create(campus_pizza_fields)

    record.name = "mutated"

    assert (await store.get(record.id)).name == "Campus Pizza"
    assert len(store) == 1
