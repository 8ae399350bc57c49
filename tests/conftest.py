"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import Generator
from typing import Any
from unittest.mock import MagicMock

import pytest
import strawberry

from restaurants.graphql.types.restaurant import RestaurantInput
from restaurants.store.base import Budget, RestaurantFields
from restaurants.store.memory import InMemoryRestaurantStore


@pytest.fixture
def store() -> InMemoryRestaurantStore:
    """Provide an empty in-memory store."""
    return InMemoryRestaurantStore()


@pytest.fixture
def mock_info(store: InMemoryRestaurantStore) -> MagicMock:
    """Create a mock GraphQL info object whose context carries the store."""
    info = MagicMock(spec=strawberry.Info)
    info.context = {"request": MagicMock(), "store": store}
    return info


@pytest.fixture
def campus_pizza_fields() -> RestaurantFields:
    return RestaurantFields(
        name="Campus Pizza",
        address="160 University Ave W #2, Waterloo, ON N2L 3E9",
        type="Pizzeria",
        budget=Budget.LOW,
        description="giant slices, affordable prices",
        rating=2,
    )


@pytest.fixture
def campus_pizza_input() -> RestaurantInput:
    return RestaurantInput(
        name="Campus Pizza",
        address="160 University Ave W #2, Waterloo, ON N2L 3E9",
        type="Pizzeria",
        budget=Budget.LOW,
        description="giant slices, affordable prices",
        rating=2,
    )


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line("markers", "unit: mark test as unit test")
