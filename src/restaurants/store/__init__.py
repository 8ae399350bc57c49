"""Restaurant stores.

Main components:
- RestaurantStore: Abstract base class for store implementations
- InMemoryRestaurantStore: Dict-backed store for development and tests
- DatabaseRestaurantStore: SQLAlchemy-backed store
- create_store: Picks an implementation from configuration
"""

from .base import (
    Budget,
    RestaurantFields,
    RestaurantNotFoundError,
    RestaurantRecord,
    RestaurantStore,
    StoreError,
)
from .factory import create_store
from .memory import InMemoryRestaurantStore

__all__ = [
    "Budget",
    "RestaurantFields",
    "RestaurantRecord",
    "RestaurantStore",
    "StoreError",
    "RestaurantNotFoundError",
    "InMemoryRestaurantStore",
    "create_store",
]
