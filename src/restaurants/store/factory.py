"""Factory for creating restaurant stores from configuration."""

from ..logging import get_logger
from .base import RestaurantStore
from .memory import InMemoryRestaurantStore

logger = get_logger(__name__)

STORE_BACKENDS = ("memory", "database")


def create_store(backend: str | None = None, database_url: str | None = None) -> RestaurantStore:
    """Create a restaurant store.

    Args:
        backend: Store type ('memory' or 'database'); defaults to settings.store_backend
        database_url: Overrides settings.database_url for the 'database' backend

    Returns:
        RestaurantStore instance (not yet initialized)

    Raises:
        ValueError: If the backend name is unknown
    """
    if backend is None:
        from ..config import settings

        backend = settings.store_backend

    backend = backend.lower()
    if backend == "memory":
        store: RestaurantStore = InMemoryRestaurantStore()
    elif backend == "database":
        from .database import DatabaseRestaurantStore

        store = DatabaseRestaurantStore(database_url=database_url)
    else:
        raise ValueError(
            f"Unknown store backend: {backend} (expected one of {', '.join(STORE_BACKENDS)})"
        )

    logger.info("Created restaurant store", backend=store.name)
    return store
