"""Core store interface and record types."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum


class Budget(Enum):
    """Ordinal cost tier of a restaurant."""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


@dataclass
class RestaurantFields:
    """The full, replaceable field set of a restaurant."""

    name: str
    address: str
    type: str
    budget: Budget
    description: str
    rating: float | None = None


@dataclass
class RestaurantRecord(RestaurantFields):
    """A stored restaurant. ``id`` is assigned by the store and never changes."""

    id: str = ""

    @property
    def fields(self) -> RestaurantFields:
        return RestaurantFields(
            name=self.name,
            address=self.address,
            type=self.type,
            budget=self.budget,
            description=self.description,
            rating=self.rating,
        )


class StoreError(Exception):
    """Base exception for store operations."""

    pass


class RestaurantNotFoundError(StoreError):
    """No restaurant exists with the requested id."""

    def __init__(self, restaurant_id: str) -> None:
        super().__init__(f"Restaurant not found: {restaurant_id}")
        self.restaurant_id = restaurant_id


class RestaurantStore(ABC):
    """Abstract base class for all restaurant stores."""

    name: str = "abstract"

    async def initialize(self) -> None:
        """Prepare backing resources. Called once at application startup."""
        return None

    async def close(self) -> None:
        """Release backing resources. Called once at application shutdown."""
        return None

    async def ping(self) -> tuple[bool, str | None]:
        """Report whether the store can serve requests, with an error message if not."""
        return True, None

    @abstractmethod
    async def get(self, restaurant_id: str) -> RestaurantRecord | None:
        """Return the restaurant with the given id, or None if there is none."""
        pass

    @abstractmethod
    async def get_all(self) -> list[RestaurantRecord]:
        """Return every stored restaurant."""
        pass

    @abstractmethod
    async def create(self, fields: RestaurantFields) -> RestaurantRecord:
        """Store a new restaurant and return it with its assigned id."""
        pass

    @abstractmethod
    async def update(self, restaurant_id: str, fields: RestaurantFields) -> RestaurantRecord:
        """Replace every field of an existing restaurant.

        Raises:
            RestaurantNotFoundError: If no restaurant has the given id
        """
        pass

    @abstractmethod
    async def delete(self, restaurant_id: str) -> bool:
        """Remove a restaurant. Returns False when the id did not exist."""
        pass
