"""
Restaurant GraphQL type definitions
"""

import strawberry

from ...store.base import Budget as BudgetTier
from ...store.base import RestaurantFields, RestaurantRecord

Budget = strawberry.enum(BudgetTier, name="Budget", description="Ordinal cost tier.")


@strawberry.type
class Restaurant:
    """Restaurant type for GraphQL API."""

    id: strawberry.ID
    name: str
    address: str
    type: str
    budget: Budget
    description: str
    rating: int | None

    @classmethod
    def from_record(cls, record: RestaurantRecord) -> "Restaurant":
        return cls(
            id=strawberry.ID(record.id),
            name=record.name,
            address=record.address,
            type=record.type,
            budget=record.budget,
            description=record.description,
            rating=record.rating,
        )


@strawberry.input
class RestaurantInput:
    """Full field set for creating or replacing a restaurant."""

    name: str
    address: str
    type: str
    budget: Budget
    description: str
    rating: int | None = None

    def to_fields(self) -> RestaurantFields:
        return RestaurantFields(
            name=self.name,
            address=self.address,
            type=self.type,
            budget=self.budget,
            description=self.description,
            rating=self.rating,
        )
