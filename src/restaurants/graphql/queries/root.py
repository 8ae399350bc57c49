"""
Root GraphQL query definitions
"""

import strawberry

from ..types.restaurant import Restaurant


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    async def restaurant(self, info: strawberry.Info, id: strawberry.ID) -> Restaurant | None:
        """Get a restaurant by ID."""
        from ..resolvers.restaurant import resolve_restaurant_by_id

        return await resolve_restaurant_by_id(info, id)

    @strawberry.field
    async def restaurants(self, info: strawberry.Info) -> list[Restaurant]:
        """Get all restaurants."""
        from ..resolvers.restaurant import resolve_restaurants

        return await resolve_restaurants(info)
