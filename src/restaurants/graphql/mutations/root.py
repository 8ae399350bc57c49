"""
Root GraphQL mutation definitions
"""

import strawberry

from ..types.restaurant import Restaurant, RestaurantInput


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    @strawberry.mutation(name="createRestaurant")
    async def create_restaurant(
        self, info: strawberry.Info, restaurant: RestaurantInput
    ) -> Restaurant:
        """Create a new restaurant."""
        from ..resolvers.restaurant import create_restaurant

        return await create_restaurant(info, restaurant)

    @strawberry.mutation(name="updateRestaurant")
    async def update_restaurant(
        self, info: strawberry.Info, id: strawberry.ID, restaurant: RestaurantInput
    ) -> Restaurant:
        """Replace every field of an existing restaurant."""
        from ..resolvers.restaurant import update_restaurant

        return await update_restaurant(info, id, restaurant)

    @strawberry.mutation(name="deleteRestaurant")
    async def delete_restaurant(self, info: strawberry.Info, id: strawberry.ID) -> bool:
        """Delete a restaurant."""
        from ..resolvers.restaurant import delete_restaurant

        return await delete_restaurant(info, id)
