"""Resolver package for the GraphQL schema.

Resolvers read the restaurant store from the request context under the
``"store"`` key, so any RestaurantStore implementation can back the schema.
"""
