"""
Input validation for restaurant mutations.
"""

from __future__ import annotations

from graphql import GraphQLError

RATING_MIN = 1
RATING_MAX = 5
RATING_ERROR_MESSAGE = "Rating must be an integer between 1-5"


class ValidationError(GraphQLError):
    """Raised when mutation input is rejected before reaching the store."""

    def __init__(self, message: str) -> None:
        super().__init__(message, extensions={"code": "BAD_USER_INPUT"})


def validate_rating(rating: float | None) -> None:
    """
    Check that a rating is null or within [1, 5].

    Only the range is checked: a fractional value such as 2.5 passes.

    Raises:
        ValidationError: If the rating is outside the allowed range
    """
    if rating is not None and (rating < RATING_MIN or rating > RATING_MAX):
        raise ValidationError(RATING_ERROR_MESSAGE)
