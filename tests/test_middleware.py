"""
Tests for request logging helpers
"""

from restaurants.database.connection import to_async_url
from restaurants.logging import (
    clear_request_context,
    generate_request_id,
    get_request_id,
    set_request_context,
)
from restaurants.middleware import operation_name_from_payload, sanitize_query_params


def test_sanitize_query_params():
    params = {"access_token": "abc", "page": "2", "API_KEY": "k"}

    assert sanitize_query_params(params) == {
        "access_token": "[REDACTED]",
        "page": "2",
        "API_KEY": "[REDACTED]",
    }


def test_operation_name_prefers_explicit_name():
    assert operation_name_from_payload({"operationName": "Lookup", "query": "{ x }"}) == "Lookup"


def test_operation_name_parsed_from_query():
    payload = {"query": "mutation CreateRestaurant($r: RestaurantInput!) { x }"}

    assert operation_name_from_payload(payload) == "mutation:CreateRestaurant"
    assert operation_name_from_payload({"query": "query Everything { x }"}) == "Everything"


def test_operation_name_fallbacks():
    assert operation_name_from_payload({"query": "{ restaurants { id } }"}) == "unnamed_operation"
    assert operation_name_from_payload({"query": "query IntrospectionQuery { __schema }"}) == (
        "__introspection"
    )
    assert operation_name_from_payload({}) is None


def test_request_context_round_trip():
    set_request_context(request_id="req-123")
    assert get_request_id() == "req-123"

    clear_request_context()
    assert get_request_id() is None


def test_generated_request_ids_are_unique():
    ids = {generate_request_id() for _ in range(100)}

    assert len(ids) == 100


def test_async_url_rewrites():
    assert to_async_url("postgresql://u:p@db/r") == "postgresql+asyncpg://u:p@db/r"
    assert to_async_url("sqlite:///./restaurants.db") == "sqlite+aiosqlite:///./restaurants.db"
    assert to_async_url("sqlite+aiosqlite://") == "sqlite+aiosqlite://"
