"""
Main FastAPI application for the Restaurants backend
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .. import __version__
from ..config import settings
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware
from ..store.base import RestaurantStore
from ..store.factory import create_store
from ..store.seed_data import seed_sample_restaurants

# Configure logging before creating logger
configure_logging(debug=settings.debug, level=settings.log_level)
logger = get_logger(__name__)


def create_app(store: RestaurantStore | None = None, seed: bool | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        store: Store to serve; built from settings at startup when omitted
        seed: Load sample restaurants into an empty store at startup;
            defaults to settings.seed_on_startup
    """
    if seed is None:
        seed = settings.seed_on_startup

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager."""
        logger.info("Starting Restaurants API...")

        active_store = store if store is not None else create_store()
        await active_store.initialize()
        app.state.store = active_store
        logger.info("Restaurant store initialized", backend=active_store.name)

        if seed:
            await seed_sample_restaurants(active_store)

        yield

        logger.info("Shutting down Restaurants API...")
        await active_store.close()

    app = FastAPI(
        title="Restaurants API",
        description="GraphQL API for a restaurant catalogue",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )

    if store is not None:
        app.state.store = store

    app.add_middleware(LoggingContextMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check():  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        active_store: RestaurantStore = app.state.store
        ok, error = await active_store.ping()
        body = {"status": "ok" if ok else "unavailable", "store": active_store.name}
        if not ok:
            body["error"] = error
            return JSONResponse(status_code=503, content=body)
        return body

    try:
        from ..graphql.schema import create_graphql_router, validate_schema

        logger.info("Validating GraphQL schema...")
        validate_schema()

        app.include_router(create_graphql_router(), prefix="")
        logger.info("GraphQL endpoint initialized successfully", endpoint="/graphql")
    except Exception as e:  # pragma: no cover
        logger.error("Failed to initialize GraphQL endpoint", error=str(e))
        raise

    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "restaurants.api.app:create_app",
        factory=True,
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )
