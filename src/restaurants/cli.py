#!/usr/bin/env python3
"""
Main CLI entry point for the Restaurants backend server.
"""

import asyncio
import os
import sys

import click
import uvicorn

from restaurants import __version__
from restaurants.logging import configure_logging, get_logger
from restaurants.store.factory import STORE_BACKENDS, create_store

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="restaurants")
def cli() -> None:
    """Restaurants CLI - run the server and manage stored restaurants."""
    pass


@cli.command()
@click.option("--host", default="0.0.0.0", help="Host to bind to (default: 0.0.0.0)")
@click.option("--port", default=8088, type=int, help="Port to bind to (default: 8088)")
@click.option("--reload", is_flag=True, default=False, help="Enable auto-reload for development")
@click.option(
    "--store",
    "store_backend",
    type=click.Choice(STORE_BACKENDS),
    default=None,
    help="Store backend (default: RESTAURANTS_STORE_BACKEND or memory)",
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(host: str, port: int, reload: bool, store_backend: str | None, log_level: str) -> None:
    """Start the Restaurants API server."""
    configure_logging(debug=(log_level == "debug"))

    logger.info(
        "Starting Restaurants API server",
        host=host,
        port=port,
        reload=reload,
        store=store_backend,
        log_level=log_level,
    )

    # The app reads settings at import time, so pass choices through the environment
    if log_level == "debug":
        os.environ["RESTAURANTS_DEBUG"] = "true"
    else:
        os.environ.setdefault("RESTAURANTS_DEBUG", "false")
    os.environ["RESTAURANTS_LOG_LEVEL"] = log_level
    if store_backend:
        os.environ["RESTAURANTS_STORE_BACKEND"] = store_backend

    try:
        uvicorn.run(
            "restaurants.api.app:create_app",
            factory=True,
            host=host,
            port=port,
            reload=reload,
            log_level=log_level,
            access_log=True,
        )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command()
@click.option("--database-url", default=None, help="Database URL (default: settings)")
@click.option("--force", is_flag=True, default=False, help="Seed even if restaurants exist")
def seed(database_url: str | None, force: bool) -> None:
    """Seed the database with sample restaurants."""
    from restaurants.store.seed_data import seed_sample_restaurants

    configure_logging()

    async def do_seed():
        store = create_store("database", database_url=database_url)
        try:
            await store.initialize()
            created = await seed_sample_restaurants(store, force=force)
        finally:
            await store.close()
        return created

    try:
        created = asyncio.run(do_seed())
    except Exception as e:
        logger.error("Failed to seed database", error=str(e))
        click.echo(f"✗ Error seeding database: {e}", err=True)
        sys.exit(1)

    if created:
        click.echo(f"✓ Seeded {len(created)} restaurant(s)")
    else:
        click.echo("Database already has restaurants; nothing seeded (use --force)")


@cli.command("list")
@click.option("--database-url", default=None, help="Database URL (default: settings)")
def list_restaurants(database_url: str | None) -> None:
    """List all restaurants in the database."""
    configure_logging()

    async def do_list():
        store = create_store("database", database_url=database_url)
        try:
            await store.initialize()
            return await store.get_all()
        finally:
            await store.close()

    try:
        records = asyncio.run(do_list())
    except Exception as e:
        logger.error("Failed to list restaurants", error=str(e))
        click.echo(f"✗ Error listing restaurants: {e}", err=True)
        sys.exit(1)

    if not records:
        click.echo("No restaurants found.")
        return

    click.echo(f"Found {len(records)} restaurant(s):")
    click.echo()
    for r in records:
        rating = r.rating if r.rating is not None else "unrated"
        click.echo(f"  ID: {r.id}")
        click.echo(f"  Name: {r.name}")
        click.echo(f"  Address: {r.address}")
        click.echo(f"  Type: {r.type}  Budget: {r.budget.value}  Rating: {rating}")
        click.echo()


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    cli()
