"""
Tests for settings loading
"""

from restaurants.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("RESTAURANTS_STORE_BACKEND", raising=False)

    settings = Settings(_env_file=None)

    assert settings.store_backend == "memory"
    assert settings.api_port == 8088
    assert settings.seed_on_startup is True


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("RESTAURANTS_STORE_BACKEND", "database")
    monkeypatch.setenv("RESTAURANTS_DATABASE_URL", "postgresql://localhost/restaurants")
    monkeypatch.setenv("RESTAURANTS_SEED_ON_STARTUP", "false")

    settings = Settings(_env_file=None)

    assert settings.store_backend == "database"
    assert settings.database_url == "postgresql://localhost/restaurants"
    assert settings.seed_on_startup is False
