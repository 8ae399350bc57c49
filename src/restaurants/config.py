"""
Configuration management for the Restaurants backend
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Store
    store_backend: str = "memory"  # 'memory', 'database'
    seed_on_startup: bool = True

    # Database (only used by the 'database' store backend)
    database_url: str = "sqlite:///./restaurants.db"
    database_pool_size: int = 10
    database_max_overflow: int = 20
    sql_echo: bool = False

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = 8088
    api_reload: bool = False
    cors_origins: list[str] = ["http://localhost:3000"]

    # Environment
    environment: str = "development"  # 'development', 'staging', 'production'
    debug: bool = True
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "RESTAURANTS_"
        case_sensitive = False


# Global settings instance
settings = Settings()
