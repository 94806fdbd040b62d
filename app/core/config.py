# app/core/config.py
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Centralized application settings loaded from environment.

    All values have defaults so the service runs without a .env file.

    Notable env vars (.env):
      - DATABASE_URL (SQLAlchemy URL for the key/value storage table)
      - SIMULATED_LATENCY_MS (delay applied to every catalog/order call)
      - SHIPPING_FEE (flat fee added at checkout)
    """

    PROJECT_NAME: str = "Marketplace API"
    API_V1_STR: str = "/api/v1"

    # Storage
    DATABASE_URL: str = "sqlite:///./marketplace.db"
    SEED_ON_STARTUP: bool = True

    # Catalog / ledger behaviour
    SIMULATED_LATENCY_MS: int = 300
    SHIPPING_FEE: float = 5.0

    CORS_ORIGINS: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:5173",
    ]

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    """
    Cached settings loader.
    Ensures we don't re-parse .env on every import / request.
    """
    return Settings()
