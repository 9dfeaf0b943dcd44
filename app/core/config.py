# app/core/config.py
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Centralized application settings loaded from environment.

    Required env vars (.env):
      - DATABASE_URL (Postgres connection string; sqlite:// is accepted locally)
      - JWT_SECRET (signing secret shared with the auth provider)

    Optional:
      - DISCOVERY_APPLY_FILTERS: honor destination/date filters on the
        discovery feed (False accepts and ignores them)
      - ALLOW_DUPLICATE_MATCHES: allow several match proposals for the
        same pair of travel plans
    """

    PROJECT_NAME: str = "Travelmate API"
    API_PREFIX: str = "/api"

    DATABASE_URL: str

    # JWT verification (backend-side)
    JWT_SECRET: str
    JWT_ALG: str = "HS256"

    CORS_ORIGINS: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:5173",
    ]

    # Discovery / matching behavior
    DISCOVERY_APPLY_FILTERS: bool = True
    ALLOW_DUPLICATE_MATCHES: bool = True

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    """
    Cached settings loader.
    Ensures we don't re-parse .env on every import / request.
    """
    return Settings()
