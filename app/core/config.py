# app/core/config.py
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Centralized application settings loaded from environment.

    Required env vars (.env):
      - SUPABASE_URL
      - SUPABASE_KEY (anon key)

    Optional:
      - SUPABASE_SERVICE_ROLE_KEY (admin client, needed for dashboard reads)
      - DASHBOARD_TIMEZONE (labels for the daily sales chart)
      - QUERY_CACHE_TTL_SECONDS
      - NOTIFICATION_FEED_SIZE
    """

    PROJECT_NAME: str = "Shop Admin Dashboard API"
    API_V1_STR: str = "/api/v1"

    # Supabase config
    SUPABASE_URL: str
    SUPABASE_KEY: str

    # Service role key bypasses RLS (backend only)
    SUPABASE_SERVICE_ROLE_KEY: str | None = None

    # Dashboard behaviour
    DASHBOARD_TIMEZONE: str = "UTC"
    QUERY_CACHE_TTL_SECONDS: float = 60.0
    NOTIFICATION_FEED_SIZE: int = 50

    CORS_ORIGINS: list[str] = [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    """
    Cached settings loader.
    Ensures we don't re-parse .env on every import / request.
    """
    return Settings()
