# wholesale/core/config.py
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Centralized backend settings loaded from environment.

    Required env vars (.env):
      - JWT_SECRET (signing secret for access tokens)

    Optional:
      - DATABASE_URL (defaults to a local SQLite file)
      - SUPABASE_URL + SUPABASE_SERVICE_ROLE_KEY (uploads go to Supabase
        Storage when both are set, otherwise to UPLOAD_DIR)
      - GOOGLE_* / FACEBOOK_* (social login)
      - SMTP_* (outgoing email; notifications are only logged when
        SMTP_HOST is unset)
    """

    PROJECT_NAME: str = "Wholesale B2B API"
    API_PREFIX: str = ""

    DATABASE_URL: str = "sqlite:///./wholesale.db"

    # JWT issuing / verification
    JWT_SECRET: str
    JWT_ALG: str = "HS256"
    JWT_EXPIRE_MINUTES: int = 60 * 24

    FRONTEND_URL: str = "http://localhost:3000"
    BACKEND_URL: str = "http://localhost:3001"
    CORS_ORIGINS: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:3002",
    ]

    # All stored monetary amounts are denominated in this currency
    BASE_CURRENCY: str = "USD"

    # Uploads
    UPLOAD_DIR: str = "./uploads"
    MAX_UPLOAD_BYTES: int = 5 * 1024 * 1024
    SUPABASE_URL: str | None = None
    SUPABASE_SERVICE_ROLE_KEY: str | None = None
    SUPABASE_BUCKET: str = "assets"

    # Social login
    GOOGLE_CLIENT_ID: str | None = None
    GOOGLE_CLIENT_SECRET: str | None = None
    FACEBOOK_CLIENT_ID: str | None = None
    FACEBOOK_CLIENT_SECRET: str | None = None

    # Outgoing email
    SMTP_HOST: str | None = None
    SMTP_PORT: int = 587
    SMTP_USERNAME: str | None = None
    SMTP_PASSWORD: str | None = None
    SMTP_FROM_EMAIL: str | None = None
    SMTP_FROM_NAME: str = "SoleTrade"
    SMTP_USE_TLS: bool = True
    SMTP_USE_SSL: bool = False

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def use_supabase_storage(self) -> bool:
        return bool(self.SUPABASE_URL and self.SUPABASE_SERVICE_ROLE_KEY)


@lru_cache
def get_settings() -> Settings:
    """
    Cached settings loader.
    Ensures we don't re-parse .env on every import / request.
    """
    return Settings()
