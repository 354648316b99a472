# wholesale/storefront/config.py
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class StorefrontSettings(BaseSettings):
    """
    Storefront client settings, read from STOREFRONT_* environment variables.

    e.g. STOREFRONT_API_URL=https://api.example.com
    """

    API_URL: str = "http://127.0.0.1:3001"
    APP_URL: str = "https://soletrade.com"

    # Directory holding one JSON file per persisted store
    STATE_DIR: str = "./.storefront"

    BASE_CURRENCY: str = "USD"
    LOCALE: str = "en_US"

    LOGIN_PATH: str = "/login"
    RETRY_DELAY_SECONDS: float = 0.3
    REQUEST_TIMEOUT_SECONDS: float = 10.0

    model_config = SettingsConfigDict(env_prefix="STOREFRONT_", env_file=".env", extra="ignore")


@lru_cache
def get_storefront_settings() -> StorefrontSettings:
    return StorefrontSettings()
