# wholesale/core/supabase_client.py
from functools import lru_cache

from supabase import create_client, Client

from wholesale.core.config import get_settings
from wholesale.core.errors import ConfigurationError


@lru_cache
def supabase_admin() -> Client:
    """
    Create a Supabase client with the service role key.

    Used for uploading to the public assets bucket from the backend.

    WARNING:
      - Never expose service role key to frontend.
      - Only backend should call this.

    Raises:
        ConfigurationError: if SUPABASE_URL or SUPABASE_SERVICE_ROLE_KEY is not set.
    """
    settings = get_settings()
    if not settings.SUPABASE_URL or not settings.SUPABASE_SERVICE_ROLE_KEY:
        raise ConfigurationError("Missing SUPABASE_URL / SUPABASE_SERVICE_ROLE_KEY in .env")
    return create_client(settings.SUPABASE_URL, settings.SUPABASE_SERVICE_ROLE_KEY)
