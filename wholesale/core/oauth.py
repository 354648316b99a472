# wholesale/core/oauth.py
"""
Social login clients (Google, Facebook) via Authlib's Starlette integration.

A provider is only registered when its client id and secret are configured;
the auth router reports a ConfigurationError for the others.
"""
from dataclasses import dataclass
from typing import Any

from authlib.integrations.starlette_client import OAuth

from wholesale.core.config import Settings, get_settings

FACEBOOK_GRAPH = "https://graph.facebook.com/v18.0/"

SUPPORTED_PROVIDERS = ("google", "facebook")


@dataclass
class SocialProfile:
    """Identity returned by a provider after a successful callback."""

    provider: str
    email: str | None
    first_name: str = ""
    last_name: str = ""
    picture: str | None = None
    provider_id: str | None = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


def build_oauth(settings: Settings | None = None) -> OAuth:
    settings = settings or get_settings()
    oauth = OAuth()

    if settings.GOOGLE_CLIENT_ID and settings.GOOGLE_CLIENT_SECRET:
        oauth.register(
            name="google",
            client_id=settings.GOOGLE_CLIENT_ID,
            client_secret=settings.GOOGLE_CLIENT_SECRET,
            server_metadata_url="https://accounts.google.com/.well-known/openid-configuration",
            client_kwargs={"scope": "openid email profile"},
        )

    if settings.FACEBOOK_CLIENT_ID and settings.FACEBOOK_CLIENT_SECRET:
        oauth.register(
            name="facebook",
            client_id=settings.FACEBOOK_CLIENT_ID,
            client_secret=settings.FACEBOOK_CLIENT_SECRET,
            access_token_url=FACEBOOK_GRAPH + "oauth/access_token",
            authorize_url="https://www.facebook.com/v18.0/dialog/oauth",
            api_base_url=FACEBOOK_GRAPH,
            client_kwargs={"scope": "email public_profile"},
        )

    return oauth


def profile_from_google(userinfo: dict[str, Any]) -> SocialProfile:
    return SocialProfile(
        provider="google",
        email=userinfo.get("email"),
        first_name=userinfo.get("given_name") or "",
        last_name=userinfo.get("family_name") or "",
        picture=userinfo.get("picture"),
        provider_id=userinfo.get("sub"),
    )


def profile_from_facebook(data: dict[str, Any]) -> SocialProfile:
    picture = (data.get("picture") or {}).get("data", {}).get("url")
    return SocialProfile(
        provider="facebook",
        email=data.get("email"),
        first_name=data.get("first_name") or "",
        last_name=data.get("last_name") or "",
        picture=picture,
        provider_id=data.get("id"),
    )
