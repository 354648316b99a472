# wholesale/routers/auth.py
from urllib.parse import urlencode

from fastapi import APIRouter, Depends, Request
from fastapi.responses import RedirectResponse
from sqlmodel import Session

from wholesale.core.auth import require_auth
from wholesale.core.config import get_settings
from wholesale.core.errors import ConfigurationError, NotFound
from wholesale.core.oauth import SUPPORTED_PROVIDERS, build_oauth, profile_from_facebook, profile_from_google
from wholesale.database import get_session
from wholesale.models.user import User
from wholesale.repositories.company_repo import CompanyRepository
from wholesale.repositories.user_repo import UserRepository
from wholesale.schemas.auth import (
    LoginRequest,
    RegisterRequest,
    RegisterResponse,
    TokenResponse,
    UserProfile,
)
from wholesale.services.auth_service import AuthService

router = APIRouter(prefix="/auth", tags=["Auth"])

settings = get_settings()
service = AuthService(UserRepository(), CompanyRepository())
oauth = build_oauth(settings)


@router.post("/register", response_model=RegisterResponse)
def register(
    payload: RegisterRequest,
    session: Session = Depends(get_session),
):
    """
    Register a company and its first (ADMIN) user.
    """
    return service.register(session, payload)


@router.post("/login", response_model=TokenResponse)
def login(
    payload: LoginRequest,
    session: Session = Depends(get_session),
):
    """
    Exchange email + password for an access token and the user profile.
    """
    return service.login(session, payload)


@router.get("/profile", response_model=UserProfile)
def profile(
    session: Session = Depends(get_session),
    current_user: User = Depends(require_auth),
):
    """
    Return the authenticated user's profile.
    """
    return service.to_profile(session, current_user)


# -------- Social login --------


def _client(provider: str):
    if provider not in SUPPORTED_PROVIDERS:
        raise NotFound(f"Unknown provider {provider}")
    client = oauth.create_client(provider)
    if client is None:
        raise ConfigurationError(f"{provider} login is not configured")
    return client


@router.get("/{provider}")
async def social_login(provider: str, request: Request):
    """
    Redirect the browser to the provider's consent screen.
    """
    client = _client(provider)
    redirect_uri = str(request.url_for("social_callback", provider=provider))
    return await client.authorize_redirect(request, redirect_uri)


@router.get("/{provider}/callback", name="social_callback")
async def social_callback(
    provider: str,
    request: Request,
    session: Session = Depends(get_session),
):
    """
    Finish the OAuth dance, then send the browser back to the storefront
    with the issued token: {FRONTEND_URL}/auth/callback?token=...
    """
    client = _client(provider)
    token = await client.authorize_access_token(request)

    if provider == "google":
        social = profile_from_google(token.get("userinfo") or {})
    else:
        resp = await client.get("me?fields=id,email,first_name,last_name,picture", token=token)
        social = profile_from_facebook(resp.json())

    result = service.validate_user_by_social(session, social)
    query = urlencode({"token": result.access_token})
    return RedirectResponse(f"{settings.FRONTEND_URL}/auth/callback?{query}")
