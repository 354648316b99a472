# wholesale/storefront/auth_store.py
import logging
from typing import Any

from pydantic import BaseModel, ConfigDict

from wholesale.storefront.state import PersistedStore

logger = logging.getLogger(__name__)


class StoredUser(BaseModel):
    """The user profile returned by /auth/login, kept next to the token."""

    model_config = ConfigDict(extra="allow")

    id: str
    email: str
    full_name: str | None = None
    role: str
    company: dict[str, Any] | None = None


class AuthState(BaseModel):
    token: str | None = None
    user: StoredUser | None = None


class AuthStore(PersistedStore[AuthState]):
    """Bearer token + current user, persisted under 'auth-storage'."""

    key = "auth-storage"
    state_model = AuthState

    @property
    def token(self) -> str | None:
        return self._state.token

    @property
    def user(self) -> StoredUser | None:
        return self._state.user

    def set_auth(self, token: str, user: dict[str, Any] | StoredUser) -> None:
        """Called after a successful login."""
        if not isinstance(user, StoredUser):
            user = StoredUser.model_validate(user)
        self._commit(AuthState(token=token, user=user))

    def logout(self) -> None:
        if self._state.token:
            logger.info("Clearing stored credential")
        self._commit(AuthState())

    def is_authenticated(self) -> bool:
        # Presence only; expiry is the backend's call
        return bool(self._state.token)
