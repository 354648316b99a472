# wholesale/storefront/analytics.py
import json
import logging
import secrets
import time
from typing import Any

from wholesale.core.errors import WholesaleError
from wholesale.storefront.api import StorefrontApi
from wholesale.storefront.auth_store import AuthStore

logger = logging.getLogger(__name__)


def new_session_id() -> str:
    """e.g. sess_k3j9x0a1b2c3_1718000000000"""
    return f"sess_{secrets.token_hex(6)}_{int(time.time() * 1000)}"


class AnalyticsTracker:
    """
    Fire-and-forget event tracking (POST /analytics/track).

    One session id per tracker instance. Failures are logged, never raised.
    """

    def __init__(self, api: StorefrontApi, auth: AuthStore | None = None, session_id: str | None = None):
        self.api = api
        self.auth = auth
        self.session_id = session_id or new_session_id()

    def track_event(self, event_type: str, metadata: dict[str, Any] | None = None) -> bool:
        user = self.auth.user if self.auth is not None else None
        payload = {
            "event_type": event_type,
            "user_id": user.id if user else None,
            "metadata": json.dumps(metadata or {}, default=str),
            "session_id": self.session_id,
        }
        try:
            self.api.track_event(payload)
        except WholesaleError as e:
            logger.error("Analytics tracking failed for %s: %s", event_type, e)
            return False
        return True
