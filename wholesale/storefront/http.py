# wholesale/storefront/http.py
"""
Authenticated HTTP client for the storefront.

Cross-cutting behavior is an ordered middleware pipeline around the
transport; each middleware is `(request, call_next) -> response`:

  1. AttachCredential   - bearer token from the auth store, when present
  2. HandleUnauthorized - 401 => logout + navigate to the login path
  3. RetryOnce          - 5xx / network failure => wait, resend once
                          (not when the backend reports ConfigurationError)

After the pipeline, responses are classified into domain errors
(401 AuthFailure, 404 NotFound, a reported ConfigurationError,
other 5xx TransientNetworkFailure, other non-2xx ApiError).
"""
import logging
import time
from functools import partial
from typing import Any, Callable, Iterable, Protocol

import requests

from wholesale.core.errors import (
    ApiError,
    AuthFailure,
    ConfigurationError,
    NotFound,
    TransientNetworkFailure,
)
from wholesale.storefront.auth_store import AuthStore

logger = logging.getLogger(__name__)

Handler = Callable[[requests.PreparedRequest], requests.Response]
Navigate = Callable[[str], None]


class Middleware(Protocol):
    def __call__(
        self, request: requests.PreparedRequest, call_next: Handler
    ) -> requests.Response: ...


def _error_name(response: requests.Response) -> str | None:
    """Domain error class the backend reported in the body, if any."""
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and isinstance(body.get("error"), str):
        return body["error"]
    return None


def _is_server_error(response: requests.Response) -> bool:
    return 500 <= response.status_code < 600


def _is_retryable(response: requests.Response) -> bool:
    # a missing server credential does not go away on a resend
    return _is_server_error(response) and _error_name(response) != "ConfigurationError"


class AttachCredential:
    def __init__(self, auth: AuthStore):
        self.auth = auth

    def __call__(self, request, call_next):
        token = self.auth.token
        if token:
            request.headers["Authorization"] = f"Bearer {token}"
        return call_next(request)


class HandleUnauthorized:
    """On 401: clear the stored credential, then send the user to the login page."""

    def __init__(self, auth: AuthStore, navigate: Navigate | None = None, login_path: str = "/login"):
        self.auth = auth
        self.navigate = navigate
        self.login_path = login_path

    def __call__(self, request, call_next):
        response = call_next(request)
        if response.status_code == 401:
            logger.warning("401 from %s %s, forcing logout", request.method, request.url)
            try:
                self.auth.logout()
            finally:
                if self.navigate is not None:
                    self.navigate(self.login_path)
        return response


class RetryOnce:
    """
    Resend once, after `delay` seconds, on a 5xx or a network failure. Never twice.

    A 5xx the backend reports as ConfigurationError is returned as is.
    """

    def __init__(self, delay: float = 0.3, sleep: Callable[[float], None] = time.sleep):
        self.delay = delay
        self.sleep = sleep

    def __call__(self, request, call_next):
        try:
            response = call_next(request.copy())
        except requests.RequestException as e:
            logger.warning("%s %s failed (%s), retrying once", request.method, request.url, e)
        else:
            if not _is_retryable(response):
                return response
            logger.warning(
                "%s %s returned %s, retrying once",
                request.method,
                request.url,
                response.status_code,
            )

        self.sleep(self.delay)
        return call_next(request.copy())


def _detail(response: requests.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text or response.reason or ""
    if isinstance(body, dict) and "detail" in body:
        return str(body["detail"])
    return str(body)


class ApiClient:
    """
    Thin wrapper over a requests.Session that runs every call through the
    middleware pipeline and returns the decoded JSON body.

    `transport` replaces the network call (tests pass a fake).
    """

    def __init__(
        self,
        base_url: str,
        middlewares: Iterable[Middleware] = (),
        session: requests.Session | None = None,
        timeout: float = 10.0,
        transport: Handler | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.middlewares = list(middlewares)
        self.session = session or requests.Session()
        self.timeout = timeout
        self._transport = transport or self._send

    def _send(self, request: requests.PreparedRequest) -> requests.Response:
        return self.session.send(request, timeout=self.timeout)

    def _pipeline(self) -> Handler:
        handler = self._transport
        for middleware in reversed(self.middlewares):
            handler = partial(middleware, call_next=handler)
        return handler

    def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
        files: dict[str, Any] | None = None,
    ) -> Any:
        prepared = self.session.prepare_request(
            requests.Request(
                method,
                f"{self.base_url}{path}",
                params=params,
                json=json,
                files=files,
            )
        )
        try:
            response = self._pipeline()(prepared)
        except requests.RequestException as e:
            raise TransientNetworkFailure(f"{method} {path}: {e}") from e
        return self._unwrap(response)

    @staticmethod
    def _unwrap(response: requests.Response) -> Any:
        status = response.status_code
        if 200 <= status < 300:
            if not response.content:
                return None
            return response.json()

        detail = _detail(response)
        if status == 401:
            raise AuthFailure(detail)
        if status == 404:
            raise NotFound(detail)
        if _error_name(response) == "ConfigurationError":
            raise ConfigurationError(detail)
        if status >= 500:
            raise TransientNetworkFailure(detail)
        raise ApiError(status, detail)

    def get(self, path: str, **kwargs) -> Any:
        return self.request("GET", path, **kwargs)

    def post(self, path: str, **kwargs) -> Any:
        return self.request("POST", path, **kwargs)

    def put(self, path: str, **kwargs) -> Any:
        return self.request("PUT", path, **kwargs)

    def patch(self, path: str, **kwargs) -> Any:
        return self.request("PATCH", path, **kwargs)


def build_client(
    base_url: str,
    auth: AuthStore,
    navigate: Navigate | None = None,
    *,
    login_path: str = "/login",
    retry_delay: float = 0.3,
    timeout: float = 10.0,
    sleep: Callable[[float], None] = time.sleep,
    transport: Handler | None = None,
) -> ApiClient:
    """ApiClient with the standard pipeline: credential, 401 handling, single retry."""
    return ApiClient(
        base_url,
        middlewares=[
            AttachCredential(auth),
            HandleUnauthorized(auth, navigate, login_path),
            RetryOnce(retry_delay, sleep),
        ],
        timeout=timeout,
        transport=transport,
    )
