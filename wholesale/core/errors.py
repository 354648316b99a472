# wholesale/core/errors.py
"""
Domain error taxonomy shared by the backend services and the storefront client.

Pricing and cart errors are local and returned to the caller. The FastAPI app
maps each class to an HTTP status (see `wholesale.main`); the storefront
client raises them after classifying backend responses.
"""


class WholesaleError(Exception):
    """Base class for every domain error."""

    status_code: int = 400

    def __init__(self, detail: str = ""):
        super().__init__(detail)
        self.detail = detail or self.__class__.__name__


class NotFound(WholesaleError):
    """Missing SKU, product, user or other resource."""

    status_code = 404


class InvalidQuantity(WholesaleError):
    """Non-positive (or non-integer) quantity at mutation or pricing time."""

    status_code = 400


class DataIntegrityError(WholesaleError):
    """Write-time rejection of inconsistent data (e.g. duplicate tier thresholds)."""

    status_code = 409


class AuthFailure(WholesaleError):
    """Expired or invalid credential."""

    status_code = 401


class TransientNetworkFailure(WholesaleError):
    """Network error or server-side failure that survived the single retry."""

    status_code = 503


class ConfigurationError(WholesaleError):
    """A required external credential or setting is missing."""

    status_code = 503


class ApiError(WholesaleError):
    """Non-2xx backend response that is not otherwise classified."""

    def __init__(self, status_code: int, detail: str = ""):
        super().__init__(detail or f"HTTP {status_code}")
        self.status_code = status_code
