# wholesale/storefront/api.py
from typing import Any, BinaryIO

from wholesale.storefront.auth_store import AuthStore
from wholesale.storefront.cart import CartStore
from wholesale.storefront.http import ApiClient


class StorefrontApi:
    """
    Typed entry points for the backend endpoints the storefront uses.

    Every call goes through the ApiClient pipeline, so errors surface as
    domain errors (NotFound, AuthFailure, TransientNetworkFailure, ApiError).
    """

    def __init__(self, client: ApiClient, auth: AuthStore | None = None):
        self.client = client
        self.auth = auth

    # ----- Catalog -----

    def list_products(self, limit: int = 1000, skip: int = 0) -> list[dict[str, Any]]:
        return self.client.get("/products", params={"limit": limit, "skip": skip})

    def get_product(self, product_id: str) -> dict[str, Any]:
        return self.client.get(f"/products/{product_id}")

    def get_size_chart(self, chart_id: str) -> dict[str, Any]:
        return self.client.get(f"/size-charts/{chart_id}")

    def get_exchange_rates(self) -> list[dict[str, Any]]:
        return self.client.get("/exchange-rates")

    # ----- Analytics -----

    def track_event(self, payload: dict[str, Any]) -> dict[str, Any]:
        return self.client.post("/analytics/track", json=payload)

    # ----- Auth -----

    def login(self, email: str, password: str) -> dict[str, Any]:
        """
        POST /auth/login; on success the token and user land in the auth store.
        """
        data = self.client.post("/auth/login", json={"email": email, "password": password})
        if self.auth is not None:
            self.auth.set_auth(data["access_token"], data["user"])
        return data

    def get_profile(self) -> dict[str, Any]:
        return self.client.get("/auth/profile")

    # ----- Platform -----

    def list_companies(self, sales_rep_id: str | None = None) -> list[dict[str, Any]]:
        params = {"sales_rep_id": sales_rep_id} if sales_rep_id else None
        return self.client.get("/platform/companies", params=params)

    # ----- Uploads -----

    def upload_file(
        self,
        filename: str,
        content: bytes | BinaryIO,
        content_type: str = "application/octet-stream",
    ) -> str:
        """Multipart upload (field `file`); returns the public URL."""
        data = self.client.post("/uploads", files={"file": (filename, content, content_type)})
        return data["url"]

    # ----- Orders -----

    def submit_order(self, cart: CartStore, note: str | None = None) -> dict[str, Any]:
        """Submit the cart as an order. The cart itself is left untouched."""
        return self.client.post("/orders", json=cart.to_order_payload(note))
