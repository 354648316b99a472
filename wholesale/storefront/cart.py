# wholesale/storefront/cart.py
"""
RFQ cart (the "cart aggregator").

Lines are keyed by the composite identity "<product_id>-<sku_id>". Adding an
identity that is already present merges quantities and keeps the existing
line's captured price and display fields.
"""
from decimal import Decimal
from typing import Any, Literal

from pydantic import BaseModel, Field

from wholesale.core.pricing import ensure_quantity, to_decimal
from wholesale.storefront.state import PersistedStore

CartType = Literal["STANDARD", "SAMPLE"]


class CartItem(BaseModel):
    id: str
    product_id: str
    product_name: str
    sku_id: str
    sku_code: str | None = None
    color: str | None = None
    size: str | None = None
    # e.g. "Color: Red, Size: 42"
    specs: str | None = None
    # not constrained: update_quantity stores whatever it is given
    quantity: int
    # estimated unit price captured when the line was added
    price: Decimal
    image: str = ""
    type: CartType = "STANDARD"

    @staticmethod
    def make_id(product_id: Any, sku_id: Any) -> str:
        return f"{product_id}-{sku_id}"


class CartState(BaseModel):
    items: list[CartItem] = Field(default_factory=list)


class CartStore(PersistedStore[CartState]):
    key = "rfq-cart-storage"
    state_model = CartState

    @property
    def items(self) -> list[CartItem]:
        return [item.model_copy() for item in self._state.items]

    def get_item(self, item_id: str) -> CartItem | None:
        for item in self._state.items:
            if item.id == item_id:
                return item.model_copy()
        return None

    def add_item(self, item: CartItem) -> None:
        """
        Append `item`, or merge its quantity into the line with the same id.

        Raises:
            InvalidQuantity: if item.quantity is not a positive integer.
        """
        ensure_quantity(item.quantity)

        items = []
        merged = False
        for existing in self._state.items:
            if existing.id == item.id:
                existing = existing.model_copy(
                    update={"quantity": existing.quantity + item.quantity}
                )
                merged = True
            items.append(existing)
        if not merged:
            items.append(item.model_copy())

        self._commit(CartState(items=items))

    def remove_item(self, item_id: str) -> None:
        items = [item for item in self._state.items if item.id != item_id]
        self._commit(CartState(items=items))

    def update_quantity(self, item_id: str, quantity: int) -> None:
        """Replace a line's quantity. Unknown ids are ignored; 0 and negatives are kept."""
        items = [
            item.model_copy(update={"quantity": quantity}) if item.id == item_id else item
            for item in self._state.items
        ]
        self._commit(CartState(items=items))

    def clear_cart(self) -> None:
        self._commit(CartState())

    def total_items(self) -> int:
        return sum(item.quantity for item in self._state.items)

    def total_price(self) -> Decimal:
        return sum(
            (to_decimal(item.price) * item.quantity for item in self._state.items),
            Decimal("0"),
        )

    def cart_type(self) -> CartType | None:
        """Order type of the cart, taken from its first line."""
        if not self._state.items:
            return None
        return self._state.items[0].type

    def to_order_payload(self, note: str | None = None) -> dict[str, Any]:
        """Body for POST /orders. Unit prices are estimates; the server re-prices."""
        return {
            "type": self.cart_type() or "STANDARD",
            "note": note,
            "items": [
                {
                    "product_id": item.product_id,
                    "sku_id": item.sku_id,
                    "quantity": item.quantity,
                    "unit_price": str(item.price),
                }
                for item in self._state.items
            ],
        }
