# wholesale/models/order.py
import uuid
from datetime import datetime, timezone
from decimal import Decimal

from sqlmodel import SQLModel, Field


class Order(SQLModel, table=True):
    """
    Order submitted from the RFQ cart.

    Status lifecycle:
      PENDING -> CONFIRMED -> SHIPPED
      PENDING | CONFIRMED -> CANCELLED
    """

    __tablename__ = "orders"

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
        index=True,
    )

    order_no: str = Field(
        unique=True,
        index=True,
        max_length=40,
    )

    company_id: uuid.UUID = Field(
        foreign_key="companies.id",
        index=True,
    )

    user_id: uuid.UUID = Field(
        foreign_key="users.id",
        index=True,
    )

    # STANDARD | SAMPLE
    type: str = Field(default="STANDARD")

    status: str = Field(
        default="PENDING",
        index=True,
    )

    # Sum of item totals, base currency
    total_amount: Decimal = Field(
        max_digits=14,
        decimal_places=2,
    )

    note: str | None = None

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
    )


class OrderItem(SQLModel, table=True):
    """
    Line item inside an order. `unit_price` is resolved on the server from
    the SKU tier table at submission time.
    """

    __tablename__ = "order_items"

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
        index=True,
    )

    order_id: uuid.UUID = Field(
        foreign_key="orders.id",
        index=True,
    )

    product_id: uuid.UUID = Field(foreign_key="products.id")
    sku_id: uuid.UUID = Field(foreign_key="skus.id")

    product_name: str
    sku_specs: str | None = None

    quantity: int = Field(gt=0)

    unit_price: Decimal = Field(max_digits=12, decimal_places=2)
    total_price: Decimal = Field(max_digits=14, decimal_places=2)
