# wholesale/schemas/order.py
import uuid
from datetime import datetime
from decimal import Decimal
from typing import Literal

from pydantic import ConfigDict
from sqlmodel import SQLModel, Field

OrderType = Literal["STANDARD", "SAMPLE"]
OrderStatus = Literal["PENDING", "CONFIRMED", "SHIPPED", "CANCELLED"]


class OrderItemCreate(SQLModel):
    """
    One cart line submitted for ordering.

    `unit_price` is the client's estimate and is ignored: the server
    re-resolves the price from the SKU's tier table.
    """

    model_config = ConfigDict(extra="ignore")

    product_id: uuid.UUID
    sku_id: uuid.UUID
    quantity: int = Field(gt=0)
    unit_price: Decimal | None = None


class OrderCreate(SQLModel):
    model_config = ConfigDict(extra="forbid")

    type: OrderType = "STANDARD"
    note: str | None = Field(default=None, max_length=2000)
    items: list[OrderItemCreate] = Field(min_length=1)


class OrderItemRead(SQLModel):
    id: uuid.UUID
    product_id: uuid.UUID
    sku_id: uuid.UUID
    product_name: str
    sku_specs: str | None = None
    quantity: int
    unit_price: Decimal
    total_price: Decimal


class OrderRead(SQLModel):
    id: uuid.UUID
    order_no: str
    company_id: uuid.UUID
    user_id: uuid.UUID
    type: OrderType
    status: OrderStatus
    total_amount: Decimal
    note: str | None = None
    created_at: datetime
    items: list[OrderItemRead] = []
