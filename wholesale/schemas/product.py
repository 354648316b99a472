# wholesale/schemas/product.py
import uuid
from datetime import datetime
from decimal import Decimal

from pydantic import ConfigDict, field_validator
from sqlmodel import SQLModel, Field


class TierPriceIn(SQLModel):
    """One quantity break in a tier-price write payload."""

    model_config = ConfigDict(extra="forbid")

    min_qty: int = Field(ge=1)
    price: Decimal = Field(gt=0, max_digits=12, decimal_places=2)


class TierPriceRead(SQLModel):
    min_qty: int
    price: Decimal


class TierPricesUpdate(SQLModel):
    """
    Wholesale replacement of a SKU's tier table.
    An empty list removes all quantity breaks.
    """

    model_config = ConfigDict(extra="forbid")

    tiers: list[TierPriceIn]


class SkuCreate(SQLModel):
    model_config = ConfigDict(extra="forbid")

    sku_code: str = Field(max_length=100)
    price: Decimal = Field(gt=0, max_digits=12, decimal_places=2)
    moq: int = Field(default=1, ge=1)
    stock: int = Field(default=0, ge=0)
    specs: str | None = None
    image_url: str | None = None
    tier_prices: list[TierPriceIn] = []

    @field_validator("sku_code")
    @classmethod
    def normalize_code(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("sku_code cannot be empty")
        return v


class SkuRead(SQLModel):
    id: uuid.UUID
    product_id: uuid.UUID
    sku_code: str
    price: Decimal
    moq: int
    stock: int
    specs: str | None = None
    image_url: str | None = None
    tier_prices: list[TierPriceRead] = []


class ProductCreate(SQLModel):
    """
    Payload for creating a product together with its SKUs.
    """

    model_config = ConfigDict(extra="forbid")

    title: str = Field(max_length=255)
    description: str | None = None
    base_price: Decimal = Field(gt=0, max_digits=12, decimal_places=2)
    moq: int = Field(default=1, ge=1)
    image_url: str | None = None
    size_chart_id: uuid.UUID | None = None
    is_active: bool = True
    skus: list[SkuCreate] = []

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("title cannot be empty")
        return v


class ProductSummary(SQLModel):
    """Listing row (also used for sitemap generation)."""

    id: uuid.UUID
    title: str
    base_price: Decimal
    moq: int
    image_url: str | None = None
    is_active: bool
    updated_at: datetime


class ProductRead(ProductSummary):
    description: str | None = None
    size_chart_id: uuid.UUID | None = None
    created_at: datetime
    skus: list[SkuRead] = []


class PriceQuote(SQLModel):
    """
    Unit price resolved for a SKU at a given quantity.

    `matched_min_qty` is None when no tier applies and the base price is used.
    """

    sku_id: uuid.UUID
    quantity: int
    base_price: Decimal
    unit_price: Decimal
    line_total: Decimal
    matched_min_qty: int | None = None
