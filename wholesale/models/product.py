# wholesale/models/product.py
import uuid
from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy import UniqueConstraint
from sqlmodel import SQLModel, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Product(SQLModel, table=True):
    """
    Catalog product. Purchasable variants live in `Sku`.
    """

    __tablename__ = "products"

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
        index=True,
    )

    title: str = Field(
        max_length=255,
        index=True,
        description="Display name",
    )

    description: str | None = Field(
        default=None,
        description="Optional long description / HTML",
    )

    base_price: Decimal = Field(
        max_digits=12,
        decimal_places=2,
        description="'From' price shown on listings (base currency)",
    )

    moq: int = Field(
        default=1,
        ge=1,
        description="Minimum order quantity",
    )

    image_url: str | None = None

    size_chart_id: uuid.UUID | None = Field(
        default=None,
        foreign_key="size_charts.id",
    )

    is_active: bool = Field(
        default=True,
        index=True,
        description="Whether this product is visible on the storefront",
    )

    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)


class Sku(SQLModel, table=True):
    """
    Purchasable variant of a product (e.g. a size/color combination).

    `price` is the base unit price; quantity breaks live in `SkuTierPrice`.
    """

    __tablename__ = "skus"

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
        index=True,
    )

    product_id: uuid.UUID = Field(
        foreign_key="products.id",
        index=True,
    )

    sku_code: str = Field(
        max_length=100,
        unique=True,
        index=True,
    )

    price: Decimal = Field(
        max_digits=12,
        decimal_places=2,
        description="Base unit price (base currency)",
    )

    moq: int = Field(default=1, ge=1)
    stock: int = Field(default=0, ge=0)

    specs: str | None = Field(
        default=None,
        description='Display spec string, e.g. "Color: Red, Size: 42"',
    )

    image_url: str | None = None


class SkuTierPrice(SQLModel, table=True):
    """
    One quantity break of a SKU: buying >= min_qty units costs `price` each.

    (sku_id, min_qty) is unique, so duplicate thresholds are rejected at
    write time by the database as well as by validation.
    """

    __tablename__ = "sku_tier_prices"
    __table_args__ = (UniqueConstraint("sku_id", "min_qty", name="uq_sku_tier_min_qty"),)

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
    )

    sku_id: uuid.UUID = Field(
        foreign_key="skus.id",
        index=True,
    )

    min_qty: int = Field(ge=1)

    price: Decimal = Field(
        max_digits=12,
        decimal_places=2,
    )
