# wholesale/models/exchange_rate.py
from datetime import datetime, timezone
from decimal import Decimal

from sqlmodel import SQLModel, Field


class ExchangeRate(SQLModel, table=True):
    """
    Rate of `currency` relative to the base currency (1 base = rate currency).
    """

    __tablename__ = "exchange_rates"

    currency: str = Field(
        primary_key=True,
        max_length=3,
        description="ISO 4217 code",
    )

    rate: Decimal = Field(
        max_digits=18,
        decimal_places=6,
        gt=0,
    )

    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
    )
