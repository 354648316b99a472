# wholesale/schemas/exchange_rate.py
from datetime import datetime
from decimal import Decimal

from pydantic import ConfigDict, field_validator
from sqlmodel import SQLModel, Field


class ExchangeRateRead(SQLModel):
    currency: str
    rate: Decimal
    updated_at: datetime | None = None


class ExchangeRateUpdate(SQLModel):
    """
    Admin upsert payload: 1 unit of base currency = `rate` units of `currency`.
    """

    model_config = ConfigDict(extra="forbid")

    currency: str = Field(min_length=3, max_length=3)
    rate: Decimal = Field(gt=0, max_digits=18, decimal_places=6)

    @field_validator("currency")
    @classmethod
    def normalize_currency(cls, v: str) -> str:
        v = v.strip().upper()
        if not v.isalpha():
            raise ValueError("currency must be a 3-letter ISO code")
        return v
