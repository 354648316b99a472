# wholesale/schemas/analytics.py
import json
import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class AnalyticsEventCreate(BaseModel):
    """
    Tracking payload sent by the storefront.

    `metadata` is a JSON-encoded string (kept verbatim).
    """

    model_config = ConfigDict(extra="ignore")

    event_type: str = Field(min_length=1, max_length=50)
    user_id: uuid.UUID | None = None
    session_id: str | None = Field(default=None, max_length=100)
    metadata: str | None = None

    @field_validator("metadata")
    @classmethod
    def must_be_json(cls, v: str | None) -> str | None:
        if v is None:
            return v
        try:
            json.loads(v)
        except ValueError:
            raise ValueError("metadata must be a valid JSON string")
        return v


class AnalyticsEventRead(BaseModel):
    id: uuid.UUID
    event_type: str
    created_at: datetime


class CountPair(BaseModel):
    today: int
    total: int


class AnalyticsDashboard(BaseModel):
    visits: CountPair
    orders: CountPair
    conversion_rate: float


class FunnelStep(BaseModel):
    step: str
    count: int


class FunnelPeriod(BaseModel):
    start: datetime
    end: datetime


class FunnelData(BaseModel):
    funnel: list[FunnelStep]
    period: FunnelPeriod
