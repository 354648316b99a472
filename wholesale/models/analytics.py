# wholesale/models/analytics.py
import uuid
from datetime import datetime, timezone

from sqlmodel import SQLModel, Field


class AnalyticsEvent(SQLModel, table=True):
    """
    Storefront tracking event (VISIT, VIEW_PRODUCT, ADD_TO_CART,
    INITIATE_CHECKOUT, PURCHASE, ...).
    """

    __tablename__ = "analytics_events"

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
    )

    event_type: str = Field(index=True, max_length=50)

    # Anonymous visitors have no user id
    user_id: uuid.UUID | None = Field(default=None, index=True)
    session_id: str | None = Field(default=None, max_length=100)

    # Raw JSON string as sent by the client
    metadata_json: str | None = Field(default=None)

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        index=True,
    )
