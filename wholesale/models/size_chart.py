# wholesale/models/size_chart.py
import uuid
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import Column, JSON
from sqlmodel import SQLModel, Field


class SizeChart(SQLModel, table=True):
    """
    Size conversion table attached to products.

    `data` is free-form JSON, typically:
        {"headers": ["EU", "US", "CM"], "rows": [["40", "7", "25"], ...]}
    """

    __tablename__ = "size_charts"

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
        index=True,
    )

    name: str = Field(max_length=100)

    data: dict[str, Any] = Field(
        default_factory=dict,
        sa_column=Column(JSON, nullable=False),
    )

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
    )
