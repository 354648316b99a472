# wholesale/schemas/size_chart.py
import uuid
from datetime import datetime
from typing import Any

from pydantic import ConfigDict
from sqlmodel import SQLModel, Field


class SizeChartCreate(SQLModel):
    model_config = ConfigDict(extra="forbid")

    name: str = Field(min_length=1, max_length=100)
    data: dict[str, Any] = {}


class SizeChartUpdate(SQLModel):
    model_config = ConfigDict(extra="forbid")

    name: str | None = Field(default=None, min_length=1, max_length=100)
    data: dict[str, Any] | None = None


class SizeChartRead(SQLModel):
    id: uuid.UUID
    name: str
    data: dict[str, Any]
    created_at: datetime
