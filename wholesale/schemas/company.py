# wholesale/schemas/company.py
import uuid
from datetime import datetime
from typing import Literal

from pydantic import ConfigDict
from sqlmodel import SQLModel

CompanyStatus = Literal["PENDING", "APPROVED", "REJECTED"]


class SalesRepRead(SQLModel):
    id: uuid.UUID
    full_name: str | None = None
    email: str


class CompanyRead(SQLModel):
    id: uuid.UUID
    name: str
    tax_id: str | None = None
    contact_email: str | None = None
    phone: str | None = None
    address: str | None = None
    website: str | None = None
    description: str | None = None
    status: str
    sales_rep: SalesRepRead | None = None
    user_count: int = 0
    created_at: datetime


class CompanyStatusUpdate(SQLModel):
    model_config = ConfigDict(extra="forbid")

    status: CompanyStatus


class SalesRepAssign(SQLModel):
    model_config = ConfigDict(extra="forbid")

    sales_rep_id: uuid.UUID


class PlatformDashboardStats(SQLModel):
    total_companies: int
    pending_companies: int
    total_orders: int
    total_users: int
