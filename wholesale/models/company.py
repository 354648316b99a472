# wholesale/models/company.py
import uuid
from datetime import datetime, timezone

from sqlmodel import SQLModel, Field


class Company(SQLModel, table=True):
    """
    Buyer company (tenant).

    A company is created together with its first ADMIN user at registration
    and starts in PENDING status until a platform admin approves it.

    Status:
      - "PENDING" | "APPROVED" | "REJECTED"
    """

    __tablename__ = "companies"

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
        index=True,
    )

    name: str = Field(
        max_length=200,
        index=True,
        description="Registered company name",
    )

    tax_id: str | None = Field(default=None, max_length=100)
    contact_email: str | None = Field(default=None, description="Main contact email")
    phone: str | None = Field(default=None, max_length=50)
    address: str | None = None
    website: str | None = None
    description: str | None = None

    status: str = Field(
        default="PENDING",
        index=True,
        description="Whitelist status: PENDING | APPROVED | REJECTED",
    )

    # Platform admin responsible for this account
    sales_rep_id: uuid.UUID | None = Field(
        default=None,
        index=True,
        description="FK-like reference to users.id (PLATFORM_ADMIN)",
    )

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Creation timestamp (UTC)",
    )
