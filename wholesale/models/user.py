# wholesale/models/user.py
import uuid
from datetime import datetime, timezone

from sqlmodel import SQLModel, Field


class User(SQLModel, table=True):
    """
    Platform account.

    Role:
      - "USER"           : regular buyer inside a company
      - "ADMIN"          : company administrator (first registered user)
      - "PLATFORM_ADMIN" : operator of the marketplace

    Social accounts (google / facebook) have no password hash.
    """

    __tablename__ = "users"

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
        index=True,
    )

    email: str = Field(
        unique=True,
        index=True,
        description="Login email (unique)",
    )

    password_hash: str | None = Field(
        default=None,
        description="bcrypt hash; NULL for social-only accounts",
    )

    full_name: str | None = Field(
        default=None,
        max_length=100,
    )

    role: str = Field(
        default="USER",
        index=True,
        description="Application role: USER | ADMIN | PLATFORM_ADMIN",
    )

    company_id: uuid.UUID | None = Field(
        default=None,
        foreign_key="companies.id",
        index=True,
    )

    provider: str = Field(
        default="local",
        description="local | google | facebook",
    )

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Creation timestamp (UTC)",
    )
