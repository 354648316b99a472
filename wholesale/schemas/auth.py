# wholesale/schemas/auth.py
import uuid
from typing import Literal

from pydantic import EmailStr, ConfigDict, field_validator
from sqlmodel import SQLModel, Field

Role = Literal["USER", "ADMIN", "PLATFORM_ADMIN"]


class RegisterRequest(SQLModel):
    """
    B2B onboarding payload: creates a company and its first ADMIN user.
    """

    model_config = ConfigDict(extra="forbid")

    email: EmailStr
    password: str = Field(min_length=8, max_length=72)
    full_name: str | None = Field(default=None, max_length=100)
    company_name: str = Field(max_length=200)

    @field_validator("company_name")
    @classmethod
    def normalize_company_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("company_name cannot be empty")
        return v


class LoginRequest(SQLModel):
    model_config = ConfigDict(extra="forbid")

    email: EmailStr
    password: str


class CompanyBrief(SQLModel):
    id: uuid.UUID
    name: str


class UserProfile(SQLModel):
    """Public view of a user, as returned by login and /auth/profile."""

    id: uuid.UUID
    email: str
    full_name: str | None = None
    role: Role
    company: CompanyBrief | None = None


class TokenResponse(SQLModel):
    access_token: str
    token_type: str = "bearer"
    user: UserProfile


class RegisterResponse(SQLModel):
    user: UserProfile
    company: CompanyBrief
