# tests/conftest.py
import os
import smtplib
import tempfile

# Settings are read once at import time, so the environment must be ready first.
os.environ["JWT_SECRET"] = "test-secret"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["UPLOAD_DIR"] = tempfile.mkdtemp(prefix="wholesale-uploads-")
os.environ["BACKEND_URL"] = "http://testserver"
for _key in ("SMTP_HOST", "SUPABASE_URL", "SUPABASE_SERVICE_ROLE_KEY"):
    os.environ.pop(_key, None)

from decimal import Decimal  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlmodel import Session, SQLModel  # noqa: E402

from storefront_fakes import make_response  # noqa: E402
from wholesale.core.auth import create_access_token, hash_password  # noqa: E402
from wholesale.core.config import get_settings  # noqa: E402
from wholesale.database import engine  # noqa: E402
from wholesale.main import app  # noqa: E402
from wholesale.models.company import Company  # noqa: E402
from wholesale.models.user import User  # noqa: E402
from wholesale.repositories.product_repo import ProductRepository  # noqa: E402
from wholesale.schemas.product import ProductCreate, SkuCreate, TierPriceIn  # noqa: E402
from wholesale.services.product_service import ProductService  # noqa: E402

PASSWORD = "password123"


@pytest.fixture(autouse=True)
def fresh_db():
    SQLModel.metadata.drop_all(engine)
    SQLModel.metadata.create_all(engine)
    yield
    SQLModel.metadata.drop_all(engine)


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


def create_user(email: str, role: str = "ADMIN", with_company: bool = True) -> dict:
    """Insert a user (and company) and return plain values plus auth headers."""
    with Session(engine) as session:
        company_id = None
        if with_company:
            company = Company(name=f"{email.split('@')[0]} Trading", contact_email=email)
            session.add(company)
            session.commit()
            session.refresh(company)
            company_id = company.id

        user = User(
            email=email,
            password_hash=hash_password(PASSWORD),
            full_name="Test User",
            role=role,
            company_id=company_id,
        )
        session.add(user)
        session.commit()
        session.refresh(user)
        token = create_access_token(user)
        return {
            "id": user.id,
            "email": user.email,
            "company_id": company_id,
            "token": token,
            "headers": {"Authorization": f"Bearer {token}"},
        }


@pytest.fixture
def admin():
    return create_user("admin@acme.com", role="ADMIN")


@pytest.fixture
def platform_admin():
    return create_user("boss@soletrade.com", role="PLATFORM_ADMIN", with_company=False)


@pytest.fixture
def buyer():
    return create_user("buyer@shoes.com", role="USER")


@pytest.fixture
def pump():
    """
    Product with one SKU: base 100, tiers 5 -> 95, 10 -> 90, 20 -> 85, MOQ 2.
    """
    payload = ProductCreate(
        title="Pump 50",
        base_price=Decimal("100"),
        skus=[
            SkuCreate(
                sku_code="PUMP-50-30",
                price=Decimal("100"),
                moq=2,
                specs="Color: Black, Size: 38",
                tier_prices=[
                    TierPriceIn(min_qty=5, price=Decimal("95")),
                    TierPriceIn(min_qty=10, price=Decimal("90")),
                    TierPriceIn(min_qty=20, price=Decimal("85")),
                ],
            )
        ],
    )
    with Session(engine) as session:
        return ProductService(ProductRepository()).create_product(session, payload)


@pytest.fixture
def make_user():
    return create_user


@pytest.fixture
def half_configured_smtp(monkeypatch):
    """SMTP_HOST set, credentials missing."""
    settings = get_settings()
    monkeypatch.setattr(settings, "SMTP_HOST", "smtp.example.com")
    monkeypatch.setattr(settings, "SMTP_USERNAME", None)
    monkeypatch.setattr(settings, "SMTP_PASSWORD", None)
    return settings


@pytest.fixture
def failing_smtp(monkeypatch):
    """Fully configured SMTP whose server refuses every message."""
    settings = get_settings()
    monkeypatch.setattr(settings, "SMTP_HOST", "smtp.example.com")
    monkeypatch.setattr(settings, "SMTP_USERNAME", "noreply@example.com")
    monkeypatch.setattr(settings, "SMTP_PASSWORD", "secret")

    def refuse(**kwargs):
        raise smtplib.SMTPRecipientsRefused({kwargs["to_email"]: (550, b"mailbox unavailable")})

    monkeypatch.setattr("wholesale.core.notifications.send_email", refuse)
    return settings


@pytest.fixture
def api_transport(client):
    """Route storefront ApiClient requests into the FastAPI TestClient."""

    def transport(request):
        resp = client.request(
            request.method,
            request.path_url,
            content=request.body,
            headers=dict(request.headers),
        )
        body = resp.json() if resp.content else None
        return make_response(resp.status_code, body, request)

    return transport
