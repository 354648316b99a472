import logging
from datetime import datetime, timedelta, timezone

from jose import jwt

from wholesale.core.config import get_settings

PASSWORD = "password123"


def register(client, email="new@factory.com", company="Factory Co"):
    return client.post(
        "/auth/register",
        json={
            "email": email,
            "password": "s3cret-pass",
            "full_name": "New Owner",
            "company_name": company,
        },
    )


def test_register_creates_company_and_admin(client, caplog):
    caplog.set_level(logging.INFO)
    resp = register(client)

    assert resp.status_code == 200
    body = resp.json()
    assert body["user"]["role"] == "ADMIN"
    assert body["user"]["company"]["name"] == "Factory Co"
    assert body["company"]["id"] == body["user"]["company"]["id"]
    assert "[mock email]" in caplog.text


def test_register_duplicate_email(client):
    register(client)
    resp = register(client, company="Other")
    assert resp.status_code == 409


def test_register_rejects_short_password(client):
    resp = client.post(
        "/auth/register",
        json={"email": "x@y.com", "password": "short", "company_name": "X"},
    )
    assert resp.status_code == 422


def test_login_and_profile(client, admin):
    resp = client.post("/auth/login", json={"email": admin["email"], "password": PASSWORD})
    assert resp.status_code == 200
    body = resp.json()
    assert body["token_type"] == "bearer"
    assert body["user"]["email"] == admin["email"]

    claims = jwt.get_unverified_claims(body["access_token"])
    assert claims["sub"] == str(admin["id"])
    assert claims["role"] == "ADMIN"

    profile = client.get(
        "/auth/profile",
        headers={"Authorization": f"Bearer {body['access_token']}"},
    )
    assert profile.status_code == 200
    assert profile.json()["company"]["id"] == str(admin["company_id"])


def test_login_wrong_password(client, admin):
    resp = client.post("/auth/login", json={"email": admin["email"], "password": "nope-nope"})
    assert resp.status_code == 401
    assert resp.json()["detail"] == "Invalid credentials"


def test_profile_requires_token(client):
    assert client.get("/auth/profile").status_code == 401


def test_expired_token_is_rejected(client, admin):
    settings = get_settings()
    past = datetime.now(timezone.utc) - timedelta(hours=2)
    token = jwt.encode(
        {"sub": str(admin["id"]), "exp": int((past + timedelta(minutes=1)).timestamp())},
        settings.JWT_SECRET,
        algorithm=settings.JWT_ALG,
    )
    resp = client.get("/auth/profile", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 401


def test_unconfigured_social_provider(client):
    resp = client.get("/auth/google", follow_redirects=False)
    assert resp.status_code == 503


def test_unknown_social_provider(client):
    assert client.get("/auth/myspace").status_code == 404


def test_health(client):
    assert client.get("/").json()["status"] == "ok"


def test_half_configured_smtp_rejects_registration_before_saving(client, half_configured_smtp, monkeypatch):
    resp = register(client)

    assert resp.status_code == 503
    assert resp.json()["error"] == "ConfigurationError"
    login = client.post("/auth/login", json={"email": "new@factory.com", "password": "s3cret-pass"})
    assert login.status_code == 401

    monkeypatch.setattr(half_configured_smtp, "SMTP_HOST", None)
    assert register(client).status_code == 200


def test_failed_welcome_email_keeps_the_account(client, failing_smtp, caplog):
    caplog.set_level(logging.ERROR)

    resp = register(client)

    assert resp.status_code == 200
    assert "Failed to send email to new@factory.com" in caplog.text
    login = client.post("/auth/login", json={"email": "new@factory.com", "password": "s3cret-pass"})
    assert login.status_code == 200
