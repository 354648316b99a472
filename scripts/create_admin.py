# scripts/create_admin.py
"""
Create (or reset) a PLATFORM_ADMIN account.

Usage:
    python -m scripts.create_admin --email boss@example.com --password password123
"""
import argparse
import logging

from sqlmodel import Session

from wholesale.core.auth import hash_password
from wholesale.database import create_db_and_tables, engine
from wholesale.models import company as _company_models  # noqa: F401
from wholesale.models.user import User
from wholesale.repositories.user_repo import UserRepository

logger = logging.getLogger(__name__)


def upsert_platform_admin(
    session: Session,
    email: str,
    password: str,
    full_name: str = "Platform Admin",
) -> User:
    """Existing users get a new password and the PLATFORM_ADMIN role."""
    repo = UserRepository()
    email = email.strip().lower()
    user = repo.get_by_email(session, email)
    if user is None:
        user = repo.create(
            session,
            User(
                email=email,
                password_hash=hash_password(password),
                full_name=full_name,
                role="PLATFORM_ADMIN",
            ),
        )
    else:
        user.password_hash = hash_password(password)
        user.role = "PLATFORM_ADMIN"
        user = repo.update(session, user)
    logger.info("Upserted admin user %s with role %s", user.email, user.role)
    return user


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("--email", default="boss@example.com")
    parser.add_argument("--password", required=True)
    parser.add_argument("--full-name", default="Platform Admin")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    create_db_and_tables()
    with Session(engine) as session:
        upsert_platform_admin(session, args.email, args.password, args.full_name)


if __name__ == "__main__":
    main()
