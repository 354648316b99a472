# scripts/promote_admin.py
"""
Elevate an existing user to PLATFORM_ADMIN.

Usage:
    python -m scripts.promote_admin someone@example.com
"""
import argparse
import logging
import sys

from sqlmodel import Session

from wholesale.core.errors import NotFound
from wholesale.database import engine
from wholesale.models import company as _company_models  # noqa: F401
from wholesale.models.user import User
from wholesale.repositories.user_repo import UserRepository

logger = logging.getLogger(__name__)


def promote(session: Session, email: str) -> User:
    """
    Raises:
        NotFound: no user with that email.
    """
    repo = UserRepository()
    user = repo.get_by_email(session, email.strip().lower())
    if user is None:
        raise NotFound(f"User {email} not found")
    user.role = "PLATFORM_ADMIN"
    return repo.update(session, user)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Elevate a user to PLATFORM_ADMIN.")
    parser.add_argument("email")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    logger.info("Elevating user %s to PLATFORM_ADMIN...", args.email)
    with Session(engine) as session:
        try:
            user = promote(session, args.email)
        except NotFound as e:
            logger.error("%s. Make sure the user exists first.", e.detail)
            return 1
    logger.info("User %s is now a PLATFORM_ADMIN.", user.email)
    return 0


if __name__ == "__main__":
    sys.exit(main())
