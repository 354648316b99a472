# wholesale/repositories/user_repo.py
import uuid

from sqlalchemy import func
from sqlmodel import Session, select

from wholesale.models.user import User


class UserRepository:
    """
    Data access layer for User.

    Responsibilities:
      - Pure DB operations (CRUD + queries)
      - No FastAPI, no HTTP, no business logic
    """

    def get_by_id(self, session: Session, user_id: uuid.UUID) -> User | None:
        """Return a User by primary key, or None if not found."""
        return session.get(User, user_id)

    def get_by_email(self, session: Session, email: str) -> User | None:
        """Return a User by unique email, or None if not found."""
        stmt = select(User).where(User.email == email)
        return session.exec(stmt).first()

    def list_by_role(self, session: Session, role: str) -> list[User]:
        stmt = select(User).where(User.role == role).order_by(User.email)
        return list(session.exec(stmt).all())

    def count(self, session: Session) -> int:
        return int(session.exec(select(func.count()).select_from(User)).one() or 0)

    def count_by_company(self, session: Session) -> dict[uuid.UUID, int]:
        stmt = (
            select(User.company_id, func.count(User.id))
            .where(User.company_id.is_not(None))
            .group_by(User.company_id)
        )
        return {company_id: int(n) for company_id, n in session.exec(stmt).all()}

    def create(self, session: Session, user: User) -> User:
        """Insert a new User and return the persisted row."""
        session.add(user)
        session.commit()
        session.refresh(user)
        return user

    def update(self, session: Session, user: User) -> User:
        """Persist changes to an existing User."""
        session.add(user)
        session.commit()
        session.refresh(user)
        return user
