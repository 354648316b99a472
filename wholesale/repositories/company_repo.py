# wholesale/repositories/company_repo.py
import uuid

from sqlalchemy import func
from sqlmodel import Session, select

from wholesale.models.company import Company


class CompanyRepository:

    def get_by_id(self, session: Session, company_id: uuid.UUID) -> Company | None:
        return session.get(Company, company_id)

    def list_companies(self, session: Session, sales_rep_id: uuid.UUID | None = None) -> list[Company]:
        """Newest first; optionally only the companies of one sales rep."""
        stmt = select(Company)
        if sales_rep_id is not None:
            stmt = stmt.where(Company.sales_rep_id == sales_rep_id)
        stmt = stmt.order_by(Company.created_at.desc())
        return list(session.exec(stmt).all())

    def count(self, session: Session, status: str | None = None) -> int:
        stmt = select(func.count()).select_from(Company)
        if status is not None:
            stmt = stmt.where(Company.status == status)
        return int(session.exec(stmt).one() or 0)

    def update(self, session: Session, company: Company) -> Company:
        session.add(company)
        session.commit()
        session.refresh(company)
        return company
