# wholesale/services/platform_service.py
import csv
import io
import uuid

from fastapi import HTTPException, status
from sqlmodel import Session

from wholesale.models.company import Company
from wholesale.models.user import User
from wholesale.repositories.company_repo import CompanyRepository
from wholesale.repositories.order_repo import OrderRepository
from wholesale.repositories.user_repo import UserRepository
from wholesale.schemas.company import (
    CompanyRead,
    CompanyStatusUpdate,
    PlatformDashboardStats,
    SalesRepAssign,
    SalesRepRead,
)

EXPORT_COLUMNS = [
    "id",
    "name",
    "tax_id",
    "contact_email",
    "phone",
    "address",
    "website",
    "description",
    "status",
    "created_at",
]


class PlatformService:
    """
    Platform-admin operations over tenant companies.
    """

    def __init__(
        self,
        company_repo: CompanyRepository,
        user_repo: UserRepository,
        order_repo: OrderRepository,
    ):
        self.company_repo = company_repo
        self.user_repo = user_repo
        self.order_repo = order_repo

    def _get_company(self, session: Session, company_id: uuid.UUID) -> Company:
        company = self.company_repo.get_by_id(session, company_id)
        if company is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Company not found",
            )
        return company

    @staticmethod
    def _rep_read(rep: User | None) -> SalesRepRead | None:
        if rep is None:
            return None
        return SalesRepRead(id=rep.id, full_name=rep.full_name, email=rep.email)

    def _company_read(
        self,
        session: Session,
        company: Company,
        user_counts: dict[uuid.UUID, int],
    ) -> CompanyRead:
        rep = self.user_repo.get_by_id(session, company.sales_rep_id) if company.sales_rep_id else None
        return CompanyRead(
            **company.model_dump(exclude={"sales_rep_id"}),
            sales_rep=self._rep_read(rep),
            user_count=user_counts.get(company.id, 0),
        )

    def list_companies(
        self,
        session: Session,
        sales_rep_id: uuid.UUID | None = None,
    ) -> list[CompanyRead]:
        user_counts = self.user_repo.count_by_company(session)
        return [
            self._company_read(session, c, user_counts)
            for c in self.company_repo.list_companies(session, sales_rep_id=sales_rep_id)
        ]

    def export_companies_csv(self, session: Session) -> str:
        """All companies as CSV (header row + one row per company, newest first)."""
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerow(EXPORT_COLUMNS)
        for company in self.company_repo.list_companies(session):
            data = company.model_dump()
            writer.writerow(["" if data[col] is None else data[col] for col in EXPORT_COLUMNS])
        return buffer.getvalue()

    def list_sales_reps(self, session: Session) -> list[SalesRepRead]:
        return [self._rep_read(u) for u in self.user_repo.list_by_role(session, "PLATFORM_ADMIN")]

    def update_status(
        self,
        session: Session,
        company_id: uuid.UUID,
        payload: CompanyStatusUpdate,
    ) -> CompanyRead:
        company = self._get_company(session, company_id)
        company.status = payload.status
        company = self.company_repo.update(session, company)
        return self._company_read(session, company, self.user_repo.count_by_company(session))

    def assign_sales_rep(
        self,
        session: Session,
        company_id: uuid.UUID,
        payload: SalesRepAssign,
    ) -> CompanyRead:
        """
        Raises:
            HTTPException(404): unknown company.
            HTTPException(400): the user is not a platform admin.
        """
        company = self._get_company(session, company_id)
        rep = self.user_repo.get_by_id(session, payload.sales_rep_id)
        if rep is None or rep.role != "PLATFORM_ADMIN":
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Sales rep must be an existing PLATFORM_ADMIN user",
            )
        company.sales_rep_id = rep.id
        company = self.company_repo.update(session, company)
        return self._company_read(session, company, self.user_repo.count_by_company(session))

    def get_dashboard_stats(self, session: Session) -> PlatformDashboardStats:
        return PlatformDashboardStats(
            total_companies=self.company_repo.count(session),
            pending_companies=self.company_repo.count(session, status="PENDING"),
            total_orders=self.order_repo.count(session),
            total_users=self.user_repo.count(session),
        )
