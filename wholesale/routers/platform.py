# wholesale/routers/platform.py
import uuid

from fastapi import APIRouter, Depends, Response
from sqlmodel import Session

from wholesale.core.auth import require_platform_admin
from wholesale.database import get_session
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
from wholesale.services.platform_service import PlatformService

# Every route here is PLATFORM_ADMIN only.
router = APIRouter(
    prefix="/platform",
    tags=["Platform"],
    dependencies=[Depends(require_platform_admin)],
)

service = PlatformService(CompanyRepository(), UserRepository(), OrderRepository())


@router.get("/dashboard-stats", response_model=PlatformDashboardStats)
def dashboard_stats(session: Session = Depends(get_session)):
    return service.get_dashboard_stats(session)


@router.get("/companies", response_model=list[CompanyRead])
def list_companies(
    sales_rep_id: uuid.UUID | None = None,
    session: Session = Depends(get_session),
):
    """
    All companies, newest first; filter by `sales_rep_id` if given.
    """
    return service.list_companies(session, sales_rep_id)


@router.get("/companies/export")
def export_companies(session: Session = Depends(get_session)):
    """
    Download all companies as CSV.
    """
    return Response(
        content=service.export_companies_csv(session),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": 'attachment; filename="companies.csv"'},
    )


@router.get("/sales-reps", response_model=list[SalesRepRead])
def list_sales_reps(session: Session = Depends(get_session)):
    return service.list_sales_reps(session)


@router.patch("/companies/{company_id}/status", response_model=CompanyRead)
def update_company_status(
    company_id: uuid.UUID,
    payload: CompanyStatusUpdate,
    session: Session = Depends(get_session),
):
    return service.update_status(session, company_id, payload)


@router.patch("/companies/{company_id}/sales-rep", response_model=CompanyRead)
def assign_sales_rep(
    company_id: uuid.UUID,
    payload: SalesRepAssign,
    session: Session = Depends(get_session),
):
    return service.assign_sales_rep(session, company_id, payload)
