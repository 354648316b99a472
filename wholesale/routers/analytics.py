# wholesale/routers/analytics.py
from datetime import datetime

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from wholesale.core.auth import require_admin
from wholesale.database import get_session
from wholesale.repositories.analytics_repo import AnalyticsRepository
from wholesale.repositories.order_repo import OrderRepository
from wholesale.schemas.analytics import (
    AnalyticsDashboard,
    AnalyticsEventCreate,
    AnalyticsEventRead,
    FunnelData,
)
from wholesale.services.analytics_service import AnalyticsService

router = APIRouter(prefix="/analytics", tags=["Analytics"])

service = AnalyticsService(AnalyticsRepository(), OrderRepository())


@router.post(
    "/track",
    response_model=AnalyticsEventRead,
    status_code=status.HTTP_201_CREATED,
)
def track_event(
    payload: AnalyticsEventCreate,
    session: Session = Depends(get_session),
):
    """
    Record a storefront event. Public: anonymous visitors are tracked too.
    """
    return service.track_event(session, payload)


@router.get(
    "/dashboard",
    response_model=AnalyticsDashboard,
    dependencies=[Depends(require_admin)],
)
def dashboard(session: Session = Depends(get_session)):
    return service.get_dashboard_stats(session)


@router.get(
    "/funnel",
    response_model=FunnelData,
    dependencies=[Depends(require_admin)],
)
def funnel(
    start_date: datetime | None = None,
    end_date: datetime | None = None,
    session: Session = Depends(get_session),
):
    """
    Funnel counts (view -> cart -> checkout -> purchase) for a period;
    defaults to all time.
    """
    return service.get_funnel(session, start_date, end_date)
