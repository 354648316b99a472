# wholesale/services/analytics_service.py
from datetime import datetime, time, timezone

from sqlmodel import Session

from wholesale.models.analytics import AnalyticsEvent
from wholesale.repositories.analytics_repo import AnalyticsRepository
from wholesale.repositories.order_repo import OrderRepository
from wholesale.schemas.analytics import (
    AnalyticsDashboard,
    AnalyticsEventCreate,
    CountPair,
    FunnelData,
    FunnelPeriod,
    FunnelStep,
)

# Funnel order: VIEW_PRODUCT -> ADD_TO_CART -> INITIATE_CHECKOUT -> PURCHASE
FUNNEL_STEPS: list[tuple[str, str]] = [
    ("VIEW_PRODUCT", "Product View"),
    ("ADD_TO_CART", "Add to Cart"),
    ("INITIATE_CHECKOUT", "Checkout"),
    ("PURCHASE", "Purchase"),
]


def _start_of_today() -> datetime:
    return datetime.combine(datetime.now(timezone.utc).date(), time.min, tzinfo=timezone.utc)


class AnalyticsService:

    def __init__(self, repo: AnalyticsRepository, order_repo: OrderRepository):
        self.repo = repo
        self.order_repo = order_repo

    def track_event(self, session: Session, payload: AnalyticsEventCreate) -> AnalyticsEvent:
        event = AnalyticsEvent(
            event_type=payload.event_type,
            user_id=payload.user_id,
            session_id=payload.session_id,
            metadata_json=payload.metadata,
        )
        return self.repo.create(session, event)

    def get_dashboard_stats(self, session: Session) -> AnalyticsDashboard:
        """
        Visits and orders today / all-time, plus today's conversion rate in
        percent (0 when there were no visits).
        """
        today = _start_of_today()

        visits_today = self.repo.count(session, "VISIT", since=today)
        visits_total = self.repo.count(session, "VISIT")
        orders_today = self.order_repo.count(session, since=today)
        orders_total = self.order_repo.count(session)

        conversion = (orders_today / visits_today) * 100 if visits_today > 0 else 0.0

        return AnalyticsDashboard(
            visits=CountPair(today=visits_today, total=visits_total),
            orders=CountPair(today=orders_today, total=orders_total),
            conversion_rate=round(conversion, 2),
        )

    def get_funnel(
        self,
        session: Session,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> FunnelData:
        start = start or datetime.fromtimestamp(0, tz=timezone.utc)
        end = end or datetime.now(timezone.utc)

        funnel = [
            FunnelStep(step=label, count=self.repo.count(session, event_type, since=start, until=end))
            for event_type, label in FUNNEL_STEPS
        ]
        return FunnelData(funnel=funnel, period=FunnelPeriod(start=start, end=end))
