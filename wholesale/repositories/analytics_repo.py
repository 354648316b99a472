# wholesale/repositories/analytics_repo.py
from datetime import datetime

from sqlalchemy import func
from sqlmodel import Session, select

from wholesale.models.analytics import AnalyticsEvent


class AnalyticsRepository:
    """
    Event insert + read-only count queries for dashboards.
    """

    def create(self, session: Session, event: AnalyticsEvent) -> AnalyticsEvent:
        session.add(event)
        session.commit()
        session.refresh(event)
        return event

    def count(
        self,
        session: Session,
        event_type: str,
        since: datetime | None = None,
        until: datetime | None = None,
    ) -> int:
        stmt = (
            select(func.count())
            .select_from(AnalyticsEvent)
            .where(AnalyticsEvent.event_type == event_type)
        )
        if since is not None:
            stmt = stmt.where(AnalyticsEvent.created_at >= since)
        if until is not None:
            stmt = stmt.where(AnalyticsEvent.created_at <= until)
        return int(session.exec(stmt).one() or 0)
