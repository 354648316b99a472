# wholesale/repositories/order_repo.py
import uuid
from datetime import datetime

from sqlalchemy import func
from sqlmodel import Session, select

from wholesale.models.order import Order, OrderItem


class OrderRepository:

    def create_with_items(self, session: Session, order: Order, items: list[OrderItem]) -> Order:
        session.add(order)
        for item in items:
            item.order_id = order.id
            session.add(item)
        session.commit()
        session.refresh(order)
        return order

    def get_by_id(self, session: Session, order_id: uuid.UUID) -> Order | None:
        return session.get(Order, order_id)

    def list_for_company(self, session: Session, company_id: uuid.UUID) -> list[Order]:
        stmt = (
            select(Order)
            .where(Order.company_id == company_id)
            .order_by(Order.created_at.desc())
        )
        return list(session.exec(stmt).all())

    def list_items(self, session: Session, order_id: uuid.UUID) -> list[OrderItem]:
        stmt = select(OrderItem).where(OrderItem.order_id == order_id)
        return list(session.exec(stmt).all())

    def count(self, session: Session, since: datetime | None = None) -> int:
        """Count non-cancelled orders, optionally since a timestamp."""
        stmt = select(func.count()).select_from(Order).where(Order.status != "CANCELLED")
        if since is not None:
            stmt = stmt.where(Order.created_at >= since)
        return int(session.exec(stmt).one() or 0)
