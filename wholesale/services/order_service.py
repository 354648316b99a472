# wholesale/services/order_service.py
import logging
import uuid
from datetime import datetime, timezone
from decimal import Decimal

from fastapi import HTTPException, status
from sqlmodel import Session

from wholesale.core import email_templates
from wholesale.core.email_client import ensure_email_configured
from wholesale.core.notifications import notify_by_email
from wholesale.core.pricing import line_total, resolve_unit_price
from wholesale.models.order import Order, OrderItem
from wholesale.models.user import User
from wholesale.repositories.order_repo import OrderRepository
from wholesale.repositories.product_repo import ProductRepository
from wholesale.schemas.order import OrderCreate, OrderItemRead, OrderRead

logger = logging.getLogger(__name__)


def generate_order_no(now: datetime | None = None) -> str:
    now = now or datetime.now(timezone.utc)
    return f"ORD-{now:%Y%m%d}-{uuid.uuid4().hex[:6].upper()}"


class OrderService:
    """
    Business logic for orders submitted from the RFQ cart.

    Responsibilities:
      - merge duplicate SKU lines (same rule as the client cart)
      - validate SKUs against products (existence, active flag, MOQ)
      - re-resolve every unit price from the SKU tier table; client prices
        are estimates only
      - compute line totals and the order total
    """

    def __init__(self, order_repo: OrderRepository, product_repo: ProductRepository):
        self.order_repo = order_repo
        self.product_repo = product_repo

    def _to_read(self, session: Session, order: Order) -> OrderRead:
        items = self.order_repo.list_items(session, order.id)
        return OrderRead(
            **order.model_dump(),
            items=[OrderItemRead.model_validate(i, from_attributes=True) for i in items],
        )

    def create_order(self, session: Session, user: User, payload: OrderCreate) -> OrderRead:
        """
        Steps:
          1. The user must belong to a company.
          2. Merge lines by (product_id, sku_id), summing quantities.
          3. For each line: SKU exists and belongs to the product, product is
             active, STANDARD orders meet the SKU's MOQ.
          4. Resolve unit prices through the tier table and total the order.
          5. Check the email setup, persist order + items, then send the
             confirmation (a send failure is only logged).
        """
        if user.company_id is None:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Only company accounts can place orders",
            )

        merged: dict[tuple[uuid.UUID, uuid.UUID], int] = {}
        for line in payload.items:
            key = (line.product_id, line.sku_id)
            merged[key] = merged.get(key, 0) + line.quantity

        errors: list[dict[str, str]] = []
        items: list[OrderItem] = []
        total = Decimal("0")

        for (product_id, sku_id), quantity in merged.items():
            sku = self.product_repo.get_sku(session, sku_id)
            if sku is None or sku.product_id != product_id:
                errors.append({"sku_id": str(sku_id), "reason": "SKU not found for product"})
                continue

            product = self.product_repo.get_by_id(session, product_id)
            if product is None or not product.is_active:
                errors.append({"sku_id": str(sku_id), "reason": "Product is not available"})
                continue

            if payload.type == "STANDARD" and quantity < sku.moq:
                errors.append(
                    {
                        "sku_id": str(sku_id),
                        "reason": f"Quantity {quantity} is below the minimum order quantity {sku.moq}",
                    }
                )
                continue

            unit_price = resolve_unit_price(sku.price, self.product_repo.list_tiers(session, sku.id), quantity)
            line_amount = line_total(unit_price, quantity)
            total += line_amount
            items.append(
                OrderItem(
                    product_id=product_id,
                    sku_id=sku_id,
                    product_name=product.title,
                    sku_specs=sku.specs,
                    quantity=quantity,
                    unit_price=unit_price,
                    total_price=line_amount,
                )
            )

        if errors:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail={"message": "Some items cannot be ordered", "errors": errors},
            )

        ensure_email_configured()
        order = Order(
            order_no=generate_order_no(),
            company_id=user.company_id,
            user_id=user.id,
            type=payload.type,
            total_amount=total,
            note=payload.note,
        )
        order = self.order_repo.create_with_items(session, order, items)
        logger.info("Order %s created: %d lines, total %s", order.order_no, len(items), total)

        notify_by_email(
            to_email=user.email,
            subject=f"Order {order.order_no} received",
            html_body=email_templates.order_confirmation(user.full_name or "Customer", order.order_no, total),
        )
        return self._to_read(session, order)

    def list_orders(self, session: Session, user: User) -> list[OrderRead]:
        if user.company_id is None:
            return []
        return [self._to_read(session, o) for o in self.order_repo.list_for_company(session, user.company_id)]

    def get_order(self, session: Session, user: User, order_id: uuid.UUID) -> OrderRead:
        """
        Platform admins can read any order; everyone else only their company's.
        """
        order = self.order_repo.get_by_id(session, order_id)
        visible = order is not None and (
            user.role == "PLATFORM_ADMIN" or order.company_id == user.company_id
        )
        if not visible:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Order not found",
            )
        return self._to_read(session, order)
