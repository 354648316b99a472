# wholesale/routers/orders.py
import uuid

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from wholesale.core.auth import require_auth
from wholesale.database import get_session
from wholesale.models.user import User
from wholesale.repositories.order_repo import OrderRepository
from wholesale.repositories.product_repo import ProductRepository
from wholesale.schemas.order import OrderCreate, OrderRead
from wholesale.services.order_service import OrderService

router = APIRouter(prefix="/orders", tags=["Orders"])

service = OrderService(OrderRepository(), ProductRepository())


@router.post("", response_model=OrderRead, status_code=status.HTTP_201_CREATED)
def create_order(
    payload: OrderCreate,
    session: Session = Depends(get_session),
    current_user: User = Depends(require_auth),
):
    """
    Submit the RFQ cart as an order. Prices are resolved on the server.
    """
    return service.create_order(session, current_user, payload)


@router.get("", response_model=list[OrderRead])
def list_my_orders(
    session: Session = Depends(get_session),
    current_user: User = Depends(require_auth),
):
    """
    Orders of the current user's company, newest first.
    """
    return service.list_orders(session, current_user)


@router.get("/{order_id}", response_model=OrderRead)
def get_order(
    order_id: uuid.UUID,
    session: Session = Depends(get_session),
    current_user: User = Depends(require_auth),
):
    return service.get_order(session, current_user, order_id)
