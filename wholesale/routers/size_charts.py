# wholesale/routers/size_charts.py
import uuid

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from wholesale.core.auth import require_admin
from wholesale.database import get_session
from wholesale.repositories.product_repo import ProductRepository
from wholesale.schemas.size_chart import SizeChartCreate, SizeChartRead, SizeChartUpdate
from wholesale.services.product_service import ProductService

router = APIRouter(prefix="/size-charts", tags=["Size Charts"])

service = ProductService(ProductRepository())


@router.get("", response_model=list[SizeChartRead])
def list_size_charts(session: Session = Depends(get_session)):
    return service.list_size_charts(session)


@router.get("/{chart_id}", response_model=SizeChartRead)
def get_size_chart(chart_id: uuid.UUID, session: Session = Depends(get_session)):
    return service.get_size_chart(session, chart_id)


@router.post(
    "",
    response_model=SizeChartRead,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
def create_size_chart(payload: SizeChartCreate, session: Session = Depends(get_session)):
    return service.create_size_chart(session, payload)


@router.patch(
    "/{chart_id}",
    response_model=SizeChartRead,
    dependencies=[Depends(require_admin)],
)
def update_size_chart(
    chart_id: uuid.UUID,
    payload: SizeChartUpdate,
    session: Session = Depends(get_session),
):
    return service.update_size_chart(session, chart_id, payload)


@router.delete(
    "/{chart_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_admin)],
)
def delete_size_chart(chart_id: uuid.UUID, session: Session = Depends(get_session)):
    service.delete_size_chart(session, chart_id)
    return None
