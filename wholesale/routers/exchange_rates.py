# wholesale/routers/exchange_rates.py
from fastapi import APIRouter, Depends
from sqlmodel import Session

from wholesale.core.auth import require_admin
from wholesale.database import get_session
from wholesale.repositories.exchange_rate_repo import ExchangeRateRepository
from wholesale.schemas.exchange_rate import ExchangeRateRead, ExchangeRateUpdate
from wholesale.services.exchange_rate_service import ExchangeRateService

router = APIRouter(prefix="/exchange-rates", tags=["Exchange Rates"])

service = ExchangeRateService(ExchangeRateRepository())


@router.get("", response_model=list[ExchangeRateRead])
def list_rates(session: Session = Depends(get_session)):
    """
    Public rate table; the base currency is always listed first at rate 1.
    """
    return service.list_rates(session)


@router.put(
    "",
    response_model=ExchangeRateRead,
    dependencies=[Depends(require_admin)],
)
def upsert_rate(
    payload: ExchangeRateUpdate,
    session: Session = Depends(get_session),
):
    """
    Create or update one currency's rate (ADMIN / PLATFORM_ADMIN).
    """
    return service.upsert(session, payload)
