# wholesale/services/exchange_rate_service.py
from datetime import datetime, timezone
from decimal import Decimal

from fastapi import HTTPException, status
from sqlmodel import Session

from wholesale.core.config import get_settings
from wholesale.models.exchange_rate import ExchangeRate
from wholesale.repositories.exchange_rate_repo import ExchangeRateRepository
from wholesale.schemas.exchange_rate import ExchangeRateRead, ExchangeRateUpdate


class ExchangeRateService:
    """
    Exchange rates relative to the base currency.

    The base currency always reads as rate 1 and cannot be edited.
    """

    def __init__(self, repo: ExchangeRateRepository, base_currency: str | None = None):
        self.repo = repo
        self.base_currency = (base_currency or get_settings().BASE_CURRENCY).upper()

    def list_rates(self, session: Session) -> list[ExchangeRateRead]:
        rows = [
            ExchangeRateRead(currency=r.currency, rate=r.rate, updated_at=r.updated_at)
            for r in self.repo.list_rates(session)
            if r.currency != self.base_currency
        ]
        return [ExchangeRateRead(currency=self.base_currency, rate=Decimal(1))] + rows

    def upsert(self, session: Session, payload: ExchangeRateUpdate) -> ExchangeRateRead:
        if payload.currency == self.base_currency:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"{self.base_currency} is the base currency; its rate is fixed at 1",
            )

        row = self.repo.get(session, payload.currency)
        if row is None:
            row = ExchangeRate(currency=payload.currency, rate=payload.rate)
        else:
            row.rate = payload.rate
            row.updated_at = datetime.now(timezone.utc)
        row = self.repo.save(session, row)
        return ExchangeRateRead(currency=row.currency, rate=row.rate, updated_at=row.updated_at)
