# wholesale/repositories/exchange_rate_repo.py
from sqlmodel import Session, select

from wholesale.models.exchange_rate import ExchangeRate


class ExchangeRateRepository:

    def list_rates(self, session: Session) -> list[ExchangeRate]:
        stmt = select(ExchangeRate).order_by(ExchangeRate.currency)
        return list(session.exec(stmt).all())

    def get(self, session: Session, currency: str) -> ExchangeRate | None:
        return session.get(ExchangeRate, currency)

    def save(self, session: Session, rate: ExchangeRate) -> ExchangeRate:
        session.add(rate)
        session.commit()
        session.refresh(rate)
        return rate
