# wholesale/storefront/currency.py
import logging
from decimal import Decimal

from babel.numbers import format_currency
from pydantic import BaseModel, Field

from wholesale.core.errors import WholesaleError
from wholesale.core.pricing import to_decimal
from wholesale.storefront.state import PersistedStore

logger = logging.getLogger(__name__)

# Fallback table used until the first successful refresh
DEFAULT_RATES: dict[str, Decimal] = {
    "USD": Decimal("1"),
    "EUR": Decimal("0.92"),
    "GBP": Decimal("0.79"),
    "CNY": Decimal("7.20"),
    "CAD": Decimal("1.35"),
    "AUD": Decimal("1.52"),
}


class CurrencyState(BaseModel):
    currency: str = "USD"
    rates: dict[str, Decimal] = Field(default_factory=lambda: dict(DEFAULT_RATES))


class CurrencyStore(PersistedStore[CurrencyState]):
    """
    Display currency + rate table, persisted under 'currency-storage'.

    Amounts passed in are denominated in the base currency. The base
    currency always maps to 1, whatever a refresh returns.
    """

    key = "currency-storage"
    state_model = CurrencyState

    def __init__(self, storage, base_currency: str = "USD", locale: str = "en_US"):
        self.base_currency = base_currency.upper()
        self.locale = locale
        super().__init__(storage)
        if self._state.rates.get(self.base_currency) != Decimal("1"):
            rates = {**self._state.rates, self.base_currency: Decimal("1")}
            self._commit(self._state.model_copy(update={"rates": rates}))

    def initial_state(self) -> CurrencyState:
        rates = {**DEFAULT_RATES, self.base_currency: Decimal("1")}
        return CurrencyState(currency=self.base_currency, rates=rates)

    @property
    def currency(self) -> str:
        return self._state.currency

    @property
    def rates(self) -> dict[str, Decimal]:
        return dict(self._state.rates)

    def set_currency(self, currency: str) -> None:
        self._commit(self._state.model_copy(update={"currency": currency.upper()}))

    def available_currencies(self) -> list[str]:
        return list(self._state.rates)

    def fetch_rates(self, api) -> bool:
        """
        Replace the rate table with GET /exchange-rates.

        Best effort: on any failure the previous table is kept, the error is
        logged and False is returned.
        """
        try:
            rows = api.get_exchange_rates()
            rates = {self.base_currency: Decimal("1")}
            for row in rows:
                rates[str(row["currency"]).upper()] = to_decimal(row["rate"])
        except (WholesaleError, KeyError, TypeError, ValueError, ArithmeticError) as e:
            logger.error("Failed to fetch exchange rates: %s", e)
            return False

        rates[self.base_currency] = Decimal("1")
        self._commit(self._state.model_copy(update={"rates": rates}))
        return True

    def _rate(self) -> Decimal:
        # unknown currency (or a zero rate) falls back to 1
        return self._state.rates.get(self._state.currency) or Decimal("1")

    def convert(self, amount) -> Decimal:
        return to_decimal(amount) * self._rate()

    def format(self, amount) -> str:
        """
        >>> store.set_currency("EUR"); store.format(100)
        '€92.00'
        """
        return format_currency(self.convert(amount), self._state.currency, locale=self.locale)
