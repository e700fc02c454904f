"""
ExchangeRate — направленный курс обмена между двумя валютами

1 единица base = rate единиц quote. Курс НАПРАВЛЕННЫЙ:
- convert(money) работает только для money.currency == base
- обратное направление не выводится неявно; для него нужен inverse()
  или отдельный ExchangeRate
- цепочки через промежуточные валюты — ответственность вызывающего кода
"""

import logging
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from measura.core.errors import CurrencyMismatchError, InvalidRateError
from measura.core.numerical_safeguards import validate_positive
from measura.core.outcome import Outcome
from measura.market.currency import Currency
from measura.market.money import Money

logger = logging.getLogger(__name__)


class ExchangeRate(BaseModel):
    """
    Курс base → quote.

    Examples:
        >>> usd_jpy = ExchangeRate.new(Currency.USD, Currency.JPY, 155.0)
        >>> str(usd_jpy.convert(Money.usd(2000.0)))
        '310000.0 JPY'
    """

    base: Currency = Field(..., description="Базовая валюта")
    quote: Currency = Field(..., description="Котируемая валюта")
    rate: float = Field(..., description="Единиц quote за 1 единицу base")

    model_config = {"frozen": True}

    @field_validator("rate")
    @classmethod
    def validate_rate(cls, v: float) -> float:
        """Курс конечен и строго положителен."""
        validate_positive(v, "Exchange rate", InvalidRateError)
        return v

    @model_validator(mode="after")
    def validate_distinct_currencies(self) -> "ExchangeRate":
        if self.base == self.quote:
            raise InvalidRateError(
                f"Exchange rate requires distinct currencies, got {self.base}/{self.quote}"
            )
        return self

    # =========================================================================
    # КОНСТРУКТОРЫ
    # =========================================================================

    @classmethod
    def new(cls, base: Currency, quote: Currency, rate: float) -> "ExchangeRate":
        """
        Raises:
            InvalidRateError: rate <= 0, NaN/Inf или base == quote
        """
        return cls(base=base, quote=quote, rate=rate)

    @classmethod
    def try_new(cls, base: Currency, quote: Currency, rate: float) -> Outcome["ExchangeRate"]:
        try:
            return Outcome.success(cls.new(base, quote, rate))
        except InvalidRateError as exc:
            return Outcome.failure(exc)

    # =========================================================================
    # КОНВЕРСИЯ
    # =========================================================================

    def convert(self, money: Money) -> Money:
        """
        Конвертировать base → quote.

        Raises:
            CurrencyMismatchError: Если валюта money не совпадает с base
        """
        if money.currency != self.base:
            logger.debug(
                "Cannot apply %s to money in %s", self.pair_code, money.currency
            )
            raise CurrencyMismatchError(self.base, money.currency, "convert")

        converted = Money(amount=money.amount * self.rate, currency=self.quote)
        logger.debug("Converted %s -> %s at %s", money, converted, self.rate)
        return converted

    def try_convert(self, money: Money) -> Outcome[Money]:
        try:
            return Outcome.success(self.convert(money))
        except CurrencyMismatchError as exc:
            return Outcome.failure(exc)

    def inverse(self) -> "ExchangeRate":
        """Явно построенный курс quote → base (rate = 1 / rate)."""
        return ExchangeRate(base=self.quote, quote=self.base, rate=1.0 / self.rate)

    @property
    def pair_code(self) -> str:
        return f"{self.base.code}/{self.quote.code}"

    def __mul__(self, other: Any) -> Money:
        if isinstance(other, Money):
            return self.convert(other)
        return NotImplemented

    def __rmul__(self, other: Any) -> Money:
        return self.__mul__(other)

    def __str__(self) -> str:
        return f"{self.pair_code} {self.rate}"
