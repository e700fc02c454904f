"""
Money — денежная сумма в конкретной валюте

Immutable Pydantic модель. Арифметика между двумя Money допустима только
в одной валюте; смешение валют — явная ошибка CurrencyMismatchError
(или Outcome.failure для try_* вариантов), а не молчаливое сложение.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Money + Money / Money - Money только при совпадении валют
2. Умножение и деление на скаляр всегда успешны, валюта не меняется
3. Кросс-валютная арифметика возможна только через ExchangeRate
"""

import logging
from numbers import Real
from typing import Any

from pydantic import BaseModel, Field

from measura.core.errors import CurrencyMismatchError
from measura.core.numerical_safeguards import (
    MONEY_TOLERANCE,
    compare_floats,
    ieee_divide,
    is_close_with,
)
from measura.core.outcome import Outcome
from measura.core.quantity import Quantity
from measura.market.currency import Currency

logger = logging.getLogger(__name__)


class Money(BaseModel):
    """
    Денежная сумма.

    Examples:
        >>> str(Money.usd(95.0) + Money.usd(23.5))
        '118.5 USD'
        >>> Money.usd(123.456).to_formatted_string()
        '$123.46'
    """

    amount: float = Field(..., description="Сумма в единицах валюты")
    currency: Currency = Field(..., description="Валюта")

    model_config = {"frozen": True}

    # =========================================================================
    # КОНСТРУКТОРЫ
    # =========================================================================

    @classmethod
    def new(cls, amount: float, currency: Currency) -> "Money":
        return cls(amount=amount, currency=currency)

    @classmethod
    def usd(cls, amount: float) -> "Money":
        return cls(amount=amount, currency=Currency.USD)

    @classmethod
    def eur(cls, amount: float) -> "Money":
        return cls(amount=amount, currency=Currency.EUR)

    @classmethod
    def gbp(cls, amount: float) -> "Money":
        return cls(amount=amount, currency=Currency.GBP)

    @classmethod
    def jpy(cls, amount: float) -> "Money":
        return cls(amount=amount, currency=Currency.JPY)

    @classmethod
    def chf(cls, amount: float) -> "Money":
        return cls(amount=amount, currency=Currency.CHF)

    @classmethod
    def cad(cls, amount: float) -> "Money":
        return cls(amount=amount, currency=Currency.CAD)

    @classmethod
    def aud(cls, amount: float) -> "Money":
        return cls(amount=amount, currency=Currency.AUD)

    @classmethod
    def cny(cls, amount: float) -> "Money":
        return cls(amount=amount, currency=Currency.CNY)

    @classmethod
    def inr(cls, amount: float) -> "Money":
        return cls(amount=amount, currency=Currency.INR)

    @classmethod
    def btc(cls, amount: float) -> "Money":
        return cls(amount=amount, currency=Currency.BTC)

    # =========================================================================
    # ВАЛЮТНАЯ ПРОВЕРКА
    # =========================================================================

    def _require_same_currency(self, other: "Money", operation: str) -> None:
        if other.currency != self.currency:
            logger.debug(
                "Currency mismatch on %s: %s vs %s", operation, self.currency, other.currency
            )
            raise CurrencyMismatchError(self.currency, other.currency, operation)

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    def __add__(self, other: Any) -> "Money":
        if not isinstance(other, Money):
            return NotImplemented
        self._require_same_currency(other, "add")
        return Money(amount=self.amount + other.amount, currency=self.currency)

    def __sub__(self, other: Any) -> "Money":
        if not isinstance(other, Money):
            return NotImplemented
        self._require_same_currency(other, "subtract")
        return Money(amount=self.amount - other.amount, currency=self.currency)

    def try_add(self, other: "Money") -> Outcome["Money"]:
        """Сложение без исключения: Outcome.failure при разных валютах."""
        try:
            return Outcome.success(self + other)
        except CurrencyMismatchError as exc:
            return Outcome.failure(exc)

    def try_sub(self, other: "Money") -> Outcome["Money"]:
        """Вычитание без исключения: Outcome.failure при разных валютах."""
        try:
            return Outcome.success(self - other)
        except CurrencyMismatchError as exc:
            return Outcome.failure(exc)

    def __mul__(self, other: Any) -> "Money":
        if isinstance(other, Real):
            return Money(amount=self.amount * float(other), currency=self.currency)
        return NotImplemented

    def __rmul__(self, other: Any) -> "Money":
        return self.__mul__(other)

    def __truediv__(self, other: Any) -> Any:
        """
        Деление:
        - Money / скаляр → Money
        - Money / Money (одна валюта) → float
        - Money / Quantity → Price
        - Money / Price → Quantity
        """
        # Price импортирует Money, поэтому импорт локальный
        from measura.market.price import Price

        if isinstance(other, Real):
            return Money(amount=ieee_divide(self.amount, float(other)), currency=self.currency)
        if isinstance(other, Money):
            self._require_same_currency(other, "divide")
            return ieee_divide(self.amount, other.amount)
        if isinstance(other, Price):
            return other.in_currency(self)
        if isinstance(other, Quantity):
            return Price(money=self, reference=other)
        return NotImplemented

    def __neg__(self) -> "Money":
        return Money(amount=-self.amount, currency=self.currency)

    def __abs__(self) -> "Money":
        return Money(amount=abs(self.amount), currency=self.currency)

    # =========================================================================
    # СРАВНЕНИЕ
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return other.currency == self.currency and is_close_with(
            self.amount, other.amount, MONEY_TOLERANCE
        )

    def __hash__(self) -> int:
        """
        Хеш зависит только от валюты.

        Суммы, равные с точностью MONEY_TOLERANCE, должны хешироваться
        одинаково, поэтому amount в хеш не входит.
        """
        return hash(self.currency)

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._require_same_currency(other, "compare")
        return self.amount < other.amount

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._require_same_currency(other, "compare")
        return self.amount <= other.amount

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._require_same_currency(other, "compare")
        return self.amount > other.amount

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._require_same_currency(other, "compare")
        return self.amount >= other.amount

    def compare(self, other: "Money") -> int | None:
        """-1/0/+1, None при NaN. Разные валюты → CurrencyMismatchError."""
        self._require_same_currency(other, "compare")
        return compare_floats(self.amount, other.amount)

    def is_zero(self) -> bool:
        return self.amount == 0.0

    # =========================================================================
    # ОТОБРАЖЕНИЕ
    # =========================================================================

    def rounded(self) -> "Money":
        """Сумма, округлённая до точности валюты (JPY — 0, BTC — 8 знаков)."""
        return Money(amount=round(self.amount, self.currency.decimals), currency=self.currency)

    def to_formatted_string(self) -> str:
        """Символ валюты + сумма с точностью валюты ("$123.46")."""
        return f"{self.currency.symbol}{self.amount:.{self.currency.decimals}f}"

    def __str__(self) -> str:
        return f"{self.amount} {self.currency.code}"
