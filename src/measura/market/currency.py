"""
Currency — закрытое перечисление валют

Валюта — ограниченная "размерность" денег: между её членами НЕТ
фиксированных коэффициентов. Конверсия возможна только через ExchangeRate
(рыночные данные, а не константы).
"""

from dataclasses import dataclass
from enum import Enum

from measura.core.errors import UnknownCurrencyError


@dataclass(frozen=True)
class CurrencyInfo:
    """Метаданные валюты для отображения."""

    display_name: str
    symbol: str
    decimals: int


class Currency(str, Enum):
    """ISO 4217 код валюты (BTC — де-факто код)."""

    USD = "USD"
    EUR = "EUR"
    GBP = "GBP"
    JPY = "JPY"
    CHF = "CHF"
    CAD = "CAD"
    AUD = "AUD"
    CNY = "CNY"
    INR = "INR"
    BTC = "BTC"

    @property
    def code(self) -> str:
        return self.value

    @property
    def display_name(self) -> str:
        return _CURRENCY_INFO[self].display_name

    @property
    def symbol(self) -> str:
        return _CURRENCY_INFO[self].symbol

    @property
    def decimals(self) -> int:
        """Количество знаков после запятой при форматировании."""
        return _CURRENCY_INFO[self].decimals

    @classmethod
    def from_code(cls, code: str) -> "Currency":
        """
        Валюта по коду (регистр не важен).

        Raises:
            UnknownCurrencyError: Если код не поддерживается
        """
        try:
            return cls(code.strip().upper())
        except ValueError as exc:
            raise UnknownCurrencyError(f"Unknown currency code: {code!r}") from exc

    def __str__(self) -> str:
        return self.value


_CURRENCY_INFO: dict[Currency, CurrencyInfo] = {
    Currency.USD: CurrencyInfo("US Dollar", "$", 2),
    Currency.EUR: CurrencyInfo("Euro", "€", 2),
    Currency.GBP: CurrencyInfo("British Pound Sterling", "£", 2),
    Currency.JPY: CurrencyInfo("Japanese Yen", "¥", 0),
    Currency.CHF: CurrencyInfo("Swiss Franc", "CHF", 2),
    Currency.CAD: CurrencyInfo("Canadian Dollar", "C$", 2),
    Currency.AUD: CurrencyInfo("Australian Dollar", "A$", 2),
    Currency.CNY: CurrencyInfo("Chinese Yuan Renminbi", "¥", 2),
    Currency.INR: CurrencyInfo("Indian Rupee", "₹", 2),
    Currency.BTC: CurrencyInfo("Bitcoin", "₿", 8),
}
