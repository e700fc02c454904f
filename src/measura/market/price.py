"""
Price — цена за единицу величины произвольной размерности

Price[Q] = money за reference (например, 0.15 USD за 1 kWh).

    Price[Q] * Quantity[Q] → Money
    amount = money.amount * (quantity.to_primary() / reference.to_primary())

Цена, заданная за 1 kWh, корректно применяется к величине в любых единицах
энергии (J, MWh) без явной конверсии.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. reference с нулевым каноническим значением недопустим (DegenerateReferenceError)
2. Price[Q] умножается только на величину размерности Q
"""

from numbers import Real
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field, field_validator

from measura.core.errors import DegenerateReferenceError, IncompatibleDimensionsError
from measura.core.numerical_safeguards import DEFAULT_TOLERANCE, ieee_divide, is_close_with
from measura.core.quantity import Quantity
from measura.market.money import Money

Q = TypeVar("Q", bound=Quantity)


class Price(BaseModel, Generic[Q]):
    """
    Цена money за reference.

    Examples:
        >>> price = Price.new(Money.usd(0.15), Energy.kilowatt_hours(1.0))
        >>> price * Energy.kilowatt_hours(1200.0) == Money.usd(180.0)
        True
    """

    money: Money = Field(..., description="Сумма за reference")
    reference: Q = Field(..., description="Референсная величина (\"за сколько\")")

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    @field_validator("reference")
    @classmethod
    def validate_reference(cls, v: Q) -> Q:
        """Нулевая референсная величина делает "цену за единицу" неопределённой."""
        if v.to_primary() == 0.0:
            raise DegenerateReferenceError(f"Price reference quantity must be non-zero, got {v}")
        return v

    @classmethod
    def new(cls, money: Money, reference: Q) -> "Price[Q]":
        return cls(money=money, reference=reference)

    # =========================================================================
    # ДОСТУП
    # =========================================================================

    def per_unit_amount(self) -> float:
        """Сумма за одну единицу reference в его собственной единице."""
        return ieee_divide(self.money.amount, self.reference.value)

    def in_currency(self, money: Money) -> Q:
        """
        Сколько величины можно купить на money.

        Raises:
            CurrencyMismatchError: Если валюта money отличается от валюты цены
        """
        ratio = money / self.money
        return self.reference * ratio

    def _quantity_to_money(self, quantity: Quantity) -> Money:
        if quantity.dimension != self.reference.dimension:
            raise IncompatibleDimensionsError(
                f"Price per {self.reference.dimension.name} cannot be applied "
                f"to {quantity.dimension.name}"
            )
        ratio = ieee_divide(quantity.to_primary(), self.reference.to_primary())
        return self.money * ratio

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    def __mul__(self, other: Any) -> Any:
        if isinstance(other, Real):
            return Price(money=self.money * other, reference=self.reference)
        if isinstance(other, Quantity):
            return self._quantity_to_money(other)
        return NotImplemented

    def __rmul__(self, other: Any) -> Any:
        return self.__mul__(other)

    def __truediv__(self, other: Any) -> "Price[Q]":
        if isinstance(other, Real):
            return Price(money=self.money / other, reference=self.reference)
        return NotImplemented

    # =========================================================================
    # СРАВНЕНИЕ / ОТОБРАЖЕНИЕ
    # =========================================================================

    def _amount_per_primary(self) -> float:
        return ieee_divide(self.money.amount, self.reference.to_primary())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Price):
            return NotImplemented
        return (
            other.money.currency == self.money.currency
            and other.reference.dimension == self.reference.dimension
            and is_close_with(
                self._amount_per_primary(), other._amount_per_primary(), DEFAULT_TOLERANCE
            )
        )

    def __hash__(self) -> int:
        return hash((self.money.currency, self.reference.dimension.name))

    def __str__(self) -> str:
        return f"{self.money}/{self.reference}"
