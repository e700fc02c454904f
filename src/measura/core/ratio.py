"""
Ratio — отношение двух величин

QuantityRatio связывает base и counter (например, 1 kg на 1 L) и позволяет
пересчитывать одну величину в другую пропорционально. LikeQuantityRatio —
отношение величин одной размерности (безразмерное число).
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

from measura.core.numerical_safeguards import ieee_divide
from measura.core.quantity import Quantity

A = TypeVar("A", bound=Quantity)
B = TypeVar("B", bound=Quantity)


@dataclass(frozen=True)
class QuantityRatio(Generic[A, B]):
    """
    Отношение base:counter.

    Examples:
        >>> density = QuantityRatio(Mass.kilograms(1.0), Volume.liters(1.0))
        >>> density.convert_to_base(Volume.liters(5.0)).to_kilograms()
        5.0
    """

    base: A
    counter: B

    def convert_to_base(self, q: B) -> A:
        """(q / counter) * base, в единице base."""
        ratio = ieee_divide(q.to_primary(), self.counter.to_primary())
        return self.base * ratio

    def convert_to_counter(self, q: A) -> B:
        """(q / base) * counter, в единице counter."""
        ratio = ieee_divide(q.to_primary(), self.base.to_primary())
        return self.counter * ratio

    def inverse(self) -> "QuantityRatio[B, A]":
        return QuantityRatio(self.counter, self.base)


@dataclass(frozen=True)
class LikeQuantityRatio(Generic[A]):
    """Отношение двух величин одной размерности."""

    base: A
    counter: A

    def ratio(self) -> float:
        return self.base / self.counter

    def inverse_ratio(self) -> float:
        return self.counter / self.base

    def inverse(self) -> "LikeQuantityRatio[A]":
        return LikeQuantityRatio(self.counter, self.base)
