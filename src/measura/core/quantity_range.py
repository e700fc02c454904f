"""
QuantityRange — полуоткрытый диапазон величин [lower, upper)

Границы хранятся в собственных единицах; все сравнения выполняются
по каноническим значениям.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

from measura.core.errors import IncompatibleDimensionsError, RangeError
from measura.core.quantity import Quantity

Q = TypeVar("Q", bound=Quantity)


@dataclass(frozen=True)
class QuantityRange(Generic[Q]):
    """
    Диапазон [lower, upper).

    Raises:
        RangeError: Если lower >= upper
        IncompatibleDimensionsError: Если границы разных размерностей
    """

    lower: Q
    upper: Q

    def __post_init__(self) -> None:
        if self.lower.dimension != self.upper.dimension:
            raise IncompatibleDimensionsError(
                f"Range bounds must share a dimension: "
                f"{self.lower.dimension.name} vs {self.upper.dimension.name}"
            )
        if not self.lower.to_primary() < self.upper.to_primary():
            raise RangeError(f"lower must be less than upper, got [{self.lower}, {self.upper})")

    def size(self) -> Q:
        """upper - lower в единице lower."""
        return self.upper.in_unit(self.lower.unit) - self.lower

    def contains(self, q: Q) -> bool:
        """lower <= q < upper"""
        return self.lower.to_primary() <= q.to_primary() < self.upper.to_primary()

    def includes(self, q: Q) -> bool:
        """lower <= q <= upper"""
        return self.lower.to_primary() <= q.to_primary() <= self.upper.to_primary()

    def contains_range(self, that: "QuantityRange[Q]") -> bool:
        """that целиком внутри [lower, upper) (верхняя граница that может совпадать с upper)."""
        return (
            self.lower.to_primary() <= that.lower.to_primary()
            and that.upper.to_primary() <= self.upper.to_primary()
            and that.lower.to_primary() < self.upper.to_primary()
        )

    def includes_range(self, that: "QuantityRange[Q]") -> bool:
        """Обе границы that в [lower, upper]."""
        return self.includes(that.lower) and self.includes(that.upper)

    def overlaps(self, that: "QuantityRange[Q]") -> bool:
        return (
            that.lower.to_primary() < self.upper.to_primary()
            and that.upper.to_primary() > self.lower.to_primary()
        )

    def shift(self, amount: Q) -> "QuantityRange[Q]":
        """Сдвинуть обе границы на amount."""
        return QuantityRange(self.lower + amount, self.upper + amount)

    def increment(self) -> "QuantityRange[Q]":
        """Сдвинуть диапазон вверх на его размер."""
        return self.shift(self.size())

    def decrement(self) -> "QuantityRange[Q]":
        """Сдвинуть диапазон вниз на его размер."""
        return self.shift(-self.size())

    def expand(self, amount: Q) -> "QuantityRange[Q]":
        """Расширить диапазон на amount с обеих сторон."""
        return QuantityRange(self.lower - amount, self.upper + amount)

    def contract(self, amount: Q) -> "QuantityRange[Q] | None":
        """
        Сузить диапазон на amount с обеих сторон.

        Returns:
            Новый диапазон или None, если границы схлопнулись бы
        """
        lower = self.lower + amount
        upper = self.upper - amount
        if lower.to_primary() >= upper.to_primary():
            return None
        return QuantityRange(lower, upper)

    def divide(self, n: int) -> list["QuantityRange[Q]"]:
        """
        Разбить диапазон на n равных частей в единице lower.

        Returns:
            Список из n диапазонов (пустой при n <= 0)
        """
        if n <= 0:
            return []

        unit = self.lower.unit
        start = self.lower.value
        step = self.upper.to(unit) - start
        step /= n
        cls = type(self.lower)
        bounds = [cls(start + step * i, unit) for i in range(n)]
        bounds.append(self.upper.in_unit(unit))
        return [QuantityRange(bounds[i], bounds[i + 1]) for i in range(n)]

    def to_tuple(self) -> tuple[Q, Q]:
        return (self.lower, self.upper)

    def __str__(self) -> str:
        return f"[{self.lower}, {self.upper})"
