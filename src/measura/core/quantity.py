"""
Quantity — типизированная физическая величина (magnitude, unit)

Единая обобщённая реализация арифметики, сравнения и форматирования для всех
размерностей. Подкласс объявляет только атрибут `dimension`; именованные
конструкторы (Length.meters) и аксессоры (to_meters) генерируются
автоматически для каждой единицы.

СЕМАНТИКА:
- `+` / `-`: правый операнд конвертируется в единицу левого через
  DELTA-путь; результат в единице левого операнда. Для интервальных шкал
  правый операнд всегда трактуется как разность (100 °F - 5 °C = 91 °F).
- `*` / `/` на скаляр масштабируют magnitude, единица не меняется.
- `q / q` одной размерности → float (отношение канонических значений).
- `q * q` / `q / q` разных размерностей → каталог правил композиции.
- `==`: канонические значения в пределах гибридной толерантности.
- `<`, `>`: обычное сравнение канонических значений (False при NaN).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Величина неизменяема; операции создают новые экземпляры
2. Деление на ноль следует IEEE-754 и не бросает исключение
3. Величины разных размерностей никогда не равны
"""

import math
from numbers import Real
from typing import Any, Callable, ClassVar, TypeVar

from measura.core.composition import DEFAULT_CATALOG, Operator
from measura.core.dimension import Dimension
from measura.core.errors import DimensionDefinitionError, IncompatibleDimensionsError
from measura.core.numerical_safeguards import (
    DEFAULT_TOLERANCE,
    ToleranceConfig,
    compare_floats,
    ieee_divide,
    is_close_with,
)
from measura.core.unit import ScaleKind, UnitOfMeasure

Q = TypeVar("Q", bound="Quantity")


class Quantity:
    """
    Базовый класс величин.

    Подкласс обязан объявить `dimension: ClassVar[Dimension]`.

    Examples:
        >>> Length.meters(100.0) == Length.kilometers(0.1)
        True
        >>> str(Length.meters(5.0) + Length.centimeters(50.0))
        '5.5 m'
    """

    dimension: ClassVar[Dimension]
    tolerance: ClassVar[ToleranceConfig] = DEFAULT_TOLERANCE

    _value: float
    _unit: UnitOfMeasure

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)

        dimension = cls.__dict__.get("dimension")
        if dimension is None:
            return
        if not isinstance(dimension, Dimension):
            raise DimensionDefinitionError(
                f"{cls.__name__}.dimension must be a Dimension, got {type(dimension).__name__}"
            )

        interval = dimension.scale_kind is ScaleKind.INTERVAL
        for unit in dimension.units():
            _install_unit_methods(cls, unit, interval)

    def __init__(self, value: float, unit: UnitOfMeasure) -> None:
        dimension = getattr(type(self), "dimension", None)
        if dimension is None:
            raise TypeError(f"{type(self).__name__} has no dimension and cannot be instantiated")
        if not isinstance(unit, dimension.unit_type):
            raise IncompatibleDimensionsError(
                f"{unit!r} is not a unit of {dimension.name}"
            )
        object.__setattr__(self, "_value", float(value))
        object.__setattr__(self, "_unit", unit)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    # =========================================================================
    # ДОСТУП К ЗНАЧЕНИЮ
    # =========================================================================

    @property
    def value(self) -> float:
        """Magnitude в собственной единице."""
        return self._value

    @property
    def unit(self) -> UnitOfMeasure:
        return self._unit

    def to_primary(self) -> float:
        """Каноническое значение (в primary-единице размерности)."""
        return self._unit.to_primary(self._value)

    def to_si(self) -> float:
        """Значение в SI-единице размерности."""
        return self._unit.convert_to(self._value, self.dimension.si_unit)

    def to(self, unit: UnitOfMeasure) -> float:
        """
        Абсолютное значение в указанной единице.

        Raises:
            IncompatibleDimensionsError: Если unit не принадлежит размерности
        """
        self._check_unit(unit)
        return self._unit.convert_to(self._value, unit)

    def to_delta(self, unit: UnitOfMeasure) -> float:
        """Значение как разность (без offset) в указанной единице."""
        self._check_unit(unit)
        return self._unit.convert_delta_to(self._value, unit)

    def in_unit(self: Q, unit: UnitOfMeasure) -> Q:
        """Та же величина, выраженная в другой единице."""
        return type(self)(self.to(unit), unit)

    def to_tuple(self) -> tuple[float, UnitOfMeasure]:
        return (self._value, self._unit)

    def _check_unit(self, unit: UnitOfMeasure) -> None:
        if not isinstance(unit, self.dimension.unit_type):
            raise IncompatibleDimensionsError(
                f"{unit!r} is not a unit of {self.dimension.name}"
            )

    def _with_value(self: Q, value: float) -> Q:
        return type(self)(value, self._unit)

    def _same_dimension(self, other: "Quantity", operation: str) -> None:
        if other.dimension != self.dimension:
            raise IncompatibleDimensionsError(
                f"Cannot {operation} {self.dimension.name} and {other.dimension.name}"
            )

    def _delta_in_own_unit(self, other: "Quantity") -> float:
        return other._unit.convert_delta_to(other._value, self._unit)

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    def __add__(self: Q, other: Any) -> Q:
        if not isinstance(other, Quantity):
            return NotImplemented
        self._same_dimension(other, "add")
        return self._with_value(self._value + self._delta_in_own_unit(other))

    def __sub__(self: Q, other: Any) -> Q:
        if not isinstance(other, Quantity):
            return NotImplemented
        self._same_dimension(other, "subtract")
        return self._with_value(self._value - self._delta_in_own_unit(other))

    def __mul__(self, other: Any) -> Any:
        if isinstance(other, Real):
            return self._with_value(self._value * float(other))
        if isinstance(other, Quantity):
            return DEFAULT_CATALOG.apply(self, Operator.MUL, other)
        return NotImplemented

    def __rmul__(self, other: Any) -> Any:
        if isinstance(other, Real):
            return self._with_value(float(other) * self._value)
        return NotImplemented

    def __truediv__(self, other: Any) -> Any:
        if isinstance(other, Real):
            return self._with_value(ieee_divide(self._value, float(other)))
        if isinstance(other, Quantity):
            if other.dimension == self.dimension:
                return ieee_divide(self.to_primary(), other.to_primary())
            return DEFAULT_CATALOG.apply(self, Operator.DIV, other)
        return NotImplemented

    def __neg__(self: Q) -> Q:
        return self._with_value(-self._value)

    def __pos__(self: Q) -> Q:
        return self

    def __abs__(self: Q) -> Q:
        return self._with_value(abs(self._value))

    # =========================================================================
    # СРАВНЕНИЕ
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        if other.dimension != self.dimension:
            return False
        return is_close_with(self.to_primary(), other.to_primary(), self.tolerance)

    def __hash__(self) -> int:
        """
        Хеш зависит только от размерности, но не от значения.

        Равенство толерантное: значения, различающиеся на float-шум, равны,
        и обязаны иметь одинаковый хеш. Хеш от value или to_primary() это
        нарушает. Все величины одной размерности попадают в одну корзину.
        """
        return hash(self.dimension.name)

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        self._same_dimension(other, "compare")
        return self.to_primary() < other.to_primary()

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        self._same_dimension(other, "compare")
        return self.to_primary() <= other.to_primary()

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        self._same_dimension(other, "compare")
        return self.to_primary() > other.to_primary()

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        self._same_dimension(other, "compare")
        return self.to_primary() >= other.to_primary()

    def compare(self, other: "Quantity") -> int | None:
        """
        Трёхзначное сравнение канонических значений.

        Returns:
            -1, 0, +1 или None если хотя бы одно значение NaN
        """
        self._same_dimension(other, "compare")
        return compare_floats(self.to_primary(), other.to_primary())

    def is_close_to(self, other: "Quantity", config: ToleranceConfig | None = None) -> bool:
        """Равенство с явно заданной толерантностью."""
        self._same_dimension(other, "compare")
        return is_close_with(self.to_primary(), other.to_primary(), config or self.tolerance)

    def approx_eq(self, other: "Quantity", tolerance: "Quantity") -> bool:
        """
        Равенство в пределах абсолютной толерантности, заданной величиной.

        tolerance трактуется как разность (для температуры: 0.5 °C = 0.5 K).

        Examples:
            >>> Length.meters(100.0).approx_eq(Length.meters(100.4), Length.centimeters(50.0))
            True
        """
        self._same_dimension(other, "compare")
        self._same_dimension(tolerance, "compare")
        limit = abs(tolerance._unit.delta_to_primary(tolerance._value))
        return abs(self.to_primary() - other.to_primary()) <= limit

    def min(self: Q, other: Q) -> Q:
        """Меньшая из величин, в единице self."""
        self._same_dimension(other, "compare")
        if self.to_primary() <= other.to_primary():
            return self
        return other.in_unit(self._unit)

    def max(self: Q, other: Q) -> Q:
        """Большая из величин, в единице self."""
        self._same_dimension(other, "compare")
        if self.to_primary() >= other.to_primary():
            return self
        return other.in_unit(self._unit)

    # =========================================================================
    # ПРЕОБРАЗОВАНИЯ MAGNITUDE
    # =========================================================================

    def map(self: Q, fn: Callable[[float], float]) -> Q:
        """Применить функцию к magnitude, единица не меняется."""
        return self._with_value(fn(self._value))

    def ceil(self: Q) -> Q:
        return self._with_value(float(math.ceil(self._value)))

    def floor(self: Q) -> Q:
        return self._with_value(float(math.floor(self._value)))

    def round(self: Q, ndigits: int = 0) -> Q:
        return self._with_value(round(self._value, ndigits))

    # =========================================================================
    # ОТОБРАЖЕНИЕ
    # =========================================================================

    def __str__(self) -> str:
        return f"{self._value} {self._unit.symbol}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}.{self._unit.accessor}({self._value!r})"


# =============================================================================
# ГЕНЕРАЦИЯ КОНСТРУКТОРОВ И АКСЕССОРОВ
# =============================================================================


def _install_unit_methods(cls: type[Quantity], unit: UnitOfMeasure, interval: bool) -> None:
    """
    Добавить в cls конструктор `<unit>` и аксессоры для единицы.

    Для интервальных размерностей вместо `to_<unit>` создаются
    `to_<unit>_scale` (абсолютное значение) и `to_<unit>_degrees` (разность).
    """
    name = unit.accessor
    dimension_name = cls.dimension.name

    def constructor(klass: type[Q], value: float) -> Q:
        return klass(value, unit)

    constructor.__doc__ = f"{dimension_name} в {unit.symbol}."
    methods: dict[str, Any] = {name: classmethod(constructor)}

    if interval:

        def to_scale(self: Quantity) -> float:
            return self.to(unit)

        def to_degrees(self: Quantity) -> float:
            return self.to_delta(unit)

        to_scale.__doc__ = f"Абсолютное значение в {unit.symbol}."
        to_degrees.__doc__ = f"Разность в {unit.symbol}."
        methods[f"to_{name}_scale"] = to_scale
        methods[f"to_{name}_degrees"] = to_degrees
    else:

        def to_unit(self: Quantity) -> float:
            return self.to(unit)

        to_unit.__doc__ = f"Значение в {unit.symbol}."
        methods[f"to_{name}"] = to_unit

    for method_name, method in methods.items():
        if any(method_name in vars(base) for base in cls.__mro__):
            raise DimensionDefinitionError(
                f"{cls.__name__}: generated method {method_name!r} shadows an existing attribute"
            )
        target = method.__func__ if isinstance(method, classmethod) else method
        target.__name__ = method_name
        target.__qualname__ = f"{cls.__name__}.{method_name}"
        setattr(cls, method_name, method)
