"""
Unit — единица измерения и модель конверсии

Каждая размерность объявляет закрытое перечисление единиц (подкласс
UnitOfMeasure). Член перечисления хранит symbol, factor, offset и тип шкалы.

ДВА ТИПА ШКАЛ:
- RATIO (по умолчанию): to_primary(v) = v * factor, ноль переходит в ноль.
  Конверсия коммутирует со сложением.
- INTERVAL (°C, °F): to_primary(v) = v * factor + offset.
  Абсолютное значение конвертируется с offset, разность (delta) — без него.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. RATIO-единица никогда не имеет offset
2. factor конечен и строго положителен
3. delta-конверсия никогда не применяет offset
4. Конверсия единицы в саму себя возвращает значение без изменений (bit-for-bit)
"""

import math
from enum import Enum
from typing import Final

from measura.core.errors import DimensionDefinitionError, IncompatibleDimensionsError

# =============================================================================
# МЕТРИЧЕСКИЕ ПРЕФИКСЫ (SI)
# =============================================================================

PICO: Final[float] = 1e-12
NANO: Final[float] = 1e-9
MICRO: Final[float] = 1e-6
MILLI: Final[float] = 1e-3
CENTI: Final[float] = 1e-2
DECI: Final[float] = 1e-1
DECA: Final[float] = 1e1
HECTO: Final[float] = 1e2
KILO: Final[float] = 1e3
MEGA: Final[float] = 1e6
GIGA: Final[float] = 1e9
TERA: Final[float] = 1e12
PETA: Final[float] = 1e15
EXA: Final[float] = 1e18

# =============================================================================
# БИНАРНЫЕ ПРЕФИКСЫ (IEC)
# =============================================================================

KIBI: Final[float] = 1024.0
MEBI: Final[float] = 1024.0**2
GIBI: Final[float] = 1024.0**3
TEBI: Final[float] = 1024.0**4
PEBI: Final[float] = 1024.0**5
EXBI: Final[float] = 1024.0**6


# =============================================================================
# ТИП ШКАЛЫ
# =============================================================================


class ScaleKind(str, Enum):
    """Тип шкалы единицы"""

    RATIO = "ratio"
    INTERVAL = "interval"


# =============================================================================
# БАЗОВОЕ ПЕРЕЧИСЛЕНИЕ ЕДИНИЦ
# =============================================================================


class UnitOfMeasure(Enum):
    """
    Базовый класс перечислений единиц.

    Значение члена: (symbol, factor) или (symbol, factor, offset, kind).

    Examples:
        >>> class LengthUnit(UnitOfMeasure):
        ...     METERS = ("m", 1.0)
        ...     KILOMETERS = ("km", 1000.0)
        >>> LengthUnit.KILOMETERS.to_primary(1.5)
        1500.0
        >>> LengthUnit.KILOMETERS.accessor
        'kilometers'
    """

    def __init__(
        self,
        symbol: str,
        factor: float,
        offset: float = 0.0,
        kind: ScaleKind = ScaleKind.RATIO,
    ) -> None:
        if not symbol:
            raise DimensionDefinitionError(f"{self.name}: symbol must be non-empty")
        if not math.isfinite(factor) or factor <= 0:
            raise DimensionDefinitionError(
                f"{self.name}: factor must be finite and positive, got {factor}"
            )
        if kind is ScaleKind.RATIO and offset != 0.0:
            raise DimensionDefinitionError(
                f"{self.name}: ratio-scale unit cannot carry offset {offset}"
            )

        self.symbol = symbol
        self.factor = float(factor)
        self.offset = float(offset)
        self.kind = kind

    @property
    def accessor(self) -> str:
        """Имя для генерируемых конструкторов и аксессоров (meters, to_meters)."""
        return self.name.lower()

    @property
    def is_interval(self) -> bool:
        return self.kind is ScaleKind.INTERVAL

    # -------------------------------------------------------------------------
    # Абсолютная конверсия
    # -------------------------------------------------------------------------

    def to_primary(self, value: float) -> float:
        """Абсолютное значение в этой единице → значение в primary-единице."""
        if self.kind is ScaleKind.RATIO:
            return value * self.factor
        return value * self.factor + self.offset

    def from_primary(self, value: float) -> float:
        """Абсолютное значение в primary-единице → значение в этой единице."""
        if self.kind is ScaleKind.RATIO:
            return value / self.factor
        return (value - self.offset) / self.factor

    # -------------------------------------------------------------------------
    # Delta-конверсия (разность двух показаний, offset не применяется)
    # -------------------------------------------------------------------------

    def delta_to_primary(self, delta: float) -> float:
        return delta * self.factor

    def delta_from_primary(self, delta: float) -> float:
        return delta / self.factor

    # -------------------------------------------------------------------------
    # Конверсия между единицами
    # -------------------------------------------------------------------------

    def convert_to(self, value: float, target: "UnitOfMeasure") -> float:
        """
        Конверсия абсолютного значения в другую единицу той же размерности.

        Args:
            value: Значение в этой единице
            target: Целевая единица

        Returns:
            Значение в target (value без изменений, если target is self)

        Raises:
            IncompatibleDimensionsError: Если target из другого перечисления
        """
        if target is self:
            return value
        self._check_compatible(target)
        return target.from_primary(self.to_primary(value))

    def convert_delta_to(self, delta: float, target: "UnitOfMeasure") -> float:
        """Конверсия разности (delta) в другую единицу, без offset."""
        if target is self:
            return delta
        self._check_compatible(target)
        return target.delta_from_primary(self.delta_to_primary(delta))

    def _check_compatible(self, target: "UnitOfMeasure") -> None:
        if type(target) is not type(self):
            raise IncompatibleDimensionsError(
                f"Cannot convert {type(self).__name__}.{self.name} "
                f"to {type(target).__name__}.{target.name}"
            )
