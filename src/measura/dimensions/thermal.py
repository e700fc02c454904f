"""
Thermal — Temperature, ThermalCapacity

Temperature — единственная размерность с интервальными шкалами (°C, °F).

АРИФМЕТИКА ТЕМПЕРАТУР:
- Правый операнд `+` / `-` ВСЕГДА трактуется как разность (delta) и
  конвертируется без offset: 100 °F - 5 °C = 100 °F - 9 °F = 91 °F.
- add_delta(t) — явный синоним `+`.
- difference(t) — разность двух абсолютных показаний (в единице self).
- Для каждой единицы генерируются два аксессора:
  to_<unit>_scale() — абсолютное показание, to_<unit>_degrees() — разность.
- Композиция (Temperature * ThermalCapacity) использует абсолютную шкалу Кельвина.
"""

from typing import Final

from measura.core.dimension import Dimension
from measura.core.quantity import Quantity
from measura.core.unit import ScaleKind, UnitOfMeasure

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Смещение шкалы Цельсия относительно Кельвина
CELSIUS_OFFSET_K: Final[float] = 273.15

# Размер градуса Фаренгейта/Ранкина в кельвинах
FAHRENHEIT_DEGREE_K: Final[float] = 5.0 / 9.0

# Абсолютный ноль по Фаренгейту (°F, взятый по модулю)
FAHRENHEIT_ZERO_OFFSET: Final[float] = 459.67


# =============================================================================
# TEMPERATURE
# =============================================================================


class TemperatureUnit(UnitOfMeasure):
    KELVIN = ("K", 1.0)
    CELSIUS = ("°C", 1.0, CELSIUS_OFFSET_K, ScaleKind.INTERVAL)
    FAHRENHEIT = (
        "°F",
        FAHRENHEIT_DEGREE_K,
        FAHRENHEIT_ZERO_OFFSET * FAHRENHEIT_DEGREE_K,
        ScaleKind.INTERVAL,
    )
    RANKINE = ("°R", FAHRENHEIT_DEGREE_K)


class Temperature(Quantity):
    """
    Температура.

    Examples:
        Temperature.celsius(100.0).to_fahrenheit_scale()    # ≈ 212.0
        Temperature.celsius(10.0).to_fahrenheit_degrees()   # ≈ 18.0
        Temperature.fahrenheit(100.0) - Temperature.celsius(5.0)  # ≈ 91 °F
    """

    dimension = Dimension(
        "Temperature", TemperatureUnit, TemperatureUnit.KELVIN, TemperatureUnit.KELVIN
    )

    def add_delta(self, delta: "Temperature") -> "Temperature":
        """Прибавить разность температур (эквивалент `+`)."""
        return self + delta

    def difference(self, other: "Temperature") -> "Temperature":
        """
        Разность двух абсолютных показаний, выраженная в единице self.

        Examples:
            Temperature.celsius(30.0).difference(Temperature.fahrenheit(50.0))  # ≈ 20 °C
        """
        self._same_dimension(other, "subtract")
        delta_k = self.to_primary() - other.to_primary()
        return Temperature(self.unit.delta_from_primary(delta_k), self.unit)

    def is_below_absolute_zero(self) -> bool:
        return self.to_primary() < 0.0


# =============================================================================
# THERMAL CAPACITY
# =============================================================================


class ThermalCapacityUnit(UnitOfMeasure):
    JOULES_PER_KELVIN = ("J/K", 1.0)
    KILOJOULES_PER_KELVIN = ("kJ/K", 1000.0)


class ThermalCapacity(Quantity):
    """Теплоёмкость."""

    dimension = Dimension(
        "ThermalCapacity",
        ThermalCapacityUnit,
        ThermalCapacityUnit.JOULES_PER_KELVIN,
        ThermalCapacityUnit.JOULES_PER_KELVIN,
    )
