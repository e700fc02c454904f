"""
Motion — Velocity, Acceleration, Force, Momentum, Pressure

Все primary-единицы когерентны с SI.
"""

from typing import Final

from measura.core.dimension import Dimension
from measura.core.quantity import Quantity
from measura.core.unit import KILO, MEGA, MILLI, UnitOfMeasure
from measura.dimensions.space import FOOT_M, MILE_M, NAUTICAL_MILE_M

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Стандартное ускорение свободного падения (m/s²)
STANDARD_GRAVITY: Final[float] = 9.80665

# Avoirdupois pound (kg)
POUND_KG: Final[float] = 0.45359237

# Стандартная атмосфера (Pa)
STANDARD_ATMOSPHERE_PA: Final[float] = 101325.0


# =============================================================================
# VELOCITY
# =============================================================================


class VelocityUnit(UnitOfMeasure):
    METERS_PER_SECOND = ("m/s", 1.0)
    MILLIMETERS_PER_SECOND = ("mm/s", MILLI)
    KILOMETERS_PER_SECOND = ("km/s", KILO)
    KILOMETERS_PER_HOUR = ("km/h", KILO / 3600)
    FEET_PER_SECOND = ("ft/s", FOOT_M)
    MILES_PER_HOUR = ("mph", MILE_M / 3600)
    KNOTS = ("kn", NAUTICAL_MILE_M / 3600)


class Velocity(Quantity):
    """Скорость."""

    dimension = Dimension(
        "Velocity", VelocityUnit, VelocityUnit.METERS_PER_SECOND, VelocityUnit.METERS_PER_SECOND
    )


# =============================================================================
# ACCELERATION
# =============================================================================


class AccelerationUnit(UnitOfMeasure):
    METERS_PER_SECOND_SQUARED = ("m/s²", 1.0)
    MILLIMETERS_PER_SECOND_SQUARED = ("mm/s²", MILLI)
    FEET_PER_SECOND_SQUARED = ("ft/s²", FOOT_M)
    MILES_PER_HOUR_SQUARED = ("mph²", MILE_M / 3600**2)
    EARTH_GRAVITIES = ("g", STANDARD_GRAVITY)


class Acceleration(Quantity):
    """Ускорение."""

    dimension = Dimension(
        "Acceleration",
        AccelerationUnit,
        AccelerationUnit.METERS_PER_SECOND_SQUARED,
        AccelerationUnit.METERS_PER_SECOND_SQUARED,
    )


# =============================================================================
# FORCE
# =============================================================================


class ForceUnit(UnitOfMeasure):
    NEWTONS = ("N", 1.0)
    KILONEWTONS = ("kN", KILO)
    MEGANEWTONS = ("MN", MEGA)
    KILOGRAM_FORCE = ("kgf", STANDARD_GRAVITY)
    POUND_FORCE = ("lbf", POUND_KG * STANDARD_GRAVITY)
    DYNES = ("dyn", 1e-5)


class Force(Quantity):
    """Сила."""

    dimension = Dimension("Force", ForceUnit, ForceUnit.NEWTONS, ForceUnit.NEWTONS)


# =============================================================================
# MOMENTUM
# =============================================================================


class MomentumUnit(UnitOfMeasure):
    KILOGRAM_METERS_PER_SECOND = ("kg·m/s", 1.0)
    NEWTON_SECONDS = ("N·s", 1.0)
    POUND_FEET_PER_SECOND = ("lb·ft/s", POUND_KG * FOOT_M)


class Momentum(Quantity):
    """Импульс."""

    dimension = Dimension(
        "Momentum",
        MomentumUnit,
        MomentumUnit.KILOGRAM_METERS_PER_SECOND,
        MomentumUnit.KILOGRAM_METERS_PER_SECOND,
    )


# =============================================================================
# PRESSURE
# =============================================================================


class PressureUnit(UnitOfMeasure):
    PASCALS = ("Pa", 1.0)
    KILOPASCALS = ("kPa", KILO)
    MEGAPASCALS = ("MPa", MEGA)
    BARS = ("bar", 1e5)
    POUNDS_PER_SQUARE_INCH = ("psi", 6894.757293168)
    STANDARD_ATMOSPHERES = ("atm", STANDARD_ATMOSPHERE_PA)
    MILLIMETERS_OF_MERCURY = ("mmHg", 133.322387415)
    INCHES_OF_MERCURY = ("inHg", 3386.389)
    TORRS = ("Torr", STANDARD_ATMOSPHERE_PA / 760)


class Pressure(Quantity):
    """Давление."""

    dimension = Dimension("Pressure", PressureUnit, PressureUnit.PASCALS, PressureUnit.PASCALS)
