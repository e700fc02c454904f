"""
Space — Length, Area, Volume, Angle, SolidAngle

Primary-единицы совпадают с SI: m, m², m³, rad, sr.
"""

import math
from typing import Final

from measura.core.dimension import Dimension
from measura.core.quantity import Quantity
from measura.core.unit import CENTI, DECI, HECTO, KILO, MICRO, MILLI, NANO, UnitOfMeasure

# =============================================================================
# КОНСТАНТЫ КОНВЕРСИИ
# =============================================================================

# Международный дюйм / фут / ярд / миля (1959)
INCH_M: Final[float] = 0.0254
FOOT_M: Final[float] = 0.3048
YARD_M: Final[float] = 0.9144
MILE_M: Final[float] = 1609.344

# Морская миля
NAUTICAL_MILE_M: Final[float] = 1852.0

# Астрономическая единица (IAU 2012), световой год, парсек
ASTRONOMICAL_UNIT_M: Final[float] = 1.495978707e11
LIGHT_YEAR_M: Final[float] = 9.4607304725808e15
PARSEC_M: Final[float] = 3.08567758149137e16

# US liquid gallon
US_GALLON_M3: Final[float] = 0.003785411784


# =============================================================================
# LENGTH
# =============================================================================


class LengthUnit(UnitOfMeasure):
    METERS = ("m", 1.0)
    ANGSTROMS = ("Å", 1e-10)
    NANOMETERS = ("nm", NANO)
    MICRONS = ("µm", MICRO)
    MILLIMETERS = ("mm", MILLI)
    CENTIMETERS = ("cm", CENTI)
    DECIMETERS = ("dm", DECI)
    HECTOMETERS = ("hm", HECTO)
    KILOMETERS = ("km", KILO)
    INCHES = ("in", INCH_M)
    FEET = ("ft", FOOT_M)
    YARDS = ("yd", YARD_M)
    MILES = ("mi", MILE_M)
    NAUTICAL_MILES = ("nmi", NAUTICAL_MILE_M)
    ASTRONOMICAL_UNITS = ("au", ASTRONOMICAL_UNIT_M)
    LIGHT_YEARS = ("ly", LIGHT_YEAR_M)
    PARSECS = ("pc", PARSEC_M)


class Length(Quantity):
    """Длина."""

    dimension = Dimension("Length", LengthUnit, LengthUnit.METERS, LengthUnit.METERS)


# =============================================================================
# AREA
# =============================================================================


class AreaUnit(UnitOfMeasure):
    SQUARE_METERS = ("m²", 1.0)
    SQUARE_MILLIMETERS = ("mm²", MILLI**2)
    SQUARE_CENTIMETERS = ("cm²", CENTI**2)
    SQUARE_KILOMETERS = ("km²", KILO**2)
    HECTARES = ("ha", 1e4)
    SQUARE_INCHES = ("in²", INCH_M**2)
    SQUARE_FEET = ("ft²", FOOT_M**2)
    SQUARE_YARDS = ("yd²", YARD_M**2)
    SQUARE_MILES = ("mi²", MILE_M**2)
    ACRES = ("ac", 4046.8564224)


class Area(Quantity):
    """Площадь."""

    dimension = Dimension("Area", AreaUnit, AreaUnit.SQUARE_METERS, AreaUnit.SQUARE_METERS)


# =============================================================================
# VOLUME
# =============================================================================


class VolumeUnit(UnitOfMeasure):
    CUBIC_METERS = ("m³", 1.0)
    CUBIC_MILLIMETERS = ("mm³", MILLI**3)
    CUBIC_CENTIMETERS = ("cm³", CENTI**3)
    CUBIC_KILOMETERS = ("km³", KILO**3)
    MILLILITERS = ("mL", 1e-6)
    LITERS = ("L", 1e-3)
    CUBIC_INCHES = ("in³", INCH_M**3)
    CUBIC_FEET = ("ft³", FOOT_M**3)
    CUBIC_YARDS = ("yd³", YARD_M**3)
    FLUID_OUNCES = ("fl oz", US_GALLON_M3 / 128)
    CUPS = ("cup", US_GALLON_M3 / 16)
    PINTS = ("pt", US_GALLON_M3 / 8)
    QUARTS = ("qt", US_GALLON_M3 / 4)
    GALLONS = ("gal", US_GALLON_M3)


class Volume(Quantity):
    """Объём."""

    dimension = Dimension("Volume", VolumeUnit, VolumeUnit.CUBIC_METERS, VolumeUnit.CUBIC_METERS)


# =============================================================================
# ANGLE / SOLID ANGLE
# =============================================================================


class AngleUnit(UnitOfMeasure):
    RADIANS = ("rad", 1.0)
    DEGREES = ("°", math.pi / 180)
    GRADIANS = ("gon", math.pi / 200)
    TURNS = ("tr", 2 * math.pi)
    ARCMINUTES = ("′", math.pi / 10800)
    ARCSECONDS = ("″", math.pi / 648000)


class Angle(Quantity):
    """Плоский угол."""

    dimension = Dimension("Angle", AngleUnit, AngleUnit.RADIANS, AngleUnit.RADIANS)

    def sin(self) -> float:
        return math.sin(self.to_radians())

    def cos(self) -> float:
        return math.cos(self.to_radians())

    def tan(self) -> float:
        return math.tan(self.to_radians())


class SolidAngleUnit(UnitOfMeasure):
    STERADIANS = ("sr", 1.0)
    SQUARE_DEGREES = ("deg²", (math.pi / 180) ** 2)
    SPHERES = ("sphere", 4 * math.pi)


class SolidAngle(Quantity):
    """Телесный угол."""

    dimension = Dimension(
        "SolidAngle", SolidAngleUnit, SolidAngleUnit.STERADIANS, SolidAngleUnit.STERADIANS
    )
