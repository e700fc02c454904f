"""
Mass — Mass, Density, ChemicalAmount, AreaDensity, MomentOfInertia

Primary-единица Mass — грамм, SI-единица — килограмм. Композиция величин
выполняется в SI, поэтому kg * m/s² даёт N.
"""

from typing import Final

from measura.core.dimension import Dimension
from measura.core.quantity import Quantity
from measura.core.unit import KILO, MEGA, MICRO, MILLI, NANO, UnitOfMeasure

# =============================================================================
# КОНСТАНТЫ КОНВЕРСИИ
# =============================================================================

# Avoirdupois pound (граммы)
POUND_G: Final[float] = 453.59237

# Гран (граммы), база тройской системы
GRAIN_G: Final[float] = 0.06479891

# Масса Солнца (граммы)
SOLAR_MASS_G: Final[float] = 1.98855e33

# Атомная единица массы (граммы)
DALTON_G: Final[float] = 1.66053906660e-24


# =============================================================================
# MASS
# =============================================================================


class MassUnit(UnitOfMeasure):
    GRAMS = ("g", 1.0)
    NANOGRAMS = ("ng", NANO)
    MICROGRAMS = ("mcg", MICRO)
    MILLIGRAMS = ("mg", MILLI)
    KILOGRAMS = ("kg", KILO)
    TONNES = ("t", MEGA)
    OUNCES = ("oz", POUND_G / 16)
    POUNDS = ("lb", POUND_G)
    KILOPOUNDS = ("klb", POUND_G * KILO)
    MEGAPOUNDS = ("Mlb", POUND_G * MEGA)
    STONE = ("st", POUND_G * 14)
    GRAINS = ("gr", GRAIN_G)
    PENNYWEIGHTS = ("dwt", GRAIN_G * 24)
    TROY_OUNCES = ("oz t", GRAIN_G * 480)
    TROY_POUNDS = ("lb t", GRAIN_G * 5760)
    TOLAS = ("tola", GRAIN_G * 180)
    CARATS = ("ct", 0.2)
    SOLAR_MASSES = ("M☉", SOLAR_MASS_G)
    DALTONS = ("Da", DALTON_G)


class Mass(Quantity):
    """Масса."""

    dimension = Dimension("Mass", MassUnit, MassUnit.GRAMS, MassUnit.KILOGRAMS)


# =============================================================================
# DENSITY
# =============================================================================


class DensityUnit(UnitOfMeasure):
    KILOGRAMS_PER_CUBIC_METER = ("kg/m³", 1.0)
    KILOGRAMS_PER_LITER = ("kg/L", 1000.0)
    GRAMS_PER_LITER = ("g/L", 1.0)
    MILLIGRAMS_PER_LITER = ("mg/L", 0.001)
    GRAMS_PER_MILLILITER = ("g/mL", 1000.0)
    GRAMS_PER_CUBIC_CENTIMETER = ("g/cm³", 1000.0)
    POUNDS_PER_CUBIC_FOOT = ("lb/ft³", 16.01846337396)
    POUNDS_PER_GALLON = ("lb/gal", 119.8264273167)


class Density(Quantity):
    """Плотность."""

    dimension = Dimension(
        "Density",
        DensityUnit,
        DensityUnit.KILOGRAMS_PER_CUBIC_METER,
        DensityUnit.KILOGRAMS_PER_CUBIC_METER,
    )


# =============================================================================
# CHEMICAL AMOUNT
# =============================================================================


class ChemicalAmountUnit(UnitOfMeasure):
    MOLES = ("mol", 1.0)
    POUND_MOLES = ("lb-mol", POUND_G)


class ChemicalAmount(Quantity):
    """Количество вещества."""

    dimension = Dimension(
        "ChemicalAmount", ChemicalAmountUnit, ChemicalAmountUnit.MOLES, ChemicalAmountUnit.MOLES
    )


# =============================================================================
# AREA DENSITY
# =============================================================================

# Avoirdupois pound (кг) и акр (м²)
POUND_KG: Final[float] = POUND_G / KILO
ACRE_M2: Final[float] = 4046.8564224


class AreaDensityUnit(UnitOfMeasure):
    KILOGRAMS_PER_SQUARE_METER = ("kg/m²", 1.0)
    KILOGRAMS_PER_HECTARE = ("kg/ha", 1e-4)
    GRAMS_PER_SQUARE_CENTIMETER = ("g/cm²", 10.0)
    POUNDS_PER_ACRE = ("lb/ac", POUND_KG / ACRE_M2)


class AreaDensity(Quantity):
    """Поверхностная плотность (урожайность, нормы внесения удобрений)."""

    dimension = Dimension(
        "AreaDensity",
        AreaDensityUnit,
        AreaDensityUnit.KILOGRAMS_PER_SQUARE_METER,
        AreaDensityUnit.KILOGRAMS_PER_SQUARE_METER,
    )


# =============================================================================
# MOMENT OF INERTIA
# =============================================================================


class MomentOfInertiaUnit(UnitOfMeasure):
    KILOGRAM_METERS_SQUARED = ("kg·m²", 1.0)
    POUND_FEET_SQUARED = ("lb·ft²", POUND_KG * 0.3048**2)


class MomentOfInertia(Quantity):
    """
    Момент инерции.

    Mass * Area даёт I = m·r² для точечной массы на расстоянии r.
    """

    dimension = Dimension(
        "MomentOfInertia",
        MomentOfInertiaUnit,
        MomentOfInertiaUnit.KILOGRAM_METERS_SQUARED,
        MomentOfInertiaUnit.KILOGRAM_METERS_SQUARED,
    )
