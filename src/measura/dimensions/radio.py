"""
Radio — радиометрия и радиоактивность

Энергетические аналоги фотометрических величин (облучённость, сила и
яркость излучения, спектральная мощность), а также активность источника,
эквивалентная доза и поток частиц.
"""

from typing import Final

from measura.core.dimension import Dimension
from measura.core.quantity import Quantity
from measura.core.unit import UnitOfMeasure

# Кюри (беккерели)
CURIE_BQ: Final[float] = 3.7e10

# 1 Sv = 100 rem
REMS_PER_SIEVERT: Final[float] = 100.0


# =============================================================================
# РАДИОАКТИВНОСТЬ
# =============================================================================


class ActivityUnit(UnitOfMeasure):
    BECQUERELS = ("Bq", 1.0)
    CURIES = ("Ci", CURIE_BQ)


class Activity(Quantity):
    """Активность радиоактивного источника (распадов в секунду)."""

    dimension = Dimension(
        "Activity", ActivityUnit, ActivityUnit.BECQUERELS, ActivityUnit.BECQUERELS
    )


class DoseUnit(UnitOfMeasure):
    SIEVERTS = ("Sv", 1.0)
    REMS = ("rem", 1.0 / REMS_PER_SIEVERT)


class Dose(Quantity):
    """
    Эквивалентная доза.

    Поглощённая доза (Gy) — отдельная величина SpecificEnergy: зиверт
    учитывает биологический весовой коэффициент, и прямой конверсии нет.
    """

    dimension = Dimension("Dose", DoseUnit, DoseUnit.SIEVERTS, DoseUnit.SIEVERTS)


class ParticleFluxUnit(UnitOfMeasure):
    BECQUERELS_PER_SQUARE_METER_SECOND = ("Bq/(m²·s)", 1.0)


class ParticleFlux(Quantity):
    dimension = Dimension(
        "ParticleFlux",
        ParticleFluxUnit,
        ParticleFluxUnit.BECQUERELS_PER_SQUARE_METER_SECOND,
        ParticleFluxUnit.BECQUERELS_PER_SQUARE_METER_SECOND,
    )


# =============================================================================
# РАДИОМЕТРИЯ
# =============================================================================


class IrradianceUnit(UnitOfMeasure):
    WATTS_PER_SQUARE_METER = ("W/m²", 1.0)


class Irradiance(Quantity):
    """
    Облучённость (мощность излучения на единицу площади).

    Examples:
        >>> Irradiance.watts_per_square_meter(1000.0) * Area.square_meters(2.0)
        Power.watts(2000.0)
    """

    dimension = Dimension(
        "Irradiance",
        IrradianceUnit,
        IrradianceUnit.WATTS_PER_SQUARE_METER,
        IrradianceUnit.WATTS_PER_SQUARE_METER,
    )


class RadiantIntensityUnit(UnitOfMeasure):
    WATTS_PER_STERADIAN = ("W/sr", 1.0)


class RadiantIntensity(Quantity):
    dimension = Dimension(
        "RadiantIntensity",
        RadiantIntensityUnit,
        RadiantIntensityUnit.WATTS_PER_STERADIAN,
        RadiantIntensityUnit.WATTS_PER_STERADIAN,
    )


class RadianceUnit(UnitOfMeasure):
    WATTS_PER_STERADIAN_PER_SQUARE_METER = ("W/(sr·m²)", 1.0)


class Radiance(Quantity):
    dimension = Dimension(
        "Radiance",
        RadianceUnit,
        RadianceUnit.WATTS_PER_STERADIAN_PER_SQUARE_METER,
        RadianceUnit.WATTS_PER_STERADIAN_PER_SQUARE_METER,
    )


class SpectralPowerUnit(UnitOfMeasure):
    WATTS_PER_METER = ("W/m", 1.0)


class SpectralPower(Quantity):
    """Мощность на единицу длины волны."""

    dimension = Dimension(
        "SpectralPower",
        SpectralPowerUnit,
        SpectralPowerUnit.WATTS_PER_METER,
        SpectralPowerUnit.WATTS_PER_METER,
    )


class SpectralIrradianceUnit(UnitOfMeasure):
    WATTS_PER_CUBIC_METER = ("W/m³", 1.0)


class SpectralIrradiance(Quantity):
    """Облучённость на единицу длины волны (W/m² на m)."""

    dimension = Dimension(
        "SpectralIrradiance",
        SpectralIrradianceUnit,
        SpectralIrradianceUnit.WATTS_PER_CUBIC_METER,
        SpectralIrradianceUnit.WATTS_PER_CUBIC_METER,
    )
