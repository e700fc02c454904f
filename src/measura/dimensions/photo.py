"""
Photo — фотометрические величины

Световой поток, сила света, освещённость, яркость, световая энергия и
экспозиция. Все единицы SI (люмен, кандела, люкс), primary совпадает с SI.

    Illuminance * Area      → LuminousFlux
    LuminousIntensity * sr  → LuminousFlux
    Luminance * Area        → LuminousIntensity
    LuminousFlux * Time     → LuminousEnergy
    Illuminance * Time      → LuminousExposure
"""

from measura.core.dimension import Dimension
from measura.core.quantity import Quantity
from measura.core.unit import UnitOfMeasure


class LuminousFluxUnit(UnitOfMeasure):
    LUMENS = ("lm", 1.0)


class LuminousFlux(Quantity):
    dimension = Dimension(
        "LuminousFlux", LuminousFluxUnit, LuminousFluxUnit.LUMENS, LuminousFluxUnit.LUMENS
    )


class LuminousIntensityUnit(UnitOfMeasure):
    CANDELAS = ("cd", 1.0)


class LuminousIntensity(Quantity):
    dimension = Dimension(
        "LuminousIntensity",
        LuminousIntensityUnit,
        LuminousIntensityUnit.CANDELAS,
        LuminousIntensityUnit.CANDELAS,
    )


class IlluminanceUnit(UnitOfMeasure):
    LUX = ("lx", 1.0)


class Illuminance(Quantity):
    """
    Освещённость: световой поток на единицу площади.

    Examples:
        >>> Illuminance.lux(500.0) * Area.square_meters(4.0)
        LuminousFlux.lumens(2000.0)
    """

    dimension = Dimension("Illuminance", IlluminanceUnit, IlluminanceUnit.LUX, IlluminanceUnit.LUX)


class LuminanceUnit(UnitOfMeasure):
    CANDELAS_PER_SQUARE_METER = ("cd/m²", 1.0)


class Luminance(Quantity):
    dimension = Dimension(
        "Luminance",
        LuminanceUnit,
        LuminanceUnit.CANDELAS_PER_SQUARE_METER,
        LuminanceUnit.CANDELAS_PER_SQUARE_METER,
    )


class LuminousEnergyUnit(UnitOfMeasure):
    LUMEN_SECONDS = ("lm·s", 1.0)


class LuminousEnergy(Quantity):
    dimension = Dimension(
        "LuminousEnergy",
        LuminousEnergyUnit,
        LuminousEnergyUnit.LUMEN_SECONDS,
        LuminousEnergyUnit.LUMEN_SECONDS,
    )


class LuminousExposureUnit(UnitOfMeasure):
    LUX_SECONDS = ("lx·s", 1.0)


class LuminousExposure(Quantity):
    dimension = Dimension(
        "LuminousExposure",
        LuminousExposureUnit,
        LuminousExposureUnit.LUX_SECONDS,
        LuminousExposureUnit.LUX_SECONDS,
    )
