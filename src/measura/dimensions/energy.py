"""
Energy — Energy, Power и производные (плотность, удельная и молярная энергия, ramp)

Primary-единица Energy — ватт-час, SI-единица — джоуль.
"""

from typing import Final

from measura.core.dimension import Dimension
from measura.core.quantity import Quantity
from measura.core.unit import GIGA, KILO, MEGA, MICRO, MILLI, NANO, PICO, TERA, UnitOfMeasure

# =============================================================================
# КОНСТАНТЫ КОНВЕРСИИ (в ватт-часах)
# =============================================================================

# Джоуль = 1 W·s
JOULE_WH: Final[float] = 1.0 / 3600.0

# British thermal unit (ISO)
BTU_WH: Final[float] = 0.2930710701722222

# Электронвольт (джоули)
ELECTRON_VOLT_J: Final[float] = 1.602176565e-19

# Термохимическая калория (джоули)
CALORIE_J: Final[float] = 4.184


# =============================================================================
# ENERGY
# =============================================================================


class EnergyUnit(UnitOfMeasure):
    WATT_HOURS = ("Wh", 1.0)
    MILLIWATT_HOURS = ("mWh", MILLI)
    KILOWATT_HOURS = ("kWh", KILO)
    MEGAWATT_HOURS = ("MWh", MEGA)
    GIGAWATT_HOURS = ("GWh", GIGA)
    JOULES = ("J", JOULE_WH)
    PICOJOULES = ("pJ", PICO * JOULE_WH)
    NANOJOULES = ("nJ", NANO * JOULE_WH)
    MICROJOULES = ("µJ", MICRO * JOULE_WH)
    MILLIJOULES = ("mJ", MILLI * JOULE_WH)
    KILOJOULES = ("kJ", KILO * JOULE_WH)
    MEGAJOULES = ("MJ", MEGA * JOULE_WH)
    GIGAJOULES = ("GJ", GIGA * JOULE_WH)
    TERAJOULES = ("TJ", TERA * JOULE_WH)
    BTUS = ("BTU", BTU_WH)
    MBTUS = ("MBtu", BTU_WH * KILO)
    MMBTUS = ("MMBtu", BTU_WH * MEGA)
    ELECTRON_VOLTS = ("eV", ELECTRON_VOLT_J * JOULE_WH)
    MILLIELECTRON_VOLTS = ("meV", MILLI * ELECTRON_VOLT_J * JOULE_WH)
    KILOELECTRON_VOLTS = ("keV", KILO * ELECTRON_VOLT_J * JOULE_WH)
    MEGAELECTRON_VOLTS = ("MeV", MEGA * ELECTRON_VOLT_J * JOULE_WH)
    GIGAELECTRON_VOLTS = ("GeV", GIGA * ELECTRON_VOLT_J * JOULE_WH)
    TERAELECTRON_VOLTS = ("TeV", TERA * ELECTRON_VOLT_J * JOULE_WH)
    ERGS = ("erg", 1e-7 * JOULE_WH)
    CALORIES = ("cal", CALORIE_J * JOULE_WH)
    KILOCALORIES = ("kcal", KILO * CALORIE_J * JOULE_WH)


class Energy(Quantity):
    """Энергия."""

    dimension = Dimension("Energy", EnergyUnit, EnergyUnit.WATT_HOURS, EnergyUnit.JOULES)


# =============================================================================
# POWER
# =============================================================================


class PowerUnit(UnitOfMeasure):
    WATTS = ("W", 1.0)
    MILLIWATTS = ("mW", MILLI)
    KILOWATTS = ("kW", KILO)
    MEGAWATTS = ("MW", MEGA)
    GIGAWATTS = ("GW", GIGA)
    BTUS_PER_HOUR = ("BTU/h", 1055.06 / 3600)
    ERGS_PER_SECOND = ("erg/s", 1e-7)
    HORSEPOWER = ("hp", 745.7)
    SOLAR_LUMINOSITIES = ("L☉", 3.828e26)


class Power(Quantity):
    """Мощность."""

    dimension = Dimension("Power", PowerUnit, PowerUnit.WATTS, PowerUnit.WATTS)


# =============================================================================
# ПРОИЗВОДНЫЕ ВЕЛИЧИНЫ ЭНЕРГИИ
# =============================================================================


class EnergyDensityUnit(UnitOfMeasure):
    JOULES_PER_CUBIC_METER = ("J/m³", 1.0)


class EnergyDensity(Quantity):
    """Объёмная плотность энергии."""

    dimension = Dimension(
        "EnergyDensity",
        EnergyDensityUnit,
        EnergyDensityUnit.JOULES_PER_CUBIC_METER,
        EnergyDensityUnit.JOULES_PER_CUBIC_METER,
    )


class SpecificEnergyUnit(UnitOfMeasure):
    GRAYS = ("Gy", 1.0)
    RADS = ("rad", 0.01)
    ERGS_PER_GRAM = ("erg/g", 1e-4)


class SpecificEnergy(Quantity):
    """
    Удельная энергия (J/kg).

    Грей — та же единица, поэтому поглощённая доза излучения выражается
    этой же величиной.
    """

    dimension = Dimension(
        "SpecificEnergy", SpecificEnergyUnit, SpecificEnergyUnit.GRAYS, SpecificEnergyUnit.GRAYS
    )


class MolarEnergyUnit(UnitOfMeasure):
    JOULES_PER_MOLE = ("J/mol", 1.0)
    KILOJOULES_PER_MOLE = ("kJ/mol", KILO)


class MolarEnergy(Quantity):
    dimension = Dimension(
        "MolarEnergy",
        MolarEnergyUnit,
        MolarEnergyUnit.JOULES_PER_MOLE,
        MolarEnergyUnit.JOULES_PER_MOLE,
    )


# =============================================================================
# ПРОИЗВОДНЫЕ ВЕЛИЧИНЫ МОЩНОСТИ
# =============================================================================


class PowerRampUnit(UnitOfMeasure):
    WATTS_PER_HOUR = ("W/h", 1.0)
    WATTS_PER_MINUTE = ("W/min", 60.0)
    WATTS_PER_SECOND = ("W/s", 3600.0)
    KILOWATTS_PER_HOUR = ("kW/h", KILO)
    KILOWATTS_PER_MINUTE = ("kW/min", KILO * 60.0)
    MEGAWATTS_PER_HOUR = ("MW/h", MEGA)
    GIGAWATTS_PER_HOUR = ("GW/h", GIGA)


class PowerRamp(Quantity):
    """
    Скорость изменения мощности (ramp rate энергоблоков).

    Primary-единица — W/h, SI-единица — W/s.

    Examples:
        >>> Power.megawatts(30.0) / Time.minutes(10.0) == PowerRamp.megawatts_per_hour(180.0)
        True
    """

    dimension = Dimension(
        "PowerRamp", PowerRampUnit, PowerRampUnit.WATTS_PER_HOUR, PowerRampUnit.WATTS_PER_SECOND
    )


class PowerDensityUnit(UnitOfMeasure):
    WATTS_PER_CUBIC_METER = ("W/m³", 1.0)


class PowerDensity(Quantity):
    """Объёмная плотность мощности."""

    dimension = Dimension(
        "PowerDensity",
        PowerDensityUnit,
        PowerDensityUnit.WATTS_PER_CUBIC_METER,
        PowerDensityUnit.WATTS_PER_CUBIC_METER,
    )
