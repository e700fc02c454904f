"""
Electro — ток, потенциал, сопротивление, заряд, ёмкость, проводимость, магнетизм
"""

from measura.core.dimension import Dimension
from measura.core.quantity import Quantity
from measura.core.unit import KILO, MEGA, MICRO, MILLI, NANO, PICO, UnitOfMeasure


class ElectricCurrentUnit(UnitOfMeasure):
    AMPERES = ("A", 1.0)
    MICROAMPERES = ("µA", MICRO)
    MILLIAMPERES = ("mA", MILLI)
    KILOAMPERES = ("kA", KILO)


class ElectricCurrent(Quantity):
    dimension = Dimension(
        "ElectricCurrent",
        ElectricCurrentUnit,
        ElectricCurrentUnit.AMPERES,
        ElectricCurrentUnit.AMPERES,
    )


class ElectricPotentialUnit(UnitOfMeasure):
    VOLTS = ("V", 1.0)
    MICROVOLTS = ("µV", MICRO)
    MILLIVOLTS = ("mV", MILLI)
    KILOVOLTS = ("kV", KILO)
    MEGAVOLTS = ("MV", MEGA)


class ElectricPotential(Quantity):
    dimension = Dimension(
        "ElectricPotential",
        ElectricPotentialUnit,
        ElectricPotentialUnit.VOLTS,
        ElectricPotentialUnit.VOLTS,
    )


class ElectricalResistanceUnit(UnitOfMeasure):
    OHMS = ("Ω", 1.0)
    MILLIOHMS = ("mΩ", MILLI)
    KILOHMS = ("kΩ", KILO)
    MEGAOHMS = ("MΩ", MEGA)


class ElectricalResistance(Quantity):
    dimension = Dimension(
        "ElectricalResistance",
        ElectricalResistanceUnit,
        ElectricalResistanceUnit.OHMS,
        ElectricalResistanceUnit.OHMS,
    )


class ElectricChargeUnit(UnitOfMeasure):
    COULOMBS = ("C", 1.0)
    MICROCOULOMBS = ("µC", MICRO)
    MILLICOULOMBS = ("mC", MILLI)
    MILLIAMPERE_HOURS = ("mAh", 3.6)
    AMPERE_HOURS = ("Ah", 3600.0)


class ElectricCharge(Quantity):
    """Электрический заряд. Ёмкость батарей удобно задавать в mAh."""

    dimension = Dimension(
        "ElectricCharge",
        ElectricChargeUnit,
        ElectricChargeUnit.COULOMBS,
        ElectricChargeUnit.COULOMBS,
    )


class CapacitanceUnit(UnitOfMeasure):
    FARADS = ("F", 1.0)
    PICOFARADS = ("pF", PICO)
    NANOFARADS = ("nF", NANO)
    MICROFARADS = ("µF", MICRO)
    MILLIFARADS = ("mF", MILLI)


class Capacitance(Quantity):
    dimension = Dimension(
        "Capacitance", CapacitanceUnit, CapacitanceUnit.FARADS, CapacitanceUnit.FARADS
    )


class ElectricalConductanceUnit(UnitOfMeasure):
    SIEMENS = ("S", 1.0)
    MILLISIEMENS = ("mS", MILLI)
    MICROSIEMENS = ("µS", MICRO)


class ElectricalConductance(Quantity):
    dimension = Dimension(
        "ElectricalConductance",
        ElectricalConductanceUnit,
        ElectricalConductanceUnit.SIEMENS,
        ElectricalConductanceUnit.SIEMENS,
    )

    def to_resistance(self) -> ElectricalResistance:
        """Сопротивление 1/G (inf при G = 0)."""
        siemens = self.to_siemens()
        if siemens == 0.0:
            return ElectricalResistance.ohms(float("inf"))
        return ElectricalResistance.ohms(1.0 / siemens)


class ConductivityUnit(UnitOfMeasure):
    SIEMENS_PER_METER = ("S/m", 1.0)


class Conductivity(Quantity):
    """Удельная электропроводность материала."""

    dimension = Dimension(
        "Conductivity",
        ConductivityUnit,
        ConductivityUnit.SIEMENS_PER_METER,
        ConductivityUnit.SIEMENS_PER_METER,
    )


class ResistivityUnit(UnitOfMeasure):
    OHM_METERS = ("Ω·m", 1.0)


class Resistivity(Quantity):
    """Удельное электрическое сопротивление материала."""

    dimension = Dimension(
        "Resistivity", ResistivityUnit, ResistivityUnit.OHM_METERS, ResistivityUnit.OHM_METERS
    )


# =============================================================================
# МАГНЕТИЗМ
# =============================================================================


class InductanceUnit(UnitOfMeasure):
    HENRYS = ("H", 1.0)
    MICROHENRYS = ("µH", MICRO)
    MILLIHENRYS = ("mH", MILLI)


class Inductance(Quantity):
    dimension = Dimension(
        "Inductance", InductanceUnit, InductanceUnit.HENRYS, InductanceUnit.HENRYS
    )


class MagneticFluxUnit(UnitOfMeasure):
    WEBERS = ("Wb", 1.0)


class MagneticFlux(Quantity):
    """
    Магнитный поток.

    Examples:
        >>> Inductance.millihenrys(2.0) * ElectricCurrent.amperes(5.0)
        MagneticFlux.webers(0.01)
    """

    dimension = Dimension(
        "MagneticFlux", MagneticFluxUnit, MagneticFluxUnit.WEBERS, MagneticFluxUnit.WEBERS
    )


class MagneticFluxDensityUnit(UnitOfMeasure):
    TESLAS = ("T", 1.0)
    GAUSS = ("G", 1e-4)


class MagneticFluxDensity(Quantity):
    dimension = Dimension(
        "MagneticFluxDensity",
        MagneticFluxDensityUnit,
        MagneticFluxDensityUnit.TESLAS,
        MagneticFluxDensityUnit.TESLAS,
    )
