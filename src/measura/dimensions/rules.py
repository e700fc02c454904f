"""
Rules — каталог межразмерных правил композиции

Каждое правило объявлено явно. Комбинации, отсутствующие в таблице,
приводят к IncompatibleDimensionsError.

Денежные правила (Money / Quantity → Price, Price * Quantity → Money,
Money / Price → Quantity) реализованы в measura.market.
"""

from measura.core.composition import DEFAULT_CATALOG, CompositionCatalog, Operator
from measura.dimensions.electro import (
    Capacitance,
    Conductivity,
    ElectricalConductance,
    ElectricalResistance,
    ElectricCharge,
    ElectricCurrent,
    ElectricPotential,
    Inductance,
    MagneticFlux,
    MagneticFluxDensity,
    Resistivity,
)
from measura.dimensions.energy import (
    Energy,
    EnergyDensity,
    MolarEnergy,
    Power,
    PowerDensity,
    PowerRamp,
    SpecificEnergy,
)
from measura.dimensions.information import DataRate, Information
from measura.dimensions.mass import AreaDensity, ChemicalAmount, Density, Mass, MomentOfInertia
from measura.dimensions.motion import Acceleration, Force, Momentum, Pressure, Velocity
from measura.dimensions.photo import (
    Illuminance,
    Luminance,
    LuminousEnergy,
    LuminousExposure,
    LuminousFlux,
    LuminousIntensity,
)
from measura.dimensions.radio import Irradiance, Radiance, RadiantIntensity, SpectralPower
from measura.dimensions.space import Area, Length, SolidAngle, Volume
from measura.dimensions.temporal import Time
from measura.dimensions.thermal import Temperature, ThermalCapacity

MUL = Operator.MUL
DIV = Operator.DIV

# (left, operator, right, result)
PRODUCT_RULES = (
    # Space
    (Length, MUL, Length, Area),
    (Volume, DIV, Length, Area),
    (Volume, DIV, Area, Length),
    (Area, DIV, Length, Length),
    # Kinematics
    (Length, DIV, Time, Velocity),
    (Length, DIV, Velocity, Time),
    (Velocity, DIV, Time, Acceleration),
    (Velocity, DIV, Acceleration, Time),
    # Dynamics
    (Force, DIV, Mass, Acceleration),
    (Force, DIV, Acceleration, Mass),
    (Momentum, DIV, Mass, Velocity),
    (Momentum, DIV, Velocity, Mass),
    (Momentum, DIV, Time, Force),
    (Force, DIV, Area, Pressure),
    (Force, DIV, Pressure, Area),
    (Mass, DIV, Volume, Density),
    (Mass, DIV, Density, Volume),
    # Energy
    (Energy, DIV, Length, Force),
    (Energy, DIV, Force, Length),
    (Energy, DIV, Time, Power),
    (Energy, DIV, Power, Time),
    (Energy, DIV, Mass, SpecificEnergy),
    (Energy, DIV, SpecificEnergy, Mass),
    (Energy, DIV, Volume, EnergyDensity),
    (Energy, DIV, EnergyDensity, Volume),
    (Energy, DIV, ChemicalAmount, MolarEnergy),
    (Energy, DIV, MolarEnergy, ChemicalAmount),
    (Power, DIV, Time, PowerRamp),
    (Power, DIV, PowerRamp, Time),
    (Power, DIV, Volume, PowerDensity),
    (Power, DIV, PowerDensity, Volume),
    # Mass
    (Mass, DIV, Area, AreaDensity),
    (Mass, DIV, AreaDensity, Area),
    (MomentOfInertia, DIV, Area, Mass),
    (MomentOfInertia, DIV, Mass, Area),
    # Electro
    (Power, DIV, ElectricPotential, ElectricCurrent),
    (Power, DIV, ElectricCurrent, ElectricPotential),
    (ElectricPotential, DIV, ElectricalResistance, ElectricCurrent),
    (ElectricPotential, DIV, ElectricCurrent, ElectricalResistance),
    (ElectricCharge, DIV, Time, ElectricCurrent),
    (ElectricCharge, DIV, ElectricCurrent, Time),
    (ElectricCharge, DIV, ElectricPotential, Capacitance),
    (ElectricCharge, DIV, Capacitance, ElectricPotential),
    (ElectricalConductance, DIV, Length, Conductivity),
    (ElectricalConductance, DIV, Conductivity, Length),
    (Resistivity, DIV, Length, ElectricalResistance),
    (Resistivity, DIV, ElectricalResistance, Length),
    # Magnetism
    (MagneticFlux, DIV, ElectricCurrent, Inductance),
    (MagneticFlux, DIV, Inductance, ElectricCurrent),
    (MagneticFlux, DIV, Area, MagneticFluxDensity),
    (MagneticFlux, DIV, MagneticFluxDensity, Area),
    (MagneticFlux, DIV, Time, ElectricPotential),
    (MagneticFlux, DIV, ElectricPotential, Time),
    # Photometry
    (LuminousFlux, DIV, Area, Illuminance),
    (LuminousFlux, DIV, Illuminance, Area),
    (LuminousFlux, DIV, SolidAngle, LuminousIntensity),
    (LuminousFlux, DIV, LuminousIntensity, SolidAngle),
    (LuminousIntensity, DIV, Area, Luminance),
    (LuminousIntensity, DIV, Luminance, Area),
    (LuminousEnergy, DIV, Time, LuminousFlux),
    (LuminousEnergy, DIV, LuminousFlux, Time),
    (LuminousExposure, DIV, Time, Illuminance),
    (LuminousExposure, DIV, Illuminance, Time),
    # Radiometry
    (Power, DIV, Area, Irradiance),
    (Power, DIV, Irradiance, Area),
    (Power, DIV, SolidAngle, RadiantIntensity),
    (Power, DIV, RadiantIntensity, SolidAngle),
    (RadiantIntensity, DIV, Area, Radiance),
    (RadiantIntensity, DIV, Radiance, Area),
    (Power, DIV, Length, SpectralPower),
    (Power, DIV, SpectralPower, Length),
    # Information
    (Information, DIV, Time, DataRate),
    (Information, DIV, DataRate, Time),
    # Thermal
    (Energy, DIV, Temperature, ThermalCapacity),
)

# (left, right, result): регистрируются в обоих порядках
COMMUTATIVE_RULES = (
    (Length, Area, Volume),
    (Velocity, Time, Length),
    (Acceleration, Time, Velocity),
    (Mass, Acceleration, Force),
    (Mass, Velocity, Momentum),
    (Force, Time, Momentum),
    (Pressure, Area, Force),
    (Density, Volume, Mass),
    (Force, Length, Energy),
    (Power, Time, Energy),
    (SpecificEnergy, Mass, Energy),
    (EnergyDensity, Volume, Energy),
    (MolarEnergy, ChemicalAmount, Energy),
    (PowerRamp, Time, Power),
    (PowerDensity, Volume, Power),
    (AreaDensity, Area, Mass),
    (Mass, Area, MomentOfInertia),
    (ElectricCurrent, ElectricPotential, Power),
    (ElectricCurrent, ElectricalResistance, ElectricPotential),
    (ElectricCurrent, Time, ElectricCharge),
    (ElectricCharge, ElectricPotential, Energy),
    (Capacitance, ElectricPotential, ElectricCharge),
    (Conductivity, Length, ElectricalConductance),
    (ElectricalResistance, Length, Resistivity),
    (Inductance, ElectricCurrent, MagneticFlux),
    (MagneticFluxDensity, Area, MagneticFlux),
    (ElectricPotential, Time, MagneticFlux),
    (Illuminance, Area, LuminousFlux),
    (LuminousIntensity, SolidAngle, LuminousFlux),
    (Luminance, Area, LuminousIntensity),
    (LuminousFlux, Time, LuminousEnergy),
    (Illuminance, Time, LuminousExposure),
    (Irradiance, Area, Power),
    (RadiantIntensity, SolidAngle, Power),
    (Radiance, Area, RadiantIntensity),
    (SpectralPower, Length, Power),
    (DataRate, Time, Information),
    (Temperature, ThermalCapacity, Energy),
)


def register_rules(catalog: CompositionCatalog) -> CompositionCatalog:
    """Заполнить каталог полным набором правил."""
    for left, operator, right, result in PRODUCT_RULES:
        catalog.register(left, operator, right, result)
    for left, right, result in COMMUTATIVE_RULES:
        catalog.register_commutative(left, right, result)
    return catalog


register_rules(DEFAULT_CATALOG)
