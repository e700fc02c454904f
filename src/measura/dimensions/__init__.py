"""
Dimensions: unit tables and quantity types per physical domain.

Importing this package registers the cross-dimension composition rules.
"""

from measura.dimensions.dimensionless import Dimensionless, DimensionlessUnit
from measura.dimensions.electro import (
    Capacitance,
    CapacitanceUnit,
    Conductivity,
    ConductivityUnit,
    ElectricalConductance,
    ElectricalConductanceUnit,
    ElectricalResistance,
    ElectricalResistanceUnit,
    ElectricCharge,
    ElectricChargeUnit,
    ElectricCurrent,
    ElectricCurrentUnit,
    ElectricPotential,
    ElectricPotentialUnit,
    Inductance,
    InductanceUnit,
    MagneticFlux,
    MagneticFluxDensity,
    MagneticFluxDensityUnit,
    MagneticFluxUnit,
    Resistivity,
    ResistivityUnit,
)
from measura.dimensions.energy import (
    Energy,
    EnergyDensity,
    EnergyDensityUnit,
    EnergyUnit,
    MolarEnergy,
    MolarEnergyUnit,
    Power,
    PowerDensity,
    PowerDensityUnit,
    PowerRamp,
    PowerRampUnit,
    PowerUnit,
    SpecificEnergy,
    SpecificEnergyUnit,
)
from measura.dimensions.information import (
    DataRate,
    DataRateUnit,
    Information,
    InformationUnit,
)
from measura.dimensions.mass import (
    AreaDensity,
    AreaDensityUnit,
    ChemicalAmount,
    ChemicalAmountUnit,
    Density,
    DensityUnit,
    Mass,
    MassUnit,
    MomentOfInertia,
    MomentOfInertiaUnit,
)
from measura.dimensions.motion import (
    Acceleration,
    AccelerationUnit,
    Force,
    ForceUnit,
    Momentum,
    MomentumUnit,
    Pressure,
    PressureUnit,
    Velocity,
    VelocityUnit,
)
from measura.dimensions.photo import (
    Illuminance,
    IlluminanceUnit,
    Luminance,
    LuminanceUnit,
    LuminousEnergy,
    LuminousEnergyUnit,
    LuminousExposure,
    LuminousExposureUnit,
    LuminousFlux,
    LuminousFluxUnit,
    LuminousIntensity,
    LuminousIntensityUnit,
)
from measura.dimensions.radio import (
    Activity,
    ActivityUnit,
    Dose,
    DoseUnit,
    Irradiance,
    IrradianceUnit,
    ParticleFlux,
    ParticleFluxUnit,
    Radiance,
    RadianceUnit,
    RadiantIntensity,
    RadiantIntensityUnit,
    SpectralIrradiance,
    SpectralIrradianceUnit,
    SpectralPower,
    SpectralPowerUnit,
)
from measura.dimensions.space import (
    Angle,
    AngleUnit,
    Area,
    AreaUnit,
    Length,
    LengthUnit,
    SolidAngle,
    SolidAngleUnit,
    Volume,
    VolumeUnit,
)
from measura.dimensions.temporal import Frequency, FrequencyUnit, Time, TimeUnit
from measura.dimensions.thermal import (
    Temperature,
    TemperatureUnit,
    ThermalCapacity,
    ThermalCapacityUnit,
)
from measura.dimensions import rules  # noqa: F401  (регистрация правил)

__all__ = [
    # Space
    "Length",
    "LengthUnit",
    "Area",
    "AreaUnit",
    "Volume",
    "VolumeUnit",
    "Angle",
    "AngleUnit",
    "SolidAngle",
    "SolidAngleUnit",
    # Time
    "Time",
    "TimeUnit",
    "Frequency",
    "FrequencyUnit",
    # Mass
    "Mass",
    "MassUnit",
    "Density",
    "DensityUnit",
    "ChemicalAmount",
    "ChemicalAmountUnit",
    "AreaDensity",
    "AreaDensityUnit",
    "MomentOfInertia",
    "MomentOfInertiaUnit",
    # Motion
    "Velocity",
    "VelocityUnit",
    "Acceleration",
    "AccelerationUnit",
    "Force",
    "ForceUnit",
    "Momentum",
    "MomentumUnit",
    "Pressure",
    "PressureUnit",
    # Energy
    "Energy",
    "EnergyUnit",
    "Power",
    "PowerUnit",
    "EnergyDensity",
    "EnergyDensityUnit",
    "SpecificEnergy",
    "SpecificEnergyUnit",
    "MolarEnergy",
    "MolarEnergyUnit",
    "PowerRamp",
    "PowerRampUnit",
    "PowerDensity",
    "PowerDensityUnit",
    # Electro
    "ElectricCurrent",
    "ElectricCurrentUnit",
    "ElectricPotential",
    "ElectricPotentialUnit",
    "ElectricalResistance",
    "ElectricalResistanceUnit",
    "ElectricCharge",
    "ElectricChargeUnit",
    "Capacitance",
    "CapacitanceUnit",
    "ElectricalConductance",
    "ElectricalConductanceUnit",
    "Conductivity",
    "ConductivityUnit",
    "Resistivity",
    "ResistivityUnit",
    # Magnetism
    "Inductance",
    "InductanceUnit",
    "MagneticFlux",
    "MagneticFluxUnit",
    "MagneticFluxDensity",
    "MagneticFluxDensityUnit",
    # Photometry
    "LuminousFlux",
    "LuminousFluxUnit",
    "LuminousIntensity",
    "LuminousIntensityUnit",
    "Illuminance",
    "IlluminanceUnit",
    "Luminance",
    "LuminanceUnit",
    "LuminousEnergy",
    "LuminousEnergyUnit",
    "LuminousExposure",
    "LuminousExposureUnit",
    # Radiometry
    "Irradiance",
    "IrradianceUnit",
    "RadiantIntensity",
    "RadiantIntensityUnit",
    "Radiance",
    "RadianceUnit",
    "SpectralPower",
    "SpectralPowerUnit",
    "SpectralIrradiance",
    "SpectralIrradianceUnit",
    "Activity",
    "ActivityUnit",
    "Dose",
    "DoseUnit",
    "ParticleFlux",
    "ParticleFluxUnit",
    # Information
    "Information",
    "InformationUnit",
    "DataRate",
    "DataRateUnit",
    # Thermal
    "Temperature",
    "TemperatureUnit",
    "ThermalCapacity",
    "ThermalCapacityUnit",
    # Dimensionless
    "Dimensionless",
    "DimensionlessUnit",
]
