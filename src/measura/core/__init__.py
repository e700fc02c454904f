"""
Core abstractions of measura.

Unit/Dimension/Quantity scaffolding, the composition catalog, numerical
safeguards and the error hierarchy shared by every dimension.
"""

from measura.core.composition import (
    DEFAULT_CATALOG,
    CompositionCatalog,
    CompositionRule,
    Operator,
)
from measura.core.dimension import Dimension
from measura.core.errors import (
    CurrencyMismatchError,
    DegenerateReferenceError,
    DimensionDefinitionError,
    IncompatibleDimensionsError,
    InvalidRateError,
    MeasureError,
    RangeError,
    UnknownCurrencyError,
)
from measura.core.numerical_safeguards import (
    DEFAULT_TOLERANCE,
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    EPS_MONEY_ABS,
    MONEY_TOLERANCE,
    ToleranceConfig,
    compare_floats,
    ieee_divide,
    is_close,
    is_close_with,
    is_valid_float,
    validate_non_negative,
    validate_positive,
)
from measura.core.outcome import Outcome
from measura.core.quantity import Quantity
from measura.core.quantity_range import QuantityRange
from measura.core.ratio import LikeQuantityRatio, QuantityRatio
from measura.core.unit import ScaleKind, UnitOfMeasure

__all__ = [
    # Unit / Dimension / Quantity
    "ScaleKind",
    "UnitOfMeasure",
    "Dimension",
    "Quantity",
    "QuantityRange",
    "QuantityRatio",
    "LikeQuantityRatio",
    # Composition
    "CompositionCatalog",
    "CompositionRule",
    "DEFAULT_CATALOG",
    "Operator",
    # Errors
    "MeasureError",
    "CurrencyMismatchError",
    "DegenerateReferenceError",
    "DimensionDefinitionError",
    "IncompatibleDimensionsError",
    "InvalidRateError",
    "RangeError",
    "UnknownCurrencyError",
    "Outcome",
    # Numerical Safeguards
    "DEFAULT_TOLERANCE",
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    "EPS_MONEY_ABS",
    "MONEY_TOLERANCE",
    "ToleranceConfig",
    "compare_floats",
    "ieee_divide",
    "is_close",
    "is_close_with",
    "is_valid_float",
    "validate_non_negative",
    "validate_positive",
]
