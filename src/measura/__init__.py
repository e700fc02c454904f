"""
measura — strongly-typed units of measure and money.

Quantities carry their unit, convert within a dimension, compose across
dimensions only through declared rules, and keep ratio-scale and
interval-scale (temperature) arithmetic apart. Money never mixes currencies
implicitly; exchange rates are directional.
"""

from measura.core import (
    DEFAULT_CATALOG,
    CompositionCatalog,
    CurrencyMismatchError,
    DegenerateReferenceError,
    Dimension,
    DimensionDefinitionError,
    IncompatibleDimensionsError,
    InvalidRateError,
    LikeQuantityRatio,
    MeasureError,
    Operator,
    Outcome,
    Quantity,
    QuantityRange,
    QuantityRatio,
    RangeError,
    ScaleKind,
    ToleranceConfig,
    UnitOfMeasure,
    UnknownCurrencyError,
)
from measura.dimensions import *  # noqa: F401,F403
from measura.dimensions import __all__ as _dimensions_all
from measura.market import Currency, ExchangeRate, Money, Price

__version__ = "0.1.0"

__all__ = [
    # Core
    "Dimension",
    "Quantity",
    "QuantityRange",
    "QuantityRatio",
    "LikeQuantityRatio",
    "ScaleKind",
    "UnitOfMeasure",
    "ToleranceConfig",
    "Outcome",
    # Composition
    "CompositionCatalog",
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
    # Market
    "Currency",
    "ExchangeRate",
    "Money",
    "Price",
    # Dimensions
    *_dimensions_all,
]
