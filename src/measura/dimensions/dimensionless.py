"""
Dimensionless — безразмерные счётные величины
"""

from measura.core.dimension import Dimension
from measura.core.quantity import Quantity
from measura.core.unit import UnitOfMeasure


class DimensionlessUnit(UnitOfMeasure):
    EACH = ("ea", 1.0)
    PERCENT = ("%", 0.01)
    DOZEN = ("dz", 12.0)
    SCORE = ("score", 20.0)
    GROSS = ("gross", 144.0)


class Dimensionless(Quantity):
    dimension = Dimension(
        "Dimensionless", DimensionlessUnit, DimensionlessUnit.EACH, DimensionlessUnit.EACH
    )
