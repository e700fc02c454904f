"""
Dimension — статический дескриптор размерности

Связывает тип величины с перечислением единиц, primary-единицей
(через которую идут все конверсии) и канонической SI-единицей.
"""

from dataclasses import dataclass

from measura.core.errors import DimensionDefinitionError
from measura.core.unit import ScaleKind, UnitOfMeasure


@dataclass(frozen=True)
class Dimension:
    """
    Метаданные размерности.

    Attributes:
        name: Имя размерности ("Length", "Temperature")
        unit_type: Перечисление единиц
        primary_unit: Primary-единица (factor 1, offset 0)
        si_unit: SI-единица (может отличаться от primary: Mass — g vs kg)
    """

    name: str
    unit_type: type[UnitOfMeasure]
    primary_unit: UnitOfMeasure
    si_unit: UnitOfMeasure

    def __post_init__(self) -> None:
        if not self.name:
            raise DimensionDefinitionError("Dimension name must be non-empty")

        for role, unit in (("primary", self.primary_unit), ("si", self.si_unit)):
            if not isinstance(unit, self.unit_type):
                raise DimensionDefinitionError(
                    f"{self.name}: {role} unit {unit!r} is not a member of "
                    f"{self.unit_type.__name__}"
                )

        if self.primary_unit.factor != 1.0 or self.primary_unit.offset != 0.0:
            raise DimensionDefinitionError(
                f"{self.name}: primary unit {self.primary_unit.name} must have "
                f"factor 1 and offset 0"
            )

    def units(self) -> tuple[UnitOfMeasure, ...]:
        """Все единицы размерности в порядке объявления."""
        return tuple(self.unit_type)

    @property
    def scale_kind(self) -> ScaleKind:
        """INTERVAL, если хотя бы одна единица интервальная."""
        if any(unit.is_interval for unit in self.unit_type):
            return ScaleKind.INTERVAL
        return ScaleKind.RATIO

    def __str__(self) -> str:
        return self.name
