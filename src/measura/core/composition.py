"""
Composition — каталог правил композиции размерностей

Умножение или деление величин РАЗНЫХ размерностей допустимо только по явно
зарегистрированному правилу (Left, Operator, Right) → Result. Общего механизма
вывода произведения двух произвольных размерностей нет.

Вычисление:
    result_si = left.to_si() OP right.to_si()
    результат оборачивается в primary-единицу размерности Result

SI-значения используются вместо primary, так как у Mass (g) и Energy (Wh)
primary-единица не когерентна с SI: kg * m/s² = N, но g * m/s² = mN.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from measura.core.errors import DimensionDefinitionError, IncompatibleDimensionsError
from measura.core.numerical_safeguards import ieee_divide

if TYPE_CHECKING:
    from measura.core.dimension import Dimension
    from measura.core.quantity import Quantity

logger = logging.getLogger(__name__)


class Operator(str, Enum):
    """Оператор композиции"""

    MUL = "*"
    DIV = "/"


@dataclass(frozen=True)
class CompositionRule:
    """
    Правило (left OP right) → result.

    Attributes:
        left: Тип левого операнда
        operator: MUL или DIV
        right: Тип правого операнда
        result: Тип результата
    """

    left: "type[Quantity]"
    operator: Operator
    right: "type[Quantity]"
    result: "type[Quantity]"

    def apply(self, left: "Quantity", right: "Quantity") -> "Quantity":
        """Вычислить результат по SI-значениям операндов."""
        a = left.to_si()
        b = right.to_si()

        if self.operator is Operator.MUL:
            si_value = a * b
        else:
            si_value = ieee_divide(a, b)

        dimension = self.result.dimension
        value = dimension.si_unit.convert_to(si_value, dimension.primary_unit)
        return self.result(value, dimension.primary_unit)

    def __str__(self) -> str:
        return (
            f"{self.left.__name__} {self.operator.value} {self.right.__name__}"
            f" -> {self.result.__name__}"
        )


class CompositionCatalog:
    """
    Реестр правил композиции.

    Ключ — пара размерностей и оператор, поэтому подклассы величин
    (например, пользовательский подкласс Length) используют правила базового типа.
    """

    def __init__(self) -> None:
        self._rules: dict[tuple["Dimension", Operator, "Dimension"], CompositionRule] = {}

    def register(
        self,
        left: "type[Quantity]",
        operator: Operator,
        right: "type[Quantity]",
        result: "type[Quantity]",
    ) -> CompositionRule:
        """
        Зарегистрировать правило.

        Raises:
            DimensionDefinitionError: Если правило для (left, operator, right) уже есть
        """
        key = (left.dimension, operator, right.dimension)
        if key in self._rules:
            raise DimensionDefinitionError(f"Duplicate composition rule: {self._rules[key]}")

        rule = CompositionRule(left=left, operator=operator, right=right, result=result)
        self._rules[key] = rule
        logger.debug("Registered composition rule %s", rule)
        return rule

    def register_commutative(
        self,
        left: "type[Quantity]",
        right: "type[Quantity]",
        result: "type[Quantity]",
    ) -> tuple[CompositionRule, CompositionRule]:
        """Зарегистрировать left * right и right * left → result."""
        return (
            self.register(left, Operator.MUL, right, result),
            self.register(right, Operator.MUL, left, result),
        )

    def lookup(
        self, left: "Dimension", operator: Operator, right: "Dimension"
    ) -> CompositionRule | None:
        return self._rules.get((left, operator, right))

    def apply(self, left: "Quantity", operator: Operator, right: "Quantity") -> "Quantity":
        """
        Применить правило к двум величинам.

        Raises:
            IncompatibleDimensionsError: Если правило не задекларировано
        """
        rule = self.lookup(left.dimension, operator, right.dimension)
        if rule is None:
            logger.debug(
                "No composition rule for %s %s %s",
                left.dimension.name,
                operator.value,
                right.dimension.name,
            )
            raise IncompatibleDimensionsError(
                f"{left.dimension.name} {operator.value} {right.dimension.name} "
                f"is not a declared composition"
            )
        return rule.apply(left, right)

    def rules(self) -> tuple[CompositionRule, ...]:
        """Все правила в порядке регистрации."""
        return tuple(self._rules.values())

    def __len__(self) -> int:
        return len(self._rules)


# Глобальный каталог, заполняется при импорте measura.dimensions.rules
DEFAULT_CATALOG = CompositionCatalog()
