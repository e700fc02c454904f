"""
Errors — Иерархия исключений measura

Все ошибки библиотеки наследуют MeasureError. Доменные ошибки НЕ наследуют
ValueError: при выбросе из pydantic-валидаторов они пропагируют к вызывающему
коду как есть, без обёртки в ValidationError.

Исключение: IncompatibleDimensionsError наследует TypeError, так как
недекларированная комбинация размерностей является ошибкой типа операнда.
"""

from typing import Any


class MeasureError(Exception):
    """Базовое исключение measura."""

    pass


class CurrencyMismatchError(MeasureError):
    """
    Операция над Money разных валют, либо применение ExchangeRate
    к Money, валюта которого не совпадает с base.
    """

    def __init__(self, expected: Any, actual: Any, operation: str = "operate on") -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Cannot {operation} different currencies: expected {expected}, got {actual}"
        )


class InvalidRateError(MeasureError):
    """ExchangeRate с неположительным, нечисловым или вырожденным курсом."""

    pass


class DegenerateReferenceError(MeasureError):
    """Price с нулевой референсной величиной ("per 0 kWh" не определено)."""

    pass


class UnknownCurrencyError(MeasureError):
    """Неизвестный ISO-код валюты."""

    pass


class RangeError(MeasureError):
    """Невалидные границы QuantityRange (lower >= upper)."""

    pass


class DimensionDefinitionError(MeasureError):
    """Некорректное определение размерности или правила композиции."""

    pass


class IncompatibleDimensionsError(MeasureError, TypeError):
    """Комбинация размерностей, не задекларированная в каталоге."""

    pass
