"""
Outcome — результат fallible-операции

Операторы (+, -, convert) бросают исключения; их try_* варианты возвращают
Outcome, чтобы вызывающий код мог решить, как поступить, без try/except.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

from measura.core.errors import MeasureError

T = TypeVar("T")


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """
    Результат операции: либо value, либо error.

    Attributes:
        value: Результат (None при ошибке)
        error: Ошибка (None при успехе)
    """

    value: T | None = None
    error: MeasureError | None = None

    def __post_init__(self) -> None:
        if (self.value is None) == (self.error is None):
            raise ValueError("Outcome requires exactly one of value or error")

    @classmethod
    def success(cls, value: T) -> "Outcome[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: MeasureError) -> "Outcome[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        """True если операция успешна."""
        return self.error is None

    def unwrap(self) -> T:
        """
        Вернуть value или бросить сохранённую ошибку.

        Raises:
            MeasureError: Ошибка операции
        """
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]

    def value_or(self, default: T) -> T:
        """Вернуть value или default при ошибке."""
        if self.error is not None:
            return default
        return self.value  # type: ignore[return-value]
