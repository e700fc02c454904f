"""
Тесты Outcome и иерархии исключений
"""

import pytest

from measura.core.errors import (
    CurrencyMismatchError,
    IncompatibleDimensionsError,
    InvalidRateError,
    MeasureError,
)
from measura.core.outcome import Outcome


class TestOutcome:
    """Outcome: ровно одно из value / error"""

    def test_success(self) -> None:
        outcome = Outcome.success(42)
        assert outcome.ok
        assert outcome.unwrap() == 42
        assert outcome.value_or(0) == 42

    def test_failure(self) -> None:
        error = InvalidRateError("bad rate")
        outcome: Outcome[int] = Outcome.failure(error)
        assert not outcome.ok
        assert outcome.error is error
        assert outcome.value_or(0) == 0
        with pytest.raises(InvalidRateError, match="bad rate"):
            outcome.unwrap()

    def test_requires_exactly_one(self) -> None:
        with pytest.raises(ValueError):
            Outcome()
        with pytest.raises(ValueError):
            Outcome(value=1, error=InvalidRateError("x"))


class TestErrorHierarchy:
    """Все ошибки наследуют MeasureError"""

    def test_currency_mismatch_message(self) -> None:
        error = CurrencyMismatchError("USD", "EUR", "add")
        assert str(error) == "Cannot add different currencies: expected USD, got EUR"
        assert isinstance(error, MeasureError)

    def test_domain_errors_are_not_value_errors(self) -> None:
        assert not issubclass(InvalidRateError, ValueError)

    def test_incompatible_dimensions_is_type_error(self) -> None:
        assert issubclass(IncompatibleDimensionsError, TypeError)
        assert issubclass(IncompatibleDimensionsError, MeasureError)
