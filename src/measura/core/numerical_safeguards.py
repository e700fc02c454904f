"""
Numerical Safeguards — Float Comparison & Validation Primitives

Модуль задаёт численные правила, общие для всех величин библиотеки:
- Гибридная (relative-or-absolute) толерантность для сравнения float
- IEEE-754 деление без исключений (±inf / NaN вместо ZeroDivisionError)
- Валидация конечных и положительных параметров

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Сравнение float никогда не использует только фиксированный абсолютный epsilon
2. Деление на ноль не бросает исключение, а следует семантике IEEE-754
3. NaN не равен ничему, включая себя
4. Все операции детерминированы и воспроизводимы
"""

import math
from dataclasses import dataclass
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Epsilon для сравнения float (относительная толерантность)
# Основная составляющая для больших канонических значений
# (астрономические расстояния, энергия в Wh из eV и т.п.)
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Epsilon для сравнения float (абсолютная толерантность)
# Работает только вблизи нуля, где относительная толерантность вырождается
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12

# Абсолютная толерантность для денежных сумм
# Меньше минимальной единицы любой валюты (1 satoshi = 1e-8 BTC)
EPS_MONEY_ABS: Final[float] = 1e-10


# =============================================================================
# IEEE-754 ДЕЛЕНИЕ
# =============================================================================


def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Деление float по правилам IEEE-754.

    Python бросает ZeroDivisionError для x / 0.0; здесь вместо этого
    возвращается ±inf (для ненулевого числителя) или NaN (0/0, NaN/0).
    Знак бесконечности учитывает знак нуля в знаменателе.

    Args:
        numerator: Числитель
        denominator: Знаменатель

    Returns:
        numerator / denominator, ±inf или NaN

    Examples:
        >>> ieee_divide(10.0, 4.0)
        2.5
        >>> ieee_divide(1.0, 0.0)
        inf
        >>> ieee_divide(1.0, -0.0)
        -inf
        >>> ieee_divide(0.0, 0.0)
        nan
    """
    if denominator != 0.0:
        return numerator / denominator

    if numerator == 0.0 or math.isnan(numerator):
        return math.nan

    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


# =============================================================================
# ВАЛИДАЦИЯ И ПРОВЕРКИ
# =============================================================================


def validate_positive(value: float, name: str, error: type[Exception] = ValueError) -> None:
    """
    Валидация, что значение конечно и строго положительно.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)
        error: Тип исключения (default: ValueError)

    Raises:
        error: Если value <= 0 или NaN/Inf
    """
    if not is_valid_float(value) or value <= 0:
        raise error(f"{name} must be finite and positive, got {value}")


def validate_non_negative(value: float, name: str) -> None:
    """
    Валидация, что значение неотрицательное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value < 0 или NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


# =============================================================================
# КОНФИГУРАЦИЯ ТОЛЕРАНТНОСТИ
# =============================================================================


@dataclass(frozen=True)
class ToleranceConfig:
    """
    Параметры гибридного сравнения float.

    Два значения равны, если:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)
    """

    rel_tol: float = EPS_FLOAT_COMPARE_REL
    abs_tol: float = EPS_FLOAT_COMPARE_ABS

    def __post_init__(self) -> None:
        validate_non_negative(self.rel_tol, "rel_tol")
        validate_non_negative(self.abs_tol, "abs_tol")


# Толерантность по умолчанию для всех физических величин
DEFAULT_TOLERANCE: Final[ToleranceConfig] = ToleranceConfig()

# Толерантность для Money
MONEY_TOLERANCE: Final[ToleranceConfig] = ToleranceConfig(abs_tol=EPS_MONEY_ABS)


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Реализация Python's math.isclose с настраиваемыми толерантностями.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Args:
        a: Первое значение
        b: Второе значение
        rel_tol: Относительная толерантность (default: 1e-9)
        abs_tol: Абсолютная толерантность (default: 1e-12)

    Returns:
        True если значения близки с учётом толерантности

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
        >>> is_close(0.0, 1e-13)
        True  # abs diff < abs_tol
        >>> is_close(1e16, 1e16 + 2.0)
        True  # rel diff < rel_tol
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


def is_close_with(a: float, b: float, config: ToleranceConfig = DEFAULT_TOLERANCE) -> bool:
    """is_close с параметрами из ToleranceConfig."""
    return is_close(a, b, rel_tol=config.rel_tol, abs_tol=config.abs_tol)


def compare_floats(a: float, b: float) -> int | None:
    """
    Трёхзначное сравнение двух float без толерантности.

    Returns:
        -1 если a < b, 0 если a == b, +1 если a > b,
        None если хотя бы одно значение NaN (порядок не определён)

    Examples:
        >>> compare_floats(1.0, 2.0)
        -1
        >>> compare_floats(2.0, 2.0)
        0
        >>> compare_floats(float("nan"), 1.0) is None
        True
    """
    if math.isnan(a) or math.isnan(b):
        return None
    if a < b:
        return -1
    if a > b:
        return 1
    return 0
