"""
Numerical Safeguards — float32 Math Primitives

Модуль обеспечивает единые правила работы с float32 для всех операций
над комплексными числами:
- Приведение входов к точности float32 (IEEE-754 binary32)
- Контроль IEEE error-state: inf/NaN распространяются, warnings подавлены
- Epsilon-сравнения float с учётом точности float32
- Валидация параметров

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждое хранимое значение точно представимо во float32
2. Деление на ноль не вызывает исключений (inf/NaN по IEEE-754)
3. Float сравнения в тестах и round-trip проверках учитывают точность float32
4. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

import numpy as np

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Машинный epsilon для float32 (2**-23)
EPS_FLOAT32: Final[float] = float(np.finfo(np.float32).eps)

# Относительная толерантность сравнения float32
# Несколько ULP: покрывает ошибку округления cos/sin/atan2 во float32
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-6

# Абсолютная толерантность сравнения float32
# Используется около нуля, где относительная толерантность вырождается
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-6


# =============================================================================
# ПРИВЕДЕНИЕ К FLOAT32
# =============================================================================


def float32_errstate() -> np.errstate:
    """
    Контекст IEEE-754 семантики для float32 арифметики.

    Внутри контекста overflow, деление на ноль и invalid-операции
    дают inf/NaN без RuntimeWarning.

    Examples:
        >>> with float32_errstate():
        ...     float(np.float32(1.0) / np.float32(0.0))
        inf
    """
    return np.errstate(over="ignore", under="ignore", divide="ignore", invalid="ignore")


def to_float32(value: float) -> np.float32:
    """
    Приведение значения к float32 (round-to-nearest-even).

    Значения вне диапазона float32 становятся ±inf, NaN сохраняется.

    Args:
        value: Исходное значение (int, float или numpy scalar)

    Returns:
        numpy.float32 scalar
    """
    with float32_errstate():
        return np.float32(value)


def round_to_float32(value: float) -> float:
    """
    Округление до ближайшего float32 с возвратом Python float.

    Examples:
        >>> round_to_float32(0.5)
        0.5
        >>> round_to_float32(0.1)
        0.10000000149011612
    """
    return float(to_float32(value))


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение finite, False если NaN или Inf
    """
    return math.isfinite(value)


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
    Сравнение float с учётом точности float32.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Args:
        a: Первое значение
        b: Второе значение
        rel_tol: Относительная толерантность (default: 1e-6)
        abs_tol: Абсолютная толерантность (default: 1e-6)

    Returns:
        True если значения близки с учётом толерантности

    Examples:
        >>> is_close(1.0, 1.0 + 1e-7)
        True
        >>> is_close(1.0, 1.001)
        False
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_tolerance(value: float, name: str) -> None:
    """
    Валидация толерантности сравнения.

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
