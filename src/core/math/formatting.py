"""
Formatting — текстовое представление float32 компонент

Два формата:
- display: кратчайшая round-trip запись float32 без хвостового ".0"
  (1 → "1", 0.12 → "0.12", -0.0 → "-0")
- debug:   кратчайшая round-trip запись float32, всегда с десятичной точкой
  (1 → "1.0", -0.0 → "-0.0"); при |x| >= 1e16 или 0 < |x| < 1e-4 —
  экспоненциальная запись без "+" и без ведущих нулей порядка
  (1e20 → "1e20", 1.5e-5 → "1.5e-5")

Display никогда не использует экспоненту. Знак нуля сохраняется.
"""

import math
from typing import Final

import numpy as np

from src.core.math.numerical_safeguards import to_float32

NAN_TEXT: Final[str] = "NaN"
INF_TEXT: Final[str] = "inf"

# Границы перехода debug-записи в экспоненциальную форму (сравнение во float32)
DEBUG_EXP_UPPER: Final[np.float32] = np.float32(1e16)
DEBUG_EXP_LOWER: Final[np.float32] = np.float32(1e-4)


def _format_non_finite(value: float) -> str:
    if math.isnan(value):
        return NAN_TEXT
    return INF_TEXT if value > 0 else f"-{INF_TEXT}"


def format_float_display(value: float) -> str:
    """
    Каноническая запись float32 компоненты.

    Examples:
        >>> format_float_display(1.0)
        '1'
        >>> format_float_display(0.12)
        '0.12'
        >>> format_float_display(-0.0)
        '-0'
    """
    if not math.isfinite(value):
        return _format_non_finite(value)
    return np.format_float_positional(to_float32(value), unique=True, trim="-")


def format_float_debug(value: float) -> str:
    """
    Отладочная запись float32 компоненты.

    Позиционная запись с десятичной точкой; вне диапазона [1e-4, 1e16)
    переходит в экспоненциальную форму.

    Examples:
        >>> format_float_debug(0.0)
        '0.0'
        >>> format_float_debug(-0.34)
        '-0.34'
        >>> format_float_debug(1e20)
        '1e20'
    """
    if not math.isfinite(value):
        return _format_non_finite(value)
    x = to_float32(value)
    magnitude = abs(x)
    if magnitude >= DEBUG_EXP_UPPER or (magnitude != 0 and magnitude < DEBUG_EXP_LOWER):
        text = np.format_float_scientific(x, unique=True, trim="-", exp_digits=1)
        return text.replace("e+", "e")
    return np.format_float_positional(x, unique=True, trim="0")
