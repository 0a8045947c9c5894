"""
Coordinates — Cartesian ⇄ Polar conversion

Формулы перехода между представлениями комплексного числа:

    cartesian → polar:
        ρ = sqrt(a² + b²)
        θ = atan2(b, a)            θ ∈ (-π, π]

    polar → cartesian:
        a = ρ·cos(θ)
        b = ρ·sin(θ)

Все вычисления выполняются во float32. Round-trip polar → cartesian
точен только для осевых значений (θ = 0); в общем случае сравнение
выполняется с толерантностью (см. numerical_safeguards.is_close).

Отрицательный ρ не валидируется: результат — отражённая точка,
что соответствует тождеству ρ·e^{iθ} = (-ρ)·e^{i(θ+π)}.
"""

from typing import NamedTuple

import numpy as np

from src.core.math.numerical_safeguards import float32_errstate, to_float32


# =============================================================================
# TYPES
# =============================================================================


class CartesianForm(NamedTuple):
    """Декартово представление (real, imaginary)."""

    real: float
    imaginary: float


class PolarForm(NamedTuple):
    """Полярное представление (modulus ≥ 0, angle в радианах)."""

    modulus: float
    angle: float


# =============================================================================
# CONVERSIONS
# =============================================================================


def cartesian_modulus(real: float, imaginary: float) -> float:
    """
    Модуль sqrt(a² + b²) во float32.

    Никогда не отрицателен; NaN только при NaN на входе.
    """
    a = to_float32(real)
    b = to_float32(imaginary)
    with float32_errstate():
        return float(np.sqrt(a * a + b * b))


def cartesian_to_polar(real: float, imaginary: float) -> PolarForm:
    """
    Конверсия: (a, b) → (ρ, θ)

    Args:
        real: Действительная часть
        imaginary: Мнимая часть

    Returns:
        PolarForm(modulus, angle); для нулевого вектора angle = atan2(0, 0) = 0

    Examples:
        >>> cartesian_to_polar(2.0, 0.0)
        PolarForm(modulus=2.0, angle=0.0)
    """
    with float32_errstate():
        angle = np.arctan2(to_float32(imaginary), to_float32(real))
    return PolarForm(cartesian_modulus(real, imaginary), float(angle))


def polar_to_cartesian(modulus: float, angle: float) -> CartesianForm:
    """
    Конверсия: (ρ, θ) → (a, b)

    Args:
        modulus: Модуль ρ (знак не проверяется)
        angle: Угол θ в радианах

    Returns:
        CartesianForm(real, imaginary)

    Examples:
        >>> polar_to_cartesian(2.0, 0.0)
        CartesianForm(real=2.0, imaginary=0.0)
    """
    rho = to_float32(modulus)
    theta = to_float32(angle)
    with float32_errstate():
        real = rho * np.cos(theta)
        imaginary = rho * np.sin(theta)
    return CartesianForm(float(real), float(imaginary))
