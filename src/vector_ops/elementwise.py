"""Elementwise операции над векторами и матрицами ComplexValue.

Rank-1 (вектор):  Sequence[ComplexValue]
Rank-2 (матрица): Sequence[Sequence[ComplexValue]]

Политика длин: zip-семантика на каждом уровне. При несовпадении длин
результат обрезается до более короткой последовательности (без ошибки);
с strict=True вместо этого поднимается VectorLengthMismatch.

Результат — всегда новый list; входные последовательности не изменяются.
"""

import logging
from typing import Final, List, Sequence

from src.core.domain.complex_value import ComplexValue

logger = logging.getLogger(__name__)

# Скаляр -1+0i для элементной аддитивной инверсии
MINUS_ONE: Final[ComplexValue] = ComplexValue(real=-1.0, imaginary=0.0)

ComplexVector = List[ComplexValue]
ComplexMatrix = List[List[ComplexValue]]


# =============================================================================
# EXCEPTIONS
# =============================================================================


class VectorLengthMismatch(ValueError):
    """Длины операндов не совпадают при strict=True.

    Attributes:
        left_len: Длина левого операнда
        right_len: Длина правого операнда
        level: "vector" (элементы) или "matrix" (строки)
    """

    def __init__(self, left_len: int, right_len: int, level: str = "vector"):
        self.left_len = left_len
        self.right_len = right_len
        self.level = level
        super().__init__(f"{level} length mismatch: {left_len} != {right_len}")


def _check_lengths(left: Sequence, right: Sequence, strict: bool, level: str) -> None:
    if len(left) == len(right):
        return
    if strict:
        raise VectorLengthMismatch(len(left), len(right), level)
    logger.debug(
        "%s length mismatch (%d vs %d), truncating to %d",
        level,
        len(left),
        len(right),
        min(len(left), len(right)),
    )


# =============================================================================
# RANK-1
# =============================================================================


def elementwise_add(
    xs: Sequence[ComplexValue],
    ys: Sequence[ComplexValue],
    strict: bool = False,
) -> ComplexVector:
    """
    Поэлементная сумма xs[i] + ys[i].

    Args:
        xs: Левый вектор
        ys: Правый вектор
        strict: Поднимать VectorLengthMismatch при разных длинах

    Returns:
        Вектор длины min(len(xs), len(ys))

    Raises:
        VectorLengthMismatch: Если strict=True и длины различаются
    """
    _check_lengths(xs, ys, strict, "vector")
    return [x.add(y) for x, y in zip(xs, ys)]


def elementwise_inverse(xs: Sequence[ComplexValue]) -> ComplexVector:
    """Аддитивная инверсия: каждый элемент умножается на -1+0i."""
    return [x.multiply(MINUS_ONE) for x in xs]


def elementwise_scalar_multiply(
    scalar: ComplexValue, xs: Sequence[ComplexValue]
) -> ComplexVector:
    """Умножение каждого элемента на комплексный скаляр: scalar * x."""
    return [scalar.multiply(x) for x in xs]


# =============================================================================
# RANK-2
# =============================================================================


def matrix_add(
    xss: Sequence[Sequence[ComplexValue]],
    yss: Sequence[Sequence[ComplexValue]],
    strict: bool = False,
) -> ComplexMatrix:
    """
    Поэлементная сумма матриц.

    Zip-семантика применяется и к строкам, и к элементам внутри строк.

    Raises:
        VectorLengthMismatch: Если strict=True и число строк
            или длина любой пары строк различаются
    """
    _check_lengths(xss, yss, strict, "matrix")
    return [elementwise_add(xs, ys, strict=strict) for xs, ys in zip(xss, yss)]


def matrix_inverse(xss: Sequence[Sequence[ComplexValue]]) -> ComplexMatrix:
    """Аддитивная инверсия каждого элемента матрицы."""
    return [elementwise_inverse(xs) for xs in xss]


def matrix_scalar_multiply(
    scalar: ComplexValue, xss: Sequence[Sequence[ComplexValue]]
) -> ComplexMatrix:
    """Умножение каждого элемента матрицы на комплексный скаляр."""
    return [elementwise_scalar_multiply(scalar, xs) for xs in xss]
