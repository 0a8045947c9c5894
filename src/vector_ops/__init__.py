"""Vector ops — элементные операции над последовательностями ComplexValue.

- Rank-1: сумма, аддитивная инверсия, умножение на скаляр
- Rank-2: те же операции на уровне элементов с сохранением строк
- Zip-семантика длин (обрезка до короткой), strict=True для ошибки
"""

from .elementwise import (
    MINUS_ONE,
    ComplexMatrix,
    ComplexVector,
    VectorLengthMismatch,
    elementwise_add,
    elementwise_inverse,
    elementwise_scalar_multiply,
    matrix_add,
    matrix_inverse,
    matrix_scalar_multiply,
)

__all__ = [
    "MINUS_ONE",
    "ComplexMatrix",
    "ComplexVector",
    "VectorLengthMismatch",
    "elementwise_add",
    "elementwise_inverse",
    "elementwise_scalar_multiply",
    "matrix_add",
    "matrix_inverse",
    "matrix_scalar_multiply",
]
