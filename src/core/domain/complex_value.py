"""
ComplexValue — Модель комплексного числа

Immutable Pydantic модель комплексного числа с float32 компонентами.

Хранится только декартово представление (real, imaginary); полярное
(modulus, angle) вычисляется по запросу и никогда не хранится.

Все операции чистые: возвращают новый экземпляр и не изменяют операнды.
Ошибочных состояний нет: деление на ноль и overflow дают inf/NaN по IEEE-754.

Текстовые форматы:
- str(z) / to_display_string(): "1+1i", "1-1i", "-0+-0i"
- to_debug_string(): "ComplexValue { real: 1.0, imaginary: -1.0 }"
"""

from pydantic import BaseModel, Field, field_validator

from src.core.math.coordinates import (
    CartesianForm,
    PolarForm,
    cartesian_modulus,
    cartesian_to_polar,
    polar_to_cartesian,
)
from src.core.math.formatting import format_float_debug, format_float_display
from src.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    float32_errstate,
    is_close,
    round_to_float32,
    to_float32,
    validate_tolerance,
)


# =============================================================================
# COMPLEX VALUE MODEL
# =============================================================================


class ComplexValue(BaseModel):
    """
    Комплексное число a + bi.

    Immutable модель (frozen=True): изменения создают новый экземпляр.
    Компоненты округляются до float32 при создании.

    Равенство — по IEEE-754 для каждой компоненты:
    0.0 == -0.0, NaN != NaN (в т.ч. при сравнении с самим собой).
    """

    real: float = Field(..., description="Действительная часть (float32)")
    imaginary: float = Field(..., description="Мнимая часть (float32)")

    # Immutable; inf/NaN пишутся в JSON как Infinity/NaN, а не null
    model_config = {"frozen": True, "ser_json_inf_nan": "constants"}

    @field_validator("real", "imaginary")
    @classmethod
    def round_component(cls, v: float) -> float:
        """Округление компоненты до ближайшего float32."""
        return round_to_float32(v)

    # -------------------------------------------------------------------------
    # Factories
    # -------------------------------------------------------------------------

    @classmethod
    def from_cartesian(cls, real: float, imaginary: float) -> "ComplexValue":
        """Создание из декартовых компонент (a, b)."""
        return cls(real=real, imaginary=imaginary)

    @classmethod
    def from_polar(cls, modulus: float, angle: float) -> "ComplexValue":
        """
        Создание из полярных компонент (ρ, θ).

        Args:
            modulus: Модуль ρ (отрицательный не отвергается)
            angle: Угол θ в радианах

        Returns:
            ComplexValue(ρ·cos θ, ρ·sin θ)
        """
        real, imaginary = polar_to_cartesian(modulus, angle)
        return cls(real=real, imaginary=imaginary)

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def add(self, other: "ComplexValue") -> "ComplexValue":
        """(a + c) + (b + d)i"""
        with float32_errstate():
            real = to_float32(self.real) + to_float32(other.real)
            imaginary = to_float32(self.imaginary) + to_float32(other.imaginary)
        return ComplexValue(real=float(real), imaginary=float(imaginary))

    def negate(self) -> "ComplexValue":
        """-a - bi (точная операция: меняется только знаковый бит)."""
        return ComplexValue(real=-self.real, imaginary=-self.imaginary)

    def subtract(self, other: "ComplexValue") -> "ComplexValue":
        """
        Разность self - other.

        Выполняется как add(self, negate(other)), а не покомпонентным вычитанием.
        """
        return self.add(other.negate())

    def multiply(self, other: "ComplexValue") -> "ComplexValue":
        """(ac - bd) + (ad + bc)i"""
        a, b = to_float32(self.real), to_float32(self.imaginary)
        c, d = to_float32(other.real), to_float32(other.imaginary)
        with float32_errstate():
            real = a * c - b * d
            imaginary = a * d + b * c
        return ComplexValue(real=float(real), imaginary=float(imaginary))

    def divide(self, other: "ComplexValue") -> "ComplexValue":
        """
        Частное self / other.

        Формула:
            real      = (ac + bd) / |other|²
            imaginary = (cb - ad) / |other|²

        Делитель 0+0i не проверяется: результат содержит inf/NaN.
        """
        a, b = to_float32(self.real), to_float32(self.imaginary)
        c, d = to_float32(other.real), to_float32(other.imaginary)
        divisor = to_float32(other.modulus())
        with float32_errstate():
            divisor = divisor * divisor
            real = (a * c + b * d) / divisor
            imaginary = (c * b - a * d) / divisor
        return ComplexValue(real=float(real), imaginary=float(imaginary))

    def modulus(self) -> float:
        """sqrt(a² + b²), всегда >= 0 для конечных компонент."""
        return cartesian_modulus(self.real, self.imaginary)

    def conjugate(self) -> "ComplexValue":
        """a - bi"""
        return ComplexValue(real=self.real, imaginary=-self.imaginary)

    # -------------------------------------------------------------------------
    # Coordinates
    # -------------------------------------------------------------------------

    def to_cartesian(self) -> CartesianForm:
        """Декартово представление: хранимые компоненты как есть."""
        return CartesianForm(self.real, self.imaginary)

    def to_polar(self) -> PolarForm:
        """Полярное представление (modulus, atan2(imaginary, real))."""
        return cartesian_to_polar(self.real, self.imaginary)

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def is_close(
        self,
        other: "ComplexValue",
        rel_tol: float = EPS_FLOAT_COMPARE_REL,
        abs_tol: float = EPS_FLOAT_COMPARE_ABS,
    ) -> bool:
        """
        Покомпонентное сравнение с толерантностью.

        Используется для round-trip проверок, где точное равенство
        недостижимо из-за округления cos/sin/atan2.

        Raises:
            ValueError: Если толерантность отрицательная или NaN/Inf
        """
        validate_tolerance(rel_tol, "rel_tol")
        validate_tolerance(abs_tol, "abs_tol")
        return is_close(self.real, other.real, rel_tol, abs_tol) and is_close(
            self.imaginary, other.imaginary, rel_tol, abs_tol
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ComplexValue):
            return NotImplemented
        return self.real == other.real and self.imaginary == other.imaginary

    def __hash__(self) -> int:
        return hash((self.real, self.imaginary))

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def to_display_string(self) -> str:
        """
        Каноническая запись a+bi.

        Знак "-" перед мнимой частью даёт её собственная запись, поэтому
        при imaginary < 0 разделитель "+" не ставится. Отрицательный ноль
        не меньше нуля, поэтому (-0, -0) записывается как "-0+-0i".

        Examples:
            >>> str(ComplexValue.from_cartesian(1, -1))
            '1-1i'
            >>> str(ComplexValue.from_cartesian(0.12, -0.34))
            '0.12-0.34i'
        """
        real = format_float_display(self.real)
        imaginary = format_float_display(self.imaginary)
        if self.imaginary < 0:
            return f"{real}{imaginary}i"
        return f"{real}+{imaginary}i"

    def to_debug_string(self) -> str:
        """
        Структурная отладочная запись.

        Examples:
            >>> ComplexValue.from_cartesian(-0.0, -0.0).to_debug_string()
            'ComplexValue { real: -0.0, imaginary: -0.0 }'
        """
        return (
            f"ComplexValue {{ real: {format_float_debug(self.real)}, "
            f"imaginary: {format_float_debug(self.imaginary)} }}"
        )

    def __str__(self) -> str:
        return self.to_display_string()

    # -------------------------------------------------------------------------
    # Operator sugar
    # -------------------------------------------------------------------------

    def __add__(self, other: object) -> "ComplexValue":
        if not isinstance(other, ComplexValue):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> "ComplexValue":
        if not isinstance(other, ComplexValue):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: object) -> "ComplexValue":
        if not isinstance(other, ComplexValue):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other: object) -> "ComplexValue":
        if not isinstance(other, ComplexValue):
            return NotImplemented
        return self.divide(other)

    def __neg__(self) -> "ComplexValue":
        return self.negate()

    def __abs__(self) -> float:
        return self.modulus()
