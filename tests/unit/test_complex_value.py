"""
Тесты для модели ComplexValue

Проверяет:
1. Создание (cartesian / polar), округление до float32, immutability
2. Арифметику на эталонных примерах
3. Алгебраические свойства (коммутативность, инверсии, инволюция)
4. IEEE-754 поведение (деление на ноль, NaN, отрицательный ноль)
5. Каноническую и отладочную текстовые формы
6. Операторы и сериализацию JSON
"""

import json
import math
import warnings

import numpy as np
import pytest
from pydantic import ValidationError

from src.core.domain import CartesianForm, ComplexValue, PolarForm


def c(real: float, imaginary: float) -> ComplexValue:
    return ComplexValue.from_cartesian(real, imaginary)


SAMPLES = [
    c(2.0, 3.0),
    c(4.0, 6.0),
    c(-2.0, 1.0),
    c(1.0, 2.0),
    c(0.12, -0.34),
    c(-7.5, -0.25),
    c(0.0, 0.0),
]

NON_ZERO_SAMPLES = [s for s in SAMPLES if s.modulus() > 0]


# =============================================================================
# CREATION TESTS
# =============================================================================


class TestCreation:
    """Тесты создания ComplexValue"""

    def test_from_cartesian(self) -> None:
        """Компоненты сохраняются как есть"""
        z = c(2.0, 3.0)
        assert z.real == 2.0
        assert z.imaginary == 3.0

    def test_keyword_constructor_equivalent(self) -> None:
        assert ComplexValue(real=2.0, imaginary=3.0) == c(2.0, 3.0)

    def test_int_components_accepted(self) -> None:
        z = c(2, -3)
        assert z.real == 2.0
        assert z.imaginary == -3.0

    def test_components_rounded_to_float32(self) -> None:
        """0.1 хранится как ближайший float32"""
        z = c(0.1, -0.34)
        assert z.real == float(np.float32(0.1))
        assert z.imaginary == float(np.float32(-0.34))

    def test_from_polar_axis_aligned_exact(self) -> None:
        """from_polar(2, 0) == (2, 0) точно"""
        z = ComplexValue.from_polar(2.0, 0.0)
        assert z.real == 2.0
        assert z.imaginary == 0.0

    def test_from_polar_quarter_turn(self) -> None:
        z = ComplexValue.from_polar(1.0, math.pi / 2)
        assert z.is_close(c(0.0, 1.0))

    def test_from_polar_negative_modulus(self) -> None:
        """Отрицательный модуль даёт отражённую точку"""
        assert ComplexValue.from_polar(-2.0, 0.0) == c(-2.0, 0.0)

    def test_non_finite_components_accepted(self) -> None:
        z = c(float("inf"), float("nan"))
        assert z.real == math.inf
        assert math.isnan(z.imaginary)

    def test_non_numeric_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ComplexValue(real="abc", imaginary=0.0)  # type: ignore[arg-type]

    def test_missing_component_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ComplexValue(real=1.0)  # type: ignore[call-arg]

    def test_immutable(self) -> None:
        """Модель immutable (frozen=True)"""
        z = c(1.0, 1.0)
        with pytest.raises(ValidationError):
            z.real = 2.0  # type: ignore[misc]


# =============================================================================
# ARITHMETIC TESTS
# =============================================================================


class TestArithmetic:
    """Эталонные примеры арифметики"""

    def test_add(self) -> None:
        assert c(2.0, 3.0).add(c(4.0, 6.0)) == c(6.0, 9.0)

    def test_subtract(self) -> None:
        assert c(2.0, 3.0).subtract(c(4.0, 6.0)) == c(-2.0, -3.0)

    def test_subtract_delegates_to_add(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """subtract = add(self, negate(other))"""
        calls = []
        original_add = ComplexValue.add

        def spy(self: ComplexValue, other: ComplexValue) -> ComplexValue:
            calls.append(other)
            return original_add(self, other)

        monkeypatch.setattr(ComplexValue, "add", spy)
        c(2.0, 3.0).subtract(c(4.0, 6.0))
        assert calls == [c(-4.0, -6.0)]

    def test_negate(self) -> None:
        assert c(2.0, -3.0).negate() == c(-2.0, 3.0)

    def test_multiply(self) -> None:
        assert c(2.0, 3.0).multiply(c(4.0, 6.0)) == c(-10.0, 24.0)

    def test_divide(self) -> None:
        assert c(-2.0, 1.0).divide(c(1.0, 2.0)) == c(0.0, 1.0)

    def test_modulus(self) -> None:
        assert c(3.0, -4.0).modulus() == 5.0

    def test_conjugate(self) -> None:
        assert c(-2.0, 1.0).conjugate() == c(-2.0, -1.0)

    def test_operands_not_mutated(self) -> None:
        a = c(2.0, 3.0)
        b = c(4.0, 6.0)
        a.add(b)
        a.multiply(b)
        a.divide(b)
        assert a == c(2.0, 3.0)
        assert b == c(4.0, 6.0)

    def test_float32_rounding_applied(self) -> None:
        """Результат сложения округлён до float32"""
        result = c(0.1, 0.0).add(c(0.2, 0.0))
        expected = float(np.float32(0.1) + np.float32(0.2))
        assert result.real == expected


# =============================================================================
# PROPERTY TESTS
# =============================================================================


class TestAlgebraicProperties:
    """Алгебраические свойства на наборе примеров"""

    @pytest.mark.parametrize("a", SAMPLES)
    @pytest.mark.parametrize("b", SAMPLES)
    def test_commutativity(self, a: ComplexValue, b: ComplexValue) -> None:
        assert a.add(b) == b.add(a)
        assert a.multiply(b) == b.multiply(a)

    @pytest.mark.parametrize("a", SAMPLES)
    def test_additive_inverse_exact(self, a: ComplexValue) -> None:
        assert a.add(a.negate()) == c(0.0, 0.0)

    @pytest.mark.parametrize("a", SAMPLES)
    @pytest.mark.parametrize("b", NON_ZERO_SAMPLES)
    def test_division_multiplication_inverse(
        self, a: ComplexValue, b: ComplexValue
    ) -> None:
        assert a.divide(b).multiply(b).is_close(a, rel_tol=1e-5, abs_tol=1e-5)

    @pytest.mark.parametrize("a", SAMPLES)
    def test_modulus_non_negative(self, a: ComplexValue) -> None:
        assert a.modulus() >= 0.0

    @pytest.mark.parametrize("a", SAMPLES)
    def test_conjugate_involution(self, a: ComplexValue) -> None:
        assert a.conjugate().conjugate() == a

    @pytest.mark.parametrize("a", SAMPLES)
    def test_product_with_conjugate_is_modulus_squared(self, a: ComplexValue) -> None:
        product = a.multiply(a.conjugate())
        assert product.imaginary == 0.0
        assert product.real == pytest.approx(a.modulus() ** 2, rel=1e-6)


# =============================================================================
# IEEE-754 TESTS
# =============================================================================


class TestIEEEBehaviour:
    """Поведение на границах float32"""

    def test_zero_divisor_propagates_nan_without_raising(self) -> None:
        """Числитель при нулевом делителе тоже 0: результат 0/0 = NaN"""
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            result = c(1.0, 1.0).divide(c(0.0, 0.0))
        assert math.isnan(result.real)
        assert math.isnan(result.imaginary)

    def test_underflowing_divisor_propagates_inf(self) -> None:
        """|1e-30|² уходит в 0 во float32: x / 0 = inf"""
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            result = c(1.0, 1.0).divide(c(1e-30, 0.0))
        assert result.real == math.inf
        assert result.imaginary == math.inf

    def test_overflow_propagates_inf(self) -> None:
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            result = c(3e38, 0.0).multiply(c(10.0, 0.0))
        assert result.real == math.inf

    def test_nan_not_equal_to_itself(self) -> None:
        z = c(float("nan"), 0.0)
        assert z != z

    def test_negative_zero_equals_zero(self) -> None:
        assert c(-0.0, -0.0) == c(0.0, 0.0)
        assert hash(c(-0.0, -0.0)) == hash(c(0.0, 0.0))

    def test_nan_input_propagates(self) -> None:
        assert math.isnan(c(float("nan"), 1.0).modulus())


# =============================================================================
# COORDINATE TESTS
# =============================================================================


class TestCoordinates:
    """Тесты to_cartesian / to_polar"""

    def test_to_cartesian(self) -> None:
        z = c(2.0, 3.0)
        real, imaginary = z.to_cartesian()
        assert real == z.real
        assert imaginary == z.imaginary
        assert isinstance(z.to_cartesian(), CartesianForm)

    def test_to_polar_axis_aligned(self) -> None:
        rho, theta = c(2.0, 0.0).to_polar()
        assert rho == 2.0
        assert theta == 0.0

    def test_to_polar_named(self) -> None:
        polar = c(0.0, 2.0).to_polar()
        assert isinstance(polar, PolarForm)
        assert polar.modulus == 2.0
        assert polar.angle == pytest.approx(math.pi / 2, rel=1e-6)

    @pytest.mark.parametrize("a", SAMPLES)
    def test_polar_round_trip(self, a: ComplexValue) -> None:
        polar = a.to_polar()
        restored = ComplexValue.from_polar(polar.modulus, polar.angle)
        assert restored.is_close(a, rel_tol=1e-5, abs_tol=1e-5)

    def test_is_close_rejects_negative_tolerance(self) -> None:
        with pytest.raises(ValueError, match="rel_tol"):
            c(1.0, 1.0).is_close(c(1.0, 1.0), rel_tol=-1.0)

    def test_is_close_distinct(self) -> None:
        assert not c(1.0, 1.0).is_close(c(1.0, 1.1))


# =============================================================================
# RENDERING TESTS
# =============================================================================


class TestRendering:
    """Тесты текстовых форм"""

    @pytest.mark.parametrize(
        "real, imaginary, expected",
        [
            (0.0, 0.0, "0+0i"),
            (1.0, 1.0, "1+1i"),
            (1.0, -1.0, "1-1i"),
            (-1.0, -1.0, "-1-1i"),
            (-0.0, -0.0, "-0+-0i"),
            (0.12, -0.34, "0.12-0.34i"),
        ],
    )
    def test_display_string(self, real: float, imaginary: float, expected: str) -> None:
        z = c(real, imaginary)
        assert z.to_display_string() == expected
        assert str(z) == expected
        assert f"{z}" == expected

    @pytest.mark.parametrize(
        "real, imaginary, expected",
        [
            (0.0, 0.0, "ComplexValue { real: 0.0, imaginary: 0.0 }"),
            (1.0, 1.0, "ComplexValue { real: 1.0, imaginary: 1.0 }"),
            (1.0, -1.0, "ComplexValue { real: 1.0, imaginary: -1.0 }"),
            (-1.0, -1.0, "ComplexValue { real: -1.0, imaginary: -1.0 }"),
            (-0.0, -0.0, "ComplexValue { real: -0.0, imaginary: -0.0 }"),
            (0.12, -0.34, "ComplexValue { real: 0.12, imaginary: -0.34 }"),
        ],
    )
    def test_debug_string(self, real: float, imaginary: float, expected: str) -> None:
        assert c(real, imaginary).to_debug_string() == expected

    def test_debug_string_exponent_form(self) -> None:
        z = c(1e20, 1e-5)
        assert z.to_debug_string() == "ComplexValue { real: 1e20, imaginary: 1e-5 }"
        assert str(z) == "100000000000000000000+0.00001i"

    def test_display_non_finite(self) -> None:
        assert str(c(1.0, 1.0).divide(c(0.0, 0.0))) == "NaN+NaNi"
        assert str(c(1.0, 1.0).divide(c(1e-30, 0.0))) == "inf+infi"
        assert str(c(float("-inf"), float("-inf"))) == "-inf-infi"


# =============================================================================
# OPERATOR TESTS
# =============================================================================


class TestOperators:
    """Операторы — сахар над именованными операциями"""

    def test_binary_operators(self) -> None:
        a = c(2.0, 3.0)
        b = c(4.0, 6.0)
        assert a + b == a.add(b)
        assert a - b == a.subtract(b)
        assert a * b == a.multiply(b)
        assert c(-2.0, 1.0) / c(1.0, 2.0) == c(0.0, 1.0)

    def test_unary_operators(self) -> None:
        assert -c(2.0, -3.0) == c(-2.0, 3.0)
        assert abs(c(3.0, -4.0)) == 5.0

    def test_non_complex_operand_rejected(self) -> None:
        with pytest.raises(TypeError):
            c(1.0, 1.0) + 1  # type: ignore[operator]
        with pytest.raises(TypeError):
            c(1.0, 1.0) * 2.0  # type: ignore[operator]

    def test_equality_with_other_type(self) -> None:
        assert c(1.0, 0.0) != 1.0
        assert c(1.0, 0.0) != (1.0, 0.0)

    def test_hashable(self) -> None:
        assert len({c(1.0, 2.0), c(1.0, 2.0), c(2.0, 1.0)}) == 2


# =============================================================================
# SERIALIZATION TESTS
# =============================================================================


class TestSerialization:
    """Сериализация ComplexValue в JSON и обратно"""

    def test_json_round_trip(self) -> None:
        z = c(2.5, -0.25)
        json_str = z.model_dump_json()
        data = json.loads(json_str)
        assert data == {"real": 2.5, "imaginary": -0.25}
        assert ComplexValue.model_validate_json(json_str) == z

    def test_json_round_trip_non_finite(self) -> None:
        """inf/NaN пишутся как Infinity/NaN и читаются обратно"""
        z = c(float("inf"), float("nan"))
        json_str = z.model_dump_json()
        assert json_str == '{"real":Infinity,"imaginary":NaN}'
        restored = ComplexValue.model_validate_json(json_str)
        assert restored.real == math.inf
        assert math.isnan(restored.imaginary)

    def test_json_round_trip_zero_divisor_result(self) -> None:
        z = c(1.0, 1.0).divide(c(1e-30, 0.0))
        restored = ComplexValue.model_validate_json(z.model_dump_json())
        assert restored == z
