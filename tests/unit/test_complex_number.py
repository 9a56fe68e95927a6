"""
Тесты для Complex — неизменяемое комплексное число

Проверяемые инварианты:
1. from_phasor отклоняет отрицательный модуль
2. z · (1/z) ≈ 1 для z ≠ 0
3. root(n).pow(n) ≈ z вне разреза по отрицательной вещественной оси
4. Деление на ноль падает ZeroDivisionError без собственной проверки
5. Совпадение с встроенным complex для умножения и деления
"""

import math

import pytest
from pydantic import ValidationError

from valmath.complex_number import UNITY, Complex
from valmath.errors import InvalidModulusError, ValmathError

NONZERO_SAMPLES = [
    Complex(1, 1),
    Complex(3, -4),
    Complex(-2, 0.5),
    Complex(0, 2),
    Complex(1e-3, 7),
    Complex(-150.25, -80),
]


# =============================================================================
# ТЕСТЫ: Создание
# =============================================================================


class TestConstruction:
    """Тесты конструктора, from_phasor и констант."""

    def test_positional_and_keyword(self) -> None:
        assert Complex(1, 2) == Complex(re=1.0, im=2.0)
        assert Complex(1, 2).re == 1.0
        assert Complex(1, 2).im == 2.0

    def test_unity(self) -> None:
        assert UNITY == Complex(1, 0)

    @pytest.mark.parametrize("re,im", [("1", 0), (1, True), (None, 0)])
    def test_rejects_non_real_parts(self, re, im) -> None:
        """str и bool не приводятся к float."""
        with pytest.raises(ValidationError):
            Complex(re, im)

    def test_signed_zero_preserved(self) -> None:
        z = Complex(-0.0, 0.0)
        assert math.copysign(1.0, z.re) == -1.0

    def test_frozen(self) -> None:
        z = Complex(1, 2)
        with pytest.raises(ValidationError):
            z.re = 5.0

    def test_from_phasor_unit(self) -> None:
        assert Complex.from_phasor(1, 0) == Complex(1, 0)

    def test_from_phasor_quarter_turn(self) -> None:
        assert Complex.from_phasor(2, math.pi / 2).is_close(Complex(0, 2))

    def test_from_phasor_zero_modulus(self) -> None:
        assert Complex.from_phasor(0, 1.0) == Complex(0, 0)

    def test_from_phasor_negative_modulus(self) -> None:
        """Отрицательный модуль → InvalidModulusError."""
        with pytest.raises(InvalidModulusError, match="cannot be negative") as exc_info:
            Complex.from_phasor(-1, 0)
        assert exc_info.value.modulus == -1
        assert isinstance(exc_info.value, ValueError)
        assert isinstance(exc_info.value, ValmathError)

    @pytest.mark.parametrize("modulus,argument", [(1.0, 0.3), (5.0, -2.0), (0.25, 3.0)])
    def test_from_phasor_roundtrip(self, modulus: float, argument: float) -> None:
        z = Complex.from_phasor(modulus, argument)
        assert z.modulus() == pytest.approx(modulus)
        assert z.argument() == pytest.approx(argument)

    def test_from_builtin(self) -> None:
        assert Complex.from_builtin(3 - 4j) == Complex(3, -4)


# =============================================================================
# ТЕСТЫ: Полярная форма
# =============================================================================


class TestPolar:
    """Тесты modulus и argument."""

    def test_modulus(self) -> None:
        assert Complex(3, 4).modulus() == 5.0
        assert abs(Complex(-3, 4)) == 5.0

    def test_modulus_no_overflow(self) -> None:
        """hypot не переполняется на квадратах больших значений."""
        z = Complex(1e200, 1e200)
        assert math.isfinite(z.modulus())
        assert z.modulus() == pytest.approx(math.sqrt(2) * 1e200)

    def test_argument(self) -> None:
        assert Complex(1, 0).argument() == 0.0
        assert Complex(0, 1).argument() == pytest.approx(math.pi / 2)
        assert Complex(-1, 0).argument() == math.pi
        assert Complex(-1, -0.0).argument() == -math.pi


# =============================================================================
# ТЕСТЫ: Арифметика
# =============================================================================


class TestArithmetic:
    """Тесты add, subtract, negate, conjugate, multiply, divide, reciprocal."""

    def test_add_subtract(self) -> None:
        assert Complex(1, 2).add(Complex(3, -5)) == Complex(4, -3)
        assert Complex(1, 2).subtract(Complex(3, -5)) == Complex(-2, 7)

    def test_negate(self) -> None:
        assert Complex(1, -2).negate() == Complex(-1, 2)

    def test_conjugate(self) -> None:
        assert Complex(1, -2).conjugate() == Complex(1, 2)

    def test_multiply_complex(self) -> None:
        """(1 + 2i)(3 + 4i) = -5 + 10i."""
        assert Complex(1, 2).multiply(Complex(3, 4)) == Complex(-5, 10)

    def test_multiply_scalar(self) -> None:
        assert Complex(1, 2).multiply(3) == Complex(3, 6)
        assert Complex(1, 2).multiply(0.5) == Complex(0.5, 1)

    def test_multiply_rejects_other_types(self) -> None:
        with pytest.raises(TypeError):
            Complex(1, 2).multiply("3")

    @pytest.mark.parametrize("z", NONZERO_SAMPLES)
    def test_times_reciprocal_is_unity(self, z: Complex) -> None:
        assert z.multiply(z.reciprocal()).is_close(UNITY)

    def test_reciprocal_of_zero(self) -> None:
        """1/0.0 поднимает ZeroDivisionError интерпретатора."""
        with pytest.raises(ZeroDivisionError):
            Complex(0, 0).reciprocal()

    def test_divide_complex(self) -> None:
        assert Complex(-5, 10).divide(Complex(3, 4)).is_close(Complex(1, 2))

    def test_divide_by_zero_complex(self) -> None:
        with pytest.raises(ZeroDivisionError):
            Complex(1, 1).divide(Complex(0, 0))

    def test_divide_scalar(self) -> None:
        assert Complex(3, 6).divide(3) == Complex(1, 2)

    def test_divide_scalar_by_zero(self) -> None:
        """Без явной проверки: деление float на 0.0."""
        with pytest.raises(ZeroDivisionError):
            Complex(1, 1).divide(0.0)

    @pytest.mark.parametrize("z", NONZERO_SAMPLES)
    @pytest.mark.parametrize("w", NONZERO_SAMPLES[:3])
    def test_matches_builtin_complex(self, z: Complex, w: Complex) -> None:
        assert z.multiply(w).is_close(Complex.from_builtin(complex(z) * complex(w)))
        assert z.divide(w).is_close(Complex.from_builtin(complex(z) / complex(w)))


# =============================================================================
# ТЕСТЫ: Экспонента, логарифм, степени
# =============================================================================


class TestExpLogPow:
    """Тесты exp, log, pow, root."""

    def test_exp_real(self) -> None:
        assert Complex(1, 0).exp().is_close(Complex(math.e, 0))

    def test_euler_identity(self) -> None:
        """e^(iπ) = -1."""
        assert Complex(0, math.pi).exp().is_close(Complex(-1, 0))

    def test_log_negative_real(self) -> None:
        """Главная ветвь: log(-1) = iπ."""
        assert Complex(-1, 0).log().is_close(Complex(0, math.pi))

    def test_log_of_zero(self) -> None:
        """ln 0 = −∞, без исключения."""
        result = Complex(0, 0).log()
        assert result.re == -math.inf
        assert result.im == 0.0

    @pytest.mark.parametrize("n", [1, 2, 0.5, 3.7])
    def test_pow_of_zero(self, n: float) -> None:
        """0^n = 0 при n > 0."""
        assert Complex(0, 0).pow(n) == Complex(0, 0)

    @pytest.mark.parametrize("n", [1, 2, 3])
    def test_root_of_zero(self, n: int) -> None:
        assert Complex(0, 0).root(n).modulus() == 0.0

    def test_exp_overflow_gives_infinity(self) -> None:
        """Переполнение e^re даёт +∞, а не OverflowError."""
        result = Complex(1000, 0).exp()
        assert math.isinf(result.re)
        assert result.re > 0

    def test_exp_underflow_gives_zero(self) -> None:
        assert Complex(-1000, 0).exp() == Complex(0, 0)

    def test_root_requires_integer(self) -> None:
        with pytest.raises(TypeError):
            Complex(4, 0).root(2.0)

    def test_root_zero_degree(self) -> None:
        with pytest.raises(ValueError, match="non-zero"):
            Complex(4, 0).root(0)

    def test_negative_root_degree(self) -> None:
        assert Complex(4, 0).root(-2).is_close(Complex(0.5, 0))

    @pytest.mark.parametrize("z", [Complex(0.5, 1.0), Complex(-2, -3), Complex(0, -1)])
    def test_exp_log_roundtrip(self, z: Complex) -> None:
        assert z.exp().log().is_close(z)
        assert z.log().exp().is_close(z)

    def test_pow_square_of_i(self) -> None:
        assert Complex(0, 1).pow(2).is_close(Complex(-1, 0))

    def test_pow_matches_multiply(self) -> None:
        z = Complex(1.5, -0.5)
        assert z.pow(3).is_close(z.multiply(z).multiply(z))

    @pytest.mark.parametrize("z", NONZERO_SAMPLES)
    @pytest.mark.parametrize("n", [1, 2, 3, 5])
    def test_root_then_pow(self, z: Complex, n: int) -> None:
        assert z.root(n).pow(n).is_close(z)

    def test_principal_square_root(self) -> None:
        assert Complex(-4, 0).root(2).is_close(Complex(0, 2))
        assert Complex(4, 0).root(2).is_close(Complex(2, 0))


# =============================================================================
# ТЕСТЫ: Python protocols
# =============================================================================


class TestProtocols:
    """Операторы, конверсии, строковые представления."""

    def test_operators_match_methods(self) -> None:
        z = Complex(1, 2)
        w = Complex(-3, 0.5)
        assert z + w == z.add(w)
        assert z - w == z.subtract(w)
        assert -z == z.negate()
        assert z * w == z.multiply(w)
        assert z * 2 == z.multiply(2)
        assert 2 * z == z.multiply(2)
        assert z / w == z.divide(w)
        assert z / 2 == z.divide(2)
        assert z ** 2 == z.pow(2)

    def test_scalar_over_complex(self) -> None:
        z = Complex(3, 4)
        assert (1 / z).is_close(z.reciprocal())

    def test_unsupported_operands(self) -> None:
        with pytest.raises(TypeError):
            Complex(1, 2) + 1
        with pytest.raises(TypeError):
            Complex(1, 2) * "x"

    def test_builtin_conversion(self) -> None:
        assert complex(Complex(1, 2)) == 1 + 2j

    def test_str_and_repr(self) -> None:
        assert str(Complex(1, 2)) == "(1+2j)"
        assert repr(Complex(1, 2)) == "Complex(re=1.0, im=2.0)"

    def test_hashable(self) -> None:
        assert len({Complex(1, 2), Complex(1.0, 2.0), UNITY}) == 2

    def test_is_finite(self) -> None:
        assert Complex(1, 2).is_finite()
        assert not Complex(math.inf, 0).is_finite()
        assert not Complex(0, math.nan).is_finite()
