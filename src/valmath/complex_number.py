"""
Complex — Неизменяемое комплексное число

Immutable Pydantic модель с вещественной и мнимой частями.
В отличие от Vector, производные величины (modulus, argument) не кэшируются
и вычисляются при каждом вызове.

ФОРМУЛЫ:
    from_phasor(r, a) = r·(cos a + i·sin a)
    (a + bi)(c + di) = (ac − bd) + (ad + bc)i
    1/z = from_phasor(1/|z|, −arg z)
    exp(a + bi) = e^a·(cos b + i·sin b)
    log(z) = ln|z| + i·arg z              (главная ветвь)
    z^n = exp(n·log z)                    (главное значение)

ДЕЛЕНИЕ НА НОЛЬ:
    divide(scalar) и reciprocal() не содержат явных проверок. Деление float
    на 0.0 в Python поднимает ZeroDivisionError, поэтому оба пути падают
    одинаково, но без собственного исключения библиотеки.

IEEE-КРАЯ:
    log(0) = −∞ + i·arg, поэтому 0^n = 0 при n > 0.
    exp при переполнении e^re даёт модуль +∞ вместо OverflowError.
"""

import logging
import math
import operator
from typing import Any

from pydantic import BaseModel, Field, field_validator

from valmath.errors import InvalidModulusError
from valmath.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    is_close,
    is_real_scalar,
    is_valid_float,
    validate_real_scalar,
)

logger = logging.getLogger(__name__)


# =============================================================================
# COMPLEX MODEL
# =============================================================================


class Complex(BaseModel):
    """
    Комплексное число re + im·i.

    Immutable модель (frozen=True). Создаётся напрямую из пары (re, im)
    или из фазора через from_phasor.

    Examples:
        >>> Complex(1, 2).multiply(Complex(3, 4))
        Complex(re=-5.0, im=10.0)
        >>> Complex(3, 4).modulus()
        5.0
    """

    re: float = Field(..., description="Вещественная часть")
    im: float = Field(..., description="Мнимая часть")

    model_config = {"frozen": True}

    def __init__(self, re: float, im: float) -> None:
        super().__init__(re=re, im=im)

    @field_validator("re", "im", mode="before")
    @classmethod
    def validate_part(cls, v: Any) -> Any:
        """Части числа — только вещественные скаляры (без str и bool)."""
        if not is_real_scalar(v):
            raise ValueError(f"must be a real number, got {type(v).__name__}")
        return v

    @classmethod
    def from_phasor(cls, modulus: float, argument: float) -> "Complex":
        """
        Создание из фазора: modulus·e^(argument·i).

        Args:
            modulus: Расстояние от начала координат (>= 0)
            argument: Угол в радианах

        Raises:
            InvalidModulusError: Если modulus < 0
        """
        if modulus < 0:
            logger.debug("negative modulus rejected: %r", modulus)
            raise InvalidModulusError(modulus)

        return cls(modulus * math.cos(argument), modulus * math.sin(argument))

    @classmethod
    def from_builtin(cls, value: complex) -> "Complex":
        """Конверсия из встроенного complex."""
        return cls(value.real, value.imag)

    # -------------------------------------------------------------------------
    # Полярная форма
    # -------------------------------------------------------------------------

    def modulus(self) -> float:
        """Расстояние до начала координат (hypot, без переполнения на квадратах)."""
        return math.hypot(self.re, self.im)

    def argument(self) -> float:
        """Угол от положительной вещественной оси, в диапазоне (−π, π]."""
        return math.atan2(self.im, self.re)

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def add(self, other: "Complex") -> "Complex":
        return Complex(self.re + other.re, self.im + other.im)

    def subtract(self, other: "Complex") -> "Complex":
        """Разность this - other."""
        return Complex(self.re - other.re, self.im - other.im)

    def negate(self) -> "Complex":
        return Complex(-self.re, -self.im)

    def conjugate(self) -> "Complex":
        """Сопряжённое число (меняется знак только мнимой части)."""
        return Complex(self.re, -self.im)

    def reciprocal(self) -> "Complex":
        """
        1/z через полярную форму.

        Raises:
            ZeroDivisionError: Если модуль равен 0 (из деления float)
        """
        return Complex.from_phasor(1 / self.modulus(), -self.argument())

    def multiply(self, other: "Complex | float") -> "Complex":
        """
        Произведение на комплексное число или на вещественный скаляр.

        Raises:
            TypeError: Если other не Complex и не вещественное число
        """
        if isinstance(other, Complex):
            return Complex(
                self.re * other.re - self.im * other.im,
                self.re * other.im + self.im * other.re,
            )

        scalar = validate_real_scalar(other, "other")
        return Complex(self.re * scalar, self.im * scalar)

    def divide(self, other: "Complex | float") -> "Complex":
        """
        Частное this / other.

        Для Complex: multiply(other.reciprocal()).
        Для скаляра: обе части делятся без явной проверки на ноль.

        Raises:
            ZeroDivisionError: Если делитель равен нулю
            TypeError: Если other не Complex и не вещественное число
        """
        if isinstance(other, Complex):
            return self.multiply(other.reciprocal())

        scalar = validate_real_scalar(other, "other")
        return Complex(self.re / scalar, self.im / scalar)

    # -------------------------------------------------------------------------
    # Экспонента, логарифм, степени
    # -------------------------------------------------------------------------

    def exp(self) -> "Complex":
        """e в степени этого числа."""
        # e^(re + im·i) = e^re · e^(im·i)
        try:
            modulus = math.exp(self.re)
        except OverflowError:
            modulus = math.inf

        return Complex.from_phasor(modulus, self.im)

    def log(self) -> "Complex":
        """
        Натуральный логарифм, главная ветвь.

        Для нуля вещественная часть равна −∞ (как ln 0 в IEEE).
        """
        modulus = self.modulus()
        if modulus == 0.0:
            return Complex(-math.inf, self.argument())

        return Complex(math.log(modulus), self.argument())

    def pow(self, n: float) -> "Complex":
        """
        Вещественная степень, главное значение.

        x^y = e^(log(x^y)) = e^(y·log x)
        """
        return self.log().multiply(n).exp()

    def root(self, n: int) -> "Complex":
        """
        Главный корень n-й степени.

        Raises:
            TypeError: Если n не целое
            ValueError: Если n == 0
        """
        n = operator.index(n)
        if n == 0:
            logger.debug("zeroth root requested for %r", self)
            raise ValueError("Root degree must be non-zero")

        return self.pow(1.0 / n)

    # -------------------------------------------------------------------------
    # Сравнения и проверки
    # -------------------------------------------------------------------------

    def is_close(
        self,
        other: "Complex",
        rel_tol: float = EPS_FLOAT_COMPARE_REL,
        abs_tol: float = EPS_FLOAT_COMPARE_ABS,
    ) -> bool:
        """Сравнение обеих частей с толерантностью."""
        return is_close(self.re, other.re, rel_tol=rel_tol, abs_tol=abs_tol) and is_close(
            self.im, other.im, rel_tol=rel_tol, abs_tol=abs_tol
        )

    def is_finite(self) -> bool:
        return is_valid_float(self.re) and is_valid_float(self.im)

    # -------------------------------------------------------------------------
    # Python protocols
    # -------------------------------------------------------------------------

    def __complex__(self) -> complex:
        return complex(self.re, self.im)

    def __abs__(self) -> float:
        return self.modulus()

    def __neg__(self) -> "Complex":
        return self.negate()

    def __add__(self, other: Any) -> "Complex":
        if not isinstance(other, Complex):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Any) -> "Complex":
        if not isinstance(other, Complex):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: Any) -> "Complex":
        if not (isinstance(other, Complex) or is_real_scalar(other)):
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other: Any) -> "Complex":
        if not is_real_scalar(other):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other: Any) -> "Complex":
        if not (isinstance(other, Complex) or is_real_scalar(other)):
            return NotImplemented
        return self.divide(other)

    def __rtruediv__(self, other: Any) -> "Complex":
        if not is_real_scalar(other):
            return NotImplemented
        return Complex(other, 0.0).divide(self)

    def __pow__(self, n: Any) -> "Complex":
        if not is_real_scalar(n):
            return NotImplemented
        return self.pow(n)

    def __str__(self) -> str:
        return str(complex(self.re, self.im))


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

UNITY: Complex = Complex(1, 0)
