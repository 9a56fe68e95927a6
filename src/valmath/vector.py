"""
Vector — Неизменяемый вещественный вектор фиксированной размерности

Immutable Pydantic модель. Все операции, "изменяющие" вектор, возвращают
новый экземпляр; исходный объект никогда не меняется.

Два пути создания:
- Vector.make(*values): публичная фабрика, всегда копирует входные данные
- Vector._wrap(values): внутренний путь для операций этого модуля, принимает
  владение только что собранным tuple без повторной валидации

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Компоненты не меняются после создания
2. Длина вычисляется не более одного раза и кэшируется на всё время жизни
   (None означает "ещё не вычислена")
3. Размерности операндов проверяются до начала вычислений

ФОРМУЛЫ:
    length(v) = sqrt(v · v)
    a × b = (a1·b2 − a2·b1, a2·b0 − a0·b2, a0·b1 − a1·b0)
"""

import logging
import math
import operator
from typing import Any, Iterator

from pydantic import BaseModel, Field, PrivateAttr, field_validator

from valmath.errors import (
    VectorDimensionError,
    VectorIndexError,
    VectorLengthMismatch,
    ZeroVectorError,
)
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
# VECTOR MODEL
# =============================================================================


class Vector(BaseModel):
    """
    Неизменяемый вектор вещественных чисел.

    Immutable модель (frozen=True). Кэш длины хранится в приватном атрибуте
    и не участвует в сравнении и хэшировании.

    Examples:
        >>> v = Vector.make(1, 2, 3)
        >>> str(v)
        '[1,2,3]'
        >>> v.dot(Vector.make(1, 1, 1))
        6.0
    """

    values: tuple[float, ...] = Field(..., description="Компоненты вектора")

    # Кэш длины. Гонка при первом вычислении безопасна: все потоки
    # записывают одно и то же значение.
    _length: float | None = PrivateAttr(default=None)

    model_config = {"frozen": True}

    @field_validator("values", mode="before")
    @classmethod
    def validate_components(cls, v: Any) -> Any:
        """Компоненты — только вещественные скаляры (без str и bool)."""
        if isinstance(v, (list, tuple)):
            for x in v:
                if not is_real_scalar(x):
                    raise ValueError(
                        f"Vector components must be real numbers, got {type(x).__name__}"
                    )
        return v

    # -------------------------------------------------------------------------
    # Создание
    # -------------------------------------------------------------------------

    @classmethod
    def make(cls, *values: float) -> "Vector":
        """
        Публичная фабрика. Копирует входные значения.

        Args:
            *values: Компоненты вектора (любое количество, включая ноль)

        Returns:
            Новый Vector, не связанный с данными вызывающего кода
        """
        return cls(values=values)

    @classmethod
    def _wrap(cls, values: tuple[float, ...]) -> "Vector":
        # Только для tuple, собранных внутри модуля: без копии и валидации.
        return cls.model_construct(values=values)

    # -------------------------------------------------------------------------
    # Доступ к компонентам
    # -------------------------------------------------------------------------

    def size(self) -> int:
        """Количество компонент."""
        return len(self.values)

    def get(self, index: int) -> float:
        """
        Компонента по индексу (с нуля).

        Raises:
            VectorIndexError: Если index вне [0, size)
        """
        return self.values[self._check_index(index)]

    def with_component(self, index: int, value: float) -> "Vector":
        """
        Новый вектор с заменённой компонентой. Этот объект не меняется.

        Args:
            index: Индекс заменяемой компоненты
            value: Новое значение

        Raises:
            VectorIndexError: Если index вне [0, size)
            TypeError: Если value не вещественное число
        """
        index = self._check_index(index)
        replaced = list(self.values)
        replaced[index] = validate_real_scalar(value, "value")
        return Vector._wrap(tuple(replaced))

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def negate(self) -> "Vector":
        """Вектор -v."""
        return Vector._wrap(tuple(-x for x in self.values))

    def add(self, other: "Vector") -> "Vector":
        """
        Сумма векторов.

        Raises:
            VectorLengthMismatch: Если размерности различаются
        """
        self._check_same_size(other)
        return Vector._wrap(tuple(a + b for a, b in zip(self.values, other.values)))

    def subtract(self, other: "Vector") -> "Vector":
        """
        Разность векторов (this - other).

        Raises:
            VectorLengthMismatch: Если размерности различаются
        """
        self._check_same_size(other)
        return Vector._wrap(tuple(a - b for a, b in zip(self.values, other.values)))

    def dot(self, other: "Vector") -> float:
        """
        Скалярное произведение.

        Raises:
            VectorLengthMismatch: Если размерности различаются
        """
        self._check_same_size(other)

        dot = 0.0
        for a, b in zip(self.values, other.values):
            dot += a * b

        return dot

    def cross(self, other: "Vector") -> "Vector":
        """
        Векторное произведение по правилу правой руки.

        Raises:
            VectorLengthMismatch: Если размерности различаются
            VectorDimensionError: Если размерность не равна 3
        """
        self._check_same_size(other)
        if len(self.values) != 3:
            logger.debug("cross product requested for size %d", len(self.values))
            raise VectorDimensionError(len(self.values))

        a0, a1, a2 = self.values
        b0, b1, b2 = other.values

        return Vector._wrap((
            a1 * b2 - a2 * b1,
            a2 * b0 - a0 * b2,
            a0 * b1 - a1 * b0,
        ))

    def multiply(self, constant: float) -> "Vector":
        """
        Умножение на скаляр.

        Raises:
            TypeError: Если constant не вещественное число
        """
        constant = validate_real_scalar(constant, "constant")
        return Vector._wrap(tuple(x * constant for x in self.values))

    def normalize(self) -> "Vector":
        """
        Вектор единичной длины того же направления.

        Raises:
            ZeroVectorError: Если длина вектора равна 0
        """
        length = self.length()
        if length == 0.0:
            logger.debug("normalize requested for zero vector %s", self)
            raise ZeroVectorError("Can't normalize a zero vector")

        if length == 1.0:
            return self

        return self.multiply(1 / length)

    def length(self) -> float:
        """
        Евклидова норма sqrt(v · v).

        Вычисляется при первом вызове, далее возвращается кэш.
        """
        length = self._length
        if length is None:
            length = math.sqrt(self.dot(self))
            self._length = length

        return length

    # -------------------------------------------------------------------------
    # Сравнения и проверки
    # -------------------------------------------------------------------------

    def is_close(
        self,
        other: "Vector",
        rel_tol: float = EPS_FLOAT_COMPARE_REL,
        abs_tol: float = EPS_FLOAT_COMPARE_ABS,
    ) -> bool:
        """Покомпонентное сравнение с толерантностью. Разные размерности — False."""
        if len(self.values) != len(other.values):
            return False
        return all(
            is_close(a, b, rel_tol=rel_tol, abs_tol=abs_tol)
            for a, b in zip(self.values, other.values)
        )

    def is_finite(self) -> bool:
        """True если ни одна компонента не NaN/Inf."""
        return all(is_valid_float(x) for x in self.values)

    # -------------------------------------------------------------------------
    # Внутренние проверки
    # -------------------------------------------------------------------------

    def _check_index(self, index: int) -> int:
        index = operator.index(index)
        if not 0 <= index < len(self.values):
            logger.debug("index %d out of range [0, %d)", index, len(self.values))
            raise VectorIndexError(index, len(self.values))
        return index

    def _check_same_size(self, other: "Vector") -> None:
        if len(self.values) != len(other.values):
            logger.debug(
                "size mismatch: %d vs. %d", len(self.values), len(other.values)
            )
            raise VectorLengthMismatch(len(self.values), len(other.values))

    # -------------------------------------------------------------------------
    # Python protocols
    # -------------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self.values)

    def __getitem__(self, index: int) -> float:
        return self.get(index)

    def __iter__(self) -> Iterator[float]:  # type: ignore[override]
        return iter(self.values)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.values == other.values

    def __hash__(self) -> int:
        return hash(self.values)

    def __neg__(self) -> "Vector":
        return self.negate()

    def __add__(self, other: Any) -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Any) -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: Any) -> "Vector":
        if not is_real_scalar(other):
            return NotImplemented
        return self.multiply(other)

    __rmul__ = __mul__

    def __matmul__(self, other: Any) -> float:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.dot(other)

    def __abs__(self) -> float:
        return self.length()

    def __str__(self) -> str:
        """Строка вида "[1,2,3]"."""
        return "[" + ",".join(_format_component(x) for x in self.values) + "]"

    def __repr__(self) -> str:
        return f"Vector({', '.join(repr(x) for x in self.values)})"


def _format_component(value: float) -> str:
    # Кратчайшее round-trip представление, целые без ".0"
    text = repr(float(value))
    if text.endswith(".0"):
        return text[:-2]
    return text


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

X: Vector = Vector.make(1, 0, 0)
Y: Vector = Vector.make(0, 1, 0)
Z: Vector = Vector.make(0, 0, 1)
