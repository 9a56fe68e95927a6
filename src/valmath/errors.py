"""
Errors — Таксономия ошибок valmath

Все ошибки библиотеки синхронные и обнаруживаются до начала вычислений.
Каждое исключение наследует ValmathError и соответствующий builtin
(ValueError / IndexError), поэтому вызывающий код может ловить любой из них.

Неявные float-условия (деление комплексного числа на скаляр 0.0,
reciprocal нулевого числа) здесь не представлены: они всплывают как
ZeroDivisionError интерпретатора.
"""


class ValmathError(Exception):
    """Базовый класс всех ошибок valmath."""

    pass


# =============================================================================
# VECTOR
# =============================================================================


class VectorLengthMismatch(ValmathError, ValueError):
    """
    Бинарная операция над векторами разной размерности.

    Raised by: add, subtract, dot, cross.
    """

    def __init__(self, left_size: int, right_size: int):
        self.left_size = left_size
        self.right_size = right_size
        super().__init__(
            f"Vectors must be the same length ({left_size} vs. {right_size})"
        )


class VectorIndexError(ValmathError, IndexError):
    """Индекс компоненты вне диапазона [0, size)."""

    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__(f"Index {index} out of range for vector of size {size}")


class VectorDimensionError(ValmathError, ValueError):
    """Векторное произведение определено только для 3-векторов."""

    def __init__(self, size: int):
        self.size = size
        super().__init__(
            f"Can only compute cross product of 3-vectors (got size {size})"
        )


class ZeroVectorError(ValmathError, ValueError):
    """Нормализация вектора нулевой длины."""

    pass


# =============================================================================
# COMPLEX
# =============================================================================


class InvalidModulusError(ValmathError, ValueError):
    """Отрицательный модуль при построении из фазора."""

    def __init__(self, modulus: float):
        self.modulus = modulus
        super().__init__(f"The modulus cannot be negative ({modulus})")
