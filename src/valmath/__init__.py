"""
valmath — неизменяемые числовые типы

Вещественный вектор фиксированной размерности и комплексное число
со стандартной арифметикой. Типы независимы друг от друга.
"""

import logging

# Complex
from valmath.complex_number import UNITY, Complex

# Errors
from valmath.errors import (
    InvalidModulusError,
    ValmathError,
    VectorDimensionError,
    VectorIndexError,
    VectorLengthMismatch,
    ZeroVectorError,
)

# Numerical Safeguards
from valmath.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    is_close,
    is_real_scalar,
    is_valid_float,
    validate_real_scalar,
)

# Vector
from valmath.vector import X, Y, Z, Vector

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.0"

__all__ = [
    # Vector
    "Vector",
    "X",
    "Y",
    "Z",
    # Complex
    "Complex",
    "UNITY",
    # Errors
    "ValmathError",
    "VectorLengthMismatch",
    "VectorIndexError",
    "VectorDimensionError",
    "ZeroVectorError",
    "InvalidModulusError",
    # Numerical Safeguards
    "EPS_FLOAT_COMPARE_REL",
    "EPS_FLOAT_COMPARE_ABS",
    "is_close",
    "is_real_scalar",
    "is_valid_float",
    "validate_real_scalar",
]
