"""
Numerical Safeguards — Толерантности и проверки float

Общие примитивы для Vector и Complex:
- Epsilon-константы для приближённого сравнения
- Проверка конечности float
- Сравнение float с учётом машинной точности
- Проверка, что операнд является вещественным скаляром

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Сравнения никогда не меняют значения (только читают)
2. bool не считается вещественным скаляром, хотя является подклассом int
"""

import math
from numbers import Real
from typing import Any, Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Относительная толерантность для is_close
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Абсолютная толерантность для is_close (важна около нуля)
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Returns:
        True если значение конечное
    """
    return math.isfinite(value)


def is_real_scalar(value: Any) -> bool:
    """
    Является ли значение вещественным скаляром (int, float, numbers.Real).

    bool исключён: True * vector почти всегда ошибка вызывающего кода.
    """
    return isinstance(value, Real) and not isinstance(value, bool)


def validate_real_scalar(value: Any, name: str) -> float:
    """
    Валидация вещественного скаляра.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        value, приведённое к float

    Raises:
        TypeError: Если value не вещественный скаляр
    """
    if not is_real_scalar(value):
        raise TypeError(
            f"{name} must be a real number, got {type(value).__name__}"
        )
    return float(value)


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
        >>> is_close(0.0, 1e-13)
        True
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)
