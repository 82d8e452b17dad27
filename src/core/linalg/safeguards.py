"""
LinAlg Safeguards — проверки предусловий и численные примитивы

Модуль содержит общие для Vector и Matrix проверки:
- Размерность >= 1
- Индекс в диапазоне [0, size)
- Совпадение размерностей операндов
- Поэлементное сравнение float по IEEE-754
- Скалярное произведение с фиксированным порядком суммирования

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Проверки выполняются ДО любой мутации операндов
2. Суммирование строго по возрастанию индекса, без компенсации
3. NaN никогда не равен ничему, -0.0 == +0.0
"""

import math
from typing import Sequence

from src.core.linalg.errors import FailureCause, linalg_failure


# =============================================================================
# ВАЛИДАЦИЯ РАЗМЕРНОСТЕЙ И ИНДЕКСОВ
# =============================================================================


def require_dimension(dim: int, name: str) -> None:
    """
    Валидация, что размерность является целым числом >= 1.

    Args:
        dim: Проверяемая размерность
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        LinAlgFailure: Если dim < 1 или dim не целое
    """
    if isinstance(dim, bool) or not isinstance(dim, int):
        raise linalg_failure(
            FailureCause.NON_POSITIVE_DIMENSION,
            f"{name} must be an integer, got {dim!r}",
        )

    if dim < 1:
        raise linalg_failure(
            FailureCause.NON_POSITIVE_DIMENSION,
            f"{name} {dim} cannot be less than 1",
        )


def require_index(index: int, size: int, name: str) -> None:
    """
    Валидация индекса: 0 <= index < size.

    Отрицательные индексы не интерпретируются как отсчёт с конца.

    Args:
        index: Проверяемый индекс
        size: Размер измерения
        name: Имя индекса (для сообщения об ошибке)

    Raises:
        LinAlgFailure: Если индекс вне диапазона или не целый
    """
    if isinstance(index, bool) or not isinstance(index, int):
        raise linalg_failure(
            FailureCause.INDEX_OUT_OF_BOUNDS,
            f"{name} must be an integer, got {index!r}",
        )

    if index < 0 or index >= size:
        raise linalg_failure(
            FailureCause.INDEX_OUT_OF_BOUNDS,
            f"{name} {index} is outside [0, {size})",
        )


def require_same_dimension(left: int, right: int, what: str) -> None:
    """
    Валидация совпадения размерностей двух операндов.

    Args:
        left: Размерность левого операнда
        right: Размерность правого операнда
        what: Описание проверяемой пары (для сообщения об ошибке)

    Raises:
        LinAlgFailure: Если left != right
    """
    if left != right:
        raise linalg_failure(
            FailureCause.DIMENSION_MISMATCH,
            f"{what}: {left} != {right}",
        )


# =============================================================================
# ПРИВЕДЕНИЕ К ВЕЩЕСТВЕННОМУ ЧИСЛУ
# =============================================================================


def as_real(value: float, name: str) -> float:
    """
    Приведение значения к float (IEEE-754 double).

    Строки не разбираются: текстовый ввод идёт только через parse().
    Комплексные числа отклоняются самим float().

    Args:
        value: Число (int, float или объект с __float__)
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        float(value)

    Raises:
        TypeError: Если value строка, complex или не приводится к float

    Examples:
        >>> as_real(2, "d")
        2.0
    """
    if isinstance(value, (str, bytes, bytearray)):
        raise TypeError(f"{name} must be a real number, got {type(value).__name__}")
    return float(value)


# =============================================================================
# СРАВНЕНИЕ И СУММИРОВАНИЕ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float конечным (не NaN, не Inf).

    Examples:
        >>> is_valid_float(1.0)
        True
        >>> is_valid_float(float("nan"))
        False
    """
    return math.isfinite(value)


def values_equal(a: Sequence[float], b: Sequence[float]) -> bool:
    """
    Поэлементное сравнение двух последовательностей float.

    Сравнение list == list сначала проверяет идентичность объектов,
    поэтому [nan] == [nan] может дать True. Здесь каждый элемент
    сравнивается оператором != явно.

    Args:
        a: Первая последовательность
        b: Вторая последовательность

    Returns:
        True если длины равны и все элементы равны по IEEE-754

    Examples:
        >>> values_equal([0.0, 1.0], [-0.0, 1.0])
        True
        >>> nan = float("nan")
        >>> values_equal([nan], [nan])
        False
    """
    if len(a) != len(b):
        return False

    for x, y in zip(a, b):
        if x != y:
            return False

    return True


def ordered_dot(a: Sequence[float], b: Sequence[float]) -> float:
    """
    Скалярное произведение с суммированием по возрастанию индекса.

    Аккумулятор начинается с 0.0, без компенсации (builtin sum()
    компенсирует float начиная с Python 3.12).

    Args:
        a: Первая последовательность
        b: Вторая последовательность той же длины

    Returns:
        Σ a[i] * b[i]
    """
    total = 0.0
    for x, y in zip(a, b):
        total += x * y
    return total
