"""
LinAlg Errors — единственный тип ошибки библиотеки

Все нарушения предусловий Vector/Matrix поднимают LinAlgFailure.
Категория ошибки не выделяется программно: причина указывается
в тексте сообщения в виде метки FailureCause.

Категории:
- non-positive dimension: размерность < 1
- index out of bounds: индекс вне допустимого диапазона
- dimension mismatch: несовместимые формы операндов
- malformed parse: некорректная текстовая форма вектора
"""

from enum import Enum


# =============================================================================
# EXCEPTIONS
# =============================================================================


class LinAlgFailure(Exception):
    """
    Нарушение предусловия операции над Vector или Matrix.

    Поднимается немедленно и никогда не перехватывается внутри библиотеки.
    Операнды после ошибки остаются в исходном состоянии.
    """
    pass


# =============================================================================
# MESSAGE LABELS
# =============================================================================


class FailureCause(str, Enum):
    """Метки причин для текста сообщения LinAlgFailure."""

    NON_POSITIVE_DIMENSION = "non-positive dimension"
    INDEX_OUT_OF_BOUNDS = "index out of bounds"
    DIMENSION_MISMATCH = "dimension mismatch"
    MALFORMED_PARSE = "malformed parse"


def linalg_failure(cause: FailureCause, detail: str) -> LinAlgFailure:
    """
    Построение LinAlgFailure с меткой причины.

    Args:
        cause: Категория ошибки
        detail: Описание (размерность, индекс или входная строка)

    Returns:
        Исключение с сообщением "<cause>: <detail>"

    Examples:
        >>> str(linalg_failure(FailureCause.INDEX_OUT_OF_BOUNDS, "index 3"))
        'index out of bounds: index 3'
    """
    return LinAlgFailure(f"{cause.value}: {detail}")
