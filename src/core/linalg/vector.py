"""
Vector — вещественный вектор фиксированной положительной размерности

Value-тип с собственным хранилищем:
- Конструирование: по размерности, копированием, разбором текста, из значений
- Доступ к элементам: get/set, v[i]
- Скалярная и поэлементная арифметика (in-place и чистые версии)
- Изменение размерности (change_dim)
- Скалярное произведение (inner_prod) с упорядоченным суммированием
- Структурное равенство и текстовое представление

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. dim >= 1 и len(values) == dim в любой наблюдаемой точке
2. Каждый конструктор и каждая операция, возвращающая Vector,
   выделяет новое независимое хранилище
3. Ошибка предусловия не изменяет операнды
"""

from typing import Iterable, Iterator

from src.core.linalg.errors import FailureCause, linalg_failure
from src.core.linalg.safeguards import (
    as_real,
    is_valid_float,
    ordered_dot,
    require_dimension,
    require_index,
    require_same_dimension,
    values_equal,
)
from src.core.linalg.text_form import (
    FormatConfig,
    format_vector_line,
    parse_vector_values,
)


class Vector:
    """
    Вещественный вектор размерности dim >= 1.

    Все элементы хранятся как float (IEEE-754 double).
    Изменяемый тип: hash не определён.

    Examples:
        >>> v = Vector.parse("[ 1.0 2.0 3.0 ]")
        >>> Vector.inner_prod(v, v)
        14.0
    """

    __slots__ = ("_dim", "_values")

    def __init__(self, dim: int):
        require_dimension(dim, "Vector dimension")
        self._dim: int = dim
        self._values: list[float] = [0.0] * dim

    # -------------------------------------------------------------------------
    # Альтернативные конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def copy_of(cls, v: "Vector") -> "Vector":
        """Глубокая копия v с независимым хранилищем."""
        return cls._adopt(list(v._values))

    @classmethod
    def parse(cls, text: str) -> "Vector":
        """
        Вектор из текстовой формы "[ 1.0 2.0 3.0 ]".

        Raises:
            LinAlgFailure: Если строка не соответствует грамматике
                или не содержит ни одного значения
        """
        return cls._adopt(parse_vector_values(text))

    @classmethod
    def from_values(cls, values: Iterable[float]) -> "Vector":
        """
        Вектор из последовательности значений.

        Raises:
            LinAlgFailure: Если последовательность пустая
        """
        data = [as_real(x, "Vector value") for x in values]
        if not data:
            raise linalg_failure(
                FailureCause.NON_POSITIVE_DIMENSION,
                "Vector dimension 0 cannot be less than 1",
            )
        return cls._adopt(data)

    @classmethod
    def _adopt(cls, values: list[float]) -> "Vector":
        # Принимает владение списком; вызывающий гарантирует len(values) >= 1
        v = cls.__new__(cls)
        v._dim = len(values)
        v._values = values
        return v

    def copy(self) -> "Vector":
        return Vector.copy_of(self)

    def __copy__(self) -> "Vector":
        return Vector.copy_of(self)

    def __deepcopy__(self, memo: dict) -> "Vector":
        return Vector.copy_of(self)

    # -------------------------------------------------------------------------
    # Доступ к элементам
    # -------------------------------------------------------------------------

    @property
    def dim(self) -> int:
        """Размерность вектора."""
        return self._dim

    def get(self, index: int) -> float:
        """
        Значение по индексу.

        Raises:
            LinAlgFailure: Если index вне [0, dim)
        """
        require_index(index, self._dim, "Vector index")
        return self._values[index]

    def set(self, index: int, value: float) -> None:
        """
        Запись значения по индексу.

        Raises:
            LinAlgFailure: Если index вне [0, dim)
            TypeError: Если value не вещественное число
        """
        require_index(index, self._dim, "Vector index")
        self._values[index] = as_real(value, "Vector value")

    def change_dim(self, new_dim: int) -> None:
        """
        Замена хранилища на новое размерности new_dim.

        Первые min(dim, new_dim) элементов сохраняются по порядку,
        новые позиции заполняются 0.0, лишние отбрасываются.

        Raises:
            LinAlgFailure: Если new_dim < 1
        """
        require_dimension(new_dim, "Vector dimension")
        kept = self._values[:new_dim]
        self._values = kept + [0.0] * (new_dim - len(kept))
        self._dim = new_dim

    def to_list(self) -> list[float]:
        """Копия элементов в виде списка."""
        return list(self._values)

    def is_finite(self) -> bool:
        """True если все элементы конечны (без NaN/Inf)."""
        return all(is_valid_float(x) for x in self._values)

    def __len__(self) -> int:
        return self._dim

    def __iter__(self) -> Iterator[float]:
        return iter(list(self._values))

    def __getitem__(self, index: int) -> float:
        return self.get(index)

    def __setitem__(self, index: int, value: float) -> None:
        self.set(index, value)

    # -------------------------------------------------------------------------
    # Скалярная арифметика
    # -------------------------------------------------------------------------

    def scalar_add_in_place(self, d: float) -> None:
        """
        values[i] += d для всех i.

        Raises:
            TypeError: Если d не вещественное число (complex, str)
        """
        d = as_real(d, "Scalar")
        for i in range(self._dim):
            self._values[i] += d

    def scalar_add(self, d: float) -> "Vector":
        """Новый вектор values[i] + d. self не изменяется."""
        result = self.copy()
        result.scalar_add_in_place(d)
        return result

    def scalar_mult_in_place(self, d: float) -> None:
        """
        values[i] *= d для всех i.

        Raises:
            TypeError: Если d не вещественное число (complex, str)
        """
        d = as_real(d, "Scalar")
        for i in range(self._dim):
            self._values[i] *= d

    def scalar_mult(self, d: float) -> "Vector":
        """Новый вектор values[i] * d. self не изменяется."""
        result = self.copy()
        result.scalar_mult_in_place(d)
        return result

    # -------------------------------------------------------------------------
    # Поэлементная арифметика
    # -------------------------------------------------------------------------

    def elementwise_add_in_place(self, v: "Vector") -> None:
        """
        self[i] += v[i].

        Raises:
            LinAlgFailure: Если v.dim != self.dim
        """
        require_same_dimension(self._dim, v._dim, "Vector dimensions must match")
        other = v._values
        for i in range(self._dim):
            self._values[i] += other[i]

    def elementwise_add(self, v: "Vector") -> "Vector":
        """
        Новый вектор self[i] + v[i]. Операнды не изменяются.

        Raises:
            LinAlgFailure: Если v.dim != self.dim
        """
        require_same_dimension(self._dim, v._dim, "Vector dimensions must match")
        return Vector._adopt([x + y for x, y in zip(self._values, v._values)])

    def elementwise_mult_in_place(self, v: "Vector") -> None:
        """
        self[i] *= v[i].

        Raises:
            LinAlgFailure: Если v.dim != self.dim
        """
        require_same_dimension(self._dim, v._dim, "Vector dimensions must match")
        other = v._values
        for i in range(self._dim):
            self._values[i] *= other[i]

    def elementwise_mult(self, v: "Vector") -> "Vector":
        """
        Новый вектор self[i] * v[i]. Операнды не изменяются.

        Raises:
            LinAlgFailure: Если v.dim != self.dim
        """
        require_same_dimension(self._dim, v._dim, "Vector dimensions must match")
        return Vector._adopt([x * y for x, y in zip(self._values, v._values)])

    @staticmethod
    def inner_prod(v1: "Vector", v2: "Vector") -> float:
        """
        Скалярное произведение Σ v1[i] * v2[i] по возрастанию i.

        Raises:
            LinAlgFailure: Если v1.dim != v2.dim
        """
        require_same_dimension(v1._dim, v2._dim, "Vector dimensions must match")
        return ordered_dot(v1._values, v2._values)

    # -------------------------------------------------------------------------
    # Равенство и представление
    # -------------------------------------------------------------------------

    def equals(self, other: object) -> bool:
        """
        Структурное равенство: тот же тип, та же размерность, равные элементы.

        NaN не равен ничему (в том числе себе), -0.0 == +0.0.
        """
        if not isinstance(other, Vector):
            return False
        if self._dim != other._dim:
            return False
        return values_equal(self._values, other._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.equals(other)

    __hash__ = None  # type: ignore[assignment]

    def format(self, config: FormatConfig | None = None) -> str:
        """Однострочная текстовая форма, например "[  1.000   2.000  ]"."""
        return format_vector_line(self._values, config)

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"Vector({self._values!r})"
