"""
Matrix — вещественная матрица фиксированной формы (rows × cols)

Value-тип с собственной сеткой значений:
- Конструирование: по форме, копированием, из списка строк
- Доступ к элементам: get/set, m[i, j], get_row
- Транспонирование
- Единичная матрица (get_identity)
- Произведения матрица × матрица и матрица × вектор
- Структурное равенство и многострочное текстовое представление

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. rows >= 1, cols >= 1; сетка ровно rows строк длины cols
2. Операции, возвращающие Matrix/Vector, выделяют новое хранилище
3. transpose, get, get_row, equals, format и multiply не изменяют операнды
4. Суммирование в произведениях строго по возрастанию k (или j)

ФОРМУЛЫ:
    multiply(m1, m2)[i, j] = Σ_k m1[i, k] · m2[k, j]
    multiply(m, v)[i]      = Σ_j m[i, j] · v[j]
"""

from typing import Iterable, NamedTuple, Sequence

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
from src.core.linalg.text_form import FormatConfig, format_matrix_lines
from src.core.linalg.vector import Vector


class MatrixShape(NamedTuple):
    """Форма матрицы."""

    rows: int
    cols: int


class Matrix:
    """
    Вещественная матрица формы (rows, cols), rows >= 1 и cols >= 1.

    Изменяемый тип (через set): hash не определён.

    Examples:
        >>> a = Matrix.from_rows([[1, 2], [3, 4]])
        >>> Matrix.multiply(a, Matrix.get_identity(2)) == a
        True
    """

    __slots__ = ("_rows", "_cols", "_data")

    def __init__(self, rows: int, cols: int):
        require_dimension(rows, "Matrix row count")
        require_dimension(cols, "Matrix column count")
        self._rows: int = rows
        self._cols: int = cols
        self._data: list[list[float]] = [[0.0] * cols for _ in range(rows)]

    # -------------------------------------------------------------------------
    # Альтернативные конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def copy_of(cls, m: "Matrix") -> "Matrix":
        """Глубокая копия m с независимой сеткой."""
        return cls._adopt([list(row) for row in m._data])

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[float]]) -> "Matrix":
        """
        Матрица из последовательности строк одинаковой длины.

        Raises:
            LinAlgFailure: Если строк нет, строка пустая
                или длины строк различаются
        """
        data = [[as_real(x, "Matrix value") for x in row] for row in rows]
        if not data:
            raise linalg_failure(
                FailureCause.NON_POSITIVE_DIMENSION,
                "Matrix row count 0 cannot be less than 1",
            )
        cols = len(data[0])
        if cols == 0:
            raise linalg_failure(
                FailureCause.NON_POSITIVE_DIMENSION,
                "Matrix column count 0 cannot be less than 1",
            )
        for i, row in enumerate(data):
            require_same_dimension(len(row), cols, f"Matrix row {i} length")
        return cls._adopt(data)

    @classmethod
    def _adopt(cls, data: list[list[float]]) -> "Matrix":
        # Принимает владение прямоугольной непустой сеткой
        m = cls.__new__(cls)
        m._rows = len(data)
        m._cols = len(data[0])
        m._data = data
        return m

    def copy(self) -> "Matrix":
        return Matrix.copy_of(self)

    def __copy__(self) -> "Matrix":
        return Matrix.copy_of(self)

    def __deepcopy__(self, memo: dict) -> "Matrix":
        return Matrix.copy_of(self)

    # -------------------------------------------------------------------------
    # Форма и доступ к элементам
    # -------------------------------------------------------------------------

    @property
    def rows(self) -> int:
        """Число строк."""
        return self._rows

    @property
    def cols(self) -> int:
        """Число столбцов."""
        return self._cols

    @property
    def shape(self) -> MatrixShape:
        return MatrixShape(self._rows, self._cols)

    def _require_cell(self, row: int, col: int) -> None:
        require_index(row, self._rows, "Matrix row index")
        require_index(col, self._cols, "Matrix column index")

    def get(self, row: int, col: int) -> float:
        """
        Значение в ячейке (row, col).

        Raises:
            LinAlgFailure: Если row или col вне диапазона
        """
        self._require_cell(row, col)
        return self._data[row][col]

    def set(self, row: int, col: int, value: float) -> None:
        """
        Запись значения в ячейку (row, col).

        Raises:
            LinAlgFailure: Если row или col вне диапазона
            TypeError: Если value не вещественное число
        """
        self._require_cell(row, col)
        self._data[row][col] = as_real(value, "Matrix value")

    def __getitem__(self, key: tuple[int, int]) -> float:
        row, col = key
        return self.get(row, col)

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        row, col = key
        self.set(row, col, value)

    def get_row(self, row: int) -> Vector:
        """
        Новый вектор размерности cols: элемент m[row, j] на позиции j.

        Raises:
            LinAlgFailure: Если row вне [0, rows)
        """
        require_index(row, self._rows, "Matrix row index")
        return Vector.from_values(self._data[row])

    def to_rows(self) -> list[list[float]]:
        """Копия сетки в виде списка строк."""
        return [list(row) for row in self._data]

    def is_finite(self) -> bool:
        """True если все элементы конечны (без NaN/Inf)."""
        return all(is_valid_float(x) for row in self._data for x in row)

    # -------------------------------------------------------------------------
    # Операции
    # -------------------------------------------------------------------------

    def transpose(self) -> "Matrix":
        """Новая матрица t формы (cols, rows), t[j, i] = self[i, j]."""
        return Matrix._adopt(
            [[self._data[i][j] for i in range(self._rows)] for j in range(self._cols)]
        )

    @staticmethod
    def get_identity(dim: int) -> "Matrix":
        """
        Единичная матрица dim × dim.

        Raises:
            LinAlgFailure: Если dim < 1
        """
        require_dimension(dim, "Identity dimension")
        identity = Matrix(dim, dim)
        for i in range(dim):
            identity._data[i][i] = 1.0
        return identity

    @staticmethod
    def multiply_matrix(m1: "Matrix", m2: "Matrix") -> "Matrix":
        """
        Произведение m1 · m2 формы (m1.rows, m2.cols).

        Raises:
            LinAlgFailure: Если m1.cols != m2.rows
        """
        require_same_dimension(
            m1._cols, m2._rows, "Matrix 1 column count must match matrix 2 row count"
        )
        columns = [[row[j] for row in m2._data] for j in range(m2._cols)]
        return Matrix._adopt(
            [[ordered_dot(row, column) for column in columns] for row in m1._data]
        )

    @staticmethod
    def multiply_vector(m: "Matrix", v: Vector) -> Vector:
        """
        Произведение m · v (v как вектор-столбец), размерность m.rows.

        Raises:
            LinAlgFailure: Если m.cols != v.dim
        """
        require_same_dimension(
            m._cols, v.dim, "Matrix column count must match vector dimension"
        )
        values = v.to_list()
        return Vector.from_values(ordered_dot(row, values) for row in m._data)

    @staticmethod
    def multiply(m: "Matrix", other: "Matrix | Vector") -> "Matrix | Vector":
        """
        Произведение матрицы на матрицу или на вектор.

        Raises:
            LinAlgFailure: Если формы несовместимы
            TypeError: Если other не Matrix и не Vector
        """
        if isinstance(other, Matrix):
            return Matrix.multiply_matrix(m, other)
        if isinstance(other, Vector):
            return Matrix.multiply_vector(m, other)
        raise TypeError(
            f"Matrix can only be multiplied by Matrix or Vector, got {type(other).__name__}"
        )

    def __matmul__(self, other: "Matrix | Vector") -> "Matrix | Vector":
        if not isinstance(other, (Matrix, Vector)):
            return NotImplemented
        return Matrix.multiply(self, other)

    # -------------------------------------------------------------------------
    # Равенство и представление
    # -------------------------------------------------------------------------

    def equals(self, other: object) -> bool:
        """
        Структурное равенство: та же форма и равные элементы.

        NaN не равен ничему, -0.0 == +0.0.
        """
        if not isinstance(other, Matrix):
            return False
        if self._rows != other._rows or self._cols != other._cols:
            return False
        for row, other_row in zip(self._data, other._data):
            if not values_equal(row, other_row):
                return False
        return True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.equals(other)

    __hash__ = None  # type: ignore[assignment]

    def format(self, config: FormatConfig | None = None) -> str:
        """Многострочная текстовая форма, каждая строка завершается "\\n"."""
        return format_matrix_lines(self._data, config)

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"Matrix.from_rows({self._data!r})"
