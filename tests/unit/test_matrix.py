"""
Тесты для Matrix

Проверяемые инварианты:
1. rows >= 1, cols >= 1
2. get_row кладёт m[i, j] на позицию j
3. transpose, multiply, get_row не изменяют операнды
4. Ошибка предусловия не изменяет операнды
5. Упорядоченное суммирование в произведениях
"""

import copy
import math

import pytest

from src.core.linalg.errors import LinAlgFailure
from src.core.linalg.matrix import Matrix, MatrixShape
from src.core.linalg.vector import Vector


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def a() -> Matrix:
    """A = [[1, 2], [3, 4]]."""
    return Matrix.from_rows([[1.0, 2.0], [3.0, 4.0]])


@pytest.fixture
def b() -> Matrix:
    """B = [[5, 6], [7, 8]]."""
    return Matrix.from_rows([[5.0, 6.0], [7.0, 8.0]])


@pytest.fixture
def rect() -> Matrix:
    """Прямоугольная матрица 2 × 3."""
    return Matrix.from_rows([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])


# =============================================================================
# ТЕСТЫ: Конструирование
# =============================================================================


class TestMatrixConstruction:
    """Тесты конструкторов Matrix."""

    def test_zeros_of_given_shape(self) -> None:
        m = Matrix(2, 3)
        assert m.rows == 2
        assert m.cols == 3
        assert m.shape == MatrixShape(2, 3)
        assert m.to_rows() == [[0.0, 0.0, 0.0], [0.0, 0.0, 0.0]]

    def test_one_by_one(self) -> None:
        m = Matrix(1, 1)
        assert m.shape == (1, 1)
        assert m.get(0, 0) == 0.0

    @pytest.mark.parametrize("rows,cols", [(0, 1), (1, 0), (-1, 3), (0, 0)])
    def test_non_positive_shape_rejected(self, rows: int, cols: int) -> None:
        with pytest.raises(LinAlgFailure, match="non-positive dimension"):
            Matrix(rows, cols)

    def test_copy_independence(self, a: Matrix) -> None:
        """Мутация копии не затрагивает оригинал и наоборот."""
        c = Matrix.copy_of(a)
        assert c.equals(a)
        c.set(0, 0, 100.0)
        assert a.get(0, 0) == 1.0
        a.set(1, 1, -4.0)
        assert c.get(1, 1) == 4.0

    def test_copy_module_support(self, a: Matrix) -> None:
        for c in (copy.copy(a), copy.deepcopy(a), a.copy()):
            assert c == a
            c[0, 1] = 0.0
            assert a[0, 1] == 2.0

    def test_from_rows_empty_rejected(self) -> None:
        with pytest.raises(LinAlgFailure, match="non-positive dimension"):
            Matrix.from_rows([])
        with pytest.raises(LinAlgFailure, match="non-positive dimension"):
            Matrix.from_rows([[]])

    def test_from_rows_ragged_rejected(self) -> None:
        with pytest.raises(LinAlgFailure, match="dimension mismatch"):
            Matrix.from_rows([[1.0, 2.0], [3.0]])

    def test_to_rows_is_a_copy(self, a: Matrix) -> None:
        rows = a.to_rows()
        rows[0][0] = 42.0
        assert a.get(0, 0) == 1.0


# =============================================================================
# ТЕСТЫ: Доступ к элементам
# =============================================================================


class TestMatrixAccess:
    """Тесты get/set/get_row."""

    def test_get_set(self, rect: Matrix) -> None:
        assert rect.get(1, 2) == 6.0
        rect.set(1, 2, -1.0)
        assert rect[1, 2] == -1.0

    @pytest.mark.parametrize("row,col", [(-1, 0), (2, 0), (0, -1), (0, 3)])
    def test_out_of_bounds(self, rect: Matrix, row: int, col: int) -> None:
        with pytest.raises(LinAlgFailure, match="index out of bounds"):
            rect.get(row, col)
        with pytest.raises(LinAlgFailure, match="index out of bounds"):
            rect.set(row, col, 1.0)
        assert rect.to_rows() == [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]]

    @pytest.mark.parametrize("value", ["1.5", 1j])
    def test_set_non_real_rejected(self, rect: Matrix, value: object) -> None:
        """Строки и complex не записываются в матрицу."""
        with pytest.raises(TypeError):
            rect.set(0, 0, value)  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            rect[0, 0] = value  # type: ignore[assignment]
        assert rect.get(0, 0) == 1.0

    def test_from_rows_non_real_rejected(self) -> None:
        with pytest.raises(TypeError):
            Matrix.from_rows([["1", "2"]])  # type: ignore[list-item]

    def test_get_row_places_values_by_column(self, rect: Matrix) -> None:
        """get_row(i)[j] == m[i, j]."""
        row = rect.get_row(1)
        assert row.dim == 3
        assert row.to_list() == [4.0, 5.0, 6.0]

    def test_get_row_is_independent(self, rect: Matrix) -> None:
        row = rect.get_row(0)
        row.set(0, 99.0)
        assert rect.get(0, 0) == 1.0

    def test_get_row_out_of_bounds(self, rect: Matrix) -> None:
        with pytest.raises(LinAlgFailure, match="index out of bounds"):
            rect.get_row(2)

    def test_is_finite(self, a: Matrix) -> None:
        assert a.is_finite()
        a.set(1, 0, math.nan)
        assert not a.is_finite()


# =============================================================================
# ТЕСТЫ: Транспонирование и единичная матрица
# =============================================================================


class TestTransposeAndIdentity:
    """Тесты transpose и get_identity."""

    def test_transpose_square(self, a: Matrix) -> None:
        """A^T = [[1, 3], [2, 4]]."""
        assert a.transpose().to_rows() == [[1.0, 3.0], [2.0, 4.0]]
        assert a.to_rows() == [[1.0, 2.0], [3.0, 4.0]]

    def test_transpose_rectangular(self, rect: Matrix) -> None:
        t = rect.transpose()
        assert t.shape == (3, 2)
        for i in range(rect.rows):
            for j in range(rect.cols):
                assert t.get(j, i) == rect.get(i, j)

    def test_transpose_involution(self, rect: Matrix) -> None:
        assert rect.transpose().transpose().equals(rect)

    def test_identity(self) -> None:
        identity = Matrix.get_identity(3)
        assert identity.to_rows() == [
            [1.0, 0.0, 0.0],
            [0.0, 1.0, 0.0],
            [0.0, 0.0, 1.0],
        ]

    def test_identity_dim_one(self) -> None:
        assert Matrix.get_identity(1).to_rows() == [[1.0]]

    def test_identity_invalid(self) -> None:
        with pytest.raises(LinAlgFailure, match="non-positive dimension"):
            Matrix.get_identity(0)

    def test_identity_format(self) -> None:
        assert Matrix.get_identity(3).format() == (
            "[  1.000   0.000   0.000  ]\n"
            "[  0.000   1.000   0.000  ]\n"
            "[  0.000   0.000   1.000  ]\n"
        )


# =============================================================================
# ТЕСТЫ: Произведения
# =============================================================================


class TestMultiply:
    """Тесты Matrix.multiply."""

    def test_matrix_matrix(self, a: Matrix, b: Matrix) -> None:
        """A · B = [[19, 22], [43, 50]]."""
        product = Matrix.multiply(a, b)
        assert isinstance(product, Matrix)
        assert product.to_rows() == [[19.0, 22.0], [43.0, 50.0]]
        assert a.to_rows() == [[1.0, 2.0], [3.0, 4.0]]
        assert b.to_rows() == [[5.0, 6.0], [7.0, 8.0]]

    def test_matmul_operator(self, a: Matrix, b: Matrix) -> None:
        assert (a @ b).equals(Matrix.multiply_matrix(a, b))

    def test_rectangular_shapes(self, rect: Matrix) -> None:
        product = Matrix.multiply(rect, rect.transpose())
        assert product.shape == (2, 2)
        assert product.to_rows() == [[14.0, 32.0], [32.0, 77.0]]

    def test_matrix_matrix_mismatch(self, rect: Matrix) -> None:
        other = Matrix(2, 2)
        with pytest.raises(LinAlgFailure, match="dimension mismatch"):
            Matrix.multiply(rect, other)
        assert rect.to_rows() == [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]]

    def test_matrix_vector(self, rect: Matrix) -> None:
        v = Vector.from_values([1.0, 0.0, -1.0])
        result = Matrix.multiply(rect, v)
        assert isinstance(result, Vector)
        assert result.to_list() == [-2.0, -2.0]
        assert (rect @ v).equals(result)
        assert v.to_list() == [1.0, 0.0, -1.0]

    def test_matrix_vector_mismatch_leaves_operands_unchanged(self, a: Matrix) -> None:
        """2×2 · dim 3 → dimension mismatch, операнды не меняются."""
        v = Vector.from_values([1.0, 2.0, 3.0])
        with pytest.raises(LinAlgFailure, match="dimension mismatch"):
            Matrix.multiply(a, v)
        assert a.to_rows() == [[1.0, 2.0], [3.0, 4.0]]
        assert v.to_list() == [1.0, 2.0, 3.0]

    def test_identity_neutral(self, rect: Matrix) -> None:
        assert Matrix.multiply(Matrix.get_identity(2), rect).equals(rect)
        assert Matrix.multiply(rect, Matrix.get_identity(3)).equals(rect)

    def test_ordered_summation(self) -> None:
        """Суммирование по возрастанию k без компенсации."""
        m1 = Matrix.from_rows([[1.0, 1e100, 1.0, -1e100]])
        m2 = Matrix.from_rows([[1.0], [1.0], [1.0], [1.0]])
        assert Matrix.multiply(m1, m2).get(0, 0) == 0.0

    def test_wrong_operand_type(self, a: Matrix) -> None:
        with pytest.raises(TypeError):
            Matrix.multiply(a, 2.0)  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            a @ 2.0  # type: ignore[operator]


# =============================================================================
# ТЕСТЫ: Равенство и форматирование
# =============================================================================


class TestMatrixEqualityAndFormat:
    """Тесты equals и format."""

    def test_equal(self, a: Matrix) -> None:
        assert a.equals(Matrix.from_rows([[1, 2], [3, 4]]))
        assert a == a.copy()

    def test_shape_mismatch_unequal(self, rect: Matrix) -> None:
        assert not rect.equals(rect.transpose())

    def test_other_types_unequal(self, a: Matrix) -> None:
        assert not a.equals([[1.0, 2.0], [3.0, 4.0]])
        assert a != Vector.from_values([1.0, 2.0])

    def test_nan_never_equal(self) -> None:
        m = Matrix.from_rows([[math.nan]])
        assert not m.equals(m)

    def test_signed_zero_equal(self) -> None:
        assert Matrix.from_rows([[0.0]]) == Matrix.from_rows([[-0.0]])

    def test_unhashable(self, a: Matrix) -> None:
        with pytest.raises(TypeError):
            hash(a)

    def test_format(self, a: Matrix) -> None:
        text = a.format()
        assert text == "[  1.000   2.000  ]\n[  3.000   4.000  ]\n"
        assert text.endswith("\n")
        assert str(a) == text

    def test_format_rows_parse_as_vectors(self, rect: Matrix) -> None:
        """Каждая строка format() является валидной формой вектора."""
        lines = rect.format().splitlines()
        assert len(lines) == rect.rows
        for i, line in enumerate(lines):
            assert Vector.parse(line).equals(rect.get_row(i))
