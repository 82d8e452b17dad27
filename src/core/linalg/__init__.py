"""
Dense linear algebra для вещественных векторов и матриц

Value-типы Vector и Matrix с собственным хранилищем, упорядоченным
суммированием в произведениях и единственным типом ошибки LinAlgFailure.
"""

# Errors
from src.core.linalg.errors import (
    FailureCause,
    LinAlgFailure,
    linalg_failure,
)

# Safeguards
from src.core.linalg.safeguards import (
    as_real,
    is_valid_float,
    ordered_dot,
    require_dimension,
    require_index,
    require_same_dimension,
    values_equal,
)

# Text form
from src.core.linalg.text_form import (
    DEFAULT_FORMAT_CONFIG,
    FormatConfig,
    format_matrix_lines,
    format_vector_line,
    parse_vector_values,
)

# Value types
from src.core.linalg.vector import Vector
from src.core.linalg.matrix import Matrix, MatrixShape

__all__ = [
    # Errors
    "FailureCause",
    "LinAlgFailure",
    "linalg_failure",
    # Safeguards
    "as_real",
    "is_valid_float",
    "ordered_dot",
    "require_dimension",
    "require_index",
    "require_same_dimension",
    "values_equal",
    # Text form
    "DEFAULT_FORMAT_CONFIG",
    "FormatConfig",
    "format_matrix_lines",
    "format_vector_line",
    "parse_vector_values",
    # Value types
    "Matrix",
    "MatrixShape",
    "Vector",
]
