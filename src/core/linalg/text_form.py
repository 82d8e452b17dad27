"""
Text Form — текстовое представление Vector и Matrix

Формат строки вектора:
    "[" + для каждого элемента " %6.3f " + " ]"
    Пример: "[  1.000   2.000  -3.500  ]"

Матрица: каждая строка в формате вектора, завершается "\\n".

Грамматика разбора вектора:
    vector := "[" (WS real)+ WS "]"

Рендеринг с фиксированной точкой является lossy (3 знака после запятой):
результат format() разбирается обратно в вектор той же размерности,
но значения могут быть округлены.
"""

import logging
import re
from typing import Final, Iterable, Sequence

from pydantic import BaseModel, Field

from src.core.linalg.errors import FailureCause, linalg_failure

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

# Открывающий и закрывающий токены текстовой формы
OPEN_TOKEN: Final[str] = "["
CLOSE_TOKEN: Final[str] = "]"

# Ширина поля и число знаков после запятой по умолчанию (%6.3f)
DEFAULT_WIDTH: Final[int] = 6
DEFAULT_PRECISION: Final[int] = 3

# Разделители токенов: только ASCII whitespace (Unicode-пробелы не разделяют)
_TOKEN_SEPARATOR: Final[re.Pattern[str]] = re.compile(r"[ \t\n\r\f\v]+")


# =============================================================================
# CONFIG
# =============================================================================


class FormatConfig(BaseModel):
    """
    Конфигурация рендеринга элементов.

    Immutable модель (frozen=True). По умолчанию соответствует %6.3f.
    """

    width: int = Field(DEFAULT_WIDTH, ge=1, le=64, description="Минимальная ширина поля")
    precision: int = Field(
        DEFAULT_PRECISION, ge=0, le=17, description="Число знаков после запятой"
    )

    model_config = {"frozen": True}  # Immutable

    def render(self, value: float) -> str:
        """Рендеринг одного элемента в fixed-point нотации."""
        return f"{value:{self.width}.{self.precision}f}"


DEFAULT_FORMAT_CONFIG: Final[FormatConfig] = FormatConfig()


# =============================================================================
# RENDERING
# =============================================================================


def format_vector_line(values: Iterable[float], config: FormatConfig | None = None) -> str:
    """
    Однострочное представление последовательности значений.

    Args:
        values: Элементы в порядке индексов
        config: Конфигурация рендеринга (default: DEFAULT_FORMAT_CONFIG)

    Returns:
        Строка вида "[  1.000   2.000  ]"
    """
    cfg = config or DEFAULT_FORMAT_CONFIG
    parts = [OPEN_TOKEN]
    for value in values:
        parts.append(f" {cfg.render(value)} ")
    parts.append(f" {CLOSE_TOKEN}")
    return "".join(parts)


def format_matrix_lines(
    rows: Iterable[Sequence[float]], config: FormatConfig | None = None
) -> str:
    """
    Многострочное представление сетки: одна строка вектора на ряд.

    Каждая строка, включая последнюю, завершается "\\n".
    """
    return "".join(f"{format_vector_line(row, config)}\n" for row in rows)


# =============================================================================
# PARSING
# =============================================================================


def _parse_real_token(token: str) -> float | None:
    # float() принимает Unicode-цифры ("١٢"), поэтому токен должен быть ASCII
    if not token.isascii():
        return None
    try:
        return float(token)
    except ValueError:
        return None


def parse_vector_values(text: str) -> list[float]:
    """
    Разбор текстовой формы вектора.

    Токены разделяются ASCII whitespace. Первый токен должен быть "[",
    последний "]". Внутренние токены должны быть ASCII и разбираются
    через float() (Unicode-цифры и Unicode-пробелы отклоняются).

    Args:
        text: Строка вида "[ 1.0 2.0 3.0 ]"

    Returns:
        Список значений (минимум один элемент)

    Raises:
        LinAlgFailure: Если отсутствует "[" или "]", внутренний токен
            не является числом, либо значений нет

    Examples:
        >>> parse_vector_values("[ 1.0 2.5 ]")
        [1.0, 2.5]
    """
    tokens = [token for token in _TOKEN_SEPARATOR.split(text) if token]

    if len(tokens) < 2 or tokens[0] != OPEN_TOKEN or tokens[-1] != CLOSE_TOKEN:
        raise linalg_failure(
            FailureCause.MALFORMED_PARSE,
            f"missing {OPEN_TOKEN} or {CLOSE_TOKEN} in {text!r}",
        )

    interior = tokens[1:-1]
    if not interior:
        raise linalg_failure(
            FailureCause.MALFORMED_PARSE,
            f"no values between {OPEN_TOKEN} and {CLOSE_TOKEN} in {text!r}",
        )

    values: list[float] = []
    for token in interior:
        value = _parse_real_token(token)
        if value is None:
            logger.debug("Rejected vector token %r", token)
            raise linalg_failure(
                FailureCause.MALFORMED_PARSE,
                f"could not parse {token!r} in {text!r}",
            )
        values.append(value)

    logger.debug("Parsed vector of dim %d", len(values))
    return values
