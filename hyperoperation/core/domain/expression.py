"""
Hyperoperation — Модель невычисленного выражения

Immutable Pydantic модель (base, count, arrows), представляющая выражение
в нотации Кнута: base ↑^arrows count.

    Hyperoperation(3, 3, 2)  →  "3 ↑↑ 3"  →  7625597484987

Соответствие arrows → rank:
    0 стрелок = multiplication (rank 2), отображается как "×"
    1 стрелка = exponentiation (rank 3)
    2 стрелки = tetration (rank 4)
"""

from dataclasses import dataclass
from typing import Any, Optional

from pydantic import BaseModel, Field

from hyperoperation.core.math.capability import NumericCapability
from hyperoperation.core.math.evaluator import EvaluationConfig, hyperoperation
from hyperoperation.core.math.safeguards import (
    KNUTH_RANK_OFFSET,
    rank_to_arrows,
    validate_arrows,
)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class NotationConfig:
    """Конфигурация отображения в нотации Кнута."""

    arrow_symbol: str = "↑"
    multiplication_symbol: str = "×"  # Для arrows == 0
    separator: str = " "


def format_up_arrow(
    base: Any,
    count: Any,
    arrows: int,
    config: Optional[NotationConfig] = None,
) -> str:
    """
    Форматирование выражения в нотации Кнута.

    Чистая функция полей, вычисление не выполняется.

    Examples:
        >>> format_up_arrow(3, 3, 2)
        '3 ↑↑ 3'
        >>> format_up_arrow(4, 7, 0)
        '4 × 7'
        >>> format_up_arrow(3, 3, 2, NotationConfig(arrow_symbol="^"))
        '3 ^^ 3'
    """
    validate_arrows(arrows)
    config = config or NotationConfig()

    if arrows == 0:
        operator_text = config.multiplication_symbol
    else:
        operator_text = config.arrow_symbol * arrows

    return config.separator.join((str(base), operator_text, str(count)))


# =============================================================================
# HYPEROPERATION MODEL
# =============================================================================


class Hyperoperation(BaseModel):
    """
    Модель выражения гипероперации.

    Immutable модель (frozen=True): другое выражение — новый экземпляр.
    base может быть любым типом, удовлетворяющим NumericCapability
    (int, Fraction, Decimal, ...).
    """

    base: Any = Field(..., description="Первое число, до стрелок")
    count: int = Field(..., ge=0, strict=True, description="Второе число, после стрелок")
    arrows: int = Field(..., ge=0, strict=True, description="Число стрелок в нотации Кнута")

    model_config = {"frozen": True, "arbitrary_types_allowed": True}  # Immutable

    def __init__(self, base: Any, count: int, arrows: int):
        super().__init__(base=base, count=count, arrows=arrows)

    @classmethod
    def from_rank(cls, base: Any, count: int, rank: int) -> "Hyperoperation":
        """
        Создание выражения по rank гипероперации.

        Raises:
            HyperoperationDomainError: Если rank < 2
        """
        return cls(base, count, rank_to_arrows(rank))

    @property
    def rank(self) -> int:
        """Rank гипероперации (arrows + 2)."""
        return self.arrows + KNUTH_RANK_OFFSET

    def evaluate(
        self,
        capability: Optional[NumericCapability] = None,
        config: Optional[EvaluationConfig] = None,
    ) -> Any:
        """
        Вычисление значения выражения.

        Для выражений вроде 3 ↑↑↑ 3 вычисление может занять очень много
        времени или переполнить фиксированный тип. Для точных больших
        результатов используйте int (arbitrary precision).

        Examples:
            >>> Hyperoperation(3, 3, 2).evaluate()
            7625597484987
        """
        return hyperoperation(self.base, self.count, self.arrows, capability, config)

    def notation(self, config: Optional[NotationConfig] = None) -> str:
        """Отображение в нотации Кнута."""
        return format_up_arrow(self.base, self.count, self.arrows, config)

    def __str__(self) -> str:
        return self.notation()
