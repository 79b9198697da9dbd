"""
Safeguards — Валидация входов hyperoperation

Модуль проверяет целочисленные параметры операции до начала вычисления:
- rank (уровень гипероперации: 0 = successor, 1 = addition, 2 = multiplication, ...)
- count (число повторений операции)
- arrows (число стрелок в нотации Кнута)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. rank, count, arrows — только int (bool отвергается)
2. Отрицательные значения → HyperoperationDomainError
3. Промежуточный результат, превращённый в count, проходит ту же проверку
"""

from typing import Final

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Смещение между числом стрелок Кнута и rank гипероперации:
# a ↑ b = a ** b (rank 3), a ↑↑ b — tetration (rank 4)
# Ноль стрелок соответствует умножению (rank 2)
KNUTH_RANK_OFFSET: Final[int] = 2

# Ранги, у которых есть замкнутая форма через нативные операторы
RANK_SUCCESSOR: Final[int] = 0
RANK_ADDITION: Final[int] = 1
RANK_MULTIPLICATION: Final[int] = 2
RANK_EXPONENTIATION: Final[int] = 3
RANK_TETRATION: Final[int] = 4


# =============================================================================
# EXCEPTIONS
# =============================================================================


class HyperoperationDomainError(ValueError):
    """
    Нарушение domain гипероперации: отрицательный rank, count или arrows.

    Возникает также, если промежуточный результат при переходе на ранг ниже
    превращается в отрицательное число повторений (например, при
    отрицательном base на rank >= 4).
    """
    pass


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def _validate_non_negative_int(value: int, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}: {value!r}")

    if value < 0:
        raise HyperoperationDomainError(f"{name} must be non-negative, got {value}")

    return value


def validate_rank(rank: int) -> int:
    """
    Валидация rank гипероперации.

    Args:
        rank: Уровень операции (0 = successor, 1 = addition, ...)

    Returns:
        rank без изменений

    Raises:
        TypeError: Если rank не int (или bool)
        HyperoperationDomainError: Если rank < 0

    Examples:
        >>> validate_rank(4)
        4
    """
    return _validate_non_negative_int(rank, "rank")


def validate_count(count: int) -> int:
    """
    Валидация count (числа повторений).

    Args:
        count: Число повторений операции

    Returns:
        count без изменений

    Raises:
        TypeError: Если count не int (или bool)
        HyperoperationDomainError: Если count < 0
    """
    return _validate_non_negative_int(count, "count")


def validate_arrows(arrows: int) -> int:
    """
    Валидация числа стрелок в нотации Кнута.

    Raises:
        TypeError: Если arrows не int (или bool)
        HyperoperationDomainError: Если arrows < 0
    """
    return _validate_non_negative_int(arrows, "arrows")


def arrows_to_rank(arrows: int) -> int:
    """
    Конверсия: число стрелок → rank.

    Examples:
        >>> arrows_to_rank(0)  # a × b
        2
        >>> arrows_to_rank(2)  # a ↑↑ b
        4
    """
    return validate_arrows(arrows) + KNUTH_RANK_OFFSET


def rank_to_arrows(rank: int) -> int:
    """
    Конверсия: rank → число стрелок.

    Raises:
        HyperoperationDomainError: Если rank < 2 (successor и addition
            не имеют записи в нотации Кнута)

    Examples:
        >>> rank_to_arrows(3)
        1
    """
    validate_rank(rank)

    if rank < KNUTH_RANK_OFFSET:
        raise HyperoperationDomainError(
            f"rank {rank} has no up-arrow form (minimum rank is {KNUTH_RANK_OFFSET})"
        )

    return rank - KNUTH_RANK_OFFSET
