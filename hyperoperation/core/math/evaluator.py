"""
Evaluator — Вычисление гиперопераций

Модуль вычисляет H(rank, base, count) для любого типа T, удовлетворяющего
NumericCapability:
- rank 0: successor (count игнорируется)
- rank 1: addition
- rank 2: multiplication
- rank 3: exponentiation
- rank 4: tetration, и далее

БАЗОВЫЕ СЛУЧАИ (в порядке приоритета):
1. rank == 0             → successor(base)
2. rank == 1             → base + count
3. rank >= 2, count == 0 → 0 для rank 2, 1 для rank >= 3
4. rank >= 2, count == 1 → base

ОБЩИЙ СЛУЧАЙ (rank >= 2, count >= 2):
    H(r, a, c) = H(r - 1, a, H(r, a, c - 1))

    acc = a
    повторить c - 1 раз: acc = H(r - 1, a, to_count(acc))

Рекурсия развёрнута в явный стек кадров [rank, remaining], поэтому глубина
вложенности не ограничена recursion limit интерпретатора.

Ошибок для валидных входов нет: переполнение, wrap-around и рост памяти
определяются выбранным числовым типом.
"""

import logging
from dataclasses import dataclass
from typing import Any, Final, Optional

from hyperoperation.core.math.capability import (
    NativeCapability,
    NumericCapability,
    capability_for,
)
from hyperoperation.core.math.safeguards import (
    RANK_ADDITION,
    RANK_EXPONENTIATION,
    RANK_MULTIPLICATION,
    RANK_SUCCESSOR,
    HyperoperationDomainError,
    arrows_to_rank,
    validate_count,
    validate_rank,
)

logger = logging.getLogger(__name__)

# Маркер вызова, который не закрывается базовым случаем
_UNRESOLVED: Final = object()


# =============================================================================
# EXCEPTIONS
# =============================================================================


class EvaluationBudgetExceeded(RuntimeError):
    """
    Превышен лимит шагов EvaluationConfig.max_steps.

    Лимит опциональный: по умолчанию вычисление не ограничено.
    """
    pass


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class EvaluationConfig:
    """Конфигурация вычисления.

    use_native_shortcuts: использовать +, *, ** для рангов 1-3, если
        capability — NativeCapability. При False все ранги выше 0
        сводятся к successor.
    max_steps: лимит обработанных вызовов (None — без лимита)
    """

    use_native_shortcuts: bool = True
    max_steps: Optional[int] = None


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class EvaluationTrace:
    """Результат вычисления с диагностикой."""

    value: Any
    rank: int
    count: int

    # Диагностика
    steps: int  # Число обработанных вызовов H(rank, count)
    max_depth: int  # Максимальная глубина явного стека
    native_shortcuts: bool

    details: str


# =============================================================================
# BASE CASES
# =============================================================================


def _resolve_base_case(
    base: Any,
    rank: int,
    count: int,
    capability: NumericCapability,
    native: bool,
) -> Any:
    if rank == RANK_SUCCESSOR:
        return capability.successor(base)

    if rank == RANK_ADDITION:
        if native:
            return capability.add(base, count)
        value = base
        for _ in range(count):
            value = capability.successor(value)
        return value

    if count == 0:
        # Нейтральный элемент ранга ниже: 0 для сложения, 1 для умножения и выше
        if rank == RANK_MULTIPLICATION:
            return capability.zero()
        return capability.one()

    if count == 1:
        return base

    if native:
        if rank == RANK_MULTIPLICATION:
            return capability.multiply(base, count)
        if rank == RANK_EXPONENTIATION:
            return capability.power(base, count)

    return _UNRESOLVED


# =============================================================================
# EVALUATION
# =============================================================================


def trace_evaluation(
    base: Any,
    rank: int,
    count: int,
    capability: Optional[NumericCapability] = None,
    config: Optional[EvaluationConfig] = None,
) -> EvaluationTrace:
    """
    Вычисление H(rank, base, count) с диагностикой.

    Args:
        base: Основание (тип T)
        rank: Уровень операции (>= 0)
        count: Число повторений (>= 0)
        capability: Контракт для T (default: capability_for(base))
        config: Конфигурация вычисления

    Returns:
        EvaluationTrace с value и метриками стека

    Raises:
        TypeError: Если rank/count не int
        HyperoperationDomainError: Если rank/count < 0 или промежуточный
            результат даёт отрицательный count
        NumericCapabilityError: Если тип base не удовлетворяет контракту
        EvaluationBudgetExceeded: Если превышен config.max_steps

    Examples:
        >>> trace = trace_evaluation(2, 4, 3)
        >>> trace.value
        16
        >>> trace.max_depth
        1
    """
    validate_rank(rank)
    validate_count(count)

    config = config or EvaluationConfig()
    if capability is None:
        capability = capability_for(base)

    native = config.use_native_shortcuts and isinstance(capability, NativeCapability)

    # Кадр: [rank, оставшиеся применения ранга ниже]
    frames: list[list[int]] = []
    call_rank, call_count = rank, count
    steps = 0
    max_depth = 0

    while True:
        steps += 1
        if config.max_steps is not None and steps > config.max_steps:
            raise EvaluationBudgetExceeded(
                f"Evaluation of rank={rank} count={count} exceeded "
                f"max_steps={config.max_steps} (stack depth {len(frames)})"
            )

        value = _resolve_base_case(base, call_rank, call_count, capability, native)
        if value is _UNRESOLVED:
            frames.append([call_rank, call_count - 1])
            max_depth = max(max_depth, len(frames))
            value = base

        # Закрытые кадры отдают value своему родителю без изменений
        while frames and frames[-1][1] == 0:
            frames.pop()

        if not frames:
            break

        frame = frames[-1]
        frame[1] -= 1
        call_rank = frame[0] - 1
        call_count = capability.to_count(value)

        if isinstance(call_count, int) and call_count < 0:
            raise HyperoperationDomainError(
                f"Intermediate result {value!r} at rank {frame[0]} "
                f"converts to negative count {call_count}"
            )
        validate_count(call_count)

    details = (
        f"rank={rank} count={count} steps={steps} "
        f"max_depth={max_depth} native={native}"
    )
    logger.debug("hyperoperation evaluated: %s", details)

    return EvaluationTrace(
        value=value,
        rank=rank,
        count=count,
        steps=steps,
        max_depth=max_depth,
        native_shortcuts=native,
        details=details,
    )


def evaluate(
    base: Any,
    rank: int,
    count: int,
    capability: Optional[NumericCapability] = None,
    config: Optional[EvaluationConfig] = None,
) -> Any:
    """
    Вычисление H(rank, base, count).

    Examples:
        >>> evaluate(5, 0, 100)  # successor
        6
        >>> evaluate(5, 1, 3)  # 5 + 3
        8
        >>> evaluate(5, 2, 3)  # 5 * 3
        15
        >>> evaluate(5, 3, 3)  # 5 ** 3
        125
        >>> evaluate(5, 2, 0)
        0
        >>> evaluate(5, 3, 0)
        1
    """
    return trace_evaluation(base, rank, count, capability, config).value


def hyperoperation(
    base: Any,
    count: int,
    arrows: int,
    capability: Optional[NumericCapability] = None,
    config: Optional[EvaluationConfig] = None,
) -> Any:
    """
    Вычисление выражения в нотации Кнута: base ↑^arrows count.

    Ноль стрелок — умножение, одна стрелка — степень, две — tetration.
    Эквивалентно evaluate(base, arrows + 2, count) и
    Hyperoperation(base, count, arrows).evaluate().

    Args:
        base: Первое число (до стрелок)
        count: Второе число (после стрелок)
        arrows: Число стрелок

    Examples:
        >>> hyperoperation(3, 3, 2)  # 3 ↑↑ 3
        7625597484987
        >>> hyperoperation(4, 7, 0)  # 4 × 7
        28
    """
    return evaluate(base, arrows_to_rank(arrows), count, capability, config)
