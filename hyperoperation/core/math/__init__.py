"""
Core math modules для hyperoperation

Контракт числового типа и вычисление гиперопераций.
"""

# Safeguards
from hyperoperation.core.math.safeguards import (
    KNUTH_RANK_OFFSET,
    RANK_ADDITION,
    RANK_EXPONENTIATION,
    RANK_MULTIPLICATION,
    RANK_SUCCESSOR,
    RANK_TETRATION,
    HyperoperationDomainError,
    arrows_to_rank,
    rank_to_arrows,
    validate_arrows,
    validate_count,
    validate_rank,
)

# Numeric Capability
from hyperoperation.core.math.capability import (
    NativeCapability,
    NumericCapability,
    NumericCapabilityError,
    capability_for,
)

# Evaluator
from hyperoperation.core.math.evaluator import (
    EvaluationBudgetExceeded,
    EvaluationConfig,
    EvaluationTrace,
    evaluate,
    hyperoperation,
    trace_evaluation,
)

__all__ = [
    # Safeguards — Constants
    "KNUTH_RANK_OFFSET",
    "RANK_ADDITION",
    "RANK_EXPONENTIATION",
    "RANK_MULTIPLICATION",
    "RANK_SUCCESSOR",
    "RANK_TETRATION",
    # Safeguards — Exceptions
    "HyperoperationDomainError",
    # Safeguards — Functions
    "arrows_to_rank",
    "rank_to_arrows",
    "validate_arrows",
    "validate_count",
    "validate_rank",
    # Numeric Capability — Types
    "NativeCapability",
    "NumericCapability",
    # Numeric Capability — Exceptions
    "NumericCapabilityError",
    # Numeric Capability — Functions
    "capability_for",
    # Evaluator — Exceptions
    "EvaluationBudgetExceeded",
    # Evaluator — Types
    "EvaluationConfig",
    "EvaluationTrace",
    # Evaluator — Functions
    "evaluate",
    "hyperoperation",
    "trace_evaluation",
]
