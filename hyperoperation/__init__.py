"""
hyperoperation — successor, addition, multiplication, exponentiation,
tetration and beyond, with Knuth's up-arrow notation.

    >>> from hyperoperation import Hyperoperation, hyperoperation
    >>> hyperoperation(3, 3, 2)
    7625597484987
    >>> str(Hyperoperation(3, 3, 2))
    '3 ↑↑ 3'
"""

from hyperoperation.core.domain import Hyperoperation, NotationConfig, format_up_arrow
from hyperoperation.core.math import (
    EvaluationBudgetExceeded,
    EvaluationConfig,
    EvaluationTrace,
    HyperoperationDomainError,
    NativeCapability,
    NumericCapability,
    NumericCapabilityError,
    capability_for,
    evaluate,
    hyperoperation,
    trace_evaluation,
)

__all__ = [
    "Hyperoperation",
    "NotationConfig",
    "format_up_arrow",
    "EvaluationBudgetExceeded",
    "EvaluationConfig",
    "EvaluationTrace",
    "HyperoperationDomainError",
    "NativeCapability",
    "NumericCapability",
    "NumericCapabilityError",
    "capability_for",
    "evaluate",
    "hyperoperation",
    "trace_evaluation",
]

__version__ = "0.1.0"
