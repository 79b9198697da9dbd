"""
Domain models and value objects.

Contains the unevaluated hyperoperation expression and its notation.
"""

from hyperoperation.core.domain.expression import (
    Hyperoperation,
    NotationConfig,
    format_up_arrow,
)

__all__ = [
    # Expression model
    "Hyperoperation",
    # Notation
    "NotationConfig",
    "format_up_arrow",
]
