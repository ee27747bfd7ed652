"""
Core infrastructure for pypenalized.

This module provides shared abstractions and utilities used by the model
layer and by the optimization engine bindings.

Key components:
    protocols: ScorableModel, Backend protocols
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Finite differences, timing, tolerances
    datasource: Numeric matrix file reader
"""

from pypenalized.core.protocols import ScorableModel, Backend
from pypenalized.core.result import Result
from pypenalized.core.exceptions import (
    PyPenalizedError,
    ValidationError,
    DimensionError,
    ShapeMismatchError,
    InvalidStepSizeError,
)

__all__ = [
    # Protocols
    "ScorableModel",
    "Backend",
    # Result
    "Result",
    # Exceptions
    "PyPenalizedError",
    "ValidationError",
    "DimensionError",
    "ShapeMismatchError",
    "InvalidStepSizeError",
]
