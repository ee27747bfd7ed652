"""
Generic result container for all pypenalized computations.

The Result class provides a standardized envelope that every engine binding
returns. This enables shared tooling for timing, reporting and
reproducibility while letting each engine define its own diagnostics.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, messages, evaluation counts)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for an optimization run.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific parameters (coefficients, objective, ...)
        info: Structured metadata (method, engine message, diagnostics)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=PenalizedParams(coefficients=beta, ...),
        ...     info={'method': 'L-BFGS-B', 'n_function_evals': 31},
        ...     timing={'total_seconds': 0.01},
        ...     backend_name='cpu_lbfgsb'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
