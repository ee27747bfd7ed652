"""
Core protocols for pypenalized.

These define structural interfaces that models and optimization engines
must satisfy. We use Protocol (structural typing) rather than ABC (nominal
typing) so a new loss function can be dropped in without inheriting from
anything in this package.

Design Principles:
    - Minimal contracts: prescribe only what every engine actually calls
    - Capability-driven: use supports() for optional features (Hessian)
    - Type-safe: use generics to preserve type information through pipelines
"""

from typing import Protocol, TypeVar, Any, runtime_checkable

import numpy as np
from numpy.typing import NDArray

# Type variables for generic payloads
P = TypeVar('P')  # Parameter payload type
M = TypeVar('M')  # Model type


@runtime_checkable
class ScorableModel(Protocol):
    """
    Minimal protocol for anything a penalized optimization engine can fit.

    An engine only ever asks two questions of a model: "what is the loss
    here?" and "what is the gradient here?". Both take a parameter vector
    and must not mutate it or any state of the model.

    The gradient must be aligned index-for-index with the parameter
    vector: entry i is the partial derivative with respect to parameter i.
    Engines rely on this without checking labels.

    Implementations: LeastSquaresModel. Future loss kinds (logistic,
    robust) implement the same methods and need no engine changes.
    """

    @property
    def n_parameters(self) -> int:
        """Number of parameters the model expects."""
        ...

    def evaluate_loss(self, parameters: NDArray[np.floating[Any]]) -> float:
        """Scalar loss at the given parameters."""
        ...

    def evaluate_gradient(
        self, parameters: NDArray[np.floating[Any]]
    ) -> NDArray[np.floating[Any]]:
        """Gradient of the loss at the given parameters."""
        ...

    def supports(self, capability: str) -> bool:
        """
        Check if this model supports a given capability.

        Standard capability strings live in pypenalized.core.capabilities.

        Note:
            Unknown capabilities MUST return False, never raise.
        """
        ...


@runtime_checkable
class Backend(Protocol[M, P]):
    """
    Protocol for optimization engine bindings.

    Each backend takes a ScorableModel, a starting parameter vector and a
    penalty specification, hands the model's callables to an external
    optimizer and produces a parameter payload.

    Backends are stateless: all configuration is passed to solve() or at
    construction time.

    Type Parameters:
        M: The model type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}'
        Examples: 'cpu_trust_constr', 'cpu_lbfgsb'
        """
        ...

    def solve(self, model: M, start: NDArray, penalty: Any, **options: Any) -> 'Result[P]':
        """
        Run the optimization.

        Returns:
            Result envelope containing parameter payload and metadata

        Raises:
            ValidationError: If the penalty or start vector do not fit the model
        """
        ...
