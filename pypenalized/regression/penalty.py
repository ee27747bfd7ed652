"""
Penalty specification.

A PenaltySpecification tells an optimization engine how to penalize each
parameter: one kind tag per parameter, a sequence of strengths (lambda)
and a sequence of shape parameters (theta). The model never looks at it.

Kinds:
    'none'   unpenalized
    'lasso'  lambda * |b|
    'ridge'  lambda * b²

Strength and shape sequences of length 1 apply to every parameter;
otherwise they must have one entry per parameter.

Which parameters stay unpenalized (typically the intercept) is an explicit
argument of the constructors below, never an assumption about column 0.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pypenalized.core.exceptions import ValidationError
from pypenalized.core.validation import check_array, check_finite, check_length

PENALTY_NONE = 'none'
PENALTY_LASSO = 'lasso'
PENALTY_RIDGE = 'ridge'

PENALTY_KINDS = frozenset({PENALTY_NONE, PENALTY_LASSO, PENALTY_RIDGE})


@dataclass(frozen=True)
class PenaltySpecification:
    """
    Per-parameter penalty kinds with strengths and shape parameters.

    Attributes:
        kinds: One tag from PENALTY_KINDS per parameter
        lambdas: Penalty strengths, length 1 or len(kinds)
        thetas: Shape parameters, length 1 or len(kinds); carried through
            to the engine, unused by 'lasso' and 'ridge'
    """
    kinds: tuple[str, ...]
    lambdas: tuple[float, ...]
    thetas: tuple[float, ...] = (0.0,)

    def __post_init__(self):
        unknown = sorted(set(self.kinds) - PENALTY_KINDS)
        if unknown:
            raise ValidationError(
                f"penalty: unknown kinds {unknown}. Available: {sorted(PENALTY_KINDS)}"
            )
        for name, values in (('lambdas', self.lambdas), ('thetas', self.thetas)):
            if len(values) not in (1, len(self.kinds)):
                raise ValidationError(
                    f"penalty: {name} must have length 1 or {len(self.kinds)}, "
                    f"got {len(values)}"
                )
            check_finite(np.asarray(values, dtype=np.float64), f"penalty.{name}")
        if any(lam < 0 for lam in self.lambdas):
            raise ValidationError(f"penalty: lambdas must be >= 0, got {self.lambdas}")

    @classmethod
    def build(
        cls,
        kinds: Iterable[str],
        lambdas: ArrayLike,
        thetas: ArrayLike = (0.0,),
    ) -> PenaltySpecification:
        """Build from any iterables / array-likes."""
        lam = check_array(lambdas, 'lambdas').reshape(-1)
        theta = check_array(thetas, 'thetas').reshape(-1)
        return cls(
            kinds=tuple(str(k) for k in kinds),
            lambdas=tuple(float(v) for v in lam),
            thetas=tuple(float(v) for v in theta),
        )

    @classmethod
    def lasso(
        cls,
        n_parameters: int,
        lam: float,
        *,
        unpenalized: Sequence[int] = (),
    ) -> PenaltySpecification:
        """
        Lasso on every parameter except those listed in ``unpenalized``.

        Example:
            >>> PenaltySpecification.lasso(3, 0.1, unpenalized=(0,)).kinds
            ('none', 'lasso', 'lasso')
        """
        return cls._uniform(n_parameters, PENALTY_LASSO, lam, unpenalized)

    @classmethod
    def ridge(
        cls,
        n_parameters: int,
        lam: float,
        *,
        unpenalized: Sequence[int] = (),
    ) -> PenaltySpecification:
        """Ridge on every parameter except those listed in ``unpenalized``."""
        return cls._uniform(n_parameters, PENALTY_RIDGE, lam, unpenalized)

    @classmethod
    def _uniform(
        cls,
        n_parameters: int,
        kind: str,
        lam: float,
        unpenalized: Sequence[int],
    ) -> PenaltySpecification:
        free = set(unpenalized)
        out_of_range = sorted(i for i in free if not 0 <= i < n_parameters)
        if out_of_range:
            raise ValidationError(
                f"unpenalized: indices {out_of_range} out of range for "
                f"{n_parameters} parameters"
            )
        kinds = tuple(
            PENALTY_NONE if i in free else kind for i in range(n_parameters)
        )
        return cls(kinds=kinds, lambdas=(float(lam),), thetas=(0.0,))

    # === Per-parameter views ===

    @property
    def n_parameters(self) -> int:
        return len(self.kinds)

    def lambda_vector(self) -> NDArray[np.floating[Any]]:
        """Strengths broadcast to one entry per parameter."""
        return np.broadcast_to(
            np.asarray(self.lambdas, dtype=np.float64), (self.n_parameters,)
        ).copy()

    def theta_vector(self) -> NDArray[np.floating[Any]]:
        """Shape parameters broadcast to one entry per parameter."""
        return np.broadcast_to(
            np.asarray(self.thetas, dtype=np.float64), (self.n_parameters,)
        ).copy()

    def indices(self, kind: str) -> NDArray[np.intp]:
        """Indices of the parameters with the given kind."""
        return np.flatnonzero(np.array([k == kind for k in self.kinds], dtype=bool))

    def penalty_value(self, b: ArrayLike) -> float:
        """Total penalty Σ λ|b| over lasso plus Σ λb² over ridge parameters."""
        b = check_array(b, 'parameters').reshape(-1)
        check_length(b, self.n_parameters, 'parameters')
        lam = self.lambda_vector()
        lasso = self.indices(PENALTY_LASSO)
        ridge = self.indices(PENALTY_RIDGE)
        return float(
            np.sum(lam[lasso] * np.abs(b[lasso]))
            + np.sum(lam[ridge] * b[ridge] ** 2)
        )
