"""
Penalized regression solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pypenalized.core.result import Result
from pypenalized.regression.penalty import PenaltySpecification, PENALTY_NONE

if TYPE_CHECKING:
    from pypenalized.regression.design import Design


@dataclass(frozen=True)
class PenalizedParams:
    """
    Parameter payload for a penalized fit.

    This is the immutable data computed by backends.
    """
    coefficients: NDArray[np.floating[Any]]
    objective_value: float
    loss_value: float
    penalty_value: float
    n_iter: int
    converged: bool
    gradient_norm: float | None = None


@dataclass
class PenalizedSolution:
    """
    User-facing penalized regression results.

    Wraps the backend Result together with the design, the penalty and
    the warm-start Hessian (if one was used).
    """
    _result: Result[PenalizedParams]
    _design: 'Design'
    _penalty: PenaltySpecification
    _initial_hessian: NDArray[np.floating[Any]] | None = None

    @property
    def coefficients(self) -> NDArray[np.floating[Any]]:
        """Final parameter estimates, in design-matrix column order."""
        return self._result.params.coefficients

    @property
    def objective_value(self) -> float:
        """Loss plus penalty at the estimates."""
        return self._result.params.objective_value

    @property
    def loss_value(self) -> float:
        """Unpenalized loss ||y - Xb||² / (2N) at the estimates."""
        return self._result.params.loss_value

    @property
    def penalty_value(self) -> float:
        return self._result.params.penalty_value

    @property
    def converged(self) -> bool:
        return self._result.params.converged

    @property
    def n_iter(self) -> int:
        return self._result.params.n_iter

    @property
    def gradient_norm(self) -> float | None:
        """Max-abs gradient reported by the engine, if available."""
        return self._result.params.gradient_norm

    @property
    def fitted_values(self) -> NDArray[np.floating[Any]]:
        return self._design.X @ self.coefficients

    @property
    def residuals(self) -> NDArray[np.floating[Any]]:
        return self._design.y - self.fitted_values

    @property
    def n_nonzero(self) -> int:
        """Number of penalized coefficients not shrunk to zero (|b| > 1e-8)."""
        penalized = np.array([k != PENALTY_NONE for k in self._penalty.kinds], dtype=bool)
        return int(np.sum(np.abs(self.coefficients[penalized]) > 1e-8))

    @property
    def penalty(self) -> PenaltySpecification:
        return self._penalty

    @property
    def initial_hessian(self) -> NDArray[np.floating[Any]] | None:
        """Warm-start Hessian handed to the engine, or None."""
        return self._initial_hessian

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Generate a plain-text summary."""
        lambdas = self._penalty.lambda_vector()
        lines = [
            "Penalized Linear Regression Results",
            "=" * 60,
            f"Observations: {self._design.n}",
            f"Parameters: {self._design.p}",
            f"Loss: {self.loss_value:.6f}",
            f"Penalty: {self.penalty_value:.6f}",
            f"Objective: {self.objective_value:.6f}",
            f"Converged: {self.converged} ({self.n_iter} iterations)",
            "",
            "Coefficients:",
            "-" * 60,
            f"{'Index':<8} {'Estimate':>14} {'Penalty':>10} {'Lambda':>12}",
            "-" * 60,
        ]

        for i, (coef, kind, lam) in enumerate(zip(
            self.coefficients, self._penalty.kinds, lambdas
        )):
            lam_str = f"{lam:12.6f}" if kind != PENALTY_NONE else "          NA"
            lines.append(f"  β[{i}]: {coef:14.6f} {kind:>10} {lam_str}")

        lines.append("-" * 60)
        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")
        for w in self.warnings:
            lines.append(f"Warning: {w}")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"PenalizedSolution(n={self._design.n}, p={self._design.p}, "
            f"objective={self.objective_value:.6g}, converged={self.converged})"
        )
