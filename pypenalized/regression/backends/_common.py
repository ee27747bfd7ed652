"""
Shared plumbing for the scipy engine bindings.

scipy's bound-constrained methods need a smooth objective. A lasso term
λ|b| is not smooth at 0, so each lasso coordinate is split into two
non-negative parts,

    b_i = w_i - v_i,   w_i >= 0,   v_i >= 0,

and λ|b_i| becomes λ(w_i + v_i), which equals λ|b_i| at any optimum.
Unpenalized, ridge and zero-strength lasso coordinates are not split.
The optimizer works on z = [w, v] of length P + L (L = number of split
coordinates); the model only ever sees b = A z with A = [I, -E_L].
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray
from scipy.optimize import Bounds

from pypenalized.core.exceptions import ShapeMismatchError
from pypenalized.core.protocols import ScorableModel
from pypenalized.core.validation import check_array, check_finite, check_length
from pypenalized.regression.penalty import PenaltySpecification, PENALTY_LASSO, PENALTY_RIDGE
from pypenalized.regression.solution import PenalizedParams


class SplitObjective:
    """
    Penalized objective over split variables z = [w, v].

    Wraps a ScorableModel; holds no state that changes between calls.
    """

    def __init__(self, model: ScorableModel, penalty: PenaltySpecification):
        if penalty.n_parameters != model.n_parameters:
            raise ShapeMismatchError(
                f"penalty: {penalty.n_parameters} kinds for a model with "
                f"{model.n_parameters} parameters",
                expected=model.n_parameters,
                actual=penalty.n_parameters,
            )
        self._model = model
        self._penalty = penalty
        self._p = model.n_parameters

        lam = penalty.lambda_vector()
        lasso = penalty.indices(PENALTY_LASSO)
        self._lasso = lasso[lam[lasso] > 0.0]
        self._ridge = penalty.indices(PENALTY_RIDGE)
        self._lam_lasso = lam[self._lasso]
        self._lam_ridge = lam[self._ridge]

        # b = A z
        n_lasso = len(self._lasso)
        self._A = np.zeros((self._p, self._p + n_lasso))
        self._A[:, :self._p] = np.eye(self._p)
        self._A[self._lasso, self._p + np.arange(n_lasso)] = -1.0

    @property
    def n_variables(self) -> int:
        return self._A.shape[1]

    def bounds(self) -> Bounds | None:
        if len(self._lasso) == 0:
            return None
        lower = np.full(self.n_variables, -np.inf)
        lower[self._lasso] = 0.0
        lower[self._p:] = 0.0
        return Bounds(lower, np.full(self.n_variables, np.inf))

    def to_parameters(self, z: NDArray) -> NDArray[np.floating[Any]]:
        b = z[:self._p].copy()
        b[self._lasso] -= z[self._p:]
        return b

    def from_parameters(self, b: NDArray, margin: float = 0.0) -> NDArray[np.floating[Any]]:
        """
        Split b into z. ``margin`` is added to both halves of every lasso
        coordinate, which keeps z strictly inside the bounds without
        changing b.
        """
        b_lasso = b[self._lasso]
        w = b.astype(np.float64, copy=True)
        w[self._lasso] = np.maximum(b_lasso, 0.0) + margin
        v = np.maximum(-b_lasso, 0.0) + margin
        return np.concatenate([w, v])

    def value(self, z: NDArray) -> float:
        b = self.to_parameters(z)
        w_lasso = z[self._lasso]
        v = z[self._p:]
        return (
            self._model.evaluate_loss(b)
            + float(np.sum(self._lam_lasso * (w_lasso + v)))
            + float(np.sum(self._lam_ridge * b[self._ridge] ** 2))
        )

    def gradient(self, z: NDArray) -> NDArray[np.floating[Any]]:
        b = self.to_parameters(z)
        g = np.asarray(self._model.evaluate_gradient(b), dtype=np.float64).reshape(-1)
        g[self._ridge] += 2.0 * self._lam_ridge * b[self._ridge]

        grad_w = g.copy()
        grad_w[self._lasso] += self._lam_lasso
        grad_v = -g[self._lasso] + self._lam_lasso
        return np.concatenate([grad_w, grad_v])

    def lift_hessian(self, hessian: NDArray) -> NDArray[np.floating[Any]]:
        """Map a (P, P) Hessian in b to the (P + L, P + L) Hessian in z."""
        H = np.array(hessian, dtype=np.float64)
        H[self._ridge, self._ridge] += 2.0 * self._lam_ridge
        return self._A.T @ H @ self._A

    def _zero_inactive(self, b: NDArray) -> NDArray[np.floating[Any]]:
        """
        Set split coordinates to exactly 0 where 0 is optimal.

        With the other coordinates held at b, 0 minimizes over b_i iff
        |∂loss/∂b_i| <= λ_i at b_i = 0. Interior-point engines stop a
        barrier width away from the bound, so their zeros are only small.
        """
        inactive = []
        for i, lam in zip(self._lasso, self._lam_lasso):
            if b[i] == 0.0:
                continue
            trial = b.copy()
            trial[i] = 0.0
            g = np.asarray(self._model.evaluate_gradient(trial), dtype=np.float64).reshape(-1)
            if abs(g[i]) <= lam:
                inactive.append(i)
        b = b.copy()
        b[inactive] = 0.0
        return b

    def build_params(
        self,
        z: NDArray,
        *,
        n_iter: int,
        converged: bool,
        gradient: NDArray | None,
    ) -> PenalizedParams:
        b = self._zero_inactive(self.to_parameters(z))
        loss = self._model.evaluate_loss(b)
        penalty_value = self._penalty.penalty_value(b)
        grad_norm = None
        if gradient is not None:
            grad_norm = float(np.max(np.abs(gradient))) if np.size(gradient) else 0.0
        return PenalizedParams(
            coefficients=b,
            objective_value=loss + penalty_value,
            loss_value=loss,
            penalty_value=penalty_value,
            n_iter=int(n_iter),
            converged=bool(converged),
            gradient_norm=grad_norm,
        )


def check_start(start: Any, n_parameters: int) -> NDArray[np.floating[Any]]:
    """Validate a (P,), (1, P) or (P, 1) starting vector; return a fresh 1D copy."""
    b = check_array(start, 'start')
    if b.ndim == 2 and 1 in b.shape:
        b = b.reshape(-1)
    if b.ndim != 1:
        raise ShapeMismatchError(
            f"start: expected a vector of length {n_parameters} as (P,), (1, P) "
            f"or (P, 1), got shape {b.shape}",
            expected=(n_parameters,),
            actual=b.shape,
        )
    b = b.astype(np.float64)
    check_length(b, n_parameters, 'start')
    check_finite(b, 'start')
    return b
