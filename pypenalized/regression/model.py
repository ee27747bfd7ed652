"""
Least-squares model adapter.

LeastSquaresModel binds one (y, X) pair for the lifetime of a fit and
exposes the ScorableModel contract that the optimization engines call.

Orientation convention:
    Inside this package a parameter vector is always a 1D array of shape
    (P,). Engines that work with row vectors (1, P) or column vectors
    (P, 1) may pass those; the adapter flattens them on the way in and
    gives the gradient back in the same orientation it received. This is
    the only place orientation is handled.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pypenalized.core.capabilities import (
    CAPABILITY_LOSS,
    CAPABILITY_GRADIENT,
    CAPABILITY_HESSIAN,
)
from pypenalized.core.compute.tolerances import DEFAULT_HESSIAN_STEP
from pypenalized.core.exceptions import ShapeMismatchError
from pypenalized.core.validation import check_array
from pypenalized.regression._least_squares import (
    sum_squared_error,
    sum_squared_error_gradient,
    approximate_hessian,
)


class LeastSquaresModel:
    """
    Ordinary least squares with the glmnet 1/(2N) loss scaling.

    Holds private read-only copies of y and X. Evaluations never mutate
    the model or the caller's parameters, so an engine may call them
    repeatedly, in any order, or from several threads at once.

    Example:
        >>> model = LeastSquaresModel(design.y, design.X)
        >>> model.evaluate_loss(np.zeros(model.n_parameters))
        >>> model.evaluate_gradient(np.zeros((1, model.n_parameters)))  # row in, row out
    """

    _CAPABILITIES = frozenset({CAPABILITY_LOSS, CAPABILITY_GRADIENT, CAPABILITY_HESSIAN})

    def __init__(self, y: ArrayLike, X: ArrayLike):
        y_arr = check_array(y, 'y').astype(np.float64)
        X_arr = check_array(X, 'X').astype(np.float64)

        if X_arr.ndim != 2:
            raise ShapeMismatchError(
                f"X: expected 2D design matrix, got shape {X_arr.shape}",
                expected=2,
                actual=X_arr.ndim,
            )
        if X_arr.shape[0] == 0:
            raise ShapeMismatchError(
                "X: expected at least one observation, got 0 rows",
                expected=1,
                actual=0,
            )
        if y_arr.ndim == 2 and y_arr.shape[1] == 1:
            y_arr = y_arr.ravel()
        if y_arr.ndim != 1 or y_arr.shape[0] != X_arr.shape[0]:
            raise ShapeMismatchError(
                f"y: expected shape ({X_arr.shape[0]},) to match X, got {y_arr.shape}",
                expected=(X_arr.shape[0],),
                actual=y_arr.shape,
            )

        y_arr.flags.writeable = False
        X_arr.flags.writeable = False
        self._y = y_arr
        self._X = X_arr

    # === Data ===

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        """Response (N,), read-only."""
        return self._y

    @property
    def X(self) -> NDArray[np.floating[Any]]:
        """Design matrix (N, P), read-only."""
        return self._X

    @property
    def n_observations(self) -> int:
        return self._X.shape[0]

    @property
    def n_parameters(self) -> int:
        return self._X.shape[1]

    def supports(self, capability: str) -> bool:
        """Check if this model supports a capability."""
        return capability in self._CAPABILITIES

    # === Engine contract ===

    def evaluate_loss(self, parameters: ArrayLike) -> float:
        """Loss ||y - Xb||² / (2N), whatever the orientation of ``parameters``."""
        b, _ = self._to_internal(parameters)
        return sum_squared_error(b, self._y, self._X)

    def evaluate_gradient(self, parameters: ArrayLike) -> NDArray[np.floating[Any]]:
        """Gradient of the loss, returned in the orientation of ``parameters``."""
        b, shape = self._to_internal(parameters)
        return sum_squared_error_gradient(b, self._y, self._X).reshape(shape)

    def approximate_hessian(
        self,
        parameters: ArrayLike,
        eps: float = DEFAULT_HESSIAN_STEP,
    ) -> NDArray[np.floating[Any]]:
        """Symmetric (P, P) 5-point approximation of the loss Hessian."""
        b, _ = self._to_internal(parameters)
        return approximate_hessian(b, self._y, self._X, eps)

    def _to_internal(self, parameters: ArrayLike) -> tuple[NDArray[np.floating[Any]], tuple[int, ...]]:
        """Flatten a (P,), (1, P) or (P, 1) vector; remember the caller's shape."""
        b = check_array(parameters, 'parameters')
        shape = b.shape
        if b.ndim == 2 and 1 in shape:
            b = b.reshape(-1)
        elif b.ndim != 1:
            raise ShapeMismatchError(
                f"parameters: expected a vector of length {self.n_parameters} "
                f"as (P,), (1, P) or (P, 1), got shape {shape}",
                expected=(self.n_parameters,),
                actual=shape,
            )
        return b.astype(np.float64, copy=True), shape

    def __repr__(self) -> str:
        return f"LeastSquaresModel(n={self.n_observations}, p={self.n_parameters})"
