"""
Least-squares loss, gradient and numerical Hessian.

All three functions use the scaling of glmnet and related packages,

    loss(b) = ||y - Xb||² / (2N)

so that penalty strengths are comparable across sample sizes. The
gradient of that loss is

    ∇loss(b) = (-X'y + X'Xb) / N = X'(Xb - y) / N

which is the same thing as (-2X'y + 2X'Xb) scaled by 1/(2N).

Conventions:
    b: parameter vector, 1D, length P
    y: response, 1D, length N
    X: design matrix, 2D, N x P

Inputs of any other shape raise ShapeMismatchError; nothing is reshaped
here. Orientation handling belongs to LeastSquaresModel.
"""

from typing import Any

import numpy as np
from numpy.typing import NDArray

from pypenalized.core.exceptions import ShapeMismatchError
from pypenalized.core.validation import check_array
from pypenalized.core.compute.differentiation import five_point_jacobian, symmetrize


def _check_shapes(b: NDArray, y: NDArray, X: NDArray) -> None:
    if X.ndim != 2:
        raise ShapeMismatchError(
            f"X: expected 2D design matrix, got shape {X.shape}",
            expected=2,
            actual=X.ndim,
        )
    n, p = X.shape
    if n == 0:
        raise ShapeMismatchError(
            "X: expected at least one observation, got 0 rows",
            expected=1,
            actual=0,
        )
    if b.ndim != 1 or b.shape[0] != p:
        raise ShapeMismatchError(
            f"parameters: expected shape ({p},) to match X with {p} columns, "
            f"got {b.shape}",
            expected=(p,),
            actual=b.shape,
        )
    if y.ndim != 1 or y.shape[0] != n:
        raise ShapeMismatchError(
            f"y: expected shape ({n},) to match X with {n} rows, got {y.shape}",
            expected=(n,),
            actual=y.shape,
        )


def _as_float(b: NDArray, y: NDArray, X: NDArray) -> tuple[NDArray, NDArray, NDArray]:
    return tuple(
        check_array(array, name).astype(np.float64, copy=False)
        for array, name in ((b, 'parameters'), (y, 'y'), (X, 'X'))
    )


def sum_squared_error(b: NDArray, y: NDArray, X: NDArray) -> float:
    """
    Scaled sum of squared errors ||y - Xb||² / (2N).

    Args:
        b: Parameters (P,)
        y: Response (N,)
        X: Design matrix (N, P)

    Returns:
        Non-negative loss value.

    Raises:
        ShapeMismatchError: If the shapes of b, y and X are inconsistent.
    """
    b, y, X = _as_float(b, y, X)
    _check_shapes(b, y, X)

    residuals = y - X @ b
    return float(residuals @ residuals) / (2.0 * y.shape[0])


def sum_squared_error_gradient(b: NDArray, y: NDArray, X: NDArray) -> NDArray[np.floating[Any]]:
    """
    Gradient of sum_squared_error, (-X'y + X'Xb) / N.

    Entry i is the derivative with respect to b[i].

    Raises:
        ShapeMismatchError: If the shapes of b, y and X are inconsistent.
    """
    b, y, X = _as_float(b, y, X)
    _check_shapes(b, y, X)

    return X.T @ (X @ b - y) / y.shape[0]


def approximate_hessian(
    b: NDArray,
    y: NDArray,
    X: NDArray,
    eps: float,
) -> NDArray[np.floating[Any]]:
    """
    Symmetric numerical Hessian of sum_squared_error at b.

    Applies the 5-point central stencil to the analytic gradient, one
    parameter at a time, then symmetrizes as (H + H') / 2 to remove the
    rounding asymmetry of the two-sided differences. The exact Hessian
    of this loss is X'X / N; the approximation is meant as a warm start
    for second-order optimizers. Cost is 4P gradient evaluations.

    Args:
        b: Parameters (P,), not modified
        y: Response (N,)
        X: Design matrix (N, P)
        eps: Stencil step, positive

    Returns:
        (P, P) symmetric array.

    Raises:
        ShapeMismatchError: If the shapes of b, y and X are inconsistent.
        InvalidStepSizeError: If eps <= 0 or not finite.
    """
    b, y, X = _as_float(b, y, X)
    _check_shapes(b, y, X)

    hessian = five_point_jacobian(
        lambda params: sum_squared_error_gradient(params, y, X),
        b,
        eps,
    )
    return symmetrize(hessian)
