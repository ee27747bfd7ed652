"""
Finite-difference derivatives of vector-valued functions.

The 5-point central stencil

    f'(x) ≈ (f(x - 2h) - 8 f(x - h) + 8 f(x + h) - f(x + 2h)) / (12 h)

is fourth-order accurate. Applied to an analytic gradient it yields a
Hessian approximation.
"""

from typing import Any, Callable

import numpy as np
from numpy.typing import NDArray

from pypenalized.core.validation import check_step_size

# (offset in units of h, weight) pairs of the stencil
_FIVE_POINT_STENCIL = ((-2.0, 1.0), (-1.0, -8.0), (1.0, 8.0), (2.0, -1.0))


def _shifted(x: NDArray, index: int, delta: float) -> NDArray:
    """Copy of x with entry ``index`` moved by ``delta``."""
    x_new = x.copy()
    x_new[index] += delta
    return x_new


def five_point_jacobian(
    func: Callable[[NDArray[np.floating[Any]]], NDArray[np.floating[Any]]],
    x: NDArray[np.floating[Any]],
    eps: float,
) -> NDArray[np.floating[Any]]:
    """
    Jacobian of ``func`` at ``x`` by the 5-point central stencil.

    Column p holds the derivative of ``func`` with respect to ``x[p]``.
    Every perturbation is evaluated on an independent copy of ``x``, so
    the caller's array is never modified.

    Args:
        func: Maps a 1D array of length k to a 1D array of length m.
        x: Point of evaluation, 1D array of length k.
        eps: Step size, positive.

    Returns:
        (m, k) array.

    Raises:
        InvalidStepSizeError: If eps is not a positive finite number.
    """
    check_step_size(eps, 'eps')
    x = np.asarray(x, dtype=np.float64)

    columns = []
    for p in range(x.shape[0]):
        column = sum(
            weight * np.asarray(func(_shifted(x, p, offset * eps)), dtype=np.float64)
            for offset, weight in _FIVE_POINT_STENCIL
        )
        columns.append(column / (12.0 * eps))

    if not columns:
        return np.zeros((0, 0))
    return np.column_stack(columns)


def symmetrize(matrix: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    """Return (A + A') / 2; the result is exactly symmetric."""
    return (matrix + matrix.T) / 2.0
