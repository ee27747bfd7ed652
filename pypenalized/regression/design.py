"""
Regression Design.

Design holds the (X, y) pair a fit is run on. It is where the intercept
column gets prepended, and the only place the arrays are validated;
everything downstream trusts it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pypenalized.core.validation import (
    check_array,
    check_finite,
    check_2d,
    check_1d,
    check_consistent_length,
    check_min_samples,
)


@dataclass(frozen=True)
class Design:
    """
    Regression design matrix specification.

    Immutable after construction; the stored arrays are read-only.

    Construction:
        Design.from_arrays(X, y)                   # prepends a ones column
        Design.from_arrays(X, y, intercept=False)  # X used as given
    """
    _X: NDArray[np.floating[Any]]
    _y: NDArray[np.floating[Any]]
    _n: int
    _p: int
    _has_intercept: bool

    @classmethod
    def from_arrays(cls, X: ArrayLike, y: ArrayLike, *, intercept: bool = True) -> Design:
        """
        Build Design directly from arrays.

        Args:
            X: Predictors (n x k), or (n,) for a single predictor.
            y: Response (n,) or (n, 1).
            intercept: If True, a column of ones is inserted as column 0.
        """
        X = check_array(X, 'X').astype(np.float64, copy=False)
        y = check_array(y, 'y').astype(np.float64, copy=False)
        return cls._build(X, y, intercept=intercept)

    @classmethod
    def _build(cls, X: NDArray, y: NDArray, *, intercept: bool) -> Design:
        """Internal builder with validation."""
        # Ensure correct shapes
        if X.ndim == 1:
            X = X.reshape(-1, 1)
        if y.ndim == 2 and y.shape[1] == 1:
            y = y.ravel()

        # Validate
        check_2d(X, 'X')
        check_1d(y, 'y')
        check_finite(X, 'X')
        check_finite(y, 'y')
        check_consistent_length(X, y, names=('X', 'y'))
        check_min_samples(X, 1, 'X')

        if intercept:
            X = np.column_stack([np.ones(X.shape[0]), X])
        else:
            X = X.copy()
        y = y.copy()
        X.flags.writeable = False
        y.flags.writeable = False

        n, p = X.shape
        return cls(_X=X, _y=y, _n=n, _p=p, _has_intercept=intercept)

    # === Properties ===

    @property
    def X(self) -> NDArray[np.floating[Any]]:
        """Design matrix (n x p), intercept column included."""
        return self._X

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        """Response vector (n,)."""
        return self._y

    @property
    def n(self) -> int:
        """Number of observations."""
        return self._n

    @property
    def p(self) -> int:
        """Number of parameters (columns of X)."""
        return self._p

    @property
    def has_intercept(self) -> bool:
        """Whether column 0 was added as an intercept."""
        return self._has_intercept
