"""
Penalized least-squares regression.

The model side (loss, gradient, numerical Hessian, LeastSquaresModel)
is implemented here; the penalized optimization itself is delegated to
scipy.optimize through the bindings in regression.backends.

Public API:
    fit(X, y, ...) -> PenalizedSolution

Example:
    >>> from pypenalized.regression import fit
    >>> result = fit(X, y, lam=0.1, optimizer='ista')
    >>> print(result.coefficients)
    >>> print(result.summary())
"""

from pypenalized.regression._least_squares import (
    sum_squared_error,
    sum_squared_error_gradient,
    approximate_hessian,
)
from pypenalized.regression.design import Design
from pypenalized.regression.model import LeastSquaresModel
from pypenalized.regression.penalty import PenaltySpecification
from pypenalized.regression.solution import PenalizedSolution, PenalizedParams
from pypenalized.regression.solvers import fit, OPTIMIZERS

__all__ = [
    "fit",
    "OPTIMIZERS",
    "Design",
    "LeastSquaresModel",
    "PenaltySpecification",
    "PenalizedSolution",
    "PenalizedParams",
    "sum_squared_error",
    "sum_squared_error_gradient",
    "approximate_hessian",
]
