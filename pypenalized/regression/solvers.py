"""
Solver dispatch for penalized regression.

This module provides the fit() function (public API) and engine selection.
"""

import warnings
from typing import Literal

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pypenalized.core.capabilities import CAPABILITY_HESSIAN
from pypenalized.core.compute.timing import timed
from pypenalized.core.compute.tolerances import (
    DEFAULT_HESSIAN_STEP,
    DEFAULT_TOL,
    DEFAULT_MAX_ITER,
)
from pypenalized.core.exceptions import ShapeMismatchError
from pypenalized.regression.design import Design
from pypenalized.regression.model import LeastSquaresModel
from pypenalized.regression.penalty import PenaltySpecification
from pypenalized.regression.solution import PenalizedSolution
from pypenalized.regression.backends._common import check_start
from pypenalized.regression.backends.trust_region import CPUTrustRegionBackend
from pypenalized.regression.backends.lbfgsb import CPULBFGSBackend


# Type alias for engine selection
OptimizerChoice = Literal['glmnet', 'ista']

OPTIMIZERS = ('glmnet', 'ista')


def fit(
    X: ArrayLike,
    y: ArrayLike,
    *,
    lam: float = 0.0,
    penalty: PenaltySpecification | None = None,
    optimizer: OptimizerChoice = 'glmnet',
    start: ArrayLike | None = None,
    intercept: bool = True,
    initial_hessian: ArrayLike | Literal['approximate'] | None = 'approximate',
    hessian_step: float = DEFAULT_HESSIAN_STEP,
    tol: float = DEFAULT_TOL,
    max_iter: int = DEFAULT_MAX_ITER,
    verbose: bool = False,
) -> PenalizedSolution:
    """
    Fit a penalized least-squares regression.

    Minimizes
        ||y - Xb||² / (2N) + Σ_lasso λ_i |b_i| + Σ_ridge λ_i b_i²

    This is the primary public API. All input validation, engine selection,
    warm-start computation and result wrapping happens here.

    Args:
        X: Predictors (n x k). Any array-like.
        y: Response (n,). Any array-like.
        lam: Lasso strength, used only when ``penalty`` is None.
        penalty: Explicit per-parameter penalty. Must have one kind per
            column of the final design matrix (intercept included).
            If None, the intercept (when present) is unpenalized and every
            other parameter gets lasso(lam).
        optimizer: External engine to use:
            - 'glmnet': second-order engine, consumes a warm-start Hessian
            - 'ista': first-order engine, gradients only
        start: Starting parameters (p,). Defaults to zeros.
        intercept: If True, prepend a column of ones to X.
        initial_hessian: Warm start for the 'glmnet' engine:
            - 'approximate': 5-point numerical Hessian at ``start``
            - array (p, p): used as given
            - None: no warm start
            Ignored by 'ista'.
        hessian_step: Stencil step for 'approximate'.
        tol: Optimizer tolerance.
        max_iter: Optimizer iteration limit.
        verbose: Print progress information.

    Returns:
        PenalizedSolution with coefficients, objective and diagnostics

    Raises:
        ValueError: If ``optimizer`` is not a known engine
        ValidationError: If inputs are invalid
        ShapeMismatchError: If start, penalty or Hessian do not match X
        InvalidStepSizeError: If hessian_step <= 0

    Example:
        >>> import numpy as np
        >>> from pypenalized.regression import fit
        >>>
        >>> X = np.random.randn(100, 3)
        >>> y = 1.0 + X @ [2.0, 0.0, -1.0] + np.random.randn(100) * 0.1
        >>>
        >>> result = fit(X, y, lam=0.05, optimizer='glmnet')
        >>> print(result.coefficients)
        >>> print(result.summary())
    """
    # === Select Engine ===
    # Unknown tokens are a configuration error; fail before any work
    backend_impl = _get_backend(optimizer)

    # === Construct Design and Model ===
    # This is the boundary - validate here, trust everywhere else
    design = Design.from_arrays(X, y, intercept=intercept)
    model = LeastSquaresModel(design.y, design.X)

    if start is None:
        b0 = np.zeros(design.p)
    else:
        b0 = check_start(start, design.p)

    if penalty is None:
        penalty = PenaltySpecification.lasso(
            design.p, lam, unpenalized=(0,) if intercept else (),
        )
    elif penalty.n_parameters != design.p:
        raise ShapeMismatchError(
            f"penalty: {penalty.n_parameters} kinds for a design matrix with "
            f"{design.p} columns",
            expected=design.p,
            actual=penalty.n_parameters,
        )

    if verbose:
        print(f"Penalized regression: {design.n} observations, {design.p} parameters, "
              f"optimizer={optimizer}")

    # === Warm Start ===
    hessian = None
    warm_start_timing: dict[str, float] = {}
    if optimizer == 'glmnet':
        with timed() as timer:
            hessian = _resolve_initial_hessian(initial_hessian, model, b0, hessian_step)
        warm_start_timing['warm_start'] = timer.result()['total_seconds']

    # === Solve ===
    if verbose:
        print(f"Backend: {backend_impl.name}")

    if optimizer == 'glmnet':
        result = backend_impl.solve(
            model, b0, penalty,
            initial_hessian=hessian, tol=tol, max_iter=max_iter,
        )
    else:
        result = backend_impl.solve(model, b0, penalty, tol=tol, max_iter=max_iter)

    if result.timing is not None:
        result.timing.update(warm_start_timing)

    if not result.params.converged:
        warnings.warn(
            f"Optimizer '{optimizer}' did not converge after "
            f"{result.params.n_iter} iterations. Message: {result.info.get('message')}",
            RuntimeWarning,
            stacklevel=2,
        )

    if verbose:
        print(f"Converged: {result.params.converged} "
              f"(iterations: {result.params.n_iter}, "
              f"objective: {result.params.objective_value:.6f})")

    return PenalizedSolution(
        _result=result,
        _design=design,
        _penalty=penalty,
        _initial_hessian=hessian,
    )


def _resolve_initial_hessian(
    initial_hessian,
    model: LeastSquaresModel,
    start: NDArray,
    hessian_step: float,
) -> NDArray | None:
    """Turn the ``initial_hessian`` argument into a matrix or None."""
    if initial_hessian is None:
        return None
    if isinstance(initial_hessian, str):
        if initial_hessian != 'approximate':
            raise ValueError(
                f"Unknown initial_hessian: {initial_hessian!r}. "
                f"Use 'approximate', an array, or None."
            )
        if not model.supports(CAPABILITY_HESSIAN):
            return None
        return model.approximate_hessian(start, hessian_step)
    return np.asarray(initial_hessian, dtype=np.float64)


def _get_backend(choice: OptimizerChoice):
    """
    Select and instantiate the engine binding for an optimizer token.

    Raises:
        ValueError: If unknown optimizer specified
    """
    if choice == 'glmnet':
        return CPUTrustRegionBackend()

    elif choice == 'ista':
        return CPULBFGSBackend()

    else:
        raise ValueError(
            f"Unknown optimizer: {choice!r}. Available are 'glmnet' or 'ista'."
        )
