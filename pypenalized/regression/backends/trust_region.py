"""
Second-order engine binding ('glmnet' slot).

Hands the model's loss and gradient to scipy's trust-constr method on the
split-variable form of the penalized objective. A warm-start Hessian, if
given, is lifted to the split variables and used as the (constant)
curvature model; for least squares that curvature is exact. Without one,
scipy's BFGS update builds the curvature from gradients.
"""

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy.optimize import minimize, BFGS

from pypenalized.core.result import Result
from pypenalized.core.compute.timing import Timer
from pypenalized.core.compute.tolerances import DEFAULT_TOL, DEFAULT_MAX_ITER
from pypenalized.core.exceptions import ShapeMismatchError
from pypenalized.core.protocols import ScorableModel
from pypenalized.core.validation import check_array, check_finite
from pypenalized.regression.penalty import PenaltySpecification
from pypenalized.regression.solution import PenalizedParams
from pypenalized.regression.backends._common import SplitObjective, check_start

# Interior-point start offset for split lasso coordinates
_INTERIOR_MARGIN = 1e-4


class CPUTrustRegionBackend:
    """
    CPU backend using scipy's trust-region interior-point method.

    Implements the Backend protocol for ScorableModel -> PenalizedParams.
    """

    @property
    def name(self) -> str:
        return 'cpu_trust_constr'

    def solve(
        self,
        model: ScorableModel,
        start: ArrayLike,
        penalty: PenaltySpecification,
        *,
        initial_hessian: NDArray | None = None,
        tol: float = DEFAULT_TOL,
        max_iter: int = DEFAULT_MAX_ITER,
    ) -> Result[PenalizedParams]:
        """
        Minimize loss + penalty.

        Args:
            model: Any ScorableModel
            start: Starting parameters (P,)
            penalty: One kind per model parameter
            initial_hessian: Optional (P, P) warm-start curvature
            tol: Gradient and step tolerance
            max_iter: Maximum trust-constr iterations

        Returns:
            Result containing PenalizedParams

        Raises:
            ShapeMismatchError: If initial_hessian is not (P, P)
        """
        timer = Timer()
        timer.start()
        warnings_list = []

        with timer.section('setup'):
            b0 = check_start(start, model.n_parameters)
            objective = SplitObjective(model, penalty)
            z0 = objective.from_parameters(b0, margin=_INTERIOR_MARGIN)

            if initial_hessian is not None:
                H_b = _check_hessian(initial_hessian, model.n_parameters)
                H_z = objective.lift_hessian(H_b)
                hess = lambda z: H_z
            else:
                hess = BFGS()

        with timer.section('optimization'):
            opt_result = minimize(
                objective.value,
                z0,
                jac=objective.gradient,
                hess=hess,
                method='trust-constr',
                bounds=objective.bounds(),
                options={
                    'maxiter': max_iter,
                    'gtol': tol,
                    'xtol': tol,
                    'disp': False,
                },
            )

        if not opt_result.success:
            msg = getattr(opt_result, 'message', 'Unknown convergence failure')
            warnings_list.append(f"Optimization did not converge: {msg}")

        params = objective.build_params(
            opt_result.x,
            n_iter=getattr(opt_result, 'nit', 0),
            converged=opt_result.success,
            gradient=getattr(opt_result, 'grad', None),
        )

        timer.stop()

        info: dict[str, Any] = {
            'method': 'trust-constr',
            'engine': 'glmnet',
            'split_objective_value': float(opt_result.fun),
            'n_function_evals': getattr(opt_result, 'nfev', 0),
            'n_gradient_evals': getattr(opt_result, 'njev', 0),
            'message': str(getattr(opt_result, 'message', '')),
            'warm_start': initial_hessian is not None,
            'lambdas': penalty.lambda_vector(),
            'thetas': penalty.theta_vector(),
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )


def _check_hessian(hessian: ArrayLike, n_parameters: int) -> NDArray[np.floating[Any]]:
    H = check_array(hessian, 'initial_hessian').astype(np.float64)
    if H.shape != (n_parameters, n_parameters):
        raise ShapeMismatchError(
            f"initial_hessian: expected shape ({n_parameters}, {n_parameters}), "
            f"got {H.shape}",
            expected=(n_parameters, n_parameters),
            actual=H.shape,
        )
    check_finite(H, 'initial_hessian')
    return H
