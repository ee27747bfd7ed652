"""
First-order engine binding ('ista' slot).

Hands the model's loss and gradient to scipy's L-BFGS-B on the
split-variable form of the penalized objective. Uses gradients only; a
warm-start Hessian is not consumed.
"""

from typing import Any

from numpy.typing import ArrayLike
from scipy.optimize import minimize

from pypenalized.core.result import Result
from pypenalized.core.compute.timing import Timer
from pypenalized.core.compute.tolerances import DEFAULT_TOL, DEFAULT_MAX_ITER
from pypenalized.core.protocols import ScorableModel
from pypenalized.regression.penalty import PenaltySpecification
from pypenalized.regression.solution import PenalizedParams
from pypenalized.regression.backends._common import SplitObjective, check_start


class CPULBFGSBackend:
    """
    CPU backend using bound-constrained L-BFGS.

    Implements the Backend protocol for ScorableModel -> PenalizedParams.
    """

    @property
    def name(self) -> str:
        return 'cpu_lbfgsb'

    def solve(
        self,
        model: ScorableModel,
        start: ArrayLike,
        penalty: PenaltySpecification,
        *,
        tol: float = DEFAULT_TOL,
        max_iter: int = DEFAULT_MAX_ITER,
    ) -> Result[PenalizedParams]:
        """
        Minimize loss + penalty.

        Args:
            model: Any ScorableModel
            start: Starting parameters (P,)
            penalty: One kind per model parameter
            tol: Gradient and relative objective tolerance
            max_iter: Maximum L-BFGS-B iterations

        Returns:
            Result containing PenalizedParams
        """
        timer = Timer()
        timer.start()
        warnings_list = []

        with timer.section('setup'):
            b0 = check_start(start, model.n_parameters)
            objective = SplitObjective(model, penalty)
            z0 = objective.from_parameters(b0)

        with timer.section('optimization'):
            opt_result = minimize(
                objective.value,
                z0,
                jac=objective.gradient,
                method='L-BFGS-B',
                bounds=objective.bounds(),
                options={
                    'maxiter': max_iter,
                    'gtol': tol,
                    'ftol': tol,
                },
            )

        if not opt_result.success:
            msg = getattr(opt_result, 'message', 'Unknown convergence failure')
            warnings_list.append(f"Optimization did not converge: {msg}")

        params = objective.build_params(
            opt_result.x,
            n_iter=getattr(opt_result, 'nit', 0),
            converged=opt_result.success,
            gradient=getattr(opt_result, 'jac', None),
        )

        timer.stop()

        info: dict[str, Any] = {
            'method': 'L-BFGS-B',
            'engine': 'ista',
            'split_objective_value': float(opt_result.fun),
            'n_function_evals': getattr(opt_result, 'nfev', 0),
            'n_gradient_evals': getattr(opt_result, 'njev', 0),
            'message': str(getattr(opt_result, 'message', '')),
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
