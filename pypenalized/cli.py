"""
Command-line entry point.

    pypenalized X_FILE Y_FILE LAMBDA OPTIMIZER

Fits y ~ 1 + X with an unpenalized intercept and a lasso penalty of
strength LAMBDA on every predictor, using the 'glmnet' or 'ista' engine,
and prints the final parameter values (intercept first).

Exit status: 0 on success, 1 on unreadable or malformed input, 2 on
invalid arguments (including an unknown optimizer).
"""

import argparse
import sys

import numpy as np

from pypenalized.core.compute.tolerances import (
    DEFAULT_HESSIAN_STEP,
    DEFAULT_TOL,
    DEFAULT_MAX_ITER,
)
from pypenalized.core.datasource import read_matrix
from pypenalized.core.exceptions import PyPenalizedError, ValidationError
from pypenalized.regression import fit, OPTIMIZERS


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='pypenalized',
        description='Lasso-penalized linear regression with an unpenalized intercept',
    )
    parser.add_argument('x_file', help='Design matrix file (one row per observation)')
    parser.add_argument('y_file', help='Response file (exactly one column)')
    parser.add_argument('lam', type=float, metavar='lambda', help='Lasso penalty strength')
    parser.add_argument('optimizer', choices=OPTIMIZERS, help='Optimization engine')
    parser.add_argument(
        '--max-iter', type=int, default=DEFAULT_MAX_ITER,
        help=f'Maximum optimizer iterations (default: {DEFAULT_MAX_ITER})'
    )
    parser.add_argument(
        '--tol', type=float, default=DEFAULT_TOL,
        help=f'Optimizer tolerance (default: {DEFAULT_TOL})'
    )
    parser.add_argument(
        '--hessian-step', type=float, default=DEFAULT_HESSIAN_STEP,
        help=f'Step of the warm-start Hessian stencil (default: {DEFAULT_HESSIAN_STEP})'
    )
    parser.add_argument(
        '--summary', action='store_true',
        help='Print a full summary instead of the parameter values only'
    )
    parser.add_argument(
        '--verbose', '-v', action='store_true',
        help='Print progress information'
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    print(f"X: {args.x_file}")
    print(f"y: {args.y_file}")
    print(f"lambda: {args.lam}")
    print(f"optimizer: {args.optimizer}")

    try:
        X = read_matrix(args.x_file)
        y = read_matrix(args.y_file)
        if y.shape[1] != 1:
            raise ValidationError(
                f"y should only have one column, got {y.shape[1]}"
            )

        result = fit(
            X,
            y[:, 0],
            lam=args.lam,
            optimizer=args.optimizer,
            intercept=True,
            hessian_step=args.hessian_step,
            tol=args.tol,
            max_iter=args.max_iter,
            verbose=args.verbose,
        )
    except (PyPenalizedError, OSError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    if args.summary:
        print(result.summary())
    else:
        print(np.array2string(result.coefficients, precision=6, max_line_width=120))
    return 0


if __name__ == '__main__':
    sys.exit(main())
