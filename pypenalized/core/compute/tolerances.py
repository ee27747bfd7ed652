"""
Numerical defaults and tolerance tiers.

Defaults used by fit() and the command line, plus the precision we expect
when an analytic derivative is compared against a finite-difference one:
- ANALYTIC: closed-form quantities, machine precision
- FIVE_POINT: the 5-point stencil on an analytic gradient
- TWO_POINT: a two-point central difference on the loss

Used by the engine bindings and by the test suite.
"""

from dataclasses import dataclass


# Step of the Hessian stencil used for warm starts
DEFAULT_HESSIAN_STEP = 1e-7

# Gradient / step tolerance handed to the external optimizer
DEFAULT_TOL = 1e-10

DEFAULT_MAX_ITER = 1000


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


ANALYTIC = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='analytic',
    description='Closed-form results in double precision',
)

# Truncation error vanishes for a linear gradient; what is left is
# rounding, roughly machine epsilon * |g| / step.
FIVE_POINT = ToleranceTier(
    rtol=1e-5,
    atol=1e-5,
    name='five_point',
    description='5-point central difference of an analytic gradient',
)

TWO_POINT = ToleranceTier(
    rtol=1e-4,
    atol=1e-6,
    name='two_point',
    description='Two-point central difference of the loss',
)
