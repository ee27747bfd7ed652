"""
Shared compute infrastructure for pypenalized.

IMPORTANT: This is NOT where engine bindings live. Those go in
regression/backends/. This module contains shared NUMERIC infrastructure.

Submodules:
    differentiation: Finite-difference Jacobians and symmetrization
    timing: Execution timing utilities
    tolerances: Numerical defaults and tolerance tiers
"""

from pypenalized.core.compute.differentiation import five_point_jacobian, symmetrize
from pypenalized.core.compute.timing import Timer, timed

__all__ = [
    # Finite differences
    "five_point_jacobian",
    "symmetrize",
    # Timing
    "Timer",
    "timed",
]
