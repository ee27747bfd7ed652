"""
Capability string constants for pypenalized.

This module is the SINGLE SOURCE OF TRUTH for capability strings.
Import from here, never use raw strings.

Usage:
    from pypenalized.core.capabilities import CAPABILITY_HESSIAN

    if model.supports(CAPABILITY_HESSIAN):
        H = model.approximate_hessian(start)
"""

# Model returns a scalar loss for a parameter vector
CAPABILITY_LOSS = 'loss'

# Model returns a gradient aligned index-for-index with the parameters
CAPABILITY_GRADIENT = 'gradient'

# Model can produce a symmetric curvature matrix for warm starts
CAPABILITY_HESSIAN = 'hessian'

# All capabilities as a frozenset for validation
ALL_CAPABILITIES = frozenset({
    CAPABILITY_LOSS,
    CAPABILITY_GRADIENT,
    CAPABILITY_HESSIAN,
})

__all__ = [
    'CAPABILITY_LOSS',
    'CAPABILITY_GRADIENT',
    'CAPABILITY_HESSIAN',
    'ALL_CAPABILITIES',
]
