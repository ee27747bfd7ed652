"""
Optimization engine bindings.

Available backends:
    CPUTrustRegionBackend: second-order, takes a warm-start Hessian ('glmnet')
    CPULBFGSBackend: first-order, gradients only ('ista')
"""

from pypenalized.regression.backends.trust_region import CPUTrustRegionBackend
from pypenalized.regression.backends.lbfgsb import CPULBFGSBackend

__all__ = [
    "CPUTrustRegionBackend",
    "CPULBFGSBackend",
]
