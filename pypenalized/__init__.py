"""
pypenalized: least-squares models for external penalized optimizers.

Provides the loss, gradient and numerical Hessian of ordinary least
squares behind a small model contract, and binds that contract to
scipy.optimize for lasso / ridge fits.

Submodules:
    regression: LeastSquaresModel, PenaltySpecification, fit()
    core: protocols, exceptions, validation, finite differences
"""

__version__ = "0.1.0"

from pypenalized import regression

__all__ = [
    "__version__",
    "regression",
]
