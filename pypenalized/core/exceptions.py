"""
Exception hierarchy for pypenalized.

All exceptions inherit from PyPenalizedError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyPenalizedError(Exception):
    """Base exception for all pypenalized errors."""
    pass


class ValidationError(PyPenalizedError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions or
    when multiple arrays have inconsistent shapes.
    """
    pass


class ShapeMismatchError(DimensionError):
    """
    Parameters, response and design matrix are mutually inconsistent.

    Raised by the loss, gradient and Hessian functions when the parameter
    vector length differs from the number of design-matrix columns, or the
    response length differs from the number of design-matrix rows. Inputs
    are never truncated or padded to make them fit.

    Attributes:
        expected: The shape or length that was required
        actual: The shape or length that was received
    """

    def __init__(
        self,
        message: str,
        expected: tuple[int, ...] | int | None = None,
        actual: tuple[int, ...] | int | None = None,
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class InvalidStepSizeError(ValidationError):
    """
    Finite-difference step size is not a positive finite number.

    Attributes:
        step: The rejected step size
    """

    def __init__(self, message: str, step: float | None = None):
        super().__init__(message)
        self.step = step

